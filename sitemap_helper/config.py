# === FILE: sitemap_helper/config.py ===
"""
Loading and validation of the sitemap_helper configuration.
Pydantic describes the schema; files may be YAML or JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl

__all__ = ["RenderOptions", "CrawlerConfig", "load_config", "DEFAULT_CONFIG_PATH"]


class RenderOptions(BaseModel):
    """Browser window and wait budget for the headless renderer."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    window_width: int = Field(1920, gt=0)
    window_height: int = Field(1080, gt=0)
    timeout_seconds: float = Field(60.0, gt=0, description="Wait for the page-interactive signal.")


class CrawlerConfig(BaseModel):
    """Settings for one crawl / sitemap run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: Optional[HttpUrl] = Field(None, description="Default seed URL.")
    max_depth: int = Field(3, ge=0, description="Maximum number of links deep to traverse.")
    render: bool = Field(False, description="Render pages in a headless browser before extraction.")
    timeout: Optional[float] = Field(None, gt=0, description="Per-request timeout (seconds); None = no timeout.")
    user_agent: str = Field("SitemapHelper/1.0", min_length=1, description="User-Agent header.")
    retry_times: int = Field(0, ge=0, description="Extra attempts on transport errors and 5xx/429.")
    concurrency: int = Field(1, ge=1, description="Parallel fetches within one BFS level.")
    output_dir: str = Field("sitemaps", min_length=1, description="Where generated sitemaps are written.")
    render_options: RenderOptions = Field(default_factory=RenderOptions)


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> CrawlerConfig:
    """
    Read YAML or JSON and return a validated CrawlerConfig.

    With *path* None the default ``configs/default.yaml`` is used when it
    exists, otherwise built-in defaults. An explicit path that does not exist
    raises FileNotFoundError.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return CrawlerConfig()
        path_obj = DEFAULT_CONFIG_PATH
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return CrawlerConfig(**data)
