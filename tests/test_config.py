# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from sitemap_helper.config import CrawlerConfig, RenderOptions, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("base_url: http://example.com/\nmax_depth: 2", ".yaml", None),
        (json.dumps({"base_url": "http://example.com", "max_depth": 2}), ".json", None),
        ("max_depth: -1", ".yaml", ValidationError),
        ("unknown_key: 1", ".yml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{broken json", ".json", ValueError),
        ("max_depth = 2", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert str(cfg.base_url).rstrip("/") == "http://example.com"
        assert cfg.max_depth == 2


def test_base_url_path_is_kept():
    assert str(CrawlerConfig(base_url="https://a.test/docs/").base_url) == "https://a.test/docs/"
    assert str(CrawlerConfig(base_url="https://a.test/docs").base_url) == "https://a.test/docs"


def test_defaults_match_baseline_behaviour():
    cfg = CrawlerConfig()
    assert cfg.timeout is None
    assert cfg.retry_times == 0
    assert cfg.concurrency == 1
    assert cfg.render is False
    assert cfg.render_options == RenderOptions(window_width=1920, window_height=1080, timeout_seconds=60)


def test_render_options_from_yaml(tmp_path):
    cfg_path = write_file(tmp_path, "render: true\nrender_options:\n  window_width: 800\n  timeout_seconds: 5\n", ".yaml")
    cfg = load_config(cfg_path)
    assert cfg.render is True
    assert cfg.render_options.window_width == 800
    assert cfg.render_options.window_height == 1080
    assert cfg.render_options.timeout_seconds == 5


def test_load_config_default_missing_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config(None) == CrawlerConfig()


def test_load_config_default_file_is_used(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("max_depth: 7\n", encoding="utf-8")
    assert load_config(None).max_depth == 7


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")
