# File: sitemap_helper/engine.py
"""sitemap_helper.engine: facade composing the crawler and the sitemap codec."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional

from sitemap_helper.config import CrawlerConfig, load_config
from sitemap_helper.crawler.crawler import Crawler, build_session
from sitemap_helper.logger import logger
from sitemap_helper.sitemap.codec import fetch_sitemap, parse_sitemap
from sitemap_helper.sitemap.models import XMLNS, UrlEntry, Urlset
from sitemap_helper.utils import is_http_url

__all__ = ["Engine", "generate", "parse_source"]


async def generate(
    seed_url: str,
    max_depth: int,
    render: bool = False,
    config: Optional[CrawlerConfig] = None,
) -> Urlset:
    """Crawl from *seed_url* and wrap every visited URL as a ``loc``-only entry.

    The crawl result has no meaningful order; entries are sorted so that the
    same site always yields the same document.
    """
    async with Crawler(config) as crawler:
        pages = await crawler.traverse(seed_url, max_depth, render)
    return Urlset(urls=[UrlEntry(loc=page) for page in sorted(pages)], xmlns=XMLNS)


async def parse_source(source: str, config: Optional[CrawlerConfig] = None) -> List[UrlEntry]:
    """Parse a sitemap from an http(s) URL or a local file path.

    Downloads go through a session built from *config*, so the configured
    user agent and timeout apply to the sitemap and to every index child.
    """
    cfg = config or CrawlerConfig()
    async with build_session(cfg) as session:
        if is_http_url(source):
            return await fetch_sitemap(source, session)
        return await parse_sitemap(Path(source), session)


class Engine:
    """Facade for the CLI and tests: config loading, sitemap generation and parsing."""

    @staticmethod
    def load_config(path: Optional[str]) -> CrawlerConfig:
        """Load config from YAML/JSON, or defaults."""
        return load_config(path)

    def __init__(self, config: Optional[CrawlerConfig] = None) -> None:
        self.config = config or CrawlerConfig()

    def generate(
        self,
        seed_url: Optional[str] = None,
        max_depth: Optional[int] = None,
        render: Optional[bool] = None,
    ) -> Urlset:
        """Run :func:`generate` with config fallbacks for every omitted argument."""
        url = seed_url or (str(self.config.base_url) if self.config.base_url else None)
        if not url:
            raise ValueError("no seed URL given and base_url is not configured")
        depth = self.config.max_depth if max_depth is None else max_depth
        do_render = self.config.render if render is None else render

        logger.info("Generating sitemap for %s", url)
        try:
            return asyncio.run(generate(url, depth, do_render, self.config))
        except Exception as exc:
            logger.error("Sitemap generation failed: %s", exc)
            raise

    def parse(self, source: str) -> List[UrlEntry]:
        """Parse a sitemap from an http(s) URL or a local file path."""
        return asyncio.run(parse_source(source, self.config))
