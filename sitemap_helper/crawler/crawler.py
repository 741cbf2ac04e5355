# === FILE: sitemap_helper/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import Iterable, List, Optional, Protocol, Set

from aiohttp import ClientSession, ClientTimeout

from sitemap_helper.config import CrawlerConfig
from sitemap_helper.crawler.fetcher import Fetcher
from sitemap_helper.crawler.link_extractor import extract_links
from sitemap_helper.crawler.models import PageData
from sitemap_helper.errors import FetchError
from sitemap_helper.logger import get_logger

__all__ = ("Crawler", "traverse", "PageSource")


class PageSource(Protocol):
    async def fetch(self, url: str, render: bool = False) -> PageData:
        ...


def build_session(config: CrawlerConfig) -> ClientSession:
    """HTTP session for crawling; ``timeout=None`` in the config disables the deadline."""
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers={"User-Agent": config.user_agent},
        raise_for_status=False,
    )


class Crawler:
    """
    Level-synchronous breadth-first crawler.

    Every URL of a level is fetched before any URL of the next level; within a
    level up to ``config.concurrency`` fetches run at once. A page that fails
    to fetch still counts as visited but contributes no links.
    """

    def __init__(self, config: Optional[CrawlerConfig] = None, fetcher: Optional[PageSource] = None) -> None:
        self.config = config or CrawlerConfig()
        self.fetcher: Optional[PageSource] = fetcher
        self.session: Optional[ClientSession] = None
        self.failed: List[str] = []
        self.logger = get_logger("crawler")

    async def __aenter__(self) -> Crawler:
        if self.fetcher is None:
            self.session = build_session(self.config)
            self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def traverse(
        self,
        seed_url: str,
        max_depth: Optional[int] = None,
        render: Optional[bool] = None,
    ) -> Set[str]:
        """
        Return every URL visited from *seed_url* within *max_depth* levels.

        The result is an unordered set; callers must not rely on its order.
        URLs are compared as literal strings.
        """
        if self.fetcher is None:
            raise RuntimeError("Crawler must be used as async context manager")
        depth = self.config.max_depth if max_depth is None else max_depth
        if depth < 0:
            raise ValueError("max_depth must be >= 0")
        do_render = self.config.render if render is None else render

        self.logger.info("Crawl start: %s (depth=%d, render=%s)", seed_url, depth, do_render)
        start = time.monotonic()
        self.failed = []
        seen: Set[str] = set()
        current: Set[str] = {seed_url}
        next_level: Set[str] = set()
        semaphore = asyncio.Semaphore(self.config.concurrency)

        for level in range(depth + 1):
            if not current:
                break
            todo = [url for url in current if url not in seen]
            seen.update(todo)
            self.logger.debug("Level %d: %d urls", level, len(todo))

            results = await asyncio.gather(*(self._visit(url, do_render, semaphore) for url in todo))
            for links in results:
                next_level.update(link for link in links if link not in seen)

            current, next_level = next_level, set()

        duration = time.monotonic() - start
        self.logger.info("Crawl done: %d urls in %.2f s", len(seen), duration)
        if self.failed:
            self.logger.info("Failed to fetch: %d", len(self.failed))
        return seen

    async def _visit(self, url: str, render: bool, semaphore: asyncio.Semaphore) -> Iterable[str]:
        assert self.fetcher is not None
        async with semaphore:
            try:
                page = await self.fetcher.fetch(url, render)
            except FetchError as exc:
                self.logger.warning("Failed %s: %s", url, exc.cause)
                self.failed.append(url)
                return ()
        return extract_links(page)


async def traverse(
    seed_url: str,
    max_depth: int,
    render: bool = False,
    config: Optional[CrawlerConfig] = None,
) -> Set[str]:
    """One-shot crawl with a fresh HTTP session."""
    async with Crawler(config) as crawler:
        return await crawler.traverse(seed_url, max_depth, render)
