# sitemap_helper/crawler/fetcher.py
"""
Fetcher module: one HTTP GET per page, optional headless rendering, optional retry/backoff.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Sequence

from aiohttp import ClientError, ClientSession

from sitemap_helper.config import CrawlerConfig
from sitemap_helper.crawler.models import PageData
from sitemap_helper.crawler.renderer import PlaywrightRenderer, Renderer
from sitemap_helper.errors import FetchError, RenderError
from sitemap_helper.logger import get_logger
from sitemap_helper.utils import origin_of

log = get_logger("fetcher")

RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)


class _RetryableStatus(Exception):
    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"HTTP {status}")


class Fetcher:
    """Fetches pages for the crawler and reports failures as FetchError."""

    #: multiplier for the exponential backoff between retries (seconds)
    backoff_factor: float = 1.0

    def __init__(
        self,
        session: ClientSession,
        config: Optional[CrawlerConfig] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        self.session = session
        self.config = config or CrawlerConfig()
        self._renderer = renderer

    @property
    def renderer(self) -> Renderer:
        if self._renderer is None:
            self._renderer = PlaywrightRenderer(user_agent=self.config.user_agent)
        return self._renderer

    async def fetch(self, url: str, render: bool = False) -> PageData:
        """
        GET *url* and return its body with the effective origin.

        The origin comes from the final URL after redirects. With *render*
        the final URL is rendered in a headless browser; if that fails the
        raw body is returned with ``warning`` set instead of raising.
        """
        final_url, body = await self._get(url)
        page = PageData(url=final_url, content=body, origin=origin_of(final_url))
        if not render:
            return page

        try:
            page.content = await self.renderer.render(final_url, self.config.render_options)
        except RenderError as exc:
            log.warning("Render failed, using raw body of %s: %s", final_url, exc.cause)
            page.warning = str(exc)
        return page

    async def _get(self, url: str) -> tuple[str, bytes]:
        # retry/backoff loop; retry_times=0 means a single attempt
        attempts = 0
        while True:
            try:
                async with self.session.get(url, allow_redirects=True) as resp:
                    if resp.status in RETRY_STATUS and attempts < self.config.retry_times:
                        raise _RetryableStatus(resp.status)
                    if not 200 <= resp.status < 300:
                        raise FetchError(url, f"HTTP {resp.status} {resp.reason or ''}".rstrip())
                    body = await resp.read()
                    return str(resp.url), body
            except (ClientError, asyncio.TimeoutError, _RetryableStatus) as exc:
                attempts += 1
                if attempts > self.config.retry_times:
                    raise FetchError(url, exc) from exc
                backoff = min(self.backoff_factor * 2 ** attempts, 60.0)
                log.debug(
                    "Retry %d/%d for %s after %.2f s (%s)",
                    attempts, self.config.retry_times, url, backoff, exc,
                )
                await asyncio.sleep(backoff)
