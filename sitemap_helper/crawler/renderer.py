# sitemap_helper/crawler/renderer.py
"""
Headless-browser rendering of script-generated pages (Playwright, Chromium).

Every :meth:`PlaywrightRenderer.render` call launches its own browser and
closes it again, whether rendering succeeded or not.
"""
from __future__ import annotations

import time
from typing import Optional, Protocol

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Route, async_playwright

from sitemap_helper.config import RenderOptions
from sitemap_helper.errors import RenderError
from sitemap_helper.logger import get_logger

__all__ = ("Renderer", "PlaywrightRenderer")

log = get_logger("renderer")

_LAUNCH_ARGS = (
    "--disable-gpu",
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--blink-settings=imagesEnabled=false",
)


class Renderer(Protocol):
    async def render(self, url: str, options: RenderOptions) -> bytes:
        ...


async def _block_images(route: Route) -> None:
    if route.request.resource_type == "image":
        await route.abort("blockedbyclient")
    else:
        await route.continue_()


class PlaywrightRenderer:
    """Navigate with Chromium, wait for DOMContentLoaded, return the live DOM."""

    def __init__(self, headless: bool = True, user_agent: Optional[str] = None) -> None:
        self.headless = headless
        self.user_agent = user_agent

    async def render(self, url: str, options: RenderOptions) -> bytes:
        log.info("Rendering: %s", url)
        start = time.monotonic()
        try:
            async with async_playwright() as pw:
                browser = await pw.chromium.launch(headless=self.headless, args=list(_LAUNCH_ARGS))
                try:
                    context = await browser.new_context(
                        viewport={"width": options.window_width, "height": options.window_height},
                        user_agent=self.user_agent,
                    )
                    await context.route("**/*", _block_images)
                    page = await context.new_page()
                    await page.goto(
                        url,
                        wait_until="domcontentloaded",
                        timeout=options.timeout_seconds * 1000,
                    )
                    html = await page.content()
                finally:
                    await browser.close()
        except PlaywrightError as exc:
            # playwright's TimeoutError subclasses Error
            raise RenderError(url, exc) from exc
        log.debug("Rendered %s in %.2f s", url, time.monotonic() - start)
        return html.encode("utf-8")
