# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Dict, Iterable, List, Optional

import pytest
from aiohttp import web

from sitemap_helper.config import CrawlerConfig
from sitemap_helper.crawler.models import PageData
from sitemap_helper.errors import FetchError
from sitemap_helper.utils import origin_of


def anchors(*hrefs: str) -> str:
    """HTML page whose body is one anchor per href."""
    return "<html><body>" + "".join(f'<a href="{h}">{h}</a>' for h in hrefs) + "</body></html>"


class FakeFetcher:
    """
    In-memory link graph standing in for the HTTP fetcher.

    ``graph`` maps a URL to the hrefs its page contains; URLs in ``broken``
    (or missing from the graph) raise FetchError.
    """

    def __init__(self, graph: Dict[str, Iterable[str]], broken: Iterable[str] = ()) -> None:
        self.graph = {url: list(links) for url, links in graph.items()}
        self.broken = set(broken)
        self.calls: List[str] = []

    async def fetch(self, url: str, render: bool = False) -> PageData:
        self.calls.append(url)
        if url in self.broken or url not in self.graph:
            raise FetchError(url, "HTTP 404 Not Found")
        html = anchors(*self.graph[url])
        return PageData(url=url, content=html.encode("utf-8"), origin=origin_of(url))


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """Config for crawler tests: short timeout, no retries."""
    return CrawlerConfig(
        max_depth=1,
        timeout=2.0,
        user_agent="TestAgent/1.0",
    )


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


def html_response(*hrefs: str) -> web.Response:
    return web.Response(text=anchors(*hrefs), content_type="text/html")


def xml_response(body: str) -> web.Response:
    return web.Response(text=body, content_type="application/xml")


URLSET_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">{body}</urlset>'
)
INDEX_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">{body}</sitemapindex>'
)


def urlset_xml(*locs: str) -> str:
    return URLSET_TEMPLATE.format(body="".join(f"<url><loc>{loc}</loc></url>" for loc in locs))


def index_xml(*locs: str, lastmod: Optional[str] = None) -> str:
    extra = f"<lastmod>{lastmod}</lastmod>" if lastmod else ""
    return INDEX_TEMPLATE.format(
        body="".join(f"<sitemap><loc>{loc}</loc>{extra}</sitemap>" for loc in locs)
    )
