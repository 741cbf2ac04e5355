# File: sitemap_helper/errors.py
"""Exception hierarchy shared by the crawler and the sitemap codec."""

from __future__ import annotations

__all__ = [
    "SitemapHelperError",
    "FetchError",
    "RenderError",
    "ParseError",
    "UnknownSchemaError",
    "EncodeError",
    "SitemapCycleError",
]


class SitemapHelperError(Exception):
    """Base class for every error raised by sitemap_helper."""


class FetchError(SitemapHelperError):
    """HTTP transport failure or non-2xx status for *url*."""

    def __init__(self, url: str, cause: object) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"failed to fetch {url}: {cause}")


class RenderError(SitemapHelperError):
    """Headless rendering of *url* failed or timed out.

    Always recoverable: callers fall back to the unrendered body.
    """

    def __init__(self, url: str, cause: object) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"failed to render {url}: {cause}")


class ParseError(SitemapHelperError):
    """Malformed sitemap XML."""


class UnknownSchemaError(SitemapHelperError):
    """Sitemap root element is neither ``urlset`` nor ``sitemapindex``."""

    def __init__(self, root_name: str) -> None:
        self.root_name = root_name
        super().__init__(f"unknown root element: {root_name}")


class EncodeError(SitemapHelperError):
    """Writing the encoded sitemap to its sink failed."""


class SitemapCycleError(SitemapHelperError):
    """A sitemap index refers back to a sitemap that is still being resolved."""

    def __init__(self, url: str, chain: tuple[str, ...] = ()) -> None:
        self.url = url
        self.chain = chain
        path = " -> ".join((*chain, url))
        super().__init__(f"sitemap index cycle detected: {path}")
