# File: sitemap_helper/utils.py
"""sitemap_helper.utils: URL helpers shared by the crawler, the codec and the CLI."""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence
from urllib.parse import urlparse, urlunparse

from sitemap_helper.logger import logger

__all__: Sequence[str] = (
    "origin_of",
    "hostname_of",
    "is_http_url",
    "with_prefix",
    "keep",
)


def origin_of(url: str) -> str:
    """Return ``scheme://host[:port]`` of *url*, without path, query or fragment."""
    parsed = urlparse(url)
    return urlunparse((parsed.scheme, parsed.netloc, "", "", "", ""))


def hostname_of(url: str) -> str:
    """Host name of *url* without port, as used for output directories."""
    return urlparse(url).hostname or ""


def is_http_url(value: str) -> bool:
    """True when *value* looks like an absolute http(s) URL."""
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def with_prefix(prefix: str) -> Callable[[str], bool]:
    """Predicate keeping links that start with *prefix* (domain scoping)."""

    def _match(link: str) -> bool:
        return link.startswith(prefix)

    return _match


def keep(links: Iterable[str], keep_fn: Callable[[str], bool]) -> List[str]:
    """Filter *links* with *keep_fn*, preserving order."""
    kept = [link for link in links if keep_fn(link)]
    logger.debug("Kept %d links after filtering", len(kept))
    return kept
