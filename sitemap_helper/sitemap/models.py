# File: sitemap_helper/sitemap/models.py
"""sitemap_helper.sitemap.models: documents of the sitemaps.org 0.9 schema."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

__all__ = ["XMLNS", "UrlEntry", "Urlset", "SitemapRef", "SitemapIndex"]

XMLNS = "http://www.sitemaps.org/schemas/sitemap/0.9"


@dataclass(slots=True)
class UrlEntry:
    """One ``<url>`` record. Optional fields are kept verbatim, never validated."""

    loc: str
    lastmod: Optional[str] = None
    changefreq: Optional[str] = None
    priority: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class Urlset:
    """Root ``<urlset>`` document; entries keep insertion order."""

    urls: List[UrlEntry] = field(default_factory=list)
    xmlns: str = XMLNS

    @classmethod
    def from_locs(cls, locs: List[str]) -> Urlset:
        return cls(urls=[UrlEntry(loc=loc) for loc in locs])

    def __len__(self) -> int:
        return len(self.urls)


@dataclass(slots=True)
class SitemapRef:
    """One ``<sitemap>`` record of a sitemap index."""

    loc: str
    lastmod: Optional[str] = None


@dataclass(slots=True)
class SitemapIndex:
    """Root ``<sitemapindex>`` document pointing at child sitemaps."""

    sitemaps: List[SitemapRef] = field(default_factory=list)
    xmlns: str = XMLNS
