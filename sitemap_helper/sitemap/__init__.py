"""Sitemap documents and their XML codec."""
from sitemap_helper.sitemap.codec import (
    decode_sitemap_index,
    decode_urlset,
    fetch_sitemap,
    parse_sitemap,
    root_name,
    to_bytes,
    write,
)
from sitemap_helper.sitemap.models import XMLNS, SitemapIndex, SitemapRef, UrlEntry, Urlset

__all__ = [
    "XMLNS",
    "UrlEntry",
    "Urlset",
    "SitemapRef",
    "SitemapIndex",
    "write",
    "to_bytes",
    "root_name",
    "decode_urlset",
    "decode_sitemap_index",
    "parse_sitemap",
    "fetch_sitemap",
]
