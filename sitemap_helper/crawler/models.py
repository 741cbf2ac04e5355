# sitemap_helper/crawler/models.py
"""
Data models for the sitemap_helper crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class Link:
    """Raw anchor found in a page: ``href`` verbatim and its visible text."""

    href: str
    text: str


@dataclass(slots=True)
class PageData:
    """Holds the final URL, markup bytes and effective origin of a fetched page.

    ``warning`` is set when rendering failed and ``content`` is the raw body.
    """

    url: str
    content: bytes
    origin: str
    warning: Optional[str] = None
