# sitemap_helper/crawler/link_extractor.py
"""
Anchor extraction and href resolution for the sitemap_helper crawler.
"""
from __future__ import annotations

from typing import Iterable, List, Union

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from sitemap_helper.crawler.models import Link, PageData
from sitemap_helper.logger import get_logger
from sitemap_helper.utils import keep, with_prefix

log = get_logger("links")


def parse_links(markup: Union[bytes, str]) -> List[Link]:
    """
    Return every ``<a>`` element of *markup* in document order.

    ``href`` is taken verbatim (first attribute wins, missing means ``""``);
    ``text`` is the whitespace-collapsed text of all descendants.
    Malformed markup yields whatever anchors the parser could recover.
    """
    try:
        soup = BeautifulSoup(markup, "html.parser", on_duplicate_attribute="ignore")
    except ParserRejectedMarkup as exc:
        log.warning("Unparseable markup, no links extracted: %s", exc)
        return []

    links: List[Link] = []
    for tag in soup.find_all("a"):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        href = href_val if isinstance(href_val, str) else ""
        text = " ".join(tag.get_text().split())
        links.append(Link(href=href, text=text))
    return links


def resolve_hrefs(links: Iterable[Link], base: str) -> List[str]:
    """
    Turn anchors into absolute URLs against *base* (``scheme://host[:port]``).

    ``/path`` is prefixed with *base*, ``http…`` is kept as-is; fragments,
    ``mailto:``, empty and slash-less relative hrefs are dropped.
    """
    resolved: List[str] = []
    for link in links:
        href = link.href
        if href.startswith("/"):
            resolved.append(f"{base}{href}")
        elif href.startswith("http"):
            resolved.append(href)
    return resolved


def hrefs(markup: Union[bytes, str], base: str) -> List[str]:
    """Parse *markup* and resolve its anchors against *base*."""
    return resolve_hrefs(parse_links(markup), base)


def extract_links(page: PageData) -> List[str]:
    """
    Extract same-origin links from a fetched page.

    Links are resolved against the page's effective (post-redirect) origin
    and kept only when they start with that origin.
    """
    return keep(hrefs(page.content, page.origin), with_prefix(page.origin))
