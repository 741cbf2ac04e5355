# File: sitemap_helper/sitemap/codec.py
"""sitemap_helper.sitemap.codec: encode a Urlset to XML and decode urlset / sitemapindex documents.

Decoding a ``sitemapindex`` downloads every child sitemap and flattens the
result into one list of :class:`UrlEntry`. Unlike the crawler, this is
all-or-nothing: one broken child fails the whole call.

Example:
```python
import asyncio
from sitemap_helper.sitemap.codec import fetch_sitemap

entries = asyncio.run(fetch_sitemap("https://example.com/sitemap.xml"))
print([e.loc for e in entries])
```
"""

from __future__ import annotations

import asyncio
import io
import os
from pathlib import Path
from typing import IO, Iterator, List, Optional, Tuple, Union

from aiohttp import ClientError, ClientSession
from lxml import etree

from sitemap_helper.errors import (
    EncodeError,
    FetchError,
    ParseError,
    SitemapCycleError,
    UnknownSchemaError,
)
from sitemap_helper.logger import get_logger
from sitemap_helper.sitemap.models import SitemapIndex, SitemapRef, UrlEntry, Urlset

__all__ = [
    "XML_HEADER",
    "write",
    "to_bytes",
    "root_name",
    "decode_urlset",
    "decode_sitemap_index",
    "parse_sitemap",
    "fetch_sitemap",
]

log = get_logger("sitemap")

XML_HEADER = b'<?xml version="1.0" encoding="UTF-8"?>\n'

Source = Union[bytes, bytearray, str, "os.PathLike[str]", IO[bytes], IO[str]]
Sink = Union[str, "os.PathLike[str]", IO[bytes]]

_URL_FIELDS = ("loc", "lastmod", "changefreq", "priority")


# --------------------------------------------------------------------------- #
# Encoding                                                                    #
# --------------------------------------------------------------------------- #


def _tag(ns: str, name: str) -> str:
    return f"{{{ns}}}{name}" if ns else name


def to_bytes(urlset: Urlset) -> bytes:
    """Serialize *urlset*: XML declaration plus a 2-space indented ``<urlset>``."""
    ns = urlset.xmlns
    root = etree.Element(_tag(ns, "urlset"), nsmap={None: ns} if ns else None)
    for entry in urlset.urls:
        url_el = etree.SubElement(root, _tag(ns, "url"))
        for name in _URL_FIELDS:
            value = getattr(entry, name)
            if value:
                etree.SubElement(url_el, _tag(ns, name)).text = value
    body = etree.tostring(root, encoding="UTF-8", xml_declaration=False, pretty_print=True)
    return XML_HEADER + body


def write(urlset: Urlset, sink: Sink) -> None:
    """Write the encoded *urlset* to a binary file object or a file path.

    Any failure of the sink is reported as :class:`EncodeError`.
    """
    data = to_bytes(urlset)
    try:
        if isinstance(sink, (str, os.PathLike)):
            Path(sink).write_bytes(data)
        else:
            sink.write(data)
    except (OSError, ValueError, TypeError) as exc:
        # TypeError: text-mode sink
        raise EncodeError(f"failed to write xml: {exc}") from exc


# --------------------------------------------------------------------------- #
# Decoding                                                                    #
# --------------------------------------------------------------------------- #


def _parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)


def _read_source(source: Source) -> bytes:
    """Buffer *source* fully so the root can be peeked and then decoded again."""
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, os.PathLike):
        return Path(source).read_bytes()
    data = source.read()
    return data.encode("utf-8") if isinstance(data, str) else data


def _fromstring(data: bytes) -> etree._Element:
    try:
        return etree.fromstring(data, parser=_parser())
    except etree.XMLSyntaxError as exc:
        raise ParseError(f"failed to read xml: {exc}") from exc


def _local(el: etree._Element) -> str:
    return etree.QName(el).localname


def _children(el: etree._Element, name: str) -> Iterator[etree._Element]:
    for child in el:
        if isinstance(child.tag, str) and _local(child) == name:
            yield child


def _text(el: etree._Element, name: str, strip: bool = False) -> Optional[str]:
    # optional fields keep their text verbatim; only <loc> is stripped
    for child in _children(el, name):
        text = "".join(child.itertext())
        return text.strip() if strip else text
    return None


def _namespace(el: etree._Element) -> str:
    return etree.QName(el).namespace or ""


def root_name(data: bytes) -> str:
    """Local name of the root element of *data*."""
    try:
        for _event, elem in etree.iterparse(
            io.BytesIO(data), events=("start",), resolve_entities=False, no_network=True
        ):
            return _local(elem)
    except etree.XMLSyntaxError as exc:
        raise ParseError(f"error decoding xml: {exc}") from exc
    raise ParseError("error decoding xml: empty document")


def decode_urlset(data: bytes) -> Urlset:
    """Decode a ``<urlset>`` document. Every ``<url>`` must carry a ``<loc>``."""
    root = _fromstring(data)
    urls: List[UrlEntry] = []
    for url_el in _children(root, "url"):
        loc = _text(url_el, "loc", strip=True)
        if loc is None:
            raise ParseError(f"failed to parse urlset: <url> #{len(urls) + 1} has no <loc>")
        urls.append(
            UrlEntry(
                loc=loc,
                lastmod=_text(url_el, "lastmod"),
                changefreq=_text(url_el, "changefreq"),
                priority=_text(url_el, "priority"),
            )
        )
    return Urlset(urls=urls, xmlns=_namespace(root))


def decode_sitemap_index(data: bytes) -> SitemapIndex:
    """Decode a ``<sitemapindex>`` document. Every ``<sitemap>`` must carry a ``<loc>``."""
    root = _fromstring(data)
    refs: List[SitemapRef] = []
    for sm_el in _children(root, "sitemap"):
        loc = _text(sm_el, "loc", strip=True)
        if loc is None:
            raise ParseError(f"failed to parse sitemapindex: <sitemap> #{len(refs) + 1} has no <loc>")
        refs.append(SitemapRef(loc=loc, lastmod=_text(sm_el, "lastmod")))
    return SitemapIndex(sitemaps=refs, xmlns=_namespace(root))


async def _download(session: ClientSession, url: str) -> bytes:
    try:
        async with session.get(url) as resp:
            if not 200 <= resp.status < 300:
                raise FetchError(url, f"sitemap response status error: {resp.status} {resp.reason or ''}".rstrip())
            return await resp.read()
    except (ClientError, asyncio.TimeoutError) as exc:
        raise FetchError(url, exc) from exc


async def _resolve(data: bytes, session: ClientSession, chain: Tuple[str, ...]) -> List[UrlEntry]:
    name = root_name(data)
    kind = name.lower()

    if kind == "urlset":
        return decode_urlset(data).urls

    if kind == "sitemapindex":
        index = decode_sitemap_index(data)
        entries: List[UrlEntry] = []
        for ref in index.sitemaps:
            if ref.loc in chain:
                raise SitemapCycleError(ref.loc, chain)
            log.info("Parsing sitemap: %s", ref.loc)
            body = await _download(session, ref.loc)
            entries.extend(await _resolve(body, session, (*chain, ref.loc)))
        return entries

    raise UnknownSchemaError(name)


async def parse_sitemap(
    source: Source,
    session: Optional[ClientSession] = None,
    source_url: Optional[str] = None,
) -> List[UrlEntry]:
    """
    Decode a sitemap or sitemap index into a flat list of entries.

    *source* may be bytes, XML text, a path or a file object; it is read
    fully before decoding. Index children are fetched in order over
    *session* (a temporary session is opened when none is given) and their
    entries concatenated. *source_url*, when known, takes part in cycle
    detection.

    Raises ParseError, UnknownSchemaError, FetchError or SitemapCycleError;
    no partial result is ever returned.
    """
    data = _read_source(source)
    chain: Tuple[str, ...] = (source_url,) if source_url else ()
    if session is not None:
        return await _resolve(data, session, chain)
    async with ClientSession() as own_session:
        return await _resolve(data, own_session, chain)


async def fetch_sitemap(url: str, session: Optional[ClientSession] = None) -> List[UrlEntry]:
    """Download the sitemap at *url* and decode it with :func:`parse_sitemap`."""
    if session is not None:
        return await parse_sitemap(await _download(session, url), session, source_url=url)
    async with ClientSession() as own_session:
        body = await _download(own_session, url)
        return await parse_sitemap(body, own_session, source_url=url)
