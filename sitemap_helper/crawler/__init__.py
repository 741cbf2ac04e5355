"""Breadth-first site crawler: fetcher, link extractor, renderer and BFS engine."""
from sitemap_helper.crawler.crawler import Crawler, traverse
from sitemap_helper.crawler.fetcher import Fetcher
from sitemap_helper.crawler.models import Link, PageData

__all__ = ["Crawler", "traverse", "Fetcher", "Link", "PageData"]
