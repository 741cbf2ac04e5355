# File: sitemap_helper/report/__init__.py
"""sitemap_helper.report: writing generated sitemaps and parsed-entry listings (XML, JSON, HTML)."""

from sitemap_helper.report.html_report import render_html
from sitemap_helper.report.json_report import render_json
from sitemap_helper.report.xml_report import write_sitemap

__all__ = ["write_sitemap", "render_json", "render_html"]
