"""
sitemap_helper package initializer.
Defines the package version and re-exports the main entry points.
"""
__version__ = "0.1.0"

from sitemap_helper.engine import Engine, generate, parse_source  # noqa: E402
from sitemap_helper.sitemap.codec import fetch_sitemap, parse_sitemap, write  # noqa: E402
from sitemap_helper.sitemap.models import XMLNS, UrlEntry, Urlset  # noqa: E402

__all__ = [
    "__version__",
    "Engine",
    "generate",
    "parse_source",
    "parse_sitemap",
    "fetch_sitemap",
    "write",
    "XMLNS",
    "UrlEntry",
    "Urlset",
]
