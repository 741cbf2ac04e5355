# File: sitemap_helper/report/html_report.py
"""sitemap_helper.report.html_report: HTML table of parsed sitemap entries rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Union

from jinja2 import Environment, FileSystemLoader, PackageLoader, select_autoescape

from sitemap_helper.sitemap.models import UrlEntry

TEMPLATE_NAME = "entries.html.j2"


def render_html(
    entries: Iterable[UrlEntry],
    output_path: Union[Path, str],
    template_dir: Optional[Union[Path, str]] = None,
    title: str = "Sitemap entries",
) -> Path:
    """Render *entries* through ``entries.html.j2`` and save the page.

    Args:
        entries: parsed UrlEntry records.
        output_path: path of the resulting HTML file.
        template_dir: directory with a custom ``entries.html.j2``;
            the template bundled with the package is used when omitted.
        title: page heading.

    Returns:
        Path of the saved HTML file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    loader = (
        FileSystemLoader(str(template_dir))
        if template_dir is not None
        else PackageLoader("sitemap_helper.report", "templates")
    )
    env = Environment(loader=loader, autoescape=select_autoescape(["html", "xml", "j2"]))
    template = env.get_template(TEMPLATE_NAME)

    rows = list(entries)
    context: dict[str, Any] = {"title": title, "entries": rows, "count": len(rows)}

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
