# sitemap_helper/report/xml_report.py
"""Writing a generated Urlset to ``<output_dir>/<host>/sitemap.xml``."""
from __future__ import annotations

from pathlib import Path
from typing import Union

from sitemap_helper.errors import EncodeError
from sitemap_helper.sitemap.codec import write
from sitemap_helper.sitemap.models import Urlset

SITEMAP_FILENAME = "sitemap.xml"


def write_sitemap(urlset: Urlset, output_dir: Union[Path, str], host: str) -> Path:
    """
    Save *urlset* under ``output_dir/host/sitemap.xml`` and return the file path.

    Directory creation failures are reported as EncodeError, like write failures.
    """
    target_dir = Path(output_dir) / host
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise EncodeError(f"cannot create {target_dir}: {exc}") from exc

    output = target_dir / SITEMAP_FILENAME
    write(urlset, output)
    return output
