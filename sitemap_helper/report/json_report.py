# sitemap_helper/report/json_report.py

"""
JSON listing of parsed sitemap entries.
"""
import json
from pathlib import Path
from typing import Iterable, Union

from sitemap_helper.sitemap.models import UrlEntry


def render_json(entries: Iterable[UrlEntry], output_path: Union[Path, str]) -> Path:
    """
    Save *entries* as a JSON list of objects at *output_path*.

    :param entries: parsed UrlEntry records
    :param output_path: path of the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from sitemap_helper.report.json_report import render_json
    report_path = render_json(entries, 'reports/entries.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    # optional fields that are absent are left out
    data = [
        {key: value for key, value in entry.to_dict().items() if value is not None}
        for entry in entries
    ]

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output
