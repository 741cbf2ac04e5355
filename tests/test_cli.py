# File: tests/test_cli.py
"""CLI tests (`sitemap_helper/cli.py`) with click.testing.CliRunner.
Cover `generate`, `parse`, `config`, `--version` and error handling.
"""
import json

import pytest
from click.testing import CliRunner

import sitemap_helper.cli as cli_module
import sitemap_helper.engine as engine_module
from conftest import index_xml, urlset_xml
from sitemap_helper.cli import cli
from sitemap_helper.errors import FetchError
from sitemap_helper.sitemap.codec import decode_urlset
from sitemap_helper.sitemap.models import UrlEntry, Urlset


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every command from an empty directory so no configs/default.yaml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def fake_generate(monkeypatch):
    """Replace the crawl with a canned Urlset and record the arguments."""
    calls = []

    async def _generate(seed, depth, render, cfg):
        calls.append((seed, depth, render))
        return Urlset.from_locs([seed, f"{seed.rstrip('/')}/about"])

    monkeypatch.setattr(cli_module, "generate", _generate)
    return calls


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "sitemap-helper" in result.output


def test_show_config(tmp_path):
    cfg_file = tmp_path / "settings.json"
    cfg_file.write_text(json.dumps({"base_url": "https://example.com", "max_depth": 1}), encoding="utf-8")

    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["base_url"] == "https://example.com/"
    assert data["max_depth"] == 1
    assert data["render_options"]["window_width"] == 1920


def test_invalid_config_is_reported(tmp_path):
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text("max_depth: -5\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 1
    assert "Failed to load configuration" in result.output


def test_generate_writes_sitemap(tmp_path, fake_generate):
    result = CliRunner().invoke(
        cli, ["generate", "https://example.com/", "--depth", "2", "--output-dir", str(tmp_path / "out")]
    )
    assert result.exit_code == 0, result.output
    target = tmp_path / "out" / "example.com" / "sitemap.xml"
    assert str(target) in result.output
    assert fake_generate == [("https://example.com/", 2, False)]
    assert [u.loc for u in decode_urlset(target.read_bytes()).urls] == [
        "https://example.com/",
        "https://example.com/about",
    ]


def test_generate_uses_config_defaults(tmp_path, fake_generate):
    cfg_file = tmp_path / "cfg.yaml"
    cfg_file.write_text(
        f"base_url: https://example.com\nmax_depth: 4\nrender: true\noutput_dir: {tmp_path / 'maps'}\n",
        encoding="utf-8",
    )
    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "generate", "--no-render"])
    assert result.exit_code == 0, result.output
    assert fake_generate == [("https://example.com/", 4, False)]
    assert (tmp_path / "maps" / "example.com" / "sitemap.xml").is_file()


def test_generate_requires_url(fake_generate):
    result = CliRunner().invoke(cli, ["generate"])
    assert result.exit_code == 1
    assert "No URL given" in result.output
    assert fake_generate == []


def test_generate_rejects_non_http_url(fake_generate):
    result = CliRunner().invoke(cli, ["generate", "ftp://example.com"])
    assert result.exit_code == 1
    assert "Not an http(s) URL" in result.output


def test_generate_failure(monkeypatch, tmp_path):
    async def failing(seed, depth, render, cfg):
        raise FetchError(seed, "boom")

    monkeypatch.setattr(cli_module, "generate", failing)
    result = CliRunner().invoke(cli, ["generate", "https://example.com/", "-o", str(tmp_path)])
    assert result.exit_code == 1
    assert "Failed to generate sitemap" in result.output


def test_parse_file_prints_locs(tmp_path):
    path = tmp_path / "sitemap.xml"
    path.write_text(urlset_xml("https://a.test/1", "https://a.test/2"), encoding="utf-8")
    result = CliRunner().invoke(cli, ["parse", str(path)])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["https://a.test/1", "https://a.test/2"]


def test_parse_file_prints_optional_fields(tmp_path):
    path = tmp_path / "sitemap.xml"
    path.write_text(
        "<urlset>"
        "<url><loc>https://a.test/1</loc><lastmod>2024-01-01</lastmod>"
        "<changefreq>daily</changefreq><priority>0.8</priority></url>"
        "<url><loc>https://a.test/2</loc></url>"
        "</urlset>",
        encoding="utf-8",
    )
    result = CliRunner().invoke(cli, ["parse", str(path)])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "https://a.test/1",
        "  lastmod: 2024-01-01",
        "  changefreq: daily",
        "  priority: 0.8",
        "https://a.test/2",
    ]


def test_parse_url_to_json(tmp_path, monkeypatch):
    async def fake_fetch(url, session=None):
        assert url == "https://a.test/sitemap_index.xml"
        return [UrlEntry(loc="https://a.test/p1", lastmod="2024-05-01")]

    monkeypatch.setattr(engine_module, "fetch_sitemap", fake_fetch)
    out = tmp_path / "entries.json"
    result = CliRunner().invoke(cli, ["parse", "https://a.test/sitemap_index.xml", "--json", str(out)])
    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text(encoding="utf-8")) == [{"loc": "https://a.test/p1", "lastmod": "2024-05-01"}]


def test_parse_to_html(tmp_path):
    path = tmp_path / "sitemap.xml"
    path.write_text(urlset_xml("https://a.test/1"), encoding="utf-8")
    out = tmp_path / "entries.html"
    result = CliRunner().invoke(cli, ["parse", str(path), "--html", str(out)])
    assert result.exit_code == 0, result.output
    assert "https://a.test/1" in out.read_text(encoding="utf-8")


def test_parse_missing_file():
    result = CliRunner().invoke(cli, ["parse", "does-not-exist.xml"])
    assert result.exit_code == 1
    assert "No such file" in result.output


def test_parse_unknown_schema(tmp_path):
    path = tmp_path / "feed.xml"
    path.write_text("<rss><channel/></rss>", encoding="utf-8")
    result = CliRunner().invoke(cli, ["parse", str(path)])
    assert result.exit_code == 1
    assert "unknown root element: rss" in result.output


def test_parse_index_with_unreachable_child(tmp_path, unused_tcp_port):
    path = tmp_path / "index.xml"
    path.write_text(index_xml(f"http://localhost:{unused_tcp_port}/child.xml"), encoding="utf-8")
    result = CliRunner().invoke(cli, ["parse", str(path)])
    assert result.exit_code == 1
    assert "Failed to parse sitemap" in result.output
