# === FILE: sitemap_helper/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point for sitemap_helper.

Commands:
  generate  Crawl a site and write <output-dir>/<host>/sitemap.xml
  parse     Read a sitemap (URL or file) and list its entries
  config    Show the effective configuration

Common options:
  --config PATH       YAML/JSON config (default: configs/default.yaml when present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only when omitted)

generate options:
  --depth INT         Maximum number of links deep to traverse
  --render            Render pages in a headless browser (single page apps)
  --output-dir DIR    Directory where the sitemap is stored

parse options:
  --json PATH         Save the entries as JSON
  --html PATH         Save the entries as an HTML table
  --template DIR      Directory with a custom entries.html.j2

Example:
  sitemap-helper generate https://example.com --depth 2 --output-dir sitemaps
  sitemap-helper parse https://example.com/sitemap.xml --json entries.json
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from sitemap_helper import __version__
from sitemap_helper.config import load_config
from sitemap_helper.engine import generate, parse_source
from sitemap_helper.errors import SitemapHelperError
from sitemap_helper.logger import DEFAULT_FORMAT, configure
from sitemap_helper.report.html_report import render_html
from sitemap_helper.report.json_report import render_json
from sitemap_helper.report.xml_report import write_sitemap
from sitemap_helper.utils import hostname_of, is_http_url

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='sitemap-helper, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stderr only when omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    help='Format string for log records'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Build sitemaps by crawling a site, or read existing ones."""
    configure(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('generate', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.option(
    '--depth', '-d', 'depth',
    type=click.IntRange(min=0),
    default=None,
    help='Maximum number of links deep to traverse (config max_depth by default)'
)
@click.option(
    '--render/--no-render', 'render',
    default=None,
    help='Render pages in a headless browser before extracting links'
)
@click.option(
    '--output-dir', '-o', 'output_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Directory where the sitemap is stored (config output_dir by default)'
)
@click.pass_context
def generate_cmd(ctx, url, depth, render, output_dir):
    """Crawl URL and write <output-dir>/<host>/sitemap.xml."""
    cfg = ctx.obj['config']
    seed = url or (str(cfg.base_url) if cfg.base_url else None)
    if not seed:
        print_error('No URL given and base_url is not configured')
    if not is_http_url(seed):
        print_error(f'Not an http(s) URL: {seed}')

    max_depth = cfg.max_depth if depth is None else depth
    do_render = cfg.render if render is None else render
    target_dir = output_dir or Path(cfg.output_dir)

    click.echo(f'Crawling {seed} (depth {max_depth})', err=True)
    try:
        urlset = asyncio.run(generate(seed, max_depth, do_render, cfg))
        saved = write_sitemap(urlset, target_dir, hostname_of(seed))
    except SitemapHelperError as e:
        print_error(f'Failed to generate sitemap: {e}')

    click.echo(f'{len(urlset)} urls')
    click.echo(f'Sitemap: {saved}')


@cli.command('parse', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the entries as JSON'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the entries as an HTML table'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory with a custom entries.html.j2'
)
@click.pass_context
def parse_cmd(ctx, source, json_output, html_output, template_dir):
    """Read a sitemap or sitemap index from SOURCE (URL or file) and list its entries."""
    cfg = ctx.obj['config']
    if not is_http_url(source) and not Path(source).is_file():
        print_error(f'No such file: {source}')
    try:
        entries = asyncio.run(parse_source(source, cfg))
    except SitemapHelperError as e:
        print_error(f'Failed to parse sitemap: {e}')

    # No output files: print each entry, optional fields indented below its loc
    if not json_output and not html_output:
        for entry in entries:
            click.echo(entry.loc)
            for name in ('lastmod', 'changefreq', 'priority'):
                value = getattr(entry, name)
                if value:
                    click.echo(f'  {name}: {value}')
        return

    if json_output:
        try:
            saved_json = render_json(entries, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Failed to save JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(entries, html_output, template_dir)
            click.echo(f'HTML report: {saved_html}')
        except OSError as e:
            print_error(f'Failed to save HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


def main() -> None:
    cli(prog_name='sitemap-helper')


if __name__ == "__main__":
    main()
