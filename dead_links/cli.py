# === FILE: dead_links/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point of the dead-link crawler.

Usage:
  dead-links [OPTIONS] BASE_DOMAIN

Crawl options:
  --parallel, -p          Crawl links concurrently (default: sequential, depth-first)
  --start, -s PATH        Relative path from the base domain to start from, e.g. /believe
  --config, -c PATH       YAML/JSON config file; command line values win over it
  --max-concurrency INT   Bound on in-flight requests in parallel mode
  --timeout SEC           Total timeout per request
  --check-external        Also fetch links outside the base domain (never crawled into)

Report options:
  --json, -j PATH         Save the JSON report to a file
  --html, -h PATH         Save the HTML report to a file
  --template, -t DIR      Directory with a custom report.html.j2

Logging:
  --log-level LEVEL       DEBUG, INFO, WARNING, ...
  --log-file PATH         Also write logs to this file
  --log-format FMT        Format string for log records

Example:
  dead-links --parallel --start /docs https://example.com
"""
import sys
from pathlib import Path

import click

from dead_links import __version__
from dead_links.config import load_config
from dead_links.engine import run_scan
from dead_links.logger import DEFAULT_FORMAT, init_logging
from dead_links.report.html_report import render_html
from dead_links.report.json_report import render_json
from dead_links.report.table_report import render_table
from dead_links.utils import UrlJoinError

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='dead-links, version %(version)s')
@click.argument('base_domain')
@click.option(
    '--parallel', '-p', is_flag=True,
    help='Run the crawler concurrently'
)
@click.option(
    '--start', '-s', 'start',
    default=None,
    help='Relative path from the base domain to start searching from. Ex: /believe'
)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option(
    '--max-concurrency', 'max_concurrency',
    type=click.IntRange(min=1),
    default=None,
    help='Max requests in flight in parallel mode (unbounded if omitted)'
)
@click.option(
    '--timeout', 'timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Total timeout per request, seconds'
)
@click.option(
    '--check-external', 'check_external', is_flag=True,
    help='Also check links pointing outside the base domain'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the JSON report to a file'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the HTML report to a file'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory with a custom report.html.j2'
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
    help='Log file (stderr only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Format string for log records'
)
def cli(base_domain, parallel, start, config_path, max_concurrency, timeout, check_external,
        json_output, html_output, template_dir, log_level, log_file, log_format):
    """Scrape dead links on the website at BASE_DOMAIN."""
    logger = init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
    )
    try:
        cfg = load_config(
            config_path,
            base_url=base_domain,
            start=start,
            parallel=parallel or None,
            max_concurrency=max_concurrency,
            timeout=timeout,
            check_external=check_external or None,
        )
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Invalid configuration: {e}')

    click.echo(f'Base domain: {cfg.base_url}')
    if cfg.start:
        click.echo(f'Starting search from: {cfg.start}')
    try:
        start_url = cfg.start_url
    except UrlJoinError as e:
        print_error(f'Cannot build start URL: {e}')
    logger.info('Start URL: %s', start_url)

    try:
        report = run_scan(cfg)
    except Exception as e:
        print_error(f'Scanning failed: {e}')

    click.echo()
    click.echo(render_table(report), nl=False)

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Failed to save JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Failed to save HTML: {e}')


if __name__ == "__main__":
    cli()
