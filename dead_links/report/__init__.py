# File: dead_links/report/__init__.py
"""dead_links.report: renderers for the crawl results (console table, JSON and HTML)."""

from __future__ import annotations

from dead_links.report.html_report import render_html
from dead_links.report.json_report import render_json
from dead_links.report.table_report import render_table

__all__ = ["render_table", "render_json", "render_html"]
