# File: dead_links/report/table_report.py
"""dead_links.report.table_report: the page → link table printed at the end of a crawl."""

from __future__ import annotations

from typing import List, Tuple

from dead_links.aggregator import ScanReport

HEADER: Tuple[str, str] = ("Page", "Link")


def render_table(report: ScanReport, padding: int = 4) -> str:
    """Two tab-stop aligned columns, ``Page`` and ``Link``, one row per dead link.

    The first column is padded to its widest cell plus *padding* spaces;
    the last column is written as is.
    """
    rows: List[Tuple[str, str]] = [HEADER]
    rows.extend((row["page"], row["link"]) for row in report.dead_links)
    width = max(len(page) for page, _ in rows) + padding
    return "".join(f"{page.ljust(width)}{link}\n" for page, link in rows)
