# File: dead_links/aggregator.py
"""dead_links.aggregator: turns a finished crawl into the report model used by every renderer."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import List, TypedDict

from dead_links.crawler.models import CrawlOutcome
from dead_links.utils import last_segment


class DeadLinkInfo(TypedDict):
    """One report row."""

    page: str
    link: str
    url: str


@dataclass(slots=True)
class ScanReport:
    """Result of one crawl: the dead links and a few counters."""

    base_url: str
    start_url: str
    mode: str
    pages_fetched: int = 0
    urls_visited: int = 0
    start_dead: bool = False
    dead_links: List[DeadLinkInfo] = field(default_factory=list)

    def json(self, *, pretty: bool = False) -> str:
        """JSON representation of the report."""
        return json.dumps(asdict(self), ensure_ascii=False, indent=2 if pretty else None)


def aggregate_results(outcome: CrawlOutcome) -> ScanReport:
    """Build a ScanReport; rows are sorted by page, then link, then URL."""
    rows: List[DeadLinkInfo] = [
        {"page": page, "link": last_segment(url), "url": url}
        for url, page in outcome.dead_links.items()
    ]
    rows.sort(key=lambda r: (r["page"], r["link"], r["url"]))
    return ScanReport(
        base_url=outcome.base_url,
        start_url=outcome.start_url,
        mode=outcome.mode,
        pages_fetched=outcome.pages_fetched,
        urls_visited=outcome.urls_visited,
        start_dead=outcome.start_dead,
        dead_links=rows,
    )
