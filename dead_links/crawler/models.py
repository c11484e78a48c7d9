# dead_links/crawler/models.py
"""
Data models for the dead-link crawler.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


class DeadReason(str, enum.Enum):
    """Why a URL counts as dead."""

    TRANSPORT = "transport-failure"
    STATUS = "non-success-status"


@dataclass(slots=True, frozen=True)
class FetchOk:
    """A page answered with the success status.

    ``final_url`` is the URL that actually served the body, after redirects.
    """

    requested_url: str
    final_url: str
    links: List[str] = field(default_factory=list)

    @property
    def redirected(self) -> bool:
        return self.final_url != self.requested_url


@dataclass(slots=True, frozen=True)
class FetchDead:
    """A page could not be fetched or answered with a non-success status."""

    url: str
    reason: DeadReason
    status: Optional[int] = None
    detail: str = ""


FetchResult = Union[FetchOk, FetchDead]


@dataclass(slots=True)
class CrawlOutcome:
    """Everything a finished crawl hands over to the reports."""

    base_url: str
    start_url: str
    parallel: bool
    dead_links: Dict[str, str] = field(default_factory=dict)
    urls_visited: int = 0
    pages_fetched: int = 0
    start_dead: bool = False

    @property
    def mode(self) -> str:
        return "parallel" if self.parallel else "sequential"
