# dead_links/crawler/tracker.py
"""
Shared crawl state: the set of URLs already scheduled for fetch and the
registry of dead links found so far.

The plain classes are meant for the sequential walk. The ``Atomic*``
variants serialize every mutation behind an internal lock and are the ones
shared between concurrent crawl tasks; callers never see the lock.
"""
from __future__ import annotations

import threading
from typing import Dict, List, Set, Tuple

__all__ = ("VisitedSet", "AtomicVisitedSet", "DeadLinkRegistry", "AtomicDeadLinkRegistry")


class VisitedSet:
    """Set of URL strings; entries are never removed."""

    def __init__(self) -> None:
        self._urls: Set[str] = set()

    def insert(self, url: str) -> bool:
        """Add *url*. Return True if it was new, False if it was already present."""
        if url in self._urls:
            return False
        self._urls.add(url)
        return True

    def __contains__(self, url: object) -> bool:
        return url in self._urls

    def __len__(self) -> int:
        return len(self._urls)


class AtomicVisitedSet(VisitedSet):
    """VisitedSet whose test-and-insert is atomic across threads and tasks."""

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()

    def insert(self, url: str) -> bool:
        with self._lock:
            return super().insert(url)

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._urls

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)


class DeadLinkRegistry:
    """Dead link URL -> the page that referenced it. The last write for a key wins."""

    def __init__(self) -> None:
        self._links: Dict[str, str] = {}

    def record(self, link: str, page: str) -> None:
        self._links[link] = page

    def items(self) -> List[Tuple[str, str]]:
        """Snapshot of ``(link, page)`` pairs."""
        return list(self._links.items())

    def as_dict(self) -> Dict[str, str]:
        return dict(self.items())

    def __len__(self) -> int:
        return len(self._links)


class AtomicDeadLinkRegistry(DeadLinkRegistry):
    """DeadLinkRegistry with lock-serialized upserts and snapshots."""

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()

    def record(self, link: str, page: str) -> None:
        with self._lock:
            self._links[link] = page

    def items(self) -> List[Tuple[str, str]]:
        with self._lock:
            return list(self._links.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._links)
