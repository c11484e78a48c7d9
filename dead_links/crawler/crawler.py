# === FILE: dead_links/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import List, Optional, Tuple

from aiohttp import ClientSession, ClientTimeout

from dead_links.config import CrawlerConfig
from dead_links.crawler.fetcher import Fetcher
from dead_links.crawler.models import CrawlOutcome, FetchDead, FetchResult
from dead_links.crawler.tracker import (
    AtomicDeadLinkRegistry,
    AtomicVisitedSet,
    DeadLinkRegistry,
    VisitedSet,
)
from dead_links.logger import get_logger
from dead_links.utils import UrlJoinError, in_scope, resolve_url

__all__ = ("DeadLinkCrawler",)


class DeadLinkCrawler:
    """Walks every link reachable inside the base domain and collects dead ones.

    Sequential mode awaits each discovered link in turn (depth-first, in
    page order). Parallel mode starts one task per discovered link; a page
    finishes only when all the tasks it started have finished.

    Each URL is fetched at most once per crawl. A dead link is recorded by
    the page that linked to it, under the dead link's resolved URL.
    """

    def __init__(self, config: CrawlerConfig, fetcher: Optional[Fetcher] = None) -> None:
        self.config = config
        self.base_url = config.base_url
        self.parallel = config.parallel
        self.fetcher = fetcher
        self.session: Optional[ClientSession] = None
        self.logger = get_logger()
        self.pages_fetched = 0
        if self.parallel:
            self.visited: VisitedSet = AtomicVisitedSet()
            self.dead: DeadLinkRegistry = AtomicDeadLinkRegistry()
        else:
            self.visited = VisitedSet()
            self.dead = DeadLinkRegistry()

    async def __aenter__(self) -> DeadLinkCrawler:
        if self.fetcher is None:
            options = {}
            if self.config.timeout is not None:
                options["timeout"] = ClientTimeout(total=self.config.timeout)
            self.session = ClientSession(
                **options,
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
            semaphore = None
            if self.parallel and self.config.max_concurrency:
                semaphore = asyncio.Semaphore(self.config.max_concurrency)
            self.fetcher = Fetcher(self.session, semaphore=semaphore)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> CrawlOutcome:
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized")
        start_url = self.config.start_url
        mode = "parallel" if self.parallel else "sequential"
        self.logger.info("Crawl started: %s (%s)", start_url, mode)
        started = time.monotonic()

        if self.parallel:
            failure = await self._scrape(start_url, depth=0)
        else:
            failure = await self._walk(start_url)
        if failure is not None:
            self.logger.warning("Start page %s is dead (%s)", start_url, self._describe(failure))

        duration = time.monotonic() - started
        self.logger.info(
            "Crawl finished: %d pages fetched, %d URLs seen, %d dead links in %.2f s",
            self.pages_fetched, len(self.visited), len(self.dead), duration,
        )
        return CrawlOutcome(
            base_url=self.base_url,
            start_url=start_url,
            parallel=self.parallel,
            dead_links=self.dead.as_dict(),
            urls_visited=len(self.visited),
            pages_fetched=self.pages_fetched,
            start_dead=failure is not None,
        )

    async def _visit(self, candidate: str, depth: int) -> Tuple[str, Optional[FetchDead], List[str]]:
        """Resolve, claim and fetch one link.

        Returns the resolved URL, the failure when the link is dead, and the
        links to follow from it (empty when the page must not be crawled into).
        """
        url = self._resolve(candidate)
        self.logger.debug("Scraping %s (depth %d)", url, depth)

        if not self.visited.insert(url):
            self.logger.debug("Visited, returning: %s", url)
            return url, None, []
        if not self.config.check_external and not in_scope(url, self.base_url):
            self.logger.debug("Outside %s, skipping %s", self.base_url, url)
            return url, None, []

        result: FetchResult = await self.fetcher.fetch(url)  # type: ignore[union-attr]
        self.pages_fetched += 1
        if isinstance(result, FetchDead):
            return url, result, []

        if result.redirected:
            self.logger.debug("Redirected to %s, adding it to visited", result.final_url)
            if not self.visited.insert(result.final_url):
                self.logger.debug("Visited, returning: %s", result.final_url)
                return url, None, []

        # scope is judged on the requested URL, not on the redirect target
        if not in_scope(url, self.base_url):
            return url, None, []
        return url, None, list(result.links)

    async def _walk(self, start_url: str) -> Optional[FetchDead]:
        """Sequential depth-first walk over an explicit stack.

        Each frame carries the page that linked to it, so a dead link is
        recorded against its referrer as soon as it is fetched. Returns the
        failure of the start page, if any.
        """
        stack: List[Tuple[str, Optional[str], int]] = [(start_url, None, 0)]
        start_failure: Optional[FetchDead] = None
        while stack:
            candidate, referrer, depth = stack.pop()
            url, failure, links = await self._visit(candidate, depth)
            if failure is not None:
                if referrer is None:
                    start_failure = failure
                else:
                    self._record(failure, referrer)
                continue
            # reversed, so links come off the stack in page order
            stack.extend((link, url, depth + 1) for link in reversed(links))
        return start_failure

    async def _scrape(self, candidate: str, depth: int) -> Optional[FetchDead]:
        """Visit one link in parallel mode; return its failure if it is dead."""
        url, failure, links = await self._visit(candidate, depth)
        if links:
            async with asyncio.TaskGroup() as group:
                for link in links:
                    group.create_task(self._check(link, url, depth + 1))
        return failure

    async def _check(self, link: str, page: str, depth: int) -> None:
        failure = await self._scrape(link, depth)
        if failure is not None:
            self._record(failure, page)

    def _record(self, failure: FetchDead, page: str) -> None:
        self.dead.record(failure.url, page)
        self.logger.info("Dead link on %s: %s (%s)", page, failure.url, self._describe(failure))

    def _resolve(self, candidate: str) -> str:
        try:
            return resolve_url(candidate, self.base_url)
        except UrlJoinError as exc:
            self.logger.warning("%s", exc)
            return candidate

    @staticmethod
    def _describe(failure: FetchDead) -> str:
        if failure.status is not None:
            return f"HTTP {failure.status}"
        return failure.detail or failure.reason.value
