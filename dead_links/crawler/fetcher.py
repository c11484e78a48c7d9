# dead_links/crawler/fetcher.py
"""
Fetcher module: one HTTP GET per call, classified into a tagged result.
"""
from __future__ import annotations

import asyncio
import contextlib
from typing import AsyncIterator, Optional

from aiohttp import ClientError, ClientSession
from dead_links.crawler.link_extractor import extract_links
from dead_links.crawler.models import DeadReason, FetchDead, FetchOk, FetchResult
from dead_links.logger import get_logger

SUCCESS_STATUS = 200


class Fetcher:
    """Performs GET requests and extracts anchor links from successful HTML responses.

    The fetcher knows nothing about visited URLs or the crawl scope. An
    optional semaphore bounds how many requests are in flight at once.
    """

    def __init__(
        self,
        session: ClientSession,
        *,
        semaphore: Optional[asyncio.Semaphore] = None,
    ) -> None:
        self.session = session
        self._semaphore = semaphore
        self.logger = get_logger()

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch *url*, following redirects.

        Returns FetchOk with the post-redirect URL and the page links, or
        FetchDead on a transport failure or any status other than 200.
        """
        async with self._slot():
            try:
                async with self.session.get(url) as resp:
                    if resp.status != SUCCESS_STATUS:
                        self.logger.debug("%s answered HTTP %s", url, resp.status)
                        return FetchDead(url, DeadReason.STATUS, status=resp.status)
                    final_url = str(resp.url)
                    links = []
                    ctype = resp.headers.get("Content-Type", "").lower()
                    if not ctype or "html" in ctype:
                        try:
                            body = await resp.text(errors="replace")
                        except (ClientError, asyncio.TimeoutError) as exc:
                            self.logger.debug("Body of %s cut short: %s", url, exc)
                        else:
                            links = extract_links(body)
                    return FetchOk(url, final_url, links)
            except (ClientError, asyncio.TimeoutError, ValueError) as exc:
                # ValueError covers URLs aiohttp refuses outright (relative, bad scheme)
                self.logger.debug("Request to %s failed: %r", url, exc)
                return FetchDead(url, DeadReason.TRANSPORT, detail=str(exc) or type(exc).__name__)

    @contextlib.asynccontextmanager
    async def _slot(self) -> AsyncIterator[None]:
        if self._semaphore is None:
            yield
            return
        async with self._semaphore:
            yield
