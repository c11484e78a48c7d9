# File: tests/helpers.py
"""Shared helpers for the test-suite: stub fetcher, config factory, tiny aiohttp sites."""
from __future__ import annotations

import asyncio
from collections import Counter
from collections.abc import AsyncIterator
from typing import Dict, List, Mapping, Optional, Union

from aiohttp import web

from dead_links.config import CrawlerConfig
from dead_links.crawler.models import DeadReason, FetchDead, FetchOk, FetchResult

BASE = "https://example.test"

#: a page is either its list of hrefs or the HTTP status it fails with
PageDef = Union[List[str], int]


class StubFetcher:
    """
    In-memory stand-in for Fetcher.

    *pages* maps absolute URLs to their links (or to a failing status),
    *redirects* maps a requested URL to the URL that serves it, *delays*
    holds per-URL sleeps used to control task interleaving. Unknown URLs
    fail like an unreachable host.
    """

    def __init__(
        self,
        pages: Mapping[str, PageDef],
        redirects: Optional[Mapping[str, str]] = None,
        delays: Optional[Mapping[str, float]] = None,
    ) -> None:
        self.pages = dict(pages)
        self.redirects = dict(redirects or {})
        self.delays = dict(delays or {})
        self.calls: Counter[str] = Counter()
        self.served: Counter[str] = Counter()

    async def fetch(self, url: str) -> FetchResult:
        self.calls[url] += 1
        await asyncio.sleep(self.delays.get(url, 0))
        final = self.redirects.get(url, url)
        page = self.pages.get(final)
        if page is None:
            return FetchDead(url, DeadReason.TRANSPORT, detail="connection refused")
        if isinstance(page, int):
            return FetchDead(url, DeadReason.STATUS, status=page)
        self.served[final] += 1
        return FetchOk(url, final, list(page))


def make_config(parallel: bool = False, **kwargs) -> CrawlerConfig:
    return CrawlerConfig(base_url=kwargs.pop("base_url", BASE), parallel=parallel, **kwargs)


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


def html_page(*hrefs: str) -> str:
    return "".join(f'<a href="{href}">{href}</a>' for href in hrefs)


def counting_app(routes: Dict[str, object], hits: Counter) -> web.Application:
    """
    Build an app from ``path -> route``: a tuple of hrefs renders an HTML page,
    an int answers with that status, a string starting with ``>`` redirects.
    Every request increments ``hits[path]``.
    """
    app = web.Application()

    def make_handler(path: str, route: object):
        async def handler(_request: web.Request) -> web.StreamResponse:
            hits[path] += 1
            if isinstance(route, int):
                return web.Response(status=route, text="nope")
            if isinstance(route, str) and route.startswith(">"):
                raise web.HTTPFound(route[1:])
            return web.Response(text=html_page(*route), content_type="text/html")

        return handler

    for path, route in routes.items():
        app.router.add_get(path, make_handler(path, route))
    return app
