# File: dead_links/engine.py
"""dead_links.engine: entry points that run a crawl and build the report."""

from __future__ import annotations

import asyncio

from dead_links.aggregator import ScanReport, aggregate_results
from dead_links.config import CrawlerConfig
from dead_links.crawler.crawler import DeadLinkCrawler
from dead_links.crawler.models import CrawlOutcome
from dead_links.logger import logger

__all__ = ["start_scan", "run_scan"]


async def start_scan(config: CrawlerConfig) -> CrawlOutcome:
    """
    Run the crawler inside its own HTTP session and return the raw outcome.

    Parameters
    ----------
    config : CrawlerConfig
        Crawl settings.

    Returns
    -------
    CrawlOutcome
        Dead links and counters of the finished crawl.
    """
    async with DeadLinkCrawler(config) as crawler:
        return await crawler.crawl()


def run_scan(config: CrawlerConfig) -> ScanReport:
    """Blocking wrapper around :func:`start_scan` that also aggregates the outcome."""
    logger.info("Starting scan of %s", config.base_url)
    try:
        outcome = asyncio.run(start_scan(config))
    except Exception as exc:
        logger.error("Scanning failed: %s", exc)
        raise
    return aggregate_results(outcome)
