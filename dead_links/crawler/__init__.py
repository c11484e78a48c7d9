# dead_links/crawler/__init__.py
"""dead_links.crawler: traversal, fetching and shared crawl state."""

from dead_links.crawler.crawler import DeadLinkCrawler
from dead_links.crawler.fetcher import Fetcher
from dead_links.crawler.models import CrawlOutcome, DeadReason, FetchDead, FetchOk, FetchResult

__all__ = ["DeadLinkCrawler", "Fetcher", "CrawlOutcome", "DeadReason", "FetchDead", "FetchOk", "FetchResult"]
