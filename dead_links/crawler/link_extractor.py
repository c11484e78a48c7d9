# dead_links/crawler/link_extractor.py
"""
Link extraction for the dead-link crawler.
"""
from __future__ import annotations

from typing import List, Union

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag


def extract_links(markup: Union[str, bytes]) -> List[str]:
    """
    Return the ``href`` values of every ``<a>`` tag, in document order.

    Values are returned as written in the page (only surrounding whitespace
    is stripped); resolving them is the crawler's job. Anchors without an
    ``href``, with an empty one or with a non-string value are skipped.
    Broken markup never raises, it just yields fewer links.
    """
    try:
        soup = BeautifulSoup(markup, "html.parser")
    except ParserRejectedMarkup:
        return []
    links: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        raw = href_val.strip()
        if raw:
            links.append(raw)
    return links
