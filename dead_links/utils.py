# File: dead_links/utils.py
"""dead_links.utils: URL helpers shared by the crawler, the config and the reports."""

from __future__ import annotations

import posixpath
from typing import Sequence
from urllib.parse import urlsplit, urlunsplit

__all__: Sequence[str] = (
    "UrlJoinError",
    "join_path",
    "resolve_url",
    "in_scope",
    "last_segment",
)


class UrlJoinError(ValueError):
    """Raised when a path cannot be joined onto a base URL."""


def join_path(base: str, *elems: str) -> str:
    """Append path segments to the path of *base*.

    Segments are joined with ``/`` onto the existing path and ``.``/``..``
    are collapsed. A trailing slash on the last segment is preserved, so
    ``join_path("https://a.test", "/docs/")`` gives ``https://a.test/docs/``.
    Query and fragment of *base* are kept.
    """
    try:
        parts = urlsplit(base)
    except ValueError as exc:
        raise UrlJoinError(f"cannot join {elems!r} onto {base!r}: {exc}") from exc

    segments = [parts.path, *elems]
    joined = "/".join(s for s in segments if s)
    if joined:
        path = posixpath.normpath("/" + joined.lstrip("/"))
        if segments[-1].endswith("/") and not path.endswith("/"):
            path += "/"
    else:
        path = ""
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


def resolve_url(candidate: str, base: str) -> str:
    """Make *candidate* absolute when it is a root-relative path, else return it unchanged."""
    if candidate.startswith("/"):
        return join_path(base, candidate)
    return candidate


def in_scope(url: str, base: str) -> bool:
    """A URL belongs to the site iff it has the base domain as a string prefix."""
    return url.startswith(base)


def last_segment(url: str) -> str:
    """Everything after the last ``/`` of *url*."""
    return url.rsplit("/", 1)[-1]
