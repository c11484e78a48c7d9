# File: tests/test_utils.py
import pytest

from dead_links.utils import UrlJoinError, in_scope, join_path, last_segment, resolve_url


@pytest.mark.parametrize(
    "base,elem,expected",
    [
        ("https://example.test", "", "https://example.test"),
        ("https://example.test/", "", "https://example.test/"),
        ("https://example.test", "/a", "https://example.test/a"),
        ("https://example.test", "a", "https://example.test/a"),
        ("https://example.test/docs", "/guide", "https://example.test/docs/guide"),
        ("https://example.test", "/docs/", "https://example.test/docs/"),
        ("https://example.test", "/a/../b", "https://example.test/b"),
        ("https://example.test", "//cdn.test/x", "https://example.test/cdn.test/x"),
        ("https://example.test", "/a//b", "https://example.test/a/b"),
    ],
)
def test_join_path(base, elem, expected):
    assert join_path(base, elem) == expected


def test_join_path_rejects_malformed_base():
    with pytest.raises(UrlJoinError):
        join_path("http://[::1", "/a")


def test_resolve_url_only_joins_root_relative_paths():
    base = "https://example.test"
    assert resolve_url("/a", base) == "https://example.test/a"
    assert resolve_url("https://external.test/x", base) == "https://external.test/x"
    assert resolve_url("page.html", base) == "page.html"
    assert resolve_url("mailto:someone@example.test", base) == "mailto:someone@example.test"


def test_in_scope_is_a_string_prefix_check():
    base = "https://example.test"
    assert in_scope("https://example.test", base)
    assert in_scope("https://example.test/a/b", base)
    assert not in_scope("https://external.test/x", base)
    assert not in_scope("http://example.test/a", base)
    assert not in_scope("/a", base)


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://example.test/a/b", "b"),
        ("https://example.test/b", "b"),
        ("https://example.test/dir/", ""),
        ("https://example.test/q?x=1", "q?x=1"),
    ],
)
def test_last_segment(url, expected):
    assert last_segment(url) == expected
