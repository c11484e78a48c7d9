# File: tests/test_link_extractor.py
from dead_links.crawler.link_extractor import extract_links


def test_hrefs_in_document_order():
    html = (
        '<html><body><a href="/b">B</a><p><a href="https://external.test/x">X</a></p>'
        '<a href="/a">A</a></body></html>'
    )
    assert extract_links(html) == ["/b", "https://external.test/x", "/a"]


def test_duplicates_are_kept():
    assert extract_links('<a href="/a">1</a><a href="/a">2</a>') == ["/a", "/a"]


def test_anchors_without_href_and_other_tags_are_ignored():
    html = '<a name="top">top</a><link href="/style.css"><img src="/i.png"><a href="">empty</a>'
    assert extract_links(html) == []


def test_uppercase_tags_and_whitespace():
    assert extract_links('<A HREF="  /upper  ">U</A>') == ["/upper"]


def test_malformed_markup_is_tolerated():
    html = '<div><a href="/ok">ok<a href=/unquoted>u</div></span><a href="/tail"'
    links = extract_links(html)
    assert "/ok" in links
    assert "/unquoted" in links


def test_entities_are_unescaped():
    assert extract_links('<a href="/search?a=1&amp;b=2">s</a>') == ["/search?a=1&b=2"]


def test_bytes_input():
    assert extract_links(b'<a href="/bytes">b</a>') == ["/bytes"]
