# File: tests/test_models.py
import json
import re

import pytest

from web_structure.browser.playwright_engine import SnapshotElement
from web_structure.scraper.extractor import outermost_elements
from web_structure.scraper.models import PageResult, collapse
from web_structure.utils import collapse_whitespace, is_same_domain, is_valid_url, remove_duplicates


@pytest.mark.parametrize(
    "values,expected",
    [([], []), (["one"], "one"), (["one", "two"], ["one", "two"])],
)
def test_collapse(values, expected):
    assert collapse(values) == expected


def test_wire_format_omits_missing_children():
    page = PageResult(url="http://a.test/", title="A", data={"h": "x"})
    wire = page.to_dict()
    assert set(wire) == {"url", "title", "data", "timestamp"}
    assert re.fullmatch(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z", wire["timestamp"])
    assert page.with_children([]).child_pages is None


def test_wire_format_nests_children():
    child = PageResult(url="http://a.test/b", title="B", data={"h": ["1", "2"]})
    root = PageResult(url="http://a.test/", title="A").with_children([child])
    wire = json.loads(json.dumps(root.to_dict()))

    assert wire["childPages"][0]["data"] == {"h": ["1", "2"]}
    assert "childPages" not in wire["childPages"][0]
    assert [p.url for p in root.iter_tree()] == ["http://a.test/", "http://a.test/b"]


def test_already_visited_marker():
    page = PageResult.already_visited("http://a.test/")
    assert page.title == "Already visited"
    assert page.data == {}
    assert page.is_revisit


def test_url_helpers():
    assert is_valid_url("https://example.com/path")
    assert not is_valid_url("not a url")
    assert not is_valid_url("http://[broken")
    assert is_same_domain("http://Example.com/a", "https://example.com:8443/b")
    assert not is_same_domain("http://example.com/", "http://sub.example.com/")


def test_text_helpers():
    assert collapse_whitespace("  a \n\t b  ") == "a b"
    assert collapse_whitespace(None) == ""
    assert remove_duplicates(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


@pytest.mark.asyncio()
async def test_snapshot_elements_resolve_nesting():
    # ids as produced by one in-page evaluation: 0 contains 1, -1 is an unmatched <body>
    outer = SnapshotElement(0, "Outer Inner", (-1,))
    inner = SnapshotElement(1, "Inner", (0, -1))
    side = SnapshotElement(2, "Side", (-1,))

    parent = await inner.parent()
    assert parent == outer and hash(parent) == hash(outer)
    assert await (await outer.parent()).parent() is None
    assert await outermost_elements([outer, inner, side]) == [outer, side]


def test_with_children_restamps_after_children(monkeypatch):
    import web_structure.scraper.models as models

    page = PageResult(url="http://a.test/", title="A", timestamp="2020-01-01T00:00:00.000Z")
    monkeypatch.setattr(models, "iso_timestamp", lambda: "2030-01-01T00:00:00.000Z")

    assert page.with_children([]).timestamp == "2030-01-01T00:00:00.000Z"
    assert page.timestamp == "2020-01-01T00:00:00.000Z"
