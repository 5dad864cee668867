# File: tests/test_report.py
import json

from web_structure.report import render_html, render_json
from web_structure.scraper.models import PageResult


def sample_tree() -> PageResult:
    child = PageResult(url="http://example.com/b", title="Child <b>", data={"headings": ["One", "Two"]})
    revisit = PageResult.already_visited("http://example.com/")
    return PageResult(url="http://example.com/", title="Root", data={"title": "Hello"}).with_children([child, revisit])


def test_render_json(tmp_path):
    out = render_json(sample_tree(), tmp_path / "nested" / "result.json")
    data = json.loads(out.read_text(encoding="utf-8"))

    assert data["url"] == "http://example.com/"
    assert data["childPages"][0]["data"]["headings"] == ["One", "Two"]
    assert "childPages" not in data["childPages"][0]


def test_render_json_compact(tmp_path):
    out = render_json(PageResult(url="http://example.com/", title="R"), tmp_path / "r.json", pretty=False)
    assert "\n" not in out.read_text(encoding="utf-8")


def test_render_html(tmp_path):
    out = render_html(sample_tree(), tmp_path / "report.html")
    html = out.read_text(encoding="utf-8")

    assert "Root" in html
    assert "Child &lt;b&gt;" in html
    assert "<li>Two</li>" in html
    assert "3 page(s), 1 already visited" in html


def test_render_html_custom_template(tmp_path):
    templates = tmp_path / "tpl"
    templates.mkdir()
    (templates / "report.html.j2").write_text("{{ root.title }}|{{ page_count }}", encoding="utf-8")

    out = render_html(sample_tree(), tmp_path / "r.html", templates)
    assert out.read_text(encoding="utf-8") == "Root|3"
