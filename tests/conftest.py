# File: tests/conftest.py
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pytest

from web_structure.config import ScrapeConfig, resolve_config
from web_structure.errors import NavigationError, SelectorTimeout


class FakeElement:
    """DOM node stand-in; identity is object identity."""

    def __init__(self, text: Optional[str], parent: Optional["FakeElement"] = None) -> None:
        self.text = text
        self._parent = parent

    async def text_content(self) -> Optional[str]:
        return self.text

    async def parent(self) -> Optional["FakeElement"]:
        return self._parent


@dataclass
class FakeDocument:
    title: str = ""
    matches: Dict[str, List[FakeElement]] = field(default_factory=dict)
    links: List[str] = field(default_factory=list)
    #: selector -> number of waits that time out before it starts matching
    failures: Dict[str, int] = field(default_factory=dict)
    navigation_error: Optional[Exception] = None


class FakePage:
    def __init__(self, site: "FakeSite") -> None:
        self.site = site
        self.document: Optional[FakeDocument] = None
        self.closed = False

    async def goto(self, url: str, *, timeout: float) -> None:
        self.site.navigations.append(url)
        await asyncio.sleep(0)
        doc = self.site.documents.get(url)
        if doc is None:
            raise NavigationError(url, "404")
        if doc.navigation_error is not None:
            raise doc.navigation_error
        self.document = doc

    async def title(self) -> str:
        return self.document.title

    async def wait_for_selector(self, selector: str, *, timeout: float) -> None:
        self.site.waits.append(selector)
        await asyncio.sleep(0)
        remaining = self.document.failures.get(selector, 0)
        if remaining > 0:
            self.document.failures[selector] = remaining - 1
            raise SelectorTimeout(selector, timeout)
        if not self.document.matches.get(selector):
            raise SelectorTimeout(selector, timeout)

    async def query_all(self, selector: str) -> List[FakeElement]:
        return list(self.document.matches.get(selector, []))

    async def anchor_hrefs(self) -> List[str]:
        return list(self.document.links)

    async def close(self) -> None:
        self.closed = True
        self.site.open_pages -= 1
        self.site.closed_pages += 1


class FakeSite:
    """In-memory browser engine and session over a set of fake documents."""

    def __init__(self) -> None:
        self.documents: Dict[str, FakeDocument] = {}
        self.navigations: List[str] = []
        self.waits: List[str] = []
        self.launches = 0
        self.session_closed = False
        self.open_pages = 0
        self.max_open_pages = 0
        self.closed_pages = 0

    @staticmethod
    def element(text: Optional[str], parent: Optional[FakeElement] = None) -> FakeElement:
        return FakeElement(text, parent)

    def page(self, url: str, title: str = "", links=(), **kwargs: Any) -> FakeDocument:
        doc = FakeDocument(title=title or url, links=list(links), **kwargs)
        self.documents[url] = doc
        return doc

    async def loaded_page(self, url: str) -> FakePage:
        page = await self.new_page()
        await page.goto(url, timeout=1.0)
        return page

    # engine / session protocol
    async def launch(self) -> "FakeSite":
        self.launches += 1
        return self

    async def new_page(self) -> FakePage:
        self.open_pages += 1
        self.max_open_pages = max(self.max_open_pages, self.open_pages)
        return FakePage(self)

    async def close(self) -> None:
        self.session_closed = True


@pytest.fixture()
def site() -> FakeSite:
    return FakeSite()


@pytest.fixture()
def make_config():
    """
    Build a ScrapeConfig for tests: no backoff, short timeouts, no console output.
    """
    def _make(**overrides: Any) -> ScrapeConfig:
        base = {
            "retry_base_delay": 0,
            "wait_for_selector_timeout": 0.1,
            "wait_for_page_load_timeout": 0.1,
            "with_console": False,
        }
        base.update(overrides)
        return resolve_config(base)

    return _make


@pytest.fixture()
def scrape_log(caplog):
    """Capture records of the project logger (it does not propagate to root)."""
    lg = logging.getLogger("WebStructure")
    lg.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger="WebStructure")
    yield caplog
    lg.removeHandler(caplog.handler)


@pytest.fixture(autouse=True)
def reset_project_logger():
    yield
    lg = logging.getLogger("WebStructure")
    lg.handlers.clear()
    lg.setLevel(logging.NOTSET)
