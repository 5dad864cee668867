# web_structure/browser/base.py
"""
Interfaces the scraper needs from a rendering engine.

The scraper never parses HTML itself: it asks the engine for evaluated DOM
results. Any object satisfying these protocols can be passed to
:func:`web_structure.session.scrape` in place of the Playwright adapter.
Timeouts are expressed in seconds.
"""
from __future__ import annotations

from typing import List, Optional, Protocol, Sequence


class ElementHandle(Protocol):
    """A matched DOM element. Handles compare equal when they denote the same node."""

    def __hash__(self) -> int: ...

    def __eq__(self, other: object) -> bool: ...

    async def text_content(self) -> Optional[str]: ...

    async def parent(self) -> Optional["ElementHandle"]: ...


class Page(Protocol):
    async def goto(self, url: str, *, timeout: float) -> None:
        """Navigate and wait for network idle; raises NavigationTimeout or NavigationError."""

    async def title(self) -> str: ...

    async def wait_for_selector(self, selector: str, *, timeout: float) -> None:
        """Wait for one matching element; raises SelectorTimeout."""

    async def query_all(self, selector: str) -> Sequence[ElementHandle]: ...

    async def anchor_hrefs(self) -> List[str]:
        """Resolved ``href`` of every ``<a>`` element, in document order."""

    async def close(self) -> None: ...


class BrowserSession(Protocol):
    async def new_page(self) -> Page: ...

    async def close(self) -> None: ...


class BrowserEngine(Protocol):
    async def launch(self) -> BrowserSession: ...
