# web_structure/browser/playwright_engine.py
"""
Playwright implementation of the browser protocols.

Each ``query_all`` call evaluates the selector once inside the page and brings
back a snapshot per matched element: its text and the chain of ancestor ids.
Ids are assigned per call, so handles from one ``query_all`` result can be
compared with each other (and with the parents they expose) but not with
handles from another call.
"""
from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from playwright.async_api import Browser, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page as PlaywrightPageHandle
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from web_structure.errors import NavigationError, NavigationTimeout, SelectorTimeout

__all__ = ("PlaywrightEngine", "PlaywrightSession", "PlaywrightPage", "SnapshotElement")

_SNAPSHOT_JS = """
(els) => {
  const ids = new Map(els.map((el, i) => [el, i]));
  let next = -1;
  const idOf = (node) => {
    if (!ids.has(node)) ids.set(node, next--);
    return ids.get(node);
  };
  return els.map((el) => {
    const ancestors = [];
    for (let p = el.parentElement; p; p = p.parentElement) ancestors.push(idOf(p));
    return { text: el.textContent, ancestors };
  });
}
"""

_HREFS_JS = "(anchors) => anchors.map((a) => a.href)"


def _ms(seconds: float) -> float:
    return seconds * 1000.0


class SnapshotElement:
    """Element handle backed by an in-page snapshot."""

    __slots__ = ("key", "_text", "_ancestors")

    def __init__(self, key: int, text: Optional[str], ancestors: Tuple[int, ...]) -> None:
        self.key = key
        self._text = text
        self._ancestors = ancestors

    def __hash__(self) -> int:
        return hash(self.key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SnapshotElement):
            return NotImplemented
        return self.key == other.key

    def __repr__(self) -> str:
        return f"SnapshotElement(key={self.key})"

    async def text_content(self) -> Optional[str]:
        return self._text

    async def parent(self) -> Optional["SnapshotElement"]:
        if not self._ancestors:
            return None
        return SnapshotElement(self._ancestors[0], None, self._ancestors[1:])


class PlaywrightPage:
    def __init__(self, page: PlaywrightPageHandle) -> None:
        self._page = page

    async def goto(self, url: str, *, timeout: float) -> None:
        try:
            await self._page.goto(url, wait_until="networkidle", timeout=_ms(timeout))
        except PlaywrightTimeoutError as exc:
            raise NavigationTimeout(url, exc.message) from exc
        except PlaywrightError as exc:
            raise NavigationError(url, exc.message) from exc

    async def title(self) -> str:
        return await self._page.title()

    async def wait_for_selector(self, selector: str, *, timeout: float) -> None:
        try:
            # any attached match counts, visible or not
            await self._page.wait_for_selector(selector, state="attached", timeout=_ms(timeout))
        except PlaywrightTimeoutError as exc:
            raise SelectorTimeout(selector, timeout) from exc

    async def query_all(self, selector: str) -> Sequence[SnapshotElement]:
        raw: List[dict[str, Any]] = await self._page.eval_on_selector_all(selector, _SNAPSHOT_JS)
        return [
            SnapshotElement(index, item.get("text"), tuple(item.get("ancestors") or ()))
            for index, item in enumerate(raw)
        ]

    async def anchor_hrefs(self) -> List[str]:
        hrefs = await self._page.eval_on_selector_all("a", _HREFS_JS)
        return [h for h in hrefs if isinstance(h, str)]

    async def close(self) -> None:
        await self._page.close()


class PlaywrightSession:
    def __init__(self, playwright: Playwright, browser: Browser) -> None:
        self._playwright = playwright
        self._browser = browser

    async def new_page(self) -> PlaywrightPage:
        return PlaywrightPage(await self._browser.new_page())

    async def close(self) -> None:
        try:
            await self._browser.close()
        finally:
            await self._playwright.stop()


class PlaywrightEngine:
    """Launches a Chromium (by default) browser through Playwright."""

    def __init__(self, *, headless: bool = True, browser_type: str = "chromium") -> None:
        self.headless = headless
        self.browser_type = browser_type

    async def launch(self) -> PlaywrightSession:
        playwright = await async_playwright().start()
        try:
            launcher = getattr(playwright, self.browser_type)
            browser = await launcher.launch(headless=self.headless)
        except BaseException:
            await playwright.stop()
            raise
        return PlaywrightSession(playwright, browser)
