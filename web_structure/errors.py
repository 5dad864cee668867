# File: web_structure/errors.py
"""Exception hierarchy shared by every layer of web_structure."""
from __future__ import annotations

from typing import Sequence, Union

__all__ = (
    "WebStructureError",
    "ConfigurationError",
    "NavigationError",
    "NavigationTimeout",
    "SelectorTimeout",
    "ExtractionFailure",
)


class WebStructureError(Exception):
    """Base class for all errors raised by the scraper."""


class ConfigurationError(WebStructureError, ValueError):
    """Invalid options; raised before any page is opened."""


class NavigationError(WebStructureError):
    """The browser could not load a page."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"navigation to {url} failed" + (f": {reason}" if reason else ""))


class NavigationTimeout(NavigationError):
    """Page did not reach network idle within the page-load timeout."""


class SelectorTimeout(WebStructureError):
    """No element matched a selector within the wait timeout."""

    def __init__(self, selector: str, timeout: float) -> None:
        self.selector = selector
        self.timeout = timeout
        super().__init__(f"selector {selector!r} not found within {timeout:g}s")


class ExtractionFailure(WebStructureError):
    """A field could not be extracted after all retries."""

    def __init__(self, field: str, selectors: Union[str, Sequence[str]]) -> None:
        self.field = field
        self.selectors = selectors
        super().__init__(f"failed to extract {field} with selector {selectors}")
