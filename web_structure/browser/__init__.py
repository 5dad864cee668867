"""Browser engine abstraction used by the scraper."""
from web_structure.browser.base import BrowserEngine, BrowserSession, ElementHandle, Page

__all__ = ["BrowserEngine", "BrowserSession", "ElementHandle", "Page"]
