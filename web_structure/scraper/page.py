# web_structure/scraper/page.py
"""
Single page scraping: load once, extract all fields concurrently, collect links.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, MutableSet, Optional

from web_structure.browser.base import BrowserSession, Page
from web_structure.config import ScrapeConfig
from web_structure.scraper.extractor import SelectorExtractor
from web_structure.scraper.models import ExtractedValue, PageResult, ScrapedPage
from web_structure.utils import remove_duplicates

__all__ = ("PageScraper",)


class PageScraper:
    """Scrapes one URL with a fresh page from ``browser``; the page is always closed."""

    def __init__(
        self,
        browser: BrowserSession,
        config: ScrapeConfig,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.browser = browser
        self.config = config
        self.logger = logger or logging.getLogger("WebStructure")

    async def scrape_page(self, url: str, depth: int, visited: MutableSet[str]) -> ScrapedPage:
        if url in visited:
            self.logger.info("skip %s: already visited", url)
            return ScrapedPage(PageResult.already_visited(url))
        # marked before navigation so a concurrent entry for the same URL stops above
        visited.add(url)

        page = await self.browser.new_page()
        try:
            self.logger.info("prepare loading %s (depth %d)...", url, depth)
            await page.goto(url, timeout=self.config.wait_for_page_load_timeout)
            title = await page.title()
            data = await self._extract_fields(page)
            links = await self._collect_links(page)
        finally:
            await page.close()

        return ScrapedPage(PageResult(url=url, title=title, data=data), links)

    async def _extract_fields(self, page: Page) -> Dict[str, ExtractedValue]:
        extractor = SelectorExtractor(page, self.config, self.logger)
        fields = list(self.config.selectors.items())
        results = await asyncio.gather(
            *(extractor.extract(name, spec) for name, spec in fields),
            return_exceptions=True,
        )

        data: Dict[str, ExtractedValue] = {}
        for (name, spec), result in zip(fields, results):
            if isinstance(result, Exception):
                self.logger.warning(
                    "Failed to extract %s with selector %s after all retries: %s",
                    name, spec, result.__cause__ or result,
                )
                if self.config.break_when_failed:
                    raise result
                data[name] = ""
            elif isinstance(result, BaseException):
                raise result
            else:
                data[name] = result
        return data

    async def _collect_links(self, page: Page) -> List[str]:
        links = remove_duplicates(href for href in await page.anchor_hrefs() if href.startswith("http"))
        self.logger.info("found %d links. Links: %s", len(links), ", ".join(links))
        return links
