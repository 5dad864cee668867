# web_structure/scraper/extractor.py
"""
Field extraction: run every selector of a field against an already loaded
page, keep only the outermost matches, and merge their text.
"""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence, Union

from web_structure.browser.base import ElementHandle, Page
from web_structure.config import ScrapeConfig
from web_structure.errors import ExtractionFailure
from web_structure.retry import retry
from web_structure.scraper.models import ExtractedValue, collapse
from web_structure.utils import collapse_whitespace, remove_duplicates

__all__ = ("SelectorExtractor", "outermost_elements")


async def outermost_elements(elements: Sequence[ElementHandle]) -> List[ElementHandle]:
    """Drop every element that has an ancestor in ``elements``; order is kept."""
    matched = set(elements)
    kept: List[ElementHandle] = []
    for element in elements:
        parent = await element.parent()
        while parent is not None:
            if parent in matched:
                break
            parent = await parent.parent()
        else:
            kept.append(element)
    return kept


class SelectorExtractor:
    """Extracts field values from one page."""

    def __init__(self, page: Page, config: ScrapeConfig, logger: Optional[logging.Logger] = None) -> None:
        self.page = page
        self.config = config
        self.logger = logger or logging.getLogger("WebStructure")

    async def extract(self, field: str, selectors: Union[str, Sequence[str]]) -> ExtractedValue:
        """Values for ``field``; raises ExtractionFailure once all retries failed."""
        selector_list = [selectors] if isinstance(selectors, str) else list(selectors)

        def _on_retry(attempt: int, exc: BaseException, delay: float) -> None:
            self.logger.warning(
                "Retrying %s (attempt %d/%d) in %.2fs: %s",
                field, attempt + 2, self.config.retry_count, delay, exc,
            )

        try:
            values = await retry(
                lambda: self._extract_once(field, selector_list),
                self.config.retry_count,
                self.config.retry_base_delay,
                on_retry=_on_retry,
            )
        except Exception as exc:
            raise ExtractionFailure(field, selectors) from exc
        return collapse(values)

    async def _extract_once(self, field: str, selectors: List[str]) -> List[str]:
        results = await asyncio.gather(
            *(self._extract_selector(selector) for selector in selectors),
            return_exceptions=True,
        )
        merged: List[str] = []
        errors: List[Exception] = []
        for selector, result in zip(selectors, results):
            if isinstance(result, Exception):
                self.logger.warning("Selector %s for %s failed: %s", selector, field, result)
                errors.append(result)
            elif isinstance(result, BaseException):
                raise result
            else:
                merged.extend(result)
        # a field fails only when none of its selectors worked
        if errors and len(errors) == len(selectors):
            raise errors[-1]
        return remove_duplicates(merged)

    async def _extract_selector(self, selector: str) -> List[str]:
        self.logger.debug("waiting for selector %s...", selector)
        await self.page.wait_for_selector(selector, timeout=self.config.wait_for_selector_timeout)
        elements = await self.page.query_all(selector)
        texts = [collapse_whitespace(await el.text_content()) for el in await outermost_elements(elements)]
        return [text for text in texts if text]
