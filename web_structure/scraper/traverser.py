# web_structure/scraper/traverser.py
"""
Recursive traversal of same-site links, building the result tree.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, MutableSet, Optional

from web_structure.config import ScrapeConfig
from web_structure.scraper.models import PageResult
from web_structure.scraper.page import PageScraper
from web_structure.utils import is_same_domain, is_valid_url

__all__ = ("CrawlTraverser",)


class CrawlTraverser:
    """Depth-bounded, cycle-safe crawl. Children are visited one at a time."""

    def __init__(
        self,
        scraper: PageScraper,
        config: ScrapeConfig,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.scraper = scraper
        self.config = config
        self.logger = logger or logging.getLogger("WebStructure")

    async def traverse(self, url: str, depth: int = 0, visited: Optional[MutableSet[str]] = None) -> PageResult:
        if visited is None:
            visited = set()

        scraped = await self.scraper.scrape_page(url, depth, visited)
        if depth >= self.config.max_depth:
            return scraped.result

        children: List[PageResult] = []
        for link in self.child_links(url, scraped.links, visited):
            self.logger.info("scraping %s...", link)
            try:
                child = await self.traverse(link, depth + 1, visited)
            except Exception as exc:
                self.logger.warning("Error scraping child page %s: %s", link, exc)
                if self.config.break_when_failed:
                    raise
                continue
            children.append(child)

        return scraped.result.with_children(children)

    def child_links(self, parent_url: str, links: Iterable[str], visited: MutableSet[str]) -> List[str]:
        return [
            link
            for link in links
            if is_valid_url(link) and link not in visited and self.follows(parent_url, link)
        ]

    def follows(self, parent_url: str, link: str) -> bool:
        """A supplied ``exclude_child_page`` decides alone, and a truthy result means follow.

        Without one, only links on the parent's hostname are followed.
        """
        predicate = self.config.exclude_child_page
        if predicate is not None:
            return bool(predicate(link))
        return is_same_domain(parent_url, link)
