"""Scraping core: field extraction, page scraping and recursive traversal."""
from web_structure.scraper.extractor import SelectorExtractor
from web_structure.scraper.models import ExtractedValue, PageResult, ScrapedPage
from web_structure.scraper.page import PageScraper
from web_structure.scraper.traverser import CrawlTraverser

__all__ = [
    "CrawlTraverser",
    "ExtractedValue",
    "PageResult",
    "PageScraper",
    "ScrapedPage",
    "SelectorExtractor",
]
