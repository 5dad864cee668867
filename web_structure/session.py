# File: web_structure/session.py
"""web_structure.session: точка входа. Сливает конфиг, запускает браузер и обход."""

from __future__ import annotations

import asyncio
from typing import Optional

from web_structure.browser.base import BrowserEngine
from web_structure.config import ConfigInput, ScrapeConfig, resolve_config
from web_structure.logger import session_logger
from web_structure.scraper.models import PageResult
from web_structure.scraper.page import PageScraper
from web_structure.scraper.traverser import CrawlTraverser

__all__ = ["ScrapeSession", "scrape", "scrape_sync"]


class ScrapeSession:
    """Один запуск скрапинга: конфиг, логгер, браузер и свой набор посещённых URL."""

    def __init__(self, config: ConfigInput = None, engine: Optional[BrowserEngine] = None) -> None:
        # ConfigurationError here, before anything is launched
        self.config: ScrapeConfig = resolve_config(config)
        self.logger = session_logger(self.config.with_console)
        if engine is None:
            from web_structure.browser.playwright_engine import PlaywrightEngine

            engine = PlaywrightEngine(headless=self.config.headless)
        self.engine = engine

    async def run(self, url: str) -> PageResult:
        """Обходит url начиная с глубины 0 и возвращает дерево результатов."""
        browser = await self.engine.launch()
        try:
            scraper = PageScraper(browser, self.config, self.logger)
            traverser = CrawlTraverser(scraper, self.config, self.logger)
            return await traverser.traverse(url, 0, set())
        finally:
            await browser.close()


async def scrape(url: str, config: ConfigInput = None, *, engine: Optional[BrowserEngine] = None) -> PageResult:
    """Скрапит url (и дочерние страницы до max_depth) и возвращает PageResult."""
    return await ScrapeSession(config, engine).run(url)


def scrape_sync(url: str, config: ConfigInput = None, *, engine: Optional[BrowserEngine] = None) -> PageResult:
    """Синхронная обёртка над :func:`scrape` для скриптов."""
    return asyncio.run(scrape(url, config, engine=engine))
