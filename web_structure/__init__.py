"""
web_structure package initializer.
Recursive, selector-driven extraction of structured text from rendered pages.
"""
__version__ = "1.0.1"

from web_structure.config import MAX_DEEPEST_DEPTH, ScrapeConfig, load_config, resolve_config  # noqa: E402
from web_structure.errors import (  # noqa: E402
    ConfigurationError,
    ExtractionFailure,
    NavigationError,
    NavigationTimeout,
    SelectorTimeout,
    WebStructureError,
)
from web_structure.scraper.models import PageResult  # noqa: E402
from web_structure.session import ScrapeSession, scrape, scrape_sync  # noqa: E402

__all__ = [
    "MAX_DEEPEST_DEPTH",
    "ConfigurationError",
    "ExtractionFailure",
    "NavigationError",
    "NavigationTimeout",
    "PageResult",
    "ScrapeConfig",
    "ScrapeSession",
    "SelectorTimeout",
    "WebStructureError",
    "load_config",
    "resolve_config",
    "scrape",
    "scrape_sync",
]
