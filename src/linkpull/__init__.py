"""
linkpull - Extract every navigable link from a web page.

Usage:
    from linkpull import LinkExtractor, LinkpullConfig, PageFetcher

    # Offline: HTML you already have
    result = LinkExtractor().extract(html, "https://example.com")
    print(result.title, result.links)

    # Online: fetch and extract one page
    config = LinkpullConfig(url="https://example.com")
    async with PageFetcher(config) as fetcher:
        crawl = await fetcher.run()
"""

__version__ = "1.0.0"

from .core.fetcher import PageFetcher, crawl_blocking
from .extraction import LinkExtractor, ScriptScanner, StructuralExtractor, normalize_url
from .filters import LinkFilter, filter_links
from .models.config import (
    ExtractionConfig,
    ExtractorMode,
    FilterConfig,
    LinkpullConfig,
    LinkScope,
    NetworkConfig,
    OutputConfig,
)
from .models.results import CrawlResult, ExtractionResult

__all__ = [
    "__version__",
    # Core
    "PageFetcher",
    "crawl_blocking",
    # Extraction
    "LinkExtractor",
    "ScriptScanner",
    "StructuralExtractor",
    "normalize_url",
    # Filtering
    "LinkFilter",
    "filter_links",
    # Config
    "LinkpullConfig",
    "ExtractionConfig",
    "ExtractorMode",
    "FilterConfig",
    "LinkScope",
    "NetworkConfig",
    "OutputConfig",
    # Results
    "CrawlResult",
    "ExtractionResult",
]
