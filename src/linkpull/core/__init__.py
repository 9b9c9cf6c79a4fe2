"""Page fetch orchestration for linkpull."""

from .fetcher import PageFetcher, crawl_blocking

__all__ = ["PageFetcher", "crawl_blocking"]
