"""Base formatter interface."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from rich.console import Console

from ..models.config import FilterConfig
from ..models.results import CrawlResult


class BaseFormatter(ABC):
    """Base class for output formatters.

    Formatters render a CrawlResult as JSON, plain text, CSV, or a
    console summary.
    """

    def __init__(self, **kwargs: Union[str, int, bool]):
        """Initialize formatter.

        Args:
            **kwargs: Formatter-specific options
        """
        self.options = kwargs
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def format_content(self, result: CrawlResult, filters: Optional[FilterConfig] = None) -> str:
        """Render a crawl result.

        Args:
            result: Crawl result with (filtered) links
            filters: Filter configuration that produced the link list

        Returns:
            Formatted output
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get file extension for this format.

        Returns:
            File extension including dot (e.g., '.json', '.txt')
        """
        pass

    def print_to(self, console: Console, result: CrawlResult, filters: Optional[FilterConfig] = None) -> None:
        """Print formatted output to a rich console without markup processing."""
        console.print(
            self.format_content(result, filters),
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def save(self, result: CrawlResult, file_path: Path, filters: Optional[FilterConfig] = None) -> Path:
        """Format and save a crawl result to file.

        Args:
            result: Crawl result to save
            file_path: Destination file path
            filters: Filter configuration that produced the link list

        Returns:
            Path to saved file
        """
        formatted = self.format_content(result, filters)

        # Ensure output directory exists
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(formatted)

        self.logger.debug(f"Saved {result.link_count} links to {file_path}")

        return file_path
