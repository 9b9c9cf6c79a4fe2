"""Plain text formatter - one URL per line."""

from typing import Optional

from ..models.config import FilterConfig
from ..models.results import CrawlResult
from .base import BaseFormatter


class TextFormatter(BaseFormatter):
    """Bare link list, suitable for piping into other tools."""

    def format_content(self, result: CrawlResult, filters: Optional[FilterConfig] = None) -> str:
        return "\n".join(result.links)

    def get_file_extension(self) -> str:
        return ".txt"
