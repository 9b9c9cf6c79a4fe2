"""Human-readable console summary."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from ..models.config import FilterConfig
from ..models.results import CrawlResult
from .base import BaseFormatter


class SummaryFormatter(BaseFormatter):
    """Crawl summary followed by a numbered link list.

    Printed to a console it uses rich styling; saved to a file it is plain text.
    """

    def format_markup(self, result: CrawlResult) -> str:
        """Render the summary as rich markup."""
        lines = [
            "[bold]=== Crawl Results ===[/bold]",
            f"URL: {escape(result.url)}",
            f"Title: {escape(result.title or '')}",
            f"Status: {result.status_code}",
            f"Crawler: {result.crawler_type}",
            f"Total Links Found: {result.link_count}",
            f"Timestamp: {result.timestamp.isoformat()}",
            "",
            "[bold]=== Links ===[/bold]",
        ]
        lines.extend(f"{index}. [cyan]{escape(link)}[/cyan]" for index, link in enumerate(result.links, 1))
        return "\n".join(lines)

    def format_content(self, result: CrawlResult, filters: Optional[FilterConfig] = None) -> str:
        return Text.from_markup(self.format_markup(result)).plain

    def print_to(self, console: Console, result: CrawlResult, filters: Optional[FilterConfig] = None) -> None:
        console.print(self.format_markup(result), highlight=False, emoji=False, soft_wrap=True)

    def get_file_extension(self) -> str:
        return ".txt"
