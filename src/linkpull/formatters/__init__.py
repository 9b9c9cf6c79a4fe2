"""Output formats for crawl results."""

from typing import Union

from .base import BaseFormatter
from .csv import CSVFormatter
from .json import JSONFormatter
from .summary import SummaryFormatter
from .text import TextFormatter

__all__ = [
    "BaseFormatter",
    "CSVFormatter",
    "JSONFormatter",
    "SummaryFormatter",
    "TextFormatter",
    "get_formatter",
]


def get_formatter(format_name: str, **kwargs: Union[str, int, bool]) -> BaseFormatter:
    """Get formatter instance by name.

    Args:
        format_name: Format name ('json', 'txt', 'csv', 'summary')
        **kwargs: Formatter-specific configuration

    Returns:
        Formatter instance

    Raises:
        ValueError: If format name is unknown
    """
    formatters: dict[str, type[BaseFormatter]] = {
        "json": JSONFormatter,
        "txt": TextFormatter,
        "csv": CSVFormatter,
        "summary": SummaryFormatter,
    }

    formatter_class = formatters.get(format_name.lower())
    if not formatter_class:
        raise ValueError(f"Unknown format: {format_name}. Available formats: {', '.join(formatters.keys())}")

    return formatter_class(**kwargs)
