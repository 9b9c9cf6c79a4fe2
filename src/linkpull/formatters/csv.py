"""CSV formatter."""

import csv
import io
from typing import Optional

from ..models.config import FilterConfig
from ..models.results import CrawlResult
from .base import BaseFormatter

CSV_HEADER = ["URL", "Title", "Status"]


class CSVFormatter(BaseFormatter):
    """CSV with a bare URL,Title,Status header and one fully quoted row per link.

    Title and Status are per-link columns; the extractor does not fetch
    linked pages, so they are left empty.
    """

    def format_content(self, result: CrawlResult, filters: Optional[FilterConfig] = None) -> str:
        buffer = io.StringIO()
        buffer.write(",".join(CSV_HEADER) + "\n")
        writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_ALL)
        for link in result.links:
            writer.writerow([link, "", ""])
        return buffer.getvalue()

    def get_file_extension(self) -> str:
        return ".csv"
