"""JSON formatter - full crawl result."""

import json
from typing import Optional

from ..models.config import FilterConfig
from ..models.results import CrawlResult
from .base import BaseFormatter


class JSONFormatter(BaseFormatter):
    """JSON format with page metadata, links and the filters applied."""

    def format_content(self, result: CrawlResult, filters: Optional[FilterConfig] = None) -> str:
        """Convert to JSON.

        Args:
            result: Crawl result
            filters: Filter configuration, reported under "filters"

        Returns:
            JSON string
        """
        filters = filters or FilterConfig()
        output = result.to_dict()
        output["filters"] = {
            "internal_only": filters.internal_only,
            "external_only": filters.external_only,
            "exclude_patterns": list(filters.exclude_patterns),
        }

        indent = self.options.get("indent", 2)
        if indent is False:
            return json.dumps(output, ensure_ascii=False)
        return json.dumps(output, indent=indent, ensure_ascii=False)

    def get_file_extension(self) -> str:
        return ".json"
