"""Tests for formatter modules."""

import csv
import io
import json
from datetime import datetime, timezone

import pytest
from rich.console import Console

from linkpull.formatters import get_formatter
from linkpull.formatters.csv import CSV_HEADER, CSVFormatter
from linkpull.formatters.json import JSONFormatter
from linkpull.formatters.summary import SummaryFormatter
from linkpull.formatters.text import TextFormatter
from linkpull.models.config import FilterConfig, LinkScope
from linkpull.models.results import CrawlResult


@pytest.fixture
def result():
    return CrawlResult(
        url="https://example.com",
        final_url="https://example.com/",
        status_code=200,
        title="Example [Domain]",
        links=["https://example.com/a", "https://other.com/b,c"],
        timestamp=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )


class TestFormatterFactory:
    """Test formatter factory function."""

    @pytest.mark.parametrize(
        "name,cls",
        [
            ("json", JSONFormatter),
            ("txt", TextFormatter),
            ("csv", CSVFormatter),
            ("summary", SummaryFormatter),
            ("JSON", JSONFormatter),
        ],
    )
    def test_get_formatter(self, name, cls):
        assert isinstance(get_formatter(name), cls)

    def test_get_invalid_formatter(self):
        """Test getting invalid formatter raises error."""
        with pytest.raises(ValueError, match="Unknown format"):
            get_formatter("markdown")


class TestJSONFormatter:
    """Test JSON formatter."""

    def test_fields(self, result):
        """Test that page metadata and links are serialized."""
        data = json.loads(JSONFormatter().format_content(result))

        assert data["url"] == "https://example.com"
        assert data["final_url"] == "https://example.com/"
        assert data["status_code"] == 200
        assert data["title"] == "Example [Domain]"
        assert data["links"] == result.links
        assert data["link_count"] == 2
        assert data["crawler_type"] == "enhanced"
        assert data["timestamp"] == "2024-01-02T03:04:05+00:00"
        assert "error" not in data

    def test_filters_block(self, result):
        """Test that the applied filters are reported."""
        filters = FilterConfig(scope=LinkScope.INTERNAL, exclude_patterns=[".jpg"])
        data = json.loads(JSONFormatter().format_content(result, filters))

        assert data["filters"] == {
            "internal_only": True,
            "external_only": False,
            "exclude_patterns": [".jpg"],
        }

    def test_default_filters_block(self, result):
        data = json.loads(JSONFormatter().format_content(result))
        assert data["filters"] == {"internal_only": False, "external_only": False, "exclude_patterns": []}

    def test_error_included(self):
        failed = CrawlResult(url="https://x.com", error="Request failed with status code 500", status_code=500)
        data = json.loads(JSONFormatter().format_content(failed))
        assert data["error"] == "Request failed with status code 500"
        assert data["links"] == []

    def test_indent_option(self, result):
        """Test that indent=False produces single-line output."""
        output = JSONFormatter(indent=False).format_content(result)
        assert "\n" not in output


class TestTextFormatter:
    """Test plain text formatter."""

    def test_one_link_per_line(self, result):
        assert TextFormatter().format_content(result) == "https://example.com/a\nhttps://other.com/b,c"

    def test_empty(self):
        assert TextFormatter().format_content(CrawlResult(url="https://x.com")) == ""


class TestCSVFormatter:
    """Test CSV formatter."""

    def test_header_and_rows(self, result):
        """Test the bare header and that every row field is quoted."""
        lines = CSVFormatter().format_content(result).splitlines()

        assert lines[0] == ",".join(CSV_HEADER) == "URL,Title,Status"
        assert lines[1] == '"https://example.com/a","",""'
        assert lines[2] == '"https://other.com/b,c","",""'

    def test_rows_parse_back(self, result):
        rows = list(csv.reader(io.StringIO(CSVFormatter().format_content(result))))
        assert rows[1:] == [["https://example.com/a", "", ""], ["https://other.com/b,c", "", ""]]

    def test_header_only_when_empty(self):
        assert CSVFormatter().format_content(CrawlResult(url="https://x.com")) == "URL,Title,Status\n"


class TestSummaryFormatter:
    """Test console summary formatter."""

    def test_plain_content(self, result):
        """Test that saved summaries are plain text with markup removed."""
        content = SummaryFormatter().format_content(result)

        assert "=== Crawl Results ===" in content
        assert "[bold]" not in content
        assert "Title: Example [Domain]" in content
        assert "Total Links Found: 2" in content
        assert "1. https://example.com/a" in content
        assert "2. https://other.com/b,c" in content

    def test_print_to_console(self, result):
        """Test that bracketed text in titles survives rich rendering."""
        console = Console(record=True, width=200)
        SummaryFormatter().print_to(console, result)
        output = console.export_text()

        assert "Title: Example [Domain]" in output
        assert "Status: 200" in output


class TestSave:
    """Test writing formatted output to disk."""

    def test_save_creates_parent_dirs(self, result, tmp_path):
        path = tmp_path / "nested" / "links.txt"
        saved = TextFormatter().save(result, path)

        assert saved == path
        assert path.read_text(encoding="utf-8") == "https://example.com/a\nhttps://other.com/b,c"

    def test_save_csv_line_endings(self, result, tmp_path):
        path = tmp_path / "links.csv"
        CSVFormatter().save(result, path)
        assert b"\r\n" not in path.read_bytes()

    @pytest.mark.parametrize(
        "cls,ext",
        [(JSONFormatter, ".json"), (TextFormatter, ".txt"), (CSVFormatter, ".csv"), (SummaryFormatter, ".txt")],
    )
    def test_extensions(self, cls, ext):
        assert cls().get_file_extension() == ext
