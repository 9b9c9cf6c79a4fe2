"""Result types returned by extraction and page crawls."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional

NO_TITLE = "No title found"


@dataclass(frozen=True)
class ExtractionResult:
    """
    Links and title extracted from one page.

    Each URL appears once. The list keeps first-seen order, but order carries
    no meaning and the source of each URL is not recorded.
    """

    links: list[str] = field(default_factory=list)
    title: str = NO_TITLE

    @property
    def link_count(self) -> int:
        """Number of unique links found."""
        return len(self.links)


@dataclass
class CrawlResult:
    """
    Outcome of fetching a single page and extracting its links.

    A failed fetch is still a CrawlResult: `error` carries the message and
    `links` is empty.

    Example:
        result = await fetcher.crawl("https://example.com")
        if result.ok:
            print(f"{result.title}: {result.link_count} links")
        else:
            print(f"Error: {result.error}")
    """

    url: str
    links: list[str] = field(default_factory=list)
    title: Optional[str] = None
    status_code: Optional[int] = None
    final_url: Optional[str] = None
    error: Optional[str] = None
    crawler_type: str = "enhanced"

    # Timestamp (always UTC)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def link_count(self) -> int:
        """Number of links in the result."""
        return len(self.links)

    @property
    def ok(self) -> bool:
        """True if the page was fetched and parsed."""
        return self.error is None

    def with_links(self, links: list[str]) -> "CrawlResult":
        """Return a copy of this result carrying a different link list."""
        return replace(self, links=list(links))

    def to_dict(self) -> dict:
        """Convert result to dictionary for serialization."""
        data: dict = {
            "url": self.url,
            "final_url": self.final_url,
            "status_code": self.status_code,
            "title": self.title,
            "links": list(self.links),
            "link_count": self.link_count,
            "crawler_type": self.crawler_type,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.error is not None:
            data["error"] = self.error
        return data
