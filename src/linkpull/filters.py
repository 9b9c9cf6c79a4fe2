"""Post-extraction link filtering."""

import logging
from collections.abc import Iterable
from typing import Optional
from urllib.parse import urlsplit

from .models.config import FilterConfig, LinkScope

logger = logging.getLogger(__name__)


def _hostname(url: str) -> Optional[str]:
    """Return the URL's hostname, or None if it cannot be parsed."""
    try:
        return urlsplit(url).hostname
    except ValueError:
        return None


class DomainFilter:
    """
    Classify URLs as internal or external by host equality.

    A URL is internal when its hostname equals the base URL's hostname.
    Ports and subdomains are not considered the same host.

    Example:
        filter = DomainFilter("https://testsite.com", scope=LinkScope.INTERNAL)
        filter.should_include("https://testsite.com/a")  # True
        filter.should_include("https://other.com/b")  # False
    """

    def __init__(self, base_url: Optional[str], scope: LinkScope = LinkScope.ALL):
        """
        Initialize the domain filter.

        Args:
            base_url: URL whose host defines "internal"
            scope: Which links to keep
        """
        self.scope = scope
        self.base_host = _hostname(base_url) if base_url else None

        if scope != LinkScope.ALL and self.base_host is None:
            logger.warning(f"Cannot determine host of base URL {base_url!r}; no links can be classified")

    def is_internal(self, url: str) -> Optional[bool]:
        """
        Check if a URL is on the base host.

        Args:
            url: The URL to classify

        Returns:
            True/False, or None if the URL or base URL has no parseable host
        """
        host = _hostname(url)
        if host is None or self.base_host is None:
            return None
        return host == self.base_host

    def should_include(self, url: str) -> bool:
        """
        Check if URL passes the scope restriction.

        Unclassifiable URLs only pass when the scope is ALL.
        """
        if self.scope == LinkScope.ALL:
            return True

        internal = self.is_internal(url)
        if internal is None:
            return False

        if self.scope == LinkScope.INTERNAL:
            return internal
        return not internal


class ExcludeFilter:
    """
    Drop URLs containing any of a list of substrings.

    Matching is plain substring containment, not glob or regex.

    Example:
        filter = ExcludeFilter([".jpg", ".png"])
        filter.should_include("https://example.com/logo.png")  # False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        self.patterns = [p for p in (patterns or []) if p]

    def should_include(self, url: str) -> bool:
        return not any(pattern in url for pattern in self.patterns)


class LinkFilter:
    """
    Apply scope classification, then substring exclusion.

    Example:
        spec = FilterConfig(
            scope=LinkScope.EXTERNAL,
            exclude_patterns=[".jpg"],
            base_url="https://testsite.com",
        )
        kept = LinkFilter(spec).apply(links)
    """

    def __init__(self, spec: FilterConfig, base_url: Optional[str] = None):
        """
        Initialize the link filter.

        Args:
            spec: Filter configuration
            base_url: Fallback base URL when spec.base_url is not set
        """
        self.spec = spec
        self.domain_filter = DomainFilter(spec.base_url or base_url, scope=spec.scope)
        self.exclude_filter = ExcludeFilter(spec.exclude_patterns)

    def should_include(self, url: str) -> bool:
        """Check if URL passes all filters."""
        return self.domain_filter.should_include(url) and self.exclude_filter.should_include(url)

    def apply(self, urls: Iterable[str]) -> list[str]:
        """
        Filter a collection of URLs, keeping input order.

        Args:
            urls: URLs to filter

        Returns:
            URLs that passed every filter
        """
        urls = list(urls)
        kept = [url for url in urls if self.should_include(url)]
        logger.debug(f"Filter kept {len(kept)}/{len(urls)} links (scope={self.spec.scope.value})")
        return kept


def filter_links(
    urls: Iterable[str],
    spec: FilterConfig,
    base_url: Optional[str] = None,
) -> list[str]:
    """
    Filter URLs by internal/external scope and exclusion substrings.

    Args:
        urls: URLs to filter
        spec: Filter configuration
        base_url: Fallback base URL when spec.base_url is not set

    Returns:
        Filtered URLs in input order
    """
    return LinkFilter(spec, base_url=base_url).apply(urls)
