"""Single-page link extraction combining markup and script sources."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from bs4 import BeautifulSoup

from ..models.config import ExtractionConfig
from ..models.defaults import DEFAULT_SRC_PREFIXES, EVENT_HANDLER_ATTRS
from ..models.profiles import apply_mode
from ..models.results import NO_TITLE, ExtractionResult
from .normalizer import normalize_url
from .scripts import ScriptScanner
from .structural import StructuralExtractor

logger = logging.getLogger(__name__)


class LinkExtractor:
    """
    Extract every candidate navigable URL from one page of HTML.

    The document is parsed once. Candidates come from markup attributes
    (href, src, form action, data-*) and, when script scanning is enabled,
    from inline <script> bodies and event handler attributes. Each candidate
    is normalized against the page URL; rejected candidates are dropped and
    each distinct URL is kept once.

    Both the basic (markup only) and enhanced (markup + scripts) behaviors
    are configurations of this one class.

    Example:
        extractor = LinkExtractor()
        result = extractor.extract(html, "https://example.com")
        print(result.title, result.links)

        basic = LinkExtractor(include_scripts=False, include_data_attrs=False)
    """

    def __init__(
        self,
        include_scripts: bool = True,
        include_data_attrs: bool = True,
        src_prefixes: Sequence[str] = DEFAULT_SRC_PREFIXES,
        data_attrs: Sequence[str] | None = None,
        event_handlers: Sequence[str] = EVENT_HANDLER_ATTRS,
        extra_patterns: Iterable[tuple[str, str]] | None = None,
    ):
        """
        Initialize the link extractor.

        Args:
            include_scripts: Scan inline scripts and event handlers
            include_data_attrs: Extract URLs from data-* attributes
            src_prefixes: Prefixes a src value must start with
            data_attrs: Data attributes to check (None = built-in list)
            event_handlers: Event handler attributes to scan
            extra_patterns: Additional (label, regex) script patterns
        """
        self._include_scripts = include_scripts
        self._event_handlers = list(event_handlers)
        self._structural = StructuralExtractor(
            src_prefixes=src_prefixes,
            include_data_attrs=include_data_attrs,
            data_attrs=data_attrs,
        )
        self._scanner = ScriptScanner(extra_patterns=extra_patterns)

    @classmethod
    def from_config(cls, config: ExtractionConfig) -> LinkExtractor:
        """
        Build an extractor from an ExtractionConfig, applying its mode preset.

        Args:
            config: Extraction configuration

        Returns:
            Configured LinkExtractor
        """
        config = apply_mode(config)
        return cls(
            include_scripts=config.include_scripts,
            include_data_attrs=config.include_data_attributes,
            src_prefixes=config.src_prefixes,
            data_attrs=config.data_attributes,
            event_handlers=config.event_handlers,
            extra_patterns=config.script_patterns.items(),
        )

    @property
    def include_scripts(self) -> bool:
        return self._include_scripts

    def extract(self, html: str | bytes, base_url: str) -> ExtractionResult:
        """
        Extract links and title from HTML.

        Args:
            html: Raw HTML text or bytes
            base_url: Absolute URL the page was served from (after redirects)

        Returns:
            ExtractionResult with unique absolute links and the page title
        """
        try:
            soup = BeautifulSoup(html, "html.parser")
        except Exception as e:
            logger.debug(f"Failed to parse HTML from {base_url}: {e}")
            return ExtractionResult(links=[], title=NO_TITLE)

        # dict keeps first-seen order while deduplicating
        links: dict[str, None] = {}
        rejected = 0

        for candidate in self._candidates(soup):
            url = normalize_url(candidate, base_url)
            if url is None:
                rejected += 1
                continue
            links.setdefault(url, None)

        logger.debug(f"Extracted {len(links)} links from {base_url} ({rejected} candidates rejected)")

        return ExtractionResult(links=list(links), title=self.extract_title(soup))

    def extract_links(self, html: str | bytes, base_url: str) -> list[str]:
        """Convenience wrapper returning only the link list."""
        return self.extract(html, base_url).links

    def _candidates(self, soup: BeautifulSoup) -> Iterator[str]:
        """Yield raw candidates from all enabled sources."""
        yield from self._structural.extract(soup)

        if not self._include_scripts:
            return

        # Inline script bodies
        for script in soup.find_all("script"):
            if script.string:
                yield from self._scanner.scan(str(script.string))

        # Event handler code
        for handler in self._event_handlers:
            for elem in soup.find_all(attrs={handler: True}):
                yield from self._scanner.scan(elem.get(handler))

    @staticmethod
    def extract_title(soup: BeautifulSoup) -> str:
        """
        Return the first <title> element's text, stripped.

        Falls back to NO_TITLE if the title is missing, empty, or cannot be read.
        """
        try:
            title_tag = soup.find("title")
            if title_tag is None:
                return NO_TITLE
            title = title_tag.get_text().strip()
        except Exception as e:
            logger.debug(f"Failed to extract title: {e}")
            return NO_TITLE

        return title or NO_TITLE


def extract_title(html: str | bytes) -> str:
    """
    Extract the page title from raw HTML.

    Args:
        html: Raw HTML text or bytes

    Returns:
        Stripped title text, or NO_TITLE
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as e:
        logger.debug(f"Failed to parse HTML for title: {e}")
        return NO_TITLE
    return LinkExtractor.extract_title(soup)
