"""Link candidates from markup attributes."""

import logging
from collections.abc import Iterator, Sequence
from typing import Optional

from bs4 import BeautifulSoup

from ..models.defaults import DATA_ATTRS, DEFAULT_SRC_PREFIXES

logger = logging.getLogger(__name__)


class StructuralExtractor:
    """
    Extract link candidates from attribute positions in a parsed document.

    Sources:
    - any element with an href attribute (not only <a>)
    - any element with a src attribute whose value has a URL-like prefix
    - <form action="...">
    - data-* attributes such as data-url and data-href (optional)

    Candidates are returned raw; resolution happens in the normalizer.

    Example:
        soup = BeautifulSoup(html, "html.parser")
        extractor = StructuralExtractor()
        candidates = list(extractor.extract(soup))
    """

    def __init__(
        self,
        src_prefixes: Sequence[str] = DEFAULT_SRC_PREFIXES,
        include_data_attrs: bool = True,
        data_attrs: Optional[Sequence[str]] = None,
    ):
        """
        Initialize the structural extractor.

        Args:
            src_prefixes: Prefixes a src value must start with to be kept
            include_data_attrs: Enable data-* attribute extraction
            data_attrs: Data attributes to check (defaults to DATA_ATTRS)
        """
        self._src_prefixes = tuple(src_prefixes)
        self._include_data_attrs = include_data_attrs
        self._data_attrs = list(data_attrs) if data_attrs is not None else list(DATA_ATTRS)

    def extract(self, soup: BeautifulSoup) -> Iterator[str]:
        """
        Yield raw candidates from every structural source.

        Args:
            soup: Parsed document

        Yields:
            Attribute values that may be URLs
        """
        yield from self._href_candidates(soup)
        yield from self._src_candidates(soup)
        yield from self._form_action_candidates(soup)
        if self._include_data_attrs:
            yield from self._data_attr_candidates(soup)

    def _href_candidates(self, soup: BeautifulSoup) -> Iterator[str]:
        for elem in soup.find_all(href=True):
            href = elem.get("href")
            if href:
                yield href

    def _src_candidates(self, soup: BeautifulSoup) -> Iterator[str]:
        for elem in soup.find_all(src=True):
            src = elem.get("src")
            if src and src.startswith(self._src_prefixes):
                yield src

    def _form_action_candidates(self, soup: BeautifulSoup) -> Iterator[str]:
        for form in soup.find_all("form", action=True):
            action = form.get("action")
            if action:
                yield action

    def _data_attr_candidates(self, soup: BeautifulSoup) -> Iterator[str]:
        """Extract candidates from data-* attributes."""
        for attr in self._data_attrs:
            for elem in soup.find_all(attrs={attr: True}):
                value = elem.get(attr)
                if value:
                    yield value
