"""Heuristic URL recovery from inline scripts and event handlers."""

import logging
import re
from collections.abc import Iterable, Iterator
from typing import Optional, Union

logger = logging.getLogger(__name__)

# Quoted string capture shared by the assignment/call/key patterns
_QUOTED = r"[\"']([^\"']+)[\"']"

# Ordered (label, pattern) catalog. Every pattern is run over the full text
# and group 1 of each match is the candidate URL.
SCRIPT_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    # "https://example.com/page"
    ("absolute_literal", re.compile(r"[\"'](https?://[^\"']+)[\"']")),
    # 'products.php?id=3'
    (
        "page_extension",
        re.compile(r"[\"']([^\"']*\.(?:html|htm|php|asp|aspx|jsp|cfm)[^\"']*)[\"']"),
    ),
    # window.location = '/x' or window.location.href = '/x'
    ("window_location", re.compile(r"window\.location(?:\.href)?\s*=\s*" + _QUOTED)),
    # location.href = '/x'
    ("location_href", re.compile(r"location\.href\s*=\s*" + _QUOTED)),
    # fetch('/api'), $.ajax('/api'), $.get('/api'), axios.post('/api')
    ("request_call", re.compile(r"\b(?:fetch|ajax|get|post)\s*\(\s*" + _QUOTED)),
    # { url: '/api/users' }
    ("url_key", re.compile(r"\burl\s*:\s*" + _QUOTED)),
    # navigate('/x'), redirect('/x'), goto('/x')
    ("navigation_call", re.compile(r"\b(?:navigate|redirect|goto)\s*\(\s*" + _QUOTED)),
    # { action: '/submit' }
    ("action_key", re.compile(r"\baction\s*:\s*" + _QUOTED)),
]


class ScriptScanner:
    """
    Recover URL candidates embedded in JavaScript text.

    This is a best-effort heuristic: it catches common static idioms
    (string literals, location assignments, fetch/ajax calls, config
    objects) but not URLs assembled by concatenation or templates, and
    it will occasionally match strings that are not URLs.

    Example:
        scanner = ScriptScanner()
        candidates = list(scanner.scan("fetch('/api/profile')"))
        # ['/api/profile']
    """

    def __init__(
        self,
        extra_patterns: Optional[Iterable[tuple[str, Union[str, re.Pattern[str]]]]] = None,
    ):
        """
        Initialize the scanner.

        Args:
            extra_patterns: Additional (label, pattern) pairs appended to the
                built-in catalog. Each pattern must capture the URL in group 1.
        """
        self.patterns = list(SCRIPT_PATTERNS)
        for label, pattern in extra_patterns or []:
            compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
            if compiled.groups < 1:
                raise ValueError(f"Script pattern {label!r} must define a capture group")
            self.patterns.append((label, compiled))

    @property
    def labels(self) -> list[str]:
        """Labels of the active patterns, in catalog order."""
        return [label for label, _ in self.patterns]

    def scan(self, text: Optional[str]) -> Iterator[str]:
        """
        Yield every candidate captured by every pattern.

        Args:
            text: Script body or event handler code

        Yields:
            Raw candidate strings (not yet normalized)
        """
        if not text:
            return

        for label, pattern in self.patterns:
            for match in pattern.finditer(text):
                candidate = match.group(1)
                if candidate:
                    logger.debug(f"Script pattern {label} matched {candidate!r}")
                    yield candidate
