"""URL normalization for extracted link candidates."""

import logging
from typing import Optional
from urllib.parse import urljoin, urlsplit

logger = logging.getLogger(__name__)

# Schemes that never point at a navigable page
REJECTED_PREFIXES = ("data:", "mailto:", "tel:", "javascript:")

ALLOWED_SCHEMES = frozenset({"http", "https"})


def is_well_formed(url: str) -> bool:
    """
    Check that a URL is an absolute http(s) URL with a usable host.

    Args:
        url: The URL to check

    Returns:
        True if the URL parses with an http/https scheme, a host and a valid port
    """
    try:
        parsed = urlsplit(url)
        if parsed.scheme.lower() not in ALLOWED_SCHEMES:
            return False
        if not parsed.netloc or not parsed.hostname:
            return False
        # Raises ValueError for non-numeric or out-of-range ports
        _ = parsed.port
    except ValueError:
        return False
    return True


def normalize_url(candidate: Optional[str], base_url: str) -> Optional[str]:
    """
    Resolve a link candidate into an absolute http(s) URL.

    Rules, applied in order:
    1. Empty candidates and data:, mailto:, tel:, javascript: links are rejected
    2. Protocol-relative links (//host/path) inherit the base URL's scheme
    3. Absolute http:// and https:// links are returned unchanged
    4. Everything else is resolved against the base URL

    Fragments are kept, so "#top" resolves to the base URL plus "#top".
    This function never raises; any parse failure yields None.

    Args:
        candidate: Raw attribute value or matched script string
        base_url: Absolute URL of the page the candidate was found on

    Returns:
        Absolute URL, or None if the candidate was rejected
    """
    if not candidate:
        return None

    link = candidate.strip()
    if not link:
        return None

    if link.lower().startswith(REJECTED_PREFIXES):
        return None

    try:
        # Protocol-relative
        if link.startswith("//"):
            scheme = urlsplit(base_url).scheme
            if not scheme:
                return None
            absolute = f"{scheme}:{link}"
            return absolute if is_well_formed(absolute) else None

        # Already absolute
        if link.startswith(("http://", "https://")):
            return link if is_well_formed(link) else None

        absolute = urljoin(base_url, link)
    except ValueError as e:
        logger.debug(f"Failed to resolve {link!r} against {base_url}: {e}")
        return None

    return absolute if is_well_formed(absolute) else None
