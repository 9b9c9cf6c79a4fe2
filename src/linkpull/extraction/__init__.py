"""Link extraction engine: normalization, markup and script sources."""

from .extractor import LinkExtractor, extract_title
from .normalizer import is_well_formed, normalize_url
from ..models.defaults import BASIC_SRC_PREFIXES, DATA_ATTRS, DEFAULT_SRC_PREFIXES, EVENT_HANDLER_ATTRS
from .scripts import SCRIPT_PATTERNS, ScriptScanner
from .structural import StructuralExtractor

__all__ = [
    # Aggregation
    "LinkExtractor",
    "extract_title",
    # Normalization
    "normalize_url",
    "is_well_formed",
    # Sources
    "StructuralExtractor",
    "ScriptScanner",
    "SCRIPT_PATTERNS",
    "EVENT_HANDLER_ATTRS",
    "DATA_ATTRS",
    "DEFAULT_SRC_PREFIXES",
    "BASIC_SRC_PREFIXES",
]
