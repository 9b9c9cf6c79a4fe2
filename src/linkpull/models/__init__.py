"""linkpull configuration and result models."""

from .config import (
    ExtractionConfig,
    ExtractorMode,
    FilterConfig,
    LinkpullConfig,
    LinkScope,
    NetworkConfig,
    OutputConfig,
)
from .profiles import MODE_PRESETS, apply_mode
from .results import NO_TITLE, CrawlResult, ExtractionResult

__all__ = [
    # Config
    "ExtractionConfig",
    "ExtractorMode",
    "FilterConfig",
    "LinkpullConfig",
    "LinkScope",
    "NetworkConfig",
    "OutputConfig",
    # Presets
    "MODE_PRESETS",
    "apply_mode",
    # Results
    "NO_TITLE",
    "CrawlResult",
    "ExtractionResult",
]
