"""Built-in extraction presets."""

from __future__ import annotations

from typing import Any

from .config import ExtractionConfig, ExtractorMode
from .defaults import BASIC_SRC_PREFIXES

MODE_PRESETS: dict[ExtractorMode, dict[str, Any]] = {
    ExtractorMode.BASIC: {
        # Markup attributes only, like a plain HTML link checker
        "include_scripts": False,
        "include_data_attributes": False,
        "src_prefixes": list(BASIC_SRC_PREFIXES),
    },
    ExtractorMode.ENHANCED: {
        # Model defaults already describe the enhanced extractor
    },
}


def apply_mode(config: ExtractionConfig) -> ExtractionConfig:
    """
    Apply mode preset values to an extraction config.

    Preset values override model defaults, but fields the user set
    explicitly are kept.

    Args:
        config: Extraction configuration with a mode selected

    Returns:
        A new ExtractionConfig with the preset applied

    Example:
        >>> config = ExtractionConfig(mode=ExtractorMode.BASIC)
        >>> apply_mode(config).include_scripts
        False
        >>> config = ExtractionConfig(mode=ExtractorMode.BASIC, include_scripts=True)
        >>> apply_mode(config).include_scripts
        True
    """
    overrides = MODE_PRESETS.get(config.mode, {})
    if not overrides:
        return config

    explicit = config.model_fields_set
    config_dict = config.model_dump()
    for key, value in overrides.items():
        if key not in explicit:
            config_dict[key] = value

    return ExtractionConfig.model_validate(config_dict)
