"""Default extraction sources, shared by the config models and the extractors."""

# src values must look like a URL; inline data and bare names are noise
DEFAULT_SRC_PREFIXES = ("http", "/", "../")
BASIC_SRC_PREFIXES = ("http", "//")

# Data attributes that commonly carry URLs
DATA_ATTRS = (
    "data-url",
    "data-href",
    "data-link",
    "data-target",
    "data-src",
    "data-action",
    "data-endpoint",
    "data-api",
)

# Inline event handler attributes scanned like script bodies
EVENT_HANDLER_ATTRS = ("onclick", "onchange", "onsubmit", "onload")
