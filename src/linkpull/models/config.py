"""Pydantic configuration models for linkpull."""

from enum import Enum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from .defaults import DATA_ATTRS, DEFAULT_SRC_PREFIXES, EVENT_HANDLER_ATTRS


class ExtractorMode(str, Enum):
    """Built-in extraction presets."""

    BASIC = "basic"
    ENHANCED = "enhanced"


class LinkScope(str, Enum):
    """Which links survive internal/external classification."""

    ALL = "all"
    INTERNAL = "internal"
    EXTERNAL = "external"


class ExtractionConfig(BaseModel):
    """Configuration for link extraction from a single page."""

    mode: ExtractorMode = Field(
        ExtractorMode.ENHANCED,
        description="Extraction preset (basic = markup only, enhanced = markup + scripts)",
    )
    include_scripts: bool = Field(
        True,
        description="Scan inline scripts and event handlers for URLs",
    )
    include_data_attributes: bool = Field(
        True,
        description="Extract URLs from data-* attributes",
    )
    src_prefixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SRC_PREFIXES),
        min_length=1,
        description="Prefixes a src attribute must start with to be extracted",
    )
    data_attributes: list[str] = Field(
        default_factory=lambda: list(DATA_ATTRS),
        description="Data attributes checked for URLs",
    )
    event_handlers: list[str] = Field(
        default_factory=lambda: list(EVENT_HANDLER_ATTRS),
        description="Event handler attributes scanned like scripts",
    )
    script_patterns: dict[str, str] = Field(
        default_factory=dict,
        description="Extra script patterns (label -> regex with one capture group)",
    )

    model_config = {"extra": "forbid"}


class FilterConfig(BaseModel):
    """Configuration for post-extraction link filtering."""

    scope: LinkScope = Field(LinkScope.ALL, description="Keep all, internal-only or external-only links")
    exclude_patterns: list[str] = Field(
        default_factory=list,
        description="Drop links containing any of these substrings",
    )
    base_url: Optional[str] = Field(
        None,
        description="URL whose host defines 'internal' (defaults to the crawled URL)",
    )

    model_config = {"extra": "forbid"}

    @property
    def internal_only(self) -> bool:
        return self.scope == LinkScope.INTERNAL

    @property
    def external_only(self) -> bool:
        return self.scope == LinkScope.EXTERNAL


class NetworkConfig(BaseModel):
    """Configuration for the single-page HTTP fetch."""

    timeout: float = Field(10.0, gt=0, description="Request timeout in seconds")
    user_agent: Optional[str] = Field(None, description="Custom User-Agent header")
    max_redirects: int = Field(5, ge=0, description="Maximum redirects to follow")
    proxy: Optional[str] = Field(None, description="HTTP/HTTPS proxy URL")
    max_content_size: int = Field(
        10 * 1024 * 1024,
        ge=1,
        description="Maximum response size in bytes",
    )

    model_config = {"extra": "forbid"}


class OutputConfig(BaseModel):
    """Configuration for result output."""

    format: Literal["json", "txt", "csv", "summary"] = Field("json", description="Output format")
    file: Optional[Path] = Field(None, description="Write output to this file instead of stdout")

    model_config = {"extra": "forbid"}


class LinkpullConfig(BaseModel):
    """
    Root configuration model for linkpull.

    Example:
        config = LinkpullConfig(
            url="https://example.com",
            filter=FilterConfig(scope=LinkScope.INTERNAL),
        )

    YAML format:
        url: https://example.com
        extraction:
          mode: basic
        filter:
          scope: external
          exclude_patterns: [".jpg", ".png"]
        output:
          format: txt
    """

    url: Optional[str] = Field(None, description="Page to crawl")

    # Nested configuration sections
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    filter: FilterConfig = Field(default_factory=FilterConfig)  # noqa: A003
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "LinkpullConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "LinkpullConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text(encoding="utf-8"))
