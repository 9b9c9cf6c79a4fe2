"""Command-line interface for linkpull."""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any, Optional

# Verify core dependencies
try:
    import aiohttp  # noqa: F401
    import bs4  # noqa: F401
    import pydantic  # noqa: F401
    import rich  # noqa: F401
except ImportError as e:
    print(f"\nERROR: Missing required dependency: {e.name}", file=sys.stderr)
    print("\nlinkpull requires all core dependencies to be installed.", file=sys.stderr)
    print("\nRecommended fixes:", file=sys.stderr)
    print("  1. For pip users: pip install --upgrade --force-reinstall linkpull", file=sys.stderr)
    print("  2. For development: pip install -e .[dev]", file=sys.stderr)
    sys.exit(1)

import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.fetcher import PageFetcher
from .formatters import get_formatter
from .logging_config import setup_logging
from .models.config import ExtractorMode, LinkpullConfig, LinkScope


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="linkpull",
        description="Extract all links from a web page, including links embedded in scripts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print every link on a page as JSON
  linkpull https://example.com

  # One URL per line, same-site links only
  linkpull example.com --internal-only --format txt

  # Skip images and scripts, save as CSV
  linkpull https://example.com --exclude .jpg .png .js -o links.csv -f csv

  # Markup attributes only (no script scanning)
  linkpull https://example.com --basic
        """,
    )

    parser.add_argument(
        "url",
        nargs="?",
        help="URL to extract links from",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="FILE",
        help="YAML configuration file (command-line options take precedence)",
    )

    # Output
    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        metavar="FILE",
        help="Write results to a file instead of stdout",
    )
    output_group.add_argument(
        "--format",
        "-f",
        choices=["json", "txt", "csv", "summary"],
        default=None,
        help="Output format (default: json)",
    )

    # Network
    network_group = parser.add_argument_group("network settings")
    network_group.add_argument(
        "--timeout",
        "-t",
        type=int,
        default=None,
        metavar="MS",
        help="Request timeout in milliseconds (default: 10000)",
    )
    network_group.add_argument(
        "--user-agent",
        type=str,
        help="Custom User-Agent string",
    )
    network_group.add_argument(
        "--proxy",
        type=str,
        metavar="URL",
        help="Proxy URL",
    )

    # Filtering
    filter_group = parser.add_argument_group("link filtering")
    scope = filter_group.add_mutually_exclusive_group()
    scope.add_argument(
        "--internal-only",
        action="store_true",
        help="Only include internal links (same host)",
    )
    scope.add_argument(
        "--external-only",
        action="store_true",
        help="Only include external links (different host)",
    )
    filter_group.add_argument(
        "--exclude",
        nargs="+",
        metavar="PATTERN",
        help="Exclude links containing these substrings",
    )

    # Extraction
    extraction_group = parser.add_argument_group("extraction")
    mode = extraction_group.add_mutually_exclusive_group()
    mode.add_argument(
        "--enhanced",
        action="store_const",
        const=ExtractorMode.ENHANCED,
        dest="mode",
        help="Markup, data-* attributes, inline scripts and event handlers (default)",
    )
    mode.add_argument(
        "--basic",
        action="store_const",
        const=ExtractorMode.BASIC,
        dest="mode",
        help="Markup attributes only",
    )

    # Verbosity
    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    log_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only log errors",
    )

    return parser


def _deep_update(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base. Nested dicts merge, other values replace."""
    result = base.copy()
    for key, override_value in overrides.items():
        if key in result and isinstance(result[key], dict) and isinstance(override_value, dict):
            result[key] = _deep_update(result[key], override_value)
        else:
            result[key] = override_value
    return result


def build_config(args: argparse.Namespace) -> LinkpullConfig:
    """
    Build a LinkpullConfig from parsed arguments and an optional config file.

    Raises:
        ValidationError: If the resulting configuration is invalid
        OSError: If the config file cannot be read
        yaml.YAMLError: If the config file is not valid YAML
        UnicodeDecodeError: If the config file is not UTF-8
    """
    base: dict[str, Any] = {}
    if args.config:
        base = LinkpullConfig.from_yaml_file(args.config).model_dump(exclude_unset=True)

    config_kwargs: dict[str, Any] = {}

    url = args.url or base.get("url")
    if url:
        if not url.startswith(("http://", "https://")):
            url = "https://" + url
        config_kwargs["url"] = url

    if args.mode is not None:
        config_kwargs["extraction"] = {"mode": args.mode}

    # Filter settings
    filter_kwargs: dict[str, Any] = {}
    if args.internal_only:
        filter_kwargs["scope"] = LinkScope.INTERNAL
    elif args.external_only:
        filter_kwargs["scope"] = LinkScope.EXTERNAL
    if args.exclude:
        filter_kwargs["exclude_patterns"] = args.exclude
    if filter_kwargs:
        config_kwargs["filter"] = filter_kwargs

    # Network settings
    network_kwargs: dict[str, Any] = {}
    if args.timeout is not None:
        network_kwargs["timeout"] = args.timeout / 1000
    if args.user_agent:
        network_kwargs["user_agent"] = args.user_agent
    if args.proxy:
        network_kwargs["proxy"] = args.proxy
    if network_kwargs:
        config_kwargs["network"] = network_kwargs

    # Output settings
    output_kwargs: dict[str, Any] = {}
    if args.format:
        output_kwargs["format"] = args.format
    if args.output:
        output_kwargs["file"] = args.output
    if output_kwargs:
        config_kwargs["output"] = output_kwargs

    # Log level
    if args.verbose:
        config_kwargs["log_level"] = "DEBUG"
    elif args.quiet:
        config_kwargs["log_level"] = "ERROR"

    return LinkpullConfig.model_validate(_deep_update(base, config_kwargs))


def run_crawl(args: argparse.Namespace) -> int:
    """Crawl the requested page and write the results."""
    console = Console()
    err_console = Console(stderr=True)

    try:
        config = build_config(args)
    except (ValidationError, yaml.YAMLError, UnicodeDecodeError, OSError) as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1

    if not config.url:
        err_console.print("[red]Error:[/red] Please provide a URL to crawl")
        return 1

    setup_logging(
        level=config.log_level,
        log_file=str(config.log_file) if config.log_file else None,
    )

    if args.verbose:
        mode = config.extraction.mode
        err_console.print(f"Starting crawl of: {config.url}")
        err_console.print(
            f"Crawler: {'Basic' if mode == ExtractorMode.BASIC else 'Enhanced (JavaScript-aware)'}"
        )
        err_console.print(f"Timeout: {config.network.timeout * 1000:.0f}ms")
        err_console.print(f"Format: {config.output.format}")

    async def run() -> int:
        async with PageFetcher(config) as fetcher:
            result = await fetcher.run()

        if not result.ok:
            err_console.print(f"[red]Failed to crawl {config.url}:[/red] {result.error}")
            return 1

        formatter = get_formatter(config.output.format)
        if config.output.file:
            path = formatter.save(result, config.output.file, filters=config.filter)
            console.print(f"Results saved to: {path}", highlight=False)
        else:
            formatter.print_to(console, result, filters=config.filter)

        if args.verbose:
            err_console.print("\n[green]Crawl completed successfully![/green]")
            err_console.print(f"Found {result.link_count} links")
            if config.extraction.mode == ExtractorMode.ENHANCED:
                err_console.print("\nEnhanced mode extracts JavaScript-embedded links from:")
                err_console.print("  - Inline scripts and event handlers")
                err_console.print("  - Data attributes (data-url, data-href, etc.)")
                err_console.print("  - AJAX/fetch calls and configuration objects")

        return 0

    try:
        return asyncio.run(run())
    except Exception as e:
        err_console.print(f"[red]Error:[/red] {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_crawl(args)


if __name__ == "__main__":
    sys.exit(main())
