"""Logging setup for the linkpull command line."""

import logging
import sys
from typing import Optional

LOGGER_NAME = "linkpull"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Records go to stderr (and optionally a file) so that links printed on
    stdout can be piped into other tools. Calling this again is a no-op
    unless `force` is set.

    Args:
        level: Level name; unknown names fall back to INFO
        log_file: Also append records to this file
        format_string: logging.Formatter format (defaults to DEFAULT_FORMAT)
        force: Replace handlers installed by an earlier call

    Returns:
        The "linkpull" logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    fmt = format_string or DEFAULT_FORMAT

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    if logger.handlers and not force:
        return logger

    logger.handlers.clear()
    logger.addHandler(_handler(logging.StreamHandler(sys.stderr), numeric_level, fmt))
    if log_file:
        logger.addHandler(_handler(logging.FileHandler(log_file), numeric_level, fmt))

    # Child loggers (linkpull.extraction, ...) stop here
    logger.propagate = False

    return logger
