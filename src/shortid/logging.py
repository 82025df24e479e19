"""Logging configuration for the short id package."""

import sys

from loguru import logger

PACKAGE = "shortid"


def setup_logging(log_level: str, log_format: str | None = None):
    """Configure loguru and enable the package's log messages.

    The package disables its own logger on import, as libraries using loguru
    should; applications opt in by calling this function.

    Args:
        log_level: Log level to use (from settings or CLI arguments)
        log_format: Optional loguru format string, loguru's default otherwise
    """
    log_level = log_level.upper()

    logger.remove()  # Remove default handler
    options = {"level": log_level, "colorize": True}
    if log_format is not None:
        options["format"] = log_format
    logger.add(sys.stderr, **options)
    logger.enable(PACKAGE)

    logger.debug(f"Log level set to: {log_level}")
