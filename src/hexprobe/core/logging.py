"""Logging configuration for hexprobe.

This module provides logging setup using the Rich library. Log records
go to stderr so they never interleave with hexdump output on stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
DATE_FORMAT = "[%X]"


def setup_logging(verbose: bool = False, level: Optional[str] = None) -> logging.Logger:
    """Configure Python logging with Rich handler.

    Args:
        verbose: If True, set log level to DEBUG for detailed output.
                 If False, use ``level``, or WARNING to show only
                 warnings and errors.
        level: Optional level name such as "info", ignored when verbose.

    Returns:
        A configured logger instance for use throughout the application.

    Example:
        >>> logger = setup_logging(verbose=True)
        >>> logger.debug("Seeked to offset 0x100")
    """
    if verbose:
        log_level = logging.DEBUG
    elif level:
        log_level = logging.getLevelName(level.upper())
    else:
        log_level = logging.WARNING

    rich_handler = RichHandler(
        level=log_level,
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=True,
        rich_tracebacks=True,
        markup=False,
    )
    rich_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger("hexprobe")
    logger.setLevel(log_level)

    # Remove any existing handlers to avoid duplicates
    logger.handlers.clear()
    logger.addHandler(rich_handler)
    logger.propagate = False

    return logger

