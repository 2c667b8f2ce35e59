"""Centralized logging configuration for doclinks."""

import logging
import sys
from typing import Optional

_CONFIGURED = False


def setup_logging(level: int | str = logging.WARNING, format_string: Optional[str] = None) -> None:
    """
    Configure logging for the doclinks package.

    Safe to call more than once: the handler is installed on the first call,
    later calls only change the level.

    Args:
        level: Logging level (default WARNING)
        format_string: Optional custom format string
    """
    global _CONFIGURED

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logger = logging.getLogger("doclinks")
    logger.setLevel(level)

    if not _CONFIGURED:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(handler)
        _CONFIGURED = True

    # Suppress noisy third-party loggers
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
