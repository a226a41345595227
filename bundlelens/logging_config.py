"""Console logging setup for the bundlelens command line."""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"


def configure_logging(level: str = "WARNING") -> None:
    """Replace loguru's default handler with a single stderr sink at *level*."""
    logger.remove()
    logger.add(sys.stderr, format=_FORMAT, level=level.upper(), colorize=True)
