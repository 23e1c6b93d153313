"""Logging helpers."""

from __future__ import annotations

import os
import sys

from loguru import logger

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"


def configure_logging(*, verbose: bool = False) -> None:
    """Send replyseg logs to stderr.

    The level comes from ``REPLYSEG_LOG_LEVEL`` (default ``WARNING``);
    *verbose* forces ``DEBUG``.
    """
    level = "DEBUG" if verbose else os.getenv("REPLYSEG_LOG_LEVEL", "WARNING").upper()
    logger.remove()
    logger.enable("replyseg")
    logger.add(sys.stderr, level=level, format=_FORMAT, backtrace=False, diagnose=False)
