"""Loguru wiring: silent as a library, opt-in for scripts and demos."""

from __future__ import annotations

import sys

from loguru import logger

PACKAGE = "backlog_engine"

logger.disable(PACKAGE)


def configure_logging(level: str = "INFO") -> None:
    """Route engine logs to stderr at ``level``."""

    logger.remove()
    logger.add(sys.stderr, level=level, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}")
    logger.enable(PACKAGE)
