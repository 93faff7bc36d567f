"""
Logging Configuration
=====================

Centralized logging for the behavioral package.

Every calculator step and every undo/redo pass is reported through this
logger, so it doubles as the diagnostic trace of a calculation session.

Usage:
    from behavioral.core.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Current value = 100 (following plus 100)")
"""

import logging
import sys
from typing import Union

PACKAGE_NAME = "behavioral"
LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the specified module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured Logger instance
    """
    _ensure_configured()
    return logging.getLogger(name)


def _ensure_configured() -> None:
    """Configure the package logger if not already done."""
    global _configured
    if _configured:
        return

    logger = logging.getLogger(PACKAGE_NAME)
    logger.setLevel(logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.propagate = False
    _configured = True


def set_level(level: Union[int, str]) -> None:
    """
    Set the logging level for the behavioral package.

    Args:
        level: Logging level, either numeric (logging.DEBUG) or a level
               name such as "DEBUG" or "warning"

    Raises:
        ValueError: If a level name is not recognized
    """
    _ensure_configured()
    if isinstance(level, str):
        name = level.upper()
        resolved = logging.getLevelName(name)
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level}")
        level = resolved
    logging.getLogger(PACKAGE_NAME).setLevel(level)
