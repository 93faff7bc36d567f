"""CLI command modules for behavioral."""

from .calc import calc
from .config import config
from .patterns import patterns

__all__ = [
    "calc",
    "config",
    "patterns",
]
