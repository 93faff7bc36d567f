"""Core utilities: logging and exceptions."""

from .exceptions import BehavioralError, DivisionByZeroError, InstructionError
from .logger import get_logger, set_level

__all__ = [
    "BehavioralError",
    "DivisionByZeroError",
    "InstructionError",
    "get_logger",
    "set_level",
]
