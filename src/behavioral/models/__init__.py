"""Data models shared by the calculator, controllers and CLI."""

from .base import ToDictMixin
from .calculator import CalculationStep, SessionSummary

__all__ = [
    "ToDictMixin",
    "CalculationStep",
    "SessionSummary",
]
