"""
Controllers Package
===================

Controllers sit between views (the CLI) and the command layer. They accept
plain inputs, drive the commands, and return ControllerResult objects.
"""

from .base import BaseController, ControllerResult
from .calculator import (
    DEMO_INSTRUCTIONS,
    CalculatorController,
    Instruction,
    parse_instruction,
)

__all__ = [
    "BaseController",
    "ControllerResult",
    "CalculatorController",
    "DEMO_INSTRUCTIONS",
    "Instruction",
    "parse_instruction",
]
