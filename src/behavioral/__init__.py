"""
Behavioral - Behavioral Design Patterns
=======================================

Version: 0.1.0
"""

__version__ = "0.1.0"

# Re-export the calculator command log for convenience
from behavioral.commands import (
    Calculator,
    CalculatorCommand,
    Computer,
    Operator,
    inverse,
)
from behavioral.core.exceptions import BehavioralError, DivisionByZeroError

__all__ = [
    "__version__",
    # Calculator
    "Calculator",
    "CalculatorCommand",
    "Computer",
    "Operator",
    "inverse",
    # Errors
    "BehavioralError",
    "DivisionByZeroError",
]
