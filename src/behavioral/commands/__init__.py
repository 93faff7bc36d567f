"""
Commands Package
================

Command pattern implementation for reversible operations.

Components:
    - Command: Abstract base class for reversible commands
    - CommandHistory: Ordered command list with an undo/redo cursor

Calculator Commands:
    - Operator: Arithmetic operators and their inverses
    - Calculator: Integer accumulator the commands act on
    - CalculatorCommand: Reversible operator/operand pair
    - Computer: Issues calculator commands and undoes/redoes them

Usage:
    from behavioral.commands import Computer, Operator

    computer = Computer()
    computer.compute(Operator.PLUS, 100)
    computer.undo(1)
    computer.redo(1)
"""

from .base import Command, CommandHistory

from .calculator import (
    Calculator,
    CalculatorCommand,
    Computer,
    Operator,
    inverse,
)

__all__ = [
    # Base
    "Command",
    "CommandHistory",
    # Calculator
    "Calculator",
    "CalculatorCommand",
    "Computer",
    "Operator",
    "inverse",
]
