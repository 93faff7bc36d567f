"""
Custom Exception Classes

This module defines the exception classes raised by the behavioral package.
The calculator raises DivisionByZeroError; the controller and CLI layers raise
InstructionError for instruction text they cannot parse.

The exceptions follow Python's standard exception hierarchy, so callers can
also catch them as ZeroDivisionError or ValueError.
"""

from typing import Any, Optional


class BehavioralError(Exception):
    """
    Base class for all errors raised by the behavioral package.

    Attributes:
        message (str): Explanation of the error
    """

    def __init__(self, message: str = "An error occurred.") -> None:
        super().__init__(message)
        self.message = message


class DivisionByZeroError(BehavioralError, ZeroDivisionError):
    """
    Exception raised when the calculator is asked to divide by zero.

    This happens when a slash command with operand 0 is executed, and also
    when undoing a multiplication by zero, whose inverse is a division by
    zero.

    Attributes:
        message (str): Explanation of the error
        operator (Optional[Any]): The operator that was being applied
        operand (Optional[int]): The operand that was being applied
    """

    def __init__(
        self,
        message: str = "Division by zero.",
        operator: Optional[Any] = None,
        operand: Optional[int] = None,
    ) -> None:
        """
        Initialize the DivisionByZeroError.

        Args:
            message (str): Custom error message (default: "Division by zero.")
            operator: The operator being applied when the error occurred
            operand (Optional[int]): The operand being applied
        """
        super().__init__(message)
        self.operator = operator
        self.operand = operand


class InstructionError(BehavioralError, ValueError):
    """
    Exception raised when calculator instruction text cannot be parsed.

    Attributes:
        message (str): Explanation of the error
        instruction (Optional[str]): The offending instruction text
    """

    def __init__(self, message: str = "Invalid instruction.", instruction: Optional[str] = None) -> None:
        super().__init__(message)
        self.instruction = instruction

    def __str__(self) -> str:
        if self.instruction is not None:
            return f"{self.message} (instruction: {self.instruction!r})"
        return self.message
