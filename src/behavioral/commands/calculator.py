# commands/calculator.py
"""
Calculator Commands
===================

Reversible arithmetic on a single integer accumulator.

Components:
    - Operator: The four arithmetic operators and their inverses
    - Calculator: Mutable integer register that operations are applied to
    - CalculatorCommand: One operator/operand pair bound to a Calculator
    - Computer: Issues commands and moves through their history

Usage:
    from behavioral.commands import Computer, Operator

    computer = Computer()
    computer.compute(Operator.PLUS, 100)
    computer.compute(Operator.MINUS, 50)
    computer.compute(Operator.ASTERISK, 10)
    computer.compute(Operator.SLASH, 2)   # value == 250

    computer.undo(4)                      # value == 0
    computer.redo(3)                      # value == 500

Division truncates toward zero in both directions, so undoing a division
that left a remainder does not restore the original value exactly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple

from behavioral.core.exceptions import DivisionByZeroError
from behavioral.core.logger import get_logger
from behavioral.models.calculator import CalculationStep

from .base import Command, CommandHistory

logger = get_logger(__name__)


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left >= 0) == (right > 0) else -quotient


class Operator(Enum):
    """Arithmetic operator, valued by its symbol."""

    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"

    @property
    def inverse(self) -> "Operator":
        """The operator that reverses this one."""
        return _INVERSES[self]

    def apply(self, left: int, right: int) -> int:
        """
        Compute ``left <op> right``.

        Raises:
            DivisionByZeroError: If this is SLASH and right is 0
        """
        if self is Operator.PLUS:
            return left + right
        if self is Operator.MINUS:
            return left - right
        if self is Operator.ASTERISK:
            return left * right
        if right == 0:
            raise DivisionByZeroError(
                f"Cannot divide {left} by zero", operator=self, operand=right
            )
        return _truncating_div(left, right)


_INVERSES = {
    Operator.PLUS: Operator.MINUS,
    Operator.MINUS: Operator.PLUS,
    Operator.ASTERISK: Operator.SLASH,
    Operator.SLASH: Operator.ASTERISK,
}


def inverse(operator: Operator) -> Operator:
    """Return the operator that undoes ``operator``."""
    return operator.inverse


StepListener = Callable[[CalculationStep], None]


class Calculator:
    """
    Single integer register starting at 0.

    The value can only change through operation(). Each operation is logged
    and passed to every registered listener as a CalculationStep.
    """

    def __init__(self):
        self._current = 0
        self._listeners: List[StepListener] = []

    @property
    def value(self) -> int:
        return self._current

    def add_listener(self, listener: StepListener) -> None:
        """Register a callback that receives every CalculationStep."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StepListener) -> None:
        """Unregister a callback. Unknown callbacks are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def operation(self, operator: Operator, operand: int) -> int:
        """
        Apply ``operator`` with ``operand`` to the current value.

        Args:
            operator: Operator to apply
            operand: Right-hand operand

        Returns:
            The new value

        Raises:
            DivisionByZeroError: On division by zero; the value is left unchanged
        """
        self._current = operator.apply(self._current, operand)

        step = CalculationStep(operator=operator, operand=operand, value=self._current)
        logger.info(str(step))
        for listener in list(self._listeners):
            try:
                listener(step)
            except Exception:
                logger.exception(f"Listener {listener!r} failed on {step}")

        return self._current


@dataclass(frozen=True)
class CalculatorCommand(Command):
    """A recorded operator/operand pair that can apply itself or its inverse."""

    operator: Operator
    operand: int
    calculator: Calculator

    @property
    def name(self) -> str:
        return f"{self.operator.value} {self.operand}"

    @property
    def description(self) -> str:
        return (
            f"Apply {self.operator.value} {self.operand}, "
            f"undone by {self.operator.inverse.value} {self.operand}"
        )

    def execute(self) -> None:
        self.calculator.operation(self.operator, self.operand)

    def unexecute(self) -> None:
        self.calculator.operation(self.operator.inverse, self.operand)


class Computer:
    """
    Issues calculator commands and keeps their undo/redo history.

    The Computer owns its Calculator; every command it creates is bound to
    that Calculator and lives only as long as the Computer does.

    Args:
        truncate_on_compute: Discard undone commands when a new command is
            computed. Pass False to keep them, in which case a later redo
            replays them after the new command.
    """

    def __init__(self, truncate_on_compute: bool = True):
        self._calculator = Calculator()
        self._history: CommandHistory[CalculatorCommand] = CommandHistory(
            truncate_on_record=truncate_on_compute
        )

    def __len__(self) -> int:
        return len(self._history)

    @property
    def calculator(self) -> Calculator:
        return self._calculator

    @property
    def value(self) -> int:
        """Current calculator value."""
        return self._calculator.value

    @property
    def cursor(self) -> int:
        """Number of commands currently applied."""
        return self._history.cursor

    @property
    def commands(self) -> Tuple[CalculatorCommand, ...]:
        return self._history.commands

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def compute(self, operator: Operator, operand: int) -> None:
        """
        Apply a new operation and record it.

        Raises:
            DivisionByZeroError: If dividing by zero; nothing is recorded
        """
        command = CalculatorCommand(operator=operator, operand=operand, calculator=self._calculator)
        command.execute()
        self._history.record(command)

    def undo(self, levels: int) -> None:
        """Undo up to ``levels`` commands. Extra levels are ignored."""
        logger.info(f"---- Undo {levels} levels")
        self._history.undo(levels)

    def redo(self, levels: int) -> None:
        """Redo up to ``levels`` undone commands. Extra levels are ignored."""
        logger.info(f"---- Redo {levels} levels")
        self._history.redo(levels)
