# controllers/calculator.py
"""
Calculator Controller
=====================

Runs textual calculator instructions against a Computer and reports the
outcome as a ControllerResult.

Instruction syntax:
    +100, -50, *10, /2          compute with a symbol
    add:100, sub:50, mul:10,    compute with a name (plus, minus, asterisk
    div:2                       and slash are accepted too)
    undo:N, redo:N              undo/redo N levels ("undo" alone means 1)
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from behavioral.commands.calculator import Computer, Operator
from behavioral.core.exceptions import BehavioralError, InstructionError
from behavioral.core.logger import get_logger
from behavioral.models.calculator import CalculationStep, SessionSummary

from .base import BaseController, ControllerResult

logger = get_logger(__name__)

COMPUTE = "compute"
UNDO = "undo"
REDO = "redo"

OPERATOR_NAMES = {
    "add": Operator.PLUS,
    "plus": Operator.PLUS,
    "sub": Operator.MINUS,
    "minus": Operator.MINUS,
    "mul": Operator.ASTERISK,
    "asterisk": Operator.ASTERISK,
    "div": Operator.SLASH,
    "slash": Operator.SLASH,
}

# Classic command pattern walkthrough: four computes, undo 4, redo 3
DEMO_INSTRUCTIONS = ["+100", "-50", "*10", "/2", "undo:4", "redo:3"]

_HISTORY_RE = re.compile(r"^(undo|redo)(?::(-?\d+))?$")
_SYMBOL_RE = re.compile(r"^([+\-*/])\s*(-?\d+)$")
_NAMED_RE = re.compile(r"^([a-z]+):(-?\d+)$")


@dataclass(frozen=True)
class Instruction:
    """A parsed calculator instruction."""

    action: str
    operator: Optional[Operator] = None
    amount: int = 1

    def __str__(self) -> str:
        if self.action == COMPUTE:
            return f"{self.operator.value}{self.amount}"
        return f"{self.action}:{self.amount}"


def parse_instruction(text: str) -> Instruction:
    """
    Parse one instruction.

    Args:
        text: Instruction text such as "+100", "div:2" or "undo:3"

    Returns:
        The parsed Instruction

    Raises:
        InstructionError: If the text is not a valid instruction
    """
    token = text.strip().lower()

    match = _HISTORY_RE.match(token)
    if match:
        levels = int(match.group(2)) if match.group(2) is not None else 1
        return Instruction(action=match.group(1), amount=levels)

    match = _SYMBOL_RE.match(token)
    if match:
        return Instruction(
            action=COMPUTE,
            operator=Operator(match.group(1)),
            amount=int(match.group(2)),
        )

    match = _NAMED_RE.match(token)
    if match:
        operator = OPERATOR_NAMES.get(match.group(1))
        if operator is None:
            raise InstructionError(f"Unknown operator '{match.group(1)}'", instruction=text)
        return Instruction(action=COMPUTE, operator=operator, amount=int(match.group(2)))

    raise InstructionError("Unrecognized instruction", instruction=text)


class CalculatorController(BaseController):
    """
    Controller for a calculator session.

    Keeps one Computer across calls, so instructions from successive runs
    share the same value and undo/redo history.
    """

    def __init__(self, truncate_on_compute: bool = True):
        super().__init__()
        self.truncate_on_compute = truncate_on_compute
        self._computer = Computer(truncate_on_compute=truncate_on_compute)

    @property
    def computer(self) -> Computer:
        return self._computer

    def reset(self) -> None:
        """Start over with a fresh Computer."""
        self._computer = Computer(truncate_on_compute=self.truncate_on_compute)

    def execute(self, instruction: Instruction) -> None:
        """
        Apply one instruction to the Computer.

        Raises:
            DivisionByZeroError: If the instruction divides by zero, directly
                or by undoing a multiplication by zero
        """
        if instruction.action == COMPUTE:
            self._computer.compute(instruction.operator, instruction.amount)
        elif instruction.action == UNDO:
            self._computer.undo(instruction.amount)
        elif instruction.action == REDO:
            self._computer.redo(instruction.amount)
        else:
            raise InstructionError(f"Unknown action '{instruction.action}'", instruction=str(instruction))

    def run(self, instructions: Sequence[str]) -> ControllerResult[SessionSummary]:
        """
        Parse and apply a list of instructions.

        All instructions are parsed before any is applied, so a typo never
        leaves the session half-updated. An arithmetic error stops the run
        and the steps applied before it are kept.

        Args:
            instructions: Instruction texts, applied in order

        Returns:
            ControllerResult containing a SessionSummary
        """
        try:
            parsed = [parse_instruction(text) for text in instructions]
        except InstructionError as e:
            return ControllerResult.fail(str(e))

        steps: List[CalculationStep] = []

        def collect(step: CalculationStep) -> None:
            steps.append(step)
            self._report_step(step)

        calculator = self._computer.calculator
        calculator.add_listener(collect)
        try:
            for instruction in parsed:
                try:
                    self.execute(instruction)
                except BehavioralError as e:
                    logger.warning(f"Instruction {instruction} failed: {e}")
                    return ControllerResult.fail(
                        str(e),
                        instruction=str(instruction),
                        summary=self._summarize(steps),
                    )
        finally:
            calculator.remove_listener(collect)

        summary = self._summarize(steps)
        return ControllerResult.ok(
            data=summary,
            message=f"Applied {len(parsed)} instruction(s); value is {summary.value}",
        )

    def demo(self) -> ControllerResult[SessionSummary]:
        """Run the classic command pattern example on a fresh session."""
        self.reset()
        return self.run(DEMO_INSTRUCTIONS)

    def _summarize(self, steps: List[CalculationStep]) -> SessionSummary:
        return SessionSummary(
            steps=list(steps),
            value=self._computer.value,
            cursor=self._computer.cursor,
            history_length=len(self._computer),
        )
