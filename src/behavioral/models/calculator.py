"""
Calculator data models.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .base import ToDictMixin

if TYPE_CHECKING:
    from behavioral.commands.calculator import Operator


@dataclass(frozen=True)
class CalculationStep(ToDictMixin):
    """One operation applied to the calculator and the value it produced."""

    operator: "Operator"
    operand: int
    value: int

    def __str__(self) -> str:
        return f"Current value = {self.value} (following {self.operator.name.lower()} {self.operand})"


@dataclass
class SessionSummary(ToDictMixin):
    """
    Outcome of running a list of calculator instructions.

    Attributes:
        steps: Every operation applied, including the inverse operations
            applied while undoing
        value: Calculator value after the last instruction
        cursor: Number of commands currently applied
        history_length: Number of commands recorded
    """

    steps: List[CalculationStep] = field(default_factory=list)
    value: int = 0
    cursor: int = 0
    history_length: int = 0

    @property
    def redo_available(self) -> int:
        """Number of undone commands that can still be redone."""
        return self.history_length - self.cursor

    def _to_dict_extra(self) -> Optional[Dict[str, Any]]:
        return {"redo_available": self.redo_available}
