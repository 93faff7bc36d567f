# controllers/base.py
"""
Base Controller
===============

Base class and result type for all controllers.
"""

from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from behavioral.models.calculator import CalculationStep

T = TypeVar("T")


@dataclass
class ControllerResult(Generic[T]):
    """
    Result object returned by controller operations.

    Provides a consistent interface for views to handle operation outcomes.
    """

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(
        cls,
        data: T = None,
        message: str = None,
        warnings: List[str] = None,
        **metadata,
    ) -> "ControllerResult[T]":
        """Create a successful result."""
        return cls(
            success=True,
            data=data,
            message=message,
            warnings=warnings or [],
            metadata=metadata,
        )

    @classmethod
    def fail(cls, error: str, warnings: List[str] = None, **metadata) -> "ControllerResult[T]":
        """Create a failed result."""
        return cls(
            success=False,
            error=error,
            warnings=warnings or [],
            metadata=metadata,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary."""
        result = {
            "success": self.success,
            "message": self.message,
            "error": self.error,
            "warnings": self.warnings,
        }

        # Serialize data if present
        if self.data is not None:
            if hasattr(self.data, "to_dict"):
                result["data"] = self.data.to_dict()
            elif is_dataclass(self.data):
                result["data"] = asdict(self.data)
            elif isinstance(self.data, (dict, list, str, int, float, bool)):
                result["data"] = self.data
            else:
                result["data"] = str(self.data)
        else:
            result["data"] = None

        # Include non-empty metadata
        if self.metadata:
            result["metadata"] = {
                key: value.to_dict() if hasattr(value, "to_dict") else value
                for key, value in self.metadata.items()
            }

        return result


# Type alias for step callback
StepCallback = Callable[[CalculationStep], None]


class BaseController:
    """
    Base class for all controllers.

    Provides common functionality for:
    - Streaming calculation steps to a view as they happen
    - Error handling and result formatting
    """

    def __init__(self):
        self._step_callback: Optional[StepCallback] = None

    def set_step_callback(self, callback: Optional[StepCallback]) -> None:
        """Set a callback that receives each calculation step as it is applied."""
        self._step_callback = callback

    def _report_step(self, step: CalculationStep) -> None:
        """Report a step if a callback is set."""
        if self._step_callback:
            self._step_callback(step)
