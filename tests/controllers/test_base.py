# tests/controllers/test_base.py
"""
Tests for BaseController and ControllerResult.
"""

import pytest

from behavioral.commands.calculator import Operator
from behavioral.controllers.base import BaseController, ControllerResult
from behavioral.models.calculator import CalculationStep, SessionSummary


class TestControllerResult:
    """Tests for ControllerResult dataclass."""

    def test_ok_creates_successful_result(self):
        """Test that ControllerResult.ok() creates a success result."""
        result = ControllerResult.ok(data={"key": "value"}, message="Success")

        assert result.success is True
        assert result.data == {"key": "value"}
        assert result.message == "Success"
        assert result.error is None

    def test_fail_creates_failed_result(self):
        """Test that ControllerResult.fail() creates a failure result."""
        result = ControllerResult.fail("Something went wrong")

        assert result.success is False
        assert result.error == "Something went wrong"
        assert result.data is None

    def test_to_dict_includes_all_fields(self):
        """Test that to_dict() includes all result fields."""
        result = ControllerResult.ok(
            data={"count": 5},
            message="Processed",
            warnings=["Warning 1"],
        )
        result_dict = result.to_dict()

        assert result_dict["success"] is True
        assert result_dict["data"] == {"count": 5}
        assert result_dict["warnings"] == ["Warning 1"]
        assert "metadata" not in result_dict

    def test_to_dict_serializes_models(self):
        """Test that data and metadata objects with to_dict() are serialized."""
        summary = SessionSummary(value=3, cursor=1, history_length=1)
        result = ControllerResult.fail("boom", summary=summary, instruction="/0")

        result_dict = result.to_dict()

        assert result_dict["data"] is None
        assert result_dict["metadata"]["summary"]["value"] == 3
        assert result_dict["metadata"]["instruction"] == "/0"


class TestBaseController:
    """Tests for BaseController."""

    @pytest.fixture
    def controller(self):
        return BaseController()

    def test_report_step_without_callback(self, controller):
        """Test that reporting without a callback does nothing."""
        controller._report_step(CalculationStep(operator=Operator.PLUS, operand=1, value=1))

    def test_report_step_calls_callback(self, controller, mocker):
        """Test that the step callback receives reported steps."""
        callback = mocker.Mock()
        controller.set_step_callback(callback)
        step = CalculationStep(operator=Operator.PLUS, operand=1, value=1)

        controller._report_step(step)

        callback.assert_called_once_with(step)
