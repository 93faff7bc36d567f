"""
Unit tests for Calculator and CalculatorCommand.
"""

import dataclasses
import logging

import pytest

from behavioral.commands.calculator import Calculator, CalculatorCommand, Operator
from behavioral.core.exceptions import DivisionByZeroError
from behavioral.core.logger import PACKAGE_NAME
from behavioral.models.calculator import CalculationStep


@pytest.fixture
def package_caplog(caplog):
    """caplog wired to the package logger, which does not propagate."""
    logger = logging.getLogger(PACKAGE_NAME)
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.INFO, logger=PACKAGE_NAME)
    yield caplog
    logger.removeHandler(caplog.handler)


class TestCalculator:
    """Tests for the Calculator accumulator."""

    def test_starts_at_zero(self, calculator):
        """Test that a new calculator holds 0."""
        assert calculator.value == 0

    def test_operation_returns_new_value(self, calculator):
        """Test that operation() applies and returns the new value."""
        assert calculator.operation(Operator.PLUS, 100) == 100
        assert calculator.operation(Operator.MINUS, 50) == 50
        assert calculator.operation(Operator.ASTERISK, 10) == 500
        assert calculator.operation(Operator.SLASH, 2) == 250
        assert calculator.value == 250

    def test_value_is_read_only(self, calculator):
        """Test that the value cannot be assigned from outside."""
        with pytest.raises(AttributeError):
            calculator.value = 42

    def test_division_by_zero_leaves_value_unchanged(self, calculator):
        """Test that a failed division does not touch the value."""
        calculator.operation(Operator.PLUS, 9)

        with pytest.raises(DivisionByZeroError):
            calculator.operation(Operator.SLASH, 0)

        assert calculator.value == 9

    def test_listener_receives_steps(self, calculator, mocker):
        """Test that listeners are called with each CalculationStep."""
        listener = mocker.Mock()
        calculator.add_listener(listener)

        calculator.operation(Operator.PLUS, 100)
        calculator.operation(Operator.ASTERISK, 3)

        assert listener.call_args_list == [
            mocker.call(CalculationStep(operator=Operator.PLUS, operand=100, value=100)),
            mocker.call(CalculationStep(operator=Operator.ASTERISK, operand=3, value=300)),
        ]

    def test_removed_listener_is_not_called(self, calculator, mocker):
        """Test that remove_listener stops notifications."""
        listener = mocker.Mock()
        calculator.add_listener(listener)
        calculator.remove_listener(listener)

        calculator.operation(Operator.PLUS, 1)

        listener.assert_not_called()

    def test_remove_unknown_listener_is_ignored(self, calculator):
        """Test that removing a listener that was never added is harmless."""
        calculator.remove_listener(lambda step: None)

    def test_failed_operation_does_not_notify(self, calculator, mocker):
        """Test that listeners only hear about successful operations."""
        listener = mocker.Mock()
        calculator.add_listener(listener)

        with pytest.raises(DivisionByZeroError):
            calculator.operation(Operator.SLASH, 0)

        listener.assert_not_called()

    def test_operation_is_logged(self, calculator, package_caplog):
        """Test that each operation reports the value and what produced it."""
        calculator.operation(Operator.PLUS, 100)

        assert "Current value = 100 (following plus 100)" in package_caplog.text

    def test_listener_error_is_logged_and_later_listeners_still_run(self, calculator, mocker, package_caplog):
        """Test that a failing listener is reported without stopping the others."""
        second = mocker.Mock()
        calculator.add_listener(mocker.Mock(side_effect=RuntimeError("boom")))
        calculator.add_listener(second)

        assert calculator.operation(Operator.PLUS, 7) == 7

        second.assert_called_once()
        assert "failed on Current value = 7" in package_caplog.text
        assert "RuntimeError: boom" in package_caplog.text


class TestCalculatorCommand:
    """Tests for CalculatorCommand."""

    def test_execute_applies_operation(self, calculator):
        """Test that execute() applies the operator and operand."""
        command = CalculatorCommand(operator=Operator.PLUS, operand=7, calculator=calculator)

        command.execute()

        assert calculator.value == 7

    @pytest.mark.parametrize(
        "operator,operand",
        [
            (Operator.PLUS, 12),
            (Operator.MINUS, 12),
            (Operator.ASTERISK, 12),
            (Operator.SLASH, 4),
        ],
    )
    def test_unexecute_reverses_execute(self, calculator, operator, operand):
        """Test that unexecute() restores the value for exact operations."""
        calculator.operation(Operator.PLUS, 48)
        command = CalculatorCommand(operator=operator, operand=operand, calculator=calculator)

        command.execute()
        command.unexecute()

        assert calculator.value == 48

    def test_unexecute_after_uneven_division_is_lossy(self, calculator):
        """Test that undoing a division with a remainder loses the remainder."""
        calculator.operation(Operator.PLUS, 7)
        command = CalculatorCommand(operator=Operator.SLASH, operand=2, calculator=calculator)

        command.execute()
        assert calculator.value == 3

        command.unexecute()
        assert calculator.value == 6

    def test_unexecute_multiply_by_zero_raises(self, calculator):
        """Test that reversing a multiplication by zero divides by zero."""
        command = CalculatorCommand(operator=Operator.ASTERISK, operand=0, calculator=calculator)
        command.execute()

        with pytest.raises(DivisionByZeroError):
            command.unexecute()

    def test_command_is_immutable(self, calculator):
        """Test that a command's fields cannot change after creation."""
        command = CalculatorCommand(operator=Operator.PLUS, operand=1, calculator=calculator)

        with pytest.raises(dataclasses.FrozenInstanceError):
            command.operand = 2

    def test_name_and_description(self, calculator):
        """Test the human-readable command text."""
        command = CalculatorCommand(operator=Operator.ASTERISK, operand=10, calculator=calculator)

        assert command.name == "* 10"
        assert "undone by / 10" in command.description
