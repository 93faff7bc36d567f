# tests/conftest.py
"""
Global pytest fixtures for behavioral tests.
"""

import pytest

from behavioral.commands.calculator import Calculator, Computer, Operator


@pytest.fixture
def calculator():
    """Return a fresh Calculator at 0."""
    return Calculator()


@pytest.fixture
def computer():
    """Return a fresh Computer with an empty history."""
    return Computer()


@pytest.fixture
def populated_computer():
    """Return a Computer after +100, -50, *10, /2 (value 250)."""
    computer = Computer()
    computer.compute(Operator.PLUS, 100)
    computer.compute(Operator.MINUS, 50)
    computer.compute(Operator.ASTERISK, 10)
    computer.compute(Operator.SLASH, 2)
    return computer


@pytest.fixture
def temp_dir(tmp_path):
    """Return a temporary directory as a Path."""
    return tmp_path


@pytest.fixture(autouse=True)
def reset_global_config():
    """Make sure no test sees configuration loaded by another."""
    from behavioral.config import reset_config

    reset_config()
    yield
    reset_config()
