"""Unit tests for the package logger."""

import logging

import pytest

from behavioral.core.logger import PACKAGE_NAME, get_logger, set_level


@pytest.fixture(autouse=True)
def restore_level():
    logger = logging.getLogger(PACKAGE_NAME)
    level = logger.level
    yield
    logger.setLevel(level)


def test_get_logger_configures_package_logger():
    logger = get_logger("behavioral.some.module")
    package_logger = logging.getLogger(PACKAGE_NAME)

    assert logger.name == "behavioral.some.module"
    assert package_logger.handlers
    assert package_logger.propagate is False


def test_set_level_numeric():
    set_level(logging.WARNING)

    assert logging.getLogger(PACKAGE_NAME).level == logging.WARNING


def test_set_level_by_name_is_case_insensitive():
    set_level("debug")

    assert logging.getLogger(PACKAGE_NAME).level == logging.DEBUG


def test_set_level_unknown_name_raises():
    with pytest.raises(ValueError):
        set_level("LOUD")
