"""
CLI Helpers
===========

Error handling utilities shared by CLI commands.

Usage:
    from behavioral.cli.helpers import handle_result

    summary = handle_result(controller.run(["+1"]))  # Exits with error message if failed
"""

from typing import TYPE_CHECKING, TypeVar

import click

if TYPE_CHECKING:
    from behavioral.controllers.base import ControllerResult

T = TypeVar("T")


def handle_result(result: "ControllerResult[T]") -> T:
    """
    Handle a controller result, exiting with error if failed.

    Args:
        result: Controller result to handle

    Returns:
        The result data if successful

    Raises:
        SystemExit: If result indicates failure (exits with code 1)
    """
    if not result.success:
        exit_with_error(result.error or "Unknown error")
    return result.data


def exit_with_error(message: str, code: int = 1) -> None:
    """
    Print error message and exit.

    Args:
        message: Error message to display
        code: Exit code (default: 1)

    Raises:
        SystemExit: Always exits with specified code
    """
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(code)
