"""Command-line interface for behavioral."""

from .cli import cli

__all__ = ["cli"]
