"""CLI command modules."""

from sheetfit.cli.commands.validate import validate_command

__all__ = ["validate_command"]
