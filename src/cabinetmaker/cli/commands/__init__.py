"""CLI command implementations for the cabinetmaker application.

This package contains subcommands for the cabinetmaker CLI, including:
- validate: Validate a configuration file
"""

from cabinetmaker.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
