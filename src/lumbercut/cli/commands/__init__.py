"""CLI command implementations for the lumbercut application.

This package contains subcommands for the lumbercut CLI, including:
- validate: Validate a configuration file
"""

from lumbercut.cli.commands.validate import validate_command

__all__ = ["validate_command"]
