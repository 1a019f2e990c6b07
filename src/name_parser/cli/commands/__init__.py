"""
CLI command modules for name_parser.

Each command module defines a single Typer-compatible command function.
"""

from name_parser.cli.commands.batch import batch_command
from name_parser.cli.commands.parse import parse_command
from name_parser.cli.commands.stats import stats_command

__all__ = [
    "batch_command",
    "parse_command",
    "stats_command",
]
