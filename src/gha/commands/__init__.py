"""gha CLI commands.

Each command module contains the business logic for a CLI command.
The cli.py module handles typer options and exit codes, then
delegates to these command functions.
"""

from gha.commands.dispatch import dispatch_command
from gha.commands.generate import gen_makefile_command, generate_makefile
from gha.commands.list import list_command

__all__ = [
    "dispatch_command",
    "gen_makefile_command",
    "generate_makefile",
    "list_command",
]
