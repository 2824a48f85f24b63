"""CLI entry point for gitwok.

This module provides the main CLI application that combines all commands
into a single unified interface.
"""

import typer

from gitwok.cli.add import add_command
from gitwok.cli.commit import commit_command
from gitwok.cli.init import init_command
from gitwok.cli.main import main_command
from gitwok.cli.version import version_command

# Main application
app = typer.Typer(
    name="gitwok",
    help="gitwok: configurable CLI for conventional commits",
    add_completion=False,
    no_args_is_help=True,
)

# Add individual commands
app.command("add")(add_command)
app.command("commit")(commit_command)
app.command("init")(init_command)
app.command("version")(version_command)

# Global options
app.callback()(main_command)


__all__ = [
    "app",
    "add_command",
    "commit_command",
    "init_command",
    "main_command",
    "version_command",
]
