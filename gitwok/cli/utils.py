"""Shared utility functions for CLI commands."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from gitwok.config import ConfigError, GitwokConfig, load_config


@dataclass
class CliState:
    """Global options shared by every command."""

    config_file: Optional[Path] = None
    verbose: bool = False


def get_state(ctx: typer.Context) -> CliState:
    """Get the global options stored by the main callback.

    Args:
        ctx: Typer context of the running command.

    Returns:
        The CliState, defaults if the callback did not run.
    """
    if isinstance(ctx.obj, CliState):
        return ctx.obj
    return CliState()


def load_config_or_exit(state: CliState) -> GitwokConfig:
    """Load the configuration, exiting with an error message on failure.

    Args:
        state: Global CLI options.

    Returns:
        The loaded configuration.

    Raises:
        typer.Exit: If the configuration can't be loaded.
    """
    try:
        return load_config(state.config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
