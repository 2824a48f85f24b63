"""Main callback handling the global options."""

from pathlib import Path
from typing import Optional

import typer

from gitwok.cli.utils import CliState
from gitwok.logs import configure_logging


def main_command(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Config file (default is gitwok.yaml in the current or home directory)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Run commands with verbose output",
    ),
) -> None:
    """Configurable CLI for conventional commits."""
    configure_logging(verbose)
    ctx.obj = CliState(config_file=config, verbose=verbose)
