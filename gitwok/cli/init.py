"""CLI command for writing a default gitwok.yaml."""

from pathlib import Path

import typer

from gitwok.config import CONFIG_FILE_NAME, ConfigError, default_config_dict, save_config


def init_command(
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing gitwok.yaml without asking",
    ),
) -> None:
    """Write a default gitwok.yaml to the current directory."""
    config_file = Path.cwd() / CONFIG_FILE_NAME

    if config_file.exists() and not force:
        overwrite = typer.confirm(
            f"{CONFIG_FILE_NAME} already exists. Overwrite?",
            default=False,
        )
        if not overwrite:
            typer.echo("Keeping existing configuration.")
            raise typer.Exit(0)

    try:
        save_config(config_file, default_config_dict())
    except ConfigError as e:
        typer.echo(f"Error saving configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Configuration saved to {config_file}")
