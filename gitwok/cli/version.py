"""CLI command for printing version information."""

from importlib.metadata import PackageNotFoundError, version

import typer

from gitwok import __version__

DEPENDENCIES = ["typer", "pydantic", "PyYAML", "python-dotenv"]


def version_command(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print dependencies versions",
    ),
) -> None:
    """Print gitwok and its dependencies' versions."""
    typer.echo(f"gitwok v{__version__}")

    if verbose:
        typer.echo("Dependencies:")
        for name in DEPENDENCIES:
            try:
                dep_version = version(name)
            except PackageNotFoundError:
                dep_version = "not installed"
            typer.echo(f"  {name}: {dep_version}")
