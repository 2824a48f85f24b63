"""CLI command for staging changes."""

import typer

from gitwok.cli.utils import get_state
from gitwok.git import Git, GitError, NothingToStageError, add_all, find_unstaged, stage_files
from gitwok.prompts import prompt_files_to_stage


def add_command(
    ctx: typer.Context,
    all_changes: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Stage all changes",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Run git add/rm with --dry-run",
    ),
) -> None:
    """Stage changes with prompt and select."""
    state = get_state(ctx)
    git = Git(verbose=state.verbose, dry_run=dry_run)

    try:
        if all_changes:
            add_all(git)
            typer.echo("Staged all changes.", err=True)
            return

        files = find_unstaged(git)
        selected = prompt_files_to_stage(files)
        stage_files(git, selected)

        typer.echo(f"Staged {len(selected)} file(s):", err=True)
        for f in selected:
            typer.echo(f"  {f.path}")

    except NothingToStageError:
        typer.echo("Nothing to stage, working tree clean.", err=True)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
