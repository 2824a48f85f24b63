"""CLI command for building and making a conventional commit."""

import json
from typing import Optional

import typer

from gitwok.cli.utils import get_state, load_config_or_exit
from gitwok.commit import CommitMessage, make_commit_message
from gitwok.git import Git, GitError
from gitwok.logs import get_logger
from gitwok.prompts import prompt_commit_message

logger = get_logger(__name__)


def has_message_flags(
    commit_type: Optional[str],
    scope: Optional[str],
    breaking: bool,
    description: Optional[str],
    body: Optional[str],
    footers: Optional[list[str]],
) -> bool:
    """Check if any commit message flag was given on the command line."""
    return (
        any(value is not None for value in (commit_type, scope, description, body))
        or breaking
        or bool(footers)
    )


def ensure_valid(msg: CommitMessage) -> None:
    """Exit with the validation reason if the message is invalid.

    Raises:
        typer.Exit: If the message is invalid.
    """
    ok, reason = msg.validate()
    if not ok:
        typer.echo(f"Error: {reason}", err=True)
        raise typer.Exit(1)


def commit_message(msg: CommitMessage, git: Git) -> str:
    """Validate, render and git commit a message.

    Args:
        msg: The commit message.
        git: Git runner.

    Returns:
        Output of git commit.

    Raises:
        typer.Exit: If the message is invalid or git fails.
    """
    ensure_valid(msg)

    message = msg.render()
    logger.debug("Executing git commit -m with msg:\n%s", message)

    try:
        return git.commit("-m", message)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)


def commit_command(
    ctx: typer.Context,
    commit_type: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        help="required: commit type",
    ),
    scope: Optional[str] = typer.Option(
        None,
        "--scope",
        "-s",
        help="optional: commit scope",
    ),
    breaking: bool = typer.Option(
        False,
        "--breaking",
        "-k",
        help="optional: has breaking change",
    ),
    description: Optional[str] = typer.Option(
        None,
        "--description",
        "-d",
        help="required: commit description",
    ),
    body: Optional[str] = typer.Option(
        None,
        "--body",
        "-b",
        help="optional: commit body",
    ),
    footers: Optional[list[str]] = typer.Option(
        None,
        "--footer",
        "-f",
        help="optional: commit footer, repeat for multiple footers",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Run git commit with --dry-run",
    ),
    print_only: bool = typer.Option(
        False,
        "--print",
        "-p",
        help="Print the commit message instead of committing",
    ),
    show_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the commit message fields as JSON instead of committing",
    ),
) -> None:
    """Build and make a conventional commit.

    Pass no message flag to use interactive mode, or build the commit
    message with flags.
    """
    state = get_state(ctx)

    if has_message_flags(commit_type, scope, breaking, description, body, footers):
        msg = make_commit_message(commit_type, scope, breaking, description, body, footers)
    else:
        config = load_config_or_exit(state)
        msg = prompt_commit_message(config.commit)

    if print_only or show_json:
        ensure_valid(msg)
        if show_json:
            data = msg.to_dict()
            data["message"] = msg.render()
            typer.echo(json.dumps(data, indent=2))
        else:
            typer.echo(msg.render(), nl=False)
        return

    git = Git(verbose=state.verbose, dry_run=dry_run)
    output = commit_message(msg, git)
    if output:
        typer.echo(output, nl=False)
    typer.echo("Commit successful!", err=True)
