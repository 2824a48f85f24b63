"""Interactive prompts for gitwok.

Contains:
- select_option: Numbered single choice prompt
- find_editor, open_editor: Locate and run the user's editor
- prompt_multiline: Multi-line answer through the user's editor
- prompt_commit_message: Ask for every part of a commit message
- parse_selection: Parse "1,3-5" style index selections
- prompt_files_to_stage: Ask which unstaged files to stage
"""

import logging
import os
import shlex
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Optional

import typer

from gitwok.commit import CommitMessage, make_commit_message, match_footers
from gitwok.config import CommitConfig
from gitwok.git import UnstagedFile
from gitwok.logs import get_logger

logger = get_logger(__name__)

# Everything below this line is dropped from editor answers, as git does
SCISSORS = "# ------------------------ >8 ------------------------"


def select_option(message: str, options: list[str], default: int = 1) -> str:
    """Ask the user to pick one of the options by number.

    Args:
        message: Prompt message.
        options: Options to choose from.
        default: 1-based default choice.

    Returns:
        The chosen option.
    """
    typer.echo(message)
    for i, option in enumerate(options, 1):
        typer.echo(f"  {i}. {option}")

    while True:
        choice = typer.prompt(f"Select (1-{len(options)})", type=int, default=default)
        if 1 <= choice <= len(options):
            return options[choice - 1]
        typer.echo("Invalid choice.", err=True)


def strip_scissors(text: str) -> str:
    """Drop the scissors line and everything after it."""
    index = text.find(SCISSORS)
    if index != -1:
        text = text[:index]
    return text


def find_editor() -> list[str]:
    """Find an available text editor.

    Preference order:
    1. $VISUAL, then $EDITOR (may carry arguments, e.g. "code --wait")
    2. nano if available
    3. vi

    Returns:
        List of command parts to run the editor.
    """
    for env_name in ("VISUAL", "EDITOR"):
        editor = os.environ.get(env_name)
        if editor and editor.strip():
            return shlex.split(editor)

    # noinspection PyArgumentList
    if shutil.which("nano"):
        return ["nano"]

    return ["vi"]


def open_editor(file_path: Path) -> None:
    """Open the file in an editor and wait for it to close.

    Args:
        file_path: Path to the file to edit.

    Raises:
        typer.Exit: If the editor can't be started.
    """
    editor_cmd = find_editor()
    logger.debug("Opening editor: %s", " ".join(editor_cmd))

    try:
        result = subprocess.run(editor_cmd + [str(file_path)], check=False)
    except FileNotFoundError:
        typer.echo(f"Error: Editor not found: {editor_cmd[0]}", err=True)
        raise typer.Exit(1)

    if result.returncode != 0:
        typer.echo(f"Warning: Editor exited with code {result.returncode}", err=True)


def prompt_multiline(message: str) -> str:
    """Open the editor for a multi-line answer.

    Args:
        message: Explanation shown below the scissors line.

    Returns:
        The answer, without the scissors line and anything after it.
    """
    template = f"\n{SCISSORS}\n# {message}\n# Everything below the line above is ignored.\n"

    with tempfile.TemporaryDirectory(prefix="gitwok-") as tmp_dir:
        answer_file = Path(tmp_dir) / "GITWOK_EDITMSG"
        answer_file.write_text(template)
        open_editor(answer_file)
        answer = answer_file.read_text()

    return strip_scissors(answer)


def _prompt_description() -> str:
    while True:
        description = typer.prompt("Enter commit description", default="", show_default=False)
        if description.strip():
            return description
        typer.echo("Description is required.", err=True)


def prompt_commit_message(
    config: Optional[CommitConfig] = None,
    log: Optional[logging.Logger] = None,
) -> CommitMessage:
    """Use interactive prompts to build a commit message.

    Args:
        config: Commit configuration deciding options and optional prompts.
        log: Logger passed to the footer parser.

    Returns:
        The normalized CommitMessage.
    """
    config = config or CommitConfig()

    commit_type = select_option("Choose commit type:", config.type)

    scope = ""
    if config.prompt.scope:
        if config.scope:
            scope = select_option("Choose commit scope:", config.scope)
        else:
            scope = typer.prompt("Enter commit scope", default="", show_default=False)

    breaking = False
    if config.prompt.breaking:
        breaking = typer.confirm("Includes breaking changes?", default=False)

    description = _prompt_description()

    body = ""
    if config.prompt.body:
        body = prompt_multiline("Enter optional commit body.")

    footers: list[str] = []
    if config.prompt.footers:
        raw_footers = prompt_multiline(
            "Enter optional footers, e.g. 'Refs #123' or 'BREAKING CHANGE: <description>'."
        )
        footers = match_footers(raw_footers.strip(), log=log or logger)

    return make_commit_message(commit_type, scope, breaking, description, body, footers)


def parse_selection(text: str, count: int) -> list[int]:
    """Parse a selection such as "1,3-5" into 0-based indices.

    "a" or "all" selects everything.

    Args:
        text: User input.
        count: Number of selectable items.

    Returns:
        Sorted unique 0-based indices.

    Raises:
        ValueError: If the input is malformed or out of range.
    """
    text = text.strip().lower()
    if text in ("a", "all"):
        return list(range(count))

    indices = set()
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part:
            start_str, end_str = part.split("-", 1)
            start, end = int(start_str), int(end_str)
        else:
            start = end = int(part)
        if start < 1 or end > count or start > end:
            raise ValueError(f"Selection out of range: {part}")
        indices.update(range(start - 1, end))

    if not indices:
        raise ValueError("Nothing selected")
    return sorted(indices)


def prompt_files_to_stage(files: list[UnstagedFile]) -> list[UnstagedFile]:
    """Ask which unstaged files to stage.

    Args:
        files: Files with unstaged changes.

    Returns:
        The selected files, in listing order.
    """
    typer.echo("Changes not staged for commit:")
    for i, f in enumerate(files, 1):
        typer.echo(f"  {i}. [{f.state}] {f.path}")

    while True:
        answer = typer.prompt("Select files to stage (e.g. 1,3-5 or 'a' for all)")
        try:
            return [files[i] for i in parse_selection(answer, len(files))]
        except ValueError as e:
            typer.echo(f"Invalid selection: {e}", err=True)
