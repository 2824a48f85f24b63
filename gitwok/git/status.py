"""Git status utilities for selective staging.

Contains:
- Short format codes of changes not staged for commit
- translate_not_staged: Human readable state of a short format code
- UnstagedFile: A file with unstaged changes
- parse_unstaged: Extract unstaged files from `git status --short` output
- stage_files: Stage the given files with git add or git rm
- add_all: Stage every change
"""

from typing import NamedTuple

from gitwok.git.exceptions import NothingToStageError
from gitwok.git.runner import Git

# XY codes of `git status --short` for changes not staged for commit
CODE_ADDED_NOT_STAGED = " A"
CODE_MODIFIED_NOT_STAGED = " M"
CODE_DELETED_NOT_STAGED = " D"
CODE_RENAMED_NOT_STAGED = " R"
CODE_COPIED_NOT_STAGED = " C"
CODE_UNTRACKED = "??"

NOT_STAGED_STATES = {
    CODE_ADDED_NOT_STAGED: "added",
    CODE_MODIFIED_NOT_STAGED: "modified",
    CODE_DELETED_NOT_STAGED: "deleted",
    CODE_RENAMED_NOT_STAGED: "renamed",
    CODE_COPIED_NOT_STAGED: "copied",
    CODE_UNTRACKED: "untracked",
}


class UnstagedFile(NamedTuple):
    """A file with changes not staged for commit.

    orig is the source path of a rename or copy, empty otherwise.
    """

    code: str
    path: str
    orig: str = ""

    @property
    def state(self) -> str:
        return translate_not_staged(self.code)


def translate_not_staged(code: str) -> str:
    """Translate a short format XY code to a state name.

    Args:
        code: Two character XY code.

    Returns:
        The state, or "unknown" for codes without unstaged changes.
    """
    return NOT_STAGED_STATES.get(code, "unknown")


def parse_unstaged(status_output: str) -> list[UnstagedFile]:
    """Extract files with unstaged changes from `git status --short` output.

    For renames and copies ("XY ORIG_PATH -> PATH") the new path is the file
    path and the old one is kept as orig.

    Args:
        status_output: Raw output of `git status --short`.

    Returns:
        List of UnstagedFile in output order.
    """
    files = []
    for line in status_output.splitlines():
        if len(line) < 4:
            continue
        code = line[:2]
        if code not in NOT_STAGED_STATES:
            continue
        path = line[3:]
        orig = ""
        if " -> " in path:
            orig, path = path.split(" -> ", 1)
            orig = _unquote(orig)
        files.append(UnstagedFile(code, _unquote(path), orig))
    return files


def _unquote(path: str) -> str:
    return path.strip().strip('"')


def find_unstaged(git: Git) -> list[UnstagedFile]:
    """List files with unstaged changes in the current repository.

    Raises:
        NothingToStageError: If the working tree has no unstaged changes.
    """
    files = parse_unstaged(git.status_short())
    if not files:
        raise NothingToStageError("No unstaged changes found.")
    return files


def stage_files(git: Git, files: list[UnstagedFile]) -> None:
    """Stage files, using git rm for deletions and git add for the rest.

    Both paths of a rename go to git add, which records the removal of the
    old path along with the new one.

    Args:
        git: Git runner.
        files: Files to stage.
    """
    removed = [f.path for f in files if f.code == CODE_DELETED_NOT_STAGED]
    added = []
    for f in files:
        if f.code == CODE_DELETED_NOT_STAGED:
            continue
        if f.code == CODE_RENAMED_NOT_STAGED and f.orig:
            added.append(f.orig)
        added.append(f.path)

    if added:
        git.add("--", *added)
    if removed:
        git.rm("--", *removed)


def add_all(git: Git) -> None:
    """Stage all changes, including untracked and deleted files."""
    git.add("-A")
