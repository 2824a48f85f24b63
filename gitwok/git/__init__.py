"""Git executor for gitwok.

This package wraps the git commands gitwok needs:
- exceptions: GitError, NothingToStageError
- runner: Git, has_dry_run_flag, prepend_arg
- status: translate_not_staged, parse_unstaged, find_unstaged, stage_files, add_all
"""

# Exceptions
from gitwok.git.exceptions import (
    GitError,
    NothingToStageError,
)

# Runner
from gitwok.git.runner import (
    GIT_EXEC,
    Git,
    has_dry_run_flag,
    prepend_arg,
)

# Status and staging
from gitwok.git.status import (
    CODE_ADDED_NOT_STAGED,
    CODE_COPIED_NOT_STAGED,
    CODE_DELETED_NOT_STAGED,
    CODE_MODIFIED_NOT_STAGED,
    CODE_RENAMED_NOT_STAGED,
    CODE_UNTRACKED,
    UnstagedFile,
    add_all,
    find_unstaged,
    parse_unstaged,
    stage_files,
    translate_not_staged,
)


__all__ = [
    # Exceptions
    "GitError",
    "NothingToStageError",
    # Runner
    "GIT_EXEC",
    "Git",
    "has_dry_run_flag",
    "prepend_arg",
    # Status
    "CODE_ADDED_NOT_STAGED",
    "CODE_MODIFIED_NOT_STAGED",
    "CODE_DELETED_NOT_STAGED",
    "CODE_RENAMED_NOT_STAGED",
    "CODE_COPIED_NOT_STAGED",
    "CODE_UNTRACKED",
    "UnstagedFile",
    "translate_not_staged",
    "parse_unstaged",
    "find_unstaged",
    "stage_files",
    "add_all",
]
