"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NothingToStageError: Raised when the working tree has no unstaged changes
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NothingToStageError(GitError):
    """Raised when there are no unstaged changes."""

    pass
