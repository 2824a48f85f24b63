"""Git command runner.

Contains:
- GIT_EXEC: Name of the git executable
- has_dry_run_flag: Check if "--dry-run" is already in the arguments
- prepend_arg: Put an argument in front of an argument list
- Git: Runs git add, rm, commit and status with optional dry run
"""

import subprocess

from gitwok.git.exceptions import GitError
from gitwok.logs import get_logger

logger = get_logger(__name__)

GIT_EXEC = "git"

DRY_RUN_FLAG = "--dry-run"


def has_dry_run_flag(args: list[str]) -> bool:
    """Check if "--dry-run" is passed in already.

    "-n" is not checked since it means something else for some commands,
    e.g. "--no-verify" for git commit.

    Args:
        args: Git sub-command arguments.

    Returns:
        True if "--dry-run" is present.
    """
    return DRY_RUN_FLAG in args


def prepend_arg(arg: str, args: list[str]) -> list[str]:
    """Return a new list with arg in front of args."""
    return [arg] + list(args)


class Git:
    """Runs git sub-commands for the current working directory.

    Attributes:
        verbose: Log the output of every command.
        dry_run: Add "--dry-run" to add, rm and commit.
    """

    def __init__(self, verbose: bool = False, dry_run: bool = False):
        self.verbose = verbose
        self.dry_run = dry_run

    def _with_dry_run(self, args: tuple[str, ...]) -> list[str]:
        args = list(args)
        if self.dry_run and not has_dry_run_flag(args):
            args = prepend_arg(DRY_RUN_FLAG, args)
        return args

    def run(self, args: list[str]) -> str:
        """Run a git command and return its output.

        Args:
            args: List of arguments to pass to git.

        Returns:
            The stdout of the git command.

        Raises:
            GitError: If the command fails.
        """
        logger.debug("Executing: %s %s", GIT_EXEC, " ".join(args))
        try:
            result = subprocess.run(
                [GIT_EXEC] + args,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH.")

        if self.verbose:
            logger.debug("git %s output:\n%s", args[0], result.stdout)
        return result.stdout

    def add(self, *args: str) -> str:
        """Run `git add <args>`."""
        return self.run(prepend_arg("add", self._with_dry_run(args)))

    def rm(self, *args: str) -> str:
        """Run `git rm <args>` to stage the deletion of files."""
        return self.run(prepend_arg("rm", self._with_dry_run(args)))

    def commit(self, *args: str) -> str:
        """Run `git commit <args>`."""
        return self.run(prepend_arg("commit", self._with_dry_run(args)))

    def status_short(self) -> str:
        """Run `git status --short` and return its raw output."""
        return self.run(["status", "--short"])
