"""Git helper functions used by the LazyCLI commands.

Each helper runs exactly one git command and returns its result; the
commands decide whether a failure is fatal.
"""

from pathlib import Path

from . import exec as exec_util
from .exec import CommandResult


def git_command(args: list[str]) -> list[str]:
    """Build a git command line.

    Example:
        >>> git_command(["status"])
        ['git', 'status']
    """
    return ["git", *args]


def has_git_dir(path: Path) -> bool:
    """Return whether ``path`` already contains a ``.git`` entry."""
    return (path / ".git").exists()


def init(cwd: Path) -> CommandResult | None:
    return exec_util.run(git_command(["init"]), cwd=cwd)


def clone(repo_url: str, cwd: Path) -> CommandResult | None:
    return exec_util.run(git_command(["clone", repo_url]), cwd=cwd)


def add_all(cwd: Path) -> CommandResult | None:
    return exec_util.run(git_command(["add", "."]), cwd=cwd)


def commit(cwd: Path, message: str) -> CommandResult | None:
    return exec_util.run(git_command(["commit", "-m", message]), cwd=cwd)


def push(cwd: Path, branch: str) -> CommandResult | None:
    return exec_util.run(git_command(["push", "origin", branch]), cwd=cwd)


def pull(cwd: Path, branch: str) -> CommandResult | None:
    return exec_util.run(git_command(["pull", "origin", branch]), cwd=cwd)


def current_branch(cwd: Path) -> str | None:
    """Return the checked-out branch name.

    Returns:
        Branch name, or ``None`` when git is missing or ``cwd`` is not inside
        a repository.
    """
    result = exec_util.run(
        git_command(["rev-parse", "--abbrev-ref", "HEAD"]), cwd=cwd, capture=True
    )
    if not exec_util.succeeded(result):
        return None
    branch = result.stdout.strip()
    return branch or None
