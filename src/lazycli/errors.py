"""Failure contracts for LazyCLI commands.

Commands raise ``LazyError`` subclasses for expected failures (bad arguments,
unmet preconditions, fatal external steps, cancelled prompts). The CLI layer
catches them, prints the message and hint, and exits with status 1.
Programmer bugs raise normal exceptions.
"""

from __future__ import annotations

from typing import Literal

LazyErrorCode = Literal[
    "usage",
    "precondition",
    "step_failed",
    "github_cli",
    "cancelled",
    "config_invalid",
]

GITHUB_CLI_HINT = "\n".join(
    (
        "⚠️ GitHub CLI (gh) is not installed, not on PATH, or not authenticated.",
        "👉 To enable automatic pull request creation:",
        "   1. Download and install GitHub CLI: https://cli.github.com/",
        "   2. Run 'gh auth login' once to authenticate.",
        "   3. If already installed on Windows, add it to your PATH in Git Bash:",
        '      export PATH="/c/Program Files/GitHub CLI:$PATH"',
    )
)


class LazyError(Exception):
    """Expected command failure.

    Args:
        code: Stable failure code for callers and tests.
        message: Human-readable failure summary.
        recovery_hint: Optional actionable follow-up text.
    """

    exit_code = 1

    def __init__(
        self,
        code: LazyErrorCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recovery_hint = recovery_hint


class UsageError(LazyError):
    """Missing or invalid required argument."""

    def __init__(self, message: str, *, usage: str | None = None) -> None:
        hint = f"👉 Usage: {usage}" if usage else None
        super().__init__("usage", message, recovery_hint=hint)


class PreconditionError(LazyError):
    """The environment is not in a state where the command can run."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("precondition", message, recovery_hint=recovery_hint)


class StepFailedError(LazyError):
    """A fatal external step (generator, clone, commit, push, pull) failed."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__("step_failed", message, recovery_hint=detail)


class GitHubCliError(LazyError):
    """The GitHub CLI is missing or could not create the pull request."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        hint = GITHUB_CLI_HINT if not detail else f"{detail}\n{GITHUB_CLI_HINT}"
        super().__init__("github_cli", message, recovery_hint=hint)


class SetupCancelled(LazyError):
    """The user answered the skip/cancel token during a prompt sequence."""

    def __init__(self, answered: int = 0) -> None:
        super().__init__("cancelled", "🚫 Setup cancelled.")
        self.answered = answered


class ConfigInvalidError(LazyError):
    """The user configuration file could not be parsed."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("config_invalid", message, recovery_hint=recovery_hint)
