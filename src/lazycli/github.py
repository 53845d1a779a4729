"""GitHub CLI adapter for pull-request creation."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from . import exec as exec_util
from . import log
from .errors import GitHubCliError


@dataclass(frozen=True)
class PullRequest:
    base: str
    head: str
    title: str
    body: str

    def create_argv(self) -> list[str]:
        """Return the ``gh`` invocation that opens this pull request.

        Example:
            >>> request = PullRequest("main", "feature", "Add x", "Add x")
            >>> request.create_argv()  # doctest: +NORMALIZE_WHITESPACE
            ['gh', 'pr', 'create', '--base', 'main', '--head', 'feature',
             '--title', 'Add x', '--body', 'Add x']
        """
        return [
            "gh",
            "pr",
            "create",
            "--base",
            self.base,
            "--head",
            self.head,
            "--title",
            self.title,
            "--body",
            self.body,
        ]


@dataclass(frozen=True)
class GithubClient:
    """Command-boundary adapter for the GitHub CLI; no retries."""

    def available(self) -> bool:
        return shutil.which("gh") is not None

    def create_pull_request(self, request: PullRequest, *, cwd: Path) -> str:
        """Open a pull request and return what ``gh`` printed (usually the URL).

        Raises:
            GitHubCliError: ``gh`` is not installed or the command failed.
        """
        if not self.available():
            raise GitHubCliError("❌ Pull request creation failed: gh was not found on PATH.")
        argv = request.create_argv()
        result = exec_util.run(argv, cwd=cwd, capture=True)
        if result is None:
            raise GitHubCliError("❌ Pull request creation failed: gh was not found on PATH.")
        if not result.ok:
            raise GitHubCliError(
                "❌ Pull request creation failed.",
                detail=exec_util.failure_detail(argv, result),
            )
        url = result.stdout.strip()
        if url:
            log.info(f"🔗 {url}")
        return url
