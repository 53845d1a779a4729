"""Subprocess helpers for running external tools.

Every git, package-manager, generator and gh invocation goes through
``run_with_runner`` so tests can swap in a recording runner. Nothing here
decides whether a failure is fatal; call sites classify results.
"""

import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Protocol

from . import log


@dataclass(frozen=True)
class CommandRequest:
    """Typed command invocation request.

    ``capture_output`` is off for long-running tools (generators, installers)
    so their own progress output reaches the terminal.
    """

    argv: tuple[str, ...]
    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    capture_output: bool = True


@dataclass(frozen=True)
class CommandResult:
    """Typed command execution result."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def output(self) -> str:
        return (self.stderr or self.stdout or "").strip()


class CommandRunner(Protocol):
    """Runtime command-execution interface.

    Returns ``None`` when the executable cannot be found.
    """

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    """Default command-runner adapter backed by subprocess."""

    def run(self, request: CommandRequest) -> CommandResult | None:
        run_kwargs: dict[str, object] = {
            "cwd": request.cwd,
            "env": request.env,
            "check": False,
        }
        if request.capture_output:
            run_kwargs["capture_output"] = True
            run_kwargs["text"] = True
        try:
            completed = subprocess.run(list(request.argv), **run_kwargs)
        except FileNotFoundError:
            return None
        except NotADirectoryError:
            return None

        stdout = completed.stdout if isinstance(completed.stdout, str) else ""
        stderr = completed.stderr if isinstance(completed.stderr, str) else ""
        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=stdout,
            stderr=stderr,
        )


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


def run_with_runner(request: CommandRequest) -> CommandResult | None:
    """Execute a typed command request with the active runner."""
    log.command(request.argv)
    return _DEFAULT_COMMAND_RUNNER.run(request)


def run(
    argv: list[str] | tuple[str, ...],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    capture: bool = False,
) -> CommandResult | None:
    """Run ``argv`` once and return its result (``None`` if the tool is missing)."""
    return run_with_runner(
        CommandRequest(argv=tuple(argv), cwd=cwd, env=env, capture_output=capture)
    )


def succeeded(result: CommandResult | None) -> bool:
    return result is not None and result.ok


def failure_detail(argv: list[str] | tuple[str, ...], result: CommandResult | None) -> str:
    """Describe why a command did not succeed.

    Example:
        >>> failure_detail(["bun", "install"], None)
        'missing required command: bun'
        >>> failure_detail(["git", "push"], CommandResult(("git", "push"), 1))
        'command failed (exit 1): git push'
    """
    if result is None:
        return f"missing required command: {argv[0]}"
    command_text = shlex.join(argv)
    output = result.output()
    if output:
        return f"command failed (exit {result.returncode}): {command_text}\n{output}"
    return f"command failed (exit {result.returncode}): {command_text}"


def run_detached(argv: list[str], *, cwd: Path | None = None) -> bool:
    """Start ``argv`` without waiting for it; return ``False`` if it is missing."""
    log.command(argv)
    try:
        subprocess.Popen(argv, cwd=cwd, start_new_session=True)
    except FileNotFoundError:
        return False
    return True
