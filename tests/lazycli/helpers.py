from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from lazycli.exec import CommandRequest, CommandResult


@dataclass
class Reply:
    """Scripted outcome for commands matching a prefix."""

    returncode: int = 0
    stdout: str = ""
    stderr: str = ""
    missing: bool = False
    effect: Callable[[CommandRequest], None] | None = None


@dataclass
class FakeRunner:
    """Command runner that records requests and replays scripted replies.

    Commands without a matching reply succeed with empty output. The longest
    matching argv prefix wins.
    """

    requests: list[CommandRequest] = field(default_factory=list)
    replies: list[tuple[tuple[str, ...], Reply]] = field(default_factory=list)

    def reply(self, *prefix: str, **outcome: object) -> None:
        self.replies.append((tuple(prefix), Reply(**outcome)))  # type: ignore[arg-type]

    def run(self, request: CommandRequest) -> CommandResult | None:
        self.requests.append(request)
        matched: tuple[tuple[str, ...], Reply] | None = None
        for prefix, reply in self.replies:
            if request.argv[: len(prefix)] != prefix:
                continue
            if matched is None or len(prefix) > len(matched[0]):
                matched = (prefix, reply)
        reply = matched[1] if matched else Reply()
        if reply.effect is not None:
            reply.effect(request)
        if reply.missing:
            return None
        return CommandResult(
            argv=request.argv,
            returncode=reply.returncode,
            stdout=reply.stdout,
            stderr=reply.stderr,
        )

    @property
    def argvs(self) -> list[list[str]]:
        return [list(request.argv) for request in self.requests]

    def cwds(self) -> list[Path | None]:
        return [request.cwd for request in self.requests]


def on_branch(runner: FakeRunner, branch: str) -> None:
    runner.reply("git", "rev-parse", "--abbrev-ref", "HEAD", stdout=f"{branch}\n")


def write_manifest(root: Path, payload: dict) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    manifest = root / "package.json"
    manifest.write_text(json.dumps(payload), encoding="utf-8")
    return manifest


def read_manifest(root: Path) -> dict:
    return json.loads((root / "package.json").read_text(encoding="utf-8"))
