# ruff: noqa: E402

import builtins
import shutil
import sys
from collections.abc import Callable
from pathlib import Path

import pytest
from _pytest.doctest import DoctestModule

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import lazycli.exec as exec_util
import lazycli.io as io
import lazycli.log as lazy_log
from tests.lazycli.helpers import FakeRunner

PACKAGE = ROOT / "src" / "lazycli"
DOCTEST_MODULES = {
    PACKAGE / "__init__.py",
    PACKAGE / "config.py",
    PACKAGE / "exec.py",
    PACKAGE / "git.py",
    PACKAGE / "github.py",
    PACKAGE / "log.py",
    PACKAGE / "models.py",
    PACKAGE / "packages.py",
    PACKAGE / "paths.py",
    PACKAGE / "project.py",
    PACKAGE / "templates.py",
    PACKAGE / "commands" / "django.py",
    PACKAGE / "commands" / "next_js.py",
    PACKAGE / "commands" / "node_js.py",
    PACKAGE / "commands" / "react_native.py",
    PACKAGE / "commands" / "upgrade.py",
    PACKAGE / "commands" / "vite_js.py",
}


@pytest.fixture(autouse=True)
def _default_patches(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.setattr(lazy_log, "_configured_level", None)
    monkeypatch.setattr(lazy_log, "_no_color_override", True)
    monkeypatch.delenv("LAZYCLI_LOG_LEVEL", raising=False)

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)


@pytest.fixture
def fake_runner(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    """Record every external command instead of running it."""
    runner = FakeRunner()
    monkeypatch.setattr(exec_util, "_DEFAULT_COMMAND_RUNNER", runner)
    return runner


@pytest.fixture
def on_path(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Pretend exactly the given executables are installed."""

    def install(*names: str) -> None:
        available = set(names)
        monkeypatch.setattr(
            shutil,
            "which",
            lambda name, *args, **kwargs: f"/usr/bin/{name}" if name in available else None,
        )

    install()
    return install


@pytest.fixture
def answers(monkeypatch: pytest.MonkeyPatch) -> Callable[..., list[str]]:
    """Feed scripted lines to ``input()`` and return the prompts shown."""
    shown: list[str] = []

    def install(*lines: str) -> list[str]:
        queue = list(lines)

        def scripted_input(prompt: str = "") -> str:
            shown.append(prompt)
            if not queue:
                raise AssertionError(f"prompted unexpectedly: {prompt}")
            return queue.pop(0)

        monkeypatch.setattr(builtins, "input", scripted_input)
        return shown

    return install


def pytest_collect_file(
    parent: pytest.Collector, file_path: Path
) -> DoctestModule | None:
    path = file_path if isinstance(file_path, Path) else Path(str(file_path))
    if path in DOCTEST_MODULES:
        return DoctestModule.from_parent(parent, path=path)
    return None
