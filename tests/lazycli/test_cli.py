import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

import lazycli.cli as cli
from lazycli import __version__
from tests.lazycli.helpers import FakeRunner


@pytest.mark.parametrize(
    ("argv", "message"),
    [
        (["deploy"], "❌ Unknown command: deploy"),
        ([], "❌ Unknown command:"),
        (["--bogus"], "❌ Unknown command: --bogus"),
        (["github", "merge"], "❌ Unknown github subcommand: merge"),
        (["github"], "❌ Unknown github subcommand:"),
        (["next-js", "create"], "❌ Unknown next-js subcommand: create"),
        (["django", "--force"], "❌ Unknown django subcommand: --force"),
        (["github", "--help"], "❌ Unknown github subcommand: --help"),
        (["github", "-h"], "❌ Unknown github subcommand: -h"),
        (["--no-color", "--bogus"], "❌ Unknown command: --bogus"),
        (["--log-level=debug", "deploy"], "❌ Unknown command: deploy"),
    ],
)
def test_unknown_commands_print_help_and_exit_1(
    argv: list[str], message: str, fake_runner: FakeRunner
) -> None:
    result = CliRunner().invoke(cli.app, argv)

    assert result.exit_code == 1
    assert message in result.output
    assert "Usage:" in result.output
    assert fake_runner.requests == []


@pytest.mark.parametrize("argv", [["--version"], ["-v"], ["version"]])
def test_version_variants(argv: list[str]) -> None:
    result = CliRunner().invoke(cli.app, argv)

    assert result.exit_code == 0
    assert f"LazyCLI version {__version__}" in result.output


@pytest.mark.parametrize("argv", [["--help"], ["help"]])
def test_help_variants(argv: list[str]) -> None:
    result = CliRunner().invoke(cli.app, argv)

    assert result.exit_code == 0
    assert result.output.strip() == cli.HELP_TEXT.strip()


def test_global_log_level_flag_sets_runtime_level() -> None:
    with patch("lazycli.cli.lazy_log.set_level") as mock_set_level:
        result = CliRunner().invoke(cli.app, ["--log-level", "debug", "version"])

    assert result.exit_code == 0
    mock_set_level.assert_called_once_with("debug")


def test_no_color_flag_disables_colorized_output() -> None:
    with patch("lazycli.cli.lazy_log.set_no_color") as mock_set_no_color:
        result = CliRunner().invoke(cli.app, ["--no-color", "version"])

    assert result.exit_code == 0
    mock_set_no_color.assert_called_once_with(True)


def test_github_init_refuses_existing_repository(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fake_runner: FakeRunner
) -> None:
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli.app, ["github", "init"])

    assert result.exit_code == 1
    assert "already initialized" in result.output
    assert fake_runner.requests == []


def test_github_push_without_message_runs_no_git(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fake_runner: FakeRunner
) -> None:
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli.app, ["github", "push", ""])

    assert result.exit_code == 1
    assert "Commit message is required" in result.output
    assert "lazy github push" in result.output
    assert fake_runner.requests == []


def test_github_push_forwards_option_like_messages(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fake_runner: FakeRunner
) -> None:
    monkeypatch.chdir(tmp_path)
    fake_runner.reply("git", "rev-parse", stdout="main\n")

    result = CliRunner().invoke(cli.app, ["github", "push", "--wip"])

    assert result.exit_code == 0
    assert ["git", "commit", "-m", "--wip"] in fake_runner.argvs


def test_django_init_without_name_is_usage_error(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    fake_runner: FakeRunner,
    on_path,
) -> None:
    on_path("python3")
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli.app, ["django", "init"])

    assert result.exit_code == 1
    assert "lazy django init <project_name>" in result.output
    assert fake_runner.requests == []


def test_cancelled_setup_exits_1_without_generator(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    fake_runner: FakeRunner,
    answers,
) -> None:
    monkeypatch.chdir(tmp_path)
    answers("1", "-1")

    result = CliRunner().invoke(cli.app, ["next-js", "init", "my-app"])

    assert result.exit_code == 1
    assert "Setup cancelled" in result.output
    assert fake_runner.requests == []


def test_invalid_config_is_reported(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fake_runner: FakeRunner
) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json", encoding="utf-8")
    monkeypatch.setattr("lazycli.paths.config_path", lambda: config_file)
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli.app, ["node-js", "init"])

    assert result.exit_code == 1
    assert "could not read" in result.output
    assert fake_runner.requests == []


def test_upgrade_runs_pip_for_running_interpreter(fake_runner: FakeRunner) -> None:
    result = CliRunner().invoke(cli.app, ["upgrade"])

    assert result.exit_code == 0
    assert "LazyCLI upgraded" in result.output
    assert fake_runner.argvs == [
        [sys.executable, "-m", "pip", "install", "--upgrade", "lazycli"]
    ]


def test_upgrade_failure_exits_1(fake_runner: FakeRunner) -> None:
    fake_runner.reply(sys.executable, returncode=1, stderr="no network")

    result = CliRunner().invoke(cli.app, ["upgrade"])

    assert result.exit_code == 1
    assert "Upgrade failed" in result.output
    assert "no network" in result.output


def test_init_menu_dispatches_to_selected_scaffolder(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fake_runner: FakeRunner, answers
) -> None:
    calls: list[tuple] = []
    monkeypatch.setattr(cli.init_cmd, "vite_js_init", lambda *args: calls.append(args))
    monkeypatch.setattr("lazycli.paths.config_path", lambda: tmp_path / "config.json")
    monkeypatch.chdir(tmp_path)
    answers("2")

    result = CliRunner().invoke(cli.app, ["init"])

    assert result.exit_code == 0
    assert [Path(args[0]).resolve() for args in calls] == [tmp_path.resolve()]
    assert fake_runner.requests == []
