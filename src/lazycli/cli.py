"""Command-line interface for LazyCLI.

The command surface is a fixed positional router: ``lazy <command>
<subcommand> [args...]``. An unknown command or subcommand (including a
missing one and any unrecognized option in those positions) prints the
static help text and exits with status 1 before any external tool runs.

Example:
    $ lazy github push "Fix typo"
    $ lazy next-js init my-app
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, NoReturn, Optional

import click
import typer
from typer.core import TyperGroup

from . import __version__, config, io
from . import log as lazy_log
from .commands import django as django_cmd
from .commands import github as github_cmd
from .commands import init as init_cmd
from .commands import next_js as next_js_cmd
from .commands import node_js as node_js_cmd
from .commands import react_native as react_native_cmd
from .commands import upgrade as upgrade_cmd
from .commands import vite_js as vite_js_cmd
from .errors import LazyError

LOG_LEVEL_CHOICES = ("debug", "info", "success", "warning", "error")

HELP_TEXT = """\
LazyCLI – Automate your dev flow like a lazy pro 💤

Usage:
  lazy <command> [subcommand] [options]

Commands:
  github init
      Initialize a new Git repository in the current directory.

  github clone <repo-url> [tech]
      Clone a GitHub repository, install dependencies, build when a build
      script exists, and open the project in VS Code.

  github push "<commit-message>"
      Stage all changes, commit with the message, and push to the current branch.

  github pull <base-branch> "<pr-title>"
      Create a pull request from the current branch to the base branch.

  github pr <base-branch> "<commit-message>"
      Pull latest changes, install and build, commit, push, and open a pull request.

  node-js init
      Initialize a Node.js project (JavaScript or TypeScript).

  next-js init [project-name]
      Scaffold a new Next.js application with optional packages.

  vite-js init [project-name]
      Scaffold a new Vite application (vanilla, React, Vue, Svelte).

  react-native init [project-name]
      Scaffold a new React Native application with Expo or the React Native CLI.

  django init <project_name>
      Create a Django project with static, templates, and media directories.

  init
      Choose a stack from a menu and initialize it.

  upgrade
      Upgrade LazyCLI to the latest version.

Options:
  -v, --version         Show the LazyCLI version.
  --help                Show this help text.
  --log-level LEVEL     Set output verbosity (debug, info, success, warning, error).
  --no-color            Disable colored output.
"""

# Arguments after the subcommand are forwarded verbatim, even when they look
# like options.
FORWARD_ARGS = {"allow_extra_args": True, "ignore_unknown_options": True}


def show_help() -> None:
    io.say(HELP_TEXT)


def reject_unknown(ctx: click.Context, token: str) -> NoReturn:
    """Report an unrecognized command token, print help and exit 1."""
    if ctx.parent is None:
        io.say(f"❌ Unknown command: {token}")
    else:
        io.say(f"❌ Unknown {ctx.info_name} subcommand: {token}")
    show_help()
    raise typer.Exit(code=1)


class LazyGroup(TyperGroup):
    """Typer group that treats unknown commands as a help-and-exit-1 case."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        token = self.unknown_option(ctx, args)
        if token is not None:
            reject_unknown(ctx, token)
        return super().parse_args(ctx, args)

    def unknown_option(self, ctx: click.Context, args: list[str]) -> str | None:
        """Return the first leading option this group does not declare."""
        options = {}
        for param in self.get_params(ctx):
            for name in (*param.opts, *param.secondary_opts):
                options[name] = param
        takes_value = False
        for token in args:
            if takes_value:
                takes_value = False
                continue
            if token == "--" or not token.startswith("-"):
                return None
            name, separator, _ = token.partition("=")
            param = options.get(name)
            if param is None:
                return token
            takes_value = not separator and not getattr(param, "is_flag", False)
        return None

    def resolve_command(self, ctx: click.Context, args: list[str]):  # type: ignore[override]
        name = args[0] if args else ""
        if not ctx.resilient_parsing and self.get_command(ctx, name) is None:
            reject_unknown(ctx, name)
        return super().resolve_command(ctx, args)


def _version_callback(value: bool) -> None:
    if value:
        io.say(f"LazyCLI version {__version__}")
        raise typer.Exit()


def _help_callback(value: bool) -> None:
    if value:
        show_help()
        raise typer.Exit()


def _run(action: Callable[..., object], *args: object) -> None:
    try:
        action(*args)
    except LazyError as exc:
        io.die(exc.message, exc.exit_code, hint=exc.recovery_hint)


def _cwd() -> Path:
    return Path.cwd()


def _missing_subcommand(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        reject_unknown(ctx, "")


def _subapp() -> typer.Typer:
    return typer.Typer(cls=LazyGroup, add_completion=False, rich_markup_mode=None)


app = typer.Typer(
    cls=LazyGroup,
    add_completion=False,
    rich_markup_mode=None,
    context_settings={"help_option_names": []},
)
github_app = _subapp()
node_js_app = _subapp()
next_js_app = _subapp()
vite_js_app = _subapp()
react_native_app = _subapp()
django_app = _subapp()

app.add_typer(github_app, name="github")
app.add_typer(node_js_app, name="node-js")
app.add_typer(next_js_app, name="next-js")
app.add_typer(vite_js_app, name="vite-js")
app.add_typer(react_native_app, name="react-native")
app.add_typer(django_app, name="django")


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        is_eager=True,
        callback=_version_callback,
        help="Show the LazyCLI version.",
    ),
    show_help_flag: bool = typer.Option(
        False,
        "--help",
        is_eager=True,
        callback=_help_callback,
        help="Show the help text.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        click_type=click.Choice(LOG_LEVEL_CHOICES, case_sensitive=False),
        help="Set output verbosity.",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
) -> None:
    if log_level is not None:
        lazy_log.set_level(log_level)
    if no_color:
        lazy_log.set_no_color(True)
    _missing_subcommand(ctx)


@app.command("help")
def help_command() -> None:
    """Show the help text."""
    show_help()


@app.command("version")
def version_command() -> None:
    """Show the LazyCLI version."""
    io.say(f"LazyCLI version {__version__}")


@app.command("init")
def init_command() -> None:
    """Choose a stack from a menu and initialize it."""
    _run(lambda: init_cmd.lazy_init(_cwd(), config.load_config()))


@app.command("upgrade")
def upgrade_command() -> None:
    """Upgrade LazyCLI to the latest version."""
    _run(upgrade_cmd.upgrade)


@github_app.callback(invoke_without_command=True)
def github_callback(ctx: typer.Context) -> None:
    _missing_subcommand(ctx)


@github_app.command("init", context_settings=FORWARD_ARGS)
def github_init_command() -> None:
    _run(github_cmd.github_init, _cwd())


@github_app.command("clone", context_settings=FORWARD_ARGS)
def github_clone_command(
    repo_url: Optional[str] = typer.Argument(None),
    tech: Optional[str] = typer.Argument(None),
) -> None:
    _run(github_cmd.github_clone, _cwd(), repo_url, tech)


@github_app.command("push", context_settings=FORWARD_ARGS)
def github_push_command(message: Optional[str] = typer.Argument(None)) -> None:
    _run(github_cmd.github_push, _cwd(), message)


@github_app.command("pull", context_settings=FORWARD_ARGS)
def github_pull_command(
    base: Optional[str] = typer.Argument(None),
    title: Optional[str] = typer.Argument(None),
) -> None:
    _run(github_cmd.github_pull, _cwd(), base, title)


@github_app.command("pr", context_settings=FORWARD_ARGS)
def github_pr_command(
    base: Optional[str] = typer.Argument(None),
    message: Optional[str] = typer.Argument(None),
) -> None:
    _run(github_cmd.github_pr, _cwd(), base, message)


@node_js_app.callback(invoke_without_command=True)
def node_js_callback(ctx: typer.Context) -> None:
    _missing_subcommand(ctx)


@node_js_app.command("init", context_settings=FORWARD_ARGS)
def node_js_init_command() -> None:
    _run(lambda: node_js_cmd.node_js_init(_cwd(), config.load_config()))


@next_js_app.callback(invoke_without_command=True)
def next_js_callback(ctx: typer.Context) -> None:
    _missing_subcommand(ctx)


@next_js_app.command("init", context_settings=FORWARD_ARGS)
def next_js_init_command(name: Optional[str] = typer.Argument(None)) -> None:
    _run(next_js_cmd.next_js_init, _cwd(), name)


@vite_js_app.callback(invoke_without_command=True)
def vite_js_callback(ctx: typer.Context) -> None:
    _missing_subcommand(ctx)


@vite_js_app.command("init", context_settings=FORWARD_ARGS)
def vite_js_init_command(name: Optional[str] = typer.Argument(None)) -> None:
    _run(vite_js_cmd.vite_js_init, _cwd(), name)


@react_native_app.callback(invoke_without_command=True)
def react_native_callback(ctx: typer.Context) -> None:
    _missing_subcommand(ctx)


@react_native_app.command("init", context_settings=FORWARD_ARGS)
def react_native_init_command(name: Optional[str] = typer.Argument(None)) -> None:
    _run(react_native_cmd.react_native_init, _cwd(), name)


@django_app.callback(invoke_without_command=True)
def django_callback(ctx: typer.Context) -> None:
    _missing_subcommand(ctx)


@django_app.command("init", context_settings=FORWARD_ARGS)
def django_init_command(name: Optional[str] = typer.Argument(None)) -> None:
    _run(django_cmd.django_init, _cwd(), name)


def main() -> None:
    """Entry point for the ``lazy`` console script."""
    app()


if __name__ == "__main__":
    main()
