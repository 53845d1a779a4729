"""Implementation for ``lazy next-js init``."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

from .. import log, project, prompts
from ..models import (
    NEXT_ACCEPT_DEFAULTS,
    NEXT_DEFAULTS,
    NEXT_DEFAULTS_SUMMARY,
    NEXT_EXTRA_QUESTIONS,
    NEXT_FLAG_TABLE,
    NEXT_MANUAL_QUESTIONS,
    NEXT_PACKAGES,
    Answer,
    NextExtras,
    NextOptions,
    collect_packages,
    options_from_answers,
)
from ..packages import detect_package_manager
from ..project import ProjectContext

USAGE = "lazy next-js init [project-name]"
GENERATOR = ("npx", "create-next-app@latest")


def generator_flags(options: NextOptions) -> list[str]:
    """Map generator options onto ``create-next-app`` flags.

    Example:
        >>> generator_flags(NextOptions())  # doctest: +NORMALIZE_WHITESPACE
        ['--typescript', '--eslint', '--tailwind', '--app', '--no-src-dir',
         '--import-alias', '@/*', '--turbo']
    """
    flags: list[str] = []
    for option, when_on, when_off in NEXT_FLAG_TABLE:
        flags.extend(when_on if getattr(options, option) else when_off)
    return flags


def create_next_app_argv(project_name: str, options: NextOptions) -> list[str]:
    return [*GENERATOR, project_name, "--yes", *generator_flags(options)]


def collect_options() -> NextOptions:
    """Show the default stack and ask whether to keep it or configure manually."""
    log.info("")
    log.info("⚙️ Next.js will use default options:")
    defaults = asdict(NEXT_DEFAULTS)
    log.items(f"- {label}: {'✅' if defaults[key] else '❌'}" for key, label in NEXT_DEFAULTS_SUMMARY)
    if prompts.ask(NEXT_ACCEPT_DEFAULTS) is Answer.YES:
        return NEXT_DEFAULTS
    log.info("")
    log.info("⚙️ Manual configuration mode:")
    return options_from_answers(NextOptions, prompts.ask_sequence(NEXT_MANUAL_QUESTIONS))


def collect_extras() -> NextExtras:
    log.section(prompts.SMART_STACK_TITLE, prompts.SMART_STACK_SUBTITLE)
    return options_from_answers(NextExtras, prompts.ask_sequence(NEXT_EXTRA_QUESTIONS))


def next_js_init(cwd: Path, name: str | None = None) -> ProjectContext:
    """Create a Next.js app in ``cwd / name`` and install the chosen extras.

    Example:
        $ lazy next-js init my-app
    """
    log.info("🛠️ Creating Next.js app...")
    project_name = prompts.project_name(name, usage=USAGE)
    options = collect_options()
    extras = collect_extras()

    log.info("")
    log.info("🚀 Creating Next.js project...")
    project.run_generator(create_next_app_argv(project_name, options), cwd=cwd)

    ctx = ProjectContext(root=cwd / project_name, package_manager=detect_package_manager())
    packages, _ = collect_packages(extras, NEXT_PACKAGES)
    project.add_packages(ctx, packages)

    if extras.shadcn_ui:
        log.info("")
        log.info("🎨 Initializing shadcn-ui...")
        project.run_optional(
            ctx, ctx.package_manager.dlx_argv("shadcn@latest", "init"), label="shadcn-ui init"
        )

    log.info("")
    project.finish(ctx, "✅ Your Next.js app is ready!")
    log.info(f'➡️ Run: cd "{project_name}" && {ctx.package_manager.dev_hint()}')
    return ctx
