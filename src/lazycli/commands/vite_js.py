"""Implementation for ``lazy vite-js init``."""

from __future__ import annotations

from pathlib import Path

from .. import log, project, prompts, templates
from ..models import (
    VITE_FRAMEWORK_MENU,
    VITE_PACKAGES,
    VITE_TAILWIND_PACKAGES,
    ViteOptions,
    collect_packages,
    options_from_answers,
    vite_questions,
)
from ..packages import detect_package_manager
from ..project import ProjectContext

USAGE = "lazy vite-js init [project-name]"
REACT_ENTRY_FILES = ("src/main.jsx", "src/main.tsx")
REACT_CSS_IMPORT = "import './index.css'"


def create_vite_argv(project_name: str, options: ViteOptions) -> list[str]:
    """Return the generator invocation.

    Example:
        >>> create_vite_argv("shop", ViteOptions(framework="vue"))
        ['npx', 'create-vite', 'shop', '--template', 'vue']
    """
    return ["npx", "create-vite", project_name, "--template", options.framework]


def tailwind_css(options: ViteOptions) -> str:
    """Return the CSS entry content for a Tailwind setup.

    Example:
        >>> print(tailwind_css(ViteOptions(tailwind=True, daisyui=True)), end="")
        @import "tailwindcss";
        @plugin "daisyui";
    """
    lines = ['@import "tailwindcss";']
    if options.daisyui:
        lines.append('@plugin "daisyui";')
    return "\n".join(lines) + "\n"


def css_entry(ctx: ProjectContext) -> str:
    """Return the stylesheet the generated app imports."""
    if ctx.path("src", "style.css").exists():
        return "src/style.css"
    return "src/index.css"


def configure_tailwind(ctx: ProjectContext, options: ViteOptions) -> None:
    packages, _ = collect_packages(options, VITE_TAILWIND_PACKAGES)
    log.info("🎨 Installing Tailwind CSS...")
    project.add_packages(ctx, packages)

    log.info("🛠️ Configuring vite.config.js...")
    project.write_file(
        ctx, "vite.config.js", templates.read_template("vite", f"vite.config.{options.framework}.js")
    )
    entry = css_entry(ctx)
    log.info(f"🎨 Writing Tailwind imports to {entry}...")
    project.write_file(ctx, entry, tailwind_css(options))


def link_react_stylesheet(ctx: ProjectContext) -> None:
    for relpath in REACT_ENTRY_FILES:
        if project.prepend_line_once(ctx.path(*relpath.split("/")), REACT_CSS_IMPORT):
            log.info(f"🔗 Imported index.css in {relpath}")


def vite_js_init(cwd: Path, name: str | None = None) -> ProjectContext:
    """Create a Vite app in ``cwd / name``.

    Example:
        $ lazy vite-js init shop
    """
    project_name = prompts.project_name(name, usage=USAGE)
    framework = prompts.choose(VITE_FRAMEWORK_MENU)
    package_manager = detect_package_manager()
    log.info(f"📦 Using package manager: {package_manager.value}")

    log.section(prompts.SMART_STACK_TITLE, prompts.SMART_STACK_SUBTITLE)
    answers = prompts.ask_sequence(vite_questions(framework))  # type: ignore[arg-type]
    options = options_from_answers(ViteOptions, answers, framework=framework)

    log.info(f"🚀 Creating Vite project '{project_name}' with the {framework} template...")
    project.run_generator(create_vite_argv(project_name, options), cwd=cwd)

    ctx = ProjectContext(root=cwd / project_name, package_manager=package_manager)
    project.install_dependencies(ctx)
    packages, _ = collect_packages(options, VITE_PACKAGES)
    project.add_packages(ctx, packages)

    if options.tailwind:
        configure_tailwind(ctx, options)
    else:
        log.info("📝 Writing a basic src/index.css...")
        project.write_file(ctx, "src/index.css", templates.read_template("vite", "index.css"))

    if options.framework == "react":
        link_react_stylesheet(ctx)

    log.info("")
    project.finish(ctx, "✅ Vite project is ready!")
    log.info(f'➡️ Next: cd "{project_name}" && {package_manager.dev_hint()}')
    return ctx
