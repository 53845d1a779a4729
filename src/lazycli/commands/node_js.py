"""Implementation for ``lazy node-js init``.

Sets up a Node.js project in the current directory, either as plain
JavaScript or as a TypeScript project with optional server packages.
"""

from __future__ import annotations

from pathlib import Path

from .. import log, project, prompts, templates
from ..config import LazyConfig
from ..models import (
    NODE_SETUP_MENU,
    NODE_SIMPLE_PACKAGES,
    NODE_SIMPLE_QUESTIONS,
    NODE_TS_PACKAGES,
    NODE_TS_TOOLCHAIN,
    NodeSimpleOptions,
    NodeTsOptions,
    collect_packages,
    node_ts_questions,
    options_from_answers,
)
from ..packages import PackageManager, detect_package_manager
from ..project import ProjectContext

TS_MANIFEST_FIELDS = {
    "description": "TypeScript Node.js project created with LazyCLI",
    "main": "dist/index.js",
    "type": "commonjs",
    "keywords": ["typescript", "node", "lazycli"],
    "license": "MIT",
}


def simple_scripts(options: NodeSimpleOptions) -> dict[str, str]:
    """Return the package.json scripts for the JavaScript setup.

    Example:
        >>> simple_scripts(NodeSimpleOptions(nodemon=True))["dev"]
        'nodemon src/index.js'
    """
    start = "node src/index.js"
    return {"start": start, "dev": "nodemon src/index.js" if options.nodemon else start}


def ts_scripts(options: NodeTsOptions, *, test_command: str) -> dict[str, str]:
    """Return the package.json scripts for the TypeScript setup.

    Example:
        >>> ts_scripts(NodeTsOptions(), test_command="bun test")["dev"]
        'ts-node src/index.ts'
    """
    return {
        "start": "node dist/index.js",
        "dev": "nodemon src/index.ts" if options.nodemon else "ts-node src/index.ts",
        "build": "tsc",
        "clean": "rm -rf dist",
        "test": test_command,
    }


def write_env_file(ctx: ProjectContext) -> None:
    """Create ``.env`` (never overwritten) and make sure git ignores it."""
    if project.write_file(ctx, ".env", templates.read_template("node", "env"), overwrite=False):
        log.info("🔐 Created .env file")
    project.append_line_once(ctx.path(".gitignore"), ".env")


def _init_manifest(ctx: ProjectContext) -> None:
    log.info(f"📦 Using package manager: {ctx.package_manager.value}")
    project.run_generator(ctx.package_manager.init_argv(), cwd=ctx.root)


def init_simple(ctx: ProjectContext) -> NodeSimpleOptions:
    answers = prompts.ask_sequence(NODE_SIMPLE_QUESTIONS)
    options = options_from_answers(NodeSimpleOptions, answers)

    _init_manifest(ctx)
    log.info("🧱 Creating simple JavaScript project...")
    project.write_file(
        ctx,
        "src/index.js",
        templates.render("node", "index.simple.js", project_name=ctx.name),
        overwrite=False,
    )

    packages, dev_packages = collect_packages(options, NODE_SIMPLE_PACKAGES)
    project.add_packages(ctx, packages)
    project.add_packages(ctx, dev_packages, dev=True)

    log.info("🧠 Configuring package.json scripts...")
    project.update_manifest(ctx.root, {"scripts": simple_scripts(options)})
    if options.dotenv:
        write_env_file(ctx)

    log.info("")
    log.info(f"➡️  Run development: {ctx.package_manager.dev_hint()}")
    log.info(f"➡️  Run production:  {' '.join(ctx.package_manager.run_script_argv('start'))}")
    return options


def init_typescript(ctx: ProjectContext, config: LazyConfig) -> NodeTsOptions:
    prompts_table = node_ts_questions(include_express_cors=config.node.include_express_cors)
    log.section(prompts.SMART_STACK_TITLE, prompts.SMART_STACK_SUBTITLE)
    answers = prompts.ask_sequence(prompts_table)
    options = options_from_answers(NodeTsOptions, answers)

    log.info("🛠️ Setting up TypeScript Node.js project...")
    _init_manifest(ctx)

    log.info("📦 Installing TypeScript and development dependencies...")
    project.add_packages(ctx, list(NODE_TS_TOOLCHAIN), dev=True)
    packages, dev_packages = collect_packages(options, NODE_TS_PACKAGES)
    project.add_packages(ctx, packages)
    project.add_packages(ctx, dev_packages, dev=True)

    log.info("⚙️ Creating tsconfig.json...")
    project.write_file(ctx, "tsconfig.json", templates.read_template("node", "tsconfig.json"))

    entry = "index.express.ts" if options.express else "index.plain.ts"
    if project.write_file(
        ctx,
        "src/index.ts",
        templates.render("node", entry, project_name=ctx.name),
        overwrite=False,
    ):
        log.info("📝 Created src/index.ts")

    if options.dotenv:
        write_env_file(ctx)

    log.info("🛠️ Updating package.json with the LazyCLI template...")
    test_command = (
        "bun test"
        if ctx.package_manager is PackageManager.BUN
        else 'echo "Error: no test specified" && exit 1'
    )
    project.update_manifest(
        ctx.root,
        {**TS_MANIFEST_FIELDS, "scripts": ts_scripts(options, test_command=test_command)},
    )

    log.info("📁 Project structure created:")
    log.items(["src/index.ts - Main TypeScript file", "tsconfig.json - TypeScript configuration"])
    if options.dotenv:
        log.items([".env - Environment variables"])
    reload_note = " (development with auto-reload)" if options.nodemon else " (development)"
    log.info(f"✅ Run with: {ctx.package_manager.dev_hint()}{reload_note}")
    log.info(f"✅ Build with: {' '.join(ctx.package_manager.run_script_argv('build'))}")
    log.info(f"✅ Run production: {' '.join(ctx.package_manager.run_script_argv('start'))}")
    return options


def node_js_init(cwd: Path, config: LazyConfig) -> None:
    """Initialize a Node.js project in ``cwd``.

    Example:
        $ lazy node-js init
    """
    log.info("🛠️ Initializing Node.js project...")
    setup = prompts.choose(NODE_SETUP_MENU)
    ctx = ProjectContext(root=cwd, package_manager=detect_package_manager())
    if setup == "typescript":
        init_typescript(ctx, config)
        project.finish(ctx, "✅ Node.js + TypeScript project is ready!")
    else:
        init_simple(ctx)
        project.finish(ctx, "✅ Project ready!")
    log.info("💤 Stay lazy, code smart.")
