"""Project context and the step runner shared by the scaffolders.

Steps never change the process working directory. The generator runs in the
parent directory and every later step receives the new project root through
``ProjectContext``.

Failure policy:

* a generator step that fails raises ``StepFailedError`` (fatal);
* an install or optional tooling step that fails is recorded on the context
  and reported at the end (non-fatal).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from . import exec as exec_util
from . import log, paths
from .errors import StepFailedError
from .packages import PackageManager


@dataclass(frozen=True)
class ProjectContext:
    """Explicit state threaded through one scaffolding run.

    Attributes:
        root: Project root directory all steps operate in.
        package_manager: Manager selected once for this invocation.
        failures: Descriptions of non-fatal steps that failed.
    """

    root: Path
    package_manager: PackageManager
    failures: list[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.root.name

    def path(self, *parts: str) -> Path:
        return self.root.joinpath(*parts)


def run_generator(argv: Sequence[str], *, cwd: Path) -> None:
    """Run a project generator; any failure is fatal.

    Raises:
        StepFailedError: The generator was missing or exited non-zero.
    """
    result = exec_util.run(list(argv), cwd=cwd)
    if not exec_util.succeeded(result):
        raise StepFailedError(
            "❌ Failed to create project.",
            detail=exec_util.failure_detail(argv, result),
        )


def run_optional(ctx: ProjectContext, argv: Sequence[str], *, label: str) -> bool:
    """Run a best-effort step in the project root; failures are recorded."""
    result = exec_util.run(list(argv), cwd=ctx.root)
    if exec_util.succeeded(result):
        return True
    log.warning(f"⚠️ {label} failed; continuing.")
    log.debug(exec_util.failure_detail(argv, result))
    ctx.failures.append(label)
    return False


def install_dependencies(ctx: ProjectContext) -> bool:
    """Install everything the generated manifest declares."""
    log.info("📦 Installing base dependencies...")
    return run_optional(
        ctx,
        ctx.package_manager.install_argv(),
        label=f"{ctx.package_manager.value} install",
    )


def add_packages(ctx: ProjectContext, packages: Sequence[str], *, dev: bool = False) -> bool:
    """Install ``packages`` in a single invocation; no-op when empty."""
    if not packages:
        return True
    kind = "dev dependencies" if dev else "packages"
    log.info(f"📦 Installing {kind}: {' '.join(packages)}")
    return run_optional(
        ctx,
        ctx.package_manager.add_argv(packages, dev=dev),
        label=f"install {' '.join(packages)}",
    )


def write_file(
    ctx: ProjectContext, relpath: str, content: str, *, overwrite: bool = True
) -> bool:
    """Write a template artifact under the project root.

    Returns ``False`` without touching the file when it exists and
    ``overwrite`` is false.
    """
    target = ctx.path(*relpath.split("/"))
    if target.exists() and not overwrite:
        log.info(f"ℹ️ {relpath} already exists; leaving it unchanged.")
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    log.debug(f"wrote {target}")
    return True


def append_line_once(path: Path, line: str) -> bool:
    """Append ``line`` to ``path`` unless an identical line is already present.

    Creates the file when missing. Returns ``True`` when the file changed.
    """
    existing = path.read_text(encoding="utf-8") if path.exists() else ""
    if line in existing.splitlines():
        return False
    prefix = "" if existing == "" or existing.endswith("\n") else "\n"
    with path.open("a", encoding="utf-8") as fh:
        fh.write(f"{prefix}{line}\n")
    return True


def prepend_line_once(path: Path, line: str) -> bool:
    """Insert ``line`` at the top of an existing file unless already present."""
    if not path.exists():
        return False
    content = path.read_text(encoding="utf-8")
    if line in content.splitlines():
        return False
    path.write_text(f"{line}\n{content}", encoding="utf-8")
    return True


def read_manifest(project_root: Path) -> dict | None:
    """Return the parsed ``package.json`` of ``project_root``, if any.

    A manifest that is not valid JSON is treated as having no scripts.
    """
    manifest = paths.manifest_path(project_root)
    if not manifest.is_file():
        return None
    try:
        payload = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        log.warning(f"⚠️ Could not parse {manifest}: {exc}")
        return {}
    return payload if isinstance(payload, dict) else {}


def declares_script(manifest: dict, script: str) -> bool:
    """Return whether ``manifest`` declares ``script``.

    Example:
        >>> declares_script({"scripts": {"build": "tsc"}}, "build")
        True
        >>> declares_script({"name": "x"}, "build")
        False
    """
    scripts = manifest.get("scripts")
    return isinstance(scripts, dict) and script in scripts


def update_manifest(project_root: Path, updates: dict) -> None:
    """Merge top-level ``updates`` into ``package.json``, keeping other keys.

    ``scripts`` is merged key by key.
    """
    manifest = paths.manifest_path(project_root)
    payload = read_manifest(project_root) or {}
    for key, value in updates.items():
        if key == "scripts" and isinstance(payload.get("scripts"), dict):
            payload["scripts"].update(value)
        else:
            payload[key] = value
    manifest.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


def finish(ctx: ProjectContext, message: str) -> None:
    """Report the outcome of a scaffolding run."""
    if ctx.failures:
        log.warning(f"⚠️ Finished with {len(ctx.failures)} failed optional step(s):")
        for label in ctx.failures:
            log.warning(f"   - {label}")
        log.info("   Re-run the failed commands manually inside the project.")
        return
    log.success(message)
