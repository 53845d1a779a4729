"""Implementation for ``lazy django init``.

The project gets its own ``venv/``; instead of activating it, every later
step calls the venv's executables directly.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from .. import exec as exec_util
from .. import io, log, paths, templates
from ..errors import PreconditionError, StepFailedError, UsageError

USAGE = "lazy django init <project_name>"
PROJECT_DIRS = ("static", "templates", "media")
STATICFILES_APP = "'django.contrib.staticfiles',"
INSTALLED_APPS_OPENER = "INSTALLED_APPS = ["
SETTINGS_MARKER = "# lazycli: static, templates and media"


def _run_fatal(argv: list[str], *, cwd: Path, message: str) -> None:
    result = exec_util.run(argv, cwd=cwd)
    if not exec_util.succeeded(result):
        raise StepFailedError(message, detail=exec_util.failure_detail(argv, result))


def ensure_virtualenv(project_root: Path, python: str = "python3") -> Path:
    """Return the project's virtual environment, creating it when missing.

    Raises:
        StepFailedError: The environment could not be created.
    """
    venv = project_root / paths.VENV_DIRNAME
    if venv.is_dir():
        log.info(f"Virtual environment '{paths.VENV_DIRNAME}' already exists. Reusing it.")
        return venv

    log.info("Virtual environment not found. Creating new one...")
    failure = "❌ Failed to create the virtual environment."
    if shutil.which("virtualenv"):
        _run_fatal(["virtualenv", paths.VENV_DIRNAME], cwd=project_root, message=failure)
        log.info("Virtualenv created using 'virtualenv' package.")
        return venv

    log.info("The 'virtualenv' package is not installed.")
    if io.confirm("Would you like to install 'virtualenv'? (default: use python -m venv)"):
        install_argv = [python, "-m", "pip", "install", "virtualenv"]
        result = exec_util.run(install_argv, cwd=project_root)
        if exec_util.succeeded(result):
            _run_fatal(
                [python, "-m", "virtualenv", paths.VENV_DIRNAME],
                cwd=project_root,
                message=failure,
            )
            log.info("Virtualenv installed and created.")
            return venv
        log.warning("⚠️ Installing virtualenv failed; falling back to python -m venv.")
        log.debug(exec_util.failure_detail(install_argv, result))

    _run_fatal([python, "-m", "venv", paths.VENV_DIRNAME], cwd=project_root, message=failure)
    log.info("Virtualenv created using default 'venv' module.")
    return venv


def ensure_django(project_root: Path, venv: Path) -> Path:
    """Return the venv's ``django-admin``, installing Django when absent."""
    django_admin = paths.venv_executable(venv, "django-admin")
    if django_admin.exists():
        return django_admin
    log.info("'django-admin' not found. Installing Django via pip...")
    _run_fatal(
        [str(paths.venv_executable(venv, "python")), "-m", "pip", "install", "django"],
        cwd=project_root,
        message="❌ Failed to install Django.",
    )
    return django_admin


def patch_settings(text: str, block: str) -> str:
    """Register static files and append the directory settings once.

    Example:
        >>> text = "INSTALLED_APPS = [\\n    'django.contrib.admin',\\n]\\n"
        >>> patched = patch_settings(text, "\\n# lazycli: static, templates and media\\n")
        >>> patched.splitlines()[1]
        "    'django.contrib.staticfiles',"
        >>> patch_settings(patched, "\\n# lazycli: static, templates and media\\n") == patched
        True
    """
    lines = text.splitlines(keepends=True)
    if STATICFILES_APP not in text:
        for index, line in enumerate(lines):
            if line.rstrip() == INSTALLED_APPS_OPENER:
                lines.insert(index + 1, f"    {STATICFILES_APP}\n")
                break
    patched = "".join(lines)
    if SETTINGS_MARKER not in patched:
        if patched and not patched.endswith("\n"):
            patched += "\n"
        patched += block
    return patched


def configure_settings(project_root: Path, project_name: str) -> bool:
    settings = project_root / project_name / "settings.py"
    if not settings.is_file():
        log.warning(f"⚠️ {settings} not found; skipping settings update.")
        return False
    block = templates.read_template("django", "settings_block.py.tmpl")
    original = settings.read_text(encoding="utf-8")
    patched = patch_settings(original, block)
    if patched != original:
        settings.write_text(patched, encoding="utf-8")
    return True


def django_init(cwd: Path, name: str | None) -> Path:
    """Create a Django project with static, templates and media directories.

    Example:
        $ lazy django init blog
    """
    if shutil.which("python3") is None:
        raise PreconditionError("Python3 is not installed or not found in PATH.")
    project_name = (name or "").strip()
    if not project_name:
        raise UsageError("❌ Project name is required.", usage=USAGE)

    project_root = cwd / project_name
    project_root.mkdir(parents=True, exist_ok=True)

    venv = ensure_virtualenv(project_root)
    log.info(f"Using virtual environment at {venv}")
    django_admin = ensure_django(project_root, venv)

    _run_fatal(
        [str(django_admin), "startproject", project_name, "."],
        cwd=project_root,
        message="❌ Failed to create project.",
    )
    for dirname in PROJECT_DIRS:
        (project_root / dirname).mkdir(exist_ok=True)
    configure_settings(project_root, project_name)

    log.success(
        f"✅ Django project '{project_name}' created with static, templates, and media directories."
    )
    return project_root
