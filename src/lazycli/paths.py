"""Path helpers for LazyCLI's own files and for generated projects."""

import os
from pathlib import Path

from platformdirs import user_config_dir

LAZYCLI_APP_NAME = "lazycli"
CONFIG_FILENAME = "config.json"
MANIFEST_FILENAME = "package.json"
VENV_DIRNAME = "venv"


def config_dir() -> Path:
    """Return the LazyCLI configuration directory.

    Example:
        >>> config_dir().name.lower() == LAZYCLI_APP_NAME
        True
    """
    return Path(user_config_dir(LAZYCLI_APP_NAME))


def config_path() -> Path:
    return config_dir() / CONFIG_FILENAME


def manifest_path(project_root: Path) -> Path:
    """Return the ``package.json`` path for a project root.

    Example:
        >>> manifest_path(Path("/tmp/app")).as_posix()
        '/tmp/app/package.json'
    """
    return project_root / MANIFEST_FILENAME


def repo_dir_name(repo_url: str) -> str:
    """Return the directory ``git clone`` creates for ``repo_url``.

    Example:
        >>> repo_dir_name("https://github.com/org/app.git")
        'app'
        >>> repo_dir_name("git@github.com:org/tool")
        'tool'
    """
    tail = repo_url.strip().rstrip("/").replace(":", "/").rsplit("/", 1)[-1]
    if tail.endswith(".git"):
        tail = tail[: -len(".git")]
    return tail


def venv_bin_dir(venv_dir: Path) -> Path:
    """Return the executables directory of a virtual environment."""
    if os.name == "nt":
        return venv_dir / "Scripts"
    return venv_dir / "bin"


def venv_executable(venv_dir: Path, name: str) -> Path:
    """Return the path of ``name`` inside a virtual environment."""
    suffix = ".exe" if os.name == "nt" else ""
    return venv_bin_dir(venv_dir) / f"{name}{suffix}"
