"""Editor detection for opening freshly cloned projects."""

import shutil

EDITOR_CANDIDATES: tuple[tuple[str, str], ...] = (("code", "VS Code"),)


def detect_editor() -> tuple[list[str], str] | None:
    """Return ``(argv, display_name)`` for the first editor found on ``PATH``.

    The argv opens the current directory, so run it with the project root as
    working directory.
    """
    for executable, name in EDITOR_CANDIDATES:
        if shutil.which(executable):
            return [executable, "."], name
    return None
