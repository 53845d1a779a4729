"""Template loading and rendering helpers.

Templates ship inside the package under ``lazycli/templates`` and use a
simple ``{{ key }}`` substitution; everything else is copied verbatim.
"""

from __future__ import annotations

from importlib import resources
from typing import Mapping

from .errors import LazyError


class TemplateReadError(LazyError):
    """Raised when a bundled template cannot be read."""

    def __init__(self, *, template: str, reason: str) -> None:
        self.template = template
        super().__init__(
            "step_failed",
            f"❌ Could not read bundled template {template}.",
            recovery_hint=f"{reason}\n👉 Reinstall LazyCLI: pip install --force-reinstall lazycli",
        )


def read_template(*parts: str) -> str:
    """Read a bundled template file.

    Args:
        *parts: Path components under ``lazycli/templates``.

    Example:
        >>> "compilerOptions" in read_template("node", "tsconfig.json")
        True
    """
    try:
        return (
            resources.files("lazycli")
            .joinpath("templates")
            .joinpath(*parts)
            .read_text(encoding="utf-8")
        )
    except OSError as exc:
        raise TemplateReadError(template="/".join(parts), reason=str(exc)) from exc


def render_template(template: str, variables: Mapping[str, str]) -> str:
    """Render a template using a simple {{ key }} substitution.

    Example:
        >>> render_template("Hello {{ name }}!", {"name": "lazy"})
        'Hello lazy!'
    """
    rendered = template
    for key, value in variables.items():
        rendered = rendered.replace(f"{{{{ {key} }}}}", value)
    return rendered


def render(*parts: str, **variables: str) -> str:
    """Read and render a bundled template in one step."""
    return render_template(read_template(*parts), variables)
