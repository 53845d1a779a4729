"""Leveled terminal output for LazyCLI commands.

Every status line LazyCLI prints goes through this module so verbosity and
color can be controlled in one place (``LAZYCLI_LOG_LEVEL``, ``NO_COLOR``).
"""

from __future__ import annotations

import os
import shlex
import sys
from collections.abc import Iterable, Sequence
from enum import IntEnum

from rich.console import Console
from rich.text import Text


class LogLevel(IntEnum):
    DEBUG = 20
    INFO = 30
    SUCCESS = 35
    WARNING = 40
    ERROR = 50


_LEVEL_BY_NAME = {
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "success": LogLevel.SUCCESS,
    "warning": LogLevel.WARNING,
    "warn": LogLevel.WARNING,
    "error": LogLevel.ERROR,
}
_STYLE_BY_LEVEL = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "",
    LogLevel.SUCCESS: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}
_DEFAULT_LEVEL = LogLevel.INFO
_configured_level: LogLevel | None = None
_no_color_override: bool | None = None


def parse_level(value: str | None) -> LogLevel:
    """Map a level name onto a ``LogLevel``.

    Unknown or empty names fall back to ``INFO``.

    Example:
        >>> parse_level("WARN")
        <LogLevel.WARNING: 40>
        >>> parse_level("chatty")
        <LogLevel.INFO: 30>
    """
    if value is None:
        return _DEFAULT_LEVEL
    return _LEVEL_BY_NAME.get(value.strip().lower(), _DEFAULT_LEVEL)


def configured_level() -> LogLevel:
    global _configured_level
    if _configured_level is None:
        _configured_level = parse_level(os.environ.get("LAZYCLI_LOG_LEVEL"))
    return _configured_level


def set_level(value: str | None) -> None:
    global _configured_level
    _configured_level = parse_level(value)


def set_no_color(value: bool) -> None:
    global _no_color_override
    _no_color_override = value


def _colors_disabled() -> bool:
    if _no_color_override is not None:
        return _no_color_override
    return bool(os.environ.get("NO_COLOR") or os.environ.get("LAZYCLI_NO_COLOR"))


def _console(*, stderr: bool) -> Console:
    return Console(
        file=sys.stderr if stderr else sys.stdout,
        soft_wrap=True,
        highlight=False,
        no_color=_colors_disabled(),
    )


def emit(level: LogLevel, message: str, *, style: str | None = None) -> None:
    if level < configured_level():
        return
    text = Text(message, style=style if style is not None else _STYLE_BY_LEVEL[level])
    _console(stderr=level >= LogLevel.WARNING).print(text)


def debug(message: str) -> None:
    emit(LogLevel.DEBUG, message)


def info(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.INFO, message, style=style)


def success(message: str) -> None:
    emit(LogLevel.SUCCESS, message)


def warning(message: str) -> None:
    emit(LogLevel.WARNING, message)


def error(message: str) -> None:
    emit(LogLevel.ERROR, message)


def command(argv: Sequence[str]) -> None:
    """Echo an external command line at debug level."""
    debug(f"$ {shlex.join(argv)}")


def section(title: str, subtitle: str | None = None) -> None:
    """Print a blank line and a bold heading, used before prompt blocks."""
    info("")
    info(title, style="bold")
    if subtitle:
        info(f"   {subtitle}", style="dim")


def items(lines: Iterable[str], *, prefix: str = "   ") -> None:
    for line in lines:
        info(f"{prefix}{line}")
