"""Implementation for ``lazy init``, the universal project initializer."""

from __future__ import annotations

from pathlib import Path

from .. import io, log, prompts
from ..config import LazyConfig
from ..models import INIT_MENU
from .django import django_init
from .next_js import next_js_init
from .node_js import node_js_init
from .react_native import react_native_init
from .vite_js import vite_js_init


def lazy_init(cwd: Path, config: LazyConfig) -> None:
    """Ask which stack to create and hand off to its scaffolder.

    Example:
        $ lazy init
    """
    log.section("🧠 LazyCLI Project Initializer")
    stack = prompts.choose(INIT_MENU)
    if stack == "next-js":
        next_js_init(cwd)
    elif stack == "vite-js":
        vite_js_init(cwd)
    elif stack == "react-native":
        react_native_init(cwd)
    elif stack == "node-js":
        node_js_init(cwd, config)
    else:
        django_init(cwd, io.prompt("📦 Enter Django project name", required=True))
