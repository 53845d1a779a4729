"""Command implementations exposed by the LazyCLI CLI."""

from .django import django_init
from .github import github_clone, github_init, github_pr, github_pull, github_push
from .init import lazy_init
from .next_js import next_js_init
from .node_js import node_js_init
from .react_native import react_native_init
from .vite_js import vite_js_init

__all__ = [
    "django_init",
    "github_clone",
    "github_init",
    "github_pr",
    "github_pull",
    "github_push",
    "lazy_init",
    "next_js_init",
    "node_js_init",
    "react_native_init",
    "vite_js_init",
]
