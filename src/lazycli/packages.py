"""Node.js package-manager detection and command syntax."""

from __future__ import annotations

import shutil
from collections.abc import Callable, Sequence
from enum import Enum

Which = Callable[[str], "str | None"]


class PackageManager(str, Enum):
    BUN = "bun"
    PNPM = "pnpm"
    YARN = "yarn"
    NPM = "npm"

    def install_argv(self) -> list[str]:
        """Install everything declared in the project manifest.

        Example:
            >>> PackageManager.YARN.install_argv()
            ['yarn', 'install']
        """
        return [self.value, "install"]

    def add_argv(self, packages: Sequence[str], *, dev: bool = False) -> list[str]:
        """Add ``packages`` to the manifest in one invocation.

        Example:
            >>> PackageManager.NPM.add_argv(["zod", "swr"])
            ['npm', 'install', 'zod', 'swr']
            >>> PackageManager.PNPM.add_argv(["nodemon"], dev=True)
            ['pnpm', 'add', '-D', 'nodemon']
        """
        verb = "install" if self is PackageManager.NPM else "add"
        flags = ["-D"] if dev else []
        return [self.value, verb, *flags, *packages]

    def run_script_argv(self, script: str) -> list[str]:
        """Run a ``package.json`` script.

        Example:
            >>> PackageManager.YARN.run_script_argv("build")
            ['yarn', 'build']
            >>> PackageManager.BUN.run_script_argv("build")
            ['bun', 'run', 'build']
        """
        if self is PackageManager.YARN:
            return [self.value, script]
        return [self.value, "run", script]

    def init_argv(self) -> list[str]:
        """Create a default ``package.json`` without prompting."""
        if self is PackageManager.PNPM:
            return [self.value, "init"]
        return [self.value, "init", "-y"]

    def dlx_argv(self, package: str, *args: str) -> list[str]:
        """Run a package binary once without adding it to the project.

        Example:
            >>> PackageManager.BUN.dlx_argv("shadcn@latest", "init")
            ['bunx', 'shadcn@latest', 'init']
        """
        if self is PackageManager.NPM:
            prefix = ["npx"]
        elif self is PackageManager.BUN:
            prefix = ["bunx"]
        else:
            prefix = [self.value, "dlx"]
        return [*prefix, package, *args]

    def dev_hint(self) -> str:
        return " ".join(self.run_script_argv("dev"))


PROBE_ORDER: tuple[PackageManager, ...] = (
    PackageManager.BUN,
    PackageManager.PNPM,
    PackageManager.YARN,
)


def detect_package_manager(which: Which | None = None) -> PackageManager:
    """Return the first package manager found on ``PATH``.

    Probes bun, pnpm and yarn in that order and falls back to npm without
    checking that npm is installed; a missing npm surfaces later as a failed
    install step.

    Args:
        which: Executable lookup, ``shutil.which`` by default.

    Example:
        >>> on_path = {"pnpm", "npm"}
        >>> detect_package_manager(lambda name: name if name in on_path else None)
        <PackageManager.PNPM: 'pnpm'>
        >>> detect_package_manager(lambda name: None)
        <PackageManager.NPM: 'npm'>
    """
    lookup = which or shutil.which
    for manager in PROBE_ORDER:
        if lookup(manager.value):
            return manager
    return PackageManager.NPM
