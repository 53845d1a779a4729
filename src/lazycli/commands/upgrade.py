"""Implementation for ``lazy upgrade``."""

from __future__ import annotations

import sys

from .. import exec as exec_util
from .. import log
from ..errors import StepFailedError

DISTRIBUTION = "lazycli"


def upgrade_argv(python: str | None = None) -> list[str]:
    """Return the pip invocation that upgrades the running installation.

    Example:
        >>> upgrade_argv("/usr/bin/python3")
        ['/usr/bin/python3', '-m', 'pip', 'install', '--upgrade', 'lazycli']
    """
    return [python or sys.executable, "-m", "pip", "install", "--upgrade", DISTRIBUTION]


def upgrade() -> None:
    log.info("🔄 Upgrading LazyCLI...")
    argv = upgrade_argv()
    result = exec_util.run(argv)
    if not exec_util.succeeded(result):
        raise StepFailedError(
            "❌ Upgrade failed.", detail=exec_util.failure_detail(argv, result)
        )
    log.success("✅ LazyCLI upgraded to the latest version!")
