"""User configuration for LazyCLI.

The configuration file is optional. It lives in the platform config directory
(see ``paths.config_path``) and only tunes which prompts the scaffolders ask.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from . import paths
from .errors import ConfigInvalidError


class NodeSection(BaseModel):
    """Node.js scaffolder settings.

    Attributes:
        include_express_cors: Ask the express and cors questions during the
            TypeScript setup. When false both are treated as "no".

    Example:
        >>> NodeSection().include_express_cors
        True
    """

    model_config = ConfigDict(extra="ignore")

    include_express_cors: bool = True


class LazyConfig(BaseModel):
    """Top-level LazyCLI configuration.

    Example:
        >>> LazyConfig.model_validate({"node": {"include_express_cors": False}}).node
        NodeSection(include_express_cors=False)
    """

    model_config = ConfigDict(extra="ignore")

    node: NodeSection = NodeSection()


def load_json(path: Path) -> dict | None:
    """Load a JSON object from ``path``.

    Returns:
        Parsed payload, or ``None`` if the file does not exist.

    Example:
        >>> load_json(Path("missing.json")) is None
        True
    """
    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def load_config(path: Path | None = None) -> LazyConfig:
    """Load the user configuration, falling back to defaults when absent.

    Raises:
        ConfigInvalidError: The file exists but is not valid JSON or does not
            match the schema.
    """
    config_path = path or paths.config_path()
    try:
        payload = load_json(config_path)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigInvalidError(
            f"could not read {config_path}: {exc}",
            recovery_hint="Fix or delete the file to use the defaults.",
        ) from exc
    if payload is None:
        return LazyConfig()
    try:
        return LazyConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigInvalidError(
            f"invalid configuration in {config_path}",
            recovery_hint=str(exc),
        ) from exc
