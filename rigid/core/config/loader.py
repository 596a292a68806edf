"""
Configuration loader — reads the optional rigid.yml user defaults.

Lookup order: explicit path, ``$RIGID_CONFIG``, then
``~/.config/rigid/rigid.yml``. No file means built-in defaults.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

CONFIG_FILE = "rigid.yml"
CONFIG_ENV_VAR = "RIGID_CONFIG"


class ConfigError(Exception):
    """Raised when the config file is unreadable or invalid."""


class RigidConfig(BaseModel):
    """User-level defaults for ``rigid new``."""

    token_file: str = "~/.githubtoken"
    repo_prefix: str = "proto-"
    author: str = ""
    private: bool = False
    skip_install: bool = False
    api_url: str = "https://api.github.com"

    @property
    def token_path(self) -> Path:
        return Path(self.token_file).expanduser()


def default_config_path() -> Path:
    """Where the config lives when nothing else says otherwise."""
    return Path.home() / ".config" / "rigid" / CONFIG_FILE


def find_config_file(explicit: Path | None = None) -> Path | None:
    """Resolve the config file to load, or None if there is none.

    An explicit path is returned as-is (even if missing) so that
    ``load_config`` can report it.
    """
    if explicit is not None:
        return explicit

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    candidate = default_config_path()
    return candidate if candidate.is_file() else None


def load_config(path: Path | None = None) -> RigidConfig:
    """Load and validate user configuration.

    Args:
        path: Explicit config path. If None, uses the lookup order.

    Returns:
        Validated RigidConfig (defaults when no file is found).

    Raises:
        ConfigError: If a named file is missing or its content is invalid.
    """
    path = find_config_file(path)
    if path is None:
        logger.debug("No %s found, using defaults", CONFIG_FILE)
        return RigidConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = RigidConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded config from %s", path)
    return config
