"""Configuration model and loader for timeago-text.

Loads settings from ~/.timeago-text/config.yaml (or an explicit path) into a
frozen Pydantic model. Settings only affect the command line surface; the
phrase table itself is fixed.

Usage:
    from timeago_text.core.config import get_config, load_config

    load_config(Path("custom.yaml"))
    if get_config().naive_timezone == "local":
        ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from timeago_text.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Default config path
GLOBAL_CONFIG_PATH = Path.home() / ".timeago-text" / "config.yaml"

# Refuse to parse anything larger than this (1MB)
MAX_CONFIG_SIZE = 1024 * 1024

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Config(BaseModel):
    """timeago-text settings.

    Attributes:
        naive_timezone: How timestamps without a UTC offset are interpreted
            by the CLI ("utc" or "local").
        log_level: Default CLI log level when neither --verbose nor --quiet
            is given.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    naive_timezone: Literal["utc", "local"] = Field(
        default="utc",
        description="Interpretation of timestamps without an offset",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Default CLI log level",
    )


# Module-level singleton
_config: Config | None = None


def _read_yaml(path: Path) -> dict[str, object]:
    """Read and parse a YAML config file into a mapping.

    Raises:
        ConfigError: If the file is too large, unreadable, malformed, or
            not a mapping.

    """
    try:
        size = path.stat().st_size
        if size > MAX_CONFIG_SIZE:
            raise ConfigError(f"Config file {path} is too large ({size} bytes)")
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_config(path: Path | None = None) -> Config:
    """Load configuration from YAML and populate the singleton.

    When path is None the global config path is used, and a missing file
    yields defaults. An explicitly given path must exist.

    Args:
        path: Config file to load. Defaults to ~/.timeago-text/config.yaml.

    Returns:
        Loaded Config instance.

    Raises:
        ConfigError: If the file is missing (explicit path only), unreadable,
            malformed, or fails validation.

    """
    global _config

    if path is None:
        path = GLOBAL_CONFIG_PATH
        if not path.exists():
            logger.debug("Config not found at %s, using defaults", path)
            _config = Config()
            return _config
    elif not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    data = _read_yaml(path)
    try:
        _config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e

    logger.debug("Loaded config from %s", path)
    return _config


def get_config() -> Config:
    """Get the configuration singleton.

    Falls back to defaults when nothing has been loaded yet.

    Returns:
        Config instance.

    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset cached config (useful for testing)."""
    global _config
    _config = None
