"""Core module for timeago-text configuration and utilities.

This module provides:
- Configuration model and singleton access via get_config()
- Custom exception hierarchy with TimeagoError as base
- Injectable clock and unit arithmetic via core.timing
"""

from timeago_text.core.config import (
    GLOBAL_CONFIG_PATH,
    Config,
    get_config,
    load_config,
    reset_config,
)
from timeago_text.core.exceptions import (
    ConfigError,
    DurationParseError,
    SpanError,
    TimeagoError,
)
from timeago_text.core.types import Direction, SpanLike

__all__ = [
    # Config
    "GLOBAL_CONFIG_PATH",
    "Config",
    "get_config",
    "load_config",
    "reset_config",
    # Exceptions
    "ConfigError",
    "DurationParseError",
    "SpanError",
    "TimeagoError",
    # Types
    "Direction",
    "SpanLike",
]
