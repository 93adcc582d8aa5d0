"""timeago-text - approximate English phrases for time spans.

Usage:
    from timeago_text import format_duration, format_time

    format_duration(timedelta(minutes=45))   # 'about 1 hour'
    format_time(created_at)                  # 'about 3 hours ago'
"""

from importlib.metadata import version

from timeago_text.classifier import format_duration
from timeago_text.core.exceptions import (
    ConfigError,
    DurationParseError,
    SpanError,
    TimeagoError,
)
from timeago_text.core.types import Direction
from timeago_text.parsing import parse_duration
from timeago_text.relative import direction_of, format_delta, format_time

try:
    __version__ = version("timeago-text")
except Exception:
    __version__ = "0.0.0-dev"

__all__ = [
    "ConfigError",
    "Direction",
    "DurationParseError",
    "SpanError",
    "TimeagoError",
    "direction_of",
    "format_delta",
    "format_duration",
    "format_time",
    "parse_duration",
]
