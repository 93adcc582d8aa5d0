"""Exception hierarchy for timeago-text.

All library errors inherit from TimeagoError so callers can catch them in
one place. Errors that describe a bad value also inherit from ValueError.
"""

from __future__ import annotations


class TimeagoError(Exception):
    """Base exception for timeago-text."""

    pass


class ConfigError(TimeagoError):
    """Configuration error.

    Raised when:
    - Config file contains malformed YAML
    - Config values fail validation
    - Config file exists but cannot be read
    """

    pass


class SpanError(TimeagoError, ValueError):
    """Span cannot be represented.

    Raised when a number of seconds is not finite or overflows the
    timedelta range.

    Attributes:
        value: The rejected input.

    """

    def __init__(self, message: str, value: object = None) -> None:
        """Initialize SpanError with the rejected value.

        Args:
            message: Human-readable error message.
            value: The input that could not be converted.

        """
        super().__init__(message)
        self.value = value


class DurationParseError(TimeagoError, ValueError):
    """Compact duration string could not be parsed.

    Attributes:
        text: The full input string.
        position: Index in text where parsing failed.

    """

    def __init__(self, message: str, text: str, position: int = 0) -> None:
        """Initialize DurationParseError with parse context.

        Args:
            message: Human-readable error message.
            text: The string being parsed.
            position: Offset of the offending character.

        """
        super().__init__(message)
        self.text = text
        self.position = position
