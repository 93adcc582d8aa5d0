"""Centralized time API for timeago-text.

This module provides the clock and unit arithmetic the formatters build on:
- UTC-aware and naive UTC "now" from a single injectable clock
- Unit constants for the fixed-length minute/day/month/year approximations
- Exact conversion of timedeltas and second counts to microseconds
- Round-half-away-from-zero integer division

Usage:
    from timeago_text.core.timing import utc_now, set_clock, reset_clock

    # Freeze time in a test
    set_clock(lambda: datetime(2024, 1, 1, 12, 0))
    ...
    reset_clock()
"""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from timeago_text.core.exceptions import SpanError
from timeago_text.core.types import SpanLike


# Injectable clock for testing - returns naive UTC datetime
def _default_clock() -> datetime:
    """Return current naive UTC time."""
    return datetime.now(UTC).replace(tzinfo=None)


_clock: Callable[[], datetime] = _default_clock


def set_clock(clock: Callable[[], datetime]) -> None:
    """Set custom clock for testing.

    Args:
        clock: Function returning naive UTC datetime

    """
    global _clock
    _clock = clock


def reset_clock() -> None:
    """Reset clock to default (real time)."""
    global _clock
    _clock = _default_clock


# -----------------------------------------------------------------------------
# Core datetime functions
# -----------------------------------------------------------------------------


def utc_now() -> datetime:
    """Get current UTC time with timezone info.

    Returns:
        Timezone-aware datetime in UTC

    """
    return _clock().replace(tzinfo=UTC)


def utc_now_naive() -> datetime:
    """Get current UTC time without timezone info.

    Returns:
        Naive datetime representing UTC time

    """
    return _clock()


def now_like(reference: datetime) -> datetime:
    """Get current time with the same timezone awareness as reference.

    Aware references get an aware UTC now, naive references a naive UTC now,
    so the two can be subtracted.

    Args:
        reference: Datetime whose awareness should be matched.

    Returns:
        Current time, aware or naive to match reference.

    """
    return utc_now() if reference.tzinfo else utc_now_naive()


# -----------------------------------------------------------------------------
# Unit constants
# -----------------------------------------------------------------------------

US_PER_SECOND = 1_000_000
SECONDS_PER_MINUTE = 60
US_PER_MINUTE = SECONDS_PER_MINUTE * US_PER_SECOND

# Approximations in minutes, not calendar units
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
MINUTES_PER_MONTH = 30 * MINUTES_PER_DAY
MINUTES_PER_YEAR = 365 * MINUTES_PER_DAY

_US_PER_TIMEDELTA_UNIT = timedelta(microseconds=1)


# -----------------------------------------------------------------------------
# Arithmetic
# -----------------------------------------------------------------------------


def round_div(numerator: int, denominator: int) -> int:
    """Divide two integers, rounding half away from zero.

    Args:
        numerator: Dividend (any sign).
        denominator: Positive divisor.

    Returns:
        Nearest integer to numerator / denominator, ties away from zero.

    Examples:
        >>> round_div(3, 2)
        2
        >>> round_div(-3, 2)
        -2
        >>> round_div(89, 60)
        1

    """
    if numerator < 0:
        return -round_div(-numerator, denominator)
    return (2 * numerator + denominator) // (2 * denominator)


def to_microseconds(span: SpanLike) -> int:
    """Convert a span to an exact signed count of microseconds.

    Args:
        span: timedelta, or a real number of seconds.

    Returns:
        Signed microsecond count.

    Raises:
        TypeError: If span is not a timedelta or real number.
        SpanError: If span is not finite or cannot be represented as a
            timedelta.

    """
    if isinstance(span, timedelta):
        return span // _US_PER_TIMEDELTA_UNIT
    # bool is an int subclass but never a meaningful span
    if isinstance(span, bool) or not isinstance(span, int | float):
        raise TypeError(f"Expected timedelta or number of seconds, got {type(span).__name__}")
    if isinstance(span, int):
        return span * US_PER_SECOND
    if not math.isfinite(span):
        raise SpanError(f"Span must be finite, got {span!r}", value=span)
    try:
        return timedelta(seconds=span) // _US_PER_TIMEDELTA_UNIT
    except OverflowError as e:
        raise SpanError(f"Span out of range: {span!r}", value=span) from e


# -----------------------------------------------------------------------------
# Parsing functions
# -----------------------------------------------------------------------------


def parse_iso(s: str) -> datetime:
    """Parse ISO 8601 string to datetime.

    Args:
        s: ISO 8601 formatted string

    Returns:
        Parsed datetime (timezone-aware if input has timezone)

    """
    return datetime.fromisoformat(s)
