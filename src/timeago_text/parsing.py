"""Compact duration strings such as "2D12h", "1Y6M" or "-44m30s".

Grammar (whitespace around the whole string is ignored):

    [+|-] [<int>Y] [<int>M] [<int>D] {<number><unit>}

- Y, M and D are the fixed approximations used by the classifier
  (365 days, 30 days, 1 day) and must appear in that order.
- Clock units are h, m, s, ms, us (or µs); numbers may carry a decimal
  fraction ("1.5h"). Clock groups may repeat in any order.
- "0" on its own is accepted as a zero span.

Example:
    >>> parse_duration("29D23h59m30s")
    datetime.timedelta(days=29, seconds=86370)

"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal

from timeago_text.core.exceptions import DurationParseError, SpanError
from timeago_text.core.timing import (
    MINUTES_PER_DAY,
    MINUTES_PER_MONTH,
    MINUTES_PER_YEAR,
    US_PER_MINUTE,
    US_PER_SECOND,
)

__all__ = ["CALENDAR_UNITS", "CLOCK_UNITS", "parse_duration"]

# Calendar-approximate prefixes, in required order
CALENDAR_UNITS: tuple[tuple[str, int], ...] = (
    ("Y", MINUTES_PER_YEAR * US_PER_MINUTE),
    ("M", MINUTES_PER_MONTH * US_PER_MINUTE),
    ("D", MINUTES_PER_DAY * US_PER_MINUTE),
)

CLOCK_UNITS: dict[str, int] = {
    "h": 60 * US_PER_MINUTE,
    "m": US_PER_MINUTE,
    "s": US_PER_SECOND,
    "ms": 1_000,
    "us": 1,
    "µs": 1,
}

_CALENDAR_RE = re.compile(r"(\d+)([YMD])")
# Longer unit names first so "ms" is not read as "m" followed by "s"
_CLOCK_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ms|us|µs|h|m|s)")


def _parse_calendar(text: str, pos: int) -> tuple[int, int]:
    """Consume Y/M/D groups starting at pos.

    Returns:
        Tuple of (microseconds, new_position).

    """
    total = 0
    next_unit = 0
    order = [unit for unit, _ in CALENDAR_UNITS]
    while match := _CALENDAR_RE.match(text, pos):
        unit = match.group(2)
        index = order.index(unit)
        if index < next_unit:
            raise DurationParseError(
                f"Unit {unit!r} out of order in {text!r} (expected Y, M, D)",
                text=text,
                position=match.start(2),
            )
        total += int(match.group(1)) * CALENDAR_UNITS[index][1]
        next_unit = index + 1
        pos = match.end()
    return total, pos


def _parse_clock(text: str, pos: int) -> tuple[int, int]:
    """Consume h/m/s/ms/us groups starting at pos.

    Returns:
        Tuple of (microseconds, new_position).

    """
    total = Decimal(0)
    while match := _CLOCK_RE.match(text, pos):
        total += Decimal(match.group(1)) * CLOCK_UNITS[match.group(2)]
        pos = match.end()
    # Sub-microsecond fractions are truncated
    return int(total), pos


def parse_duration(text: str) -> timedelta:
    """Parse a compact duration string into a timedelta.

    Args:
        text: Duration such as "45m", "2D12h", "1Y276D" or "-1.5h".

    Returns:
        Signed timedelta.

    Raises:
        DurationParseError: If text is empty or malformed.
        SpanError: If the result does not fit in a timedelta.

    Examples:
        >>> parse_duration("1m30s")
        datetime.timedelta(seconds=90)
        >>> parse_duration("-45m")
        datetime.timedelta(days=-1, seconds=83700)

    """
    text = text.strip()
    if not text:
        raise DurationParseError("Empty duration", text=text)

    sign = 1
    start = 0
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        start = 1

    if text[start:] == "0":
        return timedelta(0)

    calendar_us, pos = _parse_calendar(text, start)
    clock_us, pos = _parse_clock(text, pos)

    if pos != len(text):
        raise DurationParseError(
            f"Unexpected {text[pos:]!r} in duration {text!r}",
            text=text,
            position=pos,
        )
    if pos == start:
        raise DurationParseError(f"No duration units in {text!r}", text=text, position=pos)

    total = sign * (calendar_us + clock_us)
    try:
        return timedelta(microseconds=total)
    except OverflowError as e:
        raise SpanError(f"Duration out of range: {text!r}", value=text) from e
