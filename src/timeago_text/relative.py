"""Relative time phrases ("about 2 hours ago", "3 days from now").

Wraps the duration classifier with sign handling. The signed delta is
always now - reference: positive or zero means the reference is in the
past, negative means it is in the future.

Usage:
    from timeago_text.relative import format_time

    format_time(post.created_at)            # uses the process clock
    format_time(post.created_at, now=fixed)  # explicit now

"""

from __future__ import annotations

import logging
from datetime import datetime

from timeago_text.classifier import format_duration
from timeago_text.core.timing import now_like, to_microseconds
from timeago_text.core.types import Direction, SpanLike

logger = logging.getLogger(__name__)


def direction_of(delta: SpanLike) -> Direction:
    """Classify a now - reference delta as past or future.

    Zero counts as past.

    Examples:
        >>> direction_of(0)
        <Direction.PAST: 'ago'>
        >>> direction_of(-1)
        <Direction.FUTURE: 'from now'>

    """
    if to_microseconds(delta) < 0:
        return Direction.FUTURE
    return Direction.PAST


def format_delta(delta: SpanLike) -> str:
    """Format a signed now - reference delta with a directional suffix.

    Args:
        delta: timedelta or number of seconds; positive (or zero) for the
            past, negative for the future.

    Returns:
        Phrase such as "about 1 hour ago" or "3 days from now".

    Raises:
        TypeError: If delta is not a timedelta or number.
        SpanError: If delta is not finite or cannot be represented.

    """
    direction = direction_of(delta)
    phrase = format_duration(delta)
    logger.debug("Formatted delta %s as %r (%s)", delta, phrase, direction.name)
    return phrase + direction.suffix


def format_time(reference: datetime, now: datetime | None = None) -> str:
    """Format a timestamp relative to now.

    Args:
        reference: Timestamp to describe.
        now: Current time. Defaults to the process clock, matching the
            timezone awareness of reference.

    Returns:
        Phrase such as "less than a minute ago" or "about 1 hour from now".

    Raises:
        TypeError: If reference and now mix naive and aware datetimes.

    """
    if now is None:
        now = now_like(reference)
    return format_delta(now - reference)
