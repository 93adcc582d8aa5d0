"""Derived quantities the bucket table is evaluated on."""

from __future__ import annotations

from dataclasses import dataclass

from timeago_text.core.timing import US_PER_MINUTE, US_PER_SECOND, round_div, to_microseconds
from timeago_text.core.types import SpanLike


@dataclass(frozen=True)
class SpanMeasure:
    """Rounded magnitude of a span.

    Attributes:
        seconds: Whole seconds, rounded half away from zero.
        minutes: Whole minutes, rounded half away from zero from the exact
            span (not from the rounded seconds).

    """

    seconds: int
    minutes: int


def measure_span(span: SpanLike) -> SpanMeasure:
    """Derive rounded seconds and minutes from the magnitude of span.

    Args:
        span: timedelta or number of seconds. The sign is ignored.

    Returns:
        SpanMeasure for abs(span).

    Examples:
        >>> measure_span(89)
        SpanMeasure(seconds=89, minutes=1)
        >>> measure_span(-90)
        SpanMeasure(seconds=90, minutes=2)

    """
    micros = abs(to_microseconds(span))
    return SpanMeasure(
        seconds=round_div(micros, US_PER_SECOND),
        minutes=round_div(micros, US_PER_MINUTE),
    )
