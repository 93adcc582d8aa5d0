"""Duration-to-phrase bucket table.

A span is reduced to rounded seconds and minutes (see measure.py), then
matched against BUCKETS top to bottom. Each bucket tests one quantity
against an exclusive upper bound; the first match renders the phrase.

Months and years are fixed minute counts (30 and 365 days). Spans of a year
or more go through the year rule: one day is subtracted for every four
whole years before the leftover fraction of a year is bucketed into
"about", "over" or "almost".

Example:
    >>> format_duration(timedelta(minutes=45))
    'about 1 hour'
    >>> format_duration(timedelta(days=500))
    'over 1 year'

"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from timeago_text.classifier.measure import SpanMeasure, measure_span
from timeago_text.classifier.words import pluralize
from timeago_text.core.timing import (
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    MINUTES_PER_MONTH,
    MINUTES_PER_YEAR,
    round_div,
)
from timeago_text.core.types import SpanLike

logger = logging.getLogger(__name__)

__all__ = [
    "BUCKETS",
    "QUARTER_YEAR",
    "THREE_QUARTERS_YEAR",
    "Bucket",
    "classify_measure",
    "format_duration",
    "year_parts",
]

# Year remainder thresholds, in minutes
QUARTER_YEAR = MINUTES_PER_YEAR // 4
THREE_QUARTERS_YEAR = 3 * QUARTER_YEAR


@dataclass(frozen=True)
class Bucket:
    """One row of the phrase table.

    Attributes:
        name: Stable identifier for the row.
        quantity: Which rounded quantity the bound applies to.
        upper: Exclusive upper bound, or None for the final catch-all row.
        render: Builds the phrase from the rounded minute count.

    """

    name: str
    quantity: Literal["seconds", "minutes"]
    upper: int | None
    render: Callable[[int], str]

    def matches(self, measure: SpanMeasure) -> bool:
        """Check whether measure falls below this bucket's upper bound."""
        if self.upper is None:
            return True
        return getattr(measure, self.quantity) < self.upper

    def phrase(self, measure: SpanMeasure) -> str:
        """Render the phrase for measure."""
        return self.render(measure.minutes)


def year_parts(minutes: int) -> tuple[int, int]:
    """Split a minute count into leap-corrected whole years and remainder.

    Args:
        minutes: Rounded minutes, at least one year's worth.

    Returns:
        Tuple of (years, remainder_minutes).

    Examples:
        >>> year_parts(525600)
        (1, 0)
        >>> year_parts(4 * 525600)  # one leap day owed
        (3, 524160)

    """
    raw_years = minutes // MINUTES_PER_YEAR
    leap_offset = (raw_years // 4) * MINUTES_PER_DAY
    return divmod(minutes - leap_offset, MINUTES_PER_YEAR)


def _years_phrase(minutes: int) -> str:
    years, remainder = year_parts(minutes)
    logger.debug("Year rule: minutes=%d years=%d remainder=%d", minutes, years, remainder)
    if remainder < QUARTER_YEAR:
        return f"about {pluralize(years, 'year')}"
    if remainder < THREE_QUARTERS_YEAR:
        return f"over {pluralize(years, 'year')}"
    return f"almost {pluralize(years + 1, 'year')}"


BUCKETS: tuple[Bucket, ...] = (
    Bucket("less_than_a_minute", "seconds", 30, lambda _: "less than a minute"),
    Bucket("one_minute", "minutes", 2, lambda _: "1 minute"),
    Bucket("minutes", "minutes", 45, lambda m: pluralize(m, "minute")),
    Bucket("about_one_hour", "minutes", 90, lambda _: "about 1 hour"),
    Bucket(
        "about_hours",
        "minutes",
        MINUTES_PER_DAY,
        lambda m: f"about {pluralize(round_div(m, MINUTES_PER_HOUR), 'hour')}",
    ),
    Bucket("one_day", "minutes", 2520, lambda _: "1 day"),
    Bucket(
        "days",
        "minutes",
        MINUTES_PER_MONTH,
        lambda m: pluralize(round_div(m, MINUTES_PER_DAY), "day"),
    ),
    Bucket(
        "about_months",
        "minutes",
        2 * MINUTES_PER_MONTH,
        lambda m: f"about {pluralize(round_div(m, MINUTES_PER_MONTH), 'month')}",
    ),
    Bucket(
        "months",
        "minutes",
        MINUTES_PER_YEAR,
        lambda m: pluralize(round_div(m, MINUTES_PER_MONTH), "month"),
    ),
    Bucket("years", "minutes", None, _years_phrase),
)


def classify_measure(measure: SpanMeasure) -> Bucket:
    """Find the first bucket matching measure.

    The final bucket is unbounded, so a match always exists.
    """
    return next(bucket for bucket in BUCKETS if bucket.matches(measure))


def format_duration(span: SpanLike) -> str:
    """Format the magnitude of a span as an approximate phrase.

    Args:
        span: timedelta or number of seconds. Negative spans are formatted
            by their absolute value.

    Returns:
        Phrase such as "less than a minute", "about 3 hours", "2 months" or
        "almost 5 years".

    Raises:
        TypeError: If span is not a timedelta or number.
        SpanError: If span is not finite or cannot be represented.

    Examples:
        >>> format_duration(0)
        'less than a minute'
        >>> format_duration(90)
        '2 minutes'
        >>> format_duration(timedelta(hours=23, minutes=59, seconds=30))
        '1 day'

    """
    measure = measure_span(span)
    return classify_measure(measure).phrase(measure)
