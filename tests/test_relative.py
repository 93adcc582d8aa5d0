"""Tests for relative time phrases.

Tests cover:
- Suffix selection for past, future and zero deltas
- Explicit now versus the injectable clock
- Naive and aware timestamps
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from timeago_text import Direction, direction_of, format_delta, format_time
from timeago_text.core.exceptions import SpanError

NOW = datetime(2024, 6, 15, 12, 0, 0)


class TestDirection:
    """Test the sign rule."""

    def test_zero_is_past(self) -> None:
        """A zero delta reads as "ago"."""
        assert direction_of(timedelta(0)) is Direction.PAST
        assert direction_of(0) is Direction.PAST
        assert direction_of(-0.0) is Direction.PAST

    def test_positive_is_past(self) -> None:
        """now - reference > 0 means the reference is behind us."""
        assert direction_of(timedelta(seconds=1)) is Direction.PAST

    def test_negative_is_future(self) -> None:
        """Even one microsecond ahead is the future."""
        assert direction_of(timedelta(microseconds=-1)) is Direction.FUTURE

    def test_suffixes(self) -> None:
        """Suffixes carry a leading space."""
        assert Direction.PAST.suffix == " ago"
        assert Direction.FUTURE.suffix == " from now"


class TestFormatDelta:
    """Test signed durations."""

    @pytest.mark.parametrize(
        "delta,expected",
        [
            (timedelta(0), "less than a minute ago"),
            (timedelta(seconds=29), "less than a minute ago"),
            (timedelta(seconds=-29), "less than a minute from now"),
            (timedelta(minutes=45), "about 1 hour ago"),
            (timedelta(minutes=-45), "about 1 hour from now"),
            (timedelta(days=2, hours=12), "3 days ago"),
            (timedelta(days=-2, hours=-12), "3 days from now"),
            (timedelta(days=400), "about 1 year ago"),
            (-2_670, "about 1 hour from now"),
        ],
    )
    def test_format_delta(self, delta: timedelta | int, expected: str) -> None:
        """Test phrase and suffix for signed deltas."""
        assert format_delta(delta) == expected

    def test_invalid_delta_propagates(self) -> None:
        """Unrepresentable deltas raise SpanError."""
        with pytest.raises(SpanError):
            format_delta(float("nan"))


class TestFormatTimeExplicitNow:
    """Test format_time with now passed in."""

    def test_same_instant(self) -> None:
        """Reference equal to now is "less than a minute ago"."""
        assert format_time(NOW, now=NOW) == "less than a minute ago"

    def test_future_reference(self) -> None:
        """A reference 45 minutes ahead is "from now"."""
        assert format_time(NOW + timedelta(minutes=45), now=NOW) == "about 1 hour from now"

    def test_past_reference(self) -> None:
        """A reference 45 minutes behind is "ago"."""
        assert format_time(NOW - timedelta(minutes=45), now=NOW) == "about 1 hour ago"

    @pytest.mark.parametrize(
        "offset,future,past",
        [
            (timedelta(seconds=29), "less than a minute from now", "less than a minute ago"),
            (timedelta(days=2, hours=12), "3 days from now", "3 days ago"),
            (timedelta(days=60), "2 months from now", "2 months ago"),
        ],
    )
    def test_symmetric_offsets(self, offset: timedelta, future: str, past: str) -> None:
        """The same offset on either side differs only in suffix."""
        assert format_time(NOW + offset, now=NOW) == future
        assert format_time(NOW - offset, now=NOW) == past

    def test_aware_timestamps_across_zones(self) -> None:
        """Aware timestamps compare as instants regardless of zone."""
        reference = datetime(2024, 6, 15, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        now = datetime(2024, 6, 15, 14, 0, tzinfo=UTC)
        assert format_time(reference, now=now) == "about 2 hours ago"

    def test_mixed_awareness_raises(self) -> None:
        """Naive and aware datetimes cannot be subtracted."""
        with pytest.raises(TypeError):
            format_time(NOW, now=NOW.replace(tzinfo=UTC))


class TestFormatTimeClock:
    """Test format_time reading the injectable clock."""

    def test_naive_reference_uses_naive_clock(self, frozen_clock: datetime) -> None:
        """Naive references are compared with naive UTC now."""
        assert format_time(frozen_clock - timedelta(hours=3)) == "about 3 hours ago"

    def test_aware_reference_uses_aware_clock(self, frozen_clock: datetime) -> None:
        """Aware references are compared with aware UTC now."""
        reference = frozen_clock.replace(tzinfo=UTC) + timedelta(days=10)
        assert format_time(reference) == "10 days from now"

    def test_real_clock(self) -> None:
        """Without a frozen clock, now is the wall clock."""
        assert format_time(datetime.now(UTC)) == "less than a minute ago"
