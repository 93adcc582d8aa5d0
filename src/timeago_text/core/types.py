"""Core type definitions for timeago-text.

This module provides type aliases shared by the classifier, the relative
time wrapper and the CLI.
"""

from __future__ import annotations

from datetime import timedelta
from enum import StrEnum
from typing import TypeAlias

# A span is a timedelta or a real number of seconds
# Used for: format_duration, format_delta, measure_span
SpanLike: TypeAlias = timedelta | int | float


class Direction(StrEnum):
    """Which side of "now" a reference point lies on.

    The value is the suffix appended to a phrase.
    """

    PAST = "ago"
    FUTURE = "from now"

    @property
    def suffix(self) -> str:
        """Suffix including the leading space (e.g., " ago")."""
        return f" {self.value}"
