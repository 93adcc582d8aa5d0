"""English count phrases."""

from __future__ import annotations


def pluralize(count: int, noun: str) -> str:
    """Render count with the singular or plural form of noun.

    Examples:
        >>> pluralize(1, "month")
        '1 month'
        >>> pluralize(2, "month")
        '2 months'

    """
    if count == 1:
        return f"{count} {noun}"
    return f"{count} {noun}s"
