"""Duration classifier: spans to approximate English phrases.

Example:
    >>> from timeago_text.classifier import format_duration
    >>> format_duration(2670)
    'about 1 hour'

"""

from timeago_text.classifier.buckets import (
    BUCKETS,
    QUARTER_YEAR,
    THREE_QUARTERS_YEAR,
    Bucket,
    classify_measure,
    format_duration,
    year_parts,
)
from timeago_text.classifier.measure import SpanMeasure, measure_span
from timeago_text.classifier.words import pluralize

__all__ = [
    "BUCKETS",
    "QUARTER_YEAR",
    "THREE_QUARTERS_YEAR",
    "Bucket",
    "SpanMeasure",
    "classify_measure",
    "format_duration",
    "measure_span",
    "pluralize",
    "year_parts",
]
