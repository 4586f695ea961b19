"""Added-line classification into work categories."""

from churn_analyzer.classification.line_classifier import (
    DEFAULT_MAX_DELTA_DAYS,
    calculate_delta_days,
    classify_added_line,
    classify_line,
    classify_lines,
    coerce_blame_ranges,
    find_blame_range,
)

__all__ = [
    "DEFAULT_MAX_DELTA_DAYS",
    "calculate_delta_days",
    "classify_added_line",
    "classify_line",
    "classify_lines",
    "coerce_blame_ranges",
    "find_blame_range",
]
