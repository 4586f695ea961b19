"""Utilities for the churn analyzer."""

from churn_analyzer.utils.logging_utils import configure_logging, verbosity_to_level
from churn_analyzer.utils.patch_parser import (
    count_hunk_types,
    determine_hunk_type,
    is_blank_line,
    parse_hunk_header,
    parse_patch,
)
from churn_analyzer.utils.timestamps import ensure_aware, parse_commit_timestamp

__all__ = [
    "configure_logging",
    "count_hunk_types",
    "determine_hunk_type",
    "ensure_aware",
    "is_blank_line",
    "parse_commit_timestamp",
    "parse_hunk_header",
    "parse_patch",
    "verbosity_to_level",
]
