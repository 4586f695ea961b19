"""Change analysis built on the patch parser and line classifier."""

from churn_analyzer.analysis.authorship import (
    UNKNOWN_AUTHOR,
    FileAuthorship,
    filter_blame_ranges,
    resolve_file_authorship,
)
from churn_analyzer.analysis.exceptions import (
    AnalysisError,
    ConfigurationError,
    InputLoadError,
    ReportWriteError,
)
from churn_analyzer.analysis.file_analyzer import analyze_change, analyze_file, merge_summaries
from churn_analyzer.analysis.report_writer import (
    DEFAULT_OUTPUT_DIR,
    default_report_name,
    format_report_human,
    format_report_json,
    write_report,
)

__all__ = [
    "AnalysisError",
    "ConfigurationError",
    "DEFAULT_OUTPUT_DIR",
    "FileAuthorship",
    "InputLoadError",
    "ReportWriteError",
    "UNKNOWN_AUTHOR",
    "analyze_change",
    "analyze_file",
    "default_report_name",
    "filter_blame_ranges",
    "format_report_human",
    "format_report_json",
    "merge_summaries",
    "resolve_file_authorship",
    "write_report",
]
