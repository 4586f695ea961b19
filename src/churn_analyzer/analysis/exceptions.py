"""Exceptions for analysis runs.

The parser and classifier never raise; these cover the layers around them.
"""


class AnalysisError(Exception):
    """Base exception for all analysis operations."""


class ConfigurationError(AnalysisError):
    """Raised when a configuration value is missing or invalid."""


class InputLoadError(AnalysisError):
    """Raised when the change input cannot be read or validated."""


class ReportWriteError(AnalysisError):
    """Raised when the analysis report cannot be written."""
