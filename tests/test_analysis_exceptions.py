"""Tests for analysis exception classes."""

import pytest

from churn_analyzer.analysis.exceptions import (
    AnalysisError,
    ConfigurationError,
    InputLoadError,
    ReportWriteError,
)


class TestAnalysisExceptions:
    """Tests for the analysis exception hierarchy."""

    @pytest.mark.parametrize("exc_type", [ConfigurationError, InputLoadError, ReportWriteError])
    def test_inherits_from_analysis_error(self, exc_type):
        exc = exc_type("boom")
        assert isinstance(exc, AnalysisError)
        assert isinstance(exc, Exception)
        assert str(exc) == "boom"

    def test_can_be_caught_as_base(self):
        with pytest.raises(AnalysisError, match="bad input"):
            raise InputLoadError("bad input")
