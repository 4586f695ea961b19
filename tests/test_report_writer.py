"""Tests for report rendering and persistence."""

import json

import pytest

from churn_analyzer.analysis import (
    ReportWriteError,
    default_report_name,
    format_report_human,
    format_report_json,
    write_report,
)
from churn_analyzer.models import AnalysisReport, Category, HunkType, LineDetail


@pytest.fixture
def report():
    return AnalysisReport(
        repo="acme/widgets",
        number=7,
        max_delta_days=21,
        summary={Category.NEW_WORK: 3, Category.CHURN: 1, Category.REWORK: 0, Category.HELP_OTHERS: 0},
        details=[
            LineDetail(
                file="a.py",
                line=4,
                content="x = 1",
                hunk_type=HunkType.REPLACE,
                category=Category.CHURN,
                current_author="Alice",
                previous_author="Alice",
                previous_commit="abc",
                delta_days=2.5,
            )
        ],
    )


class TestDefaultReportName:
    def test_with_number(self):
        assert default_report_name(12) == "pr_12_churn_summary.json"

    def test_without_number(self):
        assert default_report_name(None) == "churn_summary.json"


class TestFormatReport:
    def test_json_uses_category_names(self, report):
        payload = json.loads(format_report_json(report))
        assert payload["summary"] == {"New Work": 3, "Churn": 1, "Rework": 0, "Help Others": 0}
        assert payload["details"][0]["hunk_type"] == "replace"
        assert payload["details"][0]["category"] == "Churn"
        assert payload["repo"] == "acme/widgets"
        assert "analysed_at" in payload

    def test_human_lists_every_category(self, report):
        text = format_report_human(report)
        for category in Category:
            assert category.value in text
        assert "acme/widgets #7" in text
        assert "Added lines: 4" in text


class TestWriteReport:
    def test_creates_directory_and_default_name(self, report, tmp_path):
        target_dir = tmp_path / "nested" / "output"
        written = write_report(report, target_dir)
        assert written == target_dir / "pr_7_churn_summary.json"
        assert json.loads(written.read_text(encoding="utf-8"))["number"] == 7

    def test_custom_name(self, report, tmp_path):
        written = write_report(report, tmp_path, "custom.json")
        assert written.name == "custom.json"
        assert written.exists()

    def test_failure_raises_report_write_error(self, report, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")
        with pytest.raises(ReportWriteError):
            write_report(report, blocker)
