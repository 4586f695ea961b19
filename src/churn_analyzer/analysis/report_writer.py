"""Rendering and persistence of analysis reports."""

import logging
from pathlib import Path

from churn_analyzer.analysis.exceptions import ReportWriteError
from churn_analyzer.models.classification_models import Category
from churn_analyzer.models.report_models import AnalysisReport

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "output"


def default_report_name(number: int | None) -> str:
    """File name used when no explicit output name is configured."""
    if number is None:
        return "churn_summary.json"
    return f"pr_{number}_churn_summary.json"


def format_report_json(report: AnalysisReport) -> str:
    """Serialize a report to indented JSON."""
    return report.model_dump_json(indent=2)


def format_report_human(report: AnalysisReport) -> str:
    """Render a short human-readable summary of a report."""
    total = report.total_lines
    lines = [
        "=" * 60,
        "Churn Analysis Results",
        "=" * 60,
    ]
    if report.repo or report.number is not None:
        lines.append(f"Change: {report.repo or '?'} #{report.number if report.number is not None else '?'}")
    lines.append(f"Files analyzed: {len(report.files)} ({sum(1 for f in report.files if f.skipped)} skipped)")
    lines.append(f"Added lines: {total} (threshold {report.max_delta_days:g} days)")
    lines.append("")
    for category in Category:
        count = report.summary.get(category, 0)
        share = (100.0 * count / total) if total else 0.0
        lines.append(f"  {category.value:<12} {count:>6}  ({share:5.1f}%)")
    lines.append("=" * 60)
    return "\n".join(lines)


def write_report(
    report: AnalysisReport,
    output_dir: str | Path = DEFAULT_OUTPUT_DIR,
    file_name: str | None = None,
) -> Path:
    """Write the report as JSON into output_dir, creating it if needed.

    Returns:
        Path of the written file.

    Raises:
        ReportWriteError: If the directory or file cannot be written.
    """
    directory = Path(output_dir).expanduser()
    target = directory / (file_name or default_report_name(report.number))
    try:
        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            logger.info("Created output directory: %s", directory)
        target.write_text(format_report_json(report), encoding="utf-8")
    except OSError as exc:
        raise ReportWriteError(f"Failed to write report to {target}: {exc}") from exc

    logger.info("Saved output to %s", target)
    return target
