"""Per-file and per-change analysis over already-fetched data.

Composes the patch parser and the line classifier: each file's patch is
parsed once, then every added line is classified against the file's blame
ranges. Nothing here fetches data; callers supply patches, blame and
commit metadata.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone

from churn_analyzer.analysis.authorship import (
    UNKNOWN_AUTHOR,
    filter_blame_ranges,
    resolve_file_authorship,
)
from churn_analyzer.classification.line_classifier import (
    DEFAULT_MAX_DELTA_DAYS,
    classify_lines,
    coerce_blame_ranges,
)
from churn_analyzer.models.classification_models import (
    Category,
    ClassificationResult,
    InvalidDatePolicy,
)
from churn_analyzer.models.input_models import ChangedFile, ChangeInput
from churn_analyzer.models.patch_models import AddedLine
from churn_analyzer.models.report_models import (
    AnalysisReport,
    FileAnalysis,
    LineDetail,
    empty_summary,
)
from churn_analyzer.utils.patch_parser import count_hunk_types, parse_patch

logger = logging.getLogger(__name__)

_PREVIEW_CHARS = 60


def _log_line(filename: str, added: AddedLine, result: ClassificationResult) -> None:
    preview = added.content[:_PREVIEW_CHARS]
    if result.has_evidence:
        logger.debug(
            "[%s] line %d [%s]: %r => %s (prev: %s@%s, delta=%.1fd)",
            filename,
            added.number,
            added.hunk_type.value,
            preview,
            result.category.value,
            result.previous_author,
            result.previous_commit[:7],
            result.delta_days or 0.0,
        )
    else:
        logger.debug(
            "[%s] line %d [%s]: %r => %s",
            filename,
            added.number,
            added.hunk_type.value,
            preview,
            result.category.value,
        )


def analyze_file(
    changed_file: ChangedFile,
    *,
    current_author: str | None,
    current_date: datetime,
    max_delta_days: float = DEFAULT_MAX_DELTA_DAYS,
    excluded_commits: Iterable[str] = (),
    invalid_date_policy: InvalidDatePolicy = InvalidDatePolicy.AS_MISSING,
) -> FileAnalysis:
    """Classify every line a file's patch adds.

    Args:
        changed_file: File with its patch and base-revision blame ranges.
        current_author: Author attributed to the change for this file.
        current_date: Timestamp attributed to the change for this file.
        max_delta_days: Churn/Rework threshold in days.
        excluded_commits: Commit ids of the change itself; blame ranges
            pointing at them are dropped.
        invalid_date_policy: Treatment of unparseable blame timestamps.

    Returns:
        FileAnalysis with per-category counts and line-level details.
        Files without a patch (e.g. binary files) are returned as skipped.
    """
    filename = changed_file.filename
    logger.info("Checking file: %s", filename)

    if not changed_file.patch:
        logger.info("Skipping %s (no patch, maybe binary)", filename)
        return FileAnalysis(filename=filename, skipped=True)

    added_lines = parse_patch(changed_file.patch)
    hunk_type_counts = count_hunk_types(added_lines)
    logger.info("Added lines to analyze in %s: %d", filename, len(added_lines))
    logger.info(
        "Hunk types in %s: %s",
        filename,
        {hunk_type.value: count for hunk_type, count in hunk_type_counts.items()},
    )

    blame_ranges, filtered_count = filter_blame_ranges(
        coerce_blame_ranges(changed_file.blame), excluded_commits
    )
    if filtered_count > 0:
        logger.warning(
            "%d blame range(s) in %s pointed to the change's own commits and were filtered out",
            filtered_count,
            filename,
        )

    results = classify_lines(
        added_lines,
        blame_ranges,
        current_author,
        current_date,
        max_delta_days,
        invalid_date_policy,
    )

    summary = empty_summary()
    details: list[LineDetail] = []
    for added, result in zip(added_lines, results):
        _log_line(filename, added, result)
        summary[result.category] += 1
        details.append(
            LineDetail(
                file=filename,
                line=added.number,
                content=added.content,
                hunk_type=added.hunk_type,
                category=result.category,
                current_author=current_author,
                previous_author=result.previous_author,
                previous_commit=result.previous_commit,
                delta_days=result.delta_days,
            )
        )

    return FileAnalysis(
        filename=filename,
        added_line_count=len(added_lines),
        hunk_type_counts=hunk_type_counts,
        filtered_blame_count=filtered_count,
        summary=summary,
        details=details,
    )


def merge_summaries(summaries: Iterable[dict[Category, int]]) -> dict[Category, int]:
    """Add per-category counts together; every category is always present."""
    total = empty_summary()
    for summary in summaries:
        for category, count in summary.items():
            total[category] += count
    return total


def analyze_change(
    change: ChangeInput,
    *,
    max_delta_days: float = DEFAULT_MAX_DELTA_DAYS,
    invalid_date_policy: InvalidDatePolicy = InvalidDatePolicy.AS_MISSING,
) -> AnalysisReport:
    """Analyze every file of a change and aggregate the results.

    The author and timestamp for each file come from the newest commit of
    the change touching it, falling back to the change's own author/date,
    then to "unknown" and the current time.
    """
    logger.info(
        "Analyzing change %s in %s (%d files, %d commits)",
        change.number,
        change.repo,
        len(change.files),
        len(change.commits),
    )

    change_date = change.date or datetime.now(timezone.utc)
    last_commit_by_file = resolve_file_authorship(change.commits, change.author, change_date)
    excluded = set(change.excluded_commits) | {commit.sha for commit in change.commits}

    file_analyses: list[FileAnalysis] = []
    for changed_file in change.files:
        last_commit = last_commit_by_file.get(changed_file.filename)
        current_author = (last_commit.author if last_commit else None) or change.author or UNKNOWN_AUTHOR
        current_date = (last_commit.date if last_commit else None) or change_date

        file_analyses.append(
            analyze_file(
                changed_file,
                current_author=current_author,
                current_date=current_date,
                max_delta_days=max_delta_days,
                excluded_commits=excluded,
                invalid_date_policy=invalid_date_policy,
            )
        )

    return AnalysisReport(
        repo=change.repo,
        number=change.number,
        max_delta_days=max_delta_days,
        summary=merge_summaries(analysis.summary for analysis in file_analyses),
        files=file_analyses,
        details=[detail for analysis in file_analyses for detail in analysis.details],
    )
