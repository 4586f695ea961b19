"""Line classification: attribute an added line to a work category.

The decision depends only on the line's hunk type, the blame range that
covers its line number, and the author/timestamp of the change under
review. Every function here is pure and total: unclear history resolves
to New Work rather than attributing churn to the wrong person.
"""

import math
from collections.abc import Mapping, Sequence
from datetime import datetime

from pydantic import ValidationError

from churn_analyzer.models.blame_models import BlameRange, TimestampState
from churn_analyzer.models.classification_models import (
    Category,
    ClassificationResult,
    InvalidDatePolicy,
)
from churn_analyzer.models.patch_models import AddedLine, HunkType
from churn_analyzer.utils.timestamps import ensure_aware, parse_commit_timestamp

DEFAULT_MAX_DELTA_DAYS = 21
SECONDS_PER_DAY = 60 * 60 * 24

_NEW_WORK = ClassificationResult(category=Category.NEW_WORK)


def coerce_blame_ranges(raw: object) -> list[BlameRange]:
    """Normalize raw blame input into BlameRange models.

    Absent or non-sequence input yields an empty list. Mapping entries are
    validated; entries that are neither ranges nor valid mappings are
    dropped.
    """
    if raw is None or isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Sequence):
        return []

    ranges: list[BlameRange] = []
    for entry in raw:
        if isinstance(entry, BlameRange):
            ranges.append(entry)
        elif isinstance(entry, Mapping):
            try:
                ranges.append(BlameRange.model_validate(entry))
            except ValidationError:
                continue
    return ranges


def find_blame_range(line_number: int, ranges: Sequence[BlameRange]) -> BlameRange | None:
    """Return the first range, in supplied order, covering line_number.

    Bounds are inclusive at both ends. Overlapping ranges are not resolved
    any further: the earliest one in the sequence wins.
    """
    for blame_range in ranges:
        if blame_range.covers(line_number):
            return blame_range
    return None


def calculate_delta_days(current_date: datetime, previous_date: datetime) -> float:
    """Signed number of days from previous_date to current_date."""
    delta = ensure_aware(current_date) - ensure_aware(previous_date)
    return delta.total_seconds() / SECONDS_PER_DAY


def classify_line(
    line_number: int,
    hunk_type: HunkType | str | None,
    blame_ranges: object,
    current_author: str | None,
    current_date: datetime | None,
    max_delta_days: float | None = DEFAULT_MAX_DELTA_DAYS,
    invalid_date_policy: InvalidDatePolicy = InvalidDatePolicy.AS_MISSING,
) -> ClassificationResult:
    """Classify one added line.

    Args:
        line_number: Position of the line in the new file.
        hunk_type: Type of the hunk the line belongs to.
        blame_ranges: Blame ranges of the file at the base revision, with the
            change's own commits already removed. Anything that is not a
            sequence counts as no blame.
        current_author: Author attributed to the change for this file.
        current_date: Timestamp attributed to the change for this file. When
            None, a line with a valid blame date is treated like one whose
            blame date is missing.
        max_delta_days: Churn/Rework threshold in days, inclusive. None means
            the default of 21.
        invalid_date_policy: Treatment of an unparseable blame timestamp.

    Returns:
        ClassificationResult with the category and supporting evidence.
    """
    if hunk_type == HunkType.ADD_ONLY:
        return _NEW_WORK

    if hunk_type != HunkType.REPLACE:
        # Fallback for delete-only (the parser emits no added lines for it)
        # and for unknown hunk types
        return _NEW_WORK

    match = find_blame_range(line_number, coerce_blame_ranges(blame_ranges))
    if match is None:
        return _NEW_WORK

    previous_author = match.author_name
    previous_commit = match.commit_id
    timestamp = parse_commit_timestamp(match.committed_date)

    if (
        timestamp.state == TimestampState.MISSING
        or (timestamp.state == TimestampState.VALID and current_date is None)
        or (
            timestamp.state == TimestampState.INVALID
            and invalid_date_policy == InvalidDatePolicy.AS_MISSING
        )
    ):
        return ClassificationResult(
            category=Category.NEW_WORK,
            previous_author=previous_author,
            previous_commit=previous_commit,
        )

    if timestamp.state == TimestampState.VALID:
        delta_days = calculate_delta_days(current_date, timestamp.value)
    else:
        # Legacy: NaN fails every comparison below
        delta_days = math.nan

    threshold = DEFAULT_MAX_DELTA_DAYS if max_delta_days is None else max_delta_days

    if previous_author is not None and previous_author == current_author:
        category = Category.CHURN if delta_days <= threshold else Category.REWORK
    else:
        category = Category.HELP_OTHERS

    return ClassificationResult(
        category=category,
        previous_author=previous_author,
        previous_commit=previous_commit,
        delta_days=delta_days,
    )


def classify_added_line(
    added_line: AddedLine,
    blame_ranges: object,
    current_author: str | None,
    current_date: datetime | None,
    max_delta_days: float | None = DEFAULT_MAX_DELTA_DAYS,
    invalid_date_policy: InvalidDatePolicy = InvalidDatePolicy.AS_MISSING,
) -> ClassificationResult:
    """Classify a parsed AddedLine."""
    return classify_line(
        added_line.number,
        added_line.hunk_type,
        blame_ranges,
        current_author,
        current_date,
        max_delta_days,
        invalid_date_policy,
    )


def classify_lines(
    added_lines: Sequence[AddedLine],
    blame_ranges: object,
    current_author: str | None,
    current_date: datetime | None,
    max_delta_days: float | None = DEFAULT_MAX_DELTA_DAYS,
    invalid_date_policy: InvalidDatePolicy = InvalidDatePolicy.AS_MISSING,
) -> list[ClassificationResult]:
    """Classify every added line of a file, preserving emission order."""
    ranges = coerce_blame_ranges(blame_ranges)
    return [
        classify_added_line(
            added_line,
            ranges,
            current_author,
            current_date,
            max_delta_days,
            invalid_date_policy,
        )
        for added_line in added_lines
    ]
