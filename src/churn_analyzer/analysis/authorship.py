"""Resolve the author and timestamp attributed to each changed file."""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from churn_analyzer.models.blame_models import BlameRange
from churn_analyzer.models.input_models import ChangeCommit

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "unknown"


class FileAuthorship(BaseModel):
    """Last commit of the change touching a file."""

    model_config = ConfigDict(frozen=True)

    author: str
    date: datetime | None = None
    sha: str | None = None


def resolve_file_authorship(
    commits: Sequence[ChangeCommit],
    fallback_author: str | None = None,
    fallback_date: datetime | None = None,
) -> dict[str, FileAuthorship]:
    """Map each touched filename to the newest commit that touched it.

    Args:
        commits: The change's commits, oldest to newest.
        fallback_author: Used when a commit has no author.
        fallback_date: Used when a commit has no date.

    Returns:
        Dict of filename -> FileAuthorship.
    """
    last_commit_by_file: dict[str, FileAuthorship] = {}

    for commit in reversed(commits):
        author = commit.author or fallback_author or UNKNOWN_AUTHOR
        date = commit.date or fallback_date
        for filename in commit.files:
            if filename not in last_commit_by_file:
                last_commit_by_file[filename] = FileAuthorship(
                    author=author, date=date, sha=commit.sha
                )

    logger.info("Found last commit info for %d files touched by the change", len(last_commit_by_file))
    return last_commit_by_file


def filter_blame_ranges(
    ranges: Iterable[BlameRange],
    excluded_commits: Iterable[str],
) -> tuple[list[BlameRange], int]:
    """Drop blame ranges pointing at commits of the change under review.

    Returns:
        Tuple of (kept ranges, number of ranges filtered out).
    """
    excluded = set(excluded_commits)
    kept: list[BlameRange] = []
    filtered = 0
    for blame_range in ranges:
        if blame_range.commit_id is not None and blame_range.commit_id in excluded:
            filtered += 1
            continue
        kept.append(blame_range)
    return kept, filtered
