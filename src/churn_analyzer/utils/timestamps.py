"""Timestamp parsing helpers."""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from churn_analyzer.models.blame_models import CommitTimestamp


def ensure_aware(value: datetime) -> datetime:
    """Return value with UTC attached if it carries no timezone."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_commit_timestamp(value: object) -> CommitTimestamp:
    """Parse a blame commit date into a three-state timestamp.

    None and empty strings are MISSING. datetimes, ISO-8601 strings (a
    trailing "Z" included) and RFC 2822 strings such as
    "Sat, 30 Nov 2024 00:00:00 GMT" are VALID. Anything else is INVALID.
    """
    if value is None:
        return CommitTimestamp.missing()

    if isinstance(value, datetime):
        return CommitTimestamp.valid(ensure_aware(value))

    if not isinstance(value, str):
        return CommitTimestamp.invalid()

    text = value.strip()
    if not text:
        return CommitTimestamp.missing()

    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return CommitTimestamp.valid(ensure_aware(datetime.fromisoformat(iso_text)))
    except ValueError:
        pass

    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError):
        return CommitTimestamp.invalid()
    return CommitTimestamp.valid(ensure_aware(parsed))
