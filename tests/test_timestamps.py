"""Tests for three-state commit timestamp parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from churn_analyzer.models import TimestampState
from churn_analyzer.utils.timestamps import ensure_aware, parse_commit_timestamp


class TestParseCommitTimestamp:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing(self, value):
        parsed = parse_commit_timestamp(value)
        assert parsed.state == TimestampState.MISSING
        assert parsed.value is None

    @pytest.mark.parametrize("value", ["not-a-date", "2024-13-45", "yesterday", 12345, ["2024"]])
    def test_invalid(self, value):
        parsed = parse_commit_timestamp(value)
        assert parsed.state == TimestampState.INVALID
        assert parsed.value is None

    def test_zulu_suffix(self):
        parsed = parse_commit_timestamp("2024-11-25T10:30:00Z")
        assert parsed.state == TimestampState.VALID
        assert parsed.value == datetime(2024, 11, 25, 10, 30, tzinfo=timezone.utc)

    def test_explicit_offset(self):
        parsed = parse_commit_timestamp("2024-11-25T10:30:00+02:00")
        assert parsed.state == TimestampState.VALID
        assert parsed.value.utcoffset() == timedelta(hours=2)

    def test_date_only_is_midnight_utc(self):
        parsed = parse_commit_timestamp("2024-11-25")
        assert parsed.value == datetime(2024, 11, 25, tzinfo=timezone.utc)

    def test_rfc_2822(self):
        parsed = parse_commit_timestamp("Sat, 30 Nov 2024 00:00:00 GMT")
        assert parsed.state == TimestampState.VALID
        assert parsed.value == datetime(2024, 11, 30, tzinfo=timezone.utc)

    def test_rfc_2822_with_offset(self):
        parsed = parse_commit_timestamp("Sat, 30 Nov 2024 10:00:00 +0200")
        assert parsed.value == datetime(2024, 11, 30, 8, tzinfo=timezone.utc)

    def test_datetime_passthrough(self):
        value = datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
        parsed = parse_commit_timestamp(value)
        assert parsed.state == TimestampState.VALID
        assert parsed.value == value

    def test_naive_datetime_becomes_utc(self):
        parsed = parse_commit_timestamp(datetime(2024, 1, 1, 12))
        assert parsed.value.tzinfo == timezone.utc


class TestEnsureAware:
    def test_naive(self):
        assert ensure_aware(datetime(2024, 1, 1)).tzinfo == timezone.utc

    def test_aware_unchanged(self):
        tz = timezone(timedelta(hours=-5))
        value = datetime(2024, 1, 1, tzinfo=tz)
        assert ensure_aware(value) is value
