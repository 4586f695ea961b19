"""Models for historical line-authorship (blame) data.

Blame ranges come straight from a blame query, so every field may be
absent or null at any depth. Field aliases accept the query's camelCase
keys; snake_case names are accepted as well.

Validation is lenient: a present field of an unexpected type is coerced
(or set to None) instead of rejecting the whole range, and the commit
date is kept raw so timestamp parsing decides whether it is invalid.
"""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator


def _optional_str(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return str(value)


LenientStr = Annotated[str | None, BeforeValidator(_optional_str)]


class BlameAuthor(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: LenientStr = None
    email: LenientStr = None


class BlameCommit(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    oid: LenientStr = None
    committed_date: Any = Field(default=None, alias="committedDate")  # Raw; see parse_commit_timestamp
    author: BlameAuthor | None = None

    @field_validator("author", mode="before")
    @classmethod
    def _drop_malformed_author(cls, value: Any) -> Any:
        if isinstance(value, (BlameAuthor, Mapping)):
            return value
        return None


class BlameRange(BaseModel):
    """Inclusive span of historical lines attributed to one commit."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    starting_line: int | None = Field(default=None, alias="startingLine")
    ending_line: int | None = Field(default=None, alias="endingLine")
    commit: BlameCommit | None = None

    @field_validator("commit", mode="before")
    @classmethod
    def _drop_malformed_commit(cls, value: Any) -> Any:
        if isinstance(value, (BlameCommit, Mapping)):
            return value
        return None

    def covers(self, line_number: int) -> bool:
        """Return True if line_number lies within the range, both ends inclusive."""
        if self.starting_line is None or self.ending_line is None:
            return False
        return self.starting_line <= line_number <= self.ending_line

    @property
    def commit_id(self) -> str | None:
        if self.commit is None:
            return None
        return self.commit.oid or None

    @property
    def author_name(self) -> str | None:
        if self.commit is None or self.commit.author is None:
            return None
        return self.commit.author.name or None

    @property
    def committed_date(self) -> Any:
        if self.commit is None:
            return None
        return self.commit.committed_date


class TimestampState(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    MISSING = "missing"


class CommitTimestamp(BaseModel):
    """Three-state commit timestamp: Valid(date) | Invalid | Missing."""

    model_config = ConfigDict(frozen=True)

    state: TimestampState
    value: datetime | None = None  # Timezone-aware, set only when VALID

    @classmethod
    def valid(cls, value: datetime) -> "CommitTimestamp":
        return cls(state=TimestampState.VALID, value=value)

    @classmethod
    def invalid(cls) -> "CommitTimestamp":
        return cls(state=TimestampState.INVALID)

    @classmethod
    def missing(cls) -> "CommitTimestamp":
        return cls(state=TimestampState.MISSING)
