"""Models for the already-fetched data describing one change under review."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChangedFile(BaseModel):
    """One file touched by the change, with its patch and base-revision blame."""

    model_config = ConfigDict(frozen=False, extra="ignore")

    filename: str
    patch: str | None = None  # None for binary files
    blame: Any = None  # Raw blame ranges; coerced leniently at analysis time


class ChangeCommit(BaseModel):
    """A commit belonging to the change (listed oldest to newest)."""

    model_config = ConfigDict(frozen=False, extra="ignore")

    sha: str
    author: str | None = None
    date: datetime | None = None
    files: list[str] = Field(default_factory=list)


class ChangeInput(BaseModel):
    """Complete input for analyzing one change."""

    model_config = ConfigDict(frozen=False, extra="ignore")

    repo: str | None = None           # "owner/name"
    number: int | None = None         # Pull request number
    author: str | None = None         # Fallback author for every file
    date: datetime | None = None      # Fallback timestamp for every file
    excluded_commits: list[str] = Field(default_factory=list)
    commits: list[ChangeCommit] = Field(default_factory=list)
    files: list[ChangedFile] = Field(default_factory=list)
