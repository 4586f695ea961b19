"""Models for parsed unified-diff patches."""

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class HunkType(str, Enum):
    """Change type assigned to every added line of a hunk."""

    ADD_ONLY = "add-only"
    DELETE_ONLY = "delete-only"
    REPLACE = "replace"


class AddedLine(BaseModel):
    """A single line added by a patch, tagged with its hunk type."""

    model_config = ConfigDict(frozen=True)

    content: str
    number: int  # Position in the new file (0 after an unrecognized header)
    hunk_type: HunkType
    removed_lines: list[str] = Field(default_factory=list)  # Only for REPLACE hunks


class RecognizedHunkHeader(BaseModel):
    """A hunk header matching `@@ -old[,count] +new[,count] @@`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["recognized"] = "recognized"
    old_start: int
    old_count: int | None = None
    new_start: int
    new_count: int | None = None

    @property
    def is_recognized(self) -> bool:
        return True


class UnrecognizedHunkHeader(BaseModel):
    """A line starting with `@@` that does not match the header pattern.

    Line counters fall back to zero, so line numbers emitted after it are
    unreliable.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["unrecognized"] = "unrecognized"
    raw: str

    @property
    def old_start(self) -> int:
        return 0

    @property
    def new_start(self) -> int:
        return 0

    @property
    def is_recognized(self) -> bool:
        return False


HunkHeader = Union[RecognizedHunkHeader, UnrecognizedHunkHeader]
