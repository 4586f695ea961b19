"""Models for line classification results."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Category(str, Enum):
    """Work category attributed to an added line."""

    NEW_WORK = "New Work"
    CHURN = "Churn"
    REWORK = "Rework"
    HELP_OTHERS = "Help Others"


class InvalidDatePolicy(str, Enum):
    """How a present-but-unparseable blame timestamp is treated.

    AS_MISSING routes it like a missing timestamp (New Work). LEGACY keeps
    the historical behavior: delta_days becomes NaN, so a same-author line
    lands in Rework and a different-author line in Help Others.
    """

    AS_MISSING = "as-missing"
    LEGACY = "legacy"


class ClassificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: Category
    previous_author: str | None = None
    previous_commit: str | None = None
    delta_days: float | None = None  # Signed; negative if the blame commit is newer

    @property
    def has_evidence(self) -> bool:
        return self.previous_commit is not None
