"""Report models for per-file and per-change analysis."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from churn_analyzer.models.classification_models import Category
from churn_analyzer.models.patch_models import HunkType


def empty_summary() -> dict[Category, int]:
    """Return a summary with every category present and zeroed."""
    return {category: 0 for category in Category}


class LineDetail(BaseModel):
    """Audit record for one classified line."""

    model_config = ConfigDict(frozen=False)

    file: str
    line: int
    content: str
    hunk_type: HunkType
    category: Category
    current_author: str | None = None
    previous_author: str | None = None
    previous_commit: str | None = None
    delta_days: float | None = None


class FileAnalysis(BaseModel):
    model_config = ConfigDict(frozen=False)

    filename: str
    skipped: bool = False               # True when the file had no patch
    added_line_count: int = 0
    hunk_type_counts: dict[HunkType, int] = Field(default_factory=dict)
    filtered_blame_count: int = 0       # Ranges dropped for pointing at the change's own commits
    summary: dict[Category, int] = Field(default_factory=empty_summary)
    details: list[LineDetail] = Field(default_factory=list)


class AnalysisReport(BaseModel):
    model_config = ConfigDict(frozen=False)

    repo: str | None = None
    number: int | None = None
    max_delta_days: float
    summary: dict[Category, int] = Field(default_factory=empty_summary)
    files: list[FileAnalysis] = Field(default_factory=list)
    details: list[LineDetail] = Field(default_factory=list)
    analysed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total_lines(self) -> int:
        return sum(self.summary.values())
