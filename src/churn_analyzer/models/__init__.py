"""Data models for the churn analyzer."""

from churn_analyzer.models.blame_models import (
    BlameAuthor,
    BlameCommit,
    BlameRange,
    CommitTimestamp,
    TimestampState,
)
from churn_analyzer.models.classification_models import (
    Category,
    ClassificationResult,
    InvalidDatePolicy,
)
from churn_analyzer.models.input_models import ChangeCommit, ChangedFile, ChangeInput
from churn_analyzer.models.patch_models import (
    AddedLine,
    HunkHeader,
    HunkType,
    RecognizedHunkHeader,
    UnrecognizedHunkHeader,
)
from churn_analyzer.models.report_models import (
    AnalysisReport,
    FileAnalysis,
    LineDetail,
    empty_summary,
)

__all__ = [
    "AddedLine",
    "AnalysisReport",
    "BlameAuthor",
    "BlameCommit",
    "BlameRange",
    "Category",
    "ChangeCommit",
    "ChangeInput",
    "ChangedFile",
    "ClassificationResult",
    "CommitTimestamp",
    "FileAnalysis",
    "HunkHeader",
    "HunkType",
    "InvalidDatePolicy",
    "LineDetail",
    "RecognizedHunkHeader",
    "TimestampState",
    "UnrecognizedHunkHeader",
    "empty_summary",
]
