"""Unified-diff patch parsing and hunk classification.

Parses the patch text of a single file into the lines it adds, each tagged
with the change type of the hunk it belongs to. Malformed input never
raises: an unrecognized hunk header resets both line counters to zero and
parsing carries on.
"""

import logging
import re

from churn_analyzer.models.patch_models import (
    AddedLine,
    HunkHeader,
    HunkType,
    RecognizedHunkHeader,
    UnrecognizedHunkHeader,
)

logger = logging.getLogger(__name__)

_HUNK_HEADER_RE = re.compile(
    r"^@@ -(?P<old_start>\d+)(?:,(?P<old_count>\d+))?"
    r" \+(?P<new_start>\d+)(?:,(?P<new_count>\d+))?"
    r" @@"
)
_BLANK_RE = re.compile(r"^\s*$")


class _HunkBuffer:
    """Added and removed lines of the hunk currently being read."""

    def __init__(self) -> None:
        self.removed: list[tuple[int, str]] = []  # (old line number, content)
        self.added: list[tuple[int, str]] = []    # (new line number, content)

    def is_empty(self) -> bool:
        return not self.added and not self.removed


def is_blank_line(content: str) -> bool:
    """Return True for empty or whitespace-only content."""
    return bool(_BLANK_RE.match(content))


def parse_hunk_header(line: str) -> HunkHeader:
    """Parse a `@@ -a,b +c,d @@` header.

    Returns an UnrecognizedHunkHeader (whose starts are both 0) when the
    line does not match the expected pattern.
    """
    match = _HUNK_HEADER_RE.match(line)
    if not match:
        return UnrecognizedHunkHeader(raw=line)

    old_count = match.group("old_count")
    new_count = match.group("new_count")
    return RecognizedHunkHeader(
        old_start=int(match.group("old_start")),
        old_count=int(old_count) if old_count is not None else None,
        new_start=int(match.group("new_start")),
        new_count=int(new_count) if new_count is not None else None,
    )


def determine_hunk_type(
    non_blank_removed: int,
    non_blank_added: int,
    raw_added: int,
) -> HunkType:
    """Decide a hunk's type from its non-blank removed/added line counts.

    A hunk made only of blank lines is add-only if it adds anything at all,
    otherwise delete-only.
    """
    if non_blank_removed == 0 and non_blank_added > 0:
        return HunkType.ADD_ONLY
    if non_blank_removed > 0 and non_blank_added == 0:
        return HunkType.DELETE_ONLY
    if non_blank_removed > 0 and non_blank_added > 0:
        return HunkType.REPLACE
    return HunkType.ADD_ONLY if raw_added > 0 else HunkType.DELETE_ONLY


def _finalize_hunk(hunk: _HunkBuffer, output: list[AddedLine]) -> _HunkBuffer:
    """Emit the buffered hunk's added lines into output and return a fresh buffer."""
    if hunk.is_empty():
        return _HunkBuffer()

    non_blank_removed = sum(1 for _, content in hunk.removed if not is_blank_line(content))
    non_blank_added = sum(1 for _, content in hunk.added if not is_blank_line(content))
    hunk_type = determine_hunk_type(non_blank_removed, non_blank_added, len(hunk.added))

    removed_lines = (
        [content for _, content in hunk.removed] if hunk_type == HunkType.REPLACE else []
    )
    for number, content in hunk.added:
        output.append(
            AddedLine(
                content=content,
                number=number,
                hunk_type=hunk_type,
                removed_lines=removed_lines,
            )
        )

    return _HunkBuffer()


def parse_patch(patch: str | None) -> list[AddedLine]:
    """Parse one file's unified diff into its added lines.

    Args:
        patch: Patch text for a single file. Optional `---`/`+++` file
            headers may precede the first hunk.

    Returns:
        AddedLine records in file order, blank lines included. Empty list
        for empty or missing input.
    """
    added_lines: list[AddedLine] = []
    if not patch:
        return added_lines

    old_line = 0
    new_line = 0
    seen_header = False
    hunk = _HunkBuffer()

    for line in patch.split("\n"):
        if line.startswith("@@"):
            hunk = _finalize_hunk(hunk, added_lines)
            header = parse_hunk_header(line)
            if not header.is_recognized:
                logger.warning("Unrecognized hunk header %r; line numbers reset to 0", line)
            old_line = header.old_start
            new_line = header.new_start
            seen_header = True
        elif not seen_header and (line.startswith("+++") or line.startswith("---")):
            # File header, not part of any hunk
            continue
        elif line.startswith("+"):
            hunk.added.append((new_line, line[1:]))
            new_line += 1
        elif line.startswith("-"):
            hunk.removed.append((old_line, line[1:]))
            old_line += 1
        elif line.startswith("\\"):
            # e.g. "\ No newline at end of file"
            continue
        else:
            # Context line (or a bare empty line)
            if not hunk.is_empty():
                hunk = _finalize_hunk(hunk, added_lines)
            old_line += 1
            new_line += 1

    _finalize_hunk(hunk, added_lines)
    return added_lines


def count_hunk_types(added_lines: list[AddedLine]) -> dict[HunkType, int]:
    """Count added lines per hunk type."""
    counts: dict[HunkType, int] = {}
    for added in added_lines:
        counts[added.hunk_type] = counts.get(added.hunk_type, 0) + 1
    return counts
