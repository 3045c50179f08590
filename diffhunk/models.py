"""Data types shared by the parser, segmenter and classifier."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class DiffChangeType(Enum):
    """Kind of a single line inside a hunk."""

    CONTEXT = "context"
    ADD = "add"
    DELETE = "delete"
    CONTROL = "control"  # hunk header or "\ No newline at end of file"


class GitChangeType(Enum):
    """Kind of change applied to a whole file."""

    DELETE = "delete"
    ADD = "add"
    RENAME = "rename"
    MODIFY = "modify"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class DiffLine:
    """One line of a hunk, numbered against both sides of the diff.

    Line numbers are 1-based; ``old_line_number`` is -1 for additions and
    ``new_line_number`` is -1 for deletions.
    """

    kind: DiffChangeType
    old_line_number: int
    new_line_number: int
    position_in_hunk: int
    raw: str  # includes the one-character prefix
    ends_with_line_break: bool = True

    @property
    def text(self) -> str:
        return self.raw[1:]


@dataclass(frozen=True)
class Hunk:
    """A contiguous region of a unified diff."""

    old_start: int
    old_length: int
    new_start: int
    new_length: int
    position_in_hunk: int
    lines: Tuple[DiffLine, ...] = ()

    @property
    def header(self) -> str:
        return (
            f"@@ -{self.old_start},{self.old_length} "
            f"+{self.new_start},{self.new_length} @@"
        )


@dataclass(frozen=True)
class RawFileChange:
    """A file-change record as delivered by a code host."""

    status: str
    filename: str
    additions: int = 0
    deletions: int = 0
    patch: Optional[str] = None
    previous_filename: Optional[str] = None
    blob_url: Optional[str] = None


@dataclass(frozen=True)
class FileChange:
    """Fields common to every file-change representation."""

    kind: GitChangeType
    filename: str
    previous_filename: Optional[str] = None
    blob_url: Optional[str] = None
    parent_commit: Optional[str] = None


@dataclass(frozen=True)
class SlimFileChange(FileChange):
    """A change known only by its metadata; there is no patch to show."""


@dataclass(frozen=True)
class RichFileChange(FileChange):
    """A change carrying its patch text and the hunks parsed from it."""

    patch: str = ""
    hunks: Optional[Tuple[Hunk, ...]] = None
