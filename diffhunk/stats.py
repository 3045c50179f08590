"""Cumulative statistics for a single diffhunk run."""

from dataclasses import dataclass
from typing import List

from .models import DiffChangeType, FileChange, GitChangeType, RichFileChange


@dataclass
class RunStats:
    """Holds cumulative counts for a single diffhunk run."""

    # File counts by change kind
    added: int = 0
    removed: int = 0
    renamed: int = 0
    modified: int = 0
    unknown: int = 0

    # Representation counts
    slim_changes: int = 0
    rich_changes: int = 0

    # Hunk and line tracking
    hunks: int = 0
    lines_added: int = 0
    lines_deleted: int = 0

    def merge(self, other: "RunStats") -> None:
        """Add all counters from *other* into self."""
        self.added += other.added
        self.removed += other.removed
        self.renamed += other.renamed
        self.modified += other.modified
        self.unknown += other.unknown
        self.slim_changes += other.slim_changes
        self.rich_changes += other.rich_changes
        self.hunks += other.hunks
        self.lines_added += other.lines_added
        self.lines_deleted += other.lines_deleted

    @property
    def total_files(self) -> int:
        return self.added + self.removed + self.renamed + self.modified + self.unknown

    def record(self, change: FileChange) -> None:
        """Count one classified file change."""
        if change.kind is GitChangeType.ADD:
            self.added += 1
        elif change.kind is GitChangeType.DELETE:
            self.removed += 1
        elif change.kind is GitChangeType.RENAME:
            self.renamed += 1
        elif change.kind is GitChangeType.MODIFY:
            self.modified += 1
        else:
            self.unknown += 1

        if not isinstance(change, RichFileChange):
            self.slim_changes += 1
            return
        self.rich_changes += 1
        for hunk in change.hunks or ():
            self.hunks += 1
            for line in hunk.lines:
                if line.kind is DiffChangeType.ADD:
                    self.lines_added += 1
                elif line.kind is DiffChangeType.DELETE:
                    self.lines_deleted += 1

    def format_summary(self) -> List[str]:
        """Return a list of lines forming the human-readable run summary."""
        lines = ["--- diffhunk summary ---"]
        lines.append("files:")
        lines.append(f"  added:     {self.added}")
        lines.append(f"  removed:   {self.removed}")
        lines.append(f"  renamed:   {self.renamed}")
        lines.append(f"  modified:  {self.modified}")
        lines.append(f"  unknown:   {self.unknown}")
        lines.append(f"  total:     {self.total_files}")
        lines.append(f"with patch: {self.rich_changes}, without: {self.slim_changes}")
        lines.append(f"hunks: {self.hunks}")
        lines.append(f"lines: +{self.lines_added} -{self.lines_deleted}")
        return lines
