"""Turn raw file-change records into slim or rich file changes."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .hunk_parser import parse_patch
from .models import (
    FileChange,
    GitChangeType,
    RawFileChange,
    RichFileChange,
    SlimFileChange,
)

_STATUS_TYPES = {
    "removed": GitChangeType.DELETE,
    "added": GitChangeType.ADD,
    "renamed": GitChangeType.RENAME,
    "modified": GitChangeType.MODIFY,
}


def get_git_change_type(status: str) -> GitChangeType:
    """Map a code-host status string to a GitChangeType (UNKNOWN if unrecognised)."""
    return _STATUS_TYPES.get(status, GitChangeType.UNKNOWN)


def _is_slim(record: RawFileChange, kind: GitChangeType) -> bool:
    """Return True if *record* has nothing worth parsing.

    Renames and modifications always get a rich change, as do empty added
    files (no patch, zero additions).
    """
    if record.patch:
        return False
    if kind in (GitChangeType.RENAME, GitChangeType.MODIFY):
        return False
    return not (kind is GitChangeType.ADD and record.additions == 0)


def classify_change(
    record: RawFileChange, parent_commit: Optional[str] = None
) -> FileChange:
    kind = get_git_change_type(record.status)
    if _is_slim(record, kind):
        return SlimFileChange(
            kind=kind,
            filename=record.filename,
            previous_filename=record.previous_filename,
            blob_url=record.blob_url,
            parent_commit=parent_commit,
        )
    hunks = tuple(parse_patch(record.patch)) if record.patch else None
    return RichFileChange(
        kind=kind,
        filename=record.filename,
        previous_filename=record.previous_filename,
        blob_url=record.blob_url,
        parent_commit=parent_commit,
        patch=record.patch or "",
        hunks=hunks,
    )


def parse_file_changes(
    records: Iterable[RawFileChange], parent_commit: Optional[str] = None
) -> List[FileChange]:
    """Classify each record, in input order.

    Records are independent of each other; no I/O is performed.
    """
    return [classify_change(record, parent_commit) for record in records]
