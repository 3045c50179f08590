"""Recognise and decode unified-diff hunk headers."""

import re
from typing import NamedTuple, Optional

# Counts are optional: a single-line range omits the ",<count>" part.
DIFF_HUNK_HEADER = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@", re.ASCII)


class HunkHeader(NamedTuple):
    old_start: int
    old_length: int
    new_start: int
    new_length: int


def _count(group: Optional[str]) -> int:
    # An explicit ",0" stays 0 (an empty range, e.g. a pure insertion); only an
    # omitted count means 1.
    return 1 if group is None else int(group)


def match_hunk_header(line: str) -> Optional[HunkHeader]:
    """Return the decoded header for *line*, or None if it is not a hunk header.

    Anything after the closing ``@@`` (the section heading) is ignored.
    """
    m = DIFF_HUNK_HEADER.match(line)
    if m is None:
        return None
    try:
        return HunkHeader(
            old_start=int(m.group(1)),
            old_length=_count(m.group(2)),
            new_start=int(m.group(3)),
            new_length=_count(m.group(4)),
        )
    except ValueError:
        return None
