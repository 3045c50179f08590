"""Rebuild a file's new content from its original content and a patch."""

import re
from typing import List

from .hunk_parser import parse_patch
from .models import DiffChangeType, Hunk

_LINE_BREAK = re.compile(r"\r?\n")


def _ends_with_line_break(hunk: Hunk) -> bool:
    """Return the line-break flag of the last line of *hunk* that is not a delete."""
    for line in reversed(hunk.lines):
        if line.kind is not DiffChangeType.DELETE:
            return line.ends_with_line_break
    return True


def get_modified_content(original_content: str, patch: str) -> str:
    """Apply the hunks of *patch* to *original_content* and return the result.

    Lines outside every hunk are copied from the original.  Whether the result
    ends with a newline follows the "no newline at end of file" marker of the
    last hunk.  A patch without hunks returns *original_content* unchanged.
    """
    hunks = parse_patch(patch)
    if not hunks:
        return original_content

    left = _LINE_BREAK.split(original_content)
    right: List[str] = []
    last_common_line = 0

    for hunk in hunks:
        if hunk.old_length == 0:
            # Pure insertion: the new lines go after line old_start.
            start = max(hunk.old_start, last_common_line)
            right.extend(left[last_common_line:start])
            last_common_line = start
        else:
            start = max(hunk.old_start - 1, last_common_line)
            right.extend(left[last_common_line:start])
            last_common_line = hunk.old_start + hunk.old_length - 1
        for line in hunk.lines:
            if line.kind in (DiffChangeType.ADD, DiffChangeType.CONTEXT):
                right.append(line.text)

    if _ends_with_line_break(hunks[-1]):
        if last_common_line < len(left):
            right.extend(left[last_common_line:])
        else:
            # the patch ran to the end of the file; keep its trailing newline
            right.append("")

    return "\n".join(right)
