"""Parse the hunks of a unified-diff patch into numbered, typed lines."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .header import HunkHeader, match_hunk_header
from .line_reader import LineReader
from .models import DiffChangeType, DiffLine, Hunk

_PREFIX_TYPES = {
    " ": DiffChangeType.CONTEXT,
    "+": DiffChangeType.ADD,
    "-": DiffChangeType.DELETE,
}


def get_diff_change_type(line: str) -> DiffChangeType:
    """Classify a hunk body line by its leading character."""
    return _PREFIX_TYPES.get(line[:1], DiffChangeType.CONTROL)


def count_carriage_returns(text: str) -> int:
    return text.count("\r")


@dataclass
class _ParseState:
    """Cursors for one pass over a patch."""

    # header fields of the open hunk; its lines are collected separately
    hunk: Optional[Hunk] = None
    lines: List[DiffLine] = field(default_factory=list)
    # -1 until the first header has been seen
    position: int = -1
    old_line: int = -1
    new_line: int = -1


class HunkParser:
    """Iterator over the hunks of *patch*, in header order.

    ``position_in_hunk`` counts every scanned line from the first header on
    and is never reset between hunks.  Lines before the first header and
    malformed headers are ignored; nothing is raised for corrupt input.
    """

    def __init__(self, patch: str) -> None:
        self._lines = LineReader(patch)
        self._state = _ParseState()
        self._exhausted = False

    def __iter__(self) -> Iterator[Hunk]:
        return self

    def __next__(self) -> Hunk:
        state = self._state
        if self._exhausted:
            raise StopIteration
        for line in self._lines:
            done = None
            header = match_hunk_header(line)
            if header is not None:
                done = self._close_hunk()
                self._open_hunk(header, line)
            elif state.hunk is not None:
                self._add_body_line(line)
            if state.position != -1:
                state.position += 1
            if done is not None:
                return done
        self._exhausted = True
        last = self._close_hunk()
        if last is None:
            raise StopIteration
        return last

    def _close_hunk(self) -> Optional[Hunk]:
        state = self._state
        if state.hunk is None:
            return None
        hunk = dataclasses.replace(state.hunk, lines=tuple(state.lines))
        state.hunk, state.lines = None, []
        return hunk

    def _open_hunk(self, header: HunkHeader, line: str) -> None:
        state = self._state
        if state.position == -1:
            state.position = 0
        state.hunk = Hunk(
            old_start=header.old_start,
            old_length=header.old_length,
            new_start=header.new_start,
            new_length=header.new_length,
            position_in_hunk=state.position,
        )
        state.lines.append(
            DiffLine(DiffChangeType.CONTROL, -1, -1, state.position, line)
        )
        state.old_line = header.old_start
        state.new_line = header.new_start

    def _add_body_line(self, line: str) -> None:
        state = self._state
        lines = state.lines
        kind = get_diff_change_type(line)
        if kind is DiffChangeType.CONTROL:
            # "\ No newline at end of file" applies to the line before it.
            if lines:
                lines[-1] = dataclasses.replace(lines[-1], ends_with_line_break=False)
            return
        lines.append(
            DiffLine(
                kind,
                state.old_line if kind is not DiffChangeType.ADD else -1,
                state.new_line if kind is not DiffChangeType.DELETE else -1,
                state.position,
                line,
            )
        )
        # A raw line may carry embedded CRs that stand for extra source lines.
        line_count = 1 + count_carriage_returns(line)
        if kind is not DiffChangeType.ADD:
            state.old_line += line_count
        if kind is not DiffChangeType.DELETE:
            state.new_line += line_count


def parse_patch(patch: str) -> List[Hunk]:
    """Parse every hunk of *patch* into a list."""
    return list(HunkParser(patch))
