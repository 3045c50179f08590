"""Split a hunk into the minimal hunks separable by context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .models import DiffChangeType, DiffLine, Hunk


@dataclass
class _Piece:
    """An output hunk still being filled, anchored at its first line."""

    old_start: int
    new_start: int
    old_length: int = 0
    new_length: int = 0
    lines: List[DiffLine] = field(default_factory=list)

    @classmethod
    def starting_at(cls, line: DiffLine) -> "_Piece":
        return cls(old_start=line.old_line_number, new_start=line.new_line_number)

    def add(self, line: DiffLine) -> None:
        self.lines.append(line)
        if line.kind is not DiffChangeType.ADD:
            self.old_length += 1
        if line.kind is not DiffChangeType.DELETE:
            self.new_length += 1

    def has_sandwiched_changes(self) -> bool:
        """Return True if the piece holds a change and currently ends on context."""
        return (
            any(line.kind is not DiffChangeType.CONTEXT for line in self.lines)
            and self.lines[-1].kind is DiffChangeType.CONTEXT
        )

    def freeze(self) -> Hunk:
        return Hunk(
            old_start=self.old_start,
            old_length=self.old_length,
            new_start=self.new_start,
            new_length=self.new_length,
            position_in_hunk=0,
            lines=tuple(self.lines),
        )


class HunkSegmenter:
    """Iterator over the smaller hunks making up *hunk*.

    A context line that closes one change region and opens the next is
    duplicated into both output hunks.  Header and other control lines are
    dropped, and ``position_in_hunk`` is not preserved.
    """

    def __init__(self, hunk: Hunk) -> None:
        self._lines = iter(hunk.lines)
        self._current: Optional[_Piece] = None
        self._next: Optional[_Piece] = None

    def __iter__(self) -> Iterator[Hunk]:
        return self

    def __next__(self) -> Hunk:
        for line in self._lines:
            if line.kind is DiffChangeType.CONTEXT:
                self._add_context(line)
            elif line.kind is not DiffChangeType.CONTROL:
                done = self._add_change(line)
                if done is not None:
                    return done
        current, self._current = self._current, None
        if current is None or not current.lines:
            raise StopIteration
        return current.freeze()

    def _add_context(self, line: DiffLine) -> None:
        if self._current is None:
            self._current = _Piece.starting_at(line)
        self._current.add(line)
        if self._current.has_sandwiched_changes():
            if self._next is None:
                self._next = _Piece.starting_at(line)
            self._next.add(line)

    def _add_change(self, line: DiffLine) -> Optional[Hunk]:
        done = None
        if self._current is not None and self._current.has_sandwiched_changes():
            done = self._current.freeze()
            self._current, self._next = self._next, None
        if self._current is None:
            self._current = _Piece.starting_at(line)
        self._current.add(line)
        return done


def split_into_smaller_hunks(hunk: Hunk) -> List[Hunk]:
    """Return the minimal hunks of *hunk*, duplicating shared context."""
    return list(HunkSegmenter(hunk))
