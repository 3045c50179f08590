"""Lazy line splitting over a string."""

from typing import Iterator


class LineReader:
    """Forward-only iterator over the lines of *text*.

    Each line is returned without its ``\\n`` terminator and without a single
    ``\\r`` immediately before it.  Empty lines are kept; a trailing newline
    does not produce a final empty line.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._index = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        text = self._text
        start = self._index
        if start >= len(text):
            raise StopIteration
        newline = text.find("\n", start)
        if newline == -1:
            self._index = len(text)
            return text[start:]
        end = newline
        if end > start and text[end - 1] == "\r":
            end -= 1
        self._index = newline + 1
        return text[start:end]
