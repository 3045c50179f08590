"""CLI entry point: reads change records or a diff on stdin, reports to stdout."""

import sys
from fnmatch import fnmatch
from typing import List

from .classifier import parse_file_changes
from .config import DiffhunkConfig, load_config
from .errors import DiffhunkInputError
from .models import (
    DiffChangeType,
    FileChange,
    GitChangeType,
    RawFileChange,
    RichFileChange,
)
from .records import load_records, records_from_diff
from .segmenter import split_into_smaller_hunks
from .stats import RunStats

_KIND_LETTER = {
    GitChangeType.ADD: "A",
    GitChangeType.DELETE: "D",
    GitChangeType.RENAME: "R",
    GitChangeType.MODIFY: "M",
    GitChangeType.UNKNOWN: "?",
}


def _read_records(text: str, config: DiffhunkConfig) -> List[RawFileChange]:
    """Read a GitHub JSON payload if *text* looks like one, else a git diff."""
    if text.lstrip().startswith("["):
        records = load_records(text)
    else:
        records = records_from_diff(text, config.blob_url_template)
    return [
        r
        for r in records
        if not any(fnmatch(r.filename, pattern) for pattern in config.ignore_paths)
    ]


def format_change(change: FileChange, split_hunks: bool = False) -> List[str]:
    """Return the output lines describing one file change."""
    path = change.filename
    if change.previous_filename and change.previous_filename != path:
        path = f"{change.previous_filename} -> {path}"
    line = f"{_KIND_LETTER[change.kind]} {path}"
    if not isinstance(change, RichFileChange) or change.hunks is None:
        return [line]

    hunks = change.hunks
    kinds = [dl.kind for h in hunks for dl in h.lines]
    added = kinds.count(DiffChangeType.ADD)
    deleted = kinds.count(DiffChangeType.DELETE)
    lines = [f"{line} ({len(hunks)} hunks, +{added} -{deleted})"]
    if split_hunks:
        for hunk in hunks:
            for piece in split_into_smaller_hunks(hunk):
                lines.append(f"    {piece.header}")
    return lines


def main() -> None:
    text = sys.stdin.read()
    if not text.strip():
        print("diffhunk: no diff provided on stdin", file=sys.stderr)
        sys.exit(1)

    config = load_config()
    try:
        records = _read_records(text, config)
    except DiffhunkInputError as exc:
        print(f"diffhunk: {exc}", file=sys.stderr)
        sys.exit(1)

    run_stats = RunStats()
    for change in parse_file_changes(records):
        run_stats.record(change)
        if not config.show_slim and not isinstance(change, RichFileChange):
            continue
        for line in format_change(change, split_hunks=config.split_hunks):
            print(line)
    for line in run_stats.format_summary():
        print(line)
