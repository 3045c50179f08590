"""Tests for diffhunk.segmenter."""

import dataclasses

import pytest

from diffhunk.hunk_parser import parse_patch
from diffhunk.models import DiffChangeType
from diffhunk.segmenter import HunkSegmenter, split_into_smaller_hunks


def _hunk(patch):
    (hunk,) = parse_patch(patch)
    return hunk


def _raws(hunk):
    return [dl.raw for dl in hunk.lines]


def test_context_shared_between_two_changes_is_duplicated():
    hunk = _hunk("@@ -1,4 +1,4 @@\n a\n-b\n c\n+d\n e\n")
    first, second = split_into_smaller_hunks(hunk)
    assert _raws(first) == [" a", "-b", " c"]
    assert _raws(second) == [" c", "+d", " e"]
    assert first.lines[-1] is second.lines[0]


def test_split_hunk_ranges():
    hunk = _hunk("@@ -1,4 +1,4 @@\n a\n-b\n c\n+d\n e\n")
    first, second = split_into_smaller_hunks(hunk)
    assert (first.old_start, first.old_length) == (1, 3)
    assert (first.new_start, first.new_length) == (1, 2)
    assert (second.old_start, second.old_length) == (3, 2)
    assert (second.new_start, second.new_length) == (2, 3)
    assert first.position_in_hunk == 0
    assert second.position_in_hunk == 0


def test_header_control_line_is_dropped():
    hunk = _hunk("@@ -1,2 +1,2 @@\n a\n-b\n+c\n")
    (piece,) = split_into_smaller_hunks(hunk)
    assert all(dl.kind is not DiffChangeType.CONTROL for dl in piece.lines)
    assert _raws(piece) == [" a", "-b", "+c"]


def test_single_change_region_is_not_split():
    hunk = _hunk("@@ -1,5 +1,5 @@\n a\n b\n-c\n+C\n d\n e\n")
    (piece,) = split_into_smaller_hunks(hunk)
    assert _raws(piece) == [" a", " b", "-c", "+C", " d", " e"]
    assert (piece.old_length, piece.new_length) == (5, 5)


def test_context_only_hunk():
    hunk = _hunk("@@ -1,2 +1,2 @@\n a\n b\n")
    (piece,) = split_into_smaller_hunks(hunk)
    assert _raws(piece) == [" a", " b"]


def test_hunk_starting_with_change_keeps_the_change():
    hunk = _hunk("@@ -1,2 +1,2 @@\n-a\n+A\n b\n")
    (piece,) = split_into_smaller_hunks(hunk)
    assert _raws(piece) == ["-a", "+A", " b"]
    assert piece.old_start == 1


def test_longer_context_run_goes_to_both_pieces():
    hunk = _hunk("@@ -1,5 +1,5 @@\n a\n-b\n+B\n c\n d\n-e\n+E\n")
    first, second = split_into_smaller_hunks(hunk)
    assert _raws(first) == [" a", "-b", "+B", " c", " d"]
    assert _raws(second) == [" c", " d", "-e", "+E"]


def test_every_change_line_appears_exactly_once():
    patch = "@@ -1,7 +1,7 @@\n a\n-b\n+B\n c\n-d\n+D\n e\n-f\n g\n"
    hunk = _hunk(patch)
    pieces = split_into_smaller_hunks(hunk)
    assert len(pieces) == 3
    changes = [
        dl
        for piece in pieces
        for dl in piece.lines
        if dl.kind is not DiffChangeType.CONTEXT
    ]
    expected = [dl for dl in hunk.lines[1:] if dl.kind is not DiffChangeType.CONTEXT]
    assert changes == expected


def test_segmenter_is_lazy():
    hunk = _hunk("@@ -1,4 +1,4 @@\n a\n-b\n c\n+d\n e\n")
    segmenter = HunkSegmenter(hunk)
    first = next(segmenter)
    assert _raws(first) == [" a", "-b", " c"]
    assert len(list(segmenter)) == 1
    assert list(segmenter) == []


def test_pieces_are_frozen_and_independent_of_the_input():
    hunk = _hunk("@@ -1,4 +1,4 @@\n a\n-b\n c\n+d\n e\n")
    first, second = split_into_smaller_hunks(hunk)
    assert isinstance(first.lines, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        second.old_length = 0
    # the source hunk keeps its header and every line
    assert len(hunk.lines) == 6
