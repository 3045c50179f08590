"""Load raw file-change records from a GitHub payload or a multi-file diff."""

from __future__ import annotations

import json
from typing import Any, List, Optional

from unidiff import PatchedFile, PatchSet
from unidiff.errors import UnidiffParseError

from .errors import DiffhunkInputError
from .models import RawFileChange

_DEV_NULL = "/dev/null"


# ---------------------------------------------------------------------------
# GitHub pull-request files payload
# ---------------------------------------------------------------------------


def _record_from_json(entry: Any, index: int) -> RawFileChange:
    if not isinstance(entry, dict):
        raise DiffhunkInputError(f"record {index} is not an object")
    missing = [key for key in ("status", "filename") if key not in entry]
    if missing:
        raise DiffhunkInputError(
            f"record {index} is missing {', '.join(missing)}"
        )
    try:
        additions = int(entry.get("additions") or 0)
        deletions = int(entry.get("deletions") or 0)
    except (TypeError, ValueError) as exc:
        raise DiffhunkInputError(f"record {index} has a bad line count: {exc}") from exc
    return RawFileChange(
        status=str(entry["status"]),
        filename=str(entry["filename"]),
        additions=additions,
        deletions=deletions,
        patch=entry.get("patch"),
        previous_filename=entry.get("previous_filename"),
        blob_url=entry.get("blob_url"),
    )


def load_records(payload: str) -> List[RawFileChange]:
    """Parse a JSON array of file records as returned by the GitHub PR files API."""
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise DiffhunkInputError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise DiffhunkInputError("expected a JSON array of file records")
    return [_record_from_json(entry, i) for i, entry in enumerate(data)]


# ---------------------------------------------------------------------------
# git diff
# ---------------------------------------------------------------------------


def _strip_prefix(name: str, prefix: str) -> str:
    return name[len(prefix) :] if name.startswith(prefix) else name


def _status(patched_file: PatchedFile) -> str:
    if patched_file.is_added_file:
        return "added"
    if patched_file.is_removed_file:
        return "removed"
    if patched_file.is_rename:
        return "renamed"
    return "modified"


def _record_from_patched_file(
    patched_file: PatchedFile, blob_url_template: str
) -> RawFileChange:
    source = _strip_prefix(patched_file.source_file, "a/")
    target = _strip_prefix(patched_file.target_file, "b/")
    status = _status(patched_file)
    filename = source if status == "removed" or target == _DEV_NULL else target
    previous: Optional[str] = source if status == "renamed" else None

    patch: Optional[str] = None
    if not patched_file.is_binary_file and len(patched_file):
        # GitHub's "patch" field: the hunks only, without file headers.
        patch = "".join(str(hunk) for hunk in patched_file)

    blob_url = blob_url_template.format(path=filename) if blob_url_template else None
    return RawFileChange(
        status=status,
        filename=filename,
        additions=patched_file.added,
        deletions=patched_file.removed,
        patch=patch,
        previous_filename=previous,
        blob_url=blob_url,
    )


def records_from_diff(
    diff_text: str, blob_url_template: str = ""
) -> List[RawFileChange]:
    """Parse a multi-file unified diff into one record per patched file.

    *blob_url_template* may contain a ``{path}`` placeholder; when empty the
    records carry no blob URL.
    """
    try:
        patch = PatchSet.from_string(diff_text)
    except UnidiffParseError as exc:
        raise DiffhunkInputError(f"unparseable diff: {exc}") from exc
    return [_record_from_patched_file(pf, blob_url_template) for pf in patch]
