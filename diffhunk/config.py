"""Load diffhunk configuration from pyproject.toml and optional .diffhunk.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class DiffhunkConfig:
    """Runtime configuration for the diffhunk CLI."""

    # Print the minimal hunks (context-split) under each changed file
    split_hunks: bool = False
    # Include changes that carry no patch (e.g. binary or removed files)
    show_slim: bool = True
    # fnmatch patterns; matching file paths are skipped entirely
    ignore_paths: List[str] = field(default_factory=list)
    # Blob URL for records built from a local diff.  "{path}" is replaced with
    # the file path, e.g. "https://github.com/o/r/blob/main/{path}".
    # Empty means records carry no blob URL.
    blob_url_template: str = ""


def _read_toml(path: Path) -> dict:
    """Read a TOML file; return empty dict if missing or unparseable."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except Exception:
        return {}


def _apply(cfg: DiffhunkConfig, d: dict) -> None:
    """Overlay dict values onto cfg, ignoring unknown keys and mistyped values.

    A bare string for ``ignore_paths`` is taken as a single pattern.
    """
    valid = set(cfg.__dataclass_fields__)
    for key, val in d.items():
        if key not in valid:
            continue
        if key == "ignore_paths" and isinstance(val, str):
            val = [val]
        if not isinstance(val, type(getattr(cfg, key))):
            continue
        if key == "ignore_paths":
            val = [str(pattern) for pattern in val]
        setattr(cfg, key, val)


def load_config(project_root: Optional[Path] = None) -> DiffhunkConfig:
    """Load config from pyproject.toml [tool.diffhunk], then .diffhunk.toml."""
    if project_root is None:
        project_root = Path.cwd()
    cfg = DiffhunkConfig()
    pyproject = _read_toml(project_root / "pyproject.toml")
    _apply(cfg, pyproject.get("tool", {}).get("diffhunk", {}))
    local = _read_toml(project_root / ".diffhunk.toml")
    _apply(cfg, local)
    return cfg
