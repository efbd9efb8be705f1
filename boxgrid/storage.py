from __future__ import annotations

import json
import logging
import os
from typing import List, Optional, Sequence

log = logging.getLogger(__name__)


def default_data_dir() -> str:
    # Repo-local by default (works well for Streamlit Community Cloud too).
    return os.path.join(".", "data")


def resolve_data_dir() -> str:
    return os.environ.get("BOXGRID_DATA", default_data_dir())


def puzzle_path(name: str, data_dir: Optional[str] = None) -> str:
    """Path of a saved puzzle; the name must stay inside the data directory."""
    d = data_dir or resolve_data_dir()
    if not name or name in (".", "..") or "/" in name or "\\" in name or os.sep in name:
        raise ValueError(f"Invalid puzzle name: {name!r}")
    p = os.path.join(d, f"{name}.json")
    root = os.path.abspath(d)
    if os.path.dirname(os.path.abspath(p)) != root:
        raise ValueError(f"Invalid puzzle name: {name!r}")
    return p


def list_saved(data_dir: Optional[str] = None) -> List[str]:
    d = data_dir or resolve_data_dir()
    if not os.path.isdir(d):
        return []
    return sorted(f[:-5] for f in os.listdir(d) if f.endswith(".json"))


def load_values(name: str, data_dir: Optional[str] = None) -> List[int]:
    """A saved puzzle is a flat JSON array of non-negative integers."""
    p = puzzle_path(name, data_dir)
    with open(p, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list) or any(isinstance(v, bool) or not isinstance(v, int) for v in raw):
        raise ValueError(f"{p}: expected a flat array of integers.")
    return raw


def save_values(name: str, values: Sequence[int], data_dir: Optional[str] = None) -> str:
    p = puzzle_path(name, data_dir)
    os.makedirs(os.path.dirname(os.path.abspath(p)), exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump([int(v) for v in values], f)
    log.info("saved %d value(s) to %s", len(values), p)
    return p
