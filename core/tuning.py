"""core/tuning.py — Gameplay numbers read from ``data/tuning.toml``.

Speeds, cone sizes, guard count and the touch dead zone are looked up
by table and key, each call site carrying the built-in fallback from
``core.constants``::

    fov = tuning.get("enemy.vision", "fov_degrees", FOV_DEGREES)

A missing file leaves every fallback in force.  F5 in the stealth
scene calls ``reload()``; guards spawned afterwards pick up the new
values.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib                # pip install tomli


DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "tuning.toml"

_data: dict = {}
_path: Path | None = None


def load(path: str | Path | None = None) -> None:
    """Read *path* (default ``DEFAULT_PATH``), replacing loaded values."""
    global _data, _path

    _path = DEFAULT_PATH if path is None else Path(path)
    if not _path.exists():
        print(f"[TUNING] {_path} not found, using defaults")
        _data = {}
        return

    with open(_path, "rb") as f:
        _data = tomllib.load(f)
    print(f"[TUNING] Loaded {_count_leaves(_data)} values from {_path}")


def reload() -> None:
    load(_path)


def reset() -> None:
    """Drop loaded values so only call-site fallbacks apply."""
    global _data, _path
    _data = {}
    _path = None


def _table(dotted: str) -> dict | None:
    """Nested table for ``"enemy.vision"``-style paths, or None."""
    node = _data
    for part in dotted.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node if isinstance(node, dict) else None


def get(table: str, key: str, default=None):
    """Value of *key* in *table*, or *default* when either is absent."""
    node = _table(table)
    if node is None:
        return default
    return node.get(key, default)


def section(table: str) -> dict:
    """Shallow copy of a whole table (empty if absent)."""
    node = _table(table)
    return dict(node) if node is not None else {}


def _count_leaves(d: dict) -> int:
    return sum(_count_leaves(v) if isinstance(v, dict) else 1
               for v in d.values())
