"""core/tuning.py — Data-driven tuning constants.

Gameplay numbers live in ``data/tuning.toml`` and are loaded once at
startup.  Any module can read a value with::

    from core.tuning import get
    hp = get("survivor", "hp", 3)

Defaults always come from ``core/constants.py``, so nothing breaks when
the file is missing (headless tests never load it).

Hot-reload: call ``reload()`` to re-read the file.  In-game, press F5.
"""

from __future__ import annotations
import tomllib
from pathlib import Path


_data: dict = {}
_path: Path | None = None


def load(path: str | Path | None = None) -> None:
    """Load (or reload) tuning constants from *path*.

    If *path* is ``None``, default to ``data/tuning.toml`` relative to
    the project root (one level above ``core/``).
    """
    global _data, _path

    if path is None:
        root = Path(__file__).resolve().parent.parent
        path = root / "data" / "tuning.toml"
    else:
        path = Path(path)

    _path = path

    if not path.exists():
        print(f"[TUNING] {path} not found — using defaults")
        _data = {}
        return

    with open(path, "rb") as f:
        _data = tomllib.load(f)

    print(f"[TUNING] Loaded {_count_leaves(_data)} values from {path}")


def reload() -> None:
    """Re-read the tuning file from disk."""
    load(_path)


def reset() -> None:
    """Forget every loaded value (tests use this to get pure defaults)."""
    global _data, _path
    _data = {}
    _path = None


def get(section: str, key: str, default=None):
    """Read a tuning value.

    *section* uses dot-notation to traverse nested tables, e.g.
    ``"render.hud"`` looks up ``[render.hud]``.

    >>> get("ghost", "speed", 2)
    2
    """
    node = section_table(section)
    return node.get(key, default)


def section_table(section_path: str) -> dict:
    """Return an entire section dict (shallow copy), or empty dict."""
    node = _data
    for part in section_path.split("."):
        if not isinstance(node, dict):
            return {}
        node = node.get(part)
        if node is None:
            return {}
    return dict(node) if isinstance(node, dict) else {}


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
