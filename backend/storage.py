"""File-backed key-value area used for all persisted state.

Each key maps to a single text file ``<root>/<key>.json``.  Writes go to a
temporary file in the same directory followed by an atomic rename so a
reader never observes a partially written value.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from tempfile import NamedTemporaryFile

from backend import data_dir

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalStorage:
    """Persistent string store addressed by key."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = Path(root) if root is not None else data_dir()

    def _path(self, key: str) -> Path:
        if not _KEY_RE.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.root / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        """Return the value stored under ``key`` or ``None``."""

        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` replacing any previous value."""

        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            "w", dir=path.parent, delete=False, encoding="utf-8", suffix=".tmp"
        ) as tmp:
            tmp_path = Path(tmp.name)
            try:
                tmp.write(value)
            except BaseException:
                tmp.close()
                tmp_path.unlink(missing_ok=True)
                raise
        try:
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    def remove_item(self, key: str) -> None:
        """Delete ``key``. Missing keys are ignored."""

        try:
            self._path(key).unlink()
        except FileNotFoundError:
            pass

    def keys(self) -> list[str]:
        if not self.root.exists():
            return []
        return sorted(p.stem for p in self.root.glob("*.json"))
