"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class JsonSettings:
    """JSON settings reader with dotted-key access.

    Relative paths stored in the file are resolved against the file's folder
    by `get_path`.
    """

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings file not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        node: Any = self._data
        for part in key.split("."):
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node

    def get_int(self, key: str, default: int) -> int:
        """Return `key` as an int, or `default` when missing or not numeric."""
        value = self.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def get_path(self, key: str, default: str | None = None) -> Path | None:
        """Return `key` as a path relative to the settings file, or None."""
        value = self.get(key, default)
        if not value:
            return None
        p = Path(str(value)).expanduser()
        return p if p.is_absolute() else self._path.parent / p
