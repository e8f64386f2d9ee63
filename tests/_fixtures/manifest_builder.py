"""Helper utilities for writing package manifests in tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping


class ManifestBuilder:
    """Utility for assembling manifest JSON and writing it into a scratch directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()
        self._data: Dict[str, Any] = {}

    def meta(self, name: str | None = "demo", version: str | None = "1.0.0") -> "ManifestBuilder":
        if name is not None:
            self._data["name"] = name
        if version is not None:
            self._data["version"] = version
        return self

    def section(self, key: str, entries: Mapping[str, str]) -> "ManifestBuilder":
        self._data[key] = dict(entries)
        return self

    def text(self) -> str:
        return json.dumps(self._data, indent=2)

    def write(self, filename: str = "package.json", content: str | None = None) -> Path:
        """Write the manifest (or raw ``content``) and return its path."""
        path = self.root / filename
        path.write_text(self.text() if content is None else content, encoding="utf-8")
        return path


__all__ = ["ManifestBuilder"]
