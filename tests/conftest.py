from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.manifest_builder import ManifestBuilder


@pytest.fixture
def manifest_builder(tmp_path: Path) -> ManifestBuilder:
    """Provide a reusable manifest builder rooted at the pytest tmp_path."""
    return ManifestBuilder(tmp_path)
