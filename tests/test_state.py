"""Tests for the workspace state object."""

from __future__ import annotations

from pathlib import Path

import pytest

from devkit.config import BadgeSpec, ReadmeDefaults
from devkit.errors import (
    BadgeValidationError,
    FileReadError,
    InvalidFileTypeError,
    ManifestParseError,
    UnknownLicenseError,
)
from devkit.models import DependencyKind, ReadmeFields
from devkit.readme.constants import DEFAULT_CONTRIBUTING
from devkit.state import WorkspaceState


def test_new_workspace_uses_default_fields() -> None:
    state = WorkspaceState()
    assert state.fields.installation == "npm install"
    assert state.fields.usage == "npm start"
    assert state.fields.contributing == DEFAULT_CONTRIBUTING
    assert state.fields.licenses == ["MIT"]
    assert state.readme.startswith("## Installation\n\n```bash\nnpm install\n```")


def test_run_analysis_populates_records_and_summary() -> None:
    state = WorkspaceState()
    state.load_example()
    result = state.run_analysis()

    assert state.summary is result.summary
    assert len(state.records) == 7
    assert [record.name for record in state.records_of_kind(DependencyKind.DEV)] == [
        "typescript",
        "vite",
        "@types/react",
    ]


def test_run_analysis_clears_results_on_invalid_json() -> None:
    state = WorkspaceState()
    state.load_example()
    state.run_analysis()

    state.manifest_text = "{not json"
    with pytest.raises(ManifestParseError):
        state.run_analysis()
    assert state.records == []
    assert state.summary is None


def test_update_to_latest_rewrites_and_reanalyzes() -> None:
    state = WorkspaceState()
    state.load_example()
    result = state.update_to_latest()

    assert '"react": "latest"' in state.manifest_text
    assert result.summary.latest_versions == result.summary.total == 7
    assert result.summary.issues[0].startswith("7 package(s) using")


def test_update_to_latest_leaves_invalid_text_untouched() -> None:
    state = WorkspaceState(manifest_text="{broken")
    with pytest.raises(ManifestParseError):
        state.update_to_latest()
    assert state.manifest_text == "{broken"


def test_load_manifest_file_reads_and_analyzes(manifest_builder) -> None:
    manifest_builder.meta().section("dependencies", {"request": "2.88.0"})
    path = manifest_builder.write("deps.json")

    state = WorkspaceState()
    result = state.load_manifest_file(path)

    assert state.manifest_text == manifest_builder.text()
    assert result.summary.issues == ['"request" is deprecated and should be replaced']


def test_load_manifest_file_rejects_wrong_extension(manifest_builder) -> None:
    path = manifest_builder.write("package.txt")
    state = WorkspaceState(manifest_text="existing")

    with pytest.raises(InvalidFileTypeError, match="valid JSON file"):
        state.load_manifest_file(path)
    assert state.manifest_text == "existing"


def test_load_manifest_file_reports_read_failures(tmp_path: Path) -> None:
    state = WorkspaceState(manifest_text="existing")
    with pytest.raises(FileReadError):
        state.load_manifest_file(tmp_path / "missing.json")

    binary = tmp_path / "binary.json"
    binary.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(FileReadError):
        state.load_manifest_file(binary)
    assert state.manifest_text == "existing"


def test_badges_and_licenses_flow_into_readme() -> None:
    state = WorkspaceState()
    state.fields.name = "demo"
    badge = state.add_badge("github-stars", "facebook/react")
    state.toggle_license("ISC")

    readme = state.readme
    assert "![GitHub stars](https://img.shields.io/github/stars/facebook/react) \n\n" in readme
    assert "- MIT\n- ISC\n" in readme

    assert state.remove_badge(badge.id) is True
    assert state.remove_badge(badge.id) is False
    assert "GitHub stars" not in state.readme


def test_add_badge_rejects_invalid_identifier() -> None:
    state = WorkspaceState()
    with pytest.raises(BadgeValidationError):
        state.add_badge("github-stars", "no-slash")
    assert state.fields.badges == []


def test_from_defaults_builds_configured_badges() -> None:
    defaults = ReadmeDefaults(
        name="demo",
        licenses=[],
        badges=[BadgeSpec(type="npm-version", identifier="demo")],
    )
    state = WorkspaceState.from_defaults(defaults)
    assert state.fields.name == "demo"
    assert state.fields.badges[0].type == "npm-version"
    assert "## License" not in state.readme


def test_exports_write_files(tmp_path: Path) -> None:
    state = WorkspaceState()
    state.load_example()
    state.fields.name = "demo"

    readme_path = state.export_readme(tmp_path)
    manifest_path = state.export_manifest(tmp_path)

    assert readme_path == tmp_path / "README.md"
    assert readme_path.read_text(encoding="utf-8") == state.readme
    assert manifest_path == tmp_path / "package.json"
    assert manifest_path.read_text(encoding="utf-8") == state.manifest_text


def test_state_round_trips_through_dict() -> None:
    state = WorkspaceState()
    state.load_example()
    state.run_analysis()
    state.add_badge("custom", "x", label="chat", message="discord", color="purple")

    restored = WorkspaceState.from_dict(state.to_dict())

    assert restored.fields == state.fields
    assert restored.records == state.records
    assert restored.summary == state.summary
    assert restored.readme == state.readme


def test_from_defaults_dedupes_and_validates_licenses() -> None:
    state = WorkspaceState.from_defaults(ReadmeDefaults(licenses=["ISC", "MIT", "ISC"]))
    assert state.fields.licenses == ["ISC", "MIT"]

    with pytest.raises(UnknownLicenseError):
        WorkspaceState.from_defaults(ReadmeDefaults(licenses=["WTFPL"]))


def test_readme_fields_from_dict_drops_duplicate_licenses() -> None:
    fields = ReadmeFields.from_dict({"licenses": ["MIT", "MIT", "ISC"]})
    assert fields.licenses == ["MIT", "ISC"]
