"""Serializable workspace state driving the README and dependency tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .analyzers.manifest import ManifestAnalyzer, example_manifest_text
from .config import ReadmeDefaults
from .errors import FileReadError, InvalidFileTypeError, ManifestParseError
from .logging import get_logger
from .models import (
    AnalysisResult,
    AnalysisSummary,
    BadgeInstance,
    DependencyKind,
    DependencyRecord,
    ReadmeFields,
)
from .readme.badges import create_badge
from .readme.composer import compose
from .readme.licenses import normalize_licenses, toggle_license

MANIFEST_EXPORT_NAME = "package.json"
README_EXPORT_NAME = "README.md"

_logger = get_logger("state")


def fields_from_defaults(defaults: ReadmeDefaults) -> ReadmeFields:
    """Build editable README fields from configured defaults."""
    badges = [
        create_badge(
            spec.type,
            spec.identifier,
            label=spec.label,
            message=spec.message,
            color=spec.color,
        )
        for spec in defaults.badges
    ]
    return ReadmeFields(
        name=defaults.name,
        description=defaults.description,
        features=defaults.features,
        installation=defaults.installation,
        usage=defaults.usage,
        contributing=defaults.contributing,
        licenses=normalize_licenses(defaults.licenses),
        author=defaults.author,
        badges=badges,
    )


def is_manifest_filename(filename: str) -> bool:
    return filename.endswith(".json") or filename == MANIFEST_EXPORT_NAME


@dataclass
class WorkspaceState:
    """Editable fields plus the most recent dependency analysis."""

    fields: ReadmeFields = field(default_factory=lambda: fields_from_defaults(ReadmeDefaults()))
    manifest_text: str = ""
    records: List[DependencyRecord] = field(default_factory=list)
    summary: Optional[AnalysisSummary] = None
    analyzer: ManifestAnalyzer = field(
        default_factory=ManifestAnalyzer, repr=False, compare=False
    )

    @classmethod
    def from_defaults(cls, defaults: ReadmeDefaults) -> "WorkspaceState":
        return cls(fields=fields_from_defaults(defaults))

    # Dependency checker

    def run_analysis(self) -> AnalysisResult:
        """Analyze the current manifest text, clearing results when it is invalid."""
        try:
            result = self.analyzer.analyze(self.manifest_text)
        except ManifestParseError:
            self.records = []
            self.summary = None
            _logger.warning("Manifest analysis failed: invalid JSON")
            raise
        self.records = list(result.records)
        self.summary = result.summary
        _logger.info("Analysis complete: %d dependencies", result.summary.total)
        return result

    def load_manifest_file(self, path: Path) -> AnalysisResult:
        """Load a manifest file into the workspace and analyze it."""
        if not is_manifest_filename(path.name):
            _logger.warning("Rejected manifest upload with name %s", path.name)
            raise InvalidFileTypeError()
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            _logger.warning("Failed to read %s: %s", path, exc)
            raise FileReadError() from exc
        self.manifest_text = content
        _logger.info('File "%s" loaded successfully', path.name)
        return self.run_analysis()

    def load_example(self) -> str:
        self.manifest_text = example_manifest_text()
        return self.manifest_text

    def update_to_latest(self) -> AnalysisResult:
        """Rewrite every dependency version to ``latest`` and re-analyze."""
        updated = self.analyzer.rewrite_all_versions_to_latest(self.manifest_text)
        self.manifest_text = updated
        _logger.info("All packages updated to latest version")
        return self.run_analysis()

    def records_of_kind(self, kind: DependencyKind) -> List[DependencyRecord]:
        return [record for record in self.records if record.kind is kind]

    # README generator

    @property
    def readme(self) -> str:
        return compose(self.fields)

    def add_badge(
        self,
        badge_type: str,
        identifier: str,
        *,
        label: str | None = None,
        message: str | None = None,
        color: str | None = None,
    ) -> BadgeInstance:
        badge = create_badge(badge_type, identifier, label=label, message=message, color=color)
        self.fields.badges.append(badge)
        return badge

    def remove_badge(self, badge_id: str) -> bool:
        remaining = [badge for badge in self.fields.badges if badge.id != badge_id]
        removed = len(remaining) != len(self.fields.badges)
        self.fields.badges = remaining
        return removed

    def toggle_license(self, value: str) -> List[str]:
        self.fields.licenses = toggle_license(self.fields.licenses, value)
        return self.fields.licenses

    # Export

    def export_readme(self, target: Path) -> Path:
        path = target / README_EXPORT_NAME if target.is_dir() else target
        path.write_text(self.readme, encoding="utf-8")
        _logger.info("README.md written to %s", path)
        return path

    def export_manifest(self, target: Path) -> Path:
        path = target / MANIFEST_EXPORT_NAME if target.is_dir() else target
        path.write_text(self.manifest_text, encoding="utf-8")
        _logger.info("package.json written to %s", path)
        return path

    # Serialization

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fields": self.fields.to_dict(),
            "manifest_text": self.manifest_text,
            "records": [record.to_dict() for record in self.records],
            "summary": self.summary.to_dict() if self.summary else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WorkspaceState":
        summary_data = data.get("summary")
        return cls(
            fields=ReadmeFields.from_dict(data.get("fields") or {}),
            manifest_text=str(data.get("manifest_text") or ""),
            records=[
                DependencyRecord(
                    name=str(item["name"]),
                    version=str(item["version"]),
                    kind=DependencyKind(item["type"]),
                )
                for item in data.get("records") or []
            ],
            summary=AnalysisSummary.from_dict(summary_data) if summary_data else None,
        )


__all__ = [
    "MANIFEST_EXPORT_NAME",
    "README_EXPORT_NAME",
    "WorkspaceState",
    "fields_from_defaults",
    "is_manifest_filename",
]
