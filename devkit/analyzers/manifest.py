"""Dependency analysis for JSON package manifests."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Tuple

from ..errors import ManifestParseError
from ..logging import get_logger
from ..models import (
    AnalysisResult,
    AnalysisSummary,
    DependencyKind,
    DependencyRecord,
    VersionClass,
)

DEPENDENCY_SECTIONS: Tuple[DependencyKind, ...] = (
    DependencyKind.DIRECT,
    DependencyKind.DEV,
    DependencyKind.PEER,
)

DEPRECATED_PACKAGES: frozenset[str] = frozenset({"request", "node-uuid", "gulp-util"})

RANGE_PREFIXES: Tuple[str, ...] = ("^", "~")
LATEST_TAG = "latest"

EXAMPLE_MANIFEST: Dict[str, Any] = {
    "name": "my-project",
    "version": "1.0.0",
    "dependencies": {
        "react": "^18.2.0",
        "react-dom": "^18.2.0",
        "lodash": "4.17.21",
        "axios": "^1.6.0",
    },
    "devDependencies": {
        "typescript": "^5.0.0",
        "vite": "^5.0.0",
        "@types/react": "^18.2.0",
    },
}

_logger = get_logger("analyzers.manifest")


def classify_version(version: str) -> VersionClass:
    """Classify a version specifier as range-qualified, latest-tagged or pinned."""
    if version.startswith(RANGE_PREFIXES):
        return VersionClass.RANGE
    if version == LATEST_TAG:
        return VersionClass.LATEST
    return VersionClass.SPECIFIC


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


def parse_manifest(raw_text: str) -> Dict[str, Any]:
    """Parse manifest text into a JSON object, rejecting any other top-level value."""
    try:
        data = json.loads(raw_text, parse_constant=_reject_constant)
    except (ValueError, TypeError) as exc:
        _logger.debug("Manifest is not valid JSON: %s", exc)
        raise ManifestParseError() from exc
    if not isinstance(data, dict):
        _logger.debug("Manifest top-level value is %s, expected object", type(data).__name__)
        raise ManifestParseError()
    return data


def _section_entries(section: Any) -> List[Tuple[str, Any]]:
    # Arrays and strings enumerate by index; other scalars have no entries.
    if isinstance(section, dict):
        return list(section.items())
    if isinstance(section, (list, str)):
        return [(str(index), value) for index, value in enumerate(section)]
    return []


def _iter_sections(manifest: Dict[str, Any]) -> Iterator[Tuple[DependencyKind, Any]]:
    for kind in DEPENDENCY_SECTIONS:
        section = manifest.get(kind.value)
        if not section:
            continue
        yield kind, section


def _is_missing(value: Any) -> bool:
    if value is None or value is False or value == "":
        return True
    return isinstance(value, (int, float)) and value == 0


class ManifestAnalyzer:
    """Extracts dependency records, counts and issues from manifest text."""

    def analyze(self, raw_text: str) -> AnalysisResult:
        manifest = parse_manifest(raw_text)
        records: List[DependencyRecord] = []
        summary = AnalysisSummary()

        for kind, section in _iter_sections(manifest):
            entries = _section_entries(section)
            for name, version in entries:
                if not isinstance(version, str):
                    _logger.debug("Version for %s is not a string: %r", name, version)
                    raise ManifestParseError()
                records.append(DependencyRecord(name=name, version=version, kind=kind))
                self._count_version(summary, classify_version(version))
            self._count_kind(summary, kind, len(entries))

        summary.total = len(records)
        summary.issues = self._collect_issues(manifest, records, summary)
        _logger.debug(
            "Analyzed %d dependencies (%d range, %d specific, %d latest)",
            summary.total,
            summary.range_versions,
            summary.specific_versions,
            summary.latest_versions,
        )
        if summary.issues:
            _logger.info("Manifest analysis found %d issue(s)", len(summary.issues))
        return AnalysisResult(records=records, summary=summary)

    def rewrite_all_versions_to_latest(self, raw_text: str) -> str:
        """Return the manifest re-serialized with every dependency pinned to ``latest``."""
        manifest = parse_manifest(raw_text)
        rewritten = 0
        for kind, section in _iter_sections(manifest):
            if isinstance(section, str):
                _logger.debug("Section %s is a string and cannot be rewritten", kind.value)
                raise ManifestParseError()
            if isinstance(section, dict):
                for name in section:
                    section[name] = LATEST_TAG
                rewritten += len(section)
            elif isinstance(section, list):
                section[:] = [LATEST_TAG] * len(section)
                rewritten += len(section)
        _logger.debug("Rewrote %d dependency versions to %s", rewritten, LATEST_TAG)
        try:
            return json.dumps(manifest, indent=2, ensure_ascii=False, allow_nan=False)
        except ValueError as exc:
            _logger.debug("Manifest holds a number JSON cannot represent: %s", exc)
            raise ManifestParseError() from exc

    @staticmethod
    def _count_version(summary: AnalysisSummary, version_class: VersionClass) -> None:
        if version_class is VersionClass.RANGE:
            summary.range_versions += 1
        elif version_class is VersionClass.LATEST:
            summary.latest_versions += 1
        else:
            summary.specific_versions += 1

    @staticmethod
    def _count_kind(summary: AnalysisSummary, kind: DependencyKind, count: int) -> None:
        if kind is DependencyKind.DIRECT:
            summary.dependencies = count
        elif kind is DependencyKind.DEV:
            summary.dev_dependencies = count
        else:
            summary.peer_dependencies = count

    @staticmethod
    def _collect_issues(
        manifest: Dict[str, Any],
        records: List[DependencyRecord],
        summary: AnalysisSummary,
    ) -> List[str]:
        issues: List[str] = []
        if summary.latest_versions > 0:
            issues.append(
                f'{summary.latest_versions} package(s) using "latest" version '
                "(not recommended for production)"
            )
        if not records:
            issues.append("No dependencies found")
        if _is_missing(manifest.get("name")):
            issues.append("Package name is missing")
        if _is_missing(manifest.get("version")):
            issues.append("Package version is missing")
        for record in records:
            if record.name in DEPRECATED_PACKAGES:
                issues.append(f'"{record.name}" is deprecated and should be replaced')
        return issues


_DEFAULT_ANALYZER = ManifestAnalyzer()


def analyze(raw_text: str) -> AnalysisResult:
    """Analyze manifest text with the default analyzer."""
    return _DEFAULT_ANALYZER.analyze(raw_text)


def rewrite_all_versions_to_latest(raw_text: str) -> str:
    """Rewrite every dependency version in the manifest text to ``latest``."""
    return _DEFAULT_ANALYZER.rewrite_all_versions_to_latest(raw_text)


def example_manifest_text() -> str:
    """Return the bundled example manifest as pretty-printed JSON."""
    return json.dumps(EXAMPLE_MANIFEST, indent=2)


__all__ = [
    "DEPENDENCY_SECTIONS",
    "DEPRECATED_PACKAGES",
    "EXAMPLE_MANIFEST",
    "ManifestAnalyzer",
    "analyze",
    "classify_version",
    "example_manifest_text",
    "parse_manifest",
    "rewrite_all_versions_to_latest",
]
