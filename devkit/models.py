"""Core data models shared across devkit components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional


class DependencyKind(str, Enum):
    """Manifest section a dependency was declared in."""

    DIRECT = "dependencies"
    DEV = "devDependencies"
    PEER = "peerDependencies"


class VersionClass(str, Enum):
    """Classification of a version specifier."""

    RANGE = "range"
    LATEST = "latest"
    SPECIFIC = "specific"


@dataclass(frozen=True)
class DependencyRecord:
    """A single dependency entry extracted from a manifest."""

    name: str
    version: str
    kind: DependencyKind

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "version": self.version, "type": self.kind.value}


@dataclass
class AnalysisSummary:
    """Aggregate counts and issues for one analysis run."""

    total: int = 0
    dependencies: int = 0
    dev_dependencies: int = 0
    peer_dependencies: int = 0
    specific_versions: int = 0
    range_versions: int = 0
    latest_versions: int = 0
    issues: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "dependencies": self.dependencies,
            "devDependencies": self.dev_dependencies,
            "peerDependencies": self.peer_dependencies,
            "specificVersions": self.specific_versions,
            "rangeVersions": self.range_versions,
            "latestVersions": self.latest_versions,
            "issues": list(self.issues),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnalysisSummary":
        return cls(
            total=int(data.get("total", 0)),
            dependencies=int(data.get("dependencies", 0)),
            dev_dependencies=int(data.get("devDependencies", 0)),
            peer_dependencies=int(data.get("peerDependencies", 0)),
            specific_versions=int(data.get("specificVersions", 0)),
            range_versions=int(data.get("rangeVersions", 0)),
            latest_versions=int(data.get("latestVersions", 0)),
            issues=[str(issue) for issue in data.get("issues", [])],
        )


@dataclass
class AnalysisResult:
    """Records plus summary produced by the manifest analyzer."""

    records: List[DependencyRecord]
    summary: AnalysisSummary

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dependencies": [record.to_dict() for record in self.records],
            "analysis": self.summary.to_dict(),
        }


@dataclass
class BadgeInstance:
    """A badge added by the user to a README."""

    id: str
    type: str
    identifier: str
    label: Optional[str] = None
    message: Optional[str] = None
    color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "identifier": self.identifier,
            "label": self.label,
            "message": self.message,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BadgeInstance":
        return cls(
            id=str(data["id"]),
            type=str(data["type"]),
            identifier=str(data.get("identifier", "")),
            label=data.get("label") or None,
            message=data.get("message") or None,
            color=data.get("color") or None,
        )


@dataclass
class ReadmeFields:
    """Editable project metadata used to compose a README."""

    name: str = ""
    description: str = ""
    features: str = ""
    installation: str = ""
    usage: str = ""
    contributing: str = ""
    licenses: List[str] = field(default_factory=list)
    author: str = ""
    badges: List[BadgeInstance] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "features": self.features,
            "installation": self.installation,
            "usage": self.usage,
            "contributing": self.contributing,
            "licenses": list(self.licenses),
            "author": self.author,
            "badges": [badge.to_dict() for badge in self.badges],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReadmeFields":
        return cls(
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
            features=str(data.get("features") or ""),
            installation=str(data.get("installation") or ""),
            usage=str(data.get("usage") or ""),
            contributing=str(data.get("contributing") or ""),
            licenses=list(dict.fromkeys(str(value) for value in data.get("licenses") or [])),
            author=str(data.get("author") or ""),
            badges=[BadgeInstance.from_dict(item) for item in data.get("badges") or []],
        )


__all__ = [
    "AnalysisResult",
    "AnalysisSummary",
    "BadgeInstance",
    "DependencyKind",
    "DependencyRecord",
    "ReadmeFields",
    "VersionClass",
]
