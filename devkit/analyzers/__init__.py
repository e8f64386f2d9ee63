"""Manifest analyzers."""

from .manifest import (
    DEPRECATED_PACKAGES,
    ManifestAnalyzer,
    analyze,
    classify_version,
    example_manifest_text,
    rewrite_all_versions_to_latest,
)

__all__ = [
    "DEPRECATED_PACKAGES",
    "ManifestAnalyzer",
    "analyze",
    "classify_version",
    "example_manifest_text",
    "rewrite_all_versions_to_latest",
]
