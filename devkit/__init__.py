"""README generation and package manifest dependency checking."""

from .analyzers.manifest import ManifestAnalyzer, analyze, rewrite_all_versions_to_latest
from .errors import (
    BadgeValidationError,
    ConfigError,
    DevkitError,
    FileReadError,
    InvalidFileTypeError,
    ManifestParseError,
)
from .readme.composer import ReadmeComposer, compose
from .state import WorkspaceState

__version__ = "1.0.0"

__all__ = [
    "BadgeValidationError",
    "ConfigError",
    "DevkitError",
    "FileReadError",
    "InvalidFileTypeError",
    "ManifestAnalyzer",
    "ManifestParseError",
    "ReadmeComposer",
    "WorkspaceState",
    "analyze",
    "compose",
    "rewrite_all_versions_to_latest",
]
