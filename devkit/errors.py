"""Exception hierarchy shared by devkit components."""

from __future__ import annotations


class DevkitError(RuntimeError):
    """Base class for recoverable, user-facing devkit failures."""


class ManifestParseError(DevkitError, ValueError):
    """Raised when manifest text is not valid JSON or not a JSON object."""

    def __init__(self, message: str = "Invalid JSON format") -> None:
        super().__init__(message)


class FileReadError(DevkitError):
    """Raised when an uploaded manifest cannot be read or decoded."""

    def __init__(self, message: str = "Failed to read file") -> None:
        super().__init__(message)


class InvalidFileTypeError(DevkitError):
    """Raised when an uploaded file does not look like a JSON manifest."""

    def __init__(self, message: str = "Please upload a valid JSON file") -> None:
        super().__init__(message)


class BadgeValidationError(DevkitError):
    """Raised when a badge cannot be created from the supplied identifier."""


class UnknownLicenseError(DevkitError, ValueError):
    """Raised when a license id is not one of the selectable options."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown license option: {value}")
        self.value = value


class ConfigError(DevkitError):
    """Raised when the configuration file cannot be parsed."""


__all__ = [
    "BadgeValidationError",
    "ConfigError",
    "DevkitError",
    "FileReadError",
    "InvalidFileTypeError",
    "ManifestParseError",
    "UnknownLicenseError",
]
