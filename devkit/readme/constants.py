"""Shared constants for README composition."""

from __future__ import annotations

SECTION_ORDER: tuple[str, ...] = (
    "title",
    "badges",
    "description",
    "features",
    "installation",
    "usage",
    "contributing",
    "license",
    "author",
)

SECTION_TITLES: dict[str, str] = {
    "description": "Description",
    "features": "Features",
    "installation": "Installation",
    "usage": "Usage",
    "contributing": "Contributing",
    "license": "License",
    "author": "Author",
}

PLACEHOLDER_README = "# My Project\n\nAdd project details to generate README"

CODE_FENCE_LANGUAGE = "bash"

DEFAULT_INSTALLATION = "npm install"
DEFAULT_USAGE = "npm start"
DEFAULT_CONTRIBUTING = (
    "Pull requests are welcome. For major changes, please open an issue first."
)
DEFAULT_LICENSES: tuple[str, ...] = ("MIT",)


__all__ = [
    "CODE_FENCE_LANGUAGE",
    "DEFAULT_CONTRIBUTING",
    "DEFAULT_INSTALLATION",
    "DEFAULT_LICENSES",
    "DEFAULT_USAGE",
    "PLACEHOLDER_README",
    "SECTION_ORDER",
    "SECTION_TITLES",
]
