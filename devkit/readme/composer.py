"""Compose README markdown from project metadata."""

from __future__ import annotations

from typing import Callable, Dict, List

from ..models import ReadmeFields
from .badges import render_badge
from .constants import CODE_FENCE_LANGUAGE, PLACEHOLDER_README, SECTION_ORDER, SECTION_TITLES


def _heading(section: str) -> str:
    return f"## {SECTION_TITLES[section]}\n\n"


def _fenced(body: str) -> str:
    return f"```{CODE_FENCE_LANGUAGE}\n{body}\n```\n\n"


def feature_items(features: str) -> List[str]:
    """Return the non-blank feature lines, stripped, in input order."""
    return [line.strip() for line in features.split("\n") if line.strip()]


def _title(fields: ReadmeFields) -> str:
    if not fields.name:
        return ""
    return f"# {fields.name}\n\n"


def _badges(fields: ReadmeFields) -> str:
    if not fields.badges:
        return ""
    snippets = [render_badge(badge) for badge in fields.badges]
    return "".join(f"{snippet} " for snippet in snippets if snippet) + "\n\n"


def _description(fields: ReadmeFields) -> str:
    if not fields.description:
        return ""
    return f"{_heading('description')}{fields.description}\n\n"


def _features(fields: ReadmeFields) -> str:
    if not fields.features:
        return ""
    body = "".join(f"- {item}\n" for item in feature_items(fields.features))
    return f"{_heading('features')}{body}\n"


def _installation(fields: ReadmeFields) -> str:
    if not fields.installation:
        return ""
    return _heading("installation") + _fenced(fields.installation)


def _usage(fields: ReadmeFields) -> str:
    if not fields.usage:
        return ""
    return _heading("usage") + _fenced(fields.usage)


def _contributing(fields: ReadmeFields) -> str:
    if not fields.contributing:
        return ""
    return f"{_heading('contributing')}{fields.contributing}\n\n"


def _license(fields: ReadmeFields) -> str:
    if not fields.licenses:
        return ""
    if len(fields.licenses) == 1:
        body = f"This project is licensed under the {fields.licenses[0]} License.\n\n"
    else:
        listed = "".join(f"- {value}\n" for value in fields.licenses)
        body = f"This project is licensed under multiple licenses:\n\n{listed}\n"
    return _heading("license") + body


def _author(fields: ReadmeFields) -> str:
    if not fields.author:
        return ""
    return f"{_heading('author')}{fields.author}\n"


_SECTION_RENDERERS: Dict[str, Callable[[ReadmeFields], str]] = {
    "title": _title,
    "badges": _badges,
    "description": _description,
    "features": _features,
    "installation": _installation,
    "usage": _usage,
    "contributing": _contributing,
    "license": _license,
    "author": _author,
}


class ReadmeComposer:
    """Concatenates README sections in a fixed order, skipping empty ones."""

    def compose(self, fields: ReadmeFields) -> str:
        readme = "".join(_SECTION_RENDERERS[name](fields) for name in SECTION_ORDER)
        return readme or PLACEHOLDER_README


def compose(fields: ReadmeFields) -> str:
    """Compose README markdown for ``fields``."""
    return ReadmeComposer().compose(fields)


__all__ = ["ReadmeComposer", "compose", "feature_items"]
