"""Badge catalog for generated README files."""

from __future__ import annotations

import random
import re
import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional, Tuple
from urllib.parse import quote

from ..errors import BadgeValidationError
from ..logging import get_logger
from ..models import BadgeInstance

SHIELDS_BASE = "https://img.shields.io"

_logger = get_logger("readme.badges")

Renderer = Callable[[str, Optional[str], Optional[str], Optional[str]], str]


class BadgeType(str, Enum):
    """Closed set of badge kinds offered by the catalog."""

    NPM_VERSION = "npm-version"
    NPM_DOWNLOADS = "npm-downloads"
    GITHUB_STARS = "github-stars"
    GITHUB_FORKS = "github-forks"
    GITHUB_ISSUES = "github-issues"
    GITHUB_LICENSE = "github-license"
    BUILD_STATUS = "build-status"
    COVERAGE = "coverage"
    LICENSE = "license"
    CUSTOM = "custom"


def _encode(value: str) -> str:
    # Matches JavaScript encodeURIComponent.
    return quote(value, safe="-_.!~*'()")


@dataclass(frozen=True)
class BadgeTemplate:
    """Static catalog entry describing how to validate and render one badge type."""

    type: BadgeType
    label: str
    description: str
    pattern: re.Pattern[str]
    placeholder: str
    example: str
    _renderer: Renderer = field(repr=False, compare=False)

    def validate(self, identifier: str) -> bool:
        return self.pattern.fullmatch(identifier) is not None

    def render(
        self,
        identifier: str,
        label: Optional[str] = None,
        message: Optional[str] = None,
        color: Optional[str] = None,
    ) -> str:
        return self._renderer(identifier, label, message, color)


_PACKAGE_PATTERN = re.compile(r"[a-z0-9\-_@/]+", re.IGNORECASE | re.ASCII)
_REPO_PATTERN = re.compile(r"[a-z0-9\-_]+/[a-z0-9\-_.]+", re.IGNORECASE | re.ASCII)
_URL_PATTERN = re.compile(r"https?://.+", re.IGNORECASE | re.ASCII)
_LICENSE_PATTERN = re.compile(r"[a-zA-Z0-9\-_\s.]+")
_ANY_PATTERN = re.compile(r".*", re.DOTALL)


def _shield(alt: str, path: str) -> Renderer:
    def render(identifier: str, *_: Optional[str]) -> str:
        return f"![{alt}]({SHIELDS_BASE}/{path}/{identifier})"

    return render


def _static(alt: str, path: str) -> Renderer:
    def render(*_: Optional[str]) -> str:
        return f"![{alt}]({SHIELDS_BASE}/badge/{path})"

    return render


def _render_license(identifier: str, *_: Optional[str]) -> str:
    return f"![License]({SHIELDS_BASE}/badge/license-{_encode(identifier)}-blue)"


def _render_custom(
    identifier: str,
    label: Optional[str] = None,
    message: Optional[str] = None,
    color: Optional[str] = None,
) -> str:
    label = label or "label"
    message = message or "message"
    color = color or "blue"
    return f"![{label}]({SHIELDS_BASE}/badge/{_encode(label)}-{_encode(message)}-{color})"


BADGE_TEMPLATES: Tuple[BadgeTemplate, ...] = (
    BadgeTemplate(
        type=BadgeType.NPM_VERSION,
        label="NPM Version",
        description="Shows the current npm package version",
        pattern=_PACKAGE_PATTERN,
        placeholder="package-name",
        example="react",
        _renderer=_shield("npm", "npm/v"),
    ),
    BadgeTemplate(
        type=BadgeType.NPM_DOWNLOADS,
        label="NPM Downloads",
        description="Shows npm package download count",
        pattern=_PACKAGE_PATTERN,
        placeholder="package-name",
        example="react",
        _renderer=_shield("npm", "npm/dm"),
    ),
    BadgeTemplate(
        type=BadgeType.GITHUB_STARS,
        label="GitHub Stars",
        description="Shows GitHub repository stars",
        pattern=_REPO_PATTERN,
        placeholder="username/repo",
        example="facebook/react",
        _renderer=_shield("GitHub stars", "github/stars"),
    ),
    BadgeTemplate(
        type=BadgeType.GITHUB_FORKS,
        label="GitHub Forks",
        description="Shows GitHub repository forks",
        pattern=_REPO_PATTERN,
        placeholder="username/repo",
        example="facebook/react",
        _renderer=_shield("GitHub forks", "github/forks"),
    ),
    BadgeTemplate(
        type=BadgeType.GITHUB_ISSUES,
        label="GitHub Issues",
        description="Shows open GitHub issues",
        pattern=_REPO_PATTERN,
        placeholder="username/repo",
        example="facebook/react",
        _renderer=_shield("GitHub issues", "github/issues"),
    ),
    BadgeTemplate(
        type=BadgeType.GITHUB_LICENSE,
        label="GitHub License",
        description="Shows repository license",
        pattern=_REPO_PATTERN,
        placeholder="username/repo",
        example="facebook/react",
        _renderer=_shield("GitHub license", "github/license"),
    ),
    BadgeTemplate(
        type=BadgeType.BUILD_STATUS,
        label="Build Status",
        description="Shows CI/CD build status",
        pattern=_URL_PATTERN,
        placeholder="https://ci-service.com/status-url",
        example="https://github.com/user/repo/actions",
        _renderer=_static("Build Status", "build-passing-brightgreen"),
    ),
    BadgeTemplate(
        type=BadgeType.COVERAGE,
        label="Code Coverage",
        description="Shows test coverage percentage",
        pattern=_URL_PATTERN,
        placeholder="https://codecov.io/gh/user/repo",
        example="https://codecov.io/gh/facebook/react",
        _renderer=_static("Coverage", "coverage-95%25-brightgreen"),
    ),
    BadgeTemplate(
        type=BadgeType.LICENSE,
        label="License Badge",
        description="Custom license badge",
        pattern=_LICENSE_PATTERN,
        placeholder="MIT",
        example="MIT",
        _renderer=_render_license,
    ),
    BadgeTemplate(
        type=BadgeType.CUSTOM,
        label="Custom Badge",
        description="Create a custom badge with label and message",
        pattern=_ANY_PATTERN,
        placeholder="Enter badge text",
        example="custom",
        _renderer=_render_custom,
    ),
)

_TEMPLATES_BY_TYPE: Dict[str, BadgeTemplate] = {
    template.type.value: template for template in BADGE_TEMPLATES
}


def template_for(badge_type: str) -> Optional[BadgeTemplate]:
    """Return the catalog entry for ``badge_type`` or ``None`` when unknown."""
    return _TEMPLATES_BY_TYPE.get(badge_type)


def render_badge(badge: BadgeInstance) -> str:
    """Render a user badge, or an empty string when its type is not in the catalog."""
    template = template_for(badge.type)
    if template is None:
        return ""
    return template.render(badge.identifier, badge.label, badge.message, badge.color)


def new_badge_id() -> str:
    alphabet = string.ascii_lowercase + string.digits
    return "".join(random.choices(alphabet, k=9))


def create_badge(
    badge_type: str,
    identifier: str,
    *,
    label: str | None = None,
    message: str | None = None,
    color: str | None = None,
) -> BadgeInstance:
    """Validate the identifier against the catalog and build a new badge."""
    template = template_for(badge_type)
    if template is None or not identifier.strip():
        raise BadgeValidationError(
            "Please select a badge type and enter required information"
        )
    if not template.validate(identifier):
        raise BadgeValidationError(f"Invalid format. Example: {template.example}")

    badge = BadgeInstance(
        id=new_badge_id(),
        type=template.type.value,
        identifier=identifier,
        label=label or None,
        message=message or None,
        color=color or None,
    )
    _logger.debug("Created %s badge %s for %s", badge.type, badge.id, identifier)
    return badge


__all__ = [
    "BADGE_TEMPLATES",
    "BadgeTemplate",
    "BadgeType",
    "create_badge",
    "new_badge_id",
    "render_badge",
    "template_for",
]
