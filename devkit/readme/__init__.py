"""README composition, badge catalog and license options."""

from .badges import BADGE_TEMPLATES, BadgeTemplate, BadgeType, create_badge, render_badge, template_for
from .composer import ReadmeComposer, compose
from .constants import PLACEHOLDER_README
from .licenses import LICENSE_OPTIONS, LicenseOption, normalize_licenses, toggle_license

__all__ = [
    "BADGE_TEMPLATES",
    "BadgeTemplate",
    "BadgeType",
    "LICENSE_OPTIONS",
    "LicenseOption",
    "PLACEHOLDER_README",
    "ReadmeComposer",
    "compose",
    "normalize_licenses",
    "create_badge",
    "render_badge",
    "template_for",
    "toggle_license",
]
