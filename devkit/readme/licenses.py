"""License options selectable for a generated README."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from ..errors import UnknownLicenseError


@dataclass(frozen=True)
class LicenseOption:
    value: str
    label: str


LICENSE_OPTIONS: Tuple[LicenseOption, ...] = (
    LicenseOption("MIT", "MIT License"),
    LicenseOption("Apache-2.0", "Apache License 2.0"),
    LicenseOption("GPL-3.0", "GNU GPL v3.0"),
    LicenseOption("BSD-3-Clause", "BSD 3-Clause"),
    LicenseOption("BSD-2-Clause", "BSD 2-Clause"),
    LicenseOption("ISC", "ISC License"),
    LicenseOption("MPL-2.0", "Mozilla Public License 2.0"),
    LicenseOption("LGPL-3.0", "GNU LGPL v3.0"),
    LicenseOption("AGPL-3.0", "GNU AGPL v3.0"),
    LicenseOption("Unlicense", "The Unlicense"),
    LicenseOption("Proprietary", "Proprietary"),
)

_OPTIONS_BY_VALUE: Dict[str, LicenseOption] = {option.value: option for option in LICENSE_OPTIONS}


def license_option(value: str) -> Optional[LicenseOption]:
    return _OPTIONS_BY_VALUE.get(value)


def toggle_license(selected: Iterable[str], value: str) -> List[str]:
    """Add ``value`` to the selection or remove it when already selected."""
    if value not in _OPTIONS_BY_VALUE:
        raise UnknownLicenseError(value)
    current = list(selected)
    if value in current:
        return [item for item in current if item != value]
    return current + [value]


def normalize_licenses(values: Iterable[str]) -> List[str]:
    """Return ``values`` without duplicates, keeping first-selection order."""
    unique = list(dict.fromkeys(values))
    for value in unique:
        if value not in _OPTIONS_BY_VALUE:
            raise UnknownLicenseError(value)
    return unique


__all__ = [
    "LICENSE_OPTIONS",
    "LicenseOption",
    "license_option",
    "normalize_licenses",
    "toggle_license",
]
