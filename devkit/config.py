"""Configuration loading for devkit (.devkit.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError
from .readme.constants import (
    DEFAULT_CONTRIBUTING,
    DEFAULT_INSTALLATION,
    DEFAULT_LICENSES,
    DEFAULT_USAGE,
)

CONFIG_FILENAME = ".devkit.yml"


@dataclass
class BadgeSpec:
    """Badge declared in configuration, validated when a workspace is created."""

    type: str
    identifier: str
    label: Optional[str] = None
    message: Optional[str] = None
    color: Optional[str] = None


@dataclass
class ReadmeDefaults:
    """Initial README field values for new workspaces."""

    name: str = ""
    description: str = ""
    features: str = ""
    installation: str = DEFAULT_INSTALLATION
    usage: str = DEFAULT_USAGE
    contributing: str = DEFAULT_CONTRIBUTING
    licenses: List[str] = field(default_factory=lambda: list(DEFAULT_LICENSES))
    author: str = ""
    badges: List[BadgeSpec] = field(default_factory=list)


@dataclass
class ServiceConfig:
    """HTTP service bind settings."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class DevkitConfig:
    """Represents the settings defined in .devkit.yml."""

    root: Path
    readme: ReadmeDefaults = field(default_factory=ReadmeDefaults)
    service: ServiceConfig = field(default_factory=ServiceConfig)


def load_config(config_path: Path) -> DevkitConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DevkitConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    readme = ReadmeDefaults()
    readme_data = _as_dict(data.get("readme"))
    if readme_data:
        for key in ("name", "description", "installation", "usage", "contributing", "author"):
            if key in readme_data:
                setattr(readme, key, _as_str(readme_data.get(key)) or "")
        if "features" in readme_data:
            readme.features = _as_text_block(readme_data.get("features"))
        if "licenses" in readme_data:
            readme.licenses = _unique(_as_str_list(readme_data.get("licenses")))
        readme.badges = _as_badges(readme_data.get("badges"))

    service = ServiceConfig()
    service_data = _as_dict(data.get("service"))
    if service_data:
        service.host = _as_str(service_data.get("host")) or service.host
        port = _as_int(service_data.get("port"))
        if port is not None:
            service.port = port

    return DevkitConfig(root=root, readme=readme, service=service)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


def _as_text_block(value: Any) -> str:
    # Features may be given as a YAML list or a literal block.
    if isinstance(value, str):
        return value
    return "\n".join(_as_str_list(value))


def _as_badges(value: Any) -> List[BadgeSpec]:
    if not isinstance(value, list):
        return []
    badges: List[BadgeSpec] = []
    for item in value:
        data = _as_dict(item)
        badge_type = _as_str(data.get("type"))
        identifier = _as_str(data.get("identifier"))
        if not badge_type or identifier is None:
            raise ConfigError("Each badge entry needs a `type` and an `identifier`")
        badges.append(
            BadgeSpec(
                type=badge_type,
                identifier=identifier,
                label=_as_str(data.get("label")),
                message=_as_str(data.get("message")),
                color=_as_str(data.get("color")),
            )
        )
    return badges


def _unique(values: List[str]) -> List[str]:
    seen: List[str] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


__all__ = [
    "BadgeSpec",
    "CONFIG_FILENAME",
    "DevkitConfig",
    "ReadmeDefaults",
    "ServiceConfig",
    "load_config",
]
