"""FastAPI application exposing devkit operations over HTTP."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..analyzers.manifest import ManifestAnalyzer
from ..config import DevkitConfig, ReadmeDefaults, load_config
from ..errors import DevkitError
from ..logging import get_logger
from ..models import BadgeInstance
from ..readme.badges import BADGE_TEMPLATES, create_badge
from ..readme.badges import render_badge as render_badge_markdown
from ..readme.composer import compose
from ..readme.licenses import LICENSE_OPTIONS, normalize_licenses
from ..state import fields_from_defaults

_logger = get_logger("service")


class ManifestRequest(BaseModel):
    text: str


class ManifestResponse(BaseModel):
    text: str


class DependencyModel(BaseModel):
    name: str
    version: str
    type: str


class AnalysisModel(BaseModel):
    total: int
    dependencies: int
    devDependencies: int
    peerDependencies: int
    specificVersions: int
    rangeVersions: int
    latestVersions: int
    issues: List[str]


class AnalyzeResponse(BaseModel):
    dependencies: List[DependencyModel]
    analysis: AnalysisModel


class BadgeTemplateModel(BaseModel):
    type: str
    label: str
    description: str
    placeholder: str
    example: str


class BadgeRequest(BaseModel):
    type: str
    identifier: str
    label: Optional[str] = None
    message: Optional[str] = None
    color: Optional[str] = None


class BadgeModel(BadgeRequest):
    id: str


class BadgeResponse(BaseModel):
    id: str
    markdown: str


class LicenseModel(BaseModel):
    value: str
    label: str


class ReadmeRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    features: Optional[str] = None
    installation: Optional[str] = None
    usage: Optional[str] = None
    contributing: Optional[str] = None
    licenses: Optional[List[str]] = None
    author: Optional[str] = None
    badges: Optional[List[BadgeModel]] = None


class ReadmeResponse(BaseModel):
    markdown: str


class HealthResponse(BaseModel):
    status: str


def _default_config() -> DevkitConfig:
    return load_config(Path.cwd())


def create_app(
    config_factory: Callable[[], DevkitConfig] = _default_config,
    analyzer_factory: Callable[[], ManifestAnalyzer] = ManifestAnalyzer,
) -> FastAPI:
    """Create the FastAPI application exposing devkit operations."""

    app = FastAPI(title="Devkit Service", version="1.0.0")

    async def get_analyzer() -> ManifestAnalyzer:
        return analyzer_factory()

    async def get_readme_defaults() -> ReadmeDefaults:
        return config_factory().readme

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/analyze", response_model=AnalyzeResponse)
    async def analyze_manifest(
        payload: ManifestRequest,
        analyzer: ManifestAnalyzer = Depends(get_analyzer),
    ) -> Dict[str, Any]:
        result = analyzer.analyze(payload.text)
        return result.to_dict()

    @app.post("/manifest/latest", response_model=ManifestResponse)
    async def update_to_latest(
        payload: ManifestRequest,
        analyzer: ManifestAnalyzer = Depends(get_analyzer),
    ) -> ManifestResponse:
        return ManifestResponse(text=analyzer.rewrite_all_versions_to_latest(payload.text))

    @app.get("/badges", response_model=List[BadgeTemplateModel])
    async def list_badges() -> List[BadgeTemplateModel]:
        return [
            BadgeTemplateModel(
                type=template.type.value,
                label=template.label,
                description=template.description,
                placeholder=template.placeholder,
                example=template.example,
            )
            for template in BADGE_TEMPLATES
        ]

    @app.post("/badges/render", response_model=BadgeResponse)
    async def render_badge(payload: BadgeRequest) -> BadgeResponse:
        badge = create_badge(
            payload.type,
            payload.identifier,
            label=payload.label,
            message=payload.message,
            color=payload.color,
        )
        return BadgeResponse(id=badge.id, markdown=render_badge_markdown(badge))

    @app.get("/licenses", response_model=List[LicenseModel])
    async def list_licenses() -> List[LicenseModel]:
        return [LicenseModel(value=option.value, label=option.label) for option in LICENSE_OPTIONS]

    @app.post("/readme", response_model=ReadmeResponse)
    async def compose_readme(
        payload: ReadmeRequest,
        defaults: ReadmeDefaults = Depends(get_readme_defaults),
    ) -> ReadmeResponse:
        fields = fields_from_defaults(defaults)
        for key in ("name", "description", "features", "installation", "usage", "contributing", "author"):
            value = getattr(payload, key)
            if value is not None:
                setattr(fields, key, value)
        if payload.licenses is not None:
            fields.licenses = normalize_licenses(payload.licenses)
        if payload.badges is not None:
            fields.badges = [
                BadgeInstance(
                    id=badge.id,
                    type=badge.type,
                    identifier=badge.identifier,
                    label=badge.label,
                    message=badge.message,
                    color=badge.color,
                )
                for badge in payload.badges
            ]
        return ReadmeResponse(markdown=compose(fields))

    @app.exception_handler(DevkitError)
    async def devkit_error_handler(_: Any, exc: DevkitError) -> JSONResponse:
        _logger.info("Request rejected: %s", exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000, config: DevkitConfig | None = None
) -> None:  # pragma: no cover - integration path
    import uvicorn

    if config is not None:
        app = create_app(lambda: config)
    else:
        app = create_app()
    uvicorn.run(app, host=host, port=port)
