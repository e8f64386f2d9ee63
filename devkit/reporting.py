"""Plain-text rendering of dependency analysis results."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .models import AnalysisResult

TEMPLATES_DIR = Path(__file__).with_name("templates")
ANALYSIS_TEMPLATE = "analysis.txt.j2"


def _create_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


class AnalysisReportRenderer:
    """Renders an analysis result as a terminal-friendly report."""

    def __init__(self) -> None:
        self._env = _create_env()

    def render(self, result: AnalysisResult) -> str:
        template = self._env.get_template(ANALYSIS_TEMPLATE)
        return template.render(records=result.records, summary=result.summary)


__all__ = ["AnalysisReportRenderer"]
