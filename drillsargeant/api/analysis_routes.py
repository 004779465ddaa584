from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from drillsargeant.domain.models import AnalysisResult
from drillsargeant.domain.schemas import AnalysisResultSchema, ExportOptions
from drillsargeant.services.analysis_service import AnalysisService
from drillsargeant.services.report_service import ReportService

router = APIRouter(prefix="/api", tags=["analysis"])

_analysis_service = AnalysisService()
_report_service = ReportService()


# ── Request / Response schemas ────────────────────────────────────
class AnalyzeRequest(BaseModel):
    """Request body for analysing a project directory."""

    path: str = Field(
        ...,
        description="Directory chosen in the front-end. Any string is accepted.",
        json_schema_extra={"examples": ["/home/me/projects/my-app"]},
    )


class ExportRequest(BaseModel):
    """Request body for exporting an analysis result."""

    result: AnalysisResultSchema
    options: ExportOptions = Field(default_factory=ExportOptions)


class ExportResponse(BaseModel):
    """Rendered report, ready to be saved by the front-end."""

    format: str
    media_type: str
    filename: str
    content: str


# ── Endpoints ─────────────────────────────────────────────────────
@router.post(
    "/analyze",
    response_model=AnalysisResultSchema,
    summary="Analyze a directory",
    response_description="Issues found with severity summary",
)
def analyze(req: AnalyzeRequest) -> dict[str, Any]:
    """Return the analysis result for a project directory.

    The directory is not read: the same sample issues are reported
    for every path.
    """
    return _analysis_service.analyze_directory(req.path).to_dict()


@router.post(
    "/report/export",
    response_model=ExportResponse,
    summary="Export a report",
    response_description="Report content in the requested format",
)
def export_report(req: ExportRequest) -> dict[str, Any]:
    """Render an analysis result as **JSON**, **CSV** or **HTML**."""
    result = AnalysisResult.from_dict(req.result.model_dump())
    return _report_service.export(result, req.options).to_dict()
