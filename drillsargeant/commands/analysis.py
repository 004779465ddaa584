from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from drillsargeant.domain.models import AnalysisResult
from drillsargeant.domain.schemas import AnalysisResultSchema, ExportOptions
from drillsargeant.services.analysis_service import AnalysisService
from drillsargeant.services.report_service import ReportService

from .base import Command, PathArgs


class ExportArgs(BaseModel):
    result: AnalysisResultSchema
    options: ExportOptions = Field(default_factory=ExportOptions)


class AnalyzeDirectoryCommand(Command):
    args_model = PathArgs

    def __init__(self, service: AnalysisService):
        self.service = service

    def name(self) -> str:
        return "analyze_directory"

    def run(self, args: PathArgs) -> dict[str, Any]:
        return self.service.analyze_directory(args.path).to_dict()


class ExportReportCommand(Command):
    args_model = ExportArgs

    def __init__(self, service: ReportService):
        self.service = service

    def name(self) -> str:
        return "export_report"

    def run(self, args: ExportArgs) -> dict[str, Any]:
        result = AnalysisResult.from_dict(args.result.model_dump())
        return self.service.export(result, args.options).to_dict()
