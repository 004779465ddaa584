from typing import Literal

from pydantic import BaseModel, Field


class IssueSchema(BaseModel):
    """A single reported finding."""

    id: str
    title: str
    description: str
    severity: str = Field(..., description="Priority label, e.g. `high`, `medium`, `low`.")
    issue_type: str = Field(..., description="Category tag, e.g. `security`, `performance`, `quality`.")
    file_path: str
    line_number: int = Field(..., description="1-based line number.")
    code_snippet: str
    recommendation: str


class AnalysisSummarySchema(BaseModel):
    """Issue counts by severity."""

    total_issues: int
    high_severity: int
    medium_severity: int
    low_severity: int


class AnalysisResultSchema(BaseModel):
    """Result of a directory analysis."""

    total_files: int
    analyzed_files: int
    issues: list[IssueSchema]
    summary: AnalysisSummarySchema


class ExportOptions(BaseModel):
    format: Literal["json", "csv", "html"] = "json"

    include_code_snippets: bool = True
    include_recommendations: bool = True

    # "all" or an exact severity / issue_type label
    severity_filter: str = "all"
    type_filter: str = "all"
