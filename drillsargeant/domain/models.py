from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class Issue:
    id: str
    title: str
    description: str
    # Free-form labels: samples use high/medium/low and security/performance/quality
    severity: str
    issue_type: str
    file_path: str
    line_number: int
    code_snippet: str
    recommendation: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Issue:
        return cls(**{k: data[k] for k in cls.__dataclass_fields__})


@dataclass
class AnalysisSummary:
    total_issues: int
    high_severity: int
    medium_severity: int
    low_severity: int

    @classmethod
    def from_issues(cls, issues: list[Issue]) -> AnalysisSummary:
        return cls(
            total_issues=len(issues),
            high_severity=sum(1 for i in issues if i.severity == "high"),
            medium_severity=sum(1 for i in issues if i.severity == "medium"),
            low_severity=sum(1 for i in issues if i.severity == "low"),
        )


@dataclass
class AnalysisResult:
    total_files: int
    analyzed_files: int
    issues: list[Issue]
    summary: AnalysisSummary

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisResult:
        issues = [Issue.from_dict(i) for i in data.get("issues", [])]
        summary = data.get("summary")
        return cls(
            total_files=data["total_files"],
            analyzed_files=data["analyzed_files"],
            issues=issues,
            summary=AnalysisSummary(**summary) if summary else AnalysisSummary.from_issues(issues),
        )


@dataclass
class CommandResult:
    """Outcome of a command invocation: either a value or an error message."""

    ok: bool
    value: Any = None
    error: str | None = None

    @classmethod
    def success(cls, value: Any) -> CommandResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> CommandResult:
        return cls(ok=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ExportedReport:
    format: str
    media_type: str
    filename: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
