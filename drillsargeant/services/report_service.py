from __future__ import annotations

import csv
import html
import io
import json
import logging
from dataclasses import replace
from datetime import datetime, timezone

from drillsargeant.domain.models import AnalysisResult, AnalysisSummary, ExportedReport, Issue
from drillsargeant.domain.schemas import ExportOptions

logger = logging.getLogger(__name__)

REPORT_TITLE = "DrillSargeant Code Analysis Report"

_MEDIA_TYPES = {
    "json": "application/json",
    "csv": "text/csv",
    "html": "text/html",
}

_HTML_STYLE = """
body { font-family: sans-serif; margin: 2rem; color: #222; }
.summary-grid { display: flex; gap: 1rem; }
.summary-card { border: 1px solid #ddd; border-radius: 6px; padding: 0.5rem 1rem; }
.issue { border-left: 4px solid #999; margin: 1rem 0; padding: 0.5rem 1rem; }
.severity-high { border-color: #c0392b; }
.severity-medium { border-color: #e67e22; }
.severity-low { border-color: #2980b9; }
.code-snippet { background: #f4f4f4; font-family: monospace; padding: 0.5rem; white-space: pre-wrap; }
"""


class ReportService:
    """
    Renders an analysis result into a downloadable report.
    """

    def export(self, result: AnalysisResult, options: ExportOptions | None = None) -> ExportedReport:
        options = options or ExportOptions()
        fmt = options.format
        result = self.filter_result(result, options)

        if fmt == "json":
            content = self.to_json(result)
        elif fmt == "csv":
            content = self.to_csv(result, options)
        elif fmt == "html":
            content = self.to_html(result, options)
        else:
            raise ValueError(f"Unsupported report format '{fmt}'")

        logger.info("Exported %s report with %d issues", fmt, len(result.issues))
        return ExportedReport(
            format=fmt,
            media_type=_MEDIA_TYPES[fmt],
            filename=f"drillsargeant-report.{fmt}",
            content=content,
        )

    @staticmethod
    def filter_issues(issues: list[Issue], options: ExportOptions) -> list[Issue]:
        return [
            i
            for i in issues
            if options.severity_filter in ("all", i.severity)
            and options.type_filter in ("all", i.issue_type)
        ]

    def filter_result(self, result: AnalysisResult, options: ExportOptions) -> AnalysisResult:
        """Keep only the issues matching the filters; the summary follows the kept issues."""
        if options.severity_filter == "all" and options.type_filter == "all":
            return result
        issues = self.filter_issues(result.issues, options)
        return replace(result, issues=issues, summary=AnalysisSummary.from_issues(issues))

    @staticmethod
    def to_json(result: AnalysisResult) -> str:
        return json.dumps(result.to_dict(), indent=2)

    @staticmethod
    def file_summary(issues: list[Issue]) -> list[dict]:
        """Issue counts per file, in order of first appearance."""
        by_file: dict[str, dict] = {}
        for issue in issues:
            row = by_file.setdefault(
                issue.file_path,
                {"file": issue.file_path, "issues": 0, "high": 0, "medium": 0, "low": 0},
            )
            row["issues"] += 1
            if issue.severity in ("high", "medium", "low"):
                row[issue.severity] += 1
        return list(by_file.values())

    def to_csv(self, result: AnalysisResult, options: ExportOptions) -> str:
        buf = io.StringIO()
        w = csv.writer(buf, lineterminator="\n")
        s = result.summary

        w.writerow(["Summary"])
        w.writerow(["Total Issues", s.total_issues])
        w.writerow(["High Severity", s.high_severity])
        w.writerow(["Medium Severity", s.medium_severity])
        w.writerow(["Low Severity", s.low_severity])
        w.writerow(["Total Files", result.total_files])
        w.writerow(["Analyzed Files", result.analyzed_files])
        w.writerow([])

        header = ["Severity", "Type", "File", "Line", "Title", "Description"]
        if options.include_code_snippets:
            header.append("Code Snippet")
        if options.include_recommendations:
            header.append("Recommendation")

        w.writerow(["Issues"])
        w.writerow(header)
        for i in result.issues:
            row = [i.severity, i.issue_type, i.file_path, i.line_number, i.title, i.description]
            if options.include_code_snippets:
                row.append(i.code_snippet)
            if options.include_recommendations:
                row.append(i.recommendation)
            w.writerow(row)
        w.writerow([])

        w.writerow(["File Summary"])
        w.writerow(["File", "Issues", "High", "Medium", "Low"])
        for f in self.file_summary(result.issues):
            w.writerow([f["file"], f["issues"], f["high"], f["medium"], f["low"]])

        return buf.getvalue()

    def to_html(self, result: AnalysisResult, options: ExportOptions) -> str:
        e = html.escape
        s = result.summary
        generated = datetime.now(tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")

        cards = [
            ("Total Issues", s.total_issues),
            ("High Severity", s.high_severity),
            ("Medium Severity", s.medium_severity),
            ("Low Severity", s.low_severity),
            ("Analyzed Files", f"{result.analyzed_files}/{result.total_files}"),
        ]
        cards_html = "\n".join(
            f'<div class="summary-card"><h3>{label}</h3><div>{value}</div></div>'
            for label, value in cards
        )

        blocks = []
        for i in result.issues:
            parts = [
                f'<div class="issue severity-{e(i.severity)}" data-type="{e(i.issue_type)}">',
                f'<div class="issue-title">{e(i.title)}</div>',
                f'<div class="issue-meta">{e(i.severity.upper())} | {e(i.issue_type)} | '
                f"{e(i.file_path)}:{i.line_number}</div>",
                f'<div class="issue-description">{e(i.description)}</div>',
            ]
            if options.include_code_snippets and i.code_snippet:
                parts.append(f'<div class="code-snippet">{e(i.code_snippet)}</div>')
            if options.include_recommendations and i.recommendation:
                parts.append(
                    f'<div class="suggestion"><strong>Suggestion:</strong> {e(i.recommendation)}</div>'
                )
            parts.append("</div>")
            blocks.append("\n".join(parts))
        issues_html = "\n".join(blocks)

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<title>{REPORT_TITLE}</title>
<style>{_HTML_STYLE}</style>
</head>
<body>
<header>
<h1>{REPORT_TITLE}</h1>
<p class="timestamp">Generated on {generated}</p>
</header>
<section class="summary">
<h2>Summary</h2>
<div class="summary-grid">
{cards_html}
</div>
</section>
<section class="issues">
<h2>Issues</h2>
{issues_html}
</section>
</body>
</html>
"""
