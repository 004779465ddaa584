from __future__ import annotations

import logging

from drillsargeant.domain.models import AnalysisResult, AnalysisSummary, Issue

logger = logging.getLogger(__name__)

# Reported project size for the sample result
SAMPLE_TOTAL_FILES = 127
SAMPLE_ANALYZED_FILES = 89


def sample_issues() -> list[Issue]:
    return [
        Issue(
            id="security_1",
            title="Potential XSS Vulnerability",
            description="Direct innerHTML assignment without sanitization",
            severity="high",
            issue_type="security",
            file_path="src/components/App.tsx",
            line_number=42,
            code_snippet="element.innerHTML = userInput;",
            recommendation="Use textContent or sanitize input before assignment",
        ),
        Issue(
            id="performance_1",
            title="Inefficient CSS Selector",
            description="Complex CSS selector may impact performance",
            severity="medium",
            issue_type="performance",
            file_path="src/styles/main.css",
            line_number=15,
            code_snippet="div > ul > li:nth-child(odd) > a[href*='example']",
            recommendation="Consider using CSS classes for better performance",
        ),
        Issue(
            id="quality_1",
            title="Unused Variable",
            description="Variable declared but never used",
            severity="low",
            issue_type="quality",
            file_path="src/utils/helpers.js",
            line_number=8,
            code_snippet="const unusedVar = 'not used';",
            recommendation="Remove unused variables to improve code clarity",
        ),
    ]


class AnalysisService:
    """
    Produces the analysis result shown by the desktop front-end.

    The path is only logged: no file under it is read.
    """

    def analyze_directory(self, path: str) -> AnalysisResult:
        logger.info("Analyzing directory: %s", path, extra={"path": path})

        issues = sample_issues()
        summary = self.summarize(issues)

        logger.info(
            "Analysis complete: %d issues",
            summary.total_issues,
            extra={"path": path},
        )
        return AnalysisResult(
            total_files=SAMPLE_TOTAL_FILES,
            analyzed_files=SAMPLE_ANALYZED_FILES,
            issues=issues,
            summary=summary,
        )

    @staticmethod
    def summarize(issues: list[Issue]) -> AnalysisSummary:
        return AnalysisSummary.from_issues(issues)
