"""Tests for /api/analyze and /api/report/export."""

import csv
import io
import json


class TestAnalyzeEndpoint:
    def test_returns_sample_result(self, client):
        res = client.post("/api/analyze", json={"path": "/home/me/app"})
        assert res.status_code == 200
        data = res.json()
        assert data["total_files"] == 127
        assert data["analyzed_files"] == 89
        assert [i["id"] for i in data["issues"]] == ["security_1", "performance_1", "quality_1"]
        assert data["summary"] == {
            "total_issues": 3,
            "high_severity": 1,
            "medium_severity": 1,
            "low_severity": 1,
        }

    def test_issue_fields(self, client):
        issue = client.post("/api/analyze", json={"path": ""}).json()["issues"][0]
        assert set(issue) == {
            "id",
            "title",
            "description",
            "severity",
            "issue_type",
            "file_path",
            "line_number",
            "code_snippet",
            "recommendation",
        }

    def test_same_result_for_any_path(self, client, tmp_path):
        a = client.post("/api/analyze", json={"path": str(tmp_path)}).json()
        b = client.post("/api/analyze", json={"path": "/nonexistent"}).json()
        assert a == b

    def test_missing_path_returns_422(self, client):
        assert client.post("/api/analyze", json={}).status_code == 422


class TestExportEndpoint:
    def test_default_format_is_json(self, client, sample_result):
        res = client.post("/api/report/export", json={"result": sample_result})
        assert res.status_code == 200
        data = res.json()
        assert data["format"] == "json"
        assert json.loads(data["content"]) == sample_result

    def test_csv(self, client, sample_result):
        res = client.post(
            "/api/report/export",
            json={"result": sample_result, "options": {"format": "csv"}},
        )
        data = res.json()
        assert data["filename"] == "drillsargeant-report.csv"
        rows = list(csv.reader(io.StringIO(data["content"])))
        assert ["Issues"] in rows
        assert ["File Summary"] in rows

    def test_html(self, client, sample_result):
        res = client.post(
            "/api/report/export",
            json={
                "result": sample_result,
                "options": {"format": "html", "include_code_snippets": False, "include_recommendations": False},
            },
        )
        content = res.json()["content"]
        assert "<title>DrillSargeant Code Analysis Report</title>" in content
        assert "code-snippet\">" not in content
        assert "class=\"suggestion\"" not in content
        assert "Use textContent or sanitize input before assignment" not in content

    def test_filters(self, client, sample_result):
        res = client.post(
            "/api/report/export",
            json={"result": sample_result, "options": {"severity_filter": "medium"}},
        )
        data = json.loads(res.json()["content"])
        assert [i["id"] for i in data["issues"]] == ["performance_1"]
        assert data["summary"]["total_issues"] == 1

    def test_unknown_format_returns_422(self, client, sample_result):
        res = client.post(
            "/api/report/export",
            json={"result": sample_result, "options": {"format": "pdf"}},
        )
        assert res.status_code == 422

    def test_malformed_result_returns_422(self, client):
        res = client.post("/api/report/export", json={"result": {"issues": []}})
        assert res.status_code == 422
