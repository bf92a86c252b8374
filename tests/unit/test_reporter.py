"""Tests for report rendering."""

from __future__ import annotations

import json

import pytest

from playstyle.models.errors import SourceSpan, Violation
from playstyle.models.report import Report
from playstyle.reporter import OutputFormat, render


def _violation(file: str, line: int, column: int, rule: str, message: str) -> Violation:
    return Violation(
        rule=rule,
        message=message,
        span=SourceSpan(file=file, line=line, column=column),
    )


@pytest.fixture
def report() -> Report:
    return Report.combine(
        [
            Report.build(
                "site.yml",
                [
                    _violation("site.yml", 12, 3, "privilege-escalation", "'sudo' is deprecated"),
                    _violation("site.yml", 1, 1, "document-start", "missing marker"),
                ],
            ),
            Report.build("clean.yml", []),
        ]
    )


class TestTextFormat:
    def test_grouped_and_sorted(self, report: Report) -> None:
        text = render(report, OutputFormat.TEXT)
        assert text.splitlines() == [
            "site.yml",
            "  1:1   error  missing marker  (document-start)",
            "  12:3  error  'sudo' is deprecated  (privilege-escalation)",
            "",
            "2 violations in 1 file",
        ]

    def test_conforming(self) -> None:
        text = render(Report.build("clean.yml", []), "text")
        assert text == "No violations found in 1 file"

    def test_default_format_is_text(self, report: Report) -> None:
        assert render(report) == render(report, "text")


class TestJsonFormat:
    def test_records(self, report: Report) -> None:
        records = json.loads(render(report, OutputFormat.JSON))
        assert [r["rule"] for r in records] == ["document-start", "privilege-escalation"]
        assert records[0] == {
            "file": "site.yml",
            "line": 1,
            "column": 1,
            "end_line": None,
            "end_column": None,
            "rule": "document-start",
            "severity": "error",
            "message": "missing marker",
        }

    def test_empty(self) -> None:
        assert json.loads(render(Report.build("clean.yml", []), "json")) == []

    def test_unknown_format(self, report: Report) -> None:
        with pytest.raises(ValueError):
            render(report, "xml")
