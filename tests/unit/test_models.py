"""Tests for the violation and report models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from playstyle.models.errors import Severity, SourceSpan, Violation
from playstyle.models.report import Report


def _violation(file: str, line: int, column: int, rule: str = "quoting") -> Violation:
    return Violation(
        rule=rule,
        message="m",
        span=SourceSpan(file=file, line=line, column=column),
    )


class TestViolation:
    def test_defaults_to_error(self) -> None:
        assert _violation("a.yml", 1, 1).severity is Severity.ERROR

    def test_only_error_severity(self) -> None:
        assert [str(s) for s in Severity] == ["error"]

    def test_immutable(self) -> None:
        violation = _violation("a.yml", 1, 1)
        with pytest.raises(ValidationError):
            violation.rule = "other"  # type: ignore[misc]


class TestReport:
    def test_build_sorts_by_position(self) -> None:
        report = Report.build(
            "a.yml",
            [_violation("a.yml", 3, 1), _violation("a.yml", 1, 9), _violation("a.yml", 1, 2)],
        )
        assert [(v.span.line, v.span.column) for v in report.violations] == [
            (1, 2),
            (1, 9),
            (3, 1),
        ]

    def test_ties_keep_rule_order(self) -> None:
        report = Report.build(
            "a.yml",
            [_violation("a.yml", 2, 5, "quoting"), _violation("a.yml", 2, 5, "mapping-syntax")],
        )
        assert [v.rule for v in report.violations] == ["quoting", "mapping-syntax"]

    def test_conforms(self) -> None:
        assert Report.build("a.yml", []).conforms
        assert not Report.build("a.yml", [_violation("a.yml", 1, 1)]).conforms

    def test_combine_keeps_file_order(self) -> None:
        first = Report.build("b.yml", [_violation("b.yml", 5, 1)])
        second = Report.build("a.yml", [_violation("a.yml", 1, 1)])
        combined = Report.combine([first, Report.build("c.yml", []), second])
        assert combined.files == ("b.yml", "c.yml", "a.yml")
        assert [v.span.file for v in combined.violations] == ["b.yml", "a.yml"]
        assert len(combined.for_file("a.yml")) == 1
        assert len(combined.violations) == 2
