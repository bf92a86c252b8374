"""End-to-end checks: YAML text in, report out."""

from __future__ import annotations

from pathlib import Path

import pytest

from playstyle.parser.loader import ParseError
from playstyle.reporter import render
from playstyle.service.checker import Checker
from tests.conftest import BAD_PLAYBOOK, GOOD_PLAYBOOK, MALFORMED_PLAYBOOK, SAMPLE_TASKS_YAML


class TestDocumentedExamples:
    def test_missing_marker_and_unquoted_name(self, checker: Checker) -> None:
        report = checker.check_string("- name: start robot\n  become: true")
        assert [(v.rule, v.span.line, v.span.column) for v in report.violations] == [
            ("document-start", 1, 1),
            ("quoting", 1, 9),
        ]
        assert not report.conforms

    def test_quoted_yes(self, checker: Checker) -> None:
        report = checker.check_string("---\n- name: 'x'\n  become: 'yes'")
        assert [(v.rule, v.span.line, v.span.column) for v in report.violations] == [
            ("boolean-literal", 3, 11),
        ]

    def test_good_playbook_conforms(self, checker: Checker) -> None:
        report = checker.check_file(GOOD_PLAYBOOK)
        assert report.violations == ()
        assert report.conforms

    def test_sample_tasks_conform(self, checker: Checker) -> None:
        assert checker.check_string(SAMPLE_TASKS_YAML).conforms

    def test_bad_playbook(self, checker: Checker) -> None:
        report = checker.check_file(BAD_PLAYBOOK)
        assert [(v.rule, v.span.line, v.span.column) for v in report.violations] == [
            ("document-start", 1, 1),
            ("quoting", 1, 9),
            ("quoting", 2, 12),
            ("mapping-syntax", 2, 12),
            ("privilege-escalation", 3, 3),
            ("boolean-literal", 3, 9),
        ]


class TestPlaybookIdioms:
    def test_anchored_values_reported_once(self, checker: Checker) -> None:
        content = (
            "---\n"
            "- name: 'x'\n"
            "  vars: &common {owner:  'root', mode: \"x\"}\n"
            "- name: 'y'\n"
            "  vars: *common\n"
            "- name: 'z'\n"
            "  vars: *common\n"
        )
        report = checker.check_string(content)
        assert [(v.rule, v.span.line, v.span.column) for v in report.violations] == [
            ("key-value-spacing", 3, 23),
            ("quoting", 3, 40),
        ]

    def test_aliased_scalar_reported_once(self, checker: Checker) -> None:
        content = "---\n- name: &title start robot\n- name: *title\n"
        report = checker.check_string(content)
        assert [(v.rule, v.span.line) for v in report.violations] == [("quoting", 2)]

    def test_quoted_words_in_messages(self, checker: Checker) -> None:
        content = "---\n- name: 'x'\n  debug:\n    msg: 'no'\n"
        assert checker.check_string(content).conforms

    def test_quoted_file_mode_and_version(self, checker: Checker) -> None:
        content = "---\n- name: 'x'\n  file:\n    mode: '0644'\n  pip:\n    version: '1.10'\n"
        assert checker.check_string(content).conforms

    def test_host_and_port_item(self, checker: Checker) -> None:
        content = "---\n- name: 'x'\n- localhost:8080\n"
        report = checker.check_string(content)
        assert [v.rule for v in report.violations] == ["quoting"]


class TestCheckerBehaviour:
    def test_idempotent(self, checker: Checker) -> None:
        first = checker.check_file(BAD_PLAYBOOK)
        second = checker.check_file(BAD_PLAYBOOK)
        assert first == second
        assert render(first) == render(second)

    def test_parse_error_propagates(self, checker: Checker) -> None:
        with pytest.raises(ParseError):
            checker.check_file(MALFORMED_PLAYBOOK)

    def test_ignore(self) -> None:
        checker = Checker(ignore=["document-start", "quoting"])
        report = checker.check_string("- name: start robot\n  become: true")
        assert report.conforms

    def test_check_files_keeps_order(self, checker: Checker, tmp_path: Path) -> None:
        paths = []
        for i in range(6):
            path = tmp_path / f"play{i}.yml"
            body = "---\n- name: 'x'\n" if i % 2 else "- name: 'x'\n"
            path.write_text(body, encoding="utf-8")
            paths.append(path)
        results = checker.check_files(paths, max_workers=3)
        assert [r.path for r in results] == [str(p) for p in paths]
        assert [r.report.conforms for r in results if r.report] == [
            False, True, False, True, False, True,
        ]

    def test_check_files_isolates_parse_errors(self, checker: Checker) -> None:
        results = checker.check_files([GOOD_PLAYBOOK, MALFORMED_PLAYBOOK, BAD_PLAYBOOK])
        assert [r.ok for r in results] == [True, False, True]
        assert results[1].report is None
        assert isinstance(results[1].error, ParseError)
