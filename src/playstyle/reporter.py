"""Renders a report as human-readable text or as JSON records."""

from __future__ import annotations

import json
from enum import StrEnum

from playstyle.models.report import Report


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


def render(report: Report, fmt: OutputFormat | str = OutputFormat.TEXT) -> str:
    """Render *report* in the requested format."""
    fmt = OutputFormat(fmt)
    if fmt is OutputFormat.JSON:
        return render_json(report)
    return render_text(report)


def render_text(report: Report) -> str:
    """Group violations by file, one ``line:column`` entry per violation.

    Example::

        site.yml
          1:1  error  missing document start marker '---'  (document-start)

        1 violation in 1 file
    """
    lines: list[str] = []
    files_with_violations = 0
    for file in report.files:
        violations = report.for_file(file)
        if not violations:
            continue
        files_with_violations += 1
        lines.append(file)
        width = max(len(f"{v.span.line}:{v.span.column}") for v in violations)
        for v in violations:
            position = f"{v.span.line}:{v.span.column}".ljust(width)
            lines.append(f"  {position}  {v.severity}  {v.message}  ({v.rule})")
        lines.append("")

    count = len(report.violations)
    if count == 0:
        checked = len(report.files)
        lines.append(f"No violations found in {checked} file{'s' if checked != 1 else ''}")
    else:
        lines.append(
            f"{count} violation{'s' if count != 1 else ''} in "
            f"{files_with_violations} file{'s' if files_with_violations != 1 else ''}"
        )
    return "\n".join(lines)


def render_json(report: Report) -> str:
    """A JSON list of violation records."""
    records = [
        {
            "file": v.span.file,
            "line": v.span.line,
            "column": v.span.column,
            "end_line": v.span.end_line,
            "end_column": v.span.end_column,
            "rule": v.rule,
            "severity": str(v.severity),
            "message": v.message,
        }
        for v in report.violations
    ]
    return json.dumps(records, indent=2)
