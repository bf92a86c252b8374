"""Aggregated checker results."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from playstyle.models.errors import Violation


class Report(BaseModel):
    """Result of checking one or more documents.

    Violations are kept sorted by file, then line, then column.  Ties keep
    the order in which the rules reported them.
    """

    model_config = ConfigDict(frozen=True)

    files: tuple[str, ...] = ()
    violations: tuple[Violation, ...] = ()

    @classmethod
    def build(cls, file: str, violations: Iterable[Violation]) -> Report:
        ordered = sorted(violations, key=lambda v: (v.span.line, v.span.column))
        return cls(files=(file,), violations=tuple(ordered))

    @classmethod
    def combine(cls, reports: Iterable[Report]) -> Report:
        """Merge per-file reports into one, preserving file order."""
        files: list[str] = []
        violations: list[Violation] = []
        for report in reports:
            files.extend(f for f in report.files if f not in files)
            violations.extend(report.violations)
        position = {name: i for i, name in enumerate(files)}
        violations.sort(
            key=lambda v: (position.get(v.span.file, len(files)), v.span.line, v.span.column)
        )
        return cls(files=tuple(files), violations=tuple(violations))

    @property
    def conforms(self) -> bool:
        return len(self.violations) == 0

    def for_file(self, file: str) -> list[Violation]:
        return [v for v in self.violations if v.span.file == file]
