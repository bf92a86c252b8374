"""Structured violation models with YAML source position tracking."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Severity(StrEnum):
    ERROR = "error"


class SourceSpan(BaseModel):
    """Points to exact location in YAML source for error reporting."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None


class Violation(BaseModel):
    """A single non-conformance found by a rule."""

    model_config = ConfigDict(frozen=True)

    rule: str
    message: str
    span: SourceSpan
    severity: Severity = Severity.ERROR
