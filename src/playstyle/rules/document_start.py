"""Documents open with an explicit ``---`` marker."""

from __future__ import annotations

from playstyle.models.document import Document
from playstyle.models.errors import SourceSpan, Violation
from playstyle.rules.base import Rule
from playstyle.rules.registry import RuleRegistry


@RuleRegistry.register
class DocumentStartRule(Rule):
    @property
    def name(self) -> str:
        return "document-start"

    @property
    def description(self) -> str:
        return "Start every document with an explicit '---' marker"

    def check(self, document: Document) -> list[Violation]:
        if document.explicit_start or document.root is None:
            return []
        root = document.root.span
        span = SourceSpan(file=root.file, line=root.line, column=root.column)
        return [self.violation(span, "missing document start marker '---'")]
