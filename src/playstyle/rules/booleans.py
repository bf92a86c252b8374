"""Booleans are spelled exactly ``true`` or ``false``."""

from __future__ import annotations

from playstyle.models.document import Document, DocumentNode, QuoteStyle
from playstyle.models.errors import Violation
from playstyle.rules.base import Rule
from playstyle.rules.registry import RuleRegistry

_TRUTHY = frozenset({"true", "yes", "on", "1"})
_QUOTES = {QuoteStyle.SINGLE: "'", QuoteStyle.DOUBLE: '"'}


def written(node: DocumentNode) -> str:
    """Render a scalar the way it appears in the source."""
    quote = _QUOTES.get(node.style, "") if node.style is not None else ""
    return f"{quote}{node.value}{quote}"


@RuleRegistry.register
class BooleanLiteralRule(Rule):
    @property
    def name(self) -> str:
        return "boolean-literal"

    @property
    def description(self) -> str:
        return "Write booleans as unquoted 'true' or 'false'"

    def check(self, document: Document) -> list[Violation]:
        violations: list[Violation] = []
        for node in document.walk():
            if node.alias or not self.is_boolean(node) or self.is_canonical_boolean(node):
                continue
            canonical = "true" if (node.value or "").lower() in _TRUTHY else "false"
            violations.append(
                self.violation(
                    node.span,
                    f"boolean {written(node)} must be written as {canonical}",
                )
            )
        return violations
