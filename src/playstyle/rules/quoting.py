"""String scalars are single-quoted; numbers are never quoted.

Double quotes are reserved for strings that contain a single quote or need
escape sequences.  Strings spanning several lines use a block style.
"""

from __future__ import annotations

from playstyle.models.document import Document, DocumentNode, LiteralType, QuoteStyle
from playstyle.models.errors import Violation
from playstyle.rules.base import Rule
from playstyle.rules.registry import RuleRegistry


def needs_escapes(value: str) -> bool:
    """Whether *value* can only be written with escape sequences."""
    return not all(ch.isprintable() for ch in value)


@RuleRegistry.register
class QuotingRule(Rule):
    @property
    def name(self) -> str:
        return "quoting"

    @property
    def description(self) -> str:
        return "Quote strings with single quotes; never quote numbers or booleans"

    def check(self, document: Document) -> list[Violation]:
        exempt = set(self.settings.quoting_exempt_keys)
        violations: list[Violation] = []
        for node in document.walk():
            if not node.is_scalar or node.alias or node.value is None or node.style is None:
                continue
            if node.key_name in exempt:
                continue
            # Custom tags (e.g. ``!vault``) carry their own encoding.
            if node.tag is not None and node.tag.startswith("!"):
                continue
            problem = self._problem(node)
            if problem is not None:
                violations.append(self.violation(node.span, problem))
        return violations

    def _problem(self, node: DocumentNode) -> str | None:
        value, style = node.value or "", node.style
        if self.is_boolean(node) or node.literal is LiteralType.NULL:
            return None
        if node.literal is LiteralType.NUMBER:
            if not style.is_quoted:
                return None
            # File modes and versions are strings that happen to look numeric.
            if node.key_name not in self.settings.numeric_string_keys:
                return f"number {value} must not be quoted"
        if style.is_block:
            return None
        if node.is_multiline:
            return "multi-line string must use folded block style ('>')"
        if needs_escapes(value) or "'" in value:
            if style is QuoteStyle.DOUBLE:
                return None
            reason = "escape sequences" if needs_escapes(value) else "single quotes"
            return f"string containing {reason} must use double quotes"
        if style is QuoteStyle.SINGLE:
            return None
        if style is QuoteStyle.DOUBLE:
            return "string must use single quotes instead of double quotes"
        return "string must be quoted with single quotes"
