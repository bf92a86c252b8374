"""Exactly one space separates a key's colon from its value."""

from __future__ import annotations

import re

from playstyle.models.document import Document, NodeKind, QuoteStyle
from playstyle.models.errors import Violation
from playstyle.rules.base import Rule
from playstyle.rules.registry import RuleRegistry

# ``key:value`` written as a plain sequence item; URLs, ``a::b`` and
# ``host:port`` excluded.
_GLUED_PAIR_RE = re.compile(r"^[A-Za-z_][\w.-]*:(?![/:])(?![0-9]+$)\S")


@RuleRegistry.register
class KeyValueSpacingRule(Rule):
    @property
    def name(self) -> str:
        return "key-value-spacing"

    @property
    def description(self) -> str:
        return "Put exactly one space after the colon of a key-value pair"

    def check(self, document: Document) -> list[Violation]:
        violations: list[Violation] = []
        for node in document.pairs():
            separator = node.separator
            if separator is None:
                continue
            if separator.inline:
                if separator.spaces != 1:
                    violations.append(
                        self.violation(
                            separator.span,
                            f"expected 1 space after colon of '{node.key_name}', "
                            f"found {separator.spaces}",
                        )
                    )
            elif separator.spaces and not separator.comment:
                violations.append(
                    self.violation(
                        separator.span,
                        f"trailing whitespace after colon of '{node.key_name}'",
                    )
                )

        # In block context ``key:value`` parses as a single scalar; next to
        # mapping siblings it is almost certainly a pair missing its space.
        for node in document.walk():
            if node.kind is not NodeKind.SEQUENCE:
                continue
            if not any(child.kind is NodeKind.MAPPING for child in node.children):
                continue
            for item in node.children:
                if (
                    item.is_scalar
                    and not item.alias
                    and item.style is QuoteStyle.PLAIN
                    and _GLUED_PAIR_RE.match(item.value or "")
                ):
                    violations.append(
                        self.violation(item.span, f"missing space after colon in '{item.value}'")
                    )
        return violations
