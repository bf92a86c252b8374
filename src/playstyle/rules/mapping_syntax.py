"""Task parameters are nested mappings, not ``key=value`` strings."""

from __future__ import annotations

import re

from playstyle.models.document import Document, LiteralType
from playstyle.models.errors import Violation
from playstyle.rules.base import Rule
from playstyle.rules.registry import RuleRegistry

_ASSIGNMENT_RE = re.compile(r"(?:^|(?<=\s))[A-Za-z_][\w.]*=(?!=)")
_MIN_ASSIGNMENTS = 2


@RuleRegistry.register
class MappingSyntaxRule(Rule):
    @property
    def name(self) -> str:
        return "mapping-syntax"

    @property
    def description(self) -> str:
        return "Give module parameters as a nested mapping, one key per line"

    def check(self, document: Document) -> list[Violation]:
        free_form = set(self.settings.free_form_keys)
        violations: list[Violation] = []
        for node in document.pairs():
            key = node.key_name
            if key is None or key in free_form:
                continue
            if not node.is_scalar or node.alias or node.literal is not LiteralType.STRING:
                continue
            assignments = _ASSIGNMENT_RE.findall(node.value or "")
            if len(assignments) >= _MIN_ASSIGNMENTS:
                violations.append(
                    self.violation(
                        node.span,
                        f"parameters of '{key}' are written as a key=value string; "
                        f"use a nested mapping",
                    )
                )
        return violations
