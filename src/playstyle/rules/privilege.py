"""Privilege escalation uses ``become``, not the deprecated keywords."""

from __future__ import annotations

from playstyle.models.document import Document
from playstyle.models.errors import Violation
from playstyle.rules.base import Rule
from playstyle.rules.registry import RuleRegistry


@RuleRegistry.register
class PrivilegeEscalationRule(Rule):
    @property
    def name(self) -> str:
        return "privilege-escalation"

    @property
    def description(self) -> str:
        return "Use 'become' instead of the deprecated 'sudo'/'su' keywords"

    def check(self, document: Document) -> list[Violation]:
        replacements = self.settings.deprecated_escalation_keys
        violations: list[Violation] = []
        for node in document.pairs():
            key = node.key_name
            if key is None or key not in replacements or node.key is None:
                continue
            violations.append(
                self.violation(
                    node.key.span,
                    f"'{key}' is deprecated; use '{replacements[key]}' instead",
                )
            )
        return violations
