"""Runs the registered style rules over a document."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from playstyle.models.document import Document
from playstyle.models.errors import Violation
from playstyle.rules import Rule, RuleRegistry
from playstyle.settings import Settings

logger = logging.getLogger("playstyle.engine")


class RuleEngine:
    """Holds an ordered set of rules and fans a document out to each of them."""

    def __init__(
        self,
        settings: Settings | None = None,
        select: Iterable[str] | None = None,
        ignore: Iterable[str] = (),
        rules: list[Rule] | None = None,
    ) -> None:
        if rules is None:
            rules = RuleRegistry.create(settings, select=select, ignore=ignore)
        self._rules = rules

    @property
    def rules(self) -> list[Rule]:
        return list(self._rules)

    def evaluate(self, document: Document) -> list[Violation]:
        """Concatenate every rule's violations in rule declaration order."""
        violations: list[Violation] = []
        for rule in self._rules:
            found = rule.check(document)
            if found:
                logger.debug(
                    "%s: %s found %d violation(s)", document.filename, rule.name, len(found)
                )
            violations.extend(found)
        return violations
