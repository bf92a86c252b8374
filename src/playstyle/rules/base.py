"""Abstract base rule: a named, stateless check over a loaded document."""

from __future__ import annotations

from abc import ABC, abstractmethod

from playstyle.models.document import Document, DocumentNode, LiteralType, QuoteStyle
from playstyle.models.errors import Severity, SourceSpan, Violation
from playstyle.settings import Settings

CANONICAL_BOOLEANS = ("true", "false")


class Rule(ABC):
    """Abstract base for all style rules.

    Rules never mutate the document and keep no state between calls, so one
    instance may inspect many documents, concurrently if need be.  A node of
    unexpected shape is skipped rather than reported or raised on.
    """

    severity: Severity = Severity.ERROR

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def description(self) -> str: ...

    @abstractmethod
    def check(self, document: Document) -> list[Violation]:
        """Return every violation of this rule found in *document*."""

    def violation(self, span: SourceSpan, message: str) -> Violation:
        return Violation(rule=self.name, message=message, span=span, severity=self.severity)

    def is_boolean(self, node: DocumentNode) -> bool:
        """Whether *node* holds a boolean value, however it was spelled.

        Plain words count everywhere.  Quoted words and ``1``/``0`` only count
        under a key known to take a boolean; elsewhere they are strings.
        """
        if not node.is_scalar or node.style is None or node.style.is_block:
            return False
        if node.literal is LiteralType.BOOLEAN:
            return node.style is QuoteStyle.PLAIN or node.key_name in self.settings.boolean_keys
        return (
            node.literal is LiteralType.NUMBER
            and node.value in ("0", "1")
            and node.key_name in self.settings.boolean_keys
        )

    @staticmethod
    def is_canonical_boolean(node: DocumentNode) -> bool:
        return node.style is QuoteStyle.PLAIN and node.value in CANONICAL_BOOLEANS
