"""Domain models for playstyle."""

from playstyle.models.document import (
    Document,
    DocumentNode,
    KeySeparator,
    LiteralType,
    NodeKind,
    QuoteStyle,
)
from playstyle.models.errors import Severity, SourceSpan, Violation
from playstyle.models.report import Report

__all__ = [
    "Document",
    "DocumentNode",
    "KeySeparator",
    "LiteralType",
    "NodeKind",
    "QuoteStyle",
    "Report",
    "Severity",
    "SourceSpan",
    "Violation",
]
