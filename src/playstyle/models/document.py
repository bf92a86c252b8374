"""Immutable document tree produced by the loader. Rules only ever read it."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from playstyle.models.errors import SourceSpan


class NodeKind(StrEnum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


class QuoteStyle(StrEnum):
    PLAIN = "plain"
    SINGLE = "single"
    DOUBLE = "double"
    LITERAL = "literal"
    FOLDED = "folded"

    @property
    def is_quoted(self) -> bool:
        return self in (QuoteStyle.SINGLE, QuoteStyle.DOUBLE)

    @property
    def is_block(self) -> bool:
        return self in (QuoteStyle.LITERAL, QuoteStyle.FOLDED)


class LiteralType(StrEnum):
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    NULL = "null"


@dataclass(frozen=True)
class KeySeparator:
    """Raw spacing found after a mapping key's ``:`` separator.

    ``spaces`` counts blanks between the colon and the value when the value
    starts on the same line (``inline``), or between the colon and the line
    end otherwise.
    """

    span: SourceSpan
    spaces: int
    inline: bool
    comment: bool = False


@dataclass(frozen=True)
class DocumentNode:
    """One mapping, sequence or scalar of the parsed document.

    Mapping children carry the ``key`` node they were stored under, and the
    ``separator`` that joined them when the key is a scalar followed by ``:``.
    An ``alias`` node is the expansion of a ``*name`` reference: its key and
    separator are its own, but its content belongs to the anchor.
    """

    kind: NodeKind
    span: SourceSpan
    value: str | None = None
    style: QuoteStyle | None = None
    literal: LiteralType | None = None
    tag: str | None = None
    children: tuple[DocumentNode, ...] = ()
    key: DocumentNode | None = None
    separator: KeySeparator | None = None
    alias: bool = False

    @property
    def is_scalar(self) -> bool:
        return self.kind is NodeKind.SCALAR

    @property
    def key_name(self) -> str | None:
        """The key this node is stored under, if it is a plain scalar key."""
        if self.key is None or not self.key.is_scalar:
            return None
        return self.key.value

    @property
    def is_multiline(self) -> bool:
        end_line = self.span.end_line if self.span.end_line is not None else self.span.line
        return end_line > self.span.line

    def walk(self) -> Iterator[DocumentNode]:
        """Yield this node and every descendant value node, depth first.

        Alias nodes are yielded but not descended into, so anchored content
        is visited once, at the anchor.
        """
        stack: list[DocumentNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            if not node.alias:
                stack.extend(reversed(node.children))


@dataclass(frozen=True)
class Document:
    """A loaded configuration script."""

    filename: str
    text: str
    explicit_start: bool
    root: DocumentNode | None = None

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def walk(self) -> Iterator[DocumentNode]:
        if self.root is not None:
            yield from self.root.walk()

    def pairs(self) -> Iterator[DocumentNode]:
        """Yield every node stored in a mapping (i.e. every key-value pair)."""
        for node in self.walk():
            if node.key is not None:
                yield node
