"""YAML loader with position tracking and raw-style preservation.

The loader never normalizes its input: every scalar keeps the quote style it
was written with, and every mapping pair keeps the raw spacing that followed
its ``:`` separator.  Rules rely on both.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError, YAMLError
from ruamel.yaml.events import DocumentStartEvent
from ruamel.yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

from playstyle.models.document import (
    Document,
    DocumentNode,
    KeySeparator,
    LiteralType,
    NodeKind,
    QuoteStyle,
)
from playstyle.models.errors import SourceSpan
from playstyle.settings import Settings

logger = logging.getLogger("playstyle.parser")

BOOLEAN_WORDS = frozenset({"true", "false", "yes", "no", "on", "off"})
_NULL_WORDS = frozenset({"", "~", "null", "Null", "NULL"})
_NUMBER_RE = re.compile(
    r"""^[-+]?(?:
        0x[0-9a-fA-F_]+
      | 0o[0-7_]+
      | [0-9][0-9_]*(?:\.[0-9_]*)?(?:[eE][-+]?[0-9]+)?
      | \.[0-9][0-9_]*(?:[eE][-+]?[0-9]+)?
      | \.(?:inf|Inf|INF)
    )$|^\.(?:nan|NaN|NAN)$""",
    re.VERBOSE,
)

_STYLES = {
    None: QuoteStyle.PLAIN,
    "'": QuoteStyle.SINGLE,
    '"': QuoteStyle.DOUBLE,
    "|": QuoteStyle.LITERAL,
    ">": QuoteStyle.FOLDED,
}


class ParseError(Exception):
    """Raised when a document cannot be turned into a node tree.

    Fatal to that document: no partial report is produced.
    """

    def __init__(self, message: str, span: SourceSpan) -> None:
        self.message = message
        self.span = span
        super().__init__(f"{span.file}:{span.line}:{span.column}: {message}")


class YAMLSafetyError(ParseError):
    """Raised when YAML input violates safety constraints.

    Covers oversized documents, excessive nesting and alias expansion that
    produces too many nodes (e.g. billion-laughs payloads).
    """


def classify_literal(value: str, style: QuoteStyle) -> LiteralType:
    """Classify what the author wrote, independent of quoting."""
    if style.is_block:
        return LiteralType.STRING
    if value.lower() in BOOLEAN_WORDS:
        return LiteralType.BOOLEAN
    if _NUMBER_RE.match(value):
        return LiteralType.NUMBER
    if style is QuoteStyle.PLAIN and value in _NULL_WORDS:
        return LiteralType.NULL
    return LiteralType.STRING


class _TreeBuilder:
    """Converts a composed ruamel.yaml node graph into a ``DocumentNode`` tree."""

    def __init__(self, text: str, filename: str, max_nodes: int, max_depth: int) -> None:
        self._text = text
        self._filename = filename
        self._max_nodes = max_nodes
        self._max_depth = max_depth
        self._count = 0
        # Nodes on the current path; an alias back into it is a cycle.
        self._active: set[int] = set()
        # Nodes already expanded once; later visits come from aliases.
        self._built: set[int] = set()

    @property
    def node_count(self) -> int:
        return self._count

    def build(
        self,
        node: Node,
        depth: int = 0,
        key: DocumentNode | None = None,
        separator: KeySeparator | None = None,
    ) -> DocumentNode:
        self._count += 1
        if self._count > self._max_nodes:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum node count ({self._max_nodes:,})",
                self.span(node),
            )
        if depth > self._max_depth:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum nesting depth ({self._max_depth})",
                self.span(node),
            )
        if id(node) in self._active:
            raise ParseError("recursive alias", self.span(node))

        alias = id(node) in self._built
        self._built.add(id(node))
        tag = str(node.tag) if node.tag is not None else None
        if isinstance(node, ScalarNode):
            style = _STYLES.get(node.style, QuoteStyle.PLAIN)
            return DocumentNode(
                kind=NodeKind.SCALAR,
                span=self.span(node),
                value=node.value,
                style=style,
                literal=classify_literal(node.value, style),
                tag=tag,
                key=key,
                separator=separator,
                alias=alias,
            )

        self._active.add(id(node))
        try:
            if isinstance(node, MappingNode):
                kind = NodeKind.MAPPING
                children = tuple(
                    self.build(
                        value_node,
                        depth + 1,
                        key=self.build(key_node, depth + 1),
                        separator=self.separator(key_node),
                    )
                    for key_node, value_node in node.value
                )
            elif isinstance(node, SequenceNode):
                kind = NodeKind.SEQUENCE
                children = tuple(self.build(item, depth + 1) for item in node.value)
            else:
                raise ParseError(f"unsupported node type {type(node).__name__}", self.span(node))
        finally:
            self._active.discard(id(node))

        return DocumentNode(
            kind=kind,
            span=self.span(node),
            tag=tag,
            children=children,
            key=key,
            separator=separator,
            alias=alias,
        )

    def span(self, node: Node) -> SourceSpan:
        start, end = node.start_mark, node.end_mark
        return SourceSpan(
            file=self._filename,
            line=start.line + 1,
            column=start.column + 1,
            end_line=end.line + 1,
            end_column=end.column + 1,
        )

    def separator(self, key: Node) -> KeySeparator | None:
        """Measure the blanks after the ``:`` that follows *key* in the raw text."""
        if not isinstance(key, ScalarNode) or key.style in ("|", ">"):
            return None
        text = self._text
        i = key.end_mark.index
        while i < len(text) and text[i] in " \t":
            i += 1
        if i >= len(text) or text[i] != ":":
            return None
        colon = i
        j = colon + 1
        while j < len(text) and text[j] in " \t":
            j += 1
        following = text[j] if j < len(text) else "\n"
        return KeySeparator(
            span=self._span_at(colon),
            spaces=j - colon - 1,
            inline=following not in "\r\n#",
            comment=following == "#",
        )

    def _span_at(self, index: int) -> SourceSpan:
        line_start = self._text.rfind("\n", 0, index) + 1
        return SourceSpan(
            file=self._filename,
            line=self._text.count("\n", 0, index) + 1,
            column=index - line_start + 1,
        )


class DocumentLoader:
    """YAML loader producing ``Document`` trees with source positions.

    Uses ruamel.yaml, which keeps marks and scalar styles on every composed
    node.  A fresh parser is created per call, so one loader may be shared
    between worker threads.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or Settings()
        self._max_size = settings.max_document_size
        self._max_nodes = settings.max_node_count
        self._max_depth = settings.max_depth

    @staticmethod
    def _new_yaml() -> YAML:
        return YAML(typ="rt")

    # -- safety checks -------------------------------------------------------

    def _check_size(self, content: str, filename: str) -> None:
        if len(content) > self._max_size:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {self._max_size:,} limit)",
                SourceSpan(file=filename, line=1, column=1),
            )

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> Document:
        """Load a YAML file from disk."""
        try:
            with path.open("r", encoding="utf-8") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ParseError(
                f"cannot read file: {exc}", SourceSpan(file=str(path), line=1, column=1)
            ) from exc
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> Document:
        """Load a YAML document from a string."""
        self._check_size(content, filename)
        try:
            explicit_start = self._has_explicit_start(content)
            root = self._new_yaml().compose(content)
        except MarkedYAMLError as exc:
            raise ParseError(_describe(exc), _mark_span(exc, filename)) from exc
        except YAMLError as exc:
            raise ParseError(str(exc), SourceSpan(file=filename, line=1, column=1)) from exc
        except RecursionError as exc:
            raise YAMLSafetyError(
                "YAML document is nested too deeply to parse",
                SourceSpan(file=filename, line=1, column=1),
            ) from exc

        if root is None:
            logger.debug("%s: empty document", filename)
            return Document(filename=filename, text=content, explicit_start=explicit_start)

        builder = _TreeBuilder(content, filename, self._max_nodes, self._max_depth)
        tree = builder.build(root)
        logger.debug("%s: loaded %d nodes", filename, builder.node_count)
        return Document(
            filename=filename,
            text=content,
            explicit_start=explicit_start,
            root=tree,
        )

    def _has_explicit_start(self, content: str) -> bool:
        """Whether the first document in *content* opens with a ``---`` marker."""
        events = self._new_yaml().parse(content)
        try:
            for event in events:
                if isinstance(event, DocumentStartEvent):
                    return bool(event.explicit)
        finally:
            events.close()
        return False


def _describe(exc: MarkedYAMLError) -> str:
    parts = [part for part in (exc.context, exc.problem) if part]
    return ", ".join(parts) if parts else str(exc)


def _mark_span(exc: MarkedYAMLError, filename: str) -> SourceSpan:
    mark = exc.problem_mark or exc.context_mark
    if mark is None:
        return SourceSpan(file=filename, line=1, column=1)
    return SourceSpan(file=filename, line=mark.line + 1, column=mark.column + 1)
