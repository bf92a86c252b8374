"""YAML parsing with line fidelity for playstyle."""

from playstyle.parser.loader import DocumentLoader, ParseError, YAMLSafetyError

__all__ = [
    "DocumentLoader",
    "ParseError",
    "YAMLSafetyError",
]
