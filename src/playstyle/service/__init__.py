"""Service layer: checking documents end to end."""

from playstyle.service.checker import Checker, FileResult

__all__ = ["Checker", "FileResult"]
