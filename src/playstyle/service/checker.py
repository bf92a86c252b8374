"""Checker service: Loader → Rule Engine → Report, for one file or many."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from playstyle.engine import RuleEngine
from playstyle.models.report import Report
from playstyle.parser.loader import DocumentLoader, ParseError
from playstyle.settings import Settings

logger = logging.getLogger("playstyle.service")


@dataclass
class FileResult:
    """Outcome of checking one file: a report, or the parse failure that prevented one."""

    path: str
    report: Report | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Checker:
    """Checks configuration scripts against the style rules.

    Stateless apart from its configuration: the loader and the rules are
    safe to share, so :meth:`check_files` runs files on a worker pool.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        select: Iterable[str] | None = None,
        ignore: Iterable[str] = (),
    ) -> None:
        self._settings = settings or Settings()
        self._loader = DocumentLoader(self._settings)
        self._engine = RuleEngine(self._settings, select=select, ignore=ignore)

    @property
    def engine(self) -> RuleEngine:
        return self._engine

    def check_string(self, content: str, filename: str = "<string>") -> Report:
        """Check YAML text.  Raises ``ParseError`` if it cannot be parsed."""
        document = self._loader.load_string(content, filename=filename)
        return Report.build(document.filename, self._engine.evaluate(document))

    def check_file(self, path: Path) -> Report:
        """Check a file on disk.  Raises ``ParseError`` if it cannot be parsed."""
        document = self._loader.load(path)
        return Report.build(document.filename, self._engine.evaluate(document))

    def check_files(
        self, paths: Sequence[Path], max_workers: int | None = None
    ) -> list[FileResult]:
        """Check several files concurrently.  Results keep the input order."""
        workers = max_workers or self._settings.max_workers
        logger.info("checking %d file(s) with %d worker(s)", len(paths), workers)
        with ThreadPoolExecutor(max_workers=max(1, workers)) as pool:
            return list(pool.map(self._check_one, paths))

    def _check_one(self, path: Path) -> FileResult:
        try:
            report = self.check_file(path)
        except ParseError as exc:
            logger.warning("failed to parse %s: %s", path, exc.message)
            return FileResult(path=str(path), error=exc)
        return FileResult(path=str(path), report=report)
