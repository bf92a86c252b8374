"""Command-line entry point.

Run via::

    playstyle site.yml roles/web/tasks/main.yml
    cat site.yml | playstyle -            # read from stdin
    playstyle --format json --ignore quoting site.yml

Exit status is 0 when every document conforms, 1 when violations were found
and 2 when a document could not be parsed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from playstyle import __version__
from playstyle.models.report import Report
from playstyle.parser.loader import ParseError
from playstyle.reporter import OutputFormat, render
from playstyle.rules import RuleRegistry, UnknownRuleError
from playstyle.service.checker import Checker
from playstyle.settings import Settings

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_PARSE_ERROR = 2

logger = logging.getLogger("playstyle.cli")


def _names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playstyle",
        description="Check YAML automation playbooks against the style guide",
    )
    parser.add_argument("paths", nargs="*", help="Files to check ('-' or nothing reads stdin)")
    parser.add_argument("-f", "--format", choices=[f.value for f in OutputFormat],
                        help="Report format (default: text)")
    parser.add_argument("--select", type=_names,
                        help="Comma-separated rule names to run (default: all)")
    parser.add_argument("--ignore", type=_names, default=[],
                        help="Comma-separated rule names to skip")
    parser.add_argument("-j", "--jobs", type=int,
                        help="Number of files checked in parallel")
    parser.add_argument("--list-rules", action="store_true",
                        help="List available rules and exit")
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the checker and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings()

    logging.basicConfig(level=(args.log_level or settings.log_level).upper())

    if args.list_rules:
        for rule in RuleRegistry.create(settings):
            print(f"{rule.name:<22} {rule.description}")
        return EXIT_OK

    try:
        checker = Checker(settings, select=args.select, ignore=args.ignore)
    except UnknownRuleError as exc:
        parser.error(str(exc))

    paths = args.paths or ["-"]
    reports: list[Report] = []
    failed = False

    if "-" in paths:
        try:
            reports.append(checker.check_string(sys.stdin.read(), filename="<stdin>"))
        except ParseError as exc:
            print(f"error: {exc}", file=sys.stderr)
            failed = True

    files = [Path(p) for p in paths if p != "-"]
    if files:
        for result in checker.check_files(files, max_workers=args.jobs):
            if result.error is not None:
                print(f"error: {result.error}", file=sys.stderr)
                failed = True
            elif result.report is not None:
                reports.append(result.report)

    report = Report.combine(reports)
    if reports:
        print(render(report, args.format or settings.output_format))
    logger.debug("checked %d document(s), %d violation(s)", len(reports), len(report.violations))

    if failed:
        return EXIT_PARSE_ERROR
    return EXIT_OK if report.conforms else EXIT_VIOLATIONS


if __name__ == "__main__":
    sys.exit(main())
