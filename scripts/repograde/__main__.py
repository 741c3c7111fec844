"""CLI entry point for repograde.

Usage:
  repograde [directory]            # Audit a directory (default: cwd)
  repograde --json                 # Full JSON report for CI
  repograde --verbose              # All issues and recommendations
  python -m repograde ./project

Exit status is 1 for a failing grade (F) or an invalid target, else 0.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from repograde import __version__
from repograde.registry import CHECKS
from repograde.rendering import render_json, render_text
from repograde.runner import run_audit

log = logging.getLogger(__name__)

_EPILOG = """\
examples:
  repograde                    Audit current directory
  repograde ./my-project       Audit specific directory
  repograde --json             Output JSON for CI integration
  repograde --verbose          Show all issues and recommendations

checks:
{checks}

grading:
  A: 90-100%    B: 80-89%    C: 70-79%    D: 60-69%    F: <60%
"""


# Every spelling build_parser() registers; all are store_true
_FLAGS = frozenset(("--json", "--verbose", "--no-color", "-h", "--help", "-v", "--version"))


class TargetError(Exception):
    """The audit target is missing or not a directory."""


def resolve_target(path: str) -> Path:
    """Resolve and validate the directory to audit."""
    target = Path(path).resolve()
    if not target.exists():
        raise TargetError(f"Directory not found: {target}")
    if not target.is_dir():
        raise TargetError(f"Not a directory: {target}")
    return target


def _use_color(args: argparse.Namespace) -> bool:
    if args.no_color or os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def _configure_logging() -> None:
    level_name = os.environ.get("REPOGRADE_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    """Argument parser. Help and version are plain flags handled in main()."""
    checks = "\n".join(f"  {c.name:<22} weight {c.weight}" for c in CHECKS)
    parser = argparse.ArgumentParser(
        prog="repograde",
        usage="%(prog)s [directory] [options]",
        description=(
            "Repository quality auditor: grades a repo A-F on common best practices.\n\n"
            "arguments:\n"
            "  directory             Path to repository (default: current directory)"
        ),
        epilog=_EPILOG.format(checks=checks),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show detailed issues and recommendations",
    )
    parser.add_argument("--no-color", dest="no_color", action="store_true",
                        help="Disable ANSI colours (also: NO_COLOR env)")
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message")
    parser.add_argument("-v", "--version", action="store_true", help="Show version")
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse argv.

    Flags match only their exact spelling; any other dash-prefixed token
    (``--json=yes``, ``-vh``, ``--verb``) is ignored. Every non-flag
    argument names the directory and the last one wins.
    """
    flags = [arg for arg in argv if arg in _FLAGS]
    unknown = [arg for arg in argv if arg.startswith("-") and arg not in _FLAGS]
    positionals = [arg for arg in argv if not arg.startswith("-")]
    if unknown:
        log.debug("Ignoring unknown flags: %s", " ".join(unknown))
    args = build_parser().parse_args(flags)
    args.directory = positionals[-1] if positionals else "."
    return args


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for repograde."""
    _configure_logging()
    argv = sys.argv[1:] if argv is None else argv
    args = parse_args(argv)

    if args.help:
        build_parser().print_help()
        return 0
    if args.version:
        print(__version__)
        return 0

    try:
        target = resolve_target(args.directory)
    except TargetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    report = run_audit(target)

    if args.json:
        print(render_json(report))
    else:
        print(render_text(report, verbose=args.verbose, color=_use_color(args)))

    return 1 if report.failed else 0


if __name__ == "__main__":
    sys.exit(main())
