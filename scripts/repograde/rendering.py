"""Report renderers -- terminal text and JSON.

Both render the same AuditReport; neither touches the filesystem.
"""

from __future__ import annotations

import json

from .models import AuditReport
from .runner import grade_for

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"

GRADE_COLORS = {
    "A": "\x1b[32m",  # green
    "B": "\x1b[36m",  # cyan
    "C": "\x1b[33m",  # yellow
    "D": "\x1b[35m",  # magenta
    "F": "\x1b[31m",  # red
}

BAR_WIDTH = 10
NAME_WIDTH = 22
SUMMARY_LIMIT = 5


def _unique(items: list[str]) -> list[str]:
    """De-duplicate, keeping first-seen order."""
    return list(dict.fromkeys(items))


def render_bar(percent: int) -> str:
    """10-cell progress bar for a 0-100 percentage."""
    filled = max(0, min(BAR_WIDTH, int(percent / 10 + 0.5)))
    return "█" * filled + "░" * (BAR_WIDTH - filled)


class _Palette:
    """ANSI escapes, or empty strings when colour is off."""

    def __init__(self, color: bool) -> None:
        self.color = color
        self.reset = RESET if color else ""
        self.bold = BOLD if color else ""
        self.dim = DIM if color else ""

    def grade(self, grade: str) -> str:
        return GRADE_COLORS.get(grade, "") if self.color else ""


def _render_summary(lines: list[str], title: str, items: list[str], bullet: str,
                    verbose: bool, p: _Palette) -> None:
    unique = _unique(items)
    shown = unique if verbose else unique[:SUMMARY_LIMIT]
    lines.append("")
    lines.append(f"{p.bold}{title}{p.reset}")
    for item in shown:
        lines.append(f"  {bullet} {item}")
    hidden = len(unique) - len(shown)
    if hidden > 0:
        lines.append(f"  {p.dim}... and {hidden} more (use --verbose){p.reset}")


def render_text(report: AuditReport, *, verbose: bool = False, color: bool = True) -> str:
    """Human-readable report.

    Without ``verbose`` the issue and recommendation summaries are
    de-duplicated and capped at five entries each.
    """
    p = _Palette(color)
    lines: list[str] = [""]
    lines.append(f"{p.bold}repograde{p.reset} - Repository Quality Audit")
    lines.append(f"{p.dim}{report.directory}{p.reset}")
    lines.append("")
    lines.append(
        f"{p.bold}Grade: {p.grade(report.grade)}{report.grade}{p.reset}"
        f" {p.dim}({report.percentage}%){p.reset}"
    )
    lines.append("")

    lines.append(f"{p.bold}Checks:{p.reset}")
    for check in report.checks:
        pct = check.percent
        optional = f" {p.dim}(optional){p.reset}" if check.optional else ""
        lines.append(
            f"  {check.name:<{NAME_WIDTH}} {render_bar(pct)}"
            f" {p.grade(grade_for(pct))}{pct}%{p.reset}{optional}"
        )
        if verbose:
            for issue in check.issues:
                lines.append(f"    {p.dim}⚠ {issue}{p.reset}")

    if report.issues:
        _render_summary(lines, f"Issues ({len(report.issues)}):", report.issues,
                        "•", verbose, p)
    if report.recommendations:
        _render_summary(lines, "Recommendations:", report.recommendations,
                        "→", verbose, p)

    lines.append("")
    return "\n".join(lines) + "\n"


def render_json(report: AuditReport) -> str:
    """Complete report as JSON; nothing truncated or de-duplicated."""
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)
