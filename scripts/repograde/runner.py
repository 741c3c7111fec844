"""Audit runner -- executes the registry and grades the result.

Grade bands (left-closed):
  - A: >= 90
  - B: >= 80
  - C: >= 70
  - D: >= 60
  - F: below 60

The runner does not validate its target; the CLI does that first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .models import AuditReport, CheckDefinition, CheckReport, round_half_up
from .registry import CHECKS

log = logging.getLogger(__name__)

GRADE_BANDS = ((90, "A"), (80, "B"), (70, "C"), (60, "D"))


def grade_for(percentage: float) -> str:
    """Map a percentage to a letter grade."""
    for floor, grade in GRADE_BANDS:
        if percentage >= floor:
            return grade
    return "F"


def run_audit(directory: str | Path,
              checks: Iterable[CheckDefinition] = CHECKS) -> AuditReport:
    """Run every check against ``directory`` and aggregate.

    Weighted scores are rounded for display only; the total accumulates the
    unrounded values. Issues and recommendations keep registry order and
    duplicates.
    """
    root = Path(directory)
    report = AuditReport(directory=str(directory))

    for definition in checks:
        result = definition.evaluate(root)
        entry = CheckReport.from_result(definition, result)
        log.debug("%s: %s/%s (weighted %.1f of %s)",
                  definition.id, result.score, result.max,
                  entry.weighted_score, definition.weight)

        report.checks.append(entry)
        report.total_score += result.score / result.max * definition.weight
        report.max_score += definition.weight
        report.issues.extend(result.issues)
        report.recommendations.extend(result.recommendations)

    if report.max_score > 0:
        pct = round_half_up(report.total_score / report.max_score * 100)
        report.percentage = max(0, min(100, int(pct)))
    report.grade = grade_for(report.percentage)
    return report
