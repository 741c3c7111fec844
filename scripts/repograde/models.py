"""Data models for repograde audits.

Zero external dependencies -- pure Python dataclasses.

  - CheckResult: what a single check returns (raw score out of ``max``)
  - CheckDefinition: a registry entry binding an id, label and weight to a check
  - CheckReport: a CheckResult rescaled against its weight (one per check run)
  - AuditReport: the aggregate for a whole directory

``to_dict`` methods emit the JSON wire format consumed by CI tooling, which
uses camelCase keys.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero for non-negative scores.

    ``round()`` uses banker's rounding, which would turn 72.5% into 72.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


@dataclass
class CheckResult:
    """Outcome of one check against one directory.

    ``optional`` is a display hint only: the renderer de-emphasises the check,
    the arithmetic is unchanged.
    """

    score: float
    max: float = 100
    issues: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    optional: bool = False


CheckFn = Callable[[Path], CheckResult]
"""A check: pure function of a directory's contents at call time."""


@dataclass(frozen=True)
class CheckDefinition:
    """A named, weighted check in the registry."""

    id: str
    name: str
    weight: float
    evaluate: CheckFn


@dataclass
class CheckReport:
    """Per-check entry of an AuditReport."""

    id: str
    name: str
    weight: float
    score: float
    max: float
    weighted_score: float
    issues: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    optional: bool = False

    @classmethod
    def from_result(cls, definition: CheckDefinition,
                    result: CheckResult) -> CheckReport:
        """Rescale a raw result by its definition's weight."""
        weighted = result.score / result.max * definition.weight
        return cls(
            id=definition.id,
            name=definition.name,
            weight=definition.weight,
            score=result.score,
            max=result.max,
            weighted_score=round_half_up(weighted, 1),
            issues=list(result.issues),
            recommendations=list(result.recommendations),
            optional=result.optional,
        )

    @property
    def percent(self) -> int:
        """Raw score as a whole percentage of this check's max."""
        return int(round_half_up(self.score / self.max * 100))

    def to_dict(self) -> dict[str, Any]:
        """Serialise using the JSON wire keys."""
        return {
            "id": self.id,
            "name": self.name,
            "score": self.score,
            "maxScore": self.max,
            "weight": self.weight,
            "weightedScore": self.weighted_score,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
            "optional": self.optional,
        }


@dataclass
class AuditReport:
    """Aggregate audit of one directory.

    ``issues`` and ``recommendations`` are flattened in registry order and
    keep duplicates; de-duplication is a text-rendering concern.
    """

    directory: str
    checks: list[CheckReport] = field(default_factory=list)
    total_score: float = 0.0
    max_score: float = 0.0
    percentage: int = 0
    grade: str = "F"
    issues: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        """Whether the grade is failing (drives the CLI exit code)."""
        return self.grade == "F"

    def to_dict(self) -> dict[str, Any]:
        """Serialise using the JSON wire keys."""
        return {
            "directory": self.directory,
            "checks": [c.to_dict() for c in self.checks],
            "totalScore": self.total_score,
            "maxScore": self.max_score,
            "percentage": self.percentage,
            "grade": self.grade,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
        }
