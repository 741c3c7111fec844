"""Package metadata check -- package.json completeness.

This is the one check that reports on manifest validity; the others read
the manifest through ``probe.load_manifest`` and treat a bad one as empty.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .models import CheckResult
from .probe import JSON_ERRORS, MANIFEST, any_exists, mapping, read_text

log = logging.getLogger(__name__)

# Manifests of other ecosystems; their presence makes this check optional
OTHER_MANIFESTS = ("Cargo.toml", "go.mod", "pyproject.toml")

_MIN_DESCRIPTION_CHARS = 10


def _non_empty(value: Any) -> bool:
    return isinstance(value, (list, str)) and len(value) > 0


def _score_fields(pkg: dict[str, Any]) -> CheckResult:
    score = 20
    issues: list[str] = []
    recommendations: list[str] = []

    if pkg.get("name"):
        score += 5
    else:
        issues.append("Missing name field")

    if pkg.get("version"):
        score += 5
    else:
        issues.append("Missing version field")

    description = pkg.get("description")
    if isinstance(description, str) and len(description) > _MIN_DESCRIPTION_CHARS:
        score += 10
    else:
        recommendations.append("Add a meaningful description")

    if pkg.get("repository"):
        score += 10
    else:
        recommendations.append("Add repository field")

    if pkg.get("license"):
        score += 10
    else:
        issues.append("Missing license field")
        recommendations.append("Add license field")

    if _non_empty(pkg.get("keywords")):
        score += 5
    else:
        recommendations.append("Add keywords for discoverability")

    if pkg.get("author"):
        score += 5

    if mapping(pkg.get("engines")).get("node"):
        score += 10
    else:
        recommendations.append("Specify required Node.js version in engines.node")

    scripts = pkg.get("scripts")
    if isinstance(scripts, dict):
        names = list(scripts)
        if "test" in names:
            score += 5
        if "build" in names or "compile" in names:
            score += 5
        if any("lint" in name for name in names):
            score += 5

    if pkg.get("files") or pkg.get("main") or pkg.get("exports"):
        score += 5

    return CheckResult(score=min(score, 100), issues=issues, recommendations=recommendations)


def check_package_json(directory: Path) -> CheckResult:
    """Score package.json field coverage.

    Base 20, then name/version/keywords/author/packaging +5 each,
    description/repository/license/engines.node +10 each, and +5 for each
    of a test, build and lint script. Invalid JSON short-circuits to 5.
    """
    path = directory / MANIFEST
    if not path.exists():
        if any_exists(directory, OTHER_MANIFESTS):
            return CheckResult(score=70, optional=True)
        return CheckResult(
            score=0,
            issues=["No package.json found"],
            recommendations=["Initialize with npm init"],
        )

    content = read_text(path)
    if not content:
        return CheckResult(score=10, issues=["package.json exists but could not be read"])

    try:
        pkg = json.loads(content)
    except JSON_ERRORS as exc:
        log.debug("Invalid JSON in %s: %s", path, exc)
        pkg = None

    if not isinstance(pkg, dict):
        return CheckResult(
            score=5,
            issues=["Invalid JSON in package.json"],
            recommendations=["Fix JSON syntax errors"],
        )

    return _score_fields(pkg)
