"""Static typing check -- tsconfig.json strictness.

Projects without a tsconfig.json are scored on what they do have (a bare
TypeScript dependency, a jsconfig.json) or marked optional.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .models import CheckResult
from .probe import (
    JSON_ERRORS,
    dependencies_of,
    exists,
    load_manifest,
    mapping,
    parse_jsonc,
    read_text,
)

log = logging.getLogger(__name__)

# Worth +5 each. The first two are also implied by "strict": true.
_IMPLIED_BY_STRICT = ("noImplicitAny", "strictNullChecks")
_EXTRA_OPTIONS = ("noUnusedLocals", "noUnusedParameters", "esModuleInterop")


def check_typescript(directory: Path) -> CheckResult:
    """Score the typed-language config.

    With a tsconfig.json: base 50, strict +25, then +5 per hardening option.
    A tsconfig.json that does not parse keeps the base score plus an issue.
    """
    tsconfig = directory / "tsconfig.json"
    if not tsconfig.exists():
        if dependencies_of(load_manifest(directory)).get("typescript"):
            return CheckResult(
                score=20,
                issues=["TypeScript installed but no tsconfig.json"],
                recommendations=["Create tsconfig.json with npx tsc --init"],
            )
        if exists(directory, "jsconfig.json"):
            return CheckResult(score=60, recommendations=["Consider migrating to TypeScript"])
        return CheckResult(
            score=50,
            recommendations=["Consider adding TypeScript for better type safety"],
            optional=True,
        )

    content = read_text(tsconfig)
    if not content:
        return CheckResult(score=30, issues=["tsconfig.json exists but could not be read"])

    score = 50
    issues: list[str] = []
    recommendations: list[str] = []

    try:
        config = parse_jsonc(content)
    except JSON_ERRORS as exc:
        log.debug("Malformed %s: %s", tsconfig, exc)
        return CheckResult(score=score, issues=["Could not parse tsconfig.json"])

    opts = mapping(mapping(config).get("compilerOptions"))
    strict = opts.get("strict") is True

    if strict:
        score += 25
    else:
        issues.append("strict mode not enabled")
        recommendations.append('Enable "strict": true in tsconfig.json')

    for option in _IMPLIED_BY_STRICT:
        if opts.get(option) or strict:
            score += 5
    for option in _EXTRA_OPTIONS:
        if opts.get(option):
            score += 5

    return CheckResult(score=min(score, 100), issues=issues, recommendations=recommendations)
