"""Repository hygiene checks -- .gitignore and .editorconfig."""

from __future__ import annotations

import re
from pathlib import Path

from .models import CheckResult
from .probe import read_text

_MIN_GITIGNORE_ENTRIES = 3

_DEPENDENCY_DIRS = re.compile(r"node_modules", re.IGNORECASE)
_BUILD_OUTPUT = re.compile(r"\bdist\b|\bbuild\b|\bout\b", re.IGNORECASE)
_ENV_FILES = re.compile(r"\.env", re.IGNORECASE)
_IDE_DIRS = re.compile(r"\.idea|\.vscode|\.vs\b", re.IGNORECASE)

# (pattern, bonus)
_EDITORCONFIG_KEYS = (
    (re.compile(r"root\s*=\s*true", re.IGNORECASE), 10),
    (re.compile(r"indent_style", re.IGNORECASE), 10),
    (re.compile(r"end_of_line", re.IGNORECASE), 5),
    (re.compile(r"charset", re.IGNORECASE), 5),
)


def check_gitignore(directory: Path) -> CheckResult:
    """Score .gitignore by how many common artifact classes it covers.

    Base 70 once it has at least three entries, then:
      - dependency directories +10
      - build output +5
      - env files +10 (recommended when missing)
      - IDE directories +5
    """
    path = directory / ".gitignore"
    if not path.exists():
        return CheckResult(
            score=0,
            issues=["No .gitignore file"],
            recommendations=["Create a .gitignore appropriate for your project"],
        )

    content = read_text(path)
    if not content:
        return CheckResult(
            score=20,
            issues=[".gitignore exists but is empty"],
            recommendations=["Add ignore patterns for your project type"],
        )

    entries = [
        line for line in content.split("\n")
        if line.strip() and not line.startswith("#")
    ]
    if len(entries) < _MIN_GITIGNORE_ENTRIES:
        return CheckResult(
            score=40,
            issues=[".gitignore has very few entries"],
            recommendations=["Add more ignore patterns (node_modules, build artifacts, etc.)"],
        )

    score = 70
    recommendations: list[str] = []
    if _DEPENDENCY_DIRS.search(content):
        score += 10
    if _BUILD_OUTPUT.search(content):
        score += 5
    if _ENV_FILES.search(content):
        score += 10
    else:
        recommendations.append("Consider adding .env to .gitignore")
    if _IDE_DIRS.search(content):
        score += 5

    return CheckResult(score=min(score, 100), recommendations=recommendations)


def check_editorconfig(directory: Path) -> CheckResult:
    """Score .editorconfig by the core properties it sets."""
    path = directory / ".editorconfig"
    if not path.exists():
        return CheckResult(
            score=0,
            issues=["No .editorconfig found"],
            recommendations=["Add .editorconfig for consistent formatting across editors"],
            optional=True,
        )

    content = read_text(path)
    if not content:
        return CheckResult(score=30, issues=[".editorconfig exists but is empty"])

    score = 70 + sum(bonus for pattern, bonus in _EDITORCONFIG_KEYS if pattern.search(content))
    return CheckResult(score=min(score, 100))
