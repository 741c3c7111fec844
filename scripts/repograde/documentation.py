"""Documentation checks -- README, LICENSE, CONTRIBUTING, SECURITY.

Regex heuristics over the file text; no markdown parsing.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .models import CheckResult
from .probe import find_file, load_manifest, read_text

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# File name candidates (priority order, matched case-insensitively)
# ---------------------------------------------------------------------------

README_NAMES = ("readme.md", "readme.txt", "readme", "readme.markdown", "readme.rst")
LICENSE_NAMES = ("license", "license.md", "license.txt", "licence", "licence.md", "copying")
CONTRIBUTING_NAMES = ("contributing.md", "contributing.txt", "contributing")
SECURITY_NAMES = ("security.md", "security.txt", "security")

# ---------------------------------------------------------------------------
# README patterns
# ---------------------------------------------------------------------------

_WORD_SPLIT = re.compile(r"\s+")
_INSTALL_HEADING = re.compile(
    r"^#{1,2}\s*(installation|install|getting started|setup)", re.MULTILINE | re.IGNORECASE
)
_USAGE_HEADING = re.compile(
    r"^#{1,2}\s*(usage|how to use|examples?)", re.MULTILINE | re.IGNORECASE
)
_LINKED_IMAGE = re.compile(r"\[!\[.*?\]\(.*?\)\]\(.*?\)")
_BADGE_IMAGE = re.compile(r"!\[.*?\]\(.*?badge.*?\)", re.IGNORECASE)
_FENCED_CODE = re.compile(r"```.*?```", re.DOTALL)
_LINK = re.compile(r"\[.*?\]\(.*?\)")

# (tier upper bound, bonus); README at or above the last bound gets 25
_LENGTH_TIERS = ((150, 10), (500, 20))
_SHORT_README_WORDS = 50

# ---------------------------------------------------------------------------
# LICENSE patterns
# ---------------------------------------------------------------------------

_KNOWN_LICENSES = (
    ("MIT", re.compile(r"mit license|permission is hereby granted", re.IGNORECASE)),
    ("Apache-2.0", re.compile(r"apache license|version 2\.0", re.IGNORECASE)),
    ("GPL", re.compile(r"gnu general public license|gpl", re.IGNORECASE)),
    ("BSD", re.compile(r"bsd", re.IGNORECASE)),
)
_MIN_LICENSE_CHARS = 50

# ---------------------------------------------------------------------------
# CONTRIBUTING / SECURITY patterns: (pattern, bonus)
# ---------------------------------------------------------------------------

_CONTRIBUTING_TOPICS = (
    (re.compile(r"pull request|pr", re.IGNORECASE), 15),
    (re.compile(r"code of conduct|coc", re.IGNORECASE), 10),
    (re.compile(r"issue|bug|feature", re.IGNORECASE), 10),
    (re.compile(r"style|format|lint", re.IGNORECASE), 5),
)
_MIN_CONTRIBUTING_CHARS = 100

_SECURITY_TOPICS = (
    (re.compile(r"vulnerabilit|report|disclos", re.IGNORECASE), 15),
    (re.compile(r"email|contact", re.IGNORECASE), 15),
)
_MIN_SECURITY_CHARS = 50


def _topic_bonus(content: str, topics: tuple[tuple[re.Pattern[str], int], ...]) -> int:
    return sum(bonus for pattern, bonus in topics if pattern.search(content))


# ---------------------------------------------------------------------------
# README
# ---------------------------------------------------------------------------


def check_readme(directory: Path) -> CheckResult:
    """Score README presence, length and structure.

    Base 20 for existing, then:
      - length: <50 words +0 (flagged), <150 +10, <500 +20, otherwise +25
      - installation heading +15, usage heading +15
      - badge +5, fenced code block +10, any link +5
      - +5 when every bonus above was earned
    """
    path = find_file(directory, README_NAMES)
    if path is None:
        return CheckResult(
            score=0,
            issues=["No README file found"],
            recommendations=[
                "Create a README.md with project description, installation, and usage"
            ],
        )

    content = read_text(path)
    if not content:
        return CheckResult(
            score=10,
            issues=["README exists but is empty or could not be read"],
        )

    score = 20
    issues: list[str] = []
    recommendations: list[str] = []

    words = len(_WORD_SPLIT.split(content))
    if words < _SHORT_README_WORDS:
        issues.append("README is very short (<50 words)")
        recommendations.append("Expand README with more details about the project")
        length_bonus = 0
    else:
        length_bonus = 25
        for bound, bonus in _LENGTH_TIERS:
            if words < bound:
                length_bonus = bonus
                break
    score += length_bonus

    has_install = bool(_INSTALL_HEADING.search(content))
    if has_install:
        score += 15
    else:
        issues.append("No installation section")
        recommendations.append("Add an Installation or Getting Started section")

    has_usage = bool(_USAGE_HEADING.search(content))
    if has_usage:
        score += 15
    else:
        issues.append("No usage section")
        recommendations.append("Add a Usage section with examples")

    has_badge = bool(_LINKED_IMAGE.search(content) or _BADGE_IMAGE.search(content))
    if has_badge:
        score += 5

    has_code = bool(_FENCED_CODE.search(content))
    if has_code:
        score += 10
    else:
        recommendations.append("Add code examples in fenced code blocks")

    has_link = bool(_LINK.search(content))
    if has_link:
        score += 5

    if length_bonus == 25 and all((has_install, has_usage, has_badge, has_code, has_link)):
        score += 5

    return CheckResult(score=min(score, 100), issues=issues, recommendations=recommendations)


# ---------------------------------------------------------------------------
# LICENSE
# ---------------------------------------------------------------------------


def check_license(directory: Path) -> CheckResult:
    """Score LICENSE presence and whether its text is a recognised license."""
    path = find_file(directory, LICENSE_NAMES)
    if path is None:
        if load_manifest(directory).get("license"):
            return CheckResult(
                score=60,
                issues=["License specified in package.json but no LICENSE file"],
                recommendations=["Create a LICENSE file with the full license text"],
            )
        return CheckResult(
            score=0,
            issues=["No LICENSE file found"],
            recommendations=["Add a LICENSE file (MIT, Apache-2.0, etc.)"],
        )

    content = read_text(path)
    if not content or len(content) < _MIN_LICENSE_CHARS:
        return CheckResult(
            score=30,
            issues=["LICENSE file is empty or very short"],
            recommendations=["Add the full license text"],
        )

    for label, pattern in _KNOWN_LICENSES:
        if pattern.search(content):
            log.debug("Recognised %s license in %s", label, path)
            return CheckResult(score=100)

    return CheckResult(score=80)


# ---------------------------------------------------------------------------
# CONTRIBUTING / SECURITY
# ---------------------------------------------------------------------------


def _find_policy(directory: Path, names: tuple[str, ...]) -> Path | None:
    """Root-level lookup first, then the file's .md variant under .github/."""
    return find_file(directory, names) or find_file(directory / ".github", names[:1])


def check_contributing(directory: Path) -> CheckResult:
    """Score contribution guidelines by the workflow topics they cover."""
    path = _find_policy(directory, CONTRIBUTING_NAMES)
    if path is None:
        return CheckResult(
            score=0,
            issues=["No CONTRIBUTING.md found"],
            recommendations=["Add CONTRIBUTING.md with contribution guidelines"],
            optional=True,
        )

    content = read_text(path)
    if not content or len(content) < _MIN_CONTRIBUTING_CHARS:
        return CheckResult(
            score=30,
            issues=["CONTRIBUTING.md is too short"],
            recommendations=["Expand contribution guidelines"],
        )

    return CheckResult(score=min(60 + _topic_bonus(content, _CONTRIBUTING_TOPICS), 100))


def check_security(directory: Path) -> CheckResult:
    """Score the security policy by reporting process and contact details."""
    path = _find_policy(directory, SECURITY_NAMES)
    if path is None:
        return CheckResult(
            score=0,
            issues=["No SECURITY.md found"],
            recommendations=["Add SECURITY.md with vulnerability reporting instructions"],
            optional=True,
        )

    content = read_text(path)
    if not content or len(content) < _MIN_SECURITY_CHARS:
        return CheckResult(
            score=30,
            issues=["SECURITY.md is too short"],
            recommendations=["Add detailed vulnerability reporting process"],
        )

    return CheckResult(score=min(70 + _topic_bonus(content, _SECURITY_TOPICS), 100))
