"""Automation checks -- CI pipelines, test setup and lint setup.

Detection is by well-known config file names at the repository root, plus
the package.json ``scripts`` and dependency tables where relevant.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .models import CheckResult
from .probe import (
    any_exists,
    dependencies_of,
    exists,
    existing,
    list_dir,
    load_manifest,
    scripts_of,
)

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CI
# ---------------------------------------------------------------------------

_WORKFLOW_SUFFIXES = (".yml", ".yaml")

# Single-file CI platforms after GitHub Actions, in priority order:
# (path parts, label, score, issue)
_CI_FILES: tuple[tuple[tuple[str, ...], str, int, str | None], ...] = (
    ((".gitlab-ci.yml",), "GitLab CI", 100, None),
    ((".circleci", "config.yml"), "CircleCI", 100, None),
    ((".travis.yml",), "Travis CI", 80, "Using Travis CI (consider GitHub Actions)"),
    (("Jenkinsfile",), "Jenkins", 90, None),
    (("azure-pipelines.yml",), "Azure Pipelines", 100, None),
)


def _has_github_workflows(directory: Path) -> bool:
    """Whether .github/workflows holds at least one YAML workflow.

    The only probe that lists a nested directory.
    """
    workflows = directory / ".github" / "workflows"
    return any(name.endswith(_WORKFLOW_SUFFIXES) for name in list_dir(workflows))


def check_ci(directory: Path) -> CheckResult:
    """Score CI configuration by the first platform found."""
    if _has_github_workflows(directory):
        log.debug("CI: GitHub Actions")
        return CheckResult(score=100)

    for parts, label, score, issue in _CI_FILES:
        if exists(directory, *parts):
            log.debug("CI: %s", label)
            return CheckResult(score=score, issues=[issue] if issue else [])

    return CheckResult(
        score=0,
        issues=["No CI/CD configuration found"],
        recommendations=["Add GitHub Actions workflow for automated testing"],
    )


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

TEST_DIRS = ("test", "tests", "__tests__", "spec", "specs")

TEST_CONFIGS = (
    # Jest
    "jest.config.js", "jest.config.ts", "jest.config.mjs", "jest.config.cjs", "jest.config.json",
    # Vitest
    "vitest.config.js", "vitest.config.ts", "vitest.config.mjs",
    # Mocha
    "mocha.opts", ".mocharc.js", ".mocharc.json", ".mocharc.yml",
    # Karma
    "karma.conf.js", "karma.conf.ts",
    # AVA
    "ava.config.js", "ava.config.cjs", "ava.config.mjs",
    # Playwright / Cypress
    "playwright.config.js", "playwright.config.ts",
    "cypress.config.js", "cypress.config.ts", "cypress.json",
    # Python
    "pytest.ini", "pyproject.toml", "setup.cfg", "tox.ini", "conftest.py",
)

# What `npm init` writes when no test command is given
NPM_PLACEHOLDER_TEST = 'echo "Error: no test specified" && exit 1'


def check_tests(directory: Path) -> CheckResult:
    """Score test setup: directory +40, framework config +30, test script +30.

    The test script is only assessed when a package.json exists.
    """
    score = 0
    issues: list[str] = []
    recommendations: list[str] = []

    if any_exists(directory, TEST_DIRS):
        score += 40

    if any_exists(directory, TEST_CONFIGS):
        score += 30

    if exists(directory, "package.json"):
        test_script = scripts_of(load_manifest(directory)).get("test")
        if test_script and test_script != NPM_PLACEHOLDER_TEST:
            score += 30
        else:
            issues.append("No test script in package.json or using default placeholder")
            recommendations.append("Add a proper test script to package.json")

    if score == 0:
        issues.append("No test configuration found")
        recommendations.append("Set up a test framework (Jest, Vitest, Mocha, etc.)")

    return CheckResult(score=min(score, 100), issues=issues, recommendations=recommendations)


# ---------------------------------------------------------------------------
# Linting
# ---------------------------------------------------------------------------

LINT_CONFIGS = (
    # ESLint
    ".eslintrc", ".eslintrc.js", ".eslintrc.cjs", ".eslintrc.json", ".eslintrc.yml", ".eslintrc.yaml",
    "eslint.config.js", "eslint.config.mjs", "eslint.config.cjs",
    # Biome
    "biome.json", "biome.jsonc",
    # Prettier
    ".prettierrc", ".prettierrc.js", ".prettierrc.json", ".prettierrc.yml", "prettier.config.js",
    # StandardJS
    ".standardrc",
    # XO
    ".xo-config", ".xo-config.json",
    # Oxlint
    "oxlint.json", ".oxlintrc.json",
    # Python
    "ruff.toml", ".ruff.toml", ".flake8", ".pylintrc", "pylintrc",
)

_LINTER_CONFIG = re.compile(r"eslint|biome|standard|xo|oxlint|ruff|flake8|pylint", re.IGNORECASE)
_FORMATTER_CONFIG = re.compile(r"prettier|biome|ruff", re.IGNORECASE)
_LINT_SCRIPT = re.compile(r"lint|eslint|biome", re.IGNORECASE)
LINT_DEPENDENCIES = ("eslint", "biome", "@biomejs/biome", "oxlint")


def check_linting(directory: Path) -> CheckResult:
    """Score lint/format tooling.

      - any config +70; linter and formatter +30, linter only +15
      - lint-like script name +15
      - lint tool in dependencies +10
    """
    score = 0
    issues: list[str] = []
    recommendations: list[str] = []

    found = existing(directory, LINT_CONFIGS)
    if found:
        score += 70
        has_linter = any(_LINTER_CONFIG.search(name) for name in found)
        has_formatter = any(_FORMATTER_CONFIG.search(name) for name in found)
        if has_linter and has_formatter:
            score += 30
        elif has_linter:
            score += 15

    if exists(directory, "package.json"):
        manifest = load_manifest(directory)
        if any(_LINT_SCRIPT.search(name) for name in scripts_of(manifest)):
            score += 15
        deps = dependencies_of(manifest)
        if any(deps.get(name) for name in LINT_DEPENDENCIES):
            score += 10

    if score == 0:
        issues.append("No linting configuration found")
        recommendations.append("Add ESLint, Biome, or another linter")

    return CheckResult(score=min(score, 100), issues=issues, recommendations=recommendations)
