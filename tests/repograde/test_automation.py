"""Tests for repograde.automation -- CI, tests and linting checks."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from repograde.automation import (
    NPM_PLACEHOLDER_TEST,
    check_ci,
    check_linting,
    check_tests,
)

Writer = Callable[..., Path]


# ---------------------------------------------------------------------------
# CI
# ---------------------------------------------------------------------------


class TestCI:
    def test_missing(self, tmp_path: Path) -> None:
        r = check_ci(tmp_path)
        assert r.score == 0
        assert r.issues == ["No CI/CD configuration found"]
        assert r.recommendations == ["Add GitHub Actions workflow for automated testing"]

    @pytest.mark.parametrize("name", ["ci.yml", "release.yaml"])
    def test_github_actions(self, name: str, write: Writer, tmp_path: Path) -> None:
        write(f".github/workflows/{name}", "on: push\n")
        r = check_ci(tmp_path)
        assert r.score == 100
        assert r.issues == []

    def test_empty_workflows_directory(self, tmp_path: Path) -> None:
        (tmp_path / ".github" / "workflows").mkdir(parents=True)
        assert check_ci(tmp_path).score == 0

    def test_workflows_without_yaml(self, write: Writer, tmp_path: Path) -> None:
        write(".github/workflows/README.md", "todo")
        assert check_ci(tmp_path).score == 0

    @pytest.mark.parametrize(
        "path, score",
        [
            (".gitlab-ci.yml", 100),
            (".circleci/config.yml", 100),
            ("Jenkinsfile", 90),
            ("azure-pipelines.yml", 100),
        ],
    )
    def test_other_platforms(self, path: str, score: int, write: Writer, tmp_path: Path) -> None:
        write(path, "x")
        r = check_ci(tmp_path)
        assert r.score == score
        assert r.issues == []

    def test_travis_is_legacy(self, write: Writer, tmp_path: Path) -> None:
        write(".travis.yml", "language: node_js\n")
        r = check_ci(tmp_path)
        assert r.score == 80
        assert r.issues == ["Using Travis CI (consider GitHub Actions)"]

    def test_github_actions_take_priority(self, write: Writer, tmp_path: Path) -> None:
        write(".travis.yml", "language: node_js\n")
        write(".github/workflows/ci.yml", "on: push\n")
        r = check_ci(tmp_path)
        assert r.score == 100
        assert r.issues == []


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestTests:
    def test_nothing(self, tmp_path: Path) -> None:
        r = check_tests(tmp_path)
        assert r.score == 0
        assert r.issues == ["No test configuration found"]

    @pytest.mark.parametrize("dirname", ["test", "tests", "__tests__", "spec", "specs"])
    def test_directory_only(self, dirname: str, tmp_path: Path) -> None:
        (tmp_path / dirname).mkdir()
        r = check_tests(tmp_path)
        assert r.score == 40
        assert r.issues == []

    def test_directory_and_pytest_config(self, write: Writer, tmp_path: Path) -> None:
        write("tests/test_a.py", "def test_a(): pass\n")
        write("pytest.ini", "[pytest]\n")
        assert check_tests(tmp_path).score == 70

    def test_placeholder_script(self, write: Writer, tmp_path: Path) -> None:
        write("package.json", {"name": "x", "scripts": {"test": NPM_PLACEHOLDER_TEST}})
        r = check_tests(tmp_path)
        assert r.score == 0
        assert "No test script in package.json or using default placeholder" in r.issues
        assert "Add a proper test script to package.json" in r.recommendations

    def test_missing_script(self, write: Writer, tmp_path: Path) -> None:
        write("tests/a.test.js", "")
        write("package.json", {"name": "x"})
        r = check_tests(tmp_path)
        assert r.score == 40
        assert r.issues == ["No test script in package.json or using default placeholder"]

    def test_full(self, write: Writer, tmp_path: Path) -> None:
        write("__tests__/a.test.js", "")
        write("vitest.config.ts", "export default {}\n")
        write("package.json", {"scripts": {"test": "vitest run"}})
        r = check_tests(tmp_path)
        assert r.score == 100
        assert r.issues == []

    def test_malformed_manifest_not_fatal(self, write: Writer, tmp_path: Path) -> None:
        write("package.json", "{ oops")
        r = check_tests(tmp_path)
        assert r.score == 0
        assert "No test script in package.json or using default placeholder" in r.issues


# ---------------------------------------------------------------------------
# Linting
# ---------------------------------------------------------------------------


class TestLinting:
    def test_nothing(self, tmp_path: Path) -> None:
        r = check_linting(tmp_path)
        assert r.score == 0
        assert r.issues == ["No linting configuration found"]

    def test_linter_and_formatter(self, write: Writer, tmp_path: Path) -> None:
        write(".eslintrc.json", "{}")
        write(".prettierrc", "{}")
        assert check_linting(tmp_path).score == 100

    def test_linter_only(self, write: Writer, tmp_path: Path) -> None:
        write("eslint.config.js", "export default [];\n")
        assert check_linting(tmp_path).score == 85

    def test_formatter_only(self, write: Writer, tmp_path: Path) -> None:
        write(".prettierrc.json", "{}")
        assert check_linting(tmp_path).score == 70

    def test_biome_is_both(self, write: Writer, tmp_path: Path) -> None:
        write("biome.json", "{}")
        assert check_linting(tmp_path).score == 100

    def test_python_linters(self, write: Writer, tmp_path: Path) -> None:
        write(".flake8", "[flake8]\n")
        assert check_linting(tmp_path).score == 85

    def test_manifest_only(self, write: Writer, tmp_path: Path) -> None:
        write("package.json", {
            "scripts": {"lint:fix": "eslint --fix ."},
            "devDependencies": {"eslint": "^9.0.0"},
        })
        r = check_linting(tmp_path)
        assert r.score == 25
        assert r.issues == []

    def test_capped(self, write: Writer, tmp_path: Path) -> None:
        write(".eslintrc", "{}")
        write(".prettierrc.yml", "semi: false\n")
        write("package.json", {
            "scripts": {"lint": "eslint ."},
            "dependencies": {"oxlint": "1"},
        })
        assert check_linting(tmp_path).score == 100
