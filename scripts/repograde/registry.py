"""The fixed, ordered check registry.

Order only affects display and the order issues are listed in; scoring is
order-independent. Weights sum to 100.
"""

from __future__ import annotations

from .automation import check_ci, check_linting, check_tests
from .documentation import check_contributing, check_license, check_readme, check_security
from .hygiene import check_editorconfig, check_gitignore
from .manifest import check_package_json
from .models import CheckDefinition
from .typing_config import check_typescript

CHECKS: tuple[CheckDefinition, ...] = (
    CheckDefinition("readme", "README", 15, check_readme),
    CheckDefinition("license", "License", 10, check_license),
    CheckDefinition("gitignore", ".gitignore", 5, check_gitignore),
    CheckDefinition("ci", "CI/CD", 12, check_ci),
    CheckDefinition("tests", "Test Config", 12, check_tests),
    CheckDefinition("linting", "Linting", 10, check_linting),
    CheckDefinition("typescript", "TypeScript", 8, check_typescript),
    CheckDefinition("packagejson", "package.json Quality", 10, check_package_json),
    CheckDefinition("contributing", "CONTRIBUTING.md", 6, check_contributing),
    CheckDefinition("security", "Security Policy", 7, check_security),
    CheckDefinition("editorconfig", "EditorConfig", 5, check_editorconfig),
)
