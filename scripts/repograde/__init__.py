"""repograde -- repository quality auditor.

Audits a repository for conventional engineering artifacts and grades it A-F.
No external dependencies beyond Python stdlib.

Modules:
  - models: Data classes (CheckResult, CheckDefinition, CheckReport, AuditReport)
  - probe: Filesystem lookups, capped reads, manifest loading
  - documentation: README, LICENSE, CONTRIBUTING, SECURITY checks
  - hygiene: .gitignore and .editorconfig checks
  - automation: CI, test and lint configuration checks
  - typing_config: tsconfig.json strictness check
  - manifest: package.json completeness check
  - registry: The fixed, ordered check list
  - runner: Audit aggregation and grade mapping
  - rendering: Text and JSON report renderers
"""

from __future__ import annotations

__version__ = "1.0.0"
