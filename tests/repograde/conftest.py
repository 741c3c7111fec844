"""Shared fixtures for repograde tests -- throwaway repositories on disk."""

# pylint: disable=redefined-outer-name

from __future__ import annotations

import json
import textwrap
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

Writer = Callable[..., Path]

FILLER = " ".join(["lorem"] * 600)

COMPLETE_README = f"""\
# Widget

[![Build](https://img.shields.io/badge/build-passing-green.svg)](https://ci.example.com)

{FILLER}

## Installation

```
npm install widget
```

## Usage

See the [docs](https://example.com/docs) for more.
"""

MIT_LICENSE = """\
MIT License

Copyright (c) 2024 Widget Authors

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software").
"""

COMPLETE_MANIFEST: dict[str, Any] = {
    "name": "widget",
    "version": "1.2.3",
    "description": "A widget that grades other widgets",
    "repository": "https://github.com/example/widget",
    "license": "MIT",
    "keywords": ["widget", "audit"],
    "author": "Widget Authors",
    "engines": {"node": ">=18"},
    "main": "index.js",
    "scripts": {"test": "jest", "build": "tsc", "lint": "eslint ."},
    "devDependencies": {"eslint": "^9.0.0", "typescript": "^5.4.0", "jest": "^29.0.0"},
}

STRICT_TSCONFIG = """\
{
  // generated by tsc --init
  "compilerOptions": {
    "strict": true,
    "noUnusedLocals": true,
    "noUnusedParameters": true,
    "esModuleInterop": true,
  }
}
"""

CONTRIBUTING = """\
# Contributing

Thanks for your interest! Please read our Code of Conduct before taking part.
Report a bug or request a feature by opening an issue first. When your change
is ready, open a pull request against main. Run the linter and follow the
existing code style before submitting.
"""

SECURITY = """\
# Security Policy

If you find a security vulnerability, please report it privately. Do not open
a public issue. Contact the maintainers by email at security@example.com and we
will coordinate disclosure with you once a fix is available.
"""

EDITORCONFIG = """\
root = true

[*]
indent_style = space
indent_size = 2
end_of_line = lf
charset = utf-8
"""

GITIGNORE = """\
# dependencies
node_modules/
dist/
.env
.vscode/
"""


def _write(root: Path, relpath: str, content: str | dict[str, Any] | list[Any] = "") -> Path:
    path = root / relpath
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, (dict, list)):
        content = json.dumps(content, indent=2)
    path.write_text(textwrap.dedent(content) if content else content, encoding="utf-8")
    return path


@pytest.fixture()
def write(tmp_path: Path) -> Writer:
    """Write a file under tmp_path; dicts and lists are dumped as JSON."""
    def _inner(relpath: str, content: str | dict[str, Any] | list[Any] = "") -> Path:
        return _write(tmp_path, relpath, content)
    return _inner


@pytest.fixture()
def complete_manifest() -> dict[str, Any]:
    """A package.json body that earns every metadata point."""
    return json.loads(json.dumps(COMPLETE_MANIFEST))


@pytest.fixture()
def perfect_repo(tmp_path: Path) -> Path:
    """A repository that satisfies every check."""
    root = tmp_path / "perfect"
    root.mkdir()
    _write(root, "README.md", COMPLETE_README)
    _write(root, "LICENSE", MIT_LICENSE)
    _write(root, ".gitignore", GITIGNORE)
    _write(root, ".github/workflows/ci.yml", "on: push\n")
    _write(root, "tests/widget.test.js", "test('ok', () => {});\n")
    _write(root, "jest.config.js", "module.exports = {};\n")
    _write(root, ".eslintrc.json", {"root": True})
    _write(root, ".prettierrc", {"semi": False})
    _write(root, "tsconfig.json", STRICT_TSCONFIG)
    _write(root, "package.json", COMPLETE_MANIFEST)
    _write(root, "CONTRIBUTING.md", CONTRIBUTING)
    _write(root, "SECURITY.md", SECURITY)
    _write(root, ".editorconfig", EDITORCONFIG)
    return root
