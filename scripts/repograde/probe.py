"""Filesystem probing helpers shared by the checks.

Every helper degrades instead of raising: a missing or unreadable file comes
back as ``None``, a missing or malformed manifest comes back as ``{}``.
Lookups never descend below the directory they are given.
"""

from __future__ import annotations

import json
import logging
import os
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

DEFAULT_MAX_READ_BYTES = 1024 * 1024
MANIFEST = "package.json"

# json.loads also raises a plain ValueError for over-long integer literals
# and RecursionError for very deep nesting.
JSON_ERRORS = (ValueError, RecursionError)

# Strings are matched first so comment markers inside them survive,
# e.g. "https://example.com" in a "paths" entry.
_JSONC_COMMENT = re.compile(
    r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/',
    re.DOTALL,
)
_JSONC_TRAILING_COMMA = re.compile(r'("(?:\\.|[^"\\])*")|,(\s*[}\]])')


def max_read_bytes() -> int:
    """Per-file read cap, from REPOGRADE_MAX_READ_BYTES (default 1 MiB)."""
    raw = os.environ.get("REPOGRADE_MAX_READ_BYTES", "")
    if not raw:
        return DEFAULT_MAX_READ_BYTES
    try:
        value = int(raw)
    except ValueError:
        log.warning("Ignoring invalid REPOGRADE_MAX_READ_BYTES=%r", raw)
        return DEFAULT_MAX_READ_BYTES
    return value if value > 0 else DEFAULT_MAX_READ_BYTES


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def list_dir(directory: Path) -> list[str]:
    """Sorted entry names of a directory, or [] if it cannot be listed."""
    try:
        return sorted(os.listdir(directory))
    except OSError:
        return []


def find_file(directory: Path, names: Iterable[str]) -> Path | None:
    """Case-insensitive lookup of the first matching name.

    ``names`` are tried in priority order. Within one name, the alphabetically
    first listing entry wins, so ``LICENSE`` beats ``License`` beats
    ``license`` on case-sensitive filesystems.
    """
    entries = list_dir(directory)
    if not entries:
        return None
    for name in names:
        wanted = name.lower()
        for entry in entries:
            if entry.lower() == wanted:
                return directory / entry
    return None


def exists(directory: Path, *parts: str) -> bool:
    """Whether ``directory/parts...`` exists (file or directory)."""
    return directory.joinpath(*parts).exists()


def any_exists(directory: Path, names: Iterable[str]) -> bool:
    """Whether any of ``names`` exists directly under ``directory``."""
    return any(exists(directory, name) for name in names)


def existing(directory: Path, names: Iterable[str]) -> list[str]:
    """The subset of ``names`` that exist under ``directory``, in order."""
    return [name for name in names if exists(directory, name)]


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


def read_text(path: Path) -> str | None:
    """Read a UTF-8 text file, capped at ``max_read_bytes()``.

    Returns None if the file cannot be read. Invalid byte sequences are
    replaced rather than rejected.
    """
    try:
        with open(path, "rb") as f:
            data = f.read(max_read_bytes())
    except OSError as exc:
        log.warning("Cannot read %s: %s", path, exc)
        return None
    return data.decode("utf-8", errors="replace")


def parse_jsonc(text: str) -> Any:
    """Parse JSON that may contain comments and trailing commas.

    Raises one of JSON_ERRORS on anything still invalid after stripping.
    """
    stripped = _JSONC_COMMENT.sub(lambda m: m.group(1) or "", text)
    stripped = _JSONC_TRAILING_COMMA.sub(
        lambda m: m.group(1) or m.group(2), stripped)
    return json.loads(stripped)


def load_manifest(directory: Path) -> dict[str, Any]:
    """Lenient package.json loader for checks that only peek at fields.

    Absent, unreadable, invalid or non-object manifests all yield {}.
    Only the package metadata check reports on manifest validity.
    """
    path = directory / MANIFEST
    if not path.is_file():
        return {}
    content = read_text(path)
    if not content:
        return {}
    try:
        data = json.loads(content)
    except JSON_ERRORS as exc:
        log.debug("Ignoring malformed %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def mapping(value: Any) -> dict[str, Any]:
    """``value`` if it is a dict, else {}."""
    return value if isinstance(value, dict) else {}


def scripts_of(manifest: dict[str, Any]) -> dict[str, Any]:
    """The manifest's ``scripts`` table."""
    return mapping(manifest.get("scripts"))


def dependencies_of(manifest: dict[str, Any]) -> dict[str, Any]:
    """Runtime and dev dependencies merged; dev entries win on conflict."""
    deps = dict(mapping(manifest.get("dependencies")))
    deps.update(mapping(manifest.get("devDependencies")))
    return deps
