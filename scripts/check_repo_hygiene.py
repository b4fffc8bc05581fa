"""Basic repository hygiene checks for unexpected top-level directories.

Run manually or in CI to catch stray artifacts (e.g., extracted paths or temp folders)
that clutter the workspace and confuse tooling.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable, Set

ROOT = Path(__file__).resolve().parents[1]

# Directories we expect to live at the repository root.
DEFAULT_ALLOWED_DIRS: Set[str] = {
    ".claude",
    ".git",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    ".venv",
    "build",
    "dist",
    "docs",
    "scripts",
    "src",
    "tests",
    "venv",
}

# Packaging metadata such as ``proctor_lab.egg-info``
ALLOWED_SUFFIXES = (".egg-info",)


def _load_extra_allowed() -> Set[str]:
    """Load optional extra allowed directories from env (comma-separated)."""
    raw = os.getenv("PROCTOR_HYGIENE_ALLOW")
    if not raw:
        return set()
    return {name.strip() for name in raw.split(",") if name.strip()}


def _find_unexpected_dirs(allowed: Iterable[str]) -> list[Path]:
    allowed_set = set(allowed)
    unexpected: list[Path] = []
    for path in ROOT.iterdir():
        if not path.is_dir() or path.name in allowed_set:
            continue
        if path.name.endswith(ALLOWED_SUFFIXES):
            continue
        unexpected.append(path)
    return unexpected


def main() -> int:
    allowed_dirs = DEFAULT_ALLOWED_DIRS | _load_extra_allowed()
    unexpected = _find_unexpected_dirs(allowed_dirs)
    if unexpected:
        print("Unexpected top-level directories detected:")
        for path in unexpected:
            print(f" - {path.name!r} ({str(path)!r})")
        print("\nRemove these or add to PROCTOR_HYGIENE_ALLOW if intentional.")
        return 1

    print("Repository hygiene check passed (no unexpected top-level directories).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
