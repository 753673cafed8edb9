"""Top-level package for the Exam Toolkit.

Provides subpackages:
- exam_toolkit.core – immutable question/version models, schema validation, serialization
- exam_toolkit.versioning – randomized version generation and answer keys
- exam_toolkit.output – plain-text rendering of versions and answer keys
- exam_toolkit.cli – command-line entry point
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

DIST_NAME = "exam-toolkit"


def _read_pyproject_version(pyproject: Path) -> Optional[str]:
    """Version declared by a source checkout's pyproject.toml, or None.

    Only a file whose [project] name is this distribution counts, so an
    unrelated pyproject.toml above an installed copy is ignored.
    """
    try:
        content = pyproject.read_text(encoding="utf-8")
    except OSError:
        return None

    fields: dict[str, str] = {}
    in_project = False
    for line in content.splitlines():
        line = line.strip()
        if line.startswith("["):
            in_project = line == "[project]"
        elif in_project and "=" in line:
            # Parse: version = "0.3.0"
            key, value = line.split("=", 1)
            fields[key.strip()] = value.strip().strip('"').strip("'")

    if fields.get("name") != DIST_NAME:
        return None
    return fields.get("version") or None


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    version = _read_pyproject_version(pyproject)
    if version:
        return version

    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
