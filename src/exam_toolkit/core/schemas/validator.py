"""
Schema Validation Utilities

Validates question-bank JSON data before it becomes model objects.

This is the authoring boundary: the version engine assumes well-formed
questions, so malformed payloads (missing options, out-of-range correct
index, negative points) are rejected here with a path to the offending
field instead of surfacing later as a wrong answer key.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

BANK_SCHEMA_VERSION = 1

_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


def _question_schema() -> dict:
    bank = _load_schema("question_bank")
    return {
        "$schema": bank["$schema"],
        "$defs": bank["$defs"],
        "$ref": "#/$defs/question",
    }


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _run_schema(data: Any, schema: dict, prefix: str = "") -> None:
    validator = jsonschema.Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if not errors:
        return
    first = errors[0]
    parts = [prefix] if prefix else []
    parts.extend(str(p) for p in first.absolute_path)
    raise ValidationError(
        f"Schema validation failed: {first.message}",
        path=".".join(parts),
        errors=[e.message for e in errors],
    )


def _check_correct_index(data: dict[str, Any], path: str) -> None:
    """Cross-field check the schema cannot express."""
    if data.get("type") != "multiple-choice":
        return
    options = data["options"]
    correct = data["correctOption"]
    if correct >= len(options):
        raise ValidationError(
            f"correctOption {correct} out of range for {len(options)} options",
            path=f"{path}.correctOption" if path else "correctOption",
        )


def validate_question(data: dict[str, Any], *, path: str = "") -> None:
    """
    Validate one question payload.

    Args:
        data: Question dictionary (authoring key names)
        path: Location prefix used in error paths

    Raises:
        ValidationError: If data is invalid
    """
    _run_schema(data, _question_schema(), prefix=path)
    _check_correct_index(data, path)


def validate_bank(data: dict[str, Any]) -> None:
    """
    Validate a complete bank payload ({"settings": ..., "questions": [...]}).

    Raises:
        ValidationError: If data is invalid or a question id repeats
    """
    _run_schema(data, _load_schema("question_bank"))

    version = data.get("schema_version", BANK_SCHEMA_VERSION)
    if version != BANK_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported bank schema version: {version} (expected {BANK_SCHEMA_VERSION})",
            path="schema_version",
        )

    seen: set[str] = set()
    for i, q in enumerate(data["questions"]):
        _check_correct_index(q, f"questions.{i}")
        if q["id"] in seen:
            raise ValidationError(
                f"Duplicate question id: {q['id']!r}",
                path=f"questions.{i}.id",
            )
        seen.add(q["id"])
