"""
Serialization Utilities

Converts between model objects and the JSON layout used by question-bank
files and the CLI's --json output.

Key names follow the authoring form (``correctOption``, ``professorName``)
so bank files exported by the authoring UI load unchanged. Payloads are
validated against the bank schema before any model is constructed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

from ..models.bank import QuestionBank
from ..models.questions import Question, QuestionType
from ..models.settings import ExamSettings
from ..models.versions import AnswerKeyEntry, ExamVersion
from ..schemas.validator import BANK_SCHEMA_VERSION, ValidationError, validate_bank, validate_question

logger = logging.getLogger(__name__)

_SETTINGS_KEYS = {
    "professorName": "professor_name",
    "universityName": "university_name",
    "course": "course",
    "subject": "subject",
    "date": "date",
    "duration": "duration",
    "logoUrl": "logo_url",
}


class BankLoadError(Exception):
    """Error loading a question bank file."""
    pass


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def question_to_dict(question: Question) -> dict[str, Any]:
    """
    Serialize a Question to a dictionary.

    Options and correctOption are only present for multiple choice.
    """
    d: dict[str, Any] = {
        "id": question.id,
        "type": question.type.value,
        "text": question.text,
        "points": question.points,
    }
    if question.is_multiple_choice:
        d["options"] = list(question.options)
        d["correctOption"] = question.correct_option
    return d


def question_from_dict(data: dict[str, Any], *, validate: bool = True) -> Question:
    """
    Deserialize a Question from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against the schema first

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data violates the model invariants
    """
    if validate:
        validate_question(data)

    options = data.get("options")
    return Question(
        id=data["id"],
        type=QuestionType(data["type"]),
        text=data["text"],
        points=float(data["points"]),
        options=tuple(options) if options is not None else None,
        correct_option=data.get("correctOption"),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Settings / Bank Serialization
# ─────────────────────────────────────────────────────────────────────────────

def settings_to_dict(settings: ExamSettings) -> dict[str, str]:
    return {key: getattr(settings, attr) for key, attr in _SETTINGS_KEYS.items()}


def settings_from_dict(data: dict[str, Any]) -> ExamSettings:
    kwargs = {attr: data[key] for key, attr in _SETTINGS_KEYS.items() if key in data}
    return ExamSettings(**kwargs)


def bank_to_dict(bank: QuestionBank, settings: Optional[ExamSettings] = None) -> dict[str, Any]:
    d: dict[str, Any] = {
        "schema_version": BANK_SCHEMA_VERSION,
        "questions": [question_to_dict(q) for q in bank],
    }
    if settings is not None:
        d["settings"] = settings_to_dict(settings)
    return d


def bank_from_dict(data: dict[str, Any]) -> tuple[QuestionBank, ExamSettings]:
    """
    Build a bank and its header settings from a validated payload.

    Returns:
        (QuestionBank, ExamSettings); settings default when the block is absent

    Raises:
        ValidationError: If the payload fails schema validation
        ValueError: If a question or the settings violate model invariants
    """
    validate_bank(data)
    questions = [question_from_dict(q, validate=False) for q in data["questions"]]
    settings = settings_from_dict(data.get("settings", {}))
    return QuestionBank.of(questions), settings


def load_question_bank(path: Path) -> tuple[QuestionBank, ExamSettings]:
    """
    Load a question bank file.

    Args:
        path: JSON file with {"settings": {...}, "questions": [...]}

    Returns:
        (QuestionBank, ExamSettings)

    Raises:
        BankLoadError: If the file is missing, not JSON, or invalid
    """
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise BankLoadError(f"Question bank not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise BankLoadError(f"Could not read question bank {path}: {e}") from e

    if not isinstance(payload, dict):
        raise BankLoadError(f"Question bank root must be an object: {path}")

    try:
        bank, settings = bank_from_dict(payload)
    except ValidationError as e:
        where = f" at {e.path}" if e.path else ""
        raise BankLoadError(f"Invalid question bank {path.name}{where}: {e}") from e
    except ValueError as e:
        raise BankLoadError(f"Invalid question bank {path.name}: {e}") from e

    logger.info(f"Loaded {len(bank)} questions from {path}")
    return bank, settings


# ─────────────────────────────────────────────────────────────────────────────
# Version Serialization
# ─────────────────────────────────────────────────────────────────────────────

def version_to_dict(
    version: ExamVersion,
    answer_key: Optional[Sequence[AnswerKeyEntry]] = None,
) -> dict[str, Any]:
    """
    Serialize a generated version.

    Args:
        version: Version to serialize
        answer_key: Derived key to embed, or None when not eligible

    Returns:
        Dict with id, code, totalPoints, questions and (optionally) answerKey
    """
    d: dict[str, Any] = {
        "id": version.id,
        "code": version.code,
        "totalPoints": version.total_points,
        "questions": [question_to_dict(q) for q in version.questions],
    }
    if answer_key is not None:
        d["answerKey"] = [
            {"position": e.position, "correctOption": e.correct_option, "letter": e.letter}
            for e in answer_key
        ]
    return d


def versions_to_dict(
    versions: Iterable[ExamVersion],
    answer_keys: Optional[dict[str, Sequence[AnswerKeyEntry]]] = None,
    settings: Optional[ExamSettings] = None,
) -> dict[str, Any]:
    """
    Serialize a whole version set, embedding keys by version code.

    ``answer_keys`` is None when the set is not eligible for a key.
    """
    keys = answer_keys or {}
    d: dict[str, Any] = {
        "versions": [version_to_dict(v, keys.get(v.code)) for v in versions],
        "answerKeyEligible": answer_keys is not None,
    }
    if settings is not None:
        d["settings"] = settings_to_dict(settings)
    return d
