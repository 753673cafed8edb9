"""
Module: versioning.answer_key

Purpose:
    Decide whether an answer key may be shown and project it from a
    version. The key is never stored: it is always recomputed from the
    version's own questions, so it cannot drift from the printed options.

Key Functions:
    - is_answer_key_eligible(): Non-empty and all multiple choice
    - derive_answer_key(): (position, correct option) per question
    - answer_keys(): Keys for a whole set, or None when ineligible

Used By:
    - output.text: Answer-key rendering
    - cli: Key output and --json
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from exam_toolkit.core.models.questions import Question, is_objective_only
from exam_toolkit.core.models.versions import AnswerKeyEntry, ExamVersion

logger = logging.getLogger(__name__)


def is_answer_key_eligible(questions: Iterable[Question]) -> bool:
    """
    True iff ``questions`` is non-empty and every question is multiple choice.

    Same predicate as QuestionBank.is_objective_only, applied to any
    sequence of questions (a bank or a single version).
    """
    return is_objective_only(questions)


def derive_answer_key(version: ExamVersion) -> tuple[AnswerKeyEntry, ...]:
    """
    Project the answer key of one version.

    Args:
        version: Version whose questions are all multiple choice

    Returns:
        One entry per question in printed order, positions starting at 1

    Raises:
        ValueError: If the version contains a question without options
    """
    if not is_answer_key_eligible(version.questions):
        raise ValueError(f"version {version.code} is not eligible for an answer key")
    return tuple(
        AnswerKeyEntry(position=i, correct_option=q.correct_option)
        for i, q in enumerate(version.questions, start=1)
    )


def answer_keys(
    versions: Iterable[ExamVersion],
    questions: Iterable[Question],
) -> Optional[dict[str, tuple[AnswerKeyEntry, ...]]]:
    """
    Answer keys for a version set, keyed by version code.

    Args:
        versions: Generated versions
        questions: Question bank the versions were built from

    Returns:
        {code: key} when the bank is eligible, otherwise None
    """
    if not is_answer_key_eligible(questions):
        logger.info("Bank contains essay questions (or is empty); no answer key derived")
        return None
    return {v.code: derive_answer_key(v) for v in versions}
