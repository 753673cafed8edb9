"""
Module: versioning.builder

Purpose:
    Build one exam version from the question bank and a shuffle policy.
    Question order → Option order → Lettered snapshot

Key Functions:
    - build_version(): Produce a single ExamVersion
    - version_code(): Letter code for a 0-based version index

Dependencies:
    - versioning.permutation: Question order
    - versioning.options: Option order with correct-index remapping

Used By:
    - versioning.manager: Bulk generation
"""

from __future__ import annotations

import logging
import random
import uuid
from dataclasses import replace
from typing import Iterable, Optional, Union

from exam_toolkit.core.models.questions import Question
from exam_toolkit.core.models.versions import (
    ExamVersion,
    ShuffleMode,
    ShufflePolicy,
    option_letter,
)

from .options import remap_options
from .permutation import shuffled

logger = logging.getLogger(__name__)


def version_code(index: int) -> str:
    """
    Letter code for the version at ``index`` (0 -> "A", 25 -> "Z").

    Raises:
        ValueError: If index is outside 0-25
    """
    return option_letter(index)


def build_version(
    questions: Iterable[Question],
    policy: Union[ShufflePolicy, ShuffleMode],
    index: int,
    rng: Optional[random.Random] = None,
    version_id: Optional[str] = None,
) -> ExamVersion:
    """
    Build one version of the exam.

    Steps:
    1. Permute question order when policy.shuffle_questions is set
    2. Remap options of every multiple-choice question when
       policy.shuffle_options is set, otherwise copy questions as-is

    The source bank is never modified. Questions are frozen, so the
    version's snapshots cannot leak edits into the bank or other versions.

    Args:
        questions: Question bank in authoring order
        policy: ShufflePolicy, or a ShuffleMode converted to its policy
        index: 0-based position, only used to derive the letter code
        rng: Random source shared by all draws of this version
        version_id: Explicit id, generated when omitted

    Returns:
        ExamVersion with code version_code(index)

    Example:
        >>> v = build_version(bank, ShuffleMode.OPTIONS_ONLY, 1)
        >>> v.code
        'B'
    """
    if isinstance(policy, ShuffleMode):
        policy = policy.policy
    rng = rng or random.Random()
    code = version_code(index)

    processed = list(questions)

    if policy.shuffle_questions:
        processed = shuffled(processed, rng)

    if policy.shuffle_options:
        processed = [remap_options(q, rng) for q in processed]
    else:
        processed = [replace(q) for q in processed]

    version = ExamVersion(
        id=version_id or f"{uuid.uuid4().hex[:12]}-{index}",
        code=code,
        questions=tuple(processed),
    )
    logger.debug(
        f"Built version {code} ({len(version.questions)} questions, "
        f"shuffle_questions={policy.shuffle_questions}, "
        f"shuffle_options={policy.shuffle_options})"
    )
    return version
