"""
Module: versioning.options

Purpose:
    Shuffle a multiple-choice question's options while keeping the
    correct-option index attached to the originally correct option.

Key Functions:
    - remap_options(): Permute options and recompute correct_option

Used By:
    - versioning.builder: Option shuffling per version
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Optional

from exam_toolkit.core.models.questions import Question

from .permutation import shuffled

logger = logging.getLogger(__name__)


def remap_options(question: Question, rng: Optional[random.Random] = None) -> Question:
    """
    Return a copy of ``question`` with its options permuted.

    Each option is paired with its original index before shuffling and
    the new correct_option is the position of the pair whose original
    index was the old correct_option. Tracking is by position, never by
    text, so duplicate option texts cannot steal the correct mark.

    Essay questions are returned unchanged.

    Args:
        question: Question to remap
        rng: Random source; a fresh unseeded generator when omitted

    Returns:
        Question whose correct_text equals the input's correct_text

    Example:
        >>> q = Question.multiple_choice("2 + 2?", ["2", "4", "6", "8"], correct_option=1)
        >>> remap_options(q).correct_text
        '4'
    """
    if not question.is_multiple_choice:
        return question

    paired = shuffled(enumerate(question.options), rng)
    new_correct = next(
        pos for pos, (original, _) in enumerate(paired)
        if original == question.correct_option
    )

    logger.debug(
        f"Remapped {question.id}: correct option {question.correct_option} -> {new_correct}"
    )
    return replace(
        question,
        options=tuple(text for _, text in paired),
        correct_option=new_correct,
    )
