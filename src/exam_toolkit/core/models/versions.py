"""
Module: versions

Purpose:
    Models for generated exam variants: the shuffle policy that produced
    them, the ExamVersion snapshot itself, and answer-key entries
    projected from a version.

Key Classes:
    - ShuffleMode: User-selectable policy (both / questions / options)
    - ShufflePolicy: Two independent axes, including "shuffle nothing"
    - ExamVersion: One lettered variant of the bank
    - AnswerKeyEntry: (position, correct option) pair for one question

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .questions.Question

Used By:
    - versioning.builder / versioning.manager / versioning.answer_key
    - output.text
    - core.utils.serialization

Design Note:
    ShuffleMode only exposes the three combinations a user may pick.
    The engine itself works on ShufflePolicy, where the fourth
    combination (neither axis) is representable without special cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .questions import Question

CODE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def option_letter(index: int) -> str:
    """
    Letter label for a zero-based index (0 -> "A").

    Used for both version codes and option labels.

    Raises:
        ValueError: If index is outside 0-25
    """
    if not (0 <= index < len(CODE_ALPHABET)):
        raise ValueError(f"letter index must be 0-25: {index}")
    return CODE_ALPHABET[index]


@dataclass(frozen=True)
class ShufflePolicy:
    """
    What gets permuted when building a version (immutable).

    Attributes:
        shuffle_questions: Permute question order
        shuffle_options: Permute option order of multiple-choice questions
    """

    shuffle_questions: bool
    shuffle_options: bool

    @classmethod
    def none(cls) -> ShufflePolicy:
        """Policy that keeps everything in authoring order."""
        return cls(shuffle_questions=False, shuffle_options=False)


class ShuffleMode(str, Enum):
    """
    User-facing shuffle selection.

    Attributes:
        BOTH: Shuffle question order and option order
        QUESTIONS_ONLY: Shuffle question order, keep options
        OPTIONS_ONLY: Keep question order, shuffle options

    Example:
        >>> ShuffleMode("questions").policy
        ShufflePolicy(shuffle_questions=True, shuffle_options=False)
    """

    BOTH = "both"
    QUESTIONS_ONLY = "questions"
    OPTIONS_ONLY = "options"

    @property
    def policy(self) -> ShufflePolicy:
        return ShufflePolicy(
            shuffle_questions=self in (ShuffleMode.BOTH, ShuffleMode.QUESTIONS_ONLY),
            shuffle_options=self in (ShuffleMode.BOTH, ShuffleMode.OPTIONS_ONLY),
        )


@dataclass(frozen=True)
class ExamVersion:
    """
    One generated exam variant (immutable).

    Attributes:
        id: Unique within a generation call
        code: Single letter, equal to the letter at the version's position
        questions: Processed question snapshots in printed order

    Invariants:
        - code is a single letter A-Z
        - questions are frozen, so no version can alias-mutate another
          version or the source bank
    """

    id: str
    code: str
    questions: tuple[Question, ...]

    def __post_init__(self) -> None:
        """Validate version on construction."""
        if not isinstance(self.questions, tuple):
            object.__setattr__(self, "questions", tuple(self.questions))
        if len(self.code) != 1 or self.code not in CODE_ALPHABET:
            raise ValueError(f"version code must be a single letter A-Z: {self.code!r}")

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.questions)

    @property
    def total_points(self) -> float:
        return sum(q.points for q in self.questions)

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"ExamVersion({self.code}, id={self.id!r}, questions={len(self.questions)})"


@dataclass(frozen=True)
class AnswerKeyEntry:
    """
    Answer for one question of a version.

    Attributes:
        position: 1-based question number as printed
        correct_option: Zero-based index of the correct option
    """

    position: int
    correct_option: int

    @property
    def letter(self) -> str:
        """Printed letter of the correct option (0 -> "A")."""
        return option_letter(self.correct_option)
