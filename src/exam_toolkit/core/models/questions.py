"""
Module: questions

Purpose:
    Provides the Question dataclass - the authored unit of an exam bank.
    A question is either multiple choice (ordered options plus the index
    of the correct one) or essay (free answer, no options). Immutable:
    every transformation returns a new instance.

Key Functions:
    - Question.multiple_choice(): Build a multiple-choice question from form input
    - Question.essay(): Build an essay question
    - Question.without_option(index): Drop an option, keeping the correct pointer
    - Question.correct_text: Text of the correct option
    - is_objective_only(): Non-empty and every question multiple choice

Dependencies:
    - dataclasses (std)
    - enum (std)
    - uuid (std)

Used By:
    - core.models.bank.QuestionBank
    - core.models.versions.ExamVersion
    - versioning (permutation, remapping, building)
    - core.utils.serialization
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional


class QuestionType(str, Enum):
    """
    Kind of question.

    Values match the keys used by the authoring form and bank files.
    """

    MULTIPLE_CHOICE = "multiple-choice"
    ESSAY = "essay"


# Each option is printed and keyed with a single letter (A-Z)
MAX_OPTIONS = 26


def new_question_id() -> str:
    """Generate an opaque unique question identifier."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Question:
    """
    Authored exam question (immutable).

    Attributes:
        id: Opaque unique identifier
        type: MULTIPLE_CHOICE or ESSAY
        text: Question statement (may embed LaTeX, never interpreted here)
        points: Non-negative weight
        options: Ordered option texts (multiple choice only)
        correct_option: Zero-based index into options (multiple choice only)

    Invariants:
        - points >= 0
        - multiple choice: 2 <= len(options) <= MAX_OPTIONS and 0 <= correct_option < len(options)
        - essay: options and correct_option are both None

    Example:
        >>> q = Question.multiple_choice("2 + 2?", ["2", "4", "6"], correct_option=1)
        >>> q.correct_text
        '4'
    """

    id: str
    type: QuestionType
    text: str
    points: float = 1.0
    options: Optional[tuple[str, ...]] = None
    correct_option: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not isinstance(self.type, QuestionType):
            # Accept the raw string tag ("essay") from callers and files
            object.__setattr__(self, "type", QuestionType(self.type))
        if self.options is not None and not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))

        if self.points < 0:
            raise ValueError(f"points must be non-negative: {self.points}")

        if self.type is QuestionType.MULTIPLE_CHOICE:
            if self.options is None or self.correct_option is None:
                raise ValueError(
                    f"multiple-choice question {self.id!r} needs options and correct_option"
                )
            if len(self.options) < 2:
                raise ValueError(
                    f"multiple-choice question {self.id!r} needs at least 2 options: "
                    f"{len(self.options)}"
                )
            if len(self.options) > MAX_OPTIONS:
                raise ValueError(
                    f"multiple-choice question {self.id!r} allows at most {MAX_OPTIONS} options: "
                    f"{len(self.options)}"
                )
            if not (0 <= self.correct_option < len(self.options)):
                raise ValueError(
                    f"correct_option out of range for {self.id!r}: {self.correct_option} "
                    f"(options: {len(self.options)})"
                )
        elif self.options is not None or self.correct_option is not None:
            raise ValueError(f"essay question {self.id!r} cannot have options")

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def multiple_choice(
        cls,
        text: str,
        options: Iterable[str],
        correct_option: int = 0,
        points: float = 1.0,
        id: Optional[str] = None,
    ) -> Question:
        """
        Create a multiple-choice question from form input.

        Blank options are dropped before validation, the same way the
        authoring form filters empty option fields. ``correct_option``
        indexes the fields as entered (blanks included) and follows its
        text to the new position once blanks are gone.

        Args:
            text: Question statement
            options: Option texts, blanks allowed
            correct_option: Index of the correct field as entered
            points: Question weight
            id: Identifier, generated when omitted

        Returns:
            Question with type MULTIPLE_CHOICE

        Raises:
            ValueError: If the marked field is blank or out of range, or
                fewer than 2 non-blank options remain

        Example:
            >>> Question.multiple_choice("2 + 2?", ["", "4", "6"], correct_option=1).correct_text
            '4'
        """
        fields = list(options)
        if not (0 <= correct_option < len(fields)):
            raise ValueError(
                f"correct_option out of range: {correct_option} (fields: {len(fields)})"
            )
        if not fields[correct_option].strip():
            raise ValueError(f"correct option {correct_option} is blank")

        kept = [(i, o) for i, o in enumerate(fields) if o.strip()]
        return cls(
            id=id or new_question_id(),
            type=QuestionType.MULTIPLE_CHOICE,
            text=text,
            points=points,
            options=tuple(o for _, o in kept),
            correct_option=next(pos for pos, (i, _) in enumerate(kept) if i == correct_option),
        )

    @classmethod
    def essay(cls, text: str, points: float = 1.0, id: Optional[str] = None) -> Question:
        """Create an essay question."""
        return cls(id=id or new_question_id(), type=QuestionType.ESSAY, text=text, points=points)

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_multiple_choice(self) -> bool:
        return self.type is QuestionType.MULTIPLE_CHOICE

    @property
    def correct_text(self) -> Optional[str]:
        """
        Text of the correct option.

        Returns:
            Option text, or None for essay questions
        """
        if not self.is_multiple_choice:
            return None
        return self.options[self.correct_option]

    # ─────────────────────────────────────────────────────────────────────────
    # Transformations
    # ─────────────────────────────────────────────────────────────────────────

    def without_option(self, index: int) -> Question:
        """
        Remove one option while keeping the correct pointer on the same text.

        When an option before the correct one is removed the pointer moves
        down by one. When the correct option itself is removed the pointer
        stays at the same index, clamped to the new last option.

        Args:
            index: Zero-based option index to remove

        Returns:
            New Question with one option fewer

        Raises:
            ValueError: If the question is not multiple choice, has only
                2 options left, or index is out of range
        """
        if not self.is_multiple_choice:
            raise ValueError(f"question {self.id!r} has no options to remove")
        if len(self.options) <= 2:
            raise ValueError(f"question {self.id!r} must keep at least 2 options")
        if not (0 <= index < len(self.options)):
            raise ValueError(f"option index out of range: {index}")

        options = self.options[:index] + self.options[index + 1:]
        correct = self.correct_option
        if index < correct:
            correct -= 1
        correct = min(correct, len(options) - 1)
        return replace(self, options=options, correct_option=correct)

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        if self.is_multiple_choice:
            return (
                f"Question({self.id!r}, {self.type.value}, points={self.points}, "
                f"options={len(self.options)}, correct={self.correct_option})"
            )
        return f"Question({self.id!r}, {self.type.value}, points={self.points})"


def is_objective_only(questions: Iterable[Question]) -> bool:
    """
    True iff ``questions`` is non-empty and every question is multiple choice.

    Shuffling never changes a question's type, so checking a bank answers
    the question for every version built from it.
    """
    questions = list(questions)
    return bool(questions) and all(q.is_multiple_choice for q in questions)
