"""
Module: bank

Purpose:
    Provides the QuestionBank dataclass - the ordered, read-only input
    to version generation. Adding or removing a question returns a new
    bank; existing banks (and versions built from them) never change.

Key Functions:
    - QuestionBank.add(question): Append a question
    - QuestionBank.remove(question_id): Drop a question by id
    - QuestionBank.total_points: Sum of question weights
    - QuestionBank.is_objective_only: All questions are multiple choice

Dependencies:
    - dataclasses (std)
    - .questions.Question

Used By:
    - versioning.builder / versioning.manager
    - core.utils.serialization
    - cli
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .questions import Question, is_objective_only


@dataclass(frozen=True)
class QuestionBank:
    """
    Ordered collection of authored questions (immutable).

    Attributes:
        questions: Questions in authoring order

    Invariants:
        - question ids are unique

    Example:
        >>> bank = QuestionBank().add(Question.essay("Explain recursion."))
        >>> len(bank)
        1
    """

    questions: tuple[Question, ...] = ()

    def __post_init__(self) -> None:
        """Validate bank on construction."""
        if not isinstance(self.questions, tuple):
            object.__setattr__(self, "questions", tuple(self.questions))
        seen: set[str] = set()
        for q in self.questions:
            if q.id in seen:
                raise ValueError(f"duplicate question id in bank: {q.id!r}")
            seen.add(q.id)

    @classmethod
    def of(cls, questions: Iterable[Question]) -> QuestionBank:
        return cls(tuple(questions))

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.questions)

    def __getitem__(self, index: int) -> Question:
        return self.questions[index]

    # ─────────────────────────────────────────────────────────────────────────
    # Editing (returns new banks)
    # ─────────────────────────────────────────────────────────────────────────

    def add(self, question: Question) -> QuestionBank:
        """
        Append a question to the end of the bank.

        Raises:
            ValueError: If a question with the same id is already present
        """
        return QuestionBank(self.questions + (question,))

    def remove(self, question_id: str) -> QuestionBank:
        """Drop the question with the given id (no-op when absent)."""
        return QuestionBank(tuple(q for q in self.questions if q.id != question_id))

    def get(self, question_id: str) -> Optional[Question]:
        for q in self.questions:
            if q.id == question_id:
                return q
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def total_points(self) -> float:
        """Sum of all question weights."""
        return sum(q.points for q in self.questions)

    @property
    def is_objective_only(self) -> bool:
        """True when the bank is non-empty and every question is multiple choice."""
        return is_objective_only(self.questions)
