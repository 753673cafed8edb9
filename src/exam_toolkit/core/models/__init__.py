"""
Core Models Package

Immutable data models shared by the version engine, serialization and
output. All models are frozen dataclasses with tuple sequences, so a
generated version can never alias-mutate the bank it came from or any
other version.
"""

from .questions import MAX_OPTIONS, Question, QuestionType, is_objective_only
from .bank import QuestionBank
from .settings import ExamSettings
from .versions import (
    AnswerKeyEntry,
    ExamVersion,
    ShuffleMode,
    ShufflePolicy,
    option_letter,
)

__all__ = [
    "Question",
    "QuestionType",
    "MAX_OPTIONS",
    "is_objective_only",
    "QuestionBank",
    "ExamSettings",
    "ShuffleMode",
    "ShufflePolicy",
    "ExamVersion",
    "AnswerKeyEntry",
    "option_letter",
]
