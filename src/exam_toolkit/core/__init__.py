"""
Exam Toolkit Core Package

Shared data models, schema validation and serialization used by the
versioning engine and the command-line interface.
"""

from .models import (
    AnswerKeyEntry,
    ExamSettings,
    ExamVersion,
    Question,
    QuestionBank,
    QuestionType,
    ShuffleMode,
    ShufflePolicy,
)

__all__ = [
    "Question",
    "QuestionType",
    "QuestionBank",
    "ExamSettings",
    "ShuffleMode",
    "ShufflePolicy",
    "ExamVersion",
    "AnswerKeyEntry",
]
