import random
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import exam_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from exam_toolkit.core.models import Question, QuestionBank  # noqa: E402


# Common test fixtures
@pytest.fixture
def rng():
    """Seeded random source so shuffles are reproducible inside a test."""
    return random.Random(1234)


@pytest.fixture
def mc_question():
    """The "2 + 2" question with the correct answer at index 1."""
    return Question.multiple_choice(
        "Quanto é $2 + 2$?", ["2", "4", "6", "8"], correct_option=1, points=1.0, id="q1"
    )


@pytest.fixture
def essay_question():
    return Question.essay("Explique o teorema de Pitágoras.", points=2.5, id="q2")


@pytest.fixture
def mixed_bank(mc_question, essay_question):
    """Bank with one multiple-choice and one essay question."""
    return QuestionBank.of([mc_question, essay_question])


@pytest.fixture
def objective_bank():
    """Five multiple-choice questions, correct answer text "right-<n>"."""
    questions = []
    for n in range(5):
        options = [f"wrong-{n}-{k}" for k in range(3)]
        options.insert(n % 4, f"right-{n}")
        questions.append(
            Question.multiple_choice(
                f"Question {n}", options, correct_option=n % 4, points=1.0, id=f"mc{n}"
            )
        )
    return QuestionBank.of(questions)


@pytest.fixture
def bank_payload():
    """Bank file contents in the authoring JSON layout."""
    return {
        "schema_version": 1,
        "settings": {
            "professorName": "Ada Lovelace",
            "universityName": "Universidade Federal",
            "course": "Engenharia",
            "subject": "Cálculo I",
            "date": "2026-03-15",
            "duration": "90 minutos",
            "logoUrl": "",
        },
        "questions": [
            {
                "id": "q1",
                "type": "multiple-choice",
                "text": "Quanto é $2 + 2$?",
                "points": 1.0,
                "options": ["2", "4", "6", "8"],
                "correctOption": 1,
            },
            {
                "id": "q2",
                "type": "essay",
                "text": "Explique o teorema de Pitágoras.",
                "points": 2.5,
            },
        ],
    }
