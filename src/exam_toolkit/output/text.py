"""
Module: output.text

Purpose:
    Plain-text rendering of a generated version and its answer key for
    terminal output. Question and option text is passed through verbatim
    (LaTeX snippets included); page layout is left to downstream tools.

Key Functions:
    - render_header(): Exam header block
    - render_version(): Numbered questions with lettered options
    - render_answer_key(): "1. B" lines for one version
"""

from __future__ import annotations

from exam_toolkit.core.models.questions import Question
from exam_toolkit.core.models.settings import ExamSettings
from exam_toolkit.core.models.versions import ExamVersion, option_letter
from exam_toolkit.versioning.answer_key import derive_answer_key

RULE = "=" * 60
ESSAY_ANSWER_LINES = 5


def _format_points(points: float) -> str:
    unit = "pt" if points == 1 else "pts"
    return f"({points:.1f} {unit})"


def render_header(settings: ExamSettings, version: ExamVersion, title: str = "EXAM") -> str:
    lines = [
        RULE,
        settings.university_name or "Institution",
        " / ".join(p for p in (settings.course, settings.subject) if p) or "-",
        f"Professor: {settings.professor_name or '-'}",
        f"Date: {settings.display_date}    Duration: {settings.duration or '-'}",
        f"{title} - VERSION {version.code}",
        RULE,
    ]
    return "\n".join(lines)


def _render_question(position: int, question: Question) -> list[str]:
    lines = [f"{position}. {question.text} {_format_points(question.points)}"]
    if question.is_multiple_choice:
        for i, option in enumerate(question.options):
            lines.append(f"   {option_letter(i)}) {option}")
    else:
        lines.extend("   " + "_" * 50 for _ in range(ESSAY_ANSWER_LINES))
    return lines


def render_version(version: ExamVersion, settings: ExamSettings) -> str:
    """
    Render one version as text.

    Args:
        version: Version to render
        settings: Header fields

    Returns:
        Header, numbered questions and a total-points footer
    """
    lines = [render_header(settings, version), "", "Name: " + "_" * 40, ""]
    for position, question in enumerate(version.questions, start=1):
        lines.extend(_render_question(position, question))
        lines.append("")
    lines.append(f"Total: {version.total_points:.1f} points")
    return "\n".join(lines)


def render_answer_key(version: ExamVersion, settings: ExamSettings) -> str:
    """
    Render the answer key of one version.

    Raises:
        ValueError: If the version has essay questions
    """
    key = derive_answer_key(version)
    lines = [render_header(settings, version, title="ANSWER KEY")]
    lines.extend(f"{entry.position}. {entry.letter}" for entry in key)
    return "\n".join(lines)
