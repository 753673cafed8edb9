"""
Module: settings

Purpose:
    Exam header information printed at the top of every version and
    answer key (institution, course, professor, date, duration).

Key Classes:
    - ExamSettings: Header fields for an exam

Used By:
    - output.text: Version and answer-key rendering
    - core.utils.serialization: Bank files carry an optional settings block
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

DEFAULT_DURATION = "120 minutos"


def _today() -> str:
    return date.today().isoformat()


@dataclass(frozen=True)
class ExamSettings:
    """
    Exam header fields (immutable).

    Attributes:
        professor_name: Professor shown in the header
        university_name: Institution name
        course: Course or class
        subject: Subject / discipline
        date: ISO date string (YYYY-MM-DD), defaults to today
        duration: Free-text duration
        logo_url: Optional logo location, passed through to renderers
    """

    professor_name: str = ""
    university_name: str = ""
    course: str = ""
    subject: str = ""
    date: str = field(default_factory=_today)
    duration: str = DEFAULT_DURATION
    logo_url: str = ""

    def __post_init__(self) -> None:
        """Validate settings on construction."""
        if self.date:
            try:
                date.fromisoformat(self.date)
            except ValueError as e:
                raise ValueError(f"date must be YYYY-MM-DD: {self.date!r}") from e

    @property
    def display_date(self) -> str:
        """Date as DD/MM/YYYY, or "-" when unset."""
        if not self.date:
            return "-"
        return date.fromisoformat(self.date).strftime("%d/%m/%Y")
