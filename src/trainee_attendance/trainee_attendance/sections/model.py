from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Section:
    """A scheduled training day of a course."""

    section_id: int
    course_id: int
    section_date: date
    section_name: str
