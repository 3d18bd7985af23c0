from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import Section


class SectionRepository(Protocol):
    def is_work_day(self, course_id: Optional[int], training_date: date) -> bool:
        """True when the course has at least one section on ``training_date``."""

        raise NotImplementedError

    def get_for_course_and_date(self, course_id: int, training_date: date) -> Optional[Section]:
        raise NotImplementedError
