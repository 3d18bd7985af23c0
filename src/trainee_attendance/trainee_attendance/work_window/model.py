from __future__ import annotations

from dataclasses import dataclass

from ..attendance.time_of_day import TimeOfDay
from ..core.constants import DEFAULT_WORK_END_TIME, DEFAULT_WORK_START_TIME


@dataclass(frozen=True)
class WorkWindow:
    """Scheduled start/end pair used as the late/early threshold."""

    start: TimeOfDay
    end: TimeOfDay

    @property
    def is_defined(self) -> bool:
        return self.start.is_set and self.end.is_set

    @classmethod
    def from_text(cls, start: str | None, end: str | None) -> "WorkWindow":
        return cls(TimeOfDay.parse(start), TimeOfDay.parse(end))

    @classmethod
    def default(cls) -> "WorkWindow":
        return cls.from_text(DEFAULT_WORK_START_TIME, DEFAULT_WORK_END_TIME)

    @classmethod
    def undefined(cls) -> "WorkWindow":
        return cls(TimeOfDay.blank(), TimeOfDay.blank())
