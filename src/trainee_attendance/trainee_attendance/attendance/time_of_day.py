from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional

from ..common.validators import require_hour, require_minute
from ..core.exceptions import MalformedTimeError


@dataclass(frozen=True)
class TimeOfDay:
    """Wall-clock time at minute precision, or blank when unset.

    Blank is never ordered against anything: every ordering comparison that
    involves a blank value is False.
    """

    hour: Optional[int] = None
    minute: Optional[int] = None

    def __post_init__(self):
        if (self.hour is None) != (self.minute is None):
            raise MalformedTimeError("hour and minute must both be set or both be blank")
        if self.hour is not None:
            require_hour(self.hour)
            require_minute(self.minute)

    @classmethod
    def blank(cls) -> "TimeOfDay":
        return cls()

    @classmethod
    def of(cls, hour: Optional[int], minute: Optional[int]) -> "TimeOfDay":
        """Compose from separate components; a missing component yields blank."""
        if hour is None or minute is None:
            return cls()
        return cls(int(hour), int(minute))

    @classmethod
    def parse(cls, text: Optional[str]) -> "TimeOfDay":
        """Parse ``HH:MM``. Empty or short text is blank; bad digits raise."""
        if not text or len(text) < 5:
            return cls()
        hour_part, minute_part = text[0:2], text[3:5]
        if not (hour_part.isdecimal() and minute_part.isdecimal()):
            raise MalformedTimeError(f"Invalid time (HH:MM): {text!r}")
        return cls(int(hour_part), int(minute_part))

    @classmethod
    def from_datetime(cls, value: datetime) -> "TimeOfDay":
        return cls(value.hour, value.minute)

    @classmethod
    def from_time(cls, value: Optional[time]) -> "TimeOfDay":
        if value is None:
            return cls()
        return cls(value.hour, value.minute)

    @property
    def is_blank(self) -> bool:
        return self.hour is None

    @property
    def is_set(self) -> bool:
        return self.hour is not None

    def format(self) -> str:
        if self.is_blank:
            return ""
        return f"{self.hour:02d}:{self.minute:02d}"

    def to_time(self) -> Optional[time]:
        if self.is_blank:
            return None
        return time(self.hour, self.minute)

    def _key(self) -> tuple[int, int]:
        return (self.hour, self.minute)

    def __lt__(self, other: "TimeOfDay") -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.is_set and other.is_set and self._key() < other._key()

    def __le__(self, other: "TimeOfDay") -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.is_set and other.is_set and self._key() <= other._key()

    def __gt__(self, other: "TimeOfDay") -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.is_set and other.is_set and self._key() > other._key()

    def __ge__(self, other: "TimeOfDay") -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.is_set and other.is_set and self._key() >= other._key()

    def __str__(self) -> str:
        return self.format()
