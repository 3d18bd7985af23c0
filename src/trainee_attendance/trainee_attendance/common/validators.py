from __future__ import annotations

from typing import Optional

from ..core.constants import BLANK_TIME_LIMIT_MINUTES
from ..core.exceptions import MalformedTimeError


def require_in_range(value: int, field_name: str, low: int, high: int) -> int:
    if value < low or value > high:
        raise MalformedTimeError(f"{field_name} must be between {low} and {high}: {value}")
    return value


def require_hour(value: int) -> int:
    return require_in_range(value, "hour", 0, 23)


def require_minute(value: int) -> int:
    return require_in_range(value, "minute", 0, 59)


def require_blank_time(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    return require_in_range(int(value), "blank time", 0, BLANK_TIME_LIMIT_MINUTES - 1)
