from __future__ import annotations

from typing import NamedTuple, Optional

from ..core.constants import BLANK_TIME_LIMIT_MINUTES, BLANK_TIME_STEP_MINUTES


class BlankTimeSpan(NamedTuple):
    """Blank time split into hours and minutes for display."""

    hours: int
    minutes: int

    def display(self) -> str:
        if self.hours == 0:
            return f"{self.minutes}分"
        if self.minutes == 0:
            return f"{self.hours}時間"
        return f"{self.hours}時{self.minutes}分"


def decode_blank_minutes(minutes: int) -> BlankTimeSpan:
    return BlankTimeSpan(minutes // 60, minutes % 60)


def blank_time_display(minutes: Optional[int]) -> str:
    if minutes is None:
        return ""
    return decode_blank_minutes(minutes).display()


def build_blank_time_choices() -> dict[Optional[int], str]:
    """Selectable blank times in 15 minute steps; the leading None means "not selected"."""
    choices: dict[Optional[int], str] = {None: ""}
    for minutes in range(BLANK_TIME_STEP_MINUTES, BLANK_TIME_LIMIT_MINUTES, BLANK_TIME_STEP_MINUTES):
        choices[minutes] = decode_blank_minutes(minutes).display()
    return choices


def build_hour_choices() -> dict[Optional[int], str]:
    choices: dict[Optional[int], str] = {None: ""}
    choices.update({h: f"{h:02d}" for h in range(24)})
    return choices


def build_minute_choices() -> dict[Optional[int], str]:
    choices: dict[Optional[int], str] = {None: ""}
    choices.update({m: f"{m:02d}" for m in range(60)})
    return choices
