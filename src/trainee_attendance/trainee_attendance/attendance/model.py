from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus, PunchState, UpsertKind
from ..core.exceptions import MalformedTimeError
from .time_of_day import TimeOfDay


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one trainee's attendance for one training date.

    ``attendance_id`` stays None until the record has been inserted.
    """

    user_id: int
    training_date: date
    training_start_time: TimeOfDay = field(default_factory=TimeOfDay.blank)
    training_end_time: TimeOfDay = field(default_factory=TimeOfDay.blank)
    status: AttendanceStatus = AttendanceStatus.NONE
    blank_time: Optional[int] = None
    note: str = ""
    delete_flag: bool = False
    attendance_id: Optional[int] = None
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None
    modified_by: Optional[int] = None
    modified_at: Optional[datetime] = None

    @property
    def is_new(self) -> bool:
        return self.attendance_id is None

    @property
    def punch_state(self) -> PunchState:
        if self.training_start_time.is_blank:
            return PunchState.NOT_STARTED
        if self.training_end_time.is_blank:
            return PunchState.STARTED
        return PunchState.COMPLETED


@dataclass(frozen=True)
class UpsertInstruction:
    """Write the reconciler asks the repository to perform."""

    kind: UpsertKind
    record: AttendanceRecord


@dataclass(frozen=True)
class DailyEdit:
    """One submitted row of the attendance sheet."""

    training_date: date
    start_hour: Optional[int] = None
    start_minute: Optional[int] = None
    end_hour: Optional[int] = None
    end_minute: Optional[int] = None
    blank_time: Optional[int] = None
    note: str = ""
    absence_override: bool = False
    attendance_id: Optional[int] = None

    @classmethod
    def from_form(cls, row: Mapping[str, Any]) -> "DailyEdit":
        """Build from submitted form fields (strings; empty means not entered)."""
        return cls(
            training_date=_form_date(row.get("training_date")),
            start_hour=_optional_int(row.get("start_hour")),
            start_minute=_optional_int(row.get("start_minute")),
            end_hour=_optional_int(row.get("end_hour")),
            end_minute=_optional_int(row.get("end_minute")),
            blank_time=_optional_int(row.get("blank_time")),
            note=(row.get("note") or "").strip(),
            absence_override=str(row.get("absence_override") or "").lower() in {"1", "true", "on"},
            attendance_id=_optional_int(row.get("attendance_id")),
        )


def _form_date(value: Any) -> date:
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise MalformedTimeError(f"Not a YYYY-MM-DD date: {value!r}")


def _optional_int(value: Any) -> Optional[int]:
    if value is None or str(value).strip() == "":
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        raise MalformedTimeError(f"Not a number: {value!r}")


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model for the attendance list."""

    attendance_id: Optional[int]
    training_date: date
    training_start_time: str
    training_end_time: str
    status: AttendanceStatus
    status_display_name: str
    blank_time: Optional[int]
    blank_time_display: str
    note: str


@dataclass(frozen=True)
class DailySheetRow:
    """Read-model for one editable row of the attendance sheet."""

    attendance_id: Optional[int]
    training_date: date
    start_hour: Optional[int]
    start_minute: Optional[int]
    end_hour: Optional[int]
    end_minute: Optional[int]
    blank_time: Optional[int]
    blank_time_display: str
    status: AttendanceStatus
    status_display_name: str
    note: str
    section_name: Optional[str]
    is_today: bool


@dataclass(frozen=True)
class AttendanceSheet:
    """Read-model for the whole edit sheet, including its selection choices."""

    user_id: int
    user_name: str
    rows: list[DailySheetRow]
    blank_time_choices: dict[Optional[int], str]
    hour_choices: dict[Optional[int], str]
    minute_choices: dict[Optional[int], str]
