from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Actor capability used by the punch and sheet-edit checks."""

    TRAINEE = "trainee"
    INSTRUCTOR = "instructor"
    ADMIN = "admin"


class AttendanceStatus(str, Enum):
    """Attendance status stored per record.

    ABSENCE is only ever assigned manually; classification never yields it.
    """

    NONE = "NONE"
    TARDY = "TARDY"
    LEAVING_EARLY = "LEAVING_EARLY"
    TARDY_AND_LEAVING_EARLY = "TARDY_AND_LEAVING_EARLY"
    ABSENCE = "ABSENCE"

    @property
    def display_name(self) -> str:
        return _STATUS_DISPLAY_NAMES[self]


_STATUS_DISPLAY_NAMES = {
    AttendanceStatus.NONE: "-",
    AttendanceStatus.TARDY: "遅刻",
    AttendanceStatus.LEAVING_EARLY: "早退",
    AttendanceStatus.TARDY_AND_LEAVING_EARLY: "遅刻早退",
    AttendanceStatus.ABSENCE: "欠席",
}


class PunchType(str, Enum):
    PUNCH_IN = "PUNCH_IN"
    PUNCH_OUT = "PUNCH_OUT"


class PunchState(str, Enum):
    """Lifecycle of today's record in the punch flow."""

    NOT_STARTED = "NOT_STARTED"
    STARTED = "STARTED"
    COMPLETED = "COMPLETED"


class UpsertKind(str, Enum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"


class ReasonCode(str, Enum):
    """Stable failure codes; mapping them to display text happens outside the core."""

    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_WORK_DAY = "NOT_WORK_DAY"
    ALREADY_PUNCHED = "ALREADY_PUNCHED"
    NO_PRIOR_PUNCH_IN = "NO_PRIOR_PUNCH_IN"
    INVALID_TIME_ORDER = "INVALID_TIME_ORDER"
    MALFORMED_TIME = "MALFORMED_TIME"
    NOT_FOUND = "NOT_FOUND"
