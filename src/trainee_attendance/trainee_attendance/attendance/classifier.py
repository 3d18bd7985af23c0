from __future__ import annotations

from ..core.enums import AttendanceStatus
from ..work_window.model import WorkWindow
from .time_of_day import TimeOfDay


def classify(start: TimeOfDay, end: TimeOfDay, window: WorkWindow) -> AttendanceStatus:
    """Map a start/end pair to a tardy/early-leave status.

    Arriving exactly at the window start is on time, and leaving exactly at the
    window end is not early. Blank times never count as late or early.
    """

    if not window.is_defined:
        return AttendanceStatus.NONE

    late = start.is_set and start > window.start
    early = end.is_set and end < window.end

    if late and early:
        return AttendanceStatus.TARDY_AND_LEAVING_EARLY
    if late:
        return AttendanceStatus.TARDY
    if early:
        return AttendanceStatus.LEAVING_EARLY
    return AttendanceStatus.NONE
