from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local, training_date_of
from ..core.enums import PunchState, PunchType, ReasonCode
from ..core.exceptions import (
    AlreadyPunchedError,
    AuthorizationError,
    DomainError,
    InvalidTimeOrderError,
    NoPriorPunchInError,
    NotWorkDayError,
    RecordNotFoundError,
)
from ..core.result import OperationResult
from ..sections.repository import SectionRepository
from ..users.model import Actor
from ..work_window.model import WorkWindow
from .blank_time import blank_time_display, build_blank_time_choices, build_hour_choices, build_minute_choices
from .classifier import classify
from .model import AttendanceRecord, AttendanceRow, AttendanceSheet, DailyEdit, DailySheetRow
from .reconciler import BulkReconciler
from .repository import AttendanceRepository
from .time_of_day import TimeOfDay

logger = logging.getLogger(__name__)


def punch_state(record: Optional[AttendanceRecord]) -> PunchState:
    if record is None:
        return PunchState.NOT_STARTED
    return record.punch_state


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        sections: SectionRepository,
        *,
        window: WorkWindow | None = None,
        reconciler: BulkReconciler | None = None,
    ):
        self._attendance = attendance
        self._sections = sections
        self._window = window or WorkWindow.default()
        self._reconciler = reconciler or BulkReconciler(self._window)

    def check_punch(self, actor: Actor, punch_type: PunchType, *, now: datetime | None = None) -> Optional[ReasonCode]:
        """Run the punch preconditions only. Returns the failure reason, or None."""
        now = now or now_local()
        try:
            self._require_punchable(actor, punch_type, now)
        except DomainError as e:
            return e.reason
        return None

    def punch_in(self, actor: Actor, *, now: datetime | None = None) -> OperationResult:
        now = now or now_local()
        try:
            self._punch_in(actor, now)
        except DomainError as e:
            logger.warning("punch-in rejected for user %s: %s", actor.user_id, e.__class__.__name__)
            return OperationResult.failed(e)
        return OperationResult.accepted()

    def punch_out(self, actor: Actor, *, now: datetime | None = None) -> OperationResult:
        now = now or now_local()
        try:
            self._punch_out(actor, now)
        except DomainError as e:
            logger.warning("punch-out rejected for user %s: %s", actor.user_id, e.__class__.__name__)
            return OperationResult.failed(e)
        return OperationResult.accepted()

    def _require_punchable(self, actor: Actor, punch_type: PunchType, now: datetime) -> Optional[AttendanceRecord]:
        today = training_date_of(now)

        if not actor.is_trainee:
            raise AuthorizationError("Only trainees can punch in or out")
        if not self._sections.is_work_day(actor.course_id, today):
            raise NotWorkDayError(f"{today} is not a training day")

        record = self._attendance.find_by_user_and_date(actor.user_id, today)
        state = punch_state(record)

        if punch_type == PunchType.PUNCH_IN:
            if state != PunchState.NOT_STARTED:
                raise AlreadyPunchedError("Today's attendance is already recorded; edit it directly")
            return record

        if state == PunchState.NOT_STARTED:
            raise NoPriorPunchInError("Cannot punch out without a punch-in")
        if state == PunchState.COMPLETED:
            raise AlreadyPunchedError("Today's attendance is already recorded; edit it directly")
        if TimeOfDay.from_datetime(now) < record.training_start_time:
            raise InvalidTimeOrderError("Punch-out time must not be earlier than punch-in time")
        return record

    def _punch_in(self, actor: Actor, now: datetime) -> None:
        record = self._require_punchable(actor, PunchType.PUNCH_IN, now)
        start = TimeOfDay.from_datetime(now)
        status = classify(start, TimeOfDay.blank(), self._window)

        if record is None:
            record = AttendanceRecord(
                user_id=actor.user_id,
                training_date=training_date_of(now),
                training_start_time=start,
                status=status,
                created_by=actor.user_id,
                created_at=now,
                modified_by=actor.user_id,
                modified_at=now,
            )
            attendance_id = self._attendance.insert(record)
            logger.info("user %s punched in at %s (record %s)", actor.user_id, start, attendance_id)
            return

        record = replace(
            record,
            training_start_time=start,
            status=status,
            delete_flag=False,
            modified_by=actor.user_id,
            modified_at=now,
        )
        if not self._attendance.update(record):
            raise RecordNotFoundError(f"Attendance record {record.attendance_id} could not be updated")
        logger.info("user %s punched in at %s (record %s)", actor.user_id, start, record.attendance_id)

    def _punch_out(self, actor: Actor, now: datetime) -> None:
        record = self._require_punchable(actor, PunchType.PUNCH_OUT, now)
        end = TimeOfDay.from_datetime(now)

        record = replace(
            record,
            training_end_time=end,
            status=classify(record.training_start_time, end, self._window),
            delete_flag=False,
            modified_by=actor.user_id,
            modified_at=now,
        )
        if not self._attendance.update(record):
            raise RecordNotFoundError(f"Attendance record {record.attendance_id} could not be updated")
        logger.info("user %s punched out at %s (record %s)", actor.user_id, end, record.attendance_id)

    def update_sheet(
        self,
        actor: Actor,
        edits: Sequence[DailyEdit],
        *,
        now: datetime | None = None,
        target_user_id: int | None = None,
    ) -> OperationResult:
        """Apply a submitted multi-day sheet.

        Trainees always edit their own sheet; other actors edit ``target_user_id``'s.
        """
        now = now or now_local()
        try:
            user_id = self._resolve_sheet_owner(actor, target_user_id)
            instructions = self._reconciler.reconcile(
                actor=actor,
                user_id=user_id,
                existing=self._attendance.find_all_by_user(user_id),
                edits=edits,
                now=now,
            )
            self._attendance.apply(instructions)
        except DomainError as e:
            logger.warning("sheet update rejected for user %s: %s", actor.user_id, e.__class__.__name__)
            return OperationResult.failed(e)

        logger.info("user %s applied %d sheet rows for user %s", actor.user_id, len(instructions), user_id)
        return OperationResult.accepted()

    @staticmethod
    def _resolve_sheet_owner(actor: Actor, target_user_id: int | None) -> int:
        if actor.is_trainee:
            return actor.user_id
        if target_user_id is None:
            raise AuthorizationError("A target trainee is required to edit another sheet")
        return int(target_user_id)

    def list_attendance(self, user_id: int) -> list[AttendanceRow]:
        return [
            AttendanceRow(
                attendance_id=r.attendance_id,
                training_date=r.training_date,
                training_start_time=r.training_start_time.format(),
                training_end_time=r.training_end_time.format(),
                status=r.status,
                status_display_name=r.status.display_name,
                blank_time=r.blank_time,
                blank_time_display=blank_time_display(r.blank_time),
                note=r.note,
            )
            for r in self._attendance.find_all_by_user(user_id)
        ]

    def has_unentered_days(self, user_id: int, *, today: date | None = None) -> bool:
        """True when a past training day is missing its start or end time."""
        today = today or training_date_of(now_local())
        return self._attendance.count_unentered(user_id, today) > 0

    def get_today_record(self, user_id: int, today: date) -> Optional[AttendanceRecord]:
        return self._attendance.find_by_user_and_date(user_id, today)

    def build_attendance_sheet(self, actor: Actor, *, user_id: int | None = None, today: date | None = None) -> AttendanceSheet:
        today = today or training_date_of(now_local())
        owner = actor.user_id if user_id is None else int(user_id)
        rows = [self._to_sheet_row(r, actor.course_id, today) for r in self._attendance.find_all_by_user(owner)]
        return AttendanceSheet(
            user_id=owner,
            user_name=actor.user_name if owner == actor.user_id else "",
            rows=rows,
            blank_time_choices=build_blank_time_choices(),
            hour_choices=build_hour_choices(),
            minute_choices=build_minute_choices(),
        )

    def _to_sheet_row(self, r: AttendanceRecord, course_id: Optional[int], today: date) -> DailySheetRow:
        section = None
        if course_id is not None:
            section = self._sections.get_for_course_and_date(course_id, r.training_date)
        return DailySheetRow(
            attendance_id=r.attendance_id,
            training_date=r.training_date,
            start_hour=r.training_start_time.hour,
            start_minute=r.training_start_time.minute,
            end_hour=r.training_end_time.hour,
            end_minute=r.training_end_time.minute,
            blank_time=r.blank_time,
            blank_time_display=blank_time_display(r.blank_time),
            status=r.status,
            status_display_name=r.status.display_name,
            note=r.note,
            section_name=section.section_name if section else None,
            is_today=r.training_date == today,
        )
