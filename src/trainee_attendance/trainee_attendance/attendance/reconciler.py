from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Iterable, Sequence

from ..common.validators import require_blank_time
from ..core.enums import UpsertKind
from ..core.exceptions import DataIntegrityError, InvalidTimeOrderError, RecordNotFoundError
from ..users.model import Actor
from ..work_window.model import WorkWindow
from .classifier import classify
from .model import AttendanceRecord, DailyEdit, UpsertInstruction
from .time_of_day import TimeOfDay

logger = logging.getLogger(__name__)


def index_by_date(records: Iterable[AttendanceRecord]) -> dict[date, AttendanceRecord]:
    """Index non-deleted records by training date, rejecting duplicates."""
    indexed: dict[date, AttendanceRecord] = {}
    for record in records:
        if record.delete_flag:
            continue
        if record.training_date in indexed:
            raise DataIntegrityError(
                f"Duplicate active attendance records for user {record.user_id} on {record.training_date}"
            )
        indexed[record.training_date] = record
    return indexed


class BulkReconciler:
    """Merge a submitted attendance sheet into a user's existing records.

    The existing records are only read; every resolution goes into a fresh
    output list of insert/update instructions, in submission order. A date
    submitted twice resolves to a single instruction built from both edits.
    """

    def __init__(self, window: WorkWindow):
        self._window = window

    def reconcile(
        self,
        *,
        actor: Actor,
        user_id: int,
        existing: Sequence[AttendanceRecord],
        edits: Sequence[DailyEdit],
        now: datetime,
    ) -> list[UpsertInstruction]:
        by_date = index_by_date(existing)
        resolved: dict[date, AttendanceRecord] = {}

        for edit in edits:
            target = resolved.get(edit.training_date) or by_date.get(edit.training_date)
            if edit.attendance_id is not None and (target is None or target.attendance_id != edit.attendance_id):
                raise RecordNotFoundError(
                    f"Attendance record {edit.attendance_id} not found for {edit.training_date}"
                )
            if target is None:
                target = AttendanceRecord(
                    user_id=int(user_id),
                    training_date=edit.training_date,
                    created_by=actor.user_id,
                    created_at=now,
                )
            resolved[edit.training_date] = self._apply(target, edit, actor=actor, now=now)

        instructions = [
            UpsertInstruction(kind=UpsertKind.INSERT if record.is_new else UpsertKind.UPDATE, record=record)
            for record in resolved.values()
        ]
        logger.debug(
            "reconciled %d edits for user %s into %d instructions", len(edits), user_id, len(instructions)
        )
        return instructions

    def _apply(self, target: AttendanceRecord, edit: DailyEdit, *, actor: Actor, now: datetime) -> AttendanceRecord:
        start = TimeOfDay.of(edit.start_hour, edit.start_minute)
        end = TimeOfDay.of(edit.end_hour, edit.end_minute)

        if end.is_set and start.is_blank:
            raise InvalidTimeOrderError(f"{edit.training_date}: end time requires a start time")
        if end.is_set and end < start:
            raise InvalidTimeOrderError(f"{edit.training_date}: end time is earlier than start time")

        status = target.status
        if not edit.absence_override and (start.is_set or end.is_set):
            status = classify(start, end, self._window)

        return replace(
            target,
            training_start_time=start,
            training_end_time=end,
            status=status,
            blank_time=require_blank_time(edit.blank_time),
            note=edit.note,
            delete_flag=False,
            modified_by=actor.user_id,
            modified_at=now,
        )
