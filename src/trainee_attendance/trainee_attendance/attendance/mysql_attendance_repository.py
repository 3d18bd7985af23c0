from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.enums import AttendanceStatus, UpsertKind
from ..core.exceptions import AlreadyPunchedError, DataIntegrityError, RecordNotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_training_time
from .model import AttendanceRecord, UpsertInstruction
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, user_id, training_date, training_start_time, training_end_time,
    status, blank_time, note, delete_flag,
    created_by, created_at, modified_by, modified_at
"""


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    blank_time = r.get("blank_time")
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        user_id=int(r["user_id"]),
        training_date=r["training_date"],
        training_start_time=normalize_training_time(r.get("training_start_time")),
        training_end_time=normalize_training_time(r.get("training_end_time")),
        status=AttendanceStatus(r["status"]),
        blank_time=int(blank_time) if blank_time is not None else None,
        note=r.get("note") or "",
        delete_flag=bool(r.get("delete_flag")),
        created_by=r.get("created_by"),
        created_at=r.get("created_at"),
        modified_by=r.get("modified_by"),
        modified_at=r.get("modified_at"),
    )


def _insert(cur, record: AttendanceRecord) -> int:
    cur.execute(
        """
        INSERT INTO student_attendance(
            user_id, training_date, training_start_time, training_end_time,
            status, blank_time, note, delete_flag,
            created_by, created_at, modified_by, modified_at
        )
        VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
        """,
        (
            record.user_id,
            record.training_date,
            record.training_start_time.to_time(),
            record.training_end_time.to_time(),
            record.status.value,
            record.blank_time,
            record.note,
            int(record.delete_flag),
            record.created_by,
            record.created_at,
            record.modified_by,
            record.modified_at,
        ),
    )
    return int(cur.lastrowid)


def _update(cur, record: AttendanceRecord) -> bool:
    cur.execute(
        """
        UPDATE student_attendance
        SET training_start_time=%s, training_end_time=%s, status=%s,
            blank_time=%s, note=%s, delete_flag=%s,
            modified_by=%s, modified_at=%s
        WHERE attendance_id=%s
        """,
        (
            record.training_start_time.to_time(),
            record.training_end_time.to_time(),
            record.status.value,
            record.blank_time,
            record.note,
            int(record.delete_flag),
            record.modified_by,
            record.modified_at,
            int(record.attendance_id),
        ),
    )
    return cur.rowcount > 0


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_by_user_and_date(self, user_id: int, training_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM student_attendance
                WHERE user_id=%s AND training_date=%s AND delete_flag=0
                """,
                (int(user_id), training_date),
            )
            rows = fetchall(cur)
        if len(rows) > 1:
            raise DataIntegrityError(
                f"{len(rows)} active attendance records for user {user_id} on {training_date}"
            )
        return _to_record(rows[0]) if rows else None

    def find_all_by_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM student_attendance
                WHERE user_id=%s AND delete_flag=0
                ORDER BY training_date ASC
                """,
                (int(user_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def insert(self, record: AttendanceRecord) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                return _insert(cur, record)
        except IntegrityError as e:
            raise AlreadyPunchedError(
                f"An active attendance record already exists for user {record.user_id} on {record.training_date}"
            ) from e

    def update(self, record: AttendanceRecord) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            return _update(cur, record)

    def apply(self, instructions: Sequence[UpsertInstruction]) -> None:
        # One transaction: any failure rolls back every row of the batch.
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                for instruction in instructions:
                    record = instruction.record
                    if instruction.kind == UpsertKind.INSERT:
                        _insert(cur, record)
                    elif not _update(cur, record):
                        raise RecordNotFoundError(f"Attendance record {record.attendance_id} could not be updated")
        except IntegrityError as e:
            raise AlreadyPunchedError("An active attendance record already exists for a submitted date") from e

    def count_unentered(self, user_id: int, before: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS unentered
                FROM student_attendance
                WHERE user_id=%s AND delete_flag=0 AND training_date < %s
                  AND (training_start_time IS NULL OR training_end_time IS NULL)
                """,
                (int(user_id), before),
            )
            rows = fetchall(cur)
            return int(rows[0]["unentered"]) if rows else 0
