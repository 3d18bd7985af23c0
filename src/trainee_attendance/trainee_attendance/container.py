from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.reconciler import BulkReconciler
from .attendance.service import AttendanceService
from .database.connection import DatabaseConnection, DBConfig
from .sections.mysql_section_repository import MySQLSectionRepository
from .work_window.model import WorkWindow


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    window: WorkWindow

    attendance_repo: MySQLAttendanceRepository
    sections_repo: MySQLSectionRepository

    attendance_service: AttendanceService


def build_container(*, db_config: Mapping, window: WorkWindow | None = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    window = window or WorkWindow.default()

    attendance_repo = MySQLAttendanceRepository(conn)
    sections_repo = MySQLSectionRepository(conn)

    attendance_service = AttendanceService(
        attendance_repo,
        sections_repo,
        window=window,
        reconciler=BulkReconciler(window),
    )

    return Container(
        conn=conn,
        window=window,
        attendance_repo=attendance_repo,
        sections_repo=sections_repo,
        attendance_service=attendance_service,
    )
