from __future__ import annotations

from datetime import date
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Section
from .repository import SectionRepository


class MySQLSectionRepository(SectionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def is_work_day(self, course_id: Optional[int], training_date: date) -> bool:
        if course_id is None:
            return False
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS section_count
                FROM sections
                WHERE course_id=%s AND section_date=%s AND delete_flag=0
                """,
                (int(course_id), training_date),
            )
            r = fetchone(cur)
            return bool(r) and int(r["section_count"]) > 0

    def get_for_course_and_date(self, course_id: int, training_date: date) -> Optional[Section]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT section_id, course_id, section_date, section_name
                FROM sections
                WHERE course_id=%s AND section_date=%s AND delete_flag=0
                ORDER BY section_id
                LIMIT 1
                """,
                (int(course_id), training_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Section(
                section_id=int(r["section_id"]),
                course_id=int(r["course_id"]),
                section_date=r["section_date"],
                section_name=r["section_name"],
            )
