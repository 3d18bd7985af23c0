from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

from ..attendance.time_of_day import TimeOfDay
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (connection, cursor); commit on success, roll back on any error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_training_time(value: Any) -> TimeOfDay:
    """Convert a MySQL TIME column into a TimeOfDay (NULL is blank).

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '08:30:00')
    """

    if value is None:
        return TimeOfDay.blank()

    if isinstance(value, time):
        return TimeOfDay.from_time(value)

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return TimeOfDay(total_seconds // 3600, (total_seconds % 3600) // 60)

    if isinstance(value, str):
        return TimeOfDay.parse(value.strip())

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
