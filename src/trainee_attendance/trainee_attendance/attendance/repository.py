from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, UpsertInstruction


class AttendanceRepository(Protocol):
    def find_by_user_and_date(self, user_id: int, training_date: date) -> Optional[AttendanceRecord]:
        """Return the non-deleted record for the day.

        Raises DataIntegrityError when more than one such record exists.
        """

        raise NotImplementedError

    def find_all_by_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        """Non-deleted records of a user, oldest training date first."""

        raise NotImplementedError

    def insert(self, record: AttendanceRecord) -> int:
        """Persist a new record. Returns attendance_id.

        Raises AlreadyPunchedError when an active record for the day already exists.
        """

        raise NotImplementedError

    def update(self, record: AttendanceRecord) -> bool:
        raise NotImplementedError

    def apply(self, instructions: Sequence[UpsertInstruction]) -> None:
        """Write every instruction atomically.

        Raises RecordNotFoundError when an update matches no row; nothing is kept then.
        """

        raise NotImplementedError

    def count_unentered(self, user_id: int, before: date) -> int:
        """Count non-deleted records before ``before`` missing a start or end time."""

        raise NotImplementedError
