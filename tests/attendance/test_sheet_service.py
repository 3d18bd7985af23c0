from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from src.trainee_attendance.trainee_attendance.attendance.model import AttendanceRecord, DailyEdit
from src.trainee_attendance.trainee_attendance.attendance.service import AttendanceService
from src.trainee_attendance.trainee_attendance.attendance.time_of_day import TimeOfDay
from src.trainee_attendance.trainee_attendance.core.enums import AttendanceStatus, ReasonCode, Role, UpsertKind
from src.trainee_attendance.trainee_attendance.core.exceptions import RecordNotFoundError
from src.trainee_attendance.trainee_attendance.sections.model import Section
from src.trainee_attendance.trainee_attendance.users.model import Actor

NOW = datetime(2026, 2, 10, 20, 0)
TRAINEE = Actor(user_id=7, role=Role.TRAINEE, course_id=3, user_name="Trainee")
INSTRUCTOR = Actor(user_id=1, role=Role.INSTRUCTOR, course_id=3, user_name="Instructor")


class FakeSections:
    def is_work_day(self, course_id, training_date) -> bool:
        return True

    def get_for_course_and_date(self, course_id: int, training_date: date) -> Optional[Section]:
        if training_date == date(2026, 2, 2):
            return Section(section_id=1, course_id=course_id, section_date=training_date, section_name="Python basics")
        return None


class FakeAttendanceRepo:
    def __init__(self, records=(), missing_ids=()):
        self.records = list(records)
        self.missing_ids = set(missing_ids)
        self.inserted: list[AttendanceRecord] = []
        self.updated: list[AttendanceRecord] = []
        self.loaded_for = None

    def find_by_user_and_date(self, user_id, training_date):
        for r in self.records:
            if r.user_id == user_id and r.training_date == training_date:
                return r
        return None

    def find_all_by_user(self, user_id):
        self.loaded_for = user_id
        return [r for r in self.records if r.user_id == user_id]

    def insert(self, record):
        self.inserted.append(record)
        return 100 + len(self.inserted)

    def update(self, record):
        if record.attendance_id in self.missing_ids:
            return False
        self.updated.append(record)
        return True

    def apply(self, instructions):
        inserted, updated = list(self.inserted), list(self.updated)
        for instruction in instructions:
            if instruction.kind == UpsertKind.INSERT:
                self.insert(instruction.record)
            elif not self.update(instruction.record):
                self.inserted, self.updated = inserted, updated
                raise RecordNotFoundError(f"Attendance record {instruction.record.attendance_id} could not be updated")

    def count_unentered(self, user_id, before):
        return sum(
            1
            for r in self.records
            if r.user_id == user_id
            and r.training_date < before
            and (r.training_start_time.is_blank or r.training_end_time.is_blank)
        )


def _record(day, start=None, end=None, **kwargs):
    return AttendanceRecord(
        attendance_id=kwargs.pop("attendance_id", day.day),
        user_id=kwargs.pop("user_id", TRAINEE.user_id),
        training_date=day,
        training_start_time=TimeOfDay.parse(start),
        training_end_time=TimeOfDay.parse(end),
        **kwargs,
    )


def test_update_sheet_applies_inserts_and_updates():
    repo = FakeAttendanceRepo([_record(date(2026, 2, 2), "08:50", "18:00")])
    svc = AttendanceService(repo, FakeSections())
    edits = [
        DailyEdit(training_date=date(2026, 2, 2), start_hour=9, start_minute=10, end_hour=18, end_minute=0),
        DailyEdit(training_date=date(2026, 2, 3), start_hour=9, start_minute=0, end_hour=18, end_minute=0),
    ]

    result = svc.update_sheet(TRAINEE, edits, now=NOW)

    assert result.ok
    assert [r.training_date for r in repo.updated] == [date(2026, 2, 2)]
    assert repo.updated[0].status == AttendanceStatus.TARDY
    assert [r.training_date for r in repo.inserted] == [date(2026, 2, 3)]
    assert repo.inserted[0].created_at == NOW


def test_trainee_always_edits_own_sheet():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo, FakeSections())

    svc.update_sheet(TRAINEE, [DailyEdit(training_date=date(2026, 2, 3))], now=NOW, target_user_id=99)

    assert repo.loaded_for == TRAINEE.user_id
    assert repo.inserted[0].user_id == TRAINEE.user_id


def test_instructor_edits_target_sheet():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo, FakeSections())

    result = svc.update_sheet(INSTRUCTOR, [DailyEdit(training_date=date(2026, 2, 3))], now=NOW, target_user_id=7)

    assert result.ok
    assert repo.inserted[0].user_id == 7
    assert repo.inserted[0].modified_by == INSTRUCTOR.user_id


def test_instructor_without_target_is_unauthorized():
    svc = AttendanceService(FakeAttendanceRepo(), FakeSections())

    result = svc.update_sheet(INSTRUCTOR, [DailyEdit(training_date=date(2026, 2, 3))], now=NOW)

    assert result.reason == ReasonCode.UNAUTHORIZED


def test_invalid_row_rejects_whole_sheet():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo, FakeSections())
    edits = [
        DailyEdit(training_date=date(2026, 2, 3), start_hour=9, start_minute=0),
        DailyEdit(training_date=date(2026, 2, 4), start_hour=12, start_minute=0, end_hour=11, end_minute=0),
    ]

    result = svc.update_sheet(TRAINEE, edits, now=NOW)

    assert not result.ok
    assert result.reason == ReasonCode.INVALID_TIME_ORDER
    assert repo.inserted == []


def test_failed_update_discards_the_whole_sheet():
    repo = FakeAttendanceRepo([_record(date(2026, 2, 2), "08:50", "18:00")], missing_ids={2})
    svc = AttendanceService(repo, FakeSections())
    edits = [
        DailyEdit(training_date=date(2026, 2, 3), start_hour=9, start_minute=0, end_hour=18, end_minute=0),
        DailyEdit(training_date=date(2026, 2, 2), start_hour=9, start_minute=0, end_hour=18, end_minute=0),
    ]

    result = svc.update_sheet(TRAINEE, edits, now=NOW)

    assert not result.ok
    assert result.reason == ReasonCode.NOT_FOUND
    assert repo.inserted == []
    assert repo.updated == []


def test_list_attendance_projects_display_values():
    repo = FakeAttendanceRepo(
        [_record(date(2026, 2, 2), "09:30", "18:00", status=AttendanceStatus.TARDY, blank_time=90, note="bus")]
    )
    svc = AttendanceService(repo, FakeSections())

    [row] = svc.list_attendance(TRAINEE.user_id)

    assert row.training_start_time == "09:30"
    assert row.training_end_time == "18:00"
    assert row.status_display_name == "遅刻"
    assert row.blank_time_display == "1時30分"
    assert row.note == "bus"


def test_has_unentered_days():
    repo = FakeAttendanceRepo([_record(date(2026, 2, 2), "09:00", None), _record(date(2026, 2, 10), "09:00", None)])
    svc = AttendanceService(repo, FakeSections())

    assert svc.has_unentered_days(TRAINEE.user_id, today=date(2026, 2, 10))
    assert not svc.has_unentered_days(TRAINEE.user_id, today=date(2026, 2, 2))


def test_build_attendance_sheet():
    repo = FakeAttendanceRepo(
        [
            _record(date(2026, 2, 2), "09:05", "17:45", blank_time=15),
            _record(date(2026, 2, 3), None, None),
        ]
    )
    svc = AttendanceService(repo, FakeSections())

    sheet = svc.build_attendance_sheet(TRAINEE, today=date(2026, 2, 3))

    assert sheet.user_id == TRAINEE.user_id
    assert sheet.user_name == "Trainee"
    first, second = sheet.rows
    assert (first.start_hour, first.start_minute, first.end_hour, first.end_minute) == (9, 5, 17, 45)
    assert first.blank_time_display == "15分"
    assert first.section_name == "Python basics"
    assert not first.is_today
    assert (second.start_hour, second.start_minute) == (None, None)
    assert second.section_name is None
    assert second.is_today
    assert list(sheet.blank_time_choices)[0] is None
    assert len(sheet.hour_choices) == 25
    assert len(sheet.minute_choices) == 61


def test_get_today_record():
    rec = _record(date(2026, 2, 2), "09:00", None)
    svc = AttendanceService(FakeAttendanceRepo([rec]), FakeSections())

    assert svc.get_today_record(TRAINEE.user_id, date(2026, 2, 2)) == rec
    assert svc.get_today_record(TRAINEE.user_id, date(2026, 2, 3)) is None

