from __future__ import annotations

from datetime import datetime, time

import pytest

from src.trainee_attendance.trainee_attendance.attendance.time_of_day import TimeOfDay
from src.trainee_attendance.trainee_attendance.core.exceptions import MalformedTimeError


@pytest.mark.parametrize("text", ["00:00", "09:05", "12:30", "23:59"])
def test_format_parse_round_trip(text):
    assert TimeOfDay.parse(text).format() == text


@pytest.mark.parametrize("text", [None, "", "9:0", "0930"])
def test_short_or_empty_text_is_blank(text):
    assert TimeOfDay.parse(text).is_blank


def test_parse_ignores_trailing_seconds():
    assert TimeOfDay.parse("08:30:00") == TimeOfDay(8, 30)


def test_parse_rejects_non_numeric_components():
    with pytest.raises(MalformedTimeError):
        TimeOfDay.parse("ab:cd")


@pytest.mark.parametrize("text", ["24:00", "99:99", "12:60"])
def test_parse_rejects_out_of_range_values(text):
    with pytest.raises(MalformedTimeError):
        TimeOfDay.parse(text)


def test_blank_formats_to_empty_text():
    assert TimeOfDay.blank().format() == ""
    assert TimeOfDay.blank().to_time() is None


def test_of_requires_both_components():
    assert TimeOfDay.of(9, None).is_blank
    assert TimeOfDay.of(None, 30).is_blank
    assert TimeOfDay.of(9, 30) == TimeOfDay(9, 30)


def test_constructor_rejects_half_set_value():
    with pytest.raises(MalformedTimeError):
        TimeOfDay(9, None)


def test_concrete_values_are_totally_ordered():
    values = [TimeOfDay(h, m) for h in (0, 9, 23) for m in (0, 1, 59)]
    for a in values:
        for b in values:
            assert sum([a < b, a == b, a > b]) == 1


def test_blank_is_never_less_or_greater():
    blank = TimeOfDay.blank()
    t = TimeOfDay(12, 0)
    assert not blank < t
    assert not blank > t
    assert not t < blank
    assert not t > blank
    assert not blank <= t
    assert not t >= blank


def test_from_datetime_truncates_to_minutes():
    assert TimeOfDay.from_datetime(datetime(2026, 2, 2, 8, 55, 59)) == TimeOfDay(8, 55)


def test_from_time_and_back():
    assert TimeOfDay.from_time(time(17, 45)).to_time() == time(17, 45)
    assert TimeOfDay.from_time(None).is_blank
