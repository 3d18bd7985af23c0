from src.trainee_attendance.trainee_attendance.attendance.blank_time import (
    blank_time_display,
    build_blank_time_choices,
    build_hour_choices,
    build_minute_choices,
    decode_blank_minutes,
)


def test_decode_ninety_minutes():
    span = decode_blank_minutes(90)
    assert (span.hours, span.minutes) == (1, 30)
    assert span.display() == "1時30分"


def test_display_forms():
    assert blank_time_display(45) == "45分"
    assert blank_time_display(120) == "2時間"
    assert blank_time_display(135) == "2時15分"
    assert blank_time_display(None) == ""


def test_blank_time_choices():
    choices = build_blank_time_choices()
    keys = list(choices)

    assert keys[0] is None
    assert choices[None] == ""
    assert keys[1:] == list(range(15, 480, 15))
    assert keys[-1] == 465
    assert choices[60] == "1時間"
    assert choices[465] == "7時45分"


def test_hour_and_minute_choices():
    hours = build_hour_choices()
    minutes = build_minute_choices()

    assert list(hours)[0] is None
    assert len(hours) == 25
    assert hours[0] == "00"
    assert hours[23] == "23"

    assert list(minutes)[0] is None
    assert len(minutes) == 61
    assert minutes[5] == "05"
    assert minutes[59] == "59"
