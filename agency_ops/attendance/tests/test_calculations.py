from datetime import datetime
from datetime import timedelta

import pytest

from agency_ops.attendance.calculations import is_auto_clockout
from agency_ops.attendance.calculations import work_minutes

START = datetime(2024, 5, 6, 9, 0)  # noqa: DTZ001


@pytest.mark.parametrize(
    ("clock_out", "break_minutes", "expected"),
    [
        (START + timedelta(hours=8), 0, 480),
        (START + timedelta(hours=8), 60, 420),
        (START + timedelta(minutes=30, seconds=59), 0, 30),
        (START + timedelta(minutes=20), 45, 0),
        (None, 0, 0),
    ],
)
def test_work_minutes(clock_out, break_minutes, expected):
    assert work_minutes(START, clock_out, break_minutes) == expected


def test_work_minutes_without_clock_in():
    assert work_minutes(None, START, 0) == 0


def test_work_minutes_treats_missing_break_as_zero():
    assert work_minutes(START, START + timedelta(hours=1), None) == 60


@pytest.mark.parametrize(
    ("notes", "expected"),
    [
        ("Left early [AUTO CLOCK-OUT - LUPA CLOCK OUT]", True),
        ("[Auto clock-out at 23:59]", True),
        ("auto clock-out", False),
        ("", False),
        (None, False),
    ],
)
def test_is_auto_clockout(notes, expected):
    assert is_auto_clockout(notes) is expected
