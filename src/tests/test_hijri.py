# test_hijri.py
# pytest-style tests for the approximate Hijri calendar.
# pip install pytest hijridate

from datetime import date, timedelta

import pytest

from kurdish_calendar.calendars.hijri import hijri_anchor, hijri_drift, hijri_month_length, to_hijri
from kurdish_calendar.exceptions import OutOfRangeError
from kurdish_calendar.types.calendar_types import CalendarSystem


# --------------------------- ANCHOR ---------------------------

def test_anchor_is_fourth_of_ramadan_1446():
    res = to_hijri(date(2025, 3, 4))
    assert res.system is CalendarSystem.HIJRI
    assert res.as_tuple() == (1446, 9, 4)
    gregorian, hijri = hijri_anchor()
    assert to_hijri(gregorian) == hijri


@pytest.mark.parametrize(
    "gregorian, expected",
    [
        (date(2025, 3, 3), (1446, 9, 3)),
        (date(2025, 3, 30), (1446, 9, 30)),    # Ramadan has 30 days in the cycle
        (date(2025, 3, 31), (1446, 10, 1)),
        (date(2025, 2, 28), (1446, 8, 29)),    # Sha'ban has 29
        (date(2025, 6, 26), (1446, 12, 29)),
        (date(2025, 6, 27), (1447, 1, 1)),     # year rolls forward
        (date(2024, 7, 8), (1446, 1, 1)),      # and backward (354 days earlier)
        (date(2024, 7, 7), (1445, 12, 29)),
    ],
)
def test_rolls_forward_and_backward(gregorian, expected):
    assert to_hijri(gregorian).as_tuple() == expected


def test_every_day_in_range(sweep_years):
    start, end = sweep_years
    d = date(start, 1, 1)
    last = date(end, 12, 31)
    while d <= last:
        res = to_hijri(d)
        assert 1 <= res.month <= 12
        assert 1 <= res.day <= hijri_month_length(res.month)
        d += timedelta(days=30)


# --------------------------- DRIFT ---------------------------

def test_no_drift_at_anchor():
    assert hijri_drift(date(2025, 3, 4)) == 0


def test_drift_is_small_near_anchor():
    d = date(2025, 1, 1)
    while d <= date(2025, 12, 31):
        assert abs(hijri_drift(d)) <= 3, d
        d += timedelta(days=7)


def test_drift_grows_far_from_anchor():
    assert abs(hijri_drift(date(2070, 6, 1))) >= 10


def test_drift_outside_umm_al_qura_range():
    with pytest.raises(OutOfRangeError):
        hijri_drift(date(2100, 1, 1))
