# test_rojhalat.py
# pytest-style tests for the Kurdish Rojhalat calendar.

from datetime import date, timedelta

import pytest

from kurdish_calendar.calendars.rojhalat import (
    days_until_newroz,
    next_newroz,
    rojhalat_month_length,
    rojhalat_month_name,
    rojhalat_month_start,
    rojhalat_year_days,
    to_rojhalat,
)
from kurdish_calendar.exceptions import OutOfRangeError
from kurdish_calendar.types.calendar_types import CalendarSystem


def _ymd(d):
    return to_rojhalat(d).as_tuple()


# --------------------------- NEWROZ BOUNDARY ---------------------------

def test_newroz_is_first_day_of_year():
    res = to_rojhalat(date(2025, 3, 21))
    assert res.system is CalendarSystem.ROJHALAT
    assert res.as_tuple() == (2725, 1, 1)


def test_day_before_newroz_is_last_month_of_previous_year():
    y, m, d = _ymd(date(2025, 3, 20))
    assert (y, m) == (2724, 12)
    assert d == 29  # Feb 2025 has 28 days


@pytest.mark.parametrize("gy", [1950, 1999, 2000, 2023, 2024, 2025, 2100])
def test_newroz_boundary_for_many_years(gy):
    before = to_rojhalat(date(gy, 3, 20))
    after = to_rojhalat(date(gy, 3, 21))
    assert before.year == gy + 699 and before.month == 12
    assert after.as_tuple() == (gy + 700, 1, 1)


# --------------------------- MONTH BOUNDARIES ---------------------------

@pytest.mark.parametrize(
    "gregorian, expected",
    [
        (date(2025, 4, 20), (2725, 1, 31)),
        (date(2025, 4, 21), (2725, 2, 1)),
        (date(2025, 5, 21), (2725, 2, 31)),
        (date(2025, 5, 22), (2725, 3, 1)),
        (date(2025, 7, 22), (2725, 4, 31)),
        (date(2025, 9, 23), (2725, 7, 1)),
        (date(2025, 10, 22), (2725, 7, 30)),
        (date(2025, 11, 22), (2725, 9, 1)),
        (date(2025, 12, 22), (2725, 10, 1)),
        (date(2025, 12, 31), (2725, 10, 10)),
        (date(2026, 1, 1), (2725, 10, 11)),
        (date(2026, 1, 20), (2725, 10, 30)),
        (date(2026, 1, 21), (2725, 11, 1)),
        (date(2026, 2, 19), (2725, 11, 30)),
        (date(2026, 2, 20), (2725, 12, 1)),
    ],
)
def test_month_boundaries(gregorian, expected):
    assert _ymd(gregorian) == expected


# --------------------------- LEAP DAY ---------------------------

def test_leap_day_extends_reseme():
    assert _ymd(date(2024, 2, 28)) == (2723, 12, 9)
    assert _ymd(date(2024, 2, 29)) == (2723, 12, 10)
    assert _ymd(date(2024, 3, 1)) == (2723, 12, 11)
    assert _ymd(date(2024, 3, 20)) == (2723, 12, 30)
    assert rojhalat_month_length(2723, 12) == 30
    assert rojhalat_month_length(2724, 12) == 29


def test_month_start_and_length():
    assert rojhalat_month_start(2725, 1) == date(2025, 3, 21)
    assert rojhalat_month_start(2725, 11) == date(2026, 1, 21)
    assert rojhalat_month_start(2725, 12) == date(2026, 2, 20)
    assert [rojhalat_month_length(2725, m) for m in range(1, 12)] == [31] * 6 + [30] * 5
    with pytest.raises(ValueError):
        rojhalat_month_length(2725, 13)


def test_month_names():
    assert rojhalat_month_name(1) == "خاکەلێوە"
    assert rojhalat_month_name(1, latin=True) == "Xakelêwe"
    assert rojhalat_month_name(12, latin=True) == "Reşeme"


# --------------------------- PARTITION / TOTALITY ---------------------------

def test_years_partition_into_twelve_months(sweep_years):
    start, end = sweep_years
    for kurdish_year in range(start + 700, end + 700):
        days = rojhalat_year_days(kurdish_year)
        lengths = [rojhalat_month_length(kurdish_year, m) for m in range(1, 13)]
        assert len(days) == sum(lengths)
        assert len(days) in (365, 366)


def test_every_day_is_in_range_and_consecutive(sweep_years):
    start, end = sweep_years
    d = date(start, 1, 1)
    last = date(end, 12, 31)
    prev = to_rojhalat(d)
    while d < last:
        d += timedelta(days=1)
        cur = to_rojhalat(d)
        assert 1 <= cur.month <= 12
        assert 1 <= cur.day <= rojhalat_month_length(cur.year, cur.month)
        if cur.day == 1:
            # new month (and new year on Newroz)
            assert prev.day == rojhalat_month_length(prev.year, prev.month)
            if cur.month == 1:
                assert (cur.year, prev.month) == (prev.year + 1, 12)
            else:
                assert (cur.year, cur.month) == (prev.year, prev.month + 1)
        else:
            assert (cur.year, cur.month, cur.day) == (prev.year, prev.month, prev.day + 1)
        prev = cur


# --------------------------- NEWROZ COUNTDOWN ---------------------------

def test_days_until_newroz():
    assert days_until_newroz(date(2025, 3, 21)) == 0
    assert days_until_newroz(date(2025, 3, 20)) == 1
    assert days_until_newroz(date(2025, 3, 22)) == 364
    assert next_newroz(date(2024, 12, 31)) == date(2025, 3, 21)
    assert next_newroz("2025-03-21") == date(2025, 3, 21)


def test_newroz_after_last_representable_year():
    assert days_until_newroz(date(9999, 3, 21)) == 0
    with pytest.raises(OutOfRangeError) as exc:
        next_newroz(date(9999, 3, 22))
    assert exc.value.details["year"] == 10000
    with pytest.raises(OutOfRangeError):
        days_until_newroz(date(9999, 12, 31))
