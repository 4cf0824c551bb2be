"""
Persian (Jalali / Solar Hijri) calendar.

Conversions go through the Julian Day Number (JDN). The leap structure comes
from the table of "break" years where the 33-year intercalation rule
restarts; it covers Jalali years -61 .. 3177. Gregorian input is accepted
from 560-01-01 up to, but excluding, 3799-01-01: the lookup starts from
Jalali year `gy - 621`, so 3799-01-01 .. 3799-03-20 raise even though they
fall in Jalali 3177.

Integer division truncates toward zero (`_div` / `_mod`), exactly as the
reference algorithm does; Python's floor division would shift results for
negative intermediates.
"""
import logging
from datetime import date as GDate
from typing import Any, NamedTuple, Tuple

import jdatetime as jd

from kurdish_calendar.exceptions import InvalidDateError, OutOfRangeError
from kurdish_calendar.types.calendar_types import CalendarDate, CalendarSystem
from kurdish_calendar.utils.gregorian import coerce_gregorian

logger = logging.getLogger(__name__)

# Jalali years starting the 33-year rule.
BREAKS: Tuple[int, ...] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181, 1210,
    1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)


class _JalCal(NamedTuple):
    leap: int      # years since the last leap year (0 → this year is leap)
    gy: int        # Gregorian year in which this Jalali year begins
    march: int     # day in March of 1 Farvardin


def _div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _mod(a: int, b: int) -> int:
    return a - _div(a, b) * b


def _jal_cal(jy: int) -> _JalCal:
    gy = jy + 621
    leap_j = -14
    jp = BREAKS[0]

    if jy < jp or jy >= BREAKS[-1]:
        raise OutOfRangeError("jalali", jy, (BREAKS[0], BREAKS[-1]))

    # Find the limiting years for the Jalali year jy.
    jump = 0
    for jm in BREAKS[1:]:
        jump = jm - jp
        if jy < jm:
            break
        leap_j = leap_j + _div(jump, 33) * 8 + _div(_mod(jump, 33), 4)
        jp = jm
    n = jy - jp

    # Leap years from AD 621 to the beginning of jy, Jalali then Gregorian.
    leap_j = leap_j + _div(n, 33) * 8 + _div(_mod(n, 33) + 3, 4)
    if _mod(jump, 33) == 4 and jump - n == 4:
        leap_j += 1
    leap_g = _div(gy, 4) - _div((_div(gy, 100) + 1) * 3, 4) - 150

    march = 20 + leap_j - leap_g

    # Years passed since the last leap year.
    if jump - n < 6:
        n = n - jump + _div(jump + 4, 33) * 33
    leap = _mod(_mod(n + 1, 33) - 1, 4)
    if leap == -1:
        leap = 4

    return _JalCal(leap=leap, gy=gy, march=march)


def _g2d(gy: int, gm: int, gd: int) -> int:
    """Julian Day Number of a Gregorian date (noon)."""
    d = (
        _div((gy + _div(gm - 8, 6) + 100100) * 1461, 4)
        + _div(153 * _mod(gm + 9, 12) + 2, 5)
        + gd
        - 34840408
    )
    return d - _div(_div(gy + 100100 + _div(gm - 8, 6), 100) * 3, 4) + 752


def _d2g(jdn: int) -> Tuple[int, int, int]:
    j = 4 * jdn + 139361631
    j = j + _div(_div(4 * jdn + 183187720, 146097) * 3, 4) * 4 - 3908
    i = _div(_mod(j, 1461), 4) * 5 + 308
    gd = _div(_mod(i, 153), 5) + 1
    gm = _mod(_div(i, 153), 12) + 1
    gy = _div(j, 1461) - 100100 + _div(8 - gm, 6)
    return gy, gm, gd


def _j2d(jy: int, jm: int, jday: int) -> int:
    r = _jal_cal(jy)
    return _g2d(r.gy, 3, r.march) + (jm - 1) * 31 - _div(jm, 7) * (jm - 7) + jday - 1


def _d2j(jdn: int) -> Tuple[int, int, int]:
    gy = _d2g(jdn)[0]
    jy = gy - 621
    r = _jal_cal(jy)
    jdn_farvardin_1 = _g2d(gy, 3, r.march)

    # Days since 1 Farvardin.
    k = jdn - jdn_farvardin_1
    if k >= 0:
        if k <= 185:
            # The first six months have 31 days.
            return jy, 1 + _div(k, 31), _mod(k, 31) + 1
        k -= 186
    else:
        # Still in the previous Jalali year.
        jy -= 1
        k += 179
        if r.leap == 1:
            k += 1
    return jy, 7 + _div(k, 30), _mod(k, 30) + 1


# ── Public API ─────────────────────────────────────────────────────────────

def to_jalali(value: Any) -> CalendarDate:
    """
    Convert a Gregorian date to the Persian calendar.

    Raises OutOfRangeError when the year is not covered by BREAKS.
    """
    g = coerce_gregorian(value)
    jy, jm, jday = _d2j(_g2d(g.year, g.month, g.day))
    out = CalendarDate(CalendarSystem.PERSIAN, jy, jm, jday)
    logger.debug("☀️ to_jalali: %s → %s", g.isoformat(), out.isoformat())
    return out


def from_jalali(jy: int, jm: int, jday: int) -> GDate:
    if not (1 <= jm <= 12):
        raise InvalidDateError((jy, jm, jday), "month must be in 1..12")
    last = jalali_month_length(jy, jm)
    if not (1 <= jday <= last):
        raise InvalidDateError((jy, jm, jday), f"day must be in 1..{last}")
    gy, gm, gd = _d2g(_j2d(jy, jm, jday))
    return GDate(gy, gm, gd)


def is_jalali_leap_year(jy: int) -> bool:
    return _jal_cal(jy).leap == 0


def jalali_month_length(jy: int, jm: int) -> int:
    if not (1 <= jm <= 12):
        raise ValueError(f"month must be in 1..12, got {jm}")
    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    return 30 if is_jalali_leap_year(jy) else 29


def to_jdate(value: CalendarDate) -> jd.date:
    """Hand a converted Persian date to code built on `jdatetime`."""
    if value.system is not CalendarSystem.PERSIAN:
        raise InvalidDateError(value, "not a Persian calendar date")
    return jd.date(value.year, value.month, value.day)
