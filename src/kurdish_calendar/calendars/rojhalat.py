"""
Kurdish (Rojhalat) solar calendar.

The Kurdish year starts at Newroz, 21 March, and runs 700 years ahead of the
Gregorian year (2025-03-21 is 1 Xakelêwe 2725). Months are laid on fixed
Gregorian boundaries; the first six have 31 days, the next five 30, and
Reşeme closes the year with 29 days, or 30 when it contains 29 February.
"""
import logging
from datetime import date as GDate, timedelta
from typing import Any, List, Tuple

from kurdish_calendar.config import (
    KURDISH_YEAR_OFFSET,
    KURDISH_YEAR_OFFSET_BEFORE_NEWROZ,
    NEWROZ_DAY,
    NEWROZ_MONTH,
)
from kurdish_calendar.exceptions import OutOfRangeError
from kurdish_calendar.types.calendar_types import CalendarDate, CalendarSystem
from kurdish_calendar.utils.gregorian import coerce_gregorian, is_gregorian_leap

logger = logging.getLogger(__name__)

# Sorani month names, Arabic script
ROJHALAT_MONTHS_SORANI: Tuple[str, ...] = (
    "خاکەلێوە",   # late March – April
    "گوڵان",
    "جۆزەردان",
    "پووشپەڕ",
    "گەلاوێژ",
    "خەرمانان",
    "ڕەزبەر",
    "گەڵاڕێزان",
    "سەرماوەز",
    "بەفرانبار",
    "ڕێبەندان",
    "ڕەشەمە",     # late February – March
)

ROJHALAT_MONTHS_LATIN: Tuple[str, ...] = (
    "Xakelêwe",
    "Gulan",
    "Cozerdan",
    "Pûşper",
    "Gelawêj",
    "Xermanan",
    "Rezber",
    "Gelarêzan",
    "Sermawez",
    "Befranbar",
    "Rêbendan",
    "Reşeme",
)

# (gregorian month, day) on which each Kurdish month starts
MONTH_STARTS: Tuple[Tuple[int, int], ...] = (
    (3, 21), (4, 21), (5, 22), (6, 22), (7, 23), (8, 23),
    (9, 23), (10, 23), (11, 22), (12, 22), (1, 21), (2, 20),
)

# Befranbar (month 10) runs 22 Dec – 20 Jan; these are its days in January
_BEFRANBAR_DAYS_IN_DECEMBER = 10


def _kurdish_year(g: GDate) -> int:
    if (g.month, g.day) >= (NEWROZ_MONTH, NEWROZ_DAY):
        return g.year + KURDISH_YEAR_OFFSET
    return g.year + KURDISH_YEAR_OFFSET_BEFORE_NEWROZ


def _starts_in_year(gregorian_year: int) -> List[Tuple[GDate, int]]:
    starts = [(GDate(gregorian_year, gm, gd), idx + 1) for idx, (gm, gd) in enumerate(MONTH_STARTS)]
    starts.sort()
    return starts


def to_rojhalat(value: Any) -> CalendarDate:
    """Convert a Gregorian date to the Kurdish Rojhalat calendar (1-based month)."""
    g = coerce_gregorian(value)
    year = _kurdish_year(g)

    month, day = 10, g.day + _BEFRANBAR_DAYS_IN_DECEMBER  # 1–20 January
    for start, m in _starts_in_year(g.year):
        if start > g:
            break
        month, day = m, (g - start).days + 1

    out = CalendarDate(CalendarSystem.ROJHALAT, year, month, day)
    logger.debug("🌞 to_rojhalat: %s → %s", g.isoformat(), out.isoformat())
    return out


def rojhalat_month_length(kurdish_year: int, month: int) -> int:
    if not (1 <= month <= 12):
        raise ValueError(f"month must be in 1..12, got {month}")
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    # Reşeme spans the February of Gregorian year (kurdish_year - 699)
    return 30 if is_gregorian_leap(kurdish_year - KURDISH_YEAR_OFFSET_BEFORE_NEWROZ) else 29


def rojhalat_month_start(kurdish_year: int, month: int) -> GDate:
    """Gregorian date of day 1 of `month` in `kurdish_year`."""
    if not (1 <= month <= 12):
        raise ValueError(f"month must be in 1..12, got {month}")
    gm, gd = MONTH_STARTS[month - 1]
    gy = kurdish_year - KURDISH_YEAR_OFFSET + (1 if gm < NEWROZ_MONTH else 0)
    try:
        return GDate(gy, gm, gd)
    except ValueError as exc:
        raise OutOfRangeError(
            "rojhalat", kurdish_year, (1 + KURDISH_YEAR_OFFSET, 9999 + KURDISH_YEAR_OFFSET)
        ) from exc


def rojhalat_month_name(month: int, latin: bool = False) -> str:
    table = ROJHALAT_MONTHS_LATIN if latin else ROJHALAT_MONTHS_SORANI
    return table[month - 1]


# ── Newroz ─────────────────────────────────────────────────────────────────

def next_newroz(value: Any) -> GDate:
    """The coming Newroz; `value` itself when it is 21 March."""
    g = coerce_gregorian(value)
    newroz = GDate(g.year, NEWROZ_MONTH, NEWROZ_DAY)
    if g > newroz:
        try:
            newroz = GDate(g.year + 1, NEWROZ_MONTH, NEWROZ_DAY)
        except ValueError as exc:
            raise OutOfRangeError("gregorian", g.year + 1, (GDate.min.year, GDate.max.year + 1)) from exc
    return newroz


def days_until_newroz(value: Any) -> int:
    g = coerce_gregorian(value)
    days = (next_newroz(g) - g).days
    logger.debug("🔥 days_until_newroz: %s → %s", g.isoformat(), days)
    return days


def rojhalat_year_days(kurdish_year: int) -> List[GDate]:
    """Every Gregorian day of a Kurdish year, Newroz first."""
    start = rojhalat_month_start(kurdish_year, 1)
    end = rojhalat_month_start(kurdish_year + 1, 1)
    return [start + timedelta(days=i) for i in range((end - start).days)]
