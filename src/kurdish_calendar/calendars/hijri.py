"""
Approximate Hijri (Islamic lunar) calendar.

This is NOT an astronomical or official Hijri calendar. A single pinned
anchor (2025-03-04 = 4 Ramadan 1446) is combined with a fixed 354-day year
of alternating 30/29-day months. The true lunar year is about 354.37 days,
so the result drifts roughly one day every three years away from the
anchor, and individual month starts may differ by a day or two from
announced dates even close to it. `hijri_drift` measures the disagreement
against the Umm al-Qura calendar.
"""
import logging
from datetime import date as GDate
from itertools import accumulate
from typing import Any, Tuple

from hijridate import Gregorian

from kurdish_calendar.config import HIJRI_ANCHOR, HIJRI_ANCHOR_GREGORIAN, HIJRI_MONTH_LENGTHS
from kurdish_calendar.exceptions import OutOfRangeError
from kurdish_calendar.types.calendar_types import CalendarDate, CalendarSystem
from kurdish_calendar.utils.gregorian import coerce_gregorian

logger = logging.getLogger(__name__)

HIJRI_YEAR_DAYS = sum(HIJRI_MONTH_LENGTHS)

# Day offset of each month's first day within the year
_MONTH_OFFSETS: Tuple[int, ...] = (0,) + tuple(accumulate(HIJRI_MONTH_LENGTHS))[:-1]


def _day_index(year: int, month: int, day: int) -> int:
    """Days since the (fictional) start of year 0 in the fixed-cycle scheme."""
    return year * HIJRI_YEAR_DAYS + _MONTH_OFFSETS[month - 1] + day - 1


def to_hijri(value: Any) -> CalendarDate:
    """Approximate Hijri date of `value` (1-based month; 9 = Ramadan)."""
    g = coerce_gregorian(value)
    diff = (g - HIJRI_ANCHOR_GREGORIAN).days

    year, in_year = divmod(_day_index(*HIJRI_ANCHOR) + diff, HIJRI_YEAR_DAYS)
    month = 1
    for m, offset in enumerate(_MONTH_OFFSETS, start=1):
        if offset > in_year:
            break
        month = m
    day = min(max(in_year - _MONTH_OFFSETS[month - 1] + 1, 1), 30)

    out = CalendarDate(CalendarSystem.HIJRI, year, month, day)
    logger.debug("🌙 to_hijri: %s (Δ%sd) → %s", g.isoformat(), diff, out.isoformat())
    return out


def hijri_month_length(month: int) -> int:
    if not (1 <= month <= 12):
        raise ValueError(f"month must be in 1..12, got {month}")
    return HIJRI_MONTH_LENGTHS[month - 1]


def hijri_drift(value: Any) -> int:
    """
    Days by which `to_hijri` runs ahead (+) or behind (-) Umm al-Qura.

    Raises OutOfRangeError outside the Umm al-Qura table (about 1937–2077).
    """
    g = coerce_gregorian(value)
    approx = to_hijri(g)
    try:
        official = Gregorian.fromdate(g).to_hijri()
    except OverflowError as exc:
        raise OutOfRangeError("hijri", approx.year) from exc

    drift = _day_index(*approx.as_tuple()) - _day_index(official.year, official.month, official.day)
    if drift:
        logger.debug("🌙 hijri_drift: %s approx=%s official=%s-%02d-%02d drift=%+d",
                     g.isoformat(), approx.isoformat(), official.year, official.month, official.day, drift)
    return drift


def hijri_anchor() -> Tuple[GDate, CalendarDate]:
    return HIJRI_ANCHOR_GREGORIAN, CalendarDate(CalendarSystem.HIJRI, *HIJRI_ANCHOR)
