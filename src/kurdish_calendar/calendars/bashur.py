"""
Kurdish (Bashur) calendar: the Gregorian calendar with the month names used
in Southern Kurdistan. Year, month and day are carried over unchanged.
"""
import logging
from typing import Any, Tuple

from kurdish_calendar.types.calendar_types import CalendarDate, CalendarSystem
from kurdish_calendar.utils.gregorian import coerce_gregorian

logger = logging.getLogger(__name__)

BASHUR_MONTHS_SORANI: Tuple[str, ...] = (
    "کانوونی دووەم",
    "شوبات",
    "ئازار",
    "نیسان",
    "مایس",
    "حوزەیران",
    "تەمووز",
    "ئاب",
    "ئەیلوول",
    "تشرینی یەکەم",
    "تشرینی دووەم",
    "کانوونی یەکەم",
)

BASHUR_MONTHS_LATIN: Tuple[str, ...] = (
    "Kanûnî Duwem",
    "Şubat",
    "Azar",
    "Nîsan",
    "Mayis",
    "Huzeyran",
    "Temmûz",
    "Ab",
    "Eylûl",
    "Tişrînî Yekem",
    "Tişrînî Duwem",
    "Kanûnî Yekem",
)


def to_bashur(value: Any) -> CalendarDate:
    g = coerce_gregorian(value)
    out = CalendarDate(CalendarSystem.BASHUR, g.year, g.month, g.day)
    logger.debug("🏔️ to_bashur: %s → %s", g.isoformat(), out.isoformat())
    return out


def bashur_month_name(month: int, latin: bool = False) -> str:
    table = BASHUR_MONTHS_LATIN if latin else BASHUR_MONTHS_SORANI
    return table[month - 1]
