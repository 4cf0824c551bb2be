"""
Process-wide settings for the calendar library.

Everything here is a plain constant; the three `KURDCAL_*` environment
variables are read once at import time.
"""
import logging
import os
from datetime import date
from typing import Iterable

from kurdish_calendar.types.calendar_types import CalendarSystem, Locale

logger = logging.getLogger(__name__)


def env_choice(name: str, default: str, choices: Iterable[str]) -> str:
    """Lower-cased value of `name`, or `default` when unset or not one of `choices`."""
    raw = os.getenv(name)
    if raw is None:
        return default
    allowed = set(choices)
    value = raw.strip().lower()
    if value not in allowed:
        logger.warning("⚠️ %s=%r is not one of %s; using %r", name, raw, sorted(allowed), default)
        return default
    return value


# ── Locale / calendar defaults ─────────────────────────────────────────────
# Unknown tags fall back to these instead of failing.
DEFAULT_LOCALE = env_choice("KURDCAL_DEFAULT_LOCALE", Locale.KU.value, [loc.value for loc in Locale])
DEFAULT_CALENDAR = env_choice(
    "KURDCAL_DEFAULT_CALENDAR", CalendarSystem.ROJHALAT.value, [cal.value for cal in CalendarSystem]
)

LOG_LEVEL = logging.getLevelName(os.getenv("KURDCAL_LOG_LEVEL", "INFO").upper())
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.INFO

INVALID_DATE_TEXT = "Invalid Date"

# ── Kurdish calendar ───────────────────────────────────────────────────────
NEWROZ_MONTH = 3
NEWROZ_DAY = 21

# Kurdish year = Gregorian year + offset (before / on-or-after Newroz)
KURDISH_YEAR_OFFSET = 700
KURDISH_YEAR_OFFSET_BEFORE_NEWROZ = 699

# ── Hijri approximation anchor ─────────────────────────────────────────────
# 4 Ramadan 1446 AH
HIJRI_ANCHOR_GREGORIAN = date(2025, 3, 4)
HIJRI_ANCHOR = (1446, 9, 4)
HIJRI_MONTH_LENGTHS: tuple[int, ...] = (30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29)
