#!/usr/bin/env python3
"""Print a multi-calendar view of one day.

Example::

    python src/main.py --date 2025-03-21 --locale ku --holidays data/holidays.json

"""
from __future__ import annotations

import argparse
import json
import logging
from datetime import date
from pathlib import Path

from kurdish_calendar.calendars.hijri import hijri_drift
from kurdish_calendar.calendars.rojhalat import days_until_newroz
from kurdish_calendar.config import LOG_LEVEL
from kurdish_calendar.exceptions import OutOfRangeError
from kurdish_calendar.formatting import format_all, resolve_locale
from kurdish_calendar.holidays import is_holiday, parse_holidays
from kurdish_calendar.i18n.names import weekday_name
from kurdish_calendar.logging_setup import setup_logging
from kurdish_calendar.utils.gregorian import coerce_gregorian

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Show a date in the Kurdish, Persian and Hijri calendars")
    parser.add_argument("--date", default=None, help="Gregorian date YYYY-MM-DD (default: today)")
    parser.add_argument("--locale", default="ku", help="en, ku, ar or fa (default: ku)")
    parser.add_argument("--holidays", type=Path, default=None, help="holidays JSON file")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parsed = parser.parse_args()

    setup_logging(level=logging.DEBUG if parsed.debug else LOG_LEVEL, console=True)

    try:
        day = coerce_gregorian(parsed.date) if parsed.date else date.today()
    except ValueError as exc:
        parser.error(str(exc))
    locale = resolve_locale(parsed.locale)

    print("─" * 60)
    print(f"{day.isoformat()}  {weekday_name(day, locale)}")
    for system, text in format_all(day, locale).items():
        print(f"  {system.value:<10} {text}")
    try:
        print(f"  Newroz in {days_until_newroz(day)} day(s)")
    except OutOfRangeError:
        print("  Newroz countdown unavailable (next Newroz is past year 9999)")

    try:
        drift = hijri_drift(day)
        if drift:
            print(f"  ⚠️ Hijri date is approximate ({drift:+d} day(s) vs Umm al-Qura)")
    except OutOfRangeError:
        print("  ⚠️ Hijri date is approximate (outside Umm al-Qura range)")

    if parsed.holidays:
        if not parsed.holidays.is_file():
            parser.error(f"{parsed.holidays} does not exist")
        with parsed.holidays.open(encoding="utf-8") as f:
            holidays = parse_holidays(json.load(f))
        match = is_holiday(day, holidays, locale)
        if match.matched:
            label = "Holiday" if match.is_holiday else "Event"
            print(f"  {label}: {match.event_text(locale)}")


if __name__ == "__main__":
    main()
