import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from kurdish_calendar.calendars.bashur import to_bashur
from kurdish_calendar.calendars.hijri import hijri_month_length, to_hijri
from kurdish_calendar.calendars.jalali import jalali_month_length, to_jalali
from kurdish_calendar.calendars.rojhalat import rojhalat_month_length, to_rojhalat
from kurdish_calendar.config import DEFAULT_CALENDAR, DEFAULT_LOCALE, INVALID_DATE_TEXT
from kurdish_calendar.exceptions import CalendarError
from kurdish_calendar.i18n.names import month_name
from kurdish_calendar.types.calendar_types import CalendarDate, CalendarSystem, Locale
from kurdish_calendar.utils.gregorian import coerce_gregorian, gregorian_month_length
from kurdish_calendar.utils.numerals import localize_number

logger = logging.getLogger(__name__)


def _to_gregorian(value: Any) -> CalendarDate:
    g = coerce_gregorian(value)
    return CalendarDate(CalendarSystem.GREGORIAN, g.year, g.month, g.day)


CONVERTERS: Dict[CalendarSystem, Callable[[Any], CalendarDate]] = {
    CalendarSystem.ROJHALAT: to_rojhalat,
    CalendarSystem.BASHUR: to_bashur,
    CalendarSystem.PERSIAN: to_jalali,
    CalendarSystem.HIJRI: to_hijri,
    CalendarSystem.GREGORIAN: _to_gregorian,
}

# Errors a conversion may legitimately raise for bad input
FORMAT_ERRORS = (CalendarError, ValueError, TypeError, KeyError, IndexError)


def resolve_locale(locale: Any) -> Locale:
    try:
        return Locale(locale)
    except ValueError:
        logger.warning("⚠️ unknown locale %r; falling back to %s", locale, DEFAULT_LOCALE)
        return Locale(DEFAULT_LOCALE)


def resolve_calendar(system: Any) -> CalendarSystem:
    try:
        return CalendarSystem(system)
    except ValueError:
        logger.warning("⚠️ unknown calendar system %r; falling back to %s", system, DEFAULT_CALENDAR)
        return CalendarSystem(DEFAULT_CALENDAR)


def convert(value: Any, system: Any) -> CalendarDate:
    """Convert a Gregorian date to `system` (unknown tags fall back to the default)."""
    return CONVERTERS[resolve_calendar(system)](value)


def month_length(system: Any, year: int, month: int) -> int:
    system = resolve_calendar(system)
    if system is CalendarSystem.ROJHALAT:
        return rojhalat_month_length(year, month)
    if system is CalendarSystem.PERSIAN:
        return jalali_month_length(year, month)
    if system is CalendarSystem.HIJRI:
        return hijri_month_length(month)
    return gregorian_month_length(year, month)


@dataclass(frozen=True)
class DateFormatResult:
    """
    Outcome of formatting one date.

    `text` is always renderable: the formatted date when `ok`, otherwise the
    invalid-date placeholder. `error` carries the reason on failure.
    """

    ok: bool
    text: str
    date: Optional[CalendarDate] = None
    error: Optional[str] = None

    @classmethod
    def failure(cls, error: str) -> "DateFormatResult":
        return cls(ok=False, text=INVALID_DATE_TEXT, error=error)


def format_calendar_date(cal: CalendarDate, locale: Any) -> str:
    """Render "{day} {month name} {year}" with locale digits."""
    loc = resolve_locale(locale)
    name = month_name(cal.system, loc, cal.month)
    return f"{localize_number(cal.day, loc.value)} {name} {localize_number(cal.year, loc.value)}"


def format_date_result(value: Any, locale: Any = DEFAULT_LOCALE,
                       system: Any = DEFAULT_CALENDAR) -> DateFormatResult:
    loc = resolve_locale(locale)
    cal_system = resolve_calendar(system)
    try:
        cal = CONVERTERS[cal_system](value)
        text = format_calendar_date(cal, loc)
    except FORMAT_ERRORS as exc:
        logger.warning("⚠️ format_date: %r (%s/%s) failed: %s", value, cal_system.value, loc.value, exc)
        return DateFormatResult.failure(str(exc))

    logger.debug("🗓️ format_date: %r (%s/%s) → %s", value, cal_system.value, loc.value, text)
    return DateFormatResult(ok=True, text=text, date=cal)


def format_date(value: Any, locale: Any = DEFAULT_LOCALE, system: Any = DEFAULT_CALENDAR) -> str:
    """Formatted date, or "Invalid Date"; never raises."""
    return format_date_result(value, locale, system).text


def format_all(value: Any, locale: Any = DEFAULT_LOCALE) -> Dict[CalendarSystem, str]:
    """One formatted string per calendar system, for a multi-calendar view."""
    return {system: format_date(value, locale, system) for system in CalendarSystem}
