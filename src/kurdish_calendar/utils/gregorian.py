import re
from datetime import date as GDate, datetime
from typing import Any

from kurdish_calendar.exceptions import InvalidDateError
from kurdish_calendar.utils.numerals import to_latin_digits

ISO_DATE_RE = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})\s*$")

_GREGORIAN_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_month_length(year: int, month: int) -> int:
    if month == 2 and is_gregorian_leap(year):
        return 29
    return _GREGORIAN_MONTH_LENGTHS[month - 1]


def coerce_gregorian(value: Any) -> GDate:
    """
    Turn `value` into a `datetime.date`.

    Accepts a date, a datetime (its date part), an ISO "YYYY-MM-DD" string
    (Persian / Arabic-Indic digits allowed) or a (year, month, day) triple
    with a 1-based month. Anything else raises InvalidDateError.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, GDate):
        return value
    if isinstance(value, str):
        m = ISO_DATE_RE.match(to_latin_digits(value))
        if not m:
            raise InvalidDateError(value, "expected YYYY-MM-DD")
        parts = tuple(int(p) for p in m.groups())
    elif isinstance(value, (tuple, list)) and len(value) == 3:
        parts = tuple(value)
    else:
        raise InvalidDateError(value, "unsupported type " + type(value).__name__)

    if not all(isinstance(p, int) and not isinstance(p, bool) for p in parts):
        raise InvalidDateError(value, "components must be integers")
    try:
        return GDate(*parts)
    except ValueError as exc:
        raise InvalidDateError(value, str(exc)) from exc
