"""
Holiday matching over an externally supplied list of holiday records.

Records are decoded JSON objects (see HolidayRecord); this module never
loads or fetches them. Dates are compared as Gregorian calendar days.
"""
import logging
from dataclasses import dataclass
from datetime import date as GDate, timedelta
from typing import Any, Iterable, List, Optional

from kurdish_calendar.exceptions import InvalidDateError
from kurdish_calendar.formatting import resolve_locale
from kurdish_calendar.types.calendar_types import HolidayRecord, Locale, LocalizedText
from kurdish_calendar.utils.gregorian import coerce_gregorian

logger = logging.getLogger(__name__)

# Kurdish-locale lookups compare against the following Gregorian day. The
# stored holiday dates sit one day off the Rojhalat day boundary as shown in
# the Kurdish UI; kept for compatibility with existing holiday data.
KURDISH_LOCALE_DAY_SHIFT = timedelta(days=1)


@dataclass(frozen=True)
class HolidayMatch:
    is_holiday: bool
    record: Optional[HolidayRecord] = None
    event: Optional[LocalizedText] = None

    @property
    def matched(self) -> bool:
        return self.record is not None

    def event_text(self, locale: Any, default: str = "") -> str:
        return localized_text(self.event, locale, default)


NO_MATCH = HolidayMatch(is_holiday=False)


def localized_text(text: Optional[LocalizedText], locale: Any, default: str = "") -> str:
    """Text in `locale` (unknown tags count as the default locale), else English, else `default`."""
    if not text:
        return default
    return text.get(resolve_locale(locale).value) or text.get(Locale.EN.value) or default


def _record_date(record: Any) -> Optional[GDate]:
    if not isinstance(record, dict):
        return None
    try:
        return coerce_gregorian(record.get("date"))
    except InvalidDateError:
        return None


def comparison_date(value: Any, locale: Any) -> GDate:
    """The Gregorian day a lookup in `locale` is matched against."""
    target = coerce_gregorian(value)
    if resolve_locale(locale) is Locale.KU:
        target = target + KURDISH_LOCALE_DAY_SHIFT
    return target


def is_holiday(value: Any, holidays: Iterable[HolidayRecord], locale: Any = Locale.EN) -> HolidayMatch:
    """
    Look `value` up in `holidays`.

    The first record on the comparison day wins. A record without an
    `isHoliday` flag counts as a holiday; one flagged false still returns
    its event text.
    """
    try:
        target = comparison_date(value, locale)
    except OverflowError:
        return NO_MATCH

    for record in holidays:
        if _record_date(record) == target:
            flag = bool(record.get("isHoliday", True))
            logger.debug("🎉 is_holiday: %s (%s) matched %s holiday=%s", value, locale, target, flag)
            return HolidayMatch(is_holiday=flag, record=record, event=record.get("event"))
    return NO_MATCH


def events_on(value: Any, holidays: Iterable[HolidayRecord]) -> List[HolidayRecord]:
    target = coerce_gregorian(value)
    return [r for r in holidays if _record_date(r) == target]


def holidays_in_month(holidays: Iterable[HolidayRecord], year: int, month: int) -> List[HolidayRecord]:
    """Records in Gregorian `year`/`month` (1-based), oldest first."""
    picked = []
    for record in holidays:
        d = _record_date(record)
        if d is not None and d.year == year and d.month == month:
            picked.append((d, record))
    picked.sort(key=lambda pair: pair[0])
    return [r for _, r in picked]


def parse_holidays(document: Any) -> List[HolidayRecord]:
    """
    Validate a decoded holidays document and return its records by date.

    Accepts `{"holidays": [...]}` or a bare list. Records without a valid
    date or without an `event` mapping are dropped with a warning.
    """
    if isinstance(document, dict):
        items = document.get("holidays", [])
    elif isinstance(document, list):
        items = document
    else:
        raise TypeError(f"holidays document must be an object or a list, got {type(document).__name__}")

    valid = []
    for idx, record in enumerate(items):
        d = _record_date(record)
        if d is None:
            logger.warning("⚠️ parse_holidays: record #%s has no valid date, skipped: %r", idx, record)
            continue
        if not isinstance(record.get("event"), dict):
            logger.warning("⚠️ parse_holidays: record #%s (%s) has no event text, skipped", idx, d)
            continue
        valid.append((d, record))

    valid.sort(key=lambda pair: pair[0])
    logger.debug("📚 parse_holidays: %s of %s records kept", len(valid), len(items))
    return [r for _, r in valid]
