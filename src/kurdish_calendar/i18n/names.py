"""
Static month and weekday name tables.

MONTH_NAMES maps (CalendarSystem, Locale) to the 12 month names of that
calendar in that language. The tables are built at import and never change.
"""
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from kurdish_calendar.calendars.bashur import BASHUR_MONTHS_LATIN, BASHUR_MONTHS_SORANI
from kurdish_calendar.calendars.rojhalat import ROJHALAT_MONTHS_LATIN, ROJHALAT_MONTHS_SORANI
from kurdish_calendar.types.calendar_types import CalendarSystem, Locale
from kurdish_calendar.utils.gregorian import coerce_gregorian

EN_GREGORIAN_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
AR_GREGORIAN_MONTHS = (
    "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
    "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
)
FA_GREGORIAN_MONTHS = (
    "ژانویه", "فوریه", "مارس", "آوریل", "مه", "ژوئن",
    "ژوئیه", "اوت", "سپتامبر", "اکتبر", "نوامبر", "دسامبر",
)

EN_JALALI_MONTHS = (
    "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
    "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
)
FA_JALALI_MONTHS = (
    "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
    "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
)
AR_JALALI_MONTHS = (
    "فروردين", "أرديبهشت", "خرداد", "تير", "مرداد", "شهريور",
    "مهر", "آبان", "آذر", "دي", "بهمن", "إسفند",
)
KU_JALALI_MONTHS = (
    "فەروەردین", "ئوردیبەهەشت", "خورداد", "تیر", "مورداد", "شەهریوەر",
    "مێهر", "ئابان", "ئازەر", "دەی", "بەهمەن", "ئەسفەند",
)

EN_HIJRI_MONTHS = (
    "Muharram", "Safar", "Rabi' al-Awwal", "Rabi' al-Thani", "Jumada al-Awwal", "Jumada al-Thani",
    "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qi'dah", "Dhu al-Hijjah",
)
AR_HIJRI_MONTHS = (
    "محرم", "صفر", "ربيع الأول", "ربيع الآخر", "جمادى الأولى", "جمادى الآخرة",
    "رجب", "شعبان", "رمضان", "شوال", "ذو القعدة", "ذو الحجة",
)
FA_HIJRI_MONTHS = (
    "محرم", "صفر", "ربیع‌الاول", "ربیع‌الثانی", "جمادی‌الاول", "جمادی‌الثانی",
    "رجب", "شعبان", "رمضان", "شوال", "ذی‌القعده", "ذی‌الحجه",
)
KU_HIJRI_MONTHS = (
    "موحەڕەم", "سەفەر", "ڕەبیعی یەکەم", "ڕەبیعی دووەم", "جەمادی یەکەم", "جەمادی دووەم",
    "ڕەجەب", "شەعبان", "ڕەمەزان", "شەوال", "زیلقەعدە", "زیلحیججە",
)

_S, _L = CalendarSystem, Locale

MONTH_NAMES: Mapping[Tuple[CalendarSystem, Locale], Tuple[str, ...]] = MappingProxyType({
    # Kurdish calendars: Latin script for English, Arabic script otherwise
    (_S.ROJHALAT, _L.EN): ROJHALAT_MONTHS_LATIN,
    (_S.ROJHALAT, _L.KU): ROJHALAT_MONTHS_SORANI,
    (_S.ROJHALAT, _L.AR): ROJHALAT_MONTHS_SORANI,
    (_S.ROJHALAT, _L.FA): ROJHALAT_MONTHS_SORANI,
    (_S.BASHUR, _L.EN): BASHUR_MONTHS_LATIN,
    (_S.BASHUR, _L.KU): BASHUR_MONTHS_SORANI,
    (_S.BASHUR, _L.AR): BASHUR_MONTHS_SORANI,
    (_S.BASHUR, _L.FA): BASHUR_MONTHS_SORANI,
    (_S.PERSIAN, _L.EN): EN_JALALI_MONTHS,
    (_S.PERSIAN, _L.KU): KU_JALALI_MONTHS,
    (_S.PERSIAN, _L.AR): AR_JALALI_MONTHS,
    (_S.PERSIAN, _L.FA): FA_JALALI_MONTHS,
    (_S.HIJRI, _L.EN): EN_HIJRI_MONTHS,
    (_S.HIJRI, _L.KU): KU_HIJRI_MONTHS,
    (_S.HIJRI, _L.AR): AR_HIJRI_MONTHS,
    (_S.HIJRI, _L.FA): FA_HIJRI_MONTHS,
    (_S.GREGORIAN, _L.EN): EN_GREGORIAN_MONTHS,
    (_S.GREGORIAN, _L.KU): BASHUR_MONTHS_SORANI,
    (_S.GREGORIAN, _L.AR): AR_GREGORIAN_MONTHS,
    (_S.GREGORIAN, _L.FA): FA_GREGORIAN_MONTHS,
})

# Monday first, matching date.weekday()
WEEKDAY_NAMES: Mapping[Locale, Tuple[str, ...]] = MappingProxyType({
    _L.EN: ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    _L.KU: ("دووشەممە", "سێشەممە", "چوارشەممە", "پێنجشەممە", "هەینی", "شەممە", "یەکشەممە"),
    _L.AR: ("الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت", "الأحد"),
    _L.FA: ("دوشنبه", "سه‌شنبه", "چهارشنبه", "پنجشنبه", "جمعه", "شنبه", "یکشنبه"),
})


def month_name(system: CalendarSystem, locale: Locale, month: int) -> str:
    """Name of 1-based `month`; IndexError / KeyError on bad input."""
    if not (1 <= month <= 12):
        raise IndexError(f"month {month} out of range 1..12")
    return MONTH_NAMES[(CalendarSystem(system), Locale(locale))][month - 1]


def weekday_name(value: Any, locale: Locale) -> str:
    return WEEKDAY_NAMES[Locale(locale)][coerce_gregorian(value).weekday()]
