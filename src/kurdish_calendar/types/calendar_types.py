from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, TypedDict

from kurdish_calendar.exceptions import InvalidDateError


class CalendarSystem(str, Enum):
    ROJHALAT = "rojhalat"
    BASHUR = "bashur"
    PERSIAN = "persian"
    HIJRI = "hijri"
    GREGORIAN = "gregorian"


class Locale(str, Enum):
    EN = "en"
    KU = "ku"
    AR = "ar"
    FA = "fa"


@dataclass(frozen=True)
class CalendarDate:
    """
    A date in one calendar system. Months are always 1-based.

    Only structural bounds are checked here; converters guarantee the day
    fits the actual month length.
    """

    system: CalendarSystem
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not (1 <= self.month <= 12):
            raise InvalidDateError((self.year, self.month, self.day), "month must be in 1..12")
        if not (1 <= self.day <= 31):
            raise InvalidDateError((self.year, self.month, self.day), "day must be in 1..31")

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def as_tuple(self) -> tuple[int, int, int]:
        return self.year, self.month, self.day


# ── Holiday data (decoded JSON) ────────────────────────────────────────────

LocalizedText = Dict[str, str]


class QuoteTD(TypedDict):
    celebrity: str
    quote: LocalizedText


class HolidayRecord(TypedDict, total=False):
    date: str                 # ISO YYYY-MM-DD, Gregorian
    isHoliday: bool
    event: LocalizedText
    note: LocalizedText
    quote: QuoteTD
    country: str
    region: str


class HolidaysDocumentTD(TypedDict):
    holidays: List[HolidayRecord]
