import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--sweep-start",
        action="store",
        type=int,
        default=1900,
        help="First Gregorian year of the day-by-day sweeps (default: 1900)",
    )
    parser.addoption(
        "--sweep-end",
        action="store",
        type=int,
        default=2100,
        help="Last Gregorian year of the day-by-day sweeps (default: 2100)",
    )


@pytest.fixture(scope="session")
def sweep_years(request):
    """Inclusive (start, end) Gregorian year range for exhaustive checks."""
    start = request.config.getoption("--sweep-start")
    end = request.config.getoption("--sweep-end")
    return start, end


@pytest.fixture
def sample_holidays():
    """A decoded holidays.json document, including two malformed records."""
    return {
        "holidays": [
            {
                "date": "2025-12-17",
                "isHoliday": False,
                "event": {
                    "en": "Kurdish Flag Day",
                    "ku": "ڕۆژی ئاڵای کوردستان",
                    "ar": "يوم العلم الكردي",
                    "fa": "روز پرچم کردستان",
                },
            },
            {
                "date": "2025-03-20",
                "isHoliday": True,
                "event": {
                    "en": "Newroz",
                    "ku": "نەورۆز",
                    "ar": "نوروز",
                    "fa": "نوروز",
                },
                "note": {"en": "Kurdish New Year", "ku": "ساڵی نوێی کوردی"},
                "quote": {
                    "celebrity": "Piramêrd",
                    "quote": {"en": "This new day is Newroz", "ku": "ئەم ڕۆژی سالی تازەیە نەورۆزە"},
                },
            },
            {
                "date": "2025-03-16",
                "isHoliday": False,
                "event": {"en": "Halabja Remembrance Day", "ku": ""},
            },
            {
                "date": "2025-01-22",
                "event": {"en": "Republic of Kurdistan Day", "ku": "ڕۆژی کۆماری کوردستان"},
            },
            {"date": "2025-13-01", "event": {"en": "Broken month"}},
            {"date": "2025-04-01"},
        ]
    }
