from typing import Union

# Language & digit normalization

LATIN_TO_ARABIC_INDIC = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")

# Persian (U+06F0..) and Arabic-Indic (U+0660..) digits back to ASCII
LOCAL_TO_LATIN = str.maketrans("۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩", "0123456789" * 2)


def to_arabic_indic(value: Union[int, str]) -> str:
    """Render every Latin digit in `value` as an Arabic-Indic digit (5 -> ٥)."""
    return str(value).translate(LATIN_TO_ARABIC_INDIC)


def to_latin_digits(s: str) -> str:
    return s.translate(LOCAL_TO_LATIN) if s else s


def localize_number(value: Union[int, str], locale: str) -> str:
    # Only English keeps Latin digits
    return str(value) if locale == "en" else to_arabic_indic(value)
