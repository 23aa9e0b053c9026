"""Acceptability check applied to a search term before any lookup."""

import unicodedata

from weatherdash.errors import CityValidationError

MIN_CITY_LENGTH = 2

EMPTY_CITY = "Please enter a city name."
CITY_TOO_SHORT = f"City name must be at least {MIN_CITY_LENGTH} characters."
CITY_INVALID_CHARS = (
    "City name may only contain letters, spaces, hyphens and apostrophes."
)

# Space, hyphen, ASCII and typographic apostrophes
_SEPARATORS = frozenset(" -'’")


def validate_city(name: str | None) -> str:
    """Return the trimmed, NFC-normalized city name or raise CityValidationError.

    Letters are any Unicode letter (category L). Combining marks (category
    M) are accepted only directly after a letter or another mark, which
    covers Indic and Thai vowel signs and decomposed accents.
    """
    city = unicodedata.normalize("NFC", (name or "").strip())
    if not city:
        raise CityValidationError(EMPTY_CITY)
    if len(city) < MIN_CITY_LENGTH:
        raise CityValidationError(CITY_TOO_SHORT)
    if not _only_letters_and_separators(city):
        raise CityValidationError(CITY_INVALID_CHARS)
    return city


def _only_letters_and_separators(city: str) -> bool:
    after_letter = False
    for ch in city:
        category = unicodedata.category(ch)[0]
        if category == "L":
            after_letter = True
        elif category == "M":
            if not after_letter:
                return False
        elif ch in _SEPARATORS:
            after_letter = False
        else:
            return False
    return True
