"""Display lookups for nationalities and athletes.

The country table is a default only. Callers pass their own mapping where
they need different coverage.
"""

from collections.abc import Mapping
from urllib.parse import quote

# Nationality as written in the source -> ISO 3166 alpha-2 code
DEFAULT_COUNTRY_CODES: dict[str, str] = {
    "United States": "US",
    "USA": "US",
    "Jamaica": "JM",
    "Kenya": "KE",
    "Ethiopia": "ET",
    "Uganda": "UG",
    "Tanzania": "TZ",
    "Eritrea": "ER",
    "Bahrain": "BH",
    "Morocco": "MA",
    "Algeria": "DZ",
    "Tunisia": "TN",
    "South Africa": "ZA",
    "Great Britain": "GB",
    "United Kingdom": "GB",
    "UK": "GB",
    "Ireland": "IE",
    "Germany": "DE",
    "East Germany": "DE",
    "West Germany": "DE",
    "France": "FR",
    "Italy": "IT",
    "Spain": "ES",
    "Portugal": "PT",
    "Netherlands": "NL",
    "Belgium": "BE",
    "Switzerland": "CH",
    "Norway": "NO",
    "Sweden": "SE",
    "Finland": "FI",
    "Denmark": "DK",
    "Poland": "PL",
    "Czech Republic": "CZ",
    "Czechoslovakia": "CZ",
    "Hungary": "HU",
    "Romania": "RO",
    "Bulgaria": "BG",
    "Greece": "GR",
    "Turkey": "TR",
    "Russia": "RU",
    "Soviet Union": "SU",
    "Ukraine": "UA",
    "Canada": "CA",
    "Mexico": "MX",
    "Cuba": "CU",
    "Brazil": "BR",
    "Australia": "AU",
    "New Zealand": "NZ",
    "Japan": "JP",
    "China": "CN",
}

WIKIPEDIA_BASE_URL = "https://en.wikipedia.org/wiki/"


def country_code(nationality: str, lookup: Mapping[str, str] | None = None) -> str | None:
    """Look up the country code for a nationality, None when unknown."""
    table = DEFAULT_COUNTRY_CODES if lookup is None else lookup
    return table.get(nationality.strip())


def flag_emoji(code: str | None) -> str:
    """Render a two-letter country code as a flag emoji ('' when unknown)."""
    if not code or len(code) != 2 or not code.isalpha():
        return ""
    return "".join(chr(ord(char) + 127397) for char in code.upper())


def athlete_url(athlete: str) -> str:
    """Wikipedia article URL for an athlete name."""
    slug = "_".join(athlete.split())
    return WIKIPEDIA_BASE_URL + quote(slug)
