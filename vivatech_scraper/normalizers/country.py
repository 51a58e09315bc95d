"""Country derivation for partners.

The site gives a city for some exhibitors and nothing for others, so the
country is guessed from the city or, failing that, from the company name
("Acme - France"). The tables below are matched in order; first hit wins.
"""

# (substrings, country) checked case-sensitively against the city
CITY_COUNTRIES = [
    (("Paris",), "France"),
    (("London",), "UK"),
    (("Berlin",), "Germany"),
    (("Tokyo",), "Japan"),
    (("New York", "San Francisco"), "USA"),
    (("Beijing", "Shanghai"), "China"),
    (("Mumbai", "Bangalore"), "India"),
    (("Toronto", "Montreal"), "Canada"),
]

# Accepted as a " - Country" suffix of a company name (case-insensitive)
KNOWN_COUNTRIES = [
    "France", "USA", "United States", "UK", "United Kingdom", "Germany",
    "Japan", "China", "India", "Canada", "Spain", "Italy", "Netherlands",
    "Belgium", "Switzerland", "Austria", "Australia", "New Zealand",
    "Singapore", "Korea", "Brazil", "Mexico", "Argentina", "Chile", "Poland",
    "Czech Republic", "Hungary", "Romania", "Greece", "Portugal", "Ireland",
    "Scotland", "Wales", "Sweden", "Norway", "Denmark", "Finland", "Russia",
    "Ukraine", "Turkey", "Israel", "UAE", "Saudi Arabia", "Egypt",
    "South Africa", "Nigeria", "Kenya", "Morocco", "Algeria", "Tunisia",
    "Albania", "Armenia", "Bangladesh",
]
_KNOWN_COUNTRIES_LOWER = {c.lower() for c in KNOWN_COUNTRIES}

# (pattern, country) searched anywhere in the upper-cased company name
NAME_COUNTRY_PATTERNS = [
    ("France", "France"),
    ("USA", "USA"),
    ("United States", "USA"),
    ("UK", "UK"),
    ("United Kingdom", "UK"),
    ("Germany", "Germany"),
    ("Japan", "Japan"),
    ("China", "China"),
    ("India", "India"),
    ("Canada", "Canada"),
]

NAME_SUFFIX_SEPARATOR = " - "


def country_from_city(city: str) -> str:
    """Map a city string to its country, or "" if the city is unknown."""
    for needles, country in CITY_COUNTRIES:
        if any(needle in city for needle in needles):
            return country
    return ""


def is_likely_country(text: str) -> bool:
    """Check if text is one of the known country names (ASCII case-insensitive)."""
    return text.isascii() and text.lower() in _KNOWN_COUNTRIES_LOWER


def country_from_name(name: str) -> str:
    """Guess a country from a company name.

    Handles formats like:
    - "Acme - Germany"  (suffix after the last " - ")
    - "Acme France SAS" (country mentioned anywhere)
    """
    if NAME_SUFFIX_SEPARATOR in name:
        suffix = name.rsplit(NAME_SUFFIX_SEPARATOR, 1)[1].strip()
        if is_likely_country(suffix):
            return suffix

    name_upper = name.upper()
    for pattern, country in NAME_COUNTRY_PATTERNS:
        if pattern.upper() in name_upper:
            return country

    return ""
