"""Country name lookup for record country codes using pycountry."""

import pycountry

from .config import COUNTRY_OVERRIDES


def get_country_name(code: str) -> str | None:
    """
    Get the country name for a listing country code.

    Args:
        code: Two-letter country code as published (e.g., 'JP', 'EU', 'ZZ')

    Returns:
        Country name or None if not found
    """
    code_lower = code.lower()

    if code_lower in COUNTRY_OVERRIDES:
        return COUNTRY_OVERRIDES[code_lower]

    country = pycountry.countries.get(alpha_2=code.upper())
    if country:
        return country.name

    return None


def get_all_country_names(codes: list[str]) -> dict[str, str]:
    """
    Get country name mappings for a list of country codes.

    Args:
        codes: Country codes, duplicates allowed

    Returns:
        Dict mapping upper-cased code -> country name, unknown codes omitted
    """
    mappings = {}
    for code in codes:
        if len(code) != 2:
            continue
        name = get_country_name(code)
        if name:
            mappings[code.upper()] = name
    return mappings
