"""Configuration for RSEF listing parsing and retrieval."""

import logging
from dataclasses import dataclass
from typing import Final

# Wire format literals
FIELD_DELIMITER: Final[str] = "|"
COMMENT_PREFIX: Final[str] = "#"
SUMMARY_MARKER: Final[str] = "summary"
PLACEHOLDER: Final[str] = "*"
DATE_SENTINEL: Final[str] = "00000000"

# Field bounds
MAX_ASN: Final[int] = 2**32 - 1
MAX_IPV6_PREFIX: Final[int] = 128
# Longest digit string accepted in a numeric field
MAX_DIGITS: Final[int] = 20

# Listing locations, formatted with year=YYYY and day=YYYYMMDD
REGISTRY_URLS: Final[dict[str, str]] = {
    "afrinic": "https://ftp.afrinic.net/pub/stats/afrinic/{year}/delegated-afrinic-extended-{day}",
    "apnic": "https://ftp.apnic.net/stats/apnic/{year}/delegated-apnic-extended-{day}.gz",
    "arin": "https://ftp.arin.net/pub/stats/arin/delegated-arin-extended-{day}",
    "lacnic": "https://ftp.lacnic.net/pub/stats/lacnic/delegated-lacnic-extended-{day}",
    "ripencc": "https://ftp.ripe.net/pub/stats/ripencc/{year}/delegated-ripencc-extended-{day}.bz2",
}

HTTP_TIMEOUT: Final[float] = 60.0
RETRY_ATTEMPTS: Final[int] = 3
RETRY_MIN_WAIT: Final[int] = 1
RETRY_MAX_WAIT: Final[int] = 10

# Country codes used in listings that are not in ISO 3166-1
COUNTRY_OVERRIDES: Final[dict[str, str]] = {
    "ap": "Asia Pacific",
    "eu": "European Union",
    "uk": "United Kingdom",
    "zz": "Unassigned",
}


@dataclass(frozen=True)
class ParseOptions:
    """
    Strictness switches for listing decoding.

    Attributes:
        allow_legacy_version: Accept 6-field version lines without a UTC offset
        strict_summaries: Raise MissingSummary instead of reporting it as a warning
    """

    allow_legacy_version: bool = True
    strict_summaries: bool = False


DEFAULT_OPTIONS: Final[ParseOptions] = ParseOptions()


def setup_logging() -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
