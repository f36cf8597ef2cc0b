"""Shared pytest fixtures and configuration."""

from pathlib import Path
from unittest.mock import patch

import pytest

from rsef.utilities.retry import get_with_retry as original_get_with_retry

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "source"

# One version, two summaries, three records
SMALL_LISTING = [
    "2|apnic|20190201|3|20190101|20190201|+1000",
    "apnic|asn|*|1|summary",
    "apnic|ipv4|*|2|summary",
    "apnic|asn|4608|1|19940824|allocated",
    "apnic|ipv4|1.0.0.0|256|20110811|allocated",
    "apnic|ipv4|1.0.1.0|256|20110811|allocated",
]


@pytest.fixture(autouse=True)
def fast_retries():
    """Disable retry wait times in all tests for speed."""

    def fast_get(client, url, max_attempts=3, min_wait=1, max_wait=10):
        # Always use min_wait=0 in tests to skip delays
        return original_get_with_retry(
            client, url, max_attempts=max_attempts, min_wait=0, max_wait=0
        )

    with patch("rsef.utilities.download.get_with_retry", fast_get):
        yield


@pytest.fixture
def small_listing() -> list[str]:
    """Lines of a small, consistent compact-layout listing."""
    return list(SMALL_LISTING)


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample listings."""
    return FIXTURES_DIR
