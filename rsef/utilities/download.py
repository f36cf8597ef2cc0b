"""Download utilities for registry listings."""

import bz2
import datetime
import gzip
import io
import logging

import httpx

from ..config import HTTP_TIMEOUT
from ..errors import DownloadError
from ..models import Registry
from .retry import get_with_retry
from .urls import listing_day, listing_url

logger = logging.getLogger(__name__)


def download_listing(
    registry: Registry | str,
    when: datetime.date | datetime.datetime | int | float,
) -> io.BytesIO:
    """
    Download a registry's extended listing for one day.

    Only the UTC day of `when` selects the listing. The body is
    decompressed according to the URL suffix, so the result can be handed
    straight to ListingReader.

    Args:
        registry: Registry, or its identifier (e.g., "arin")
        when: Date, datetime, or UNIX timestamp

    Returns:
        Binary stream over the decompressed listing

    Raises:
        DownloadError: If the registry answers with a non-200 status or the
                       body cannot be decompressed
        httpx.TransportError: After retries exhausted for network errors
        ServerError: After retries exhausted for 5xx/429 responses
    """
    url = listing_url(registry, listing_day(when))
    logger.info("Downloading %s", url)

    with httpx.Client(timeout=HTTP_TIMEOUT, follow_redirects=True) as client:
        response = get_with_retry(client, url)

    if response.status_code != 200:
        logger.error("HTTP %d for %s", response.status_code, url)
        raise DownloadError(f"HTTP {response.status_code} for {url}")

    content = decompress(response.content, url)
    logger.info("  → %d bytes", len(content))
    return io.BytesIO(content)


def decompress(content: bytes, name: str) -> bytes:
    """
    Decompress a listing body according to its file name suffix.

    Args:
        content: Raw body
        name: URL or file name the body came from

    Returns:
        Decompressed bytes (unchanged when the name has no known suffix)

    Raises:
        DownloadError: If the body is not valid gzip/bzip2 data
    """
    try:
        if name.endswith(".gz"):
            return gzip.decompress(content)
        if name.endswith(".bz2"):
            return bz2.decompress(content)
    except (OSError, EOFError, ValueError) as e:
        logger.error("Cannot decompress %s: %s", name, e)
        raise DownloadError(f"Cannot decompress {name}: {e}") from e
    return content
