"""Utilities for retrieving RSEF listings."""

from .download import decompress, download_listing
from .file_io import open_listing
from .retry import ServerError, get_with_retry
from .urls import listing_day, listing_url

__all__ = [
    "download_listing",
    "decompress",
    "open_listing",
    "get_with_retry",
    "ServerError",
    "listing_url",
    "listing_day",
]
