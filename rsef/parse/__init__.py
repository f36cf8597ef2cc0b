"""Parsers for RSEF listings."""

from .consistency import ConsistencyValidator
from .decode import LineDecoder, ListingState
from .reader import Listing, ListingReader, iter_listing, read_all, read_listing
from .serialize import format_line, format_listing
from .tokenize import LineShape, classify_shape, split_lines, tokenize

__all__ = [
    "split_lines",
    "tokenize",
    "classify_shape",
    "LineShape",
    "LineDecoder",
    "ListingState",
    "ConsistencyValidator",
    "ListingReader",
    "Listing",
    "iter_listing",
    "read_all",
    "read_listing",
    "format_line",
    "format_listing",
]
