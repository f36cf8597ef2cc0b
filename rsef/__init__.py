"""Decoding and validation of RIR Statistics Exchange Format listings."""

from .config import ParseOptions
from .errors import (
    CountMismatch,
    DecodeError,
    DownloadError,
    DuplicateSummary,
    EmptyListing,
    InvalidAddress,
    InvalidDate,
    InvalidNumber,
    MalformedLine,
    MissingSummary,
    OutOfOrderLine,
    RSEFError,
    UnknownResourceType,
    UnknownStatus,
)
from .models import (
    Line,
    RecordLine,
    Registry,
    ResourceType,
    Status,
    SummaryLine,
    VersionLine,
)
from .parse import (
    Listing,
    ListingReader,
    format_line,
    format_listing,
    iter_listing,
    read_all,
    read_listing,
)

__all__ = [
    "ParseOptions",
    "Line",
    "VersionLine",
    "SummaryLine",
    "RecordLine",
    "ResourceType",
    "Status",
    "Registry",
    "Listing",
    "ListingReader",
    "iter_listing",
    "read_all",
    "read_listing",
    "format_line",
    "format_listing",
    "RSEFError",
    "DecodeError",
    "MalformedLine",
    "OutOfOrderLine",
    "DuplicateSummary",
    "UnknownResourceType",
    "UnknownStatus",
    "InvalidDate",
    "InvalidNumber",
    "InvalidAddress",
    "CountMismatch",
    "MissingSummary",
    "EmptyListing",
    "DownloadError",
]
