"""Errors raised while decoding and retrieving RSEF listings."""

from typing import Any


class RSEFError(Exception):
    """Base error for this package."""


class DecodeError(RSEFError):
    """
    Raised when a single line cannot be decoded.

    Attributes:
        line_number: 1-based physical line number in the input
        field: Name of the offending field, or None for whole-line errors
        raw: Raw line text, when available
    """

    def __init__(
        self,
        message: str,
        line_number: int,
        field: str | None = None,
        raw: str | None = None,
    ):
        self.message = message
        self.line_number = line_number
        self.field = field
        self.raw = raw
        super().__init__(str(self))

    def __str__(self) -> str:
        location = f"line {self.line_number}"
        if self.field:
            location += f", field '{self.field}'"
        return f"{location}: {self.message}"


class MalformedLine(DecodeError):
    """Raised when a line matches no known line shape."""


class OutOfOrderLine(DecodeError):
    """Raised when a line kind appears where the listing order forbids it."""


class DuplicateSummary(DecodeError):
    """Raised when a resource type has more than one summary line."""


class UnknownResourceType(DecodeError):
    """Raised when a resource type token is not asn, ipv4 or ipv6."""


class UnknownStatus(DecodeError):
    """Raised when a status token is outside the known set."""


class InvalidDate(DecodeError):
    """Raised when a date field is not YYYYMMDD or 00000000."""


class InvalidNumber(DecodeError):
    """Raised when a numeric field is not an integer in its valid range."""


class InvalidAddress(DecodeError):
    """Raised when a range start does not parse for its resource type."""


class CountMismatch(RSEFError):
    """Raised at end of input when declared and observed record counts differ."""

    def __init__(self, expected: int, actual: int, scope: Any):
        self.expected = expected
        self.actual = actual
        self.scope = scope
        super().__init__(
            f"{scope} record count mismatch: declared {expected}, observed {actual}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CountMismatch):
            return NotImplemented
        return (self.expected, self.actual, str(self.scope)) == (
            other.expected,
            other.actual,
            str(other.scope),
        )

    def __hash__(self) -> int:
        return hash((self.expected, self.actual, str(self.scope)))


class MissingSummary(RSEFError):
    """
    A resource type has records but no summary line.

    Reported as a warning value unless strict summaries are requested,
    in which case it is raised.
    """

    def __init__(self, resource_type: Any, observed: int):
        self.resource_type = resource_type
        self.observed = observed
        super().__init__(
            f"{resource_type} has {observed} record(s) but no summary line"
        )


class DownloadError(RSEFError):
    """Raised when a listing cannot be retrieved from its registry."""


class EmptyListing(RSEFError):
    """Raised when a listing holds no version line at all."""
