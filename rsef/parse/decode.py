"""Line classification and typed field decoding for RSEF listings."""

import datetime
import ipaddress
import re
from enum import Enum

from ..config import (
    DATE_SENTINEL,
    DEFAULT_OPTIONS,
    MAX_ASN,
    MAX_DIGITS,
    MAX_IPV6_PREFIX,
    PLACEHOLDER,
    ParseOptions,
)
from ..errors import (
    InvalidAddress,
    InvalidDate,
    InvalidNumber,
    MalformedLine,
    OutOfOrderLine,
    UnknownResourceType,
    UnknownStatus,
)
from ..models import (
    RESOURCE_TYPES,
    STATUSES,
    Line,
    RangeStart,
    RecordLine,
    ResourceType,
    Status,
    SummaryLine,
    VersionLine,
)
from .tokenize import LineShape, RecordLayout, classify_shape, record_layout, tokenize

DIGITS = re.compile(r"[0-9]+")

# Inclusive bounds of the range size column, per resource type
VALUE_BOUNDS: dict[ResourceType, tuple[int, int]] = {
    ResourceType.ASN: (1, MAX_ASN + 1),
    ResourceType.IPV4: (1, 2**32),
    ResourceType.IPV6: (0, MAX_IPV6_PREFIX),
}


class ListingState(Enum):
    """Position within a listing."""

    EXPECT_VERSION = "expect_version"
    EXPECT_SUMMARY = "expect_summary"
    EXPECT_RECORD = "expect_record"


# =============================================================================
# Field decoders
# =============================================================================


def decode_date(value: str, line_number: int, field: str) -> datetime.date | None:
    """
    Decode a YYYYMMDD date.

    Returns:
        The calendar date, or None for the 00000000 sentinel

    Raises:
        InvalidDate: If the value is not 8 digits forming a real date
    """
    if value == DATE_SENTINEL:
        return None
    if len(value) != 8 or not DIGITS.fullmatch(value):
        raise InvalidDate(f"expected YYYYMMDD, got {value!r}", line_number, field)
    try:
        return datetime.date(int(value[:4]), int(value[4:6]), int(value[6:]))
    except ValueError as e:
        raise InvalidDate(f"{value!r} is not a calendar date ({e})", line_number, field) from e


def decode_number(
    value: str,
    line_number: int,
    field: str,
    minimum: int = 0,
    maximum: int | None = None,
) -> int:
    """
    Decode a non-negative decimal integer within [minimum, maximum].

    Raises:
        InvalidNumber: If the value is not digits or falls outside the range
    """
    if not DIGITS.fullmatch(value):
        raise InvalidNumber(f"expected a non-negative integer, got {value!r}", line_number, field)
    if len(value) > MAX_DIGITS:
        raise InvalidNumber(f"{len(value)} digits exceeds {MAX_DIGITS}", line_number, field)

    number = int(value)
    if number < minimum or (maximum is not None and number > maximum):
        bound = f"[{minimum}, {maximum}]" if maximum is not None else f">= {minimum}"
        raise InvalidNumber(f"{number} is outside {bound}", line_number, field)

    return number


def decode_resource_type(value: str, line_number: int) -> ResourceType:
    """Decode a case-sensitive resource type token."""
    try:
        return RESOURCE_TYPES[value]
    except KeyError:
        raise UnknownResourceType(
            f"unknown resource type {value!r}", line_number, "type"
        ) from None


def decode_status(value: str, line_number: int) -> Status:
    """Decode a case-sensitive status token."""
    try:
        return STATUSES[value]
    except KeyError:
        raise UnknownStatus(f"unknown status {value!r}", line_number, "status") from None


def decode_start(value: str, resource_type: ResourceType, line_number: int) -> RangeStart:
    """
    Decode the start of a range according to its resource type.

    Raises:
        InvalidAddress: If the value is not an AS number, dotted quad or
                        colon-hex address as the type requires
    """
    if resource_type is ResourceType.ASN:
        if DIGITS.fullmatch(value) and len(value) <= MAX_DIGITS and int(value) <= MAX_ASN:
            return int(value)
        raise InvalidAddress(f"{value!r:.40} is not an AS number", line_number, "start")

    # Scoped literals (fe80::1%eth0) are not plain colon-hex
    if "%" in value:
        raise InvalidAddress(f"{value!r} has a scope suffix", line_number, "start")

    try:
        if resource_type is ResourceType.IPV4:
            return ipaddress.IPv4Address(value)
        return ipaddress.IPv6Address(value)
    except ipaddress.AddressValueError as e:
        raise InvalidAddress(
            f"{value!r} is not an {resource_type} address ({e})", line_number, "start"
        ) from e


# =============================================================================
# Line decoders
# =============================================================================


def decode_version(fields: list[str], line_number: int) -> VersionLine:
    """Decode a 7-field (or legacy 6-field) version line."""
    return VersionLine(
        version=fields[0],
        registry=fields[1],
        serial=fields[2],
        records=decode_number(fields[3], line_number, "records"),
        start_date=decode_date(fields[4], line_number, "startdate"),
        end_date=decode_date(fields[5], line_number, "enddate"),
        utc_offset=fields[6] if len(fields) > 6 else None,
    )


def decode_summary(fields: list[str], line_number: int, raw: str) -> SummaryLine:
    """
    Decode a summary line.

    Accepts both registry|*|type|*|count|summary and the shorter
    registry|type|*|count|summary.
    """
    if len(fields) == 6:
        placeholders = (fields[1], fields[3])
        type_token, count = fields[2], fields[4]
    else:
        placeholders = (fields[2],)
        type_token, count = fields[1], fields[3]

    if any(p != PLACEHOLDER for p in placeholders):
        raise MalformedLine(
            f"summary placeholder fields must be {PLACEHOLDER!r}", line_number, raw=raw
        )

    return SummaryLine(
        registry=fields[0],
        type=decode_resource_type(type_token, line_number),
        count=decode_number(count, line_number, "count"),
    )


def decode_record(fields: list[str], line_number: int) -> RecordLine:
    """Decode a record line in either column layout."""
    if record_layout(fields) is RecordLayout.PUBLISHED:
        country: str | None = fields[1]
        rest = fields[2:]
    else:
        country = None
        rest = fields[1:]

    resource_type = decode_resource_type(rest[0], line_number)
    minimum, maximum = VALUE_BOUNDS[resource_type]

    return RecordLine(
        registry=fields[0],
        country=country,
        type=resource_type,
        start=decode_start(rest[1], resource_type, line_number),
        value=decode_number(rest[2], line_number, "value", minimum, maximum),
        date=decode_date(rest[3], line_number, "date"),
        status=decode_status(rest[4], line_number),
        opaque_id=rest[5] if len(rest) > 5 else None,
        extensions=tuple(rest[6:]),
    )


class LineDecoder:
    """
    Decode raw lines while enforcing listing order.

    The decoder moves from EXPECT_VERSION to EXPECT_SUMMARY after the
    version line, and to EXPECT_RECORD at the first record line. Summary
    lines are only accepted before the first record.
    """

    def __init__(self, options: ParseOptions = DEFAULT_OPTIONS):
        self.options = options
        self.state = ListingState.EXPECT_VERSION

    def decode(self, line_number: int, raw: str) -> Line:
        """
        Decode one raw line.

        Args:
            line_number: 1-based physical line number
            raw: Line text without terminator

        Returns:
            VersionLine, SummaryLine or RecordLine

        Raises:
            DecodeError: If the line is malformed, out of order, or has an
                         invalid field
        """
        fields = tokenize(raw)
        shape = classify_shape(
            fields, line_number, raw, allow_legacy_version=self.options.allow_legacy_version
        )

        if self.state is ListingState.EXPECT_VERSION:
            if shape is not LineShape.VERSION:
                raise OutOfOrderLine(
                    f"expected a version line, found a {shape.value} line",
                    line_number,
                    raw=raw,
                )
            line = decode_version(fields, line_number)
            self.state = ListingState.EXPECT_SUMMARY
            return line

        if shape is LineShape.VERSION:
            raise OutOfOrderLine("unexpected second version line", line_number, raw=raw)

        if shape is LineShape.SUMMARY:
            if self.state is ListingState.EXPECT_RECORD:
                raise OutOfOrderLine(
                    "summary line after record lines", line_number, raw=raw
                )
            return decode_summary(fields, line_number, raw)

        self.state = ListingState.EXPECT_RECORD
        return decode_record(fields, line_number)
