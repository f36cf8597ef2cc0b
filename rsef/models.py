"""Typed values decoded from RSEF listings."""

import datetime
import ipaddress
from dataclasses import dataclass, field
from enum import Enum

from .country import get_country_name


class ResourceType(str, Enum):
    """Internet number resource types."""

    ASN = "asn"
    IPV4 = "ipv4"
    IPV6 = "ipv6"

    def __str__(self) -> str:
        return self.value


class Status(str, Enum):
    """Allocation status of a record."""

    ALLOCATED = "allocated"
    ASSIGNED = "assigned"
    AVAILABLE = "available"
    RESERVED = "reserved"

    def __str__(self) -> str:
        return self.value


class Registry(str, Enum):
    """Regional Internet Registries publishing RSEF listings."""

    AFRINIC = "afrinic"
    APNIC = "apnic"
    ARIN = "arin"
    LACNIC = "lacnic"
    RIPENCC = "ripencc"

    def __str__(self) -> str:
        return self.value


RESOURCE_TYPES: dict[str, ResourceType] = {t.value: t for t in ResourceType}
STATUSES: dict[str, Status] = {s.value: s for s in Status}

RangeStart = int | ipaddress.IPv4Address | ipaddress.IPv6Address


@dataclass(frozen=True)
class VersionLine:
    """The header line of a listing."""

    version: str
    registry: str
    serial: str
    records: int
    start_date: datetime.date | None
    end_date: datetime.date | None
    utc_offset: str | None = None


@dataclass(frozen=True)
class SummaryLine:
    """Declared number of records for one resource type."""

    registry: str
    type: ResourceType
    count: int


@dataclass(frozen=True)
class RecordLine:
    """
    A single ASN, IPv4 or IPv6 range.

    Attributes:
        registry: Registry the record belongs to
        country: ISO 3166 code column, or None for listings without that column
        type: Resource type of the range
        start: First AS number, or first address of the block
        value: Count of AS numbers, count of IPv4 addresses, or IPv6 prefix length
        date: Allocation date, or None when unspecified
        status: Allocation status
        opaque_id: Organisation handle, if present
        extensions: Any further fields, in listing order
    """

    registry: str
    country: str | None
    type: ResourceType
    start: RangeStart
    value: int
    date: datetime.date | None
    status: Status
    opaque_id: str | None = None
    extensions: tuple[str, ...] = field(default=())

    @property
    def country_name(self) -> str | None:
        """Country name for the record's country code, if known."""
        if not self.country:
            return None
        return get_country_name(self.country)


Line = VersionLine | SummaryLine | RecordLine
