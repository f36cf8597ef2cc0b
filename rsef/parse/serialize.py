"""Write decoded lines back to RSEF text."""

import datetime
from typing import Iterable, Iterator

from ..config import DATE_SENTINEL, FIELD_DELIMITER, PLACEHOLDER, SUMMARY_MARKER
from ..models import Line, RecordLine, SummaryLine, VersionLine


def format_date(value: datetime.date | None) -> str:
    """Format a date as YYYYMMDD, or the sentinel for None."""
    if value is None:
        return DATE_SENTINEL
    return value.strftime("%Y%m%d")


def format_line(line: Line) -> str:
    """
    Format one decoded line as it appears in a listing.

    Summary lines use the registry|*|type|*|count|summary layout. Record
    lines carry the country column only when the record has one.

    Args:
        line: VersionLine, SummaryLine or RecordLine

    Returns:
        Pipe-delimited line without terminator
    """
    match line:
        case VersionLine():
            fields = [
                line.version,
                line.registry,
                line.serial,
                str(line.records),
                format_date(line.start_date),
                format_date(line.end_date),
            ]
            if line.utc_offset is not None:
                fields.append(line.utc_offset)
        case SummaryLine():
            fields = [
                line.registry,
                PLACEHOLDER,
                line.type.value,
                PLACEHOLDER,
                str(line.count),
                SUMMARY_MARKER,
            ]
        case RecordLine():
            fields = [line.registry]
            if line.country is not None:
                fields.append(line.country)
            fields += [
                line.type.value,
                str(line.start),
                str(line.value),
                format_date(line.date),
                line.status.value,
            ]
            if line.opaque_id is not None:
                fields.append(line.opaque_id)
                fields.extend(line.extensions)
        case _:
            raise TypeError(f"not a listing line: {line!r}")

    return FIELD_DELIMITER.join(fields)


def format_listing(lines: Iterable[Line]) -> Iterator[str]:
    """Format decoded lines, one newline-terminated string per line."""
    for line in lines:
        yield format_line(line) + "\n"
