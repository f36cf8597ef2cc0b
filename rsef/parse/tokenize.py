"""Line splitting and field tokenizing for RSEF listings."""

import re
from enum import Enum
from typing import Iterable, Iterator

from ..config import COMMENT_PREFIX, FIELD_DELIMITER, SUMMARY_MARKER
from ..errors import MalformedLine
from ..models import RESOURCE_TYPES

VERSION_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)*")
DATE_PATTERN = re.compile(r"[0-9]{8}")


class LineShape(Enum):
    """Candidate line kinds, decided from field count and markers."""

    VERSION = "version"
    SUMMARY = "summary"
    RECORD = "record"


class RecordLayout(Enum):
    """Column layouts of record lines."""

    # registry|cc|type|start|value|date|status[|opaque-id[|extensions...]]
    PUBLISHED = "published"
    # registry|type|start|value|date|status[|opaque-id[|extensions...]]
    COMPACT = "compact"


def split_lines(source: Iterable[str | bytes]) -> Iterator[tuple[int, str]]:
    """
    Split an input stream into raw listing lines.

    Blank lines and comment lines are dropped but still count towards
    line numbers, so diagnostics point at the physical line.

    Args:
        source: Text or binary file object, or any iterable of lines.
                Bytes are decoded as UTF-8.

    Returns:
        Iterator of (1-based line number, line text without terminator)
    """
    for line_number, raw in enumerate(source, start=1):
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")

        line = raw.rstrip("\r\n")
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue

        yield line_number, line


def tokenize(line: str) -> list[str]:
    """Split a raw line on the delimiter and trim every field."""
    return [part.strip() for part in line.split(FIELD_DELIMITER)]


def classify_shape(
    fields: list[str],
    line_number: int,
    raw: str,
    allow_legacy_version: bool = True,
) -> LineShape:
    """
    Decide which kind of line a field vector is.

    Args:
        fields: Tokenized fields of one line
        line_number: Line number for diagnostics
        raw: Raw line text for diagnostics
        allow_legacy_version: Accept 6-field version lines

    Returns:
        The candidate LineShape

    Raises:
        MalformedLine: If the fields match no known shape
    """
    count = len(fields)

    if VERSION_PATTERN.fullmatch(fields[0]):
        if count == 7 or (count == 6 and allow_legacy_version):
            return LineShape.VERSION
        raise MalformedLine(
            f"version line has {count} fields, expected "
            + ("6 or 7" if allow_legacy_version else "7"),
            line_number,
            raw=raw,
        )

    if fields[-1] == SUMMARY_MARKER:
        if count in (5, 6):
            return LineShape.SUMMARY
        raise MalformedLine(
            f"summary line has {count} fields, expected 5 or 6", line_number, raw=raw
        )

    if count >= 6:
        return LineShape.RECORD

    raise MalformedLine(
        f"line has {count} field(s) and matches no known line kind",
        line_number,
        raw=raw,
    )


def record_layout(fields: list[str]) -> RecordLayout:
    """
    Determine the column layout of a record line.

    The layout whose type column holds a known resource type wins. When
    neither does, the position of the date column decides, so that an
    unknown type token is still reported against the type field.
    """
    if len(fields) >= 7 and fields[2] in RESOURCE_TYPES:
        return RecordLayout.PUBLISHED
    if fields[1] in RESOURCE_TYPES:
        return RecordLayout.COMPACT
    if len(fields) >= 7 and DATE_PATTERN.fullmatch(fields[5]):
        return RecordLayout.PUBLISHED
    return RecordLayout.COMPACT
