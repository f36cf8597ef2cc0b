"""Lazy and eager readers for RSEF listings."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from ..config import DEFAULT_OPTIONS, ParseOptions
from ..errors import EmptyListing, MissingSummary
from ..models import Line, RecordLine, SummaryLine, VersionLine
from .consistency import ConsistencyValidator
from .decode import LineDecoder
from .tokenize import split_lines

logger = logging.getLogger(__name__)


@dataclass
class Listing:
    """A fully decoded listing, grouped by line kind."""

    version: VersionLine
    summaries: list[SummaryLine] = field(default_factory=list)
    records: list[RecordLine] = field(default_factory=list)
    warnings: list[MissingSummary] = field(default_factory=list)


class ListingReader:
    """
    Iterate over the decoded lines of one listing.

    Each step reads exactly one non-comment line from the source. When the
    source is exhausted the declared counts are checked before iteration
    stops, so a CountMismatch is raised by the final step after every line
    has been handed out. Any error ends iteration; the reader does not
    skip past bad lines.

    Args:
        source: Text or binary file object, or any iterable of lines
        options: Strictness switches (defaults to ParseOptions())
    """

    def __init__(
        self,
        source: Iterable[str | bytes],
        options: ParseOptions = DEFAULT_OPTIONS,
    ):
        self.options = options
        self.warnings: list[MissingSummary] = []
        self.line_number = 0
        self._lines = split_lines(source)
        self._decoder = LineDecoder(options)
        self._validator = ConsistencyValidator(strict_summaries=options.strict_summaries)
        self._finished = False

    def __iter__(self) -> Iterator[Line]:
        return self

    def __next__(self) -> Line:
        if self._finished:
            raise StopIteration

        try:
            item = next(self._lines, None)
            if item is not None:
                line_number, raw = item
                self.line_number = line_number
                line = self._decoder.decode(line_number, raw)
                self._observe(line, line_number)
                return line
        except Exception:
            self._finished = True
            raise

        self._finished = True
        self.warnings = self._validator.finalize()
        logger.debug(
            "Decoded %d record(s) through line %d", self._validator.total, self.line_number
        )
        raise StopIteration

    def _observe(self, line: Line, line_number: int) -> None:
        match line:
            case VersionLine():
                self._validator.observe_version(line)
            case SummaryLine():
                self._validator.observe_summary(line, line_number)
            case RecordLine():
                self._validator.observe_record(line)


def iter_listing(
    source: Iterable[str | bytes],
    options: ParseOptions = DEFAULT_OPTIONS,
) -> ListingReader:
    """
    Lazily decode a listing.

    Lines already yielded stay valid when a later line raises, so callers
    can keep partial results by catching the error.
    """
    return ListingReader(source, options)


def read_all(
    source: Iterable[str | bytes],
    options: ParseOptions = DEFAULT_OPTIONS,
) -> list[Line]:
    """
    Decode a whole listing into an ordered list, failing on the first error.

    Args:
        source: Text or binary file object, or any iterable of lines
        options: Strictness switches

    Returns:
        List of VersionLine, SummaryLine and RecordLine values in listing order

    Raises:
        DecodeError: On the first line that cannot be decoded
        CountMismatch: If declared and observed counts differ
    """
    return list(ListingReader(source, options))


def read_listing(
    source: Iterable[str | bytes],
    options: ParseOptions = DEFAULT_OPTIONS,
) -> Listing:
    """
    Decode a whole listing and group it by line kind.

    Raises:
        DecodeError: On the first line that cannot be decoded
        CountMismatch: If declared and observed counts differ
        EmptyListing: If the source holds no version line
    """
    reader = ListingReader(source, options)
    version: VersionLine | None = None
    summaries: list[SummaryLine] = []
    records: list[RecordLine] = []

    for line in reader:
        match line:
            case VersionLine():
                version = line
            case SummaryLine():
                summaries.append(line)
            case RecordLine():
                records.append(line)

    if version is None:
        raise EmptyListing("listing contains no version line")

    return Listing(
        version=version,
        summaries=summaries,
        records=records,
        warnings=reader.warnings,
    )
