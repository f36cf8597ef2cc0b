"""Tests for the lazy and eager listing readers."""

import datetime
import io
import ipaddress

import pytest

from rsef.config import ParseOptions
from rsef.errors import (
    CountMismatch,
    DuplicateSummary,
    EmptyListing,
    InvalidAddress,
    InvalidNumber,
    MalformedLine,
    MissingSummary,
    OutOfOrderLine,
    UnknownResourceType,
)
from rsef.models import RecordLine, ResourceType, Status, SummaryLine, VersionLine
from rsef.parse.reader import Listing, ListingReader, iter_listing, read_all, read_listing
from rsef.utilities.file_io import open_listing


class TestSmallListing:
    """Tests for a small listing with one version, two summaries and three records."""

    def test_small_listing_decodes_cleanly(self, small_listing):
        """Test one version, two summaries and three records, no mismatch."""
        lines = read_all(small_listing)

        assert [type(line) for line in lines] == [
            VersionLine,
            SummaryLine,
            SummaryLine,
            RecordLine,
            RecordLine,
            RecordLine,
        ]
        assert lines[0].records == 3
        assert lines[1] == SummaryLine("apnic", ResourceType.ASN, 1)
        assert lines[2] == SummaryLine("apnic", ResourceType.IPV4, 2)
        assert lines[3].start == 4608
        assert lines[5].start == ipaddress.IPv4Address("1.0.1.0")

    def test_wrong_total_is_terminal_count_mismatch(self, small_listing):
        """Test that a wrong declared total surfaces after every line is decoded."""
        small_listing[0] = "2|apnic|20190201|4|20190101|20190201|+1000"
        reader = ListingReader(small_listing)

        received = []
        with pytest.raises(CountMismatch) as exc_info:
            for line in reader:
                received.append(line)

        assert len(received) == 6
        assert exc_info.value == CountMismatch(expected=4, actual=3, scope="total")

    def test_wrong_total_fails_eager_mode(self, small_listing):
        """Test that eager mode raises the terminal mismatch."""
        small_listing[0] = "2|apnic|20190201|4|20190101|20190201|+1000"

        with pytest.raises(CountMismatch):
            read_all(small_listing)

    def test_unknown_type_stops_decoding(self, small_listing):
        """Test that an unknown type stops decoding at that line."""
        small_listing.insert(4, "apnic|xyz|4608|1|19940824|allocated")

        with pytest.raises(UnknownResourceType) as exc_info:
            read_all(small_listing)

        assert exc_info.value.line_number == 5
        assert exc_info.value.field == "type"


class TestListingReader:
    """Tests for ListingReader class."""

    def test_partial_results_before_error(self, small_listing):
        """Test that lines before a bad line are handed out lazily."""
        small_listing.insert(4, "apnic|ipv4|1.0.0|256|20110811|allocated")
        reader = iter_listing(small_listing)

        received = []
        with pytest.raises(InvalidAddress):
            for line in reader:
                received.append(line)

        assert len(received) == 4
        assert reader.line_number == 5

    def test_reader_exhausted_after_error(self, small_listing):
        """Test that the reader does not resynchronise after an error."""
        small_listing.insert(3, "apnic|asn|4608")
        reader = ListingReader(small_listing)

        with pytest.raises(MalformedLine):
            list(reader)

        assert list(reader) == []

    def test_overlong_number_stops_reader(self):
        """Test that a bad value is not skipped to reach later records."""
        reader = ListingReader(
            [
                "2|apnic|20190201|1|20190101|20190201|+1000",
                f"apnic|asn|4608|{'9' * 5000}|19940824|allocated",
                "apnic|asn|4609|1|19940824|allocated",
            ]
        )

        assert isinstance(next(reader), VersionLine)
        with pytest.raises(InvalidNumber):
            next(reader)

        assert list(reader) == []

    def test_reader_exhausted_after_undecodable_bytes(self):
        """Test that a non-listing error also ends iteration."""
        reader = ListingReader(
            [
                b"2|apnic|20190201|1|20190101|20190201|+1000\n",
                b"apnic|asn|\xff\xfe|1|19940824|allocated\n",
                b"apnic|asn|4609|1|19940824|allocated\n",
            ]
        )

        assert isinstance(next(reader), VersionLine)
        with pytest.raises(UnicodeDecodeError):
            next(reader)

        with pytest.raises(StopIteration):
            next(reader)
        assert reader.warnings == []

    def test_one_line_per_step(self):
        """Test that each step reads only as far as the next data line."""
        pulled = []

        def source():
            for line in ("# comment", "2|apnic|20190201|0|20190101|20190201|+1000", "boom"):
                pulled.append(line)
                yield line

        reader = ListingReader(source())
        version = next(reader)

        assert isinstance(version, VersionLine)
        assert pulled == ["# comment", "2|apnic|20190201|0|20190101|20190201|+1000"]

    def test_summary_after_record(self, small_listing):
        """Test that a late summary is out of order."""
        small_listing.append("apnic|ipv6|*|0|summary")

        with pytest.raises(OutOfOrderLine) as exc_info:
            read_all(small_listing)

        assert exc_info.value.line_number == 7

    def test_duplicate_summary(self, small_listing):
        """Test that a second summary for a type is rejected."""
        small_listing.insert(3, "apnic|asn|*|1|summary")

        with pytest.raises(DuplicateSummary) as exc_info:
            read_all(small_listing)

        assert exc_info.value.line_number == 4

    def test_missing_summary_warning(self):
        """Test that records without summaries are reported as warnings."""
        reader = ListingReader(
            [
                "2|apnic|20190201|1|20190101|20190201|+1000",
                "apnic|asn|4608|1|19940824|allocated",
            ]
        )

        lines = list(reader)

        assert len(lines) == 2
        assert len(reader.warnings) == 1
        assert reader.warnings[0].resource_type is ResourceType.ASN

    def test_missing_summary_strict(self):
        """Test that strict summaries turn the warning into an error."""
        source = [
            "2|apnic|20190201|1|20190101|20190201|+1000",
            "apnic|asn|4608|1|19940824|allocated",
        ]

        with pytest.raises(MissingSummary):
            read_all(source, ParseOptions(strict_summaries=True))

    def test_empty_source(self):
        """Test that an empty source yields nothing."""
        assert read_all(["# only a comment", ""]) == []

    def test_binary_stream(self, small_listing):
        """Test reading from an in-memory binary stream."""
        stream = io.BytesIO("\n".join(small_listing).encode("utf-8"))

        assert len(read_all(stream)) == 6

    def test_independent_sessions(self, small_listing):
        """Test that interleaved readers keep separate state."""
        first = ListingReader(small_listing)
        second = ListingReader(small_listing)

        next(first)
        next(first)
        next(second)

        assert len(list(first)) == 4
        assert len(list(second)) == 5


class TestSampleFiles:
    """Tests against sample registry listings."""

    def test_apnic_sample(self, fixtures_dir):
        """Test the published layout with comments and blank lines."""
        with open_listing(fixtures_dir / "delegated-apnic-extended-sample.txt") as f:
            listing = read_listing(f)

        assert isinstance(listing, Listing)
        assert listing.version.registry == "apnic"
        assert listing.version.start_date == datetime.date(1983, 6, 13)
        assert len(listing.summaries) == 3
        assert len(listing.records) == listing.version.records == 7
        assert listing.warnings == []

        first = listing.records[0]
        assert first.country == "JP"
        assert first.start == 173
        assert first.opaque_id == "A91A7381"

        available = listing.records[5]
        assert available.status is Status.AVAILABLE
        assert available.date is None
        assert available.country == ""

        ipv6 = listing.records[6]
        assert ipv6.type is ResourceType.IPV6
        assert ipv6.value == 35

    def test_summary_counts_match_records(self, fixtures_dir):
        """Test that each summary count equals its records."""
        with open_listing(fixtures_dir / "delegated-apnic-extended-sample.txt") as f:
            listing = read_listing(f)

        for summary in listing.summaries:
            records = [r for r in listing.records if r.type is summary.type]
            assert len(records) == summary.count

    def test_compact_sample(self, fixtures_dir):
        """Test the compact layout sample."""
        with open_listing(fixtures_dir / "delegated-compact-sample.txt") as f:
            lines = read_all(f)

        assert len(lines) == 6
        assert all(line.country is None for line in lines if isinstance(line, RecordLine))

    def test_ripencc_sample_crlf_and_extensions(self, fixtures_dir):
        """Test CRLF line endings and extension fields."""
        with open_listing(fixtures_dir / "delegated-ripencc-extended-sample.txt") as f:
            listing = read_listing(f)

        assert listing.version.utc_offset == "+0100"
        assert listing.records[0].extensions == ("e-stats", "extra")
        assert listing.records[1].start == ipaddress.IPv6Address("2001:67c::")


class TestReadListing:
    """Tests for read_listing function."""

    def test_requires_version_line(self):
        """Test that an empty source is not a listing."""
        with pytest.raises(EmptyListing):
            read_listing([])
