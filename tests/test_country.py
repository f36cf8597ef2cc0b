"""Tests for country name lookup module."""

import datetime

from rsef.country import get_all_country_names, get_country_name
from rsef.models import RecordLine, ResourceType, Status


class TestGetCountryName:
    """Tests for get_country_name function."""

    def test_iso_code_lookup(self):
        """Test looking up country names for ISO 3166 codes."""
        assert get_country_name("JP") == "Japan"
        assert get_country_name("AU") == "Australia"
        assert get_country_name("DE") == "Germany"

    def test_case_insensitive(self):
        """Test that lookups are case-insensitive."""
        assert get_country_name("jp") == "Japan"
        assert get_country_name("Jp") == "Japan"

    def test_override_eu(self):
        """Test European Union override (not a country)."""
        assert get_country_name("EU") == "European Union"

    def test_override_ap(self):
        """Test Asia Pacific override used by APNIC."""
        assert get_country_name("AP") == "Asia Pacific"

    def test_override_zz(self):
        """Test the unassigned placeholder code."""
        assert get_country_name("ZZ") == "Unassigned"

    def test_invalid_code_returns_none(self):
        """Test that unknown codes return None."""
        assert get_country_name("XX") is None


class TestGetAllCountryNames:
    """Tests for get_all_country_names function."""

    def test_mapping(self):
        """Test mapping a list of codes, skipping unknown and empty ones."""
        mappings = get_all_country_names(["JP", "jp", "", "XX", "EU"])

        assert mappings == {"JP": "Japan", "EU": "European Union"}


class TestRecordCountryName:
    """Tests for RecordLine.country_name property."""

    def _record(self, country):
        return RecordLine(
            "apnic", country, ResourceType.ASN, 4608, 1, datetime.date(1994, 8, 24), Status.ALLOCATED
        )

    def test_known_country(self):
        """Test record with a country code."""
        assert self._record("AU").country_name == "Australia"

    def test_no_country_column(self):
        """Test record without a country column."""
        assert self._record(None).country_name is None

    def test_empty_country(self):
        """Test record with an empty country code."""
        assert self._record("").country_name is None
