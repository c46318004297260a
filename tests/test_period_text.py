"""Tests for the canonical Period text form and ISO 8601 dispatch."""

from __future__ import annotations

import pytest

from chronoperiod import Date, DateTime, Period, Time, YearMonth
from chronoperiod.errors import (
    ArithmeticOverflowError,
    NullInputError,
    ParseError,
    ValidationError,
)
from chronoperiod.format import (
    PeriodParser,
    format_components,
    format_iso8601,
    format_period,
    parse_iso8601,
    parse_period,
)


# =============================================================================
# Formatting Tests
# =============================================================================


class TestFormatPeriod:
    """Tests for rendering a Period."""

    def test_zero(self):
        """Zero renders as PT0S."""
        assert str(Period.ZERO) == "PT0S"
        assert format_components(0, 0, 0, 0) == "PT0S"

    def test_all_fields(self):
        """All components in order, zero components omitted."""
        assert str(Period.of_units(1, 2, 3, 4, 5, 6)) == "P1Y2M3DT4H5M6S"
        assert str(Period.of_units(1, 2, 3, 4, 5, 6, 700_000_000)) == "P1Y2M3DT4H5M6.7S"
        assert str(Period.of_date_fields(1, 0, 3)) == "P1Y3D"
        assert str(Period.of_time_fields(4, 0, 6)) == "PT4H6S"

    def test_negative_fields(self):
        """Each component carries its own sign."""
        assert str(Period.of_date_fields(-1, -2, -3)) == "P-1Y-2M-3D"
        assert str(Period.of_time_fields(-1, -1, -1)) == "PT-1H-1M-1S"
        assert str(Period.of_date_fields(1, -2, 0)) == "P1Y-2M"

    def test_hours_over_a_day(self):
        """Hours are never carried into days."""
        assert str(Period.of_hours(25)) == "PT25H"

    @pytest.mark.parametrize(
        ("seconds", "adjustment", "expected"),
        [
            (1, 100_000_000, "PT1.1S"),
            (1, -100_000_000, "PT0.9S"),
            (-1, 100_000_000, "PT-0.9S"),
            (-1, -100_000_000, "PT-1.1S"),
        ],
    )
    def test_signed_fraction(self, seconds, adjustment, expected):
        """The seconds and fraction are written as one signed value."""
        assert str(Period.of_duration(seconds, adjustment)) == expected

    @pytest.mark.parametrize(
        ("nanos", "expected"),
        [
            (10_000_000, "PT0.01S"),
            (1_000_000, "PT0.001S"),
            (1_000, "PT0.000001S"),
            (1, "PT0.000000001S"),
            (-10_000_000, "PT-0.01S"),
            (-1_000_000, "PT-0.001S"),
            (-1_000, "PT-0.000001S"),
            (-1, "PT-0.000000001S"),
        ],
    )
    def test_fraction_trailing_zeros_removed(self, nanos, expected):
        """Fractions keep leading zeros and drop trailing ones."""
        assert str(Period.of_nanos(nanos)) == expected

    def test_net_negative_sub_second(self):
        """A net -0.1 seconds renders as -0.1 whatever its parts."""
        p = Period.of_units(0, 0, 0, 0, 0, -1, 900_000_000)
        assert p.time_nanos == -100_000_000
        assert str(p) == "PT-0.1S"
        assert format_period(p) == "PT-0.1S"


# =============================================================================
# Parsing Tests
# =============================================================================


class TestParsePeriod:
    """Tests for parsing the canonical text."""

    def test_full(self):
        """Every component parses."""
        p = parse_period("P1Y2M3DT4H5M6.7S")
        assert p == Period.of_units(1, 2, 3, 4, 5, 6, 700_000_000)

    def test_case_insensitive(self):
        """Letters are accepted in either case."""
        assert Period.parse("p1y2m3dt4h5m6s") == Period.of_units(1, 2, 3, 4, 5, 6)

    def test_comma_fraction(self):
        """A comma may introduce the fraction."""
        assert Period.parse("PT1,5S").time_nanos == 1_500_000_000

    def test_negative_components(self):
        """Each number may be negative."""
        assert Period.parse("P1Y-2M") == Period.of_date_fields(1, -2, 0)
        assert Period.parse("PT-1,5S").time_nanos == -1_500_000_000
        assert Period.parse("PT-0.5S").time_nanos == -500_000_000
        assert Period.parse("PT1H-30M").time_nanos == 30 * 60_000_000_000

    def test_partial(self):
        """Any subset of components in order parses."""
        assert Period.parse("P3D") == Period.of_days(3)
        assert Period.parse("PT2M") == Period.of_minutes(2)
        assert Period.parse("P2M") == Period.of_months(2)
        assert Period.parse("PT0S") is Period.ZERO
        assert Period.parse("P0D") is Period.ZERO

    def test_nine_fraction_digits(self):
        """Up to nine fraction digits are allowed."""
        assert Period.parse("PT0.123456789S").time_nanos == 123_456_789

    @pytest.mark.parametrize(
        "text",
        [
            "P1Y2M3DT4H5M6.7S",
            "P-1Y-2M-3D",
            "PT-1H-1M-1S",
            "PT25H",
            "PT-0.9S",
            "PT0.000000001S",
            "PT0S",
        ],
    )
    def test_canonical_text_reparses(self, text):
        """Canonical text formats back to itself."""
        assert str(Period.parse(text)) == text

    @pytest.mark.parametrize(
        ("text", "offset"),
        [
            ("", 0),
            ("X1D", 0),
            ("P", 1),
            ("PT", 2),
            ("P1DT", 4),
            ("P1", 2),
            ("P1X", 2),
            ("P1D2Y", 4),
            ("P1M1M", 4),
            ("PT1H1H", 5),
            ("P+1D", 1),
            ("P--1D", 2),
            ("P-0D", 1),
            ("PT-0S", 2),
            ("PT-0.0S", 2),
            ("P1.5D", 2),
            ("PT1.5H", 5),
            ("PT1.S", 4),
            ("PT0.1234567890S", 13),
        ],
    )
    def test_errors_carry_offset(self, text, offset):
        """Malformed text raises ParseError pointing at the problem."""
        with pytest.raises(ParseError) as excinfo:
            Period.parse(text)
        assert excinfo.value.offset == offset
        assert excinfo.value.parsed_text == text

    def test_year_overflow(self):
        """Values too large for their field raise ParseError."""
        with pytest.raises(ParseError) as excinfo:
            Period.parse("P2147483648Y")
        assert excinfo.value.offset == 1
        assert isinstance(excinfo.value.__cause__, ArithmeticOverflowError)

    def test_time_overflow(self):
        """A time component beyond 64 bits raises ParseError."""
        with pytest.raises(ParseError) as excinfo:
            Period.parse("PT9223372037S")
        assert excinfo.value.offset == 2

    def test_none(self):
        """None is rejected before parsing."""
        with pytest.raises(NullInputError):
            Period.parse(None)

    @pytest.mark.parametrize("text", [123, b"P1D"])
    def test_non_string(self, text):
        """Only strings are parsed."""
        with pytest.raises(ValidationError, match="text must be a str"):
            parse_period(text)

    def test_parser_class(self):
        """The parser can be used directly."""
        assert PeriodParser("PT-1,5S").parse().time_nanos == -1_500_000_000


# =============================================================================
# ISO 8601 Dispatch Tests
# =============================================================================


class TestIso8601:
    """Tests for parse_iso8601 and format_iso8601."""

    def test_parse_detects_type(self):
        """The text decides which type is returned."""
        assert parse_iso8601("P1Y2M") == Period.of_date_fields(1, 2, 0)
        assert parse_iso8601("2024-01-15") == Date(2024, 1, 15)
        assert parse_iso8601("14:30:45") == Time(14, 30, 45)
        assert parse_iso8601("2024-01-15T14:30:45") == DateTime(2024, 1, 15, 14, 30, 45)
        assert parse_iso8601("2012-06") == YearMonth(2012, 6)

    def test_parse_errors(self):
        """Undetectable or empty text raises ParseError."""
        with pytest.raises(ParseError):
            parse_iso8601("   ")
        with pytest.raises(ParseError):
            parse_iso8601("hello")
        with pytest.raises(NullInputError):
            parse_iso8601(None)

    def test_format(self):
        """Each type formats to its ISO text."""
        assert format_iso8601(Date(2024, 1, 15)) == "2024-01-15"
        assert format_iso8601(Time(14, 30, 45)) == "14:30:45"
        assert format_iso8601(DateTime(2024, 1, 15, 14, 30, 45)) == "2024-01-15T14:30:45"
        assert format_iso8601(YearMonth(2012, 6)) == "2012-06"
        assert format_iso8601(Period.of_nanos(100_000_000)) == "PT0.1S"

    def test_format_rejects_other_types(self):
        """Values without an ISO form raise TypeError."""
        with pytest.raises(TypeError):
            format_iso8601(42)  # type: ignore[arg-type]
