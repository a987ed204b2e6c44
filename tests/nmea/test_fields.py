"""Tests for the field splitter and primitive field parsers."""

from datetime import datetime, timezone

import pytest

from gpsnmea.nmea import FieldFormatError, FieldFormatKind, split_fields
from gpsnmea.nmea.fields import (
    parse_byte_field,
    parse_char_field,
    parse_date,
    parse_float_field,
    parse_latitude,
    parse_longitude,
    parse_optional_float_field,
    parse_position,
    parse_time,
)


class TestSplitFields:
    """Tests for split_fields function."""

    def test_drops_tag_and_checksum(self):
        assert split_fields("$GPGSA,A,3,03,04,,2.32*1F") == ["A", "3", "03", "04", "", "2.32"]

    def test_preserves_empty_fields(self):
        assert split_fields("$GPGGA,,,*00") == ["", "", ""]

    def test_single_empty_field(self):
        assert split_fields("$T,*00") == [""]

    def test_no_separator(self):
        assert split_fields("$GPTXT*00") == []


class TestParseTime:
    """Tests for parse_time function."""

    def test_milliseconds_since_midnight(self):
        assert parse_time("064951.123") == 6 * 3600000 + 49 * 60000 + 51 * 1000 + 123

    def test_midnight(self):
        assert parse_time("000000.000") == 0

    def test_out_of_range_hour_is_accepted(self):
        assert parse_time("990000.000") == 99 * 3600000

    def test_wrong_length(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_time("064951.12")
        assert excinfo.value.kind is FieldFormatKind.LENGTH
        assert excinfo.value.field == "time"

    def test_non_numeric(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_time("06h951.000")
        assert excinfo.value.kind is FieldFormatKind.NUMBER

    def test_empty(self):
        with pytest.raises(FieldFormatError):
            parse_time("")


class TestParseDate:
    """Tests for parse_date function."""

    def test_date_in_2000s(self):
        assert parse_date("260406") == datetime(2006, 4, 26, tzinfo=timezone.utc)

    def test_two_digit_year_never_rolls_over(self):
        assert parse_date("010199").year == 2099

    def test_wrong_length(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_date("26046")
        assert excinfo.value.kind is FieldFormatKind.LENGTH

    def test_non_numeric(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_date("26ap06")
        assert excinfo.value.kind is FieldFormatKind.NUMBER

    def test_impossible_calendar_date(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_date("310206")
        assert excinfo.value.kind is FieldFormatKind.VALUE


class TestParseLatitude:
    """Tests for parse_latitude function."""

    def test_north(self):
        assert parse_latitude("2307.1256", "N") == pytest.approx(23.11876)

    def test_south_is_negative(self):
        assert parse_latitude("2307.1256", "S") == pytest.approx(-23.11876)

    def test_wrong_length(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_latitude("2307.125", "N")
        assert excinfo.value.kind is FieldFormatKind.LENGTH

    def test_misplaced_decimal_point(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_latitude("23071.256", "N")
        assert excinfo.value.kind is FieldFormatKind.SEPARATOR

    def test_invalid_indicator(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_latitude("2307.1256", "E")
        assert excinfo.value.kind is FieldFormatKind.VALUE
        assert excinfo.value.field == "latitude_indicator"

    def test_non_numeric_minutes(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_latitude("23a7.1256", "N")
        assert excinfo.value.kind is FieldFormatKind.NUMBER


class TestParseLongitude:
    """Tests for parse_longitude function."""

    def test_east(self):
        assert parse_longitude("12016.4438", "E") == pytest.approx(120.27406333333)

    def test_west_is_negative(self):
        assert parse_longitude("12016.4438", "W") == pytest.approx(-120.27406333333)

    def test_wrong_length(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_longitude("2016.4438", "E")
        assert excinfo.value.kind is FieldFormatKind.LENGTH

    def test_misplaced_decimal_point(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_longitude("1201.64438", "E")
        assert excinfo.value.kind is FieldFormatKind.SEPARATOR

    def test_invalid_indicator(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_longitude("12016.4438", "X")
        assert excinfo.value.field == "longitude_indicator"


class TestParsePosition:
    """Tests for parse_position function."""

    def test_both_present(self):
        latitude, longitude = parse_position("2307.1256", "S", "12016.4438", "W")
        assert latitude == pytest.approx(-23.11876)
        assert longitude == pytest.approx(-120.27406333333)

    def test_missing_latitude_leaves_both_at_zero(self):
        assert parse_position("", "", "12016.4438", "E") == (0.0, 0.0)

    def test_missing_longitude_leaves_both_at_zero(self):
        assert parse_position("2307.1256", "N", "", "") == (0.0, 0.0)

    def test_indicators_ignored_without_coordinates(self):
        assert parse_position("", "X", "", "X") == (0.0, 0.0)


class TestScalarFields:
    """Tests for the integer, float and character helpers."""

    def test_byte_field_upper_bound(self):
        assert parse_byte_field("255", "position_fix") == 255
        with pytest.raises(FieldFormatError) as excinfo:
            parse_byte_field("256", "position_fix")
        assert excinfo.value.kind is FieldFormatKind.VALUE

    def test_byte_field_rejects_sign(self):
        with pytest.raises(FieldFormatError):
            parse_byte_field("-1", "position_fix")

    def test_byte_field_leading_zero(self):
        assert parse_byte_field("03", "satellite_1") == 3

    def test_optional_float_empty_is_zero(self):
        assert parse_optional_float_field("", "altitude") == 0.0

    def test_optional_float_value(self):
        assert parse_optional_float_field("-12.5", "altitude") == pytest.approx(-12.5)

    @pytest.mark.parametrize("text", ["", "abc", "nan", "inf", "1_0", " 1.0"])
    def test_float_field_rejects_non_decimal(self, text):
        with pytest.raises(FieldFormatError):
            parse_float_field(text, "speed")

    def test_char_field(self):
        assert parse_char_field("V", "status", ("A", "V")) == "V"

    def test_char_field_wrong_length(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_char_field("AV", "status", ("A", "V"))
        assert excinfo.value.kind is FieldFormatKind.LENGTH

    def test_char_field_unknown_code(self):
        with pytest.raises(FieldFormatError) as excinfo:
            parse_char_field("X", "status", ("A", "V"))
        assert excinfo.value.kind is FieldFormatKind.VALUE
