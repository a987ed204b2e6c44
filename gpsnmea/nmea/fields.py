"""NMEA field parsing utilities.

This module provides the field splitter and the primitive parsers used by the
sentence decoders. NMEA fields are comma-separated and may be empty
(consecutive commas indicate missing data).

Every parser is a pure function that raises ``FieldFormatError`` when its
input does not match the expected fixed format. Callers decide whether an
empty field is acceptable before calling a parser; the parsers themselves
treat an empty string like any other malformed input.
"""

import re
from collections.abc import Collection
from datetime import datetime, timezone

from gpsnmea.nmea.errors import FieldFormatError, FieldFormatKind

_MILLISECONDS_PER_SECOND = 1000
_MILLISECONDS_PER_MINUTE = 60 * _MILLISECONDS_PER_SECOND
_MILLISECONDS_PER_HOUR = 60 * _MILLISECONDS_PER_MINUTE

# hhmmss.sss
_TIME_LENGTH = 10
# ddmmyy
_DATE_LENGTH = 6
# ddmm.mmmm and dddmm.mmmm, with the decimal point right after the minutes
_LATITUDE_LENGTH = 9
_LATITUDE_DOT_INDEX = 4
_LONGITUDE_LENGTH = 10
_LONGITUDE_DOT_INDEX = 5

# Two-digit years are always in the 2000s.
_CENTURY = 2000

_BYTE_MAX = 255

_INTEGER = re.compile(r"[0-9]+")
# Plain decimal notation; float() alone would also take "nan", "inf" and "1_0".
_DECIMAL = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")

_CHECKSUM_SUFFIX_LENGTH = 3


def split_fields(sentence: str) -> list[str]:
    """Split a checksum-validated sentence into its data fields.

    The leading ``$TYPE`` token is dropped and the ``*CC`` checksum suffix is
    removed from the last field. Empty fields are kept in place.

    Args:
        sentence: Checksum-validated NMEA sentence

    Returns:
        List of field strings, or an empty list if the sentence contains no
        comma at all.

    Example:
        Input: "$GPGSA,A,3,03,04,,2.32*hh"
        Output: ["A", "3", "03", "04", "", "2.32"]
    """
    fields = sentence.split(",")
    if len(fields) <= 1:
        return []

    fields[-1] = fields[-1][:-_CHECKSUM_SUFFIX_LENGTH]
    return fields[1:]


def _parse_int(text: str, field: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise FieldFormatError(FieldFormatKind.NUMBER, field, text)
    return int(text)


def _parse_float(text: str, field: str) -> float:
    if not _DECIMAL.fullmatch(text):
        raise FieldFormatError(FieldFormatKind.NUMBER, field, text)
    return float(text)


def _check_length(text: str, expected: int, field: str) -> None:
    if len(text) != expected:
        raise FieldFormatError(
            FieldFormatKind.LENGTH,
            field,
            text,
            f"expected {expected} characters",
        )


def parse_int_field(value: str, field: str) -> int:
    """Parse a mandatory unsigned decimal integer field.

    Example:
        >>> parse_int_field("08", "used_satellites")
        8
    """
    return _parse_int(value, field)


def parse_byte_field(value: str, field: str) -> int:
    """Parse a mandatory integer field that must fit in an unsigned byte."""
    number = _parse_int(value, field)
    if number > _BYTE_MAX:
        raise FieldFormatError(
            FieldFormatKind.VALUE, field, value, f"greater than {_BYTE_MAX}"
        )
    return number


def parse_float_field(value: str, field: str) -> float:
    """Parse a mandatory decimal field such as speed or heading.

    Example:
        >>> parse_float_field("165.48", "heading")
        165.48
    """
    return _parse_float(value, field)


def parse_optional_float_field(value: str, field: str) -> float:
    """Parse a decimal field that may be empty; empty means 0.0."""
    if not value:
        return 0.0
    return _parse_float(value, field)


def parse_char_field(value: str, field: str, allowed: Collection[str]) -> str:
    """Parse a single-character code restricted to ``allowed``.

    Example:
        >>> parse_char_field("A", "status", "AV")
        'A'
    """
    _check_length(value, 1, field)
    if value not in allowed:
        raise FieldFormatError(
            FieldFormatKind.VALUE,
            field,
            value,
            f"expected one of {', '.join(sorted(allowed))}",
        )
    return value


def parse_time(text: str) -> int:
    """Parse a UTC time of day in ``hhmmss.sss`` format.

    Hours, minutes and seconds are not range-checked: ``990000.000`` parses
    to 99 hours.

    Args:
        text: Time field, exactly 10 characters

    Returns:
        Milliseconds since midnight

    Example:
        >>> parse_time("064951.123")
        24591123
    """
    _check_length(text, _TIME_LENGTH, "time")

    hours = _parse_int(text[0:2], "time")
    minutes = _parse_int(text[2:4], "time")
    seconds = _parse_int(text[4:6], "time")
    milliseconds = _parse_int(text[7:10], "time")

    return (
        hours * _MILLISECONDS_PER_HOUR
        + minutes * _MILLISECONDS_PER_MINUTE
        + seconds * _MILLISECONDS_PER_SECOND
        + milliseconds
    )


def parse_date(text: str) -> datetime:
    """Parse a date in ``ddmmyy`` format into midnight UTC of that day.

    Example:
        >>> parse_date("260406")
        datetime.datetime(2006, 4, 26, 0, 0, tzinfo=datetime.timezone.utc)
    """
    _check_length(text, _DATE_LENGTH, "date")

    day = _parse_int(text[0:2], "date")
    month = _parse_int(text[2:4], "date")
    year = _parse_int(text[4:6], "date")

    try:
        return datetime(_CENTURY + year, month, day, tzinfo=timezone.utc)
    except ValueError as e:
        raise FieldFormatError(FieldFormatKind.VALUE, "date", text, str(e)) from e


def _parse_coordinate(
    text: str,
    indicator: str,
    field: str,
    length: int,
    dot_index: int,
    hemispheres: tuple[str, str],
) -> float:
    """Convert a fixed-width NMEA coordinate to signed decimal degrees.

    The two digits before the decimal point are whole minutes, everything
    before them is degrees:

        decimal_degrees = degrees + (minutes / 60)

    ``hemispheres`` is the (positive, negative) indicator pair.
    """
    if len(text) != length:
        raise FieldFormatError(
            FieldFormatKind.LENGTH, field, text, f"expected {length} characters"
        )
    if text[dot_index] != ".":
        raise FieldFormatError(
            FieldFormatKind.SEPARATOR,
            field,
            text,
            f"expected '.' at index {dot_index}",
        )

    positive, negative = hemispheres
    if indicator not in (positive, negative):
        raise FieldFormatError(
            FieldFormatKind.VALUE, f"{field}_indicator", indicator
        )

    degrees_end = dot_index - 2
    degrees = _parse_int(text[:degrees_end], field)
    minutes = _parse_float(text[degrees_end:], field)

    decimal_degrees = degrees + minutes / 60.0
    if indicator == negative:
        return -decimal_degrees
    return decimal_degrees


def parse_latitude(text: str, indicator: str) -> float:
    """Convert a ``ddmm.mmmm`` latitude to decimal degrees (South negative).

    Example:
        >>> parse_latitude("2307.1256", "N")
        23.11876
    """
    return _parse_coordinate(
        text, indicator, "latitude", _LATITUDE_LENGTH, _LATITUDE_DOT_INDEX, ("N", "S")
    )


def parse_longitude(text: str, indicator: str) -> float:
    """Convert a ``dddmm.mmmm`` longitude to decimal degrees (West negative).

    Example:
        >>> parse_longitude("12016.4438", "W")
        -120.27406333333333
    """
    return _parse_coordinate(
        text, indicator, "longitude", _LONGITUDE_LENGTH, _LONGITUDE_DOT_INDEX, ("E", "W")
    )


def parse_position(
    latitude: str,
    latitude_indicator: str,
    longitude: str,
    longitude_indicator: str,
) -> tuple[float, float]:
    """Parse a latitude/longitude pair that may be absent.

    Receivers leave both coordinate fields empty until they have a fix. The
    pair is only parsed when both coordinate strings are non-empty; otherwise
    ``(0.0, 0.0)`` is returned.
    """
    if not latitude or not longitude:
        return 0.0, 0.0
    return (
        parse_latitude(latitude, latitude_indicator),
        parse_longitude(longitude, longitude_indicator),
    )
