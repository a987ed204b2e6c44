"""RMC sentence decoder.

RMC (Recommended Minimum Navigation Information) carries the date and time,
position, speed and course over ground.

RMC Sentence Format:
    $GPRMC,064951.000,A,2307.1256,N,12016.4438,E,0.03,165.48,260406,3.05,W,A*hh
           |          | |         | |          | |    |      |      |    | |
           |          | |         | |          | |    |      |      |    | +-- (11) Mode
           |          | |         | |          | |    |      |      +----+-- (9, 10) Magnetic variation
           |          | |         | |          | |    |      +-- (8) Date (ddmmyy)
           |          | |         | |          | |    +-- (7) Course over ground (degrees)
           |          | |         | |          | +-- (6) Speed over ground (knots)
           |          | |         | +----------+-- (4, 5) Longitude + E/W
           |          | +---------+-- (2, 3) Latitude + N/S
           |          +-- (1) Status (A=valid, V=not valid)
           +-- (0) UTC time (hhmmss.sss)

Mode Indicators:
    A = Autonomous
    D = Differential
    E = Estimated (dead reckoning)
    N = Data not valid (seen on real devices before a fix)

The magnetic variation fields are not decoded.
"""

from datetime import timedelta

from gpsnmea.nmea.errors import FieldCountError, FieldFormatError, SentenceDecodeError
from gpsnmea.nmea.fields import (
    parse_char_field,
    parse_date,
    parse_float_field,
    parse_position,
    parse_time,
)
from gpsnmea.nmea.types import RMCData, SentenceType

_SENTENCE_TYPE = SentenceType.RMC.value

_FIELD_COUNT = 12

_STATUS_CODES = ("A", "V")
_MODE_CODES = ("A", "D", "E", "N")


def _build_rmc_data(fields: list[str]) -> RMCData:
    milliseconds = parse_time(fields[0])
    date = parse_date(fields[8])
    status = parse_char_field(fields[1], "status", _STATUS_CODES)
    latitude, longitude = parse_position(fields[2], fields[3], fields[4], fields[5])

    return RMCData(
        time=date + timedelta(milliseconds=milliseconds),
        status=status,
        latitude=latitude,
        longitude=longitude,
        speed=parse_float_field(fields[6], "speed"),
        heading=parse_float_field(fields[7], "heading"),
        mode=parse_char_field(fields[11], "mode", _MODE_CODES),
    )


def decode_rmc(fields: list[str]) -> RMCData:
    """Decode the split fields of a GPRMC sentence.

    The time of day and the date are combined into one timezone-aware UTC
    timestamp. Latitude and longitude stay at 0.0 when either is empty.

    Raises:
        FieldCountError: If there are not exactly 12 fields.
        SentenceDecodeError: If any field is malformed.
    """
    if len(fields) != _FIELD_COUNT:
        raise FieldCountError(_SENTENCE_TYPE, _FIELD_COUNT, len(fields))

    try:
        return _build_rmc_data(fields)
    except FieldFormatError as e:
        raise SentenceDecodeError(_SENTENCE_TYPE, e.field, str(e)) from e
