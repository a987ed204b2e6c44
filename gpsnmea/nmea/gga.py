"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) carries the time, position and fix
information of the receiver.

GGA Sentence Format:
    $GPGGA,064951.000,2307.1256,N,12016.4438,E,1,8,0.95,39.9,M,17.8,M,,*63

    Fields after the tag (index: meaning):
         0: UTC time (hhmmss.sss)
      1, 2: Latitude (ddmm.mmmm) + N/S
      3, 4: Longitude (dddmm.mmmm) + E/W
         5: Position fix
         6: Satellites used
         7: HDOP
      8, 9: MSL altitude + unit (must be M)
    10, 11: Geoidal separation + unit (not decoded)
        12: Age of differential correction (not decoded)
        13: Reference station ID (not decoded)

Position Fix Values:
    0 = Fix not available
    1 = GPS fix
    2 = Differential GPS fix

Before a fix the receiver leaves the position, HDOP and altitude empty:
    $GPGGA,064951.000,,,,,0,0,,,M,,M,,*47
"""

from datetime import timedelta

from gpsnmea.nmea.errors import FieldCountError, FieldFormatError, SentenceDecodeError
from gpsnmea.nmea.fields import (
    parse_byte_field,
    parse_optional_float_field,
    parse_position,
    parse_time,
)
from gpsnmea.nmea.types import GGAData, SentenceType

_SENTENCE_TYPE = SentenceType.GGA.value

# Fields after the "$GPGGA" token, the last one being empty on most receivers.
_FIELD_COUNT = 14

_ALTITUDE_UNIT_INDEX = 9
_METERS = "M"


def _check_altitude_unit(fields: list[str]) -> None:
    unit = fields[_ALTITUDE_UNIT_INDEX]
    if unit != _METERS:
        raise SentenceDecodeError(
            _SENTENCE_TYPE, "altitude_unit", f"unsupported unit {unit!r}"
        )


def _build_gga_data(fields: list[str]) -> GGAData:
    """Construct a GGAData object from the split fields.

    Maps NMEA field indices to GGAData attributes:
        fields[0]  -> time (hhmmss.sss)
        fields[1]  -> latitude (ddmm.mmmm)
        fields[2]  -> latitude indicator (N/S)
        fields[3]  -> longitude (dddmm.mmmm)
        fields[4]  -> longitude indicator (E/W)
        fields[5]  -> position_fix
        fields[6]  -> used_satellites
        fields[7]  -> HDOP, empty -> 0.0
        fields[8]  -> altitude, empty -> 0.0

    Fields are decoded in order so that the first failure is the one reported.
    """
    milliseconds = parse_time(fields[0])
    latitude, longitude = parse_position(fields[1], fields[2], fields[3], fields[4])

    return GGAData(
        time=timedelta(milliseconds=milliseconds),
        latitude=latitude,
        longitude=longitude,
        position_fix=parse_byte_field(fields[5], "position_fix"),
        used_satellites=parse_byte_field(fields[6], "used_satellites"),
        horizontal_dilution_of_precision=parse_optional_float_field(
            fields[7], "horizontal_dilution_of_precision"
        ),
        altitude=parse_optional_float_field(fields[8], "altitude"),
    )


def decode_gga(fields: list[str]) -> GGAData:
    """Decode the split fields of a GPGGA sentence.

    Args:
        fields: Output of ``split_fields`` for a checksum-valid sentence

    Returns:
        The fully populated GGAData

    Raises:
        FieldCountError: If there are not exactly 14 fields.
        SentenceDecodeError: If any field is malformed or the altitude unit
            is not meters.
    """
    if len(fields) != _FIELD_COUNT:
        raise FieldCountError(_SENTENCE_TYPE, _FIELD_COUNT, len(fields))

    try:
        result = _build_gga_data(fields)
    except FieldFormatError as e:
        raise SentenceDecodeError(_SENTENCE_TYPE, e.field, str(e)) from e

    _check_altitude_unit(fields)
    return result
