"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the
solution and the dilution of precision values.

GSA Sentence Format:
    $GPGSA,A,3,03,04,01,32,22,28,11,,,,,,2.32,0.95,2.11*hh
           | | |                     |    |    |    |
           | | |                     |    |    |    +-- (16) VDOP
           | | |                     |    |    +-- (15) HDOP
           | | |                     |    +-- (14) PDOP
           | | +---------------------+-- (2..13) SV IDs, one per channel
           | +-- (1) Mode 2 (1=no fix, 2=2D, 3=3D)
           +-- (0) Mode 1 (M=manual, A=automatic)

Satellite IDs are read from fields 2 to 11 and treated as a contiguous
prefix: scanning stops at the first empty slot, so an ID written after a gap
is never read. Channels 11 and 12 (fields 12 and 13) are not decoded.
"""

from gpsnmea.nmea.errors import FieldCountError, FieldFormatError, SentenceDecodeError
from gpsnmea.nmea.fields import (
    parse_byte_field,
    parse_char_field,
    parse_float_field,
)
from gpsnmea.nmea.types import GSAData, SentenceType

_SENTENCE_TYPE = SentenceType.GSA.value

_FIELD_COUNT = 17

_MODE1_CODES = ("M", "A")
_MODE2_CODES = ("1", "2", "3")
_MODE2_NO_FIX = "1"

_FIRST_SATELLITE_INDEX = 2
_SATELLITE_SLOTS = 10

_PDOP_INDEX = 14
_HDOP_INDEX = 15
_VDOP_INDEX = 16


def _extract_satellites(fields: list[str]) -> tuple[int, ...]:
    slots = fields[_FIRST_SATELLITE_INDEX : _FIRST_SATELLITE_INDEX + _SATELLITE_SLOTS]

    satellites = []
    for channel, text in enumerate(slots, start=1):
        if not text:
            break
        satellites.append(parse_byte_field(text, f"satellite_{channel}"))
    return tuple(satellites)


def _build_gsa_data(fields: list[str]) -> GSAData:
    mode1 = parse_char_field(fields[0], "mode1", _MODE1_CODES)
    mode2 = parse_char_field(fields[1], "mode2", _MODE2_CODES)
    satellites = _extract_satellites(fields)

    # The DOP fields are only meaningful once the receiver has a fix.
    if mode2 == _MODE2_NO_FIX:
        return GSAData(mode1=mode1, mode2=mode2, satellites=satellites)

    return GSAData(
        mode1=mode1,
        mode2=mode2,
        satellites=satellites,
        position_dilution_of_precision=parse_float_field(
            fields[_PDOP_INDEX], "position_dilution_of_precision"
        ),
        horizontal_dilution_of_precision=parse_float_field(
            fields[_HDOP_INDEX], "horizontal_dilution_of_precision"
        ),
        vertical_dilution_of_precision=parse_float_field(
            fields[_VDOP_INDEX], "vertical_dilution_of_precision"
        ),
    )


def decode_gsa(fields: list[str]) -> GSAData:
    """Decode the split fields of a GPGSA sentence.

    Raises:
        FieldCountError: If there are not exactly 17 fields.
        SentenceDecodeError: If a mode, satellite ID or DOP field is malformed.
    """
    if len(fields) != _FIELD_COUNT:
        raise FieldCountError(_SENTENCE_TYPE, _FIELD_COUNT, len(fields))

    try:
        return _build_gsa_data(fields)
    except FieldFormatError as e:
        raise SentenceDecodeError(_SENTENCE_TYPE, e.field, str(e)) from e
