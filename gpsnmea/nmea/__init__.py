"""NMEA 0183 decoder for GGA, RMC and GSA sentences."""

from gpsnmea.nmea.checksum import compute_checksum, is_valid_sentence
from gpsnmea.nmea.errors import (
    FieldCountError,
    FieldFormatError,
    FieldFormatKind,
    NMEAError,
    SentenceDecodeError,
)
from gpsnmea.nmea.fields import split_fields
from gpsnmea.nmea.gga import decode_gga
from gpsnmea.nmea.gsa import decode_gsa
from gpsnmea.nmea.rmc import decode_rmc
from gpsnmea.nmea.types import (
    GGAData,
    GSAData,
    NMEARecord,
    ParseResult,
    RMCData,
    SentenceType,
)
from gpsnmea.nmea.visitor import (
    BaseVisitor,
    Visitor,
    decode_sentence,
    iter_sentences,
    parse_sentence,
    visit,
)

__all__ = [
    "BaseVisitor",
    "FieldCountError",
    "FieldFormatError",
    "FieldFormatKind",
    "GGAData",
    "GSAData",
    "NMEAError",
    "NMEARecord",
    "ParseResult",
    "RMCData",
    "SentenceDecodeError",
    "SentenceType",
    "Visitor",
    "compute_checksum",
    "decode_gga",
    "decode_gsa",
    "decode_rmc",
    "decode_sentence",
    "is_valid_sentence",
    "iter_sentences",
    "parse_sentence",
    "split_fields",
    "visit",
]
