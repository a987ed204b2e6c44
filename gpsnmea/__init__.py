"""gpsnmea package for decoding NMEA 0183 GPS sentence streams."""

from gpsnmea.nmea import (
    BaseVisitor,
    GGAData,
    GSAData,
    ParseResult,
    RMCData,
    SentenceDecodeError,
    Visitor,
    is_valid_sentence,
    iter_sentences,
    parse_sentence,
    visit,
)
from gpsnmea.reader import NMEAReader

__all__ = [
    "BaseVisitor",
    "GGAData",
    "GSAData",
    "NMEAReader",
    "ParseResult",
    "RMCData",
    "SentenceDecodeError",
    "Visitor",
    "is_valid_sentence",
    "iter_sentences",
    "parse_sentence",
    "visit",
]
