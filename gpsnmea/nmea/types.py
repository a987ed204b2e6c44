"""NMEA data types for decoded sentences.

This module defines the records produced by the sentence decoders.

Design Decisions:
    1. Frozen dataclasses: a record is built in one decode step and never
       mutated afterwards. Two decodes of the same text compare equal.

    2. Zero, not None, for missing data: GPS receivers emit empty position
       fields until they have a fix. The decoders leave latitude, longitude,
       HDOP and altitude at 0.0 in that case; ``position_fix`` (GGA),
       ``status`` (RMC) and ``mode2`` (GSA) tell the consumer whether the
       values are meaningful.

    3. Raw codes: fix quality and mode indicators are kept as the integers
       or single characters that appear on the wire. No enum restriction is
       applied beyond what each sentence layout requires.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum

from gpsnmea.nmea.errors import SentenceDecodeError


class SentenceType(Enum):
    """Closed set of sentence tags the dispatch engine knows about."""

    GGA = "GPGGA"
    RMC = "GPRMC"
    GSA = "GPGSA"
    UNKNOWN = ""

    @classmethod
    def from_tag(cls, tag: str) -> "SentenceType":
        """Map a sentence tag such as ``"GPGGA"`` to its type, or UNKNOWN."""
        for member in (cls.GGA, cls.RMC, cls.GSA):
            if member.value == tag:
                return member
        return cls.UNKNOWN


@dataclass(frozen=True)
class GGAData:
    """Decoded GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        time: UTC time of day as an offset from midnight, millisecond
            precision (e.g. ``064951.123`` -> 6h49m51.123s).

        used_satellites: Number of satellites used in the fix (0-12 on
            typical receivers).

        position_fix: Fix indicator as transmitted:
            0 = Fix not available
            1 = GPS fix
            2 = Differential GPS fix

        latitude: Latitude in decimal degrees, positive=North.
            0.0 when the receiver has no fix.

        longitude: Longitude in decimal degrees, positive=East.
            0.0 when the receiver has no fix.

        horizontal_dilution_of_precision: HDOP. 0.0 if the field was empty.

        altitude: Antenna altitude above mean sea level in meters.
            0.0 if the field was empty.

    Note:
        When ``position_fix`` is 0 only ``time`` and ``used_satellites``
        carry information.
    """

    time: timedelta
    used_satellites: int
    position_fix: int
    latitude: float = 0.0
    longitude: float = 0.0
    horizontal_dilution_of_precision: float = 0.0
    altitude: float = 0.0


@dataclass(frozen=True)
class RMCData:
    """Decoded RMC (Recommended Minimum Navigation Information) sentence.

    Attributes:
        time: Timezone-aware UTC timestamp combining the date and time fields.

        status: 'A' = data valid, 'V' = data not valid.

        latitude: Latitude in decimal degrees, positive=North. 0.0 if empty.

        longitude: Longitude in decimal degrees, positive=East. 0.0 if empty.

        mode: Mode indicator:
            'A' = Autonomous
            'D' = Differential
            'E' = Estimated (dead reckoning)
            'N' = Data not valid

        speed: Speed over ground in knots.

        heading: Course over ground in degrees.
    """

    time: datetime
    status: str
    mode: str
    speed: float
    heading: float
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass(frozen=True)
class GSAData:
    """Decoded GSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        mode1: 'M' = manual, 'A' = automatic 2D/3D switching.

        mode2: '1' = no fix, '2' = 2D fix, '3' = 3D fix.

        satellites: IDs of the satellites used in the solution, in channel
            order. Empty when no satellite is reported.

        position_dilution_of_precision: PDOP, 0.0 when ``mode2`` is '1'.

        horizontal_dilution_of_precision: HDOP, 0.0 when ``mode2`` is '1'.

        vertical_dilution_of_precision: VDOP, 0.0 when ``mode2`` is '1'.
    """

    mode1: str
    mode2: str
    satellites: tuple[int, ...] = field(default_factory=tuple)
    position_dilution_of_precision: float = 0.0
    horizontal_dilution_of_precision: float = 0.0
    vertical_dilution_of_precision: float = 0.0


NMEARecord = GGAData | RMCData | GSAData


@dataclass(frozen=True)
class ParseResult:
    """Outcome of decoding one checksum-valid line.

    Exactly one of ``record`` and ``error`` is set for a supported sentence
    type. Both are ``None`` for an UNKNOWN sentence type.
    """

    sentence_type: SentenceType
    tag: str
    sentence: str
    record: NMEARecord | None = None
    error: SentenceDecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
