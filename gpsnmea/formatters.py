"""JSON formatting utilities for decoded NMEA records."""

import json
from typing import Any

from gpsnmea.nmea import GGAData, GSAData, NMEARecord, ParseResult, RMCData

__all__ = ["format_record", "format_result", "record_to_dict"]


def _gga_to_dict(record: GGAData) -> dict[str, Any]:
    return {
        "type": "gga",
        "time_seconds": record.time.total_seconds(),
        "position_fix": record.position_fix,
        "used_satellites": record.used_satellites,
        "lat": record.latitude,
        "lon": record.longitude,
        "hdop": record.horizontal_dilution_of_precision,
        "alt": record.altitude,
    }


def _rmc_to_dict(record: RMCData) -> dict[str, Any]:
    return {
        "type": "rmc",
        "time": record.time.isoformat(),
        "status": record.status,
        "lat": record.latitude,
        "lon": record.longitude,
        "mode": record.mode,
        "speed_knots": record.speed,
        "heading_degrees": record.heading,
    }


def _gsa_to_dict(record: GSAData) -> dict[str, Any]:
    return {
        "type": "gsa",
        "mode1": record.mode1,
        "mode2": record.mode2,
        "satellites": list(record.satellites),
        "pdop": record.position_dilution_of_precision,
        "hdop": record.horizontal_dilution_of_precision,
        "vdop": record.vertical_dilution_of_precision,
    }


def record_to_dict(record: NMEARecord) -> dict[str, Any]:
    """Convert a decoded record into a JSON-serializable dict."""
    if isinstance(record, GGAData):
        return _gga_to_dict(record)
    if isinstance(record, RMCData):
        return _rmc_to_dict(record)
    if isinstance(record, GSAData):
        return _gsa_to_dict(record)
    raise TypeError(f"Unsupported record type: {type(record).__name__}")


def format_record(record: NMEARecord) -> str:
    """Serialize a decoded record into a single-line JSON string."""
    return json.dumps(record_to_dict(record))


def format_result(result: ParseResult) -> str:
    """Serialize a parse outcome, including the decode error if there is one.

    Results for unsupported sentence types carry only the tag.
    """
    message: dict[str, Any] = {"sentence": result.sentence, "tag": result.tag}
    if result.record is not None:
        message.update(record_to_dict(result.record))
    if result.error is not None:
        message["error"] = str(result.error)
    return json.dumps(message)
