"""Command line decoder: NMEA text in, one JSON record per line out.

Examples::

    python -m gpsnmea track.nmea
    cat track.nmea | python -m gpsnmea --types GPGGA,GPRMC
    python -m gpsnmea --port /dev/ttyUSB0 --baud 9600 --log-level DEBUG

Sentences that fail to decode are reported on stderr at WARNING level and
skipped. A read error ends the run with exit status 1.
"""

import argparse
import logging
import sys
from typing import TextIO

from gpsnmea.formatters import format_record
from gpsnmea.nmea import (
    BaseVisitor,
    GGAData,
    GSAData,
    RMCData,
    SentenceDecodeError,
    visit,
)
from gpsnmea.reader import NMEAReader

__all__ = ["JSONLinesVisitor", "main", "parse_args"]

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class JSONLinesVisitor(BaseVisitor):
    """Writes each decoded record to ``out`` as one JSON line.

    Args:
        out: Text stream receiving the JSON lines.
        types: Sentence tags to decode; every tag is decoded when None.
    """

    def __init__(self, out: TextIO, types: frozenset[str] | None = None) -> None:
        self._out = out
        self._types = types
        self.records = 0
        self.failures = 0

    def on_before_parse(self, sentence_type: str, sentence: str) -> bool:
        return self._types is None or sentence_type in self._types

    def on_after_parse(
        self,
        sentence_type: str,
        sentence: str,
        error: SentenceDecodeError | None,
    ) -> None:
        if error is not None:
            self.failures += 1
            logger.warning("Failed to decode %s: %s", sentence, error)

    def _write(self, record: GGAData | RMCData | GSAData) -> None:
        self._out.write(format_record(record) + "\n")
        self.records += 1

    def on_gga(self, record: GGAData) -> None:
        self._write(record)

    def on_rmc(self, record: RMCData) -> None:
        self._write(record)

    def on_gsa(self, record: GSAData) -> None:
        self._write(record)


def _parse_types(value: str) -> frozenset[str]:
    types = frozenset(t.strip().upper() for t in value.split(",") if t.strip())
    if not types:
        raise argparse.ArgumentTypeError("at least one sentence type is required")
    return types


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gpsnmea",
        description="Decode NMEA 0183 GGA, RMC and GSA sentences into JSON lines.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        default=["-"],
        help="NMEA capture files; '-' reads standard input (default)",
    )
    parser.add_argument("--port", help="Serial port to read instead of files")
    parser.add_argument("--baud", type=int, default=9600, help="Serial baud rate")
    parser.add_argument(
        "--types",
        type=_parse_types,
        default=None,
        help="Comma-separated sentence tags to decode, e.g. GPGGA,GPRMC",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=_LOG_LEVELS,
        help="Logging level for diagnostics on stderr",
    )
    return parser.parse_args(argv)


def _open_readers(args: argparse.Namespace) -> list[NMEAReader]:
    if args.port:
        return [NMEAReader(port=args.port, baudrate=args.baud)]
    return [NMEAReader(path=path) for path in args.inputs]


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """Run the decoder and return the process exit status."""
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=_LOG_FORMAT)

    visitor = JSONLinesVisitor(out if out is not None else sys.stdout, args.types)
    try:
        for reader in _open_readers(args):
            with reader:
                visit(reader, visitor)
    except OSError as e:
        logger.error("Read failed: %s", e)
        return 1
    except KeyboardInterrupt:
        pass

    logger.info(
        "Decoded %d records, %d sentences failed", visitor.records, visitor.failures
    )
    return 0
