"""NMEAReader: line source for NMEA sentence streams.

Reads raw NMEA text from one of:

* a capture file (``path="track.nmea"``),
* standard input (``path="-"``),
* a serial GPS receiver (``port="/dev/ttyUSB0"``) or a pyserial URL
  such as ``"loop://"``.

Reading strategy:
    Lines are read as bytes and decoded as ASCII with undecodable bytes
    dropped, since receivers emit garbage while they power up. Surrounding
    whitespace (including the ``\\r\\n`` terminator) is stripped. A file or
    stdin ends at EOF. A serial port has no EOF: a read that times out is
    retried until ``cancel()`` is called, and bytes received before the
    timeout are kept until the rest of their line arrives.

Read errors (``OSError``, ``serial.SerialException``) are not caught and end
the iteration.
"""

import logging
import sys
from collections.abc import Iterator
from types import TracebackType
from typing import IO, Any

import serial

__all__ = ["NMEAReader"]

logger = logging.getLogger(__name__)

# --- serial defaults ----------------------------------------------------------

_BAUDRATE = 9600  # NMEA 0183 standard rate
_TIMEOUT = 1.0  # serial read timeout; determines maximum cancel() latency

_STDIN = "-"


class NMEAReader:
    """Context manager yielding NMEA text lines from a file, stdin or a port.

    Exactly one of ``path`` and ``port`` must be given.

    Continuous iteration::

        with NMEAReader(port="/dev/ttyUSB0", baudrate=9600) as reader:
            for line in reader:
                process(line)

    Single read::

        with NMEAReader(path="track.nmea") as reader:
            line = reader.read_line()  # None at end of file

    Args:
        path: File to read, or ``"-"`` for standard input.
        port: Serial device name or pyserial URL.
        baudrate: Serial baud rate (default: ``9600``).
        timeout: Serial read timeout in seconds (default: ``1.0``).
    """

    def __init__(
        self,
        path: str | None = None,
        port: str | None = None,
        baudrate: int = _BAUDRATE,
        timeout: float = _TIMEOUT,
    ) -> None:
        """Store source parameters; the source is opened in ``__enter__``."""
        if (path is None) == (port is None):
            raise ValueError("Exactly one of path and port must be given.")
        self._path = path
        self._port = port
        self._baudrate = baudrate
        self._timeout = timeout
        self._stream: IO[bytes] | Any = None
        self._owns_stream = False
        self._cancelled = False
        self._buffer = bytearray()

    def __enter__(self) -> "NMEAReader":
        """Open the source and reset internal state."""
        self._cancelled = False
        self._buffer.clear()
        if self._port is not None:
            self._stream = serial.serial_for_url(
                self._port, baudrate=self._baudrate, timeout=self._timeout
            )
            self._owns_stream = True
            logger.info("Opened serial port %s at %d baud", self._port, self._baudrate)
        elif self._path == _STDIN:
            self._stream = sys.stdin.buffer
            self._owns_stream = False
        else:
            self._stream = open(self._path, "rb")
            self._owns_stream = True
            logger.info("Opened %s", self._path)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the source unless it is standard input."""
        if self._stream is not None and self._owns_stream:
            self._stream.close()
        self._stream = None

    @property
    def is_serial(self) -> bool:
        return self._port is not None

    def cancel(self) -> None:
        """Stop a serial read loop at its next timeout.

        Lines already buffered by the port are still returned; once a read
        comes back empty the iteration ends.
        """
        self._cancelled = True

    def _recv_raw(self) -> bytes | None:
        """Read one raw line; returns ``None`` at the end of the stream.

        A serial read that times out mid-sentence returns a partial line.
        Partial reads are buffered until the newline arrives, so a sentence
        straddling a timeout is returned whole. Whatever is buffered when the
        stream ends or a cancelled read times out is returned as the last line.
        """
        while True:
            raw: bytes = self._stream.readline()
            self._buffer += raw
            if raw.endswith(b"\n"):
                break
            if not raw and (not self.is_serial or self._cancelled):
                break
            # serial timeout: keep what arrived and read again

        if not self._buffer:
            return None
        line = bytes(self._buffer)
        self._buffer.clear()
        return line

    def read_line(self) -> str | None:
        """Read and decode one line; returns ``None`` at the end of the stream.

        Raises:
            RuntimeError: If called outside a ``with`` block.
        """
        if self._stream is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        raw = self._recv_raw()
        if raw is None:
            return None
        return raw.decode("ascii", errors="ignore").strip()

    def __iter__(self) -> Iterator[str]:
        """Yield lines until the end of the stream.

        Yields:
            One decoded, stripped line per received line, including lines
            that are not NMEA sentences; validation is the engine's job.
        """
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line
