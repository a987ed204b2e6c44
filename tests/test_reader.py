"""Tests for the NMEA line reader."""

import io
import threading
from unittest.mock import MagicMock, patch

import pytest
import serial

from gpsnmea import NMEAReader, iter_sentences

GGA_NO_FIX = "$GPGGA,064951.123,,,,,0,0,,,M,,M,,*47"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _mock_port(*reads: bytes | Exception) -> MagicMock:
    """Build a fake serial port whose readline() returns ``reads`` in order."""
    port = MagicMock()
    port.readline.side_effect = list(reads)
    return port


# ---------------------------------------------------------------------------
# Files and stdin
# ---------------------------------------------------------------------------


class TestFileSource:
    """Tests for NMEAReader reading capture files and stdin."""

    def test_yields_stripped_lines(self, tmp_path):
        capture = tmp_path / "track.nmea"
        capture.write_bytes(f"{GGA_NO_FIX}\r\n  noise  \n{GGA_NO_FIX}".encode())

        with NMEAReader(path=str(capture)) as reader:
            assert list(reader) == [GGA_NO_FIX, "noise", GGA_NO_FIX]

    def test_drops_undecodable_bytes(self, tmp_path):
        capture = tmp_path / "track.nmea"
        capture.write_bytes(b"\xff\xfe" + GGA_NO_FIX.encode() + b"\r\n")

        with NMEAReader(path=str(capture)) as reader:
            assert reader.read_line() == GGA_NO_FIX
            assert reader.read_line() is None

    def test_empty_file(self, tmp_path):
        capture = tmp_path / "empty.nmea"
        capture.write_bytes(b"")

        with NMEAReader(path=str(capture)) as reader:
            assert list(reader) == []

    def test_closes_file_on_exit(self, tmp_path):
        capture = tmp_path / "track.nmea"
        capture.write_bytes(GGA_NO_FIX.encode())

        reader = NMEAReader(path=str(capture))
        with reader:
            pass
        with pytest.raises(RuntimeError):
            reader.read_line()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            with NMEAReader(path=str(tmp_path / "missing.nmea")):
                pass

    def test_stdin(self, monkeypatch):
        stdin = io.TextIOWrapper(io.BytesIO(f"{GGA_NO_FIX}\n".encode()))
        monkeypatch.setattr("sys.stdin", stdin)

        with NMEAReader(path="-") as reader:
            assert list(reader) == [GGA_NO_FIX]
        assert not stdin.closed

    def test_feeds_the_dispatch_engine(self, tmp_path):
        capture = tmp_path / "track.nmea"
        capture.write_bytes(f"{GGA_NO_FIX}\r\n$BAD\r\n".encode())

        with NMEAReader(path=str(capture)) as reader:
            results = list(iter_sentences(reader))
        assert len(results) == 1
        assert results[0].record.position_fix == 0


# ---------------------------------------------------------------------------
# Serial ports
# ---------------------------------------------------------------------------


class TestSerialSource:
    """Tests for NMEAReader reading a serial port."""

    def test_opens_port_with_settings(self):
        port = _mock_port()
        with patch("gpsnmea.reader.serial.serial_for_url", return_value=port) as opener:
            with NMEAReader(port="/dev/ttyUSB0", baudrate=4800, timeout=0.5):
                pass
        opener.assert_called_once_with("/dev/ttyUSB0", baudrate=4800, timeout=0.5)
        port.close.assert_called_once()

    def test_timeouts_are_retried(self):
        port = _mock_port(b"", b"", (GGA_NO_FIX + "\r\n").encode())
        with patch("gpsnmea.reader.serial.serial_for_url", return_value=port):
            with NMEAReader(port="/dev/ttyUSB0") as reader:
                assert reader.read_line() == GGA_NO_FIX

    def test_cancel_ends_iteration_at_next_timeout(self):
        port = _mock_port(b"first\r\n", b"", b"second\r\n", b"")
        with patch("gpsnmea.reader.serial.serial_for_url", return_value=port):
            with NMEAReader(port="/dev/ttyUSB0") as reader:
                assert reader.read_line() == "first"
                assert reader.read_line() == "second"
                reader.cancel()
                assert reader.read_line() is None

    def test_serial_error_propagates(self):
        port = _mock_port(b"first\r\n", serial.SerialException("device disconnected"))
        with patch("gpsnmea.reader.serial.serial_for_url", return_value=port):
            with NMEAReader(port="/dev/ttyUSB0") as reader:
                lines = iter(reader)
                assert next(lines) == "first"
                with pytest.raises(serial.SerialException):
                    next(lines)

    def test_partial_reads_are_joined(self):
        port = _mock_port(b"$GPGGA,064", b"", (GGA_NO_FIX[10:] + "\r\n").encode())
        with patch("gpsnmea.reader.serial.serial_for_url", return_value=port):
            with NMEAReader(port="/dev/ttyUSB0") as reader:
                assert reader.read_line() == GGA_NO_FIX

    def test_cancel_returns_buffered_partial_line(self):
        port = _mock_port(b"$GPGGA,064", b"", b"")
        with patch("gpsnmea.reader.serial.serial_for_url", return_value=port):
            with NMEAReader(port="/dev/ttyUSB0") as reader:
                reader.cancel()
                assert reader.read_line() == "$GPGGA,064"
                assert reader.read_line() is None

    def test_sentence_straddling_a_timeout_on_loopback(self):
        port = serial.serial_for_url("loop://", timeout=0.05)
        port.write(GGA_NO_FIX[:10].encode())
        writer = threading.Timer(0.2, port.write, args=[(GGA_NO_FIX[10:] + "\r\n").encode()])
        with patch("gpsnmea.reader.serial.serial_for_url", return_value=port):
            with NMEAReader(port="loop://", timeout=0.05) as reader:
                writer.start()
                try:
                    line = reader.read_line()
                finally:
                    writer.join()
        assert line == GGA_NO_FIX

    def test_loopback_url(self):
        with NMEAReader(port="loop://", timeout=0.05) as reader:
            reader.cancel()
            assert reader.read_line() is None


class TestReaderArguments:
    """Tests for NMEAReader argument validation."""

    def test_requires_a_source(self):
        with pytest.raises(ValueError):
            NMEAReader()

    def test_rejects_two_sources(self):
        with pytest.raises(ValueError):
            NMEAReader(path="track.nmea", port="/dev/ttyUSB0")

    def test_read_outside_context_manager(self):
        with pytest.raises(RuntimeError):
            NMEAReader(path="track.nmea").read_line()
