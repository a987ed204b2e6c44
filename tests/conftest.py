"""Shared fixtures for NMEA decoding tests."""

from collections.abc import Callable

import pytest

from gpsnmea.nmea import compute_checksum


def _with_checksum(sentence: str) -> str:
    """Replace whatever follows '*' with the correct two-digit checksum."""
    body = sentence[1 : sentence.index("*")]
    return f"${body}*{compute_checksum(body):02X}"


@pytest.fixture
def checksummed() -> Callable[[str], str]:
    return _with_checksum
