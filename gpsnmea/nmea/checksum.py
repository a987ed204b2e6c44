"""Framing and checksum checks for raw NMEA sentences.

A sentence is accepted only when its frame is exact: it opens with '$', the
'*' delimiter sits three characters before the end, and the two characters
after it are the hexadecimal XOR of every byte in between. Nothing is
trimmed first, so a trailing "\\r\\n" must be removed by the caller.

    $GPGSA,A,3,03,04,01,32,22,28,11,,,,,,2.32,0.95,2.11*02
     ^--------------- XOR over these bytes ------------^ ^^

Sentences are 7-bit ASCII on the wire. A line carrying any other character
is rejected outright rather than checksummed.
"""

import string

_HEX_DIGITS = frozenset(string.hexdigits)

# The shortest acceptable sentence is "$T,*CC".
_MINIMUM_SENTENCE_LENGTH = 6

# '*' followed by two hex digits.
_CHECKSUM_SUFFIX_LENGTH = 3


def compute_checksum(content: str) -> int:
    """XOR the UTF-8 bytes of ``content``.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> compute_checksum("GPGGA")
        86
    """
    result = 0
    for byte in content.encode("utf-8"):
        result ^= byte
    return result


def _parse_provided_checksum(text: str) -> int | None:
    """Decode the two hex digits after '*', or None if they are not hex."""
    # int() alone would also accept signs and surrounding whitespace
    if len(text) != 2 or any(c not in _HEX_DIGITS for c in text):
        return None
    return int(text, 16)


def is_valid_sentence(sentence: str) -> bool:
    """Validate the framing and checksum of an NMEA sentence.

    The sentence is rejected when:
    - it is shorter than 6 characters
    - it contains a non-ASCII character
    - it does not start with '$'
    - the character three positions from the end is not '*'
    - the two trailing characters are not hexadecimal digits
    - the XOR of the characters between '$' and '*' differs from them

    Unlike the line reader, no whitespace is stripped here: the checksum
    delimiter must sit exactly three characters from the end.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.

    Returns:
        True if the sentence is well formed and the checksum matches.

    Example:
        >>> is_valid_sentence("$GPGGA,064951.000,,,,,0,0,,,M,,M,,*47")
        True
        >>> is_valid_sentence("$GPGGA,064951.000,,,,,0,0,,,M,,M,,*48")
        False
    """
    length = len(sentence)
    if length < _MINIMUM_SENTENCE_LENGTH or not sentence.isascii():
        return False

    end = length - _CHECKSUM_SUFFIX_LENGTH
    if sentence[0] != "$" or sentence[end] != "*":
        return False

    provided = _parse_provided_checksum(sentence[end + 1 :])
    if provided is None:
        return False

    return compute_checksum(sentence[1:end]) == provided
