"""Sentence dispatch engine.

Turns a stream of text lines into decoded records. Each line is handled
independently:

1. Lines that fail ``is_valid_sentence`` are skipped without notice.
2. The sentence tag is the text between '$' and the first ','.
3. The tag selects a decoder; unsupported tags decode to nothing.
4. Decode failures are reported, never raised: one bad sentence does not
   stop the stream.

Two consumption patterns are supported.

Callbacks, with a ``Visitor``::

    with open("track.nmea") as stream:
        visit(stream, visitor)

Direct results, one ``ParseResult`` per valid line::

    for result in iter_sentences(stream):
        if result.record is not None:
            process(result.record)

Exceptions raised by the line source itself (``OSError`` from a file,
``SerialException`` from a port) are not caught and end the iteration.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Protocol

from gpsnmea.nmea.checksum import is_valid_sentence
from gpsnmea.nmea.errors import SentenceDecodeError
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

__all__ = [
    "BaseVisitor",
    "Visitor",
    "decode_sentence",
    "iter_sentences",
    "parse_sentence",
    "sentence_tag",
    "visit",
]

logger = logging.getLogger(__name__)

_LINE_TERMINATORS = "\r\n"


class Visitor(Protocol):
    """Consumer of the dispatch engine.

    ``on_before_parse`` may veto decoding of a sentence by returning False,
    in which case neither the record callback nor ``on_after_parse`` runs.
    Otherwise ``on_after_parse`` follows every decode attempt with the
    decode error, or None on success.
    """

    def on_before_parse(self, sentence_type: str, sentence: str) -> bool: ...

    def on_after_parse(
        self,
        sentence_type: str,
        sentence: str,
        error: SentenceDecodeError | None,
    ) -> None: ...

    def on_gga(self, record: GGAData) -> None: ...

    def on_rmc(self, record: RMCData) -> None: ...

    def on_gsa(self, record: GSAData) -> None: ...


class BaseVisitor:
    """Visitor that accepts every sentence and ignores every record.

    Subclass and override only the callbacks you need.
    """

    def on_before_parse(self, sentence_type: str, sentence: str) -> bool:
        return True

    def on_after_parse(
        self,
        sentence_type: str,
        sentence: str,
        error: SentenceDecodeError | None,
    ) -> None:
        pass

    def on_gga(self, record: GGAData) -> None:
        pass

    def on_rmc(self, record: RMCData) -> None:
        pass

    def on_gsa(self, record: GSAData) -> None:
        pass


def sentence_tag(sentence: str) -> str:
    """Return the sentence tag of a checksum-valid sentence.

    Example:
        >>> sentence_tag("$GPGGA,064951.000,,,,,0,0,,,M,,M,,*47")
        'GPGGA'
    """
    end = sentence.find(",")
    if end < 0:
        # "$TAG*CC" has no data fields at all
        end = len(sentence) - 3
    return sentence[1:end]


def decode_sentence(sentence: str) -> NMEARecord | None:
    """Decode a checksum-valid sentence into its record.

    Args:
        sentence: A sentence for which ``is_valid_sentence`` returned True

    Returns:
        The decoded record, or None if the sentence type is not supported.

    Raises:
        SentenceDecodeError: If the fields do not match the sentence layout.
    """
    sentence_type = SentenceType.from_tag(sentence_tag(sentence))
    return _decode(sentence_type, sentence)


def _decode(sentence_type: SentenceType, sentence: str) -> NMEARecord | None:
    if sentence_type is SentenceType.GGA:
        return decode_gga(split_fields(sentence))
    elif sentence_type is SentenceType.RMC:
        return decode_rmc(split_fields(sentence))
    elif sentence_type is SentenceType.GSA:
        return decode_gsa(split_fields(sentence))
    else:
        # Reserved for sentence types that are not decoded yet (VTG, GSV, ...)
        return None


def _strip_line(line: str) -> str:
    return line.rstrip(_LINE_TERMINATORS)


def _attempt(tag: str, sentence: str) -> ParseResult:
    sentence_type = SentenceType.from_tag(tag)
    try:
        record = _decode(sentence_type, sentence)
    except SentenceDecodeError as e:
        logger.debug("Failed to decode %r: %s", sentence, e)
        return ParseResult(sentence_type, tag, sentence, error=e)
    return ParseResult(sentence_type, tag, sentence, record=record)


def parse_sentence(line: str) -> ParseResult | None:
    """Validate and decode a single line.

    Returns:
        A ParseResult carrying the record or the decode error, or None if the
        line is not a checksum-valid sentence.
    """
    sentence = _strip_line(line)
    if not is_valid_sentence(sentence):
        logger.debug("Skipping invalid sentence %r", sentence)
        return None
    return _attempt(sentence_tag(sentence), sentence)


def iter_sentences(lines: Iterable[str]) -> Iterator[ParseResult]:
    """Yield one ParseResult per checksum-valid line.

    Invalid lines are skipped. Iteration stops when ``lines`` is exhausted;
    any exception raised by ``lines`` propagates.
    """
    for line in lines:
        result = parse_sentence(line)
        if result is not None:
            yield result


def _deliver(visitor: Visitor, result: ParseResult) -> None:
    if result.record is None:
        return
    if result.sentence_type is SentenceType.GGA:
        visitor.on_gga(result.record)
    elif result.sentence_type is SentenceType.RMC:
        visitor.on_rmc(result.record)
    elif result.sentence_type is SentenceType.GSA:
        visitor.on_gsa(result.record)


def visit(lines: Iterable[str], visitor: Visitor) -> None:
    """Decode every valid sentence in ``lines`` and report it to ``visitor``.

    For each checksum-valid line:
        1. ``on_before_parse(tag, sentence)``; a False return skips the rest.
        2. The sentence is decoded according to its tag.
        3. On success, ``on_gga``/``on_rmc``/``on_gsa`` receives the record.
        4. ``on_after_parse(tag, sentence, error)`` with the decode error or
           None. Unsupported tags are reported as successes.

    Args:
        lines: Line source, e.g. an open text file or an ``NMEAReader``.
        visitor: Consumer of the decoded records.

    Raises:
        Whatever ``lines`` raises while being iterated.
    """
    for line in lines:
        sentence = _strip_line(line)
        if not is_valid_sentence(sentence):
            logger.debug("Skipping invalid sentence %r", sentence)
            continue

        tag = sentence_tag(sentence)
        if not visitor.on_before_parse(tag, sentence):
            logger.debug("Decoding of %s refused by visitor", tag)
            continue

        result = _attempt(tag, sentence)
        _deliver(visitor, result)

        visitor.on_after_parse(tag, sentence, result.error)
