"""Exceptions raised while decoding NMEA sentences.

Structural problems (bad checksum, missing '$' or '*') are not errors: the
checksum validator returns ``False`` and the line is skipped. The exceptions
below describe sentences that passed the checksum but whose fields could not
be decoded.

Hierarchy::

    NMEAError (ValueError)
    +-- FieldFormatError      a single field does not match its fixed format
    +-- SentenceDecodeError   a sentence could not be turned into a record
        +-- FieldCountError   the sentence has the wrong number of fields
"""

from enum import Enum


class FieldFormatKind(Enum):
    """Reason a primitive field parser rejected its input."""

    LENGTH = "length"
    SEPARATOR = "separator"
    NUMBER = "number"
    VALUE = "value"


class NMEAError(ValueError):
    """Base class for NMEA decoding errors."""


class FieldFormatError(NMEAError):
    """A field does not match its expected fixed-width format.

    Attributes:
        kind: Which check failed (length, separator position, numeric parse,
            or an out-of-set value such as a hemisphere indicator).
        field: Name of the field being parsed, e.g. ``"latitude"``.
        text: The raw field text.
    """

    def __init__(self, kind: FieldFormatKind, field: str, text: str, detail: str = "") -> None:
        self.kind = kind
        self.field = field
        self.text = text
        message = f"invalid {field} {text!r}: {kind.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class SentenceDecodeError(NMEAError):
    """A checksum-valid sentence could not be decoded into a record.

    Attributes:
        sentence_type: Sentence tag, e.g. ``"GPGGA"``.
        field: Name of the first field that failed.
    """

    def __init__(self, sentence_type: str, field: str, reason: str) -> None:
        self.sentence_type = sentence_type
        self.field = field
        self.reason = reason
        super().__init__(f"failed to decode {sentence_type} {field}: {reason}")


class FieldCountError(SentenceDecodeError):
    """The sentence does not carry the number of fields its type requires."""

    def __init__(self, sentence_type: str, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            sentence_type,
            "field_count",
            f"expected {expected} fields, got {actual}",
        )
