"""Exceptions raised while decoding NMEA sentences.

Every recoverable decode problem is an ``NMEAError``. The stream driver
catches exactly this family and hands it to the caller's error policy;
anything else (I/O failures of the line source, bugs in a handler) propagates.

Unknown sentence tags and handlers lacking a capability are not errors and
have no exception here.
"""


class NMEAError(Exception):
    """Base class for sentence decoding failures.

    Attributes:
        fields: Tokenized fields of the offending sentence, or an empty list
            when the sentence never got as far as tokenization.
    """

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields: list[str] = list(fields) if fields is not None else []


class ChecksumError(NMEAError):
    """The sentence failed the structural or XOR checksum check."""

    def __init__(self, sentence: str) -> None:
        super().__init__(f"Bad checksum: {sentence!r}")
        self.sentence = sentence


class SentenceShapeError(NMEAError):
    """A known sentence has the wrong field count or unit markers."""


class FieldDecodeError(NMEAError):
    """A numeric, time, or position field of a known sentence did not parse.

    The underlying ``ValueError`` (the last one encountered while decoding the
    record) is available as ``__cause__``.
    """
