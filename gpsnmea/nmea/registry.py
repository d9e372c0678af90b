"""Sentence registry: from a raw line to a dispatched record.

The registry maps a sentence tag, matched verbatim including its leading '$'
(e.g. "$GPRMC"), to the decoder for that kind of sentence. Tags are registered
for every supported talker ID, so "$GNGGA" from a multi-constellation
receiver decodes exactly like "$GPGGA".

A tag that is not registered is not an error: the sentence is dropped.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from gpsnmea.nmea.aam import decode_aam
from gpsnmea.nmea.checksum import validate_checksum
from gpsnmea.nmea.errors import ChecksumError
from gpsnmea.nmea.gga import decode_gga
from gpsnmea.nmea.gll import decode_gll
from gpsnmea.nmea.gsa import decode_gsa
from gpsnmea.nmea.gst import decode_gst
from gpsnmea.nmea.gsv import decode_gsv
from gpsnmea.nmea.handlers import dispatch, supports
from gpsnmea.nmea.rmc import decode_rmc
from gpsnmea.nmea.tokenizer import split_fields
from gpsnmea.nmea.types import (
    AAMData,
    GGAData,
    GLLData,
    GSAData,
    GSTData,
    GSVData,
    RMCData,
    VTGData,
    ZDAData,
)
from gpsnmea.nmea.vtg import decode_vtg
from gpsnmea.nmea.zda import decode_zda

logger = logging.getLogger(__name__)

# Supported NMEA talker IDs for multi-constellation GNSS receivers.
# Each 2-character prefix identifies the satellite system:
#   GP = GPS (USA)
#   GN = Multi-GNSS (combined solution)
#   GL = GLONASS (Russia)
#   GA = Galileo (Europe)
#   GB = BeiDou (China)
#   GQ = QZSS (Japan)
VALID_TALKER_IDS = ("GP", "GN", "GL", "GA", "GB", "GQ")


@dataclass(frozen=True)
class SentenceDecoder:
    """Registry entry for one kind of sentence.

    Attributes:
        record_type: Record class the decoder produces; it also selects the
            handler capability.
        decode: Function from tokenized fields to a record. Raises
            ``SentenceShapeError`` or ``FieldDecodeError``.
    """

    record_type: type
    decode: Callable[[list[str]], Any]


_DECODERS_BY_SENTENCE_TYPE = {
    "RMC": SentenceDecoder(RMCData, decode_rmc),
    "VTG": SentenceDecoder(VTGData, decode_vtg),
    "GGA": SentenceDecoder(GGAData, decode_gga),
    "GSA": SentenceDecoder(GSAData, decode_gsa),
    "GLL": SentenceDecoder(GLLData, decode_gll),
    "ZDA": SentenceDecoder(ZDAData, decode_zda),
    "GSV": SentenceDecoder(GSVData, decode_gsv),
    "AAM": SentenceDecoder(AAMData, decode_aam),
    "GST": SentenceDecoder(GSTData, decode_gst),
}

SENTENCE_DECODERS: dict[str, SentenceDecoder] = {
    f"${talker_id}{sentence_type}": decoder
    for talker_id in VALID_TALKER_IDS
    for sentence_type, decoder in _DECODERS_BY_SENTENCE_TYPE.items()
}


def _lookup(sentence: str) -> tuple[list[str], SentenceDecoder] | None:
    """Validate and tokenize a sentence, then find its decoder.

    Returns:
        The fields and decoder, or None for an unrecognized tag.

    Raises:
        ChecksumError: If the checksum is invalid.
    """
    if not validate_checksum(sentence):
        raise ChecksumError(sentence)

    fields = split_fields(sentence)
    decoder = SENTENCE_DECODERS.get(fields[0])
    if decoder is None:
        logger.debug("Ignoring unrecognized sentence %s", fields[0])
        return None

    return fields, decoder


def decode_sentence(sentence: str) -> Any:
    """Decode a sentence into its record without dispatching it.

    Args:
        sentence: Raw NMEA sentence; surrounding whitespace is ignored.

    Returns:
        The decoded record, or None if the tag is not recognized.

    Raises:
        ChecksumError: The checksum is invalid.
        SentenceShapeError: Wrong field count or unit markers.
        FieldDecodeError: A field did not parse.

    Example:
        >>> decode_sentence("$GPAAM,A,A,0.10,N,WPTNME*32")
        AAMData(arrival=True, perpendicular=True, radius=0.1, radius_units='N', waypoint='WPTNME')
    """
    found = _lookup(sentence)
    if found is None:
        return None

    fields, decoder = found
    return decoder.decode(fields)


def parse_sentence(sentence: str, handler: Any) -> Any:
    """Decode a sentence and hand the record to the matching handler method.

    This is the per-line pipeline: checksum validation, tokenization,
    registry lookup, capability check, decoding, and dispatch. The handler
    is invoked at most once, and only after decoding fully succeeded.

    Args:
        sentence: Raw NMEA sentence; surrounding whitespace is ignored.
        handler: Object implementing any subset of the handler capabilities.

    Returns:
        The dispatched record, or None if the tag is not recognized or the
        handler lacks the capability for this kind (the sentence is then not
        decoded at all).

    Raises:
        ChecksumError: The checksum is invalid.
        SentenceShapeError: Wrong field count or unit markers.
        FieldDecodeError: A field did not parse.
    """
    found = _lookup(sentence)
    if found is None:
        return None

    fields, decoder = found
    if not supports(handler, decoder.record_type):
        return None

    record = decoder.decode(fields)
    dispatch(record, handler)
    return record
