"""NMEA 0183 sentence decoding and handler dispatch."""

from gpsnmea.nmea.checksum import compute_checksum, validate_checksum
from gpsnmea.nmea.errors import (
    ChecksumError,
    FieldDecodeError,
    NMEAError,
    SentenceShapeError,
)
from gpsnmea.nmea.fields import FieldParser
from gpsnmea.nmea.handlers import (
    AAMHandler,
    GGAHandler,
    GLLHandler,
    GSAHandler,
    GSTHandler,
    GSVHandler,
    RMCHandler,
    VTGHandler,
    ZDAHandler,
    dispatch,
)
from gpsnmea.nmea.registry import (
    SENTENCE_DECODERS,
    VALID_TALKER_IDS,
    decode_sentence,
    parse_sentence,
)
from gpsnmea.nmea.tokenizer import split_fields
from gpsnmea.nmea.types import (
    AAMData,
    FixQuality,
    GGAData,
    GLLData,
    GSAData,
    GSAFix,
    GSTData,
    GSVData,
    GSVSatInfo,
    RMCData,
    VTGData,
    ZDAData,
)

__all__ = [
    "AAMData",
    "AAMHandler",
    "ChecksumError",
    "FieldDecodeError",
    "FieldParser",
    "FixQuality",
    "GGAData",
    "GGAHandler",
    "GLLData",
    "GLLHandler",
    "GSAData",
    "GSAFix",
    "GSAHandler",
    "GSTData",
    "GSTHandler",
    "GSVData",
    "GSVHandler",
    "GSVSatInfo",
    "NMEAError",
    "RMCData",
    "RMCHandler",
    "SENTENCE_DECODERS",
    "SentenceShapeError",
    "VALID_TALKER_IDS",
    "VTGData",
    "VTGHandler",
    "ZDAData",
    "ZDAHandler",
    "compute_checksum",
    "decode_sentence",
    "dispatch",
    "parse_sentence",
    "split_fields",
    "validate_checksum",
]
