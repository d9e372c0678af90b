"""gpsnmea package for decoding NMEA 0183 GPS sentences."""

from gpsnmea.gnss import (
    GPSDLineReader,
    GSVAccumulator,
    ignore_errors,
    log_errors,
    process,
)
from gpsnmea.nmea import (
    AAMData,
    ChecksumError,
    FieldDecodeError,
    FixQuality,
    GGAData,
    GLLData,
    GSAData,
    GSAFix,
    GSTData,
    GSVData,
    GSVSatInfo,
    NMEAError,
    RMCData,
    SentenceShapeError,
    VTGData,
    ZDAData,
    decode_sentence,
    parse_sentence,
    validate_checksum,
)

__all__ = [
    "AAMData",
    "ChecksumError",
    "FieldDecodeError",
    "FixQuality",
    "GGAData",
    "GLLData",
    "GPSDLineReader",
    "GSAData",
    "GSAFix",
    "GSTData",
    "GSVAccumulator",
    "GSVData",
    "GSVSatInfo",
    "NMEAError",
    "RMCData",
    "SentenceShapeError",
    "VTGData",
    "ZDAData",
    "decode_sentence",
    "ignore_errors",
    "log_errors",
    "parse_sentence",
    "process",
    "validate_checksum",
]
