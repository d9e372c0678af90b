"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) reports the fix type, which satellites
are used in the solution, and the dilution of precision figures.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                     |   |   |
           | | |                     |   |   +-- VDOP
           | | |                     |   +-- HDOP
           | | |                     +-- PDOP
           | | +-- PRNs of satellites used (12 slots, empty slots allowed)
           | +-- Fix type (1 = no fix, 2 = 2D, 3 = 3D)
           +-- Selection mode (A = automatic, M = manual)
"""

from gpsnmea.nmea.errors import SentenceShapeError
from gpsnmea.nmea.fields import FieldParser
from gpsnmea.nmea.types import GSAData, GSAFix

_FIELD_COUNT = 18

_SATELLITE_SLOTS = slice(3, 15)


def decode_gsa(fields: list[str]) -> GSAData:
    """Decode the fields of a GSA sentence.

    Empty PRN slots are skipped, so ``satellites_used`` holds only the
    satellites actually reported.

    Raises:
        SentenceShapeError: The sentence does not have exactly 18 fields.
        FieldDecodeError: A PRN, fix type, or DOP field is malformed.
    """
    if len(fields) != _FIELD_COUNT:
        raise SentenceShapeError(
            f"Unexpected GSA sentence: {fields!r} (len={len(fields)})", fields
        )

    parser = FieldParser()
    satellites_used = tuple(
        parser.parse_int(prn) for prn in fields[_SATELLITE_SLOTS] if prn
    )
    gsa = GSAData(
        auto=fields[1] == "A",
        fix=parser.parse_enum(fields[2], GSAFix),
        satellites_used=satellites_used,
        position_dilution_of_precision=parser.parse_float(fields[15]),
        horizontal_dilution_of_precision=parser.parse_float(fields[16]),
        vertical_dilution_of_precision=parser.parse_float(fields[17]),
    )
    parser.raise_for_error(fields)

    return gsa
