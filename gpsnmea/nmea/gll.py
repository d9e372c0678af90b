"""GLL sentence decoder.

GLL Sentence Format:
    $GPGLL,4916.45,N,12311.12,W,225444,A,*1D
           |       | |        | |      |
           |       | |        | |      +-- Status (A = active, V = void)
           |       | |        | +-- UTC time (HHMMSS.ss)
           |       | +--------+-- Longitude + E/W
           +-------+-- Latitude + N/S
"""

from gpsnmea.nmea.errors import SentenceShapeError
from gpsnmea.nmea.fields import FieldParser
from gpsnmea.nmea.types import GLLData

_MINIMUM_FIELD_COUNT = 7


def decode_gll(fields: list[str]) -> GLLData:
    """Decode the fields of a GLL sentence.

    Raises:
        SentenceShapeError: Fewer than 7 fields.
        FieldDecodeError: A position or time field is malformed.
    """
    if len(fields) < _MINIMUM_FIELD_COUNT:
        raise SentenceShapeError(
            f"Unexpected GLL sentence: {fields!r} (len={len(fields)})", fields
        )

    parser = FieldParser()
    gll = GLLData(
        latitude_degrees=parser.parse_dms(fields[1], fields[2]),
        longitude_degrees=parser.parse_dms(fields[3], fields[4]),
        taken=parser.parse_time(fields[5]),
        active=fields[6] == "A",
    )
    parser.raise_for_error(fields)

    return gll
