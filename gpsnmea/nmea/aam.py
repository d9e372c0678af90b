"""AAM sentence decoder.

AAM Sentence Format:
    $GPAAM,A,A,0.10,N,WPTNME*32
           | | |    | |
           | | |    | +-- Waypoint name
           | | |    +-- Radius units (N = nautical miles)
           | | +-- Arrival circle radius
           | +-- Perpendicular passed at waypoint (A = yes)
           +-- Arrival circle entered (A = yes)
"""

from gpsnmea.nmea.errors import SentenceShapeError
from gpsnmea.nmea.fields import FieldParser
from gpsnmea.nmea.types import AAMData

# The unit and waypoint name are optional
_MINIMUM_FIELD_COUNT = 4


def _optional_field(fields: list[str], index: int) -> str | None:
    if len(fields) <= index or not fields[index]:
        return None
    return fields[index]


def decode_aam(fields: list[str]) -> AAMData:
    """Decode the fields of an AAM sentence.

    Raises:
        SentenceShapeError: Fewer than 4 fields.
        FieldDecodeError: The radius is malformed.
    """
    if len(fields) < _MINIMUM_FIELD_COUNT:
        raise SentenceShapeError(
            f"Unexpected AAM sentence: {fields!r} (len={len(fields)})", fields
        )

    parser = FieldParser()
    aam = AAMData(
        arrival=fields[1] == "A",
        perpendicular=fields[2] == "A",
        radius=parser.parse_float(fields[3]),
        radius_units=_optional_field(fields, 4),
        waypoint=_optional_field(fields, 5),
    )
    parser.raise_for_error(fields)

    return aam
