"""RMC sentence decoder.

RMC (Recommended Minimum Navigation Information) carries the essential fix
data: time and date, position, speed, and track.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
           |      | |        | |         | |     |     |      |     |
           |      | |        | |         | |     |     |      +-----+-- Magnetic variation + E/W
           |      | |        | |         | |     |     +-- Date (DDMMYY)
           |      | |        | |         | |     +-- Track angle (degrees true)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A=active, V=void)
           +-- UTC time (HHMMSS.ss)

NMEA 2.3 receivers append an FAA mode indicator after the magnetic variation.
"""

from gpsnmea.nmea.errors import SentenceShapeError
from gpsnmea.nmea.fields import FieldParser
from gpsnmea.nmea.types import RMCData

# Tag plus 11 data fields; the FAA mode indicator is optional
_MINIMUM_FIELD_COUNT = 12

_MODE_INDEX = 12


def _validate_shape(fields: list[str]) -> None:
    if len(fields) < _MINIMUM_FIELD_COUNT:
        raise SentenceShapeError(
            f"Unexpected RMC sentence: {fields!r} (len={len(fields)})", fields
        )

    if not fields[2]:
        raise SentenceShapeError(f"RMC sentence without status: {fields!r}", fields)


def _parse_magnetic_variation(
    parser: FieldParser, value: str, direction: str
) -> float:
    """Parse the magnetic variation; West is negative, empty means 0.0."""
    if not value:
        return 0.0

    variation = parser.parse_float(value)
    if direction == "W":
        return -variation

    return variation


def _extract_mode(fields: list[str]) -> str | None:
    if len(fields) <= _MODE_INDEX or not fields[_MODE_INDEX]:
        return None
    return fields[_MODE_INDEX]


def decode_rmc(fields: list[str]) -> RMCData:
    """Decode the fields of an RMC sentence.

    Maps NMEA field indices to RMCData attributes:
        fields[1] + fields[9] -> timestamp (HHMMSS.ss + DDMMYY, UTC)
        fields[2]             -> status (first character)
        fields[3], fields[4]  -> latitude_degrees
        fields[5], fields[6]  -> longitude_degrees
        fields[7]             -> speed_knots
        fields[8]             -> track_degrees
        fields[10], fields[11] -> magnetic_variation_degrees
        fields[12]            -> mode (if present)

    Args:
        fields: Tokenized sentence, field 0 being the tag.

    Returns:
        The decoded RMCData.

    Raises:
        SentenceShapeError: Too few fields, or an empty status field.
        FieldDecodeError: A time, date, position, or numeric field is
            malformed.
    """
    _validate_shape(fields)

    parser = FieldParser()
    rmc = RMCData(
        timestamp=parser.parse_datetime(fields[1], fields[9]),
        status=fields[2][0],
        latitude_degrees=parser.parse_dms(fields[3], fields[4]),
        longitude_degrees=parser.parse_dms(fields[5], fields[6]),
        speed_knots=parser.parse_float(fields[7]),
        track_degrees=parser.parse_float(fields[8]),
        magnetic_variation_degrees=_parse_magnetic_variation(
            parser, fields[10], fields[11]
        ),
        mode=_extract_mode(fields),
    )
    parser.raise_for_error(fields)

    return rmc
