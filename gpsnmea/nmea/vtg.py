"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS:
ground speed and heading.

VTG Sentence Format:
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48
           |     | |     | |     | |     |
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Mode Indicators (FAA mode, NMEA 2.3+, optional tenth field):
    A = Autonomous (standard GPS positioning)
    D = Differential (DGPS or RTK)
    E = Estimated (dead reckoning)
    N = Not valid (no fix)

The unit tags (T, M, N, K) must be present exactly; a sentence with different
tags is rejected rather than guessed at.
"""

from gpsnmea.nmea.errors import SentenceShapeError
from gpsnmea.nmea.fields import FieldParser
from gpsnmea.nmea.types import VTGData

# VTG has 9 fields in basic format, 10 with FAA mode indicator
_MINIMUM_FIELD_COUNT = 9

_MODE_INDEX = 9

# field index -> expected unit tag
_UNIT_TAGS = {2: "T", 4: "M", 6: "N", 8: "K"}


def _validate_shape(fields: list[str]) -> None:
    if len(fields) < _MINIMUM_FIELD_COUNT or any(
        fields[index] != tag for index, tag in _UNIT_TAGS.items()
    ):
        raise SentenceShapeError(f"Unexpected VTG sentence: {fields!r}", fields)


def _extract_mode(fields: list[str]) -> str | None:
    """Extract the FAA mode indicator, None if missing or empty."""
    if len(fields) <= _MODE_INDEX or not fields[_MODE_INDEX]:
        return None
    return fields[_MODE_INDEX]


def decode_vtg(fields: list[str]) -> VTGData:
    """Decode the fields of a VTG sentence.

    Maps NMEA field indices to VTGData attributes:
        fields[1] -> track_true_degrees
        fields[3] -> track_magnetic_degrees
        fields[5] -> speed_knots
        fields[7] -> speed_kilometers_per_hour
        fields[9] -> mode (FAA mode indicator, if present)

    Raises:
        SentenceShapeError: Too few fields or a unit tag mismatch.
        FieldDecodeError: A numeric field is malformed.
    """
    _validate_shape(fields)

    parser = FieldParser()
    vtg = VTGData(
        track_true_degrees=parser.parse_float(fields[1]),
        track_magnetic_degrees=parser.parse_float(fields[3]),
        speed_knots=parser.parse_float(fields[5]),
        speed_kilometers_per_hour=parser.parse_float(fields[7]),
        mode=_extract_mode(fields),
    )
    parser.raise_for_error(fields)

    return vtg
