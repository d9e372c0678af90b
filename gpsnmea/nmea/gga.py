"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
           |      |        | |         | | |  |   |     | |    |
           |      |        | |         | | |  |   |     | |    +-- DGPS age and station (optional)
           |      |        | |         | | |  |   |     | +-- Geoid height (M=meters)
           |      |        | |         | | |  |   +-----+-- Altitude above MSL
           |      |        | |         | | |  +-- HDOP (horizontal dilution)
           |      |        | |         | | +-- Number of satellites
           |      |        | |         | +-- Fix quality (0-8)
           |      |        | +---------+-- Longitude + E/W
           |      +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    3 = PPS fix
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Estimated (dead reckoning, NMEA 2.3)
    7 = Manual input mode
    8 = Simulation mode
"""

from gpsnmea.nmea.errors import SentenceShapeError
from gpsnmea.nmea.fields import FieldParser
from gpsnmea.nmea.types import FixQuality, GGAData

# Up to the geoid height unit; the DGPS fields are often omitted
_MINIMUM_FIELD_COUNT = 13

_METERS = "M"


def _validate_shape(fields: list[str]) -> None:
    """Check field count and that altitude and geoid height are in meters."""
    if (
        len(fields) < _MINIMUM_FIELD_COUNT
        or fields[10] != _METERS
        or fields[12] != _METERS
    ):
        raise SentenceShapeError(f"Unexpected GGA sentence: {fields!r}", fields)


def decode_gga(fields: list[str]) -> GGAData:
    """Decode the fields of a GGA sentence.

    Maps NMEA field indices to GGAData attributes:
        fields[1]  -> taken (UTC time of day)
        fields[2]  -> latitude (DDMM.MMMM format)
        fields[3]  -> latitude direction (N/S)
        fields[4]  -> longitude (DDDMM.MMMM format)
        fields[5]  -> longitude direction (E/W)
        fields[6]  -> fix_quality (0-8)
        fields[7]  -> num_satellites
        fields[8]  -> HDOP (horizontal dilution of precision)
        fields[9]  -> altitude above MSL (meters)
        fields[11] -> geoid height (meters)

    An empty fix quality decodes to ``FixQuality.INVALID``, since 0 already
    means "no fix".

    Raises:
        SentenceShapeError: Too few fields, or a unit field other than 'M'.
        FieldDecodeError: A field is malformed or the fix quality code is
            unknown.
    """
    _validate_shape(fields)

    parser = FieldParser()
    gga = GGAData(
        taken=parser.parse_time(fields[1]),
        latitude_degrees=parser.parse_dms(fields[2], fields[3]),
        longitude_degrees=parser.parse_dms(fields[4], fields[5]),
        fix_quality=parser.parse_enum(fields[6], FixQuality),
        num_satellites=parser.parse_int(fields[7]),
        horizontal_dilution_of_precision=parser.parse_float(fields[8]),
        altitude_meters=parser.parse_float(fields[9]),
        geoid_height_meters=parser.parse_float(fields[11]),
    )
    parser.raise_for_error(fields)

    return gga
