"""GST sentence decoder.

GST (GNSS Pseudorange Noise Statistics) reports the error estimates of the
position solution.

GST Sentence Format:
    $GPGST,024603.00,3.2,6.6,4.7,47.3,5.8,5.6,22.0*58
           |         |   |   |   |    |   |   |
           |         |   |   |   |    |   |   +-- Altitude error (m)
           |         |   |   |   |    |   +-- Longitude error (m)
           |         |   |   |   |    +-- Latitude error (m)
           |         |   |   |   +-- Orientation of semi-major axis (degrees true)
           |         |   |   +-- Semi-minor axis of error ellipse (m)
           |         |   +-- Semi-major axis of error ellipse (m)
           |         +-- Total RMS of range inputs
           +-- UTC time of the associated GGA fix

All values except the time and orientation are standard deviations.
"""

from gpsnmea.nmea.errors import SentenceShapeError
from gpsnmea.nmea.fields import FieldParser
from gpsnmea.nmea.types import GSTData

_MINIMUM_FIELD_COUNT = 9


def decode_gst(fields: list[str]) -> GSTData:
    """Decode the fields of a GST sentence.

    Raises:
        SentenceShapeError: Fewer than 9 fields.
        FieldDecodeError: The time or a deviation field is malformed.
    """
    if len(fields) < _MINIMUM_FIELD_COUNT:
        raise SentenceShapeError(
            f"Unexpected GST sentence: {fields!r} (len={len(fields)})", fields
        )

    parser = FieldParser()
    gst = GSTData(
        taken=parser.parse_time(fields[1]),
        rms_deviation=parser.parse_float(fields[2]),
        major_deviation=parser.parse_float(fields[3]),
        minor_deviation=parser.parse_float(fields[4]),
        major_orientation_degrees=parser.parse_float(fields[5]),
        latitude_error_deviation=parser.parse_float(fields[6]),
        longitude_error_deviation=parser.parse_float(fields[7]),
        altitude_error_deviation=parser.parse_float(fields[8]),
    )
    parser.raise_for_error(fields)

    return gst
