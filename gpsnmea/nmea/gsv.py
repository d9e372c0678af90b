"""GSV sentence decoder.

GSV (Satellites in View) lists the satellites the receiver can see. A full
list is split over several sentences of up to four satellites each.

GSV Sentence Format:
    $GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75
           | | |  |  |  |   |
           | | |  |  |  |   +-- SNR (dB, higher is better)
           | | |  |  |  +-- Azimuth (degrees)
           | | |  |  +-- Elevation (degrees)
           | | |  +-- Satellite PRN
           | | |      (PRN, elevation, azimuth, SNR repeat for up to 4 satellites)
           | | +-- Satellites in view
           | +-- Sentence number
           +-- Total number of sentences
"""

from gpsnmea.nmea.errors import SentenceShapeError
from gpsnmea.nmea.fields import FieldParser
from gpsnmea.nmea.types import GSVData, GSVSatInfo

_MINIMUM_FIELD_COUNT = 4

_FIRST_SATELLITE_INDEX = 4
_FIELDS_PER_SATELLITE = 4


def _parse_satellites(
    parser: FieldParser, fields: list[str]
) -> tuple[GSVSatInfo, ...]:
    """Parse the repeating satellite groups; a trailing partial group is dropped."""
    satellites = []
    for start in range(
        _FIRST_SATELLITE_INDEX,
        len(fields) - _FIELDS_PER_SATELLITE + 1,
        _FIELDS_PER_SATELLITE,
    ):
        prn, elevation, azimuth, snr = fields[start : start + _FIELDS_PER_SATELLITE]
        satellites.append(
            GSVSatInfo(
                prn=parser.parse_int(prn),
                elevation_degrees=parser.parse_int(elevation),
                azimuth_degrees=parser.parse_int(azimuth),
                snr=parser.parse_int(snr),
            )
        )
    return tuple(satellites)


def decode_gsv(fields: list[str]) -> GSVData:
    """Decode the fields of a GSV sentence.

    Raises:
        SentenceShapeError: Fewer than 4 fields.
        FieldDecodeError: A count or satellite field is malformed.
    """
    if len(fields) < _MINIMUM_FIELD_COUNT:
        raise SentenceShapeError(
            f"Unexpected GSV sentence: {fields!r} (len={len(fields)})", fields
        )

    parser = FieldParser()
    gsv = GSVData(
        in_view=parser.parse_int(fields[3]),
        sentence_number=parser.parse_int(fields[2]),
        total_sentences=parser.parse_int(fields[1]),
        satellites=_parse_satellites(parser, fields),
    )
    parser.raise_for_error(fields)

    return gsv
