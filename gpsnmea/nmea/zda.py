"""ZDA sentence decoder.

ZDA Sentence Format:
    $GPZDA,201530.00,04,07,2002,00,00*60
           |         |  |  |    |  |
           |         |  |  |    |  +-- Local zone minutes (0..59)
           |         |  |  |    +-- Local zone hours (-13..13)
           |         |  |  +-- Year (four digits)
           |         |  +-- Month
           |         +-- Day
           +-- UTC time (HHMMSS.ss)

A zero local zone is reported as UTC. Any other zone becomes a fixed offset
of ``hours * 3600 + minutes * 60`` seconds attached to the timestamp.
"""

import datetime

from gpsnmea.nmea.errors import FieldDecodeError, SentenceShapeError
from gpsnmea.nmea.fields import FieldParser
from gpsnmea.nmea.types import ZDAData

_FIELD_COUNT = 7

_MINIMUM_TIME_LENGTH = 6

_SECONDS_PER_HOUR = 3600
_SECONDS_PER_MINUTE = 60


def _zone(hours: int, minutes: int) -> datetime.timezone:
    if hours == 0 and minutes == 0:
        return datetime.timezone.utc

    offset = datetime.timedelta(
        seconds=hours * _SECONDS_PER_HOUR + minutes * _SECONDS_PER_MINUTE
    )
    return datetime.timezone(offset)


def decode_zda(fields: list[str]) -> ZDAData:
    """Decode the fields of a ZDA sentence.

    Raises:
        SentenceShapeError: Not exactly 7 fields, or a time field shorter
            than HHMMSS.
        FieldDecodeError: A field is malformed or the date, time, or zone
            is out of range.
    """
    if len(fields) != _FIELD_COUNT or len(fields[1]) < _MINIMUM_TIME_LENGTH:
        raise SentenceShapeError(
            f"Unexpected ZDA sentence: {fields!r} (len={len(fields)})", fields
        )

    parser = FieldParser()
    taken = parser.parse_time(fields[1])
    day = parser.parse_int(fields[2])
    month = parser.parse_int(fields[3])
    year = parser.parse_int(fields[4])
    zone_hours = parser.parse_int(fields[5])
    zone_minutes = parser.parse_int(fields[6])
    parser.raise_for_error(fields)

    try:
        timestamp = datetime.datetime(
            year,
            month,
            day,
            taken.hour,
            taken.minute,
            taken.second,
            taken.microsecond,
            tzinfo=_zone(zone_hours, zone_minutes),
        )
    except ValueError as error:
        raise FieldDecodeError(
            f"Malformed field in {fields[0]}: {error}", fields
        ) from error

    return ZDAData(timestamp=timestamp)
