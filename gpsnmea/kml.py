"""nmea2kml: render RMC fixes from an NMEA stream as KML placemarks.

Reads NMEA sentences on stdin and writes a KML document on stdout::

    nmea2kml --title "Road Trip" < track.nmea > track.kml

The first fix is always rendered. After that a fix is rendered only when the
receiver has stayed close to the last reference point (less than
``--min-dist`` meters) for longer than ``--min-time`` seconds since the
previous fix, i.e. the output marks the places where the trip paused.
Whenever the receiver is farther away, the reference point moves to it.
"""

import argparse
import datetime
import logging
import math
import sys
from typing import TextIO
from xml.sax.saxutils import escape

from gpsnmea.gnss.processor import log_errors, process
from gpsnmea.nmea.types import RMCData

__all__ = ["KMLWriter", "distance_meters", "main"]

logger = logging.getLogger(__name__)

_EARTH_RADIUS_METERS = 6371000.0

_DEFAULT_MIN_DIST_METERS = 1000
_DEFAULT_MIN_TIME_SECONDS = 60.0
_DEFAULT_TITLE = "Road Trip"

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_KML_HEADER = """<?xml version="1.0" encoding="UTF-8"?>
<kml xmlns="http://www.opengis.net/kml/2.2"
          xmlns:gx="http://www.google.com/kml/ext/2.2">

<Document>
<name>{title}</name>
"""

_KML_POINT = """<Placemark>
    <name>{timestamp}</name>
    <TimeStamp>{timestamp}</TimeStamp>
    <Point><coordinates>{longitude},{latitude},0.0</coordinates></Point>
</Placemark>
"""

_KML_FOOTER = "</Document></kml>"


def distance_meters(
    longitude1: float, latitude1: float, longitude2: float, latitude2: float
) -> float:
    """Great-circle distance between two points (haversine formula).

    Example:
        >>> round(distance_meters(0.0, 0.0, 0.0, 1.0))
        111195
    """
    phi1 = math.radians(latitude1)
    phi2 = math.radians(latitude2)
    delta_phi = math.radians(latitude2 - latitude1)
    delta_lambda = math.radians(longitude2 - longitude1)

    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return _EARTH_RADIUS_METERS * c


class KMLWriter:
    """RMC handler that writes selected fixes as KML placemarks.

    Call ``open()`` before processing and ``close()`` afterwards to write
    the document header and footer.

    Args:
        out: Text stream the KML is written to.
        title: Document name.
        min_dist: Distance in meters under which a fix counts as "still
            near the reference point".
        min_time: Minimum time between fixes for a nearby fix to be
            rendered.
    """

    def __init__(
        self,
        out: TextIO,
        title: str = _DEFAULT_TITLE,
        min_dist: float = _DEFAULT_MIN_DIST_METERS,
        min_time: datetime.timedelta = datetime.timedelta(
            seconds=_DEFAULT_MIN_TIME_SECONDS
        ),
    ) -> None:
        self._out = out
        self._title = title
        self._min_dist = min_dist
        self._min_time = min_time
        self._reference: tuple[float, float] | None = None
        self._previous_timestamp: datetime.datetime | None = None

    def open(self) -> None:
        self._out.write(_KML_HEADER.format(title=escape(self._title)))

    def close(self) -> None:
        self._out.write(_KML_FOOTER)
        self._out.flush()

    def _render(self, rmc: RMCData, timestamp: datetime.datetime) -> None:
        self._out.write(
            _KML_POINT.format(
                timestamp=timestamp.strftime(_TIMESTAMP_FORMAT),
                longitude=rmc.longitude_degrees,
                latitude=rmc.latitude_degrees,
            )
        )

    def handle_rmc(self, rmc: RMCData) -> None:
        timestamp = rmc.timestamp
        if timestamp is None:
            logger.debug("Skipping RMC without date and time")
            return

        if self._reference is None or self._previous_timestamp is None:
            self._render(rmc, timestamp)
            self._reference = (rmc.longitude_degrees, rmc.latitude_degrees)
            self._previous_timestamp = timestamp
            return

        distance = distance_meters(
            rmc.longitude_degrees, rmc.latitude_degrees, *self._reference
        )
        elapsed = timestamp - self._previous_timestamp
        if distance < self._min_dist and elapsed > self._min_time:
            logger.info("distance = %.1f m, elapsed = %s", distance, elapsed)
            self._render(rmc, timestamp)
        else:
            self._reference = (rmc.longitude_degrees, rmc.latitude_degrees)
        self._previous_timestamp = timestamp


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render RMC fixes from NMEA on stdin as KML on stdout"
    )
    parser.add_argument(
        "--min-dist",
        type=float,
        default=_DEFAULT_MIN_DIST_METERS,
        help="minimum distance (meters) between points (default: %(default)s)",
    )
    parser.add_argument(
        "--min-time",
        type=float,
        default=_DEFAULT_MIN_TIME_SECONDS,
        help="minimum time (seconds) between points (default: %(default)s)",
    )
    parser.add_argument(
        "--title", default=_DEFAULT_TITLE, help="KML title (default: %(default)s)"
    )
    return parser.parse_args(argv)


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the converter; returns the process exit status."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    writer = KMLWriter(
        stdout if stdout is not None else sys.stdout,
        title=args.title,
        min_dist=args.min_dist,
        min_time=datetime.timedelta(seconds=args.min_time),
    )
    if stdin is None:
        # undecodable bytes become U+FFFD and fail the checksum
        sys.stdin.reconfigure(errors="replace")
        stdin = sys.stdin

    writer.open()
    try:
        process(stdin, writer, log_errors)
    except OSError as e:
        logger.error("Error reading NMEA input: %s", e)
        return 1
    finally:
        writer.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
