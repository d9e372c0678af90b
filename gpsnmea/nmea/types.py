"""NMEA data types for decoded sentences.

This module defines one frozen dataclass per supported sentence kind, plus the
enumerations for coded fields.

Design Decisions:
    1. Semantic values: positions are decimal degrees (negative for S/W),
       coded fields are enums, and times are ``datetime`` objects rather than
       the encoded strings. A record is only ever built from a sentence whose
       every field parsed.

    2. Empty numeric fields decode to zero. NMEA marks "no data" with an empty
       field; consumers that need to tell "no data" from a measured zero must
       look at the fix quality / status fields of the same sentence.

    3. Time of day without a date (GGA, GLL, GST) is a ``datetime.time`` in
       UTC. Sentences carrying a date (RMC, ZDA) produce an aware
       ``datetime.datetime``. An empty time field gives ``None``.

    4. Records are frozen and sequences are tuples: a record handed to one
       consumer cannot be altered under another.
"""

import datetime
import enum
from dataclasses import dataclass, field


class FixQuality(enum.IntEnum):
    """GGA fix quality indicator."""

    INVALID = 0
    GPS = 1
    DGPS = 2
    PPS = 3
    RTK = 4
    FLOAT_RTK = 5
    ESTIMATED = 6
    MANUAL = 7
    SIMULATION = 8

    def __str__(self) -> str:
        return _FIX_QUALITY_NAMES[self]


_FIX_QUALITY_NAMES = {
    FixQuality.INVALID: "invalid fix",
    FixQuality.GPS: "gps",
    FixQuality.DGPS: "dgps",
    FixQuality.PPS: "pps",
    FixQuality.RTK: "rt kinematic",
    FixQuality.FLOAT_RTK: "float rt kinematic",
    FixQuality.ESTIMATED: "estimated",
    FixQuality.MANUAL: "manual mode",
    FixQuality.SIMULATION: "sim mode",
}


class GSAFix(enum.IntEnum):
    """GSA fix type. ``UNKNOWN`` is what an empty field decodes to."""

    UNKNOWN = 0
    NO_FIX = 1
    FIX_2D = 2
    FIX_3D = 3

    def __str__(self) -> str:
        return ("", "no fix", "2D fix", "3D fix")[self]


@dataclass(frozen=True)
class RMCData:
    """Decoded RMC (Recommended Minimum Navigation Information) sentence.

    Attributes:
        timestamp: Fix time combining the UTC time and date fields, or None
            if either field was empty.

        status: Raw status character: 'A' = active, 'V' = void.

        latitude_degrees: Latitude in decimal degrees, positive=North.

        longitude_degrees: Longitude in decimal degrees, positive=East.

        speed_knots: Speed over ground in knots.

        track_degrees: Track angle in degrees relative to true north.

        magnetic_variation_degrees: Magnetic variation, negative when
            West. 0.0 if the variation field was empty.

        mode: FAA mode indicator (NMEA 2.3+), None on older receivers.

    Example:
        >>> rmc = parse_sentence(
        ...     "$GPRMC,162254.00,A,3723.02837,N,12159.39853,W,0.820,188.36,110706,,,A*74",
        ...     handler,
        ... )
        >>> rmc.timestamp
        datetime.datetime(2006, 7, 11, 16, 22, 54, tzinfo=datetime.timezone.utc)
        >>> rmc.latitude_degrees
        37.38380616...
    """

    timestamp: datetime.datetime | None
    status: str
    latitude_degrees: float
    longitude_degrees: float
    speed_knots: float
    track_degrees: float
    magnetic_variation_degrees: float
    mode: str | None = None

    @property
    def active(self) -> bool:
        return self.status == "A"


@dataclass(frozen=True)
class VTGData:
    """Decoded VTG (Track Made Good and Ground Speed) sentence.

    Attributes:
        track_true_degrees: Track relative to true north in degrees.

        track_magnetic_degrees: Track relative to magnetic north in degrees.

        speed_knots: Ground speed in knots.

        speed_kilometers_per_hour: Ground speed in km/h.

        mode: FAA mode indicator (NMEA 2.3+):
            'A' = Autonomous, 'D' = Differential, 'E' = Estimated,
            'N' = Not valid. None if the field is missing.
    """

    track_true_degrees: float
    track_magnetic_degrees: float
    speed_knots: float
    speed_kilometers_per_hour: float
    mode: str | None = None

    @property
    def speed_meters_per_second(self) -> float:
        """Ground speed in m/s, derived from the km/h field."""
        return self.speed_kilometers_per_hour / 3.6


@dataclass(frozen=True)
class GGAData:
    """Decoded GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        taken: UTC time of the fix, None if the field was empty.

        latitude_degrees: Latitude in decimal degrees, positive=North.

        longitude_degrees: Longitude in decimal degrees, positive=East.

        fix_quality: Fix quality indicator, see ``FixQuality``.

        num_satellites: Number of satellites used in the fix solution.

        horizontal_dilution_of_precision: HDOP. Lower is better.

        altitude_meters: Altitude above mean sea level in meters.

        geoid_height_meters: Height of the geoid (MSL) above the WGS84
            ellipsoid, in meters.
    """

    taken: datetime.time | None
    latitude_degrees: float
    longitude_degrees: float
    fix_quality: FixQuality
    num_satellites: int
    horizontal_dilution_of_precision: float
    altitude_meters: float
    geoid_height_meters: float

    @property
    def valid(self) -> bool:
        return self.fix_quality != FixQuality.INVALID


@dataclass(frozen=True)
class GSAData:
    """Decoded GSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        auto: True for automatic 2D/3D selection, False for manual.

        fix: Fix type, see ``GSAFix``.

        satellites_used: PRNs of the satellites used in the solution, in
            slot order. Empty slots are skipped.

        position_dilution_of_precision: PDOP.

        horizontal_dilution_of_precision: HDOP.

        vertical_dilution_of_precision: VDOP.
    """

    auto: bool
    fix: GSAFix
    satellites_used: tuple[int, ...]
    position_dilution_of_precision: float
    horizontal_dilution_of_precision: float
    vertical_dilution_of_precision: float


@dataclass(frozen=True)
class GLLData:
    """Decoded GLL (Geographic Position - Latitude/Longitude) sentence."""

    latitude_degrees: float
    longitude_degrees: float
    taken: datetime.time | None
    active: bool


@dataclass(frozen=True)
class GSVSatInfo:
    """One satellite entry of a GSV sentence."""

    prn: int
    elevation_degrees: int
    azimuth_degrees: int
    snr: int


@dataclass(frozen=True)
class GSVData:
    """Decoded GSV (Satellites in View) sentence.

    A full satellite list is usually split over several sentences; see
    ``gpsnmea.gnss.accumulator.GSVAccumulator`` to merge them.

    Attributes:
        in_view: Total number of satellites in view.

        sentence_number: Index of this sentence in the sequence, from 1.

        total_sentences: Number of sentences in the sequence.

        satellites: Satellite entries carried by this sentence (up to 4).
    """

    in_view: int
    sentence_number: int
    total_sentences: int
    satellites: tuple[GSVSatInfo, ...] = field(default=())


@dataclass(frozen=True)
class ZDAData:
    """Decoded ZDA (Time & Date) sentence.

    Attributes:
        timestamp: Date and time. ``tzinfo`` is UTC when the local zone
            fields are both zero, otherwise a fixed offset zone.
    """

    timestamp: datetime.datetime


@dataclass(frozen=True)
class AAMData:
    """Decoded AAM (Waypoint Arrival Alarm) sentence."""

    arrival: bool
    perpendicular: bool
    radius: float
    radius_units: str | None = None
    waypoint: str | None = None


@dataclass(frozen=True)
class GSTData:
    """Decoded GST (GNSS Pseudorange Noise Statistics) sentence.

    All deviations are standard deviations in meters.

    Attributes:
        taken: UTC time of the associated GGA fix.

        rms_deviation: Total RMS standard deviation of the ranges input to
            the navigation solution.

        major_deviation: Semi-major axis of the error ellipse.

        minor_deviation: Semi-minor axis of the error ellipse.

        major_orientation_degrees: Orientation of the semi-major axis,
            degrees from true north.

        latitude_error_deviation: Latitude error.

        longitude_error_deviation: Longitude error.

        altitude_error_deviation: Altitude error.
    """

    taken: datetime.time | None
    rms_deviation: float
    major_deviation: float
    minor_deviation: float
    major_orientation_degrees: float
    latitude_error_deviation: float
    longitude_error_deviation: float
    altitude_error_deviation: float
