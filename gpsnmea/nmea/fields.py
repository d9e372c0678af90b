"""NMEA field parsing utilities.

This module provides the primitives every sentence decoder uses to turn
individual string fields into numbers, positions, and times.

NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). An empty field is "value absent", never a parse error: numeric
fields decode to zero and time fields to None.

Parse errors are deferred. A ``FieldParser`` is created for one record, every
field of the record is parsed through it, and a malformed field only records
its ``ValueError`` (the parse still returns a placeholder) so that the sibling
fields keep parsing. Once all fields are done the decoder calls
``raise_for_error``, which surfaces the most recent failure as a
``FieldDecodeError``. Only the last failure is retained.
"""

import datetime
import enum
import re
from typing import TypeVar

from gpsnmea.nmea.errors import FieldDecodeError

_EnumT = TypeVar("_EnumT", bound=enum.IntEnum)

# Hemisphere markers with a three-digit degree prefix (longitude)
_LONGITUDE_HEMISPHERES = ("E", "W")

# Hemisphere markers that negate the decoded value
_NEGATIVE_HEMISPHERES = ("S", "W")

_MINUTES_PER_DEGREE = 60.0

# Two-digit years below the pivot are 20YY, the rest 19YY (same rule as
# POSIX strptime's %y)
_CENTURY_PIVOT = 69

_HHMMSS_LENGTH = 6
_DDMMYY_LENGTH = 6

# ASCII-only; float() and int() alone also accept whitespace, underscores,
# non-ASCII digits, and "inf"/"nan"
_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _is_ascii_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _strict_float(value: str) -> float:
    if _FLOAT_PATTERN.fullmatch(value) is None:
        raise ValueError(f"invalid numeric field: {value!r}")
    return float(value)


def _strict_int(value: str) -> int:
    if _INT_PATTERN.fullmatch(value) is None:
        raise ValueError(f"invalid integer field: {value!r}")
    return int(value)


def _time_of_day(value: str) -> datetime.time:
    """Decode an ``HHMMSS[.sss]`` string into a UTC ``datetime.time``.

    Raises:
        ValueError: If the string is malformed or any component is out of
            range (e.g. hour 24 or second 61).

    Example:
        >>> _time_of_day("123519.50")
        datetime.time(12, 35, 19, 500000, tzinfo=datetime.timezone.utc)
    """
    digits, fraction = value[:_HHMMSS_LENGTH], value[_HHMMSS_LENGTH:]
    if len(digits) != _HHMMSS_LENGTH or not _is_ascii_digits(digits):
        raise ValueError(f"invalid time of day: {value!r}")

    microseconds = 0
    if fraction:
        if fraction[0] != "." or not _is_ascii_digits(fraction[1:]):
            raise ValueError(f"invalid fractional seconds: {value!r}")
        microseconds = min(round(float("0" + fraction) * 1_000_000), 999_999)

    return datetime.time(
        int(digits[0:2]),
        int(digits[2:4]),
        int(digits[4:6]),
        microseconds,
        tzinfo=datetime.timezone.utc,
    )


def _expand_year(two_digit_year: int) -> int:
    if two_digit_year < _CENTURY_PIVOT:
        return 2000 + two_digit_year
    return 1900 + two_digit_year


def _calendar_date(value: str) -> datetime.date:
    """Decode a ``DDMMYY`` string into a ``datetime.date``.

    Raises:
        ValueError: If the string is malformed or the date does not exist.

    Example:
        >>> _calendar_date("230394")
        datetime.date(1994, 3, 23)
    """
    if len(value) != _DDMMYY_LENGTH or not _is_ascii_digits(value):
        raise ValueError(f"invalid date: {value!r}")

    return datetime.date(
        _expand_year(int(value[4:6])),
        int(value[2:4]),
        int(value[0:2]),
    )


class FieldParser:
    """Deferred-error field parser for the decode of a single record.

    Attributes:
        error: The most recent parse failure, or None if every field so far
            parsed.

    Example:
        >>> parser = FieldParser()
        >>> parser.parse_float("12.5"), parser.parse_float("x"), parser.parse_int("")
        (12.5, 0.0, 0)
        >>> parser.error
        ValueError("invalid numeric field: 'x'")
    """

    def __init__(self) -> None:
        self.error: ValueError | None = None

    def parse_float(self, value: str) -> float:
        """Parse a float field; empty gives 0.0, malformed records an error."""
        if not value:
            return 0.0
        try:
            return _strict_float(value)
        except ValueError as error:
            self.error = error
            return 0.0

    def parse_int(self, value: str) -> int:
        """Parse an integer field; empty gives 0, malformed records an error."""
        if not value:
            return 0
        try:
            return _strict_int(value)
        except ValueError as error:
            self.error = error
            return 0

    def parse_dms(self, value: str, hemisphere: str) -> float:
        """Convert an NMEA coordinate (DDMM.MMMM / DDDMM.MMMM) to decimal degrees.

        The degree prefix is 2 characters for latitude and 3 for longitude;
        which one applies is decided by the hemisphere marker (E/W means
        longitude). The rest of the string is decimal minutes:

            decimal_degrees = degrees + (minutes / 60)

        The result is negative for South and West.

        Args:
            value: Coordinate string, e.g. "3723.02837" or "12159.39853"
            hemisphere: Hemisphere indicator ("N", "S", "E", or "W")

        Returns:
            Decimal degrees. 0.0 for an empty coordinate.

        Example:
            >>> FieldParser().parse_dms("3723.02837", "S")
            -37.38380616...
            >>> FieldParser().parse_dms("12159.39853", "W")
            -121.98997550...
        """
        prefix_length = 3 if hemisphere in _LONGITUDE_HEMISPHERES else 2

        degrees = self.parse_float(value[:prefix_length])
        minutes = self.parse_float(value[prefix_length:])
        decimal_degrees = degrees + minutes / _MINUTES_PER_DEGREE

        if hemisphere in _NEGATIVE_HEMISPHERES:
            return -decimal_degrees

        return decimal_degrees

    def parse_time(self, value: str) -> datetime.time | None:
        """Parse an ``HHMMSS[.sss]`` UTC time of day; empty gives None."""
        if not value:
            return None
        try:
            return _time_of_day(value)
        except ValueError as error:
            self.error = error
            return None

    def parse_datetime(
        self,
        time_value: str,
        date_value: str,
    ) -> datetime.datetime | None:
        """Combine ``HHMMSS[.sss]`` and ``DDMMYY`` fields into a UTC datetime.

        Returns:
            Aware datetime in UTC, or None if either field is empty or
            malformed (malformed fields also record an error).

        Example:
            >>> FieldParser().parse_datetime("123519", "230394")
            datetime.datetime(1994, 3, 23, 12, 35, 19, tzinfo=datetime.timezone.utc)
        """
        if not time_value or not date_value:
            return None
        try:
            return datetime.datetime.combine(
                _calendar_date(date_value),
                _time_of_day(time_value),
            )
        except ValueError as error:
            self.error = error
            return None

    def parse_enum(self, value: str, enum_type: type[_EnumT]) -> _EnumT:
        """Parse an integer code into a member of ``enum_type``.

        Empty fields and unknown codes both give the member with value 0;
        an unknown code also records an error.
        """
        code = self.parse_int(value)
        try:
            return enum_type(code)
        except ValueError as error:
            self.error = error
            return enum_type(0)

    def raise_for_error(self, fields: list[str]) -> None:
        """Raise the last recorded failure as a ``FieldDecodeError``.

        Args:
            fields: Tokenized fields of the sentence, attached to the error
                for diagnostics.

        Raises:
            FieldDecodeError: If any field failed to parse.
        """
        if self.error is not None:
            raise FieldDecodeError(
                f"Malformed field in {fields[0]}: {self.error}", fields
            ) from self.error
