"""
Time Conversion

Civil timestamps to Julian Date, and Julian Date to Local Sidereal Time.

The sidereal time polynomial is the IAU 1982 mean sidereal time expressed
in degrees; its coefficients are kept exactly as published so output stays
comparable with other implementations of the same formula.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime

import deal

from ..core.constants import (
    J2000_JULIAN_DATE,
    JULIAN_DATE_UNIX_EPOCH,
    JULIAN_DAYS_PER_CENTURY,
    MILLISECONDS_PER_DAY,
)
from ..core.exceptions import InvalidCoordinateError, InvalidTimestampError
from ..core.utils import normalize_degrees, validate_longitude


__all__ = [
    "datetime_to_julian_date",
    "julian_centuries",
    "local_sidereal_time",
    "parse_timestamp",
    "to_julian_date",
]


@deal.raises(InvalidTimestampError)
def to_julian_date(timestamp_ms: float) -> float:
    """
    Convert milliseconds since the Unix epoch (UTC) to a Julian Date.

    Args:
        timestamp_ms: Milliseconds since 1970-01-01 00:00 UTC

    Returns:
        Julian Date

    Raises:
        InvalidTimestampError: If the timestamp is not a finite number

    Example:
        >>> to_julian_date(0)
        2440587.5
    """
    if isinstance(timestamp_ms, bool) or not isinstance(timestamp_ms, int | float):
        raise InvalidTimestampError(f"Timestamp must be a number of milliseconds, got {timestamp_ms!r}")
    if not math.isfinite(timestamp_ms):
        raise InvalidTimestampError(f"Timestamp must be finite, got {timestamp_ms!r}")
    return timestamp_ms / MILLISECONDS_PER_DAY + JULIAN_DATE_UNIX_EPOCH


@deal.raises(InvalidTimestampError)
def datetime_to_julian_date(dt: datetime) -> float:
    """
    Convert a datetime to a Julian Date.

    Args:
        dt: datetime object (assumed to be UTC if it carries no tzinfo)

    Returns:
        Julian Date
    """
    if not isinstance(dt, datetime):
        raise InvalidTimestampError(f"Expected a datetime, got {type(dt).__name__}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return to_julian_date(dt.timestamp() * 1000.0)


@deal.raises(InvalidTimestampError)
def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 date/time string into an aware UTC datetime.

    A trailing ``Z`` is accepted; strings without an offset are taken as UTC.

    Args:
        value: Date/time string (e.g., "2024-03-20T21:30:00Z")

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        InvalidTimestampError: If the string is not a valid ISO-8601 timestamp
    """
    try:
        dt = datetime.fromisoformat(value.strip())
    except (AttributeError, ValueError) as e:
        raise InvalidTimestampError(f"Invalid timestamp {value!r}: expected ISO-8601 format") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def julian_centuries(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (jd - J2000_JULIAN_DATE) / JULIAN_DAYS_PER_CENTURY


@deal.raises(InvalidCoordinateError, InvalidTimestampError)
@deal.post(lambda result: 0.0 <= result < 360.0, message="LST must be in [0, 360)")
def local_sidereal_time(jd: float, longitude: float) -> float:
    """
    Calculate Local Sidereal Time.

    Args:
        jd: Julian Date
        longitude: Observer longitude in degrees (positive east)

    Returns:
        LST in degrees (0-360)

    Raises:
        InvalidTimestampError: If jd is not a finite number
        InvalidCoordinateError: If longitude is not a finite number

    Example:
        >>> round(local_sidereal_time(2451545.0, 0.0), 2)
        280.46
    """
    if isinstance(jd, bool) or not isinstance(jd, int | float) or not math.isfinite(jd):
        raise InvalidTimestampError(f"Julian Date must be a finite number, got {jd!r}")
    longitude = validate_longitude(longitude)

    t = julian_centuries(jd)
    theta0 = (
        280.46061837
        + 360.98564736629 * (jd - J2000_JULIAN_DATE)
        + 0.000387933 * t * t
        - t * t * t / 38710000
    )
    return normalize_degrees(theta0 + longitude)
