"""
Utility functions for angle arithmetic and coordinate formatting.

The engine's arithmetic is plain floating point; Astropy is used only to
render angles as sexagesimal strings for display.
"""

from __future__ import annotations

import math

from astropy import units as u
from astropy.coordinates import Angle

from .constants import DEGREES_PER_HOUR_ANGLE, DEGREES_PER_TURN
from .exceptions import InvalidCoordinateError


__all__ = [
    "angle_difference",
    "clamp_unit",
    "degrees_to_dms",
    "degrees_to_hms",
    "format_dec",
    "format_position",
    "format_ra",
    "normalize_degrees",
    "normalize_longitude",
    "ra_hours_to_degrees",
    "validate_latitude",
    "validate_longitude",
]


def normalize_degrees(angle: float) -> float:
    """
    Reduce an angle into the half-open range [0, 360).

    Python's modulo already returns a non-negative result for a positive
    divisor, but a tiny negative input rounds up to exactly 360.0, so that
    value is folded back to 0.0.

    Args:
        angle: Angle in degrees (any value)

    Returns:
        Equivalent angle in [0, 360)
    """
    reduced = angle % DEGREES_PER_TURN
    if reduced >= DEGREES_PER_TURN:
        return 0.0
    return reduced


def normalize_longitude(longitude: float) -> float:
    """
    Reduce a longitude into [-180, 180).

    Args:
        longitude: Longitude in degrees, east positive

    Returns:
        Equivalent longitude in [-180, 180)
    """
    return normalize_degrees(longitude + 180.0) - 180.0


def clamp_unit(value: float) -> float:
    """Clamp an inverse-trig argument into [-1, 1]."""
    return max(-1.0, min(1.0, value))


def angle_difference(a: float, b: float) -> float:
    """
    Signed difference ``a - b`` wrapped into [-180, 180].

    Args:
        a: First angle in degrees
        b: Second angle in degrees

    Returns:
        Shortest signed rotation from b to a in degrees

    Example:
        >>> angle_difference(10.0, 350.0)
        20.0
    """
    diff = math.fmod(a - b, DEGREES_PER_TURN)
    if diff > 180.0:
        diff -= DEGREES_PER_TURN
    elif diff < -180.0:
        diff += DEGREES_PER_TURN
    return diff


def ra_hours_to_degrees(ra_hours: float) -> float:
    """
    Convert Right Ascension from hours to degrees.

    Args:
        ra_hours: Right Ascension in hours (0-24)

    Returns:
        Right Ascension in degrees (0-360)

    Example:
        >>> ra_hours_to_degrees(12.0)
        180.0
    """
    return ra_hours * DEGREES_PER_HOUR_ANGLE


def degrees_to_dms(degrees: float) -> tuple[int, int, float, str]:
    """
    Convert decimal degrees to degrees/minutes/seconds format.

    Args:
        degrees: Decimal degrees

    Returns:
        Tuple of (degrees, minutes, seconds, sign)
    """
    angle = Angle(degrees, unit=u.deg)
    dms = angle.dms
    sign = "+" if degrees >= 0 else "-"
    return int(abs(dms.d)), int(abs(dms.m)), abs(dms.s), sign


def degrees_to_hms(degrees: float) -> tuple[int, int, float]:
    """
    Convert an angle in degrees to hours/minutes/seconds of Right Ascension.

    Args:
        degrees: Angle in degrees (0-360)

    Returns:
        Tuple of (hours, minutes, seconds)
    """
    angle = Angle(degrees, unit=u.deg)
    hms = angle.hms
    return int(hms.h), int(hms.m), hms.s


def format_ra(ra_degrees: float, precision: int = 1) -> str:
    """
    Format Right Ascension as a readable string.

    Args:
        ra_degrees: RA in degrees
        precision: Decimal places for seconds

    Returns:
        Formatted string (e.g., "06h 45m 07.2s")
    """
    hours, minutes, seconds = degrees_to_hms(ra_degrees)
    return f"{hours:02d}h {minutes:02d}m {seconds:0{precision + 3}.{precision}f}s"


def format_dec(dec_degrees: float, precision: int = 0) -> str:
    """
    Format Declination as a readable string.

    Args:
        dec_degrees: Dec in decimal degrees
        precision: Decimal places for arcseconds

    Returns:
        Formatted string (e.g., "-16° 42' 58\\"")
    """
    degrees, minutes, seconds, sign = degrees_to_dms(dec_degrees)
    width = precision + 3 if precision else 2
    return f"{sign}{degrees:02d}° {minutes:02d}' {seconds:0{width}.{precision}f}\""


def format_position(ra_degrees: float, dec_degrees: float) -> str:
    """Format an equatorial position as ``RA: ..., Dec: ...``."""
    return f"RA: {format_ra(ra_degrees)}, Dec: {format_dec(dec_degrees)}"


def _require_finite(label: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float) or not math.isfinite(value):
        raise InvalidCoordinateError(f"{label} must be a finite number, got {value!r}")
    return float(value)


def validate_latitude(latitude: float) -> float:
    """
    Check an observer latitude.

    Raises:
        InvalidCoordinateError: If latitude is not finite or outside -90..+90
    """
    latitude = _require_finite("Latitude", latitude)
    if not -90.0 <= latitude <= 90.0:
        raise InvalidCoordinateError(f"Latitude must be between -90 and +90 degrees, got {latitude}")
    return latitude


def validate_longitude(longitude: float) -> float:
    """
    Check an observer longitude. Any finite value is accepted and left unwrapped.

    Raises:
        InvalidCoordinateError: If longitude is NaN or infinite
    """
    return _require_finite("Longitude", longitude)
