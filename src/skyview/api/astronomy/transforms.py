"""
Coordinate Transforms

Spherical-trigonometry conversions between the ecliptic, equatorial and
horizontal systems.
"""

from __future__ import annotations

import logging
import math

import deal

from ..core.exceptions import InvalidCoordinateError, InvalidTimestampError
from ..core.types import EquatorialCoordinates, HorizontalCoordinates
from ..core.utils import clamp_unit, normalize_degrees, validate_latitude, validate_longitude
from .time_conversion import local_sidereal_time


logger = logging.getLogger(__name__)


__all__ = [
    "AZIMUTH_FALLBACK_DEGREES",
    "ecliptic_to_equatorial",
    "equatorial_to_horizontal",
]


AZIMUTH_FALLBACK_DEGREES = 0.0
"""Azimuth reported when it is undefined (observer at a pole, body at zenith or nadir)."""

_DEGENERATE_DIVISOR = 1e-12


@deal.post(lambda result: -90.0 <= result.altitude <= 90.0, message="Altitude must be in [-90, 90]")
@deal.post(lambda result: 0.0 <= result.azimuth < 360.0, message="Azimuth must be in [0, 360)")
@deal.raises(InvalidCoordinateError, InvalidTimestampError)
def equatorial_to_horizontal(
    ra: float, dec: float, lat: float, lon: float, jd: float
) -> HorizontalCoordinates:
    """
    Convert RA/Dec coordinates to Alt/Az coordinates.

    Args:
        ra: Right Ascension in degrees
        dec: Declination in degrees
        lat: Observer latitude in degrees
        lon: Observer longitude in degrees (positive east)
        jd: Julian Date of the observation

    Returns:
        HorizontalCoordinates with azimuth measured clockwise from north.
        Where the azimuth is undefined it is AZIMUTH_FALLBACK_DEGREES.

    Raises:
        InvalidCoordinateError: If lat is not finite or outside -90..+90, or lon is not finite
        InvalidTimestampError: If jd is not a finite number
    """
    lat = validate_latitude(lat)
    lon = validate_longitude(lon)
    hour_angle = local_sidereal_time(jd, lon) - ra

    lat_rad = math.radians(lat)
    dec_rad = math.radians(dec)
    ha_rad = math.radians(hour_angle)

    sin_alt = clamp_unit(
        math.sin(dec_rad) * math.sin(lat_rad) + math.cos(dec_rad) * math.cos(lat_rad) * math.cos(ha_rad)
    )
    alt_rad = math.asin(sin_alt)

    divisor = math.cos(lat_rad) * math.cos(alt_rad)
    if abs(divisor) < _DEGENERATE_DIVISOR:
        logger.debug(f"Azimuth undefined at lat={lat:.6f}, alt={math.degrees(alt_rad):.6f}; using fallback")
        return HorizontalCoordinates(altitude=math.degrees(alt_rad), azimuth=AZIMUTH_FALLBACK_DEGREES)

    cos_az = clamp_unit((math.sin(dec_rad) - math.sin(lat_rad) * sin_alt) / divisor)
    azimuth = math.degrees(math.acos(cos_az))
    if math.sin(ha_rad) > 0:
        azimuth = 360.0 - azimuth

    return HorizontalCoordinates(altitude=math.degrees(alt_rad), azimuth=normalize_degrees(azimuth))


def ecliptic_to_equatorial(longitude: float, latitude: float, obliquity: float) -> EquatorialCoordinates:
    """
    Rotate ecliptic coordinates into the equatorial frame.

    Args:
        longitude: Ecliptic longitude in degrees
        latitude: Ecliptic latitude in degrees
        obliquity: Obliquity of the ecliptic in degrees

    Returns:
        EquatorialCoordinates with RA normalized into [0, 360)
    """
    lam = math.radians(longitude)
    beta = math.radians(latitude)
    eps = math.radians(obliquity)

    ra = math.degrees(
        math.atan2(
            math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps),
            math.cos(lam),
        )
    )
    dec = math.degrees(
        math.asin(clamp_unit(math.sin(beta) * math.cos(eps) + math.cos(beta) * math.sin(eps) * math.sin(lam)))
    )
    return EquatorialCoordinates(ra_degrees=normalize_degrees(ra), dec_degrees=dec)
