"""
Type definitions for SkyView position calculations.

Value types shared by the time, transform, ephemeris and query layers.
All of them are immutable; a new instance is built for every query.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, datetime

from ..astronomy.time_conversion import datetime_to_julian_date, to_julian_date
from .exceptions import InvalidTimestampError
from .utils import normalize_longitude, validate_latitude, validate_longitude


__all__ = [
    "EquatorialCoordinates",
    "GeoPosition",
    "HorizontalCoordinates",
    "Instant",
]


@dataclass(frozen=True)
class Instant:
    """
    A point in time expressed as a Julian Date.

    Attributes:
        jd: Julian Date (days since 4713 BC January 1, 12:00)
    """

    jd: float

    def __post_init__(self) -> None:
        if isinstance(self.jd, bool) or not isinstance(self.jd, int | float) or not math.isfinite(self.jd):
            raise InvalidTimestampError(f"Julian Date must be a finite number, got {self.jd!r}")

    @classmethod
    def from_timestamp_ms(cls, timestamp_ms: float) -> Instant:
        """Build an Instant from milliseconds since the Unix epoch (UTC)."""
        return cls(to_julian_date(timestamp_ms))

    @classmethod
    def from_datetime(cls, dt: datetime) -> Instant:
        """Build an Instant from a datetime; naive values are taken as UTC."""
        return cls(datetime_to_julian_date(dt))

    @classmethod
    def now(cls) -> Instant:
        """The current moment."""
        return cls.from_datetime(datetime.now(UTC))

    def __str__(self) -> str:
        return f"JD {self.jd:.5f}"


@dataclass(frozen=True)
class GeoPosition:
    """
    Observer's geographic position on Earth.

    Latitude outside -90..+90 is rejected rather than clamped. Longitude is
    normalized into -180..+180 (half-open at +180).

    Attributes:
        latitude: Latitude in degrees (positive=North, negative=South)
        longitude: Longitude in degrees (positive=East, negative=West)
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "latitude", validate_latitude(self.latitude))
        object.__setattr__(self, "longitude", normalize_longitude(validate_longitude(self.longitude)))

    def __str__(self) -> str:
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.4f}°{lat_dir}, {abs(self.longitude):.4f}°{lon_dir}"


@dataclass(frozen=True)
class EquatorialCoordinates:
    """
    Equatorial coordinate system (RA/Dec).

    Only valid for the Instant at which it was computed; stars are fixed,
    but Sun, Moon and planets move.

    Attributes:
        ra_degrees: Right Ascension in degrees (0-360)
        dec_degrees: Declination in degrees (-90 to +90)
    """

    ra_degrees: float
    dec_degrees: float

    def __str__(self) -> str:
        sign = "+" if self.dec_degrees >= 0 else "-"
        return f"RA {self.ra_degrees:.4f}°, Dec {sign}{abs(self.dec_degrees):.4f}°"


@dataclass(frozen=True)
class HorizontalCoordinates:
    """
    Horizontal coordinate system (Alt/Az).

    This system is relative to the observer's local horizon and is only
    meaningful for the (Instant, GeoPosition) pair that produced it.

    Attributes:
        altitude: Altitude in degrees (-90 to +90, where 0=horizon, 90=zenith)
        azimuth: Azimuth in degrees (0-360, where 0=North, 90=East, 180=South, 270=West)
    """

    altitude: float
    azimuth: float

    @property
    def above_horizon(self) -> bool:
        return self.altitude > 0.0

    def __str__(self) -> str:
        return f"Az {self.azimuth:.2f}°, Alt {self.altitude:.2f}°"
