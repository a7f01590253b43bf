"""
Compass Direction Utilities

Converts azimuth angles to compass directions and formats sky positions
for human-readable observing instructions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.utils import normalize_degrees


if TYPE_CHECKING:
    from .bodies import SkyObject


__all__ = [
    "azimuth_to_compass_8point",
    "azimuth_to_compass_16point",
    "describe_sky_object",
    "format_altitude_description",
    "format_sky_position",
]


_POINTS_8 = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")
_POINTS_16 = ("N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE", "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW")


def _compass_point(azimuth_deg: float, points: tuple[str, ...]) -> str:
    # Each point covers an equal sector centered on its nominal bearing
    sector = 360.0 / len(points)
    index = int(normalize_degrees(azimuth_deg + sector / 2) // sector) % len(points)
    return points[index]


def azimuth_to_compass_8point(azimuth_deg: float) -> str:
    """
    Convert azimuth angle to 8-point compass direction.

    Args:
        azimuth_deg: Azimuth in degrees (0° = North, 90° = East, 180° = South, 270° = West)

    Returns:
        Compass direction: N, NE, E, SE, S, SW, W, or NW

    Examples:
        >>> azimuth_to_compass_8point(0)
        'N'
        >>> azimuth_to_compass_8point(45)
        'NE'
        >>> azimuth_to_compass_8point(180)
        'S'
    """
    return _compass_point(azimuth_deg, _POINTS_8)


def azimuth_to_compass_16point(azimuth_deg: float) -> str:
    """
    Convert azimuth angle to 16-point compass direction.

    Examples:
        >>> azimuth_to_compass_16point(22.5)
        'NNE'
    """
    return _compass_point(azimuth_deg, _POINTS_16)


def format_altitude_description(altitude_deg: float) -> str:
    """
    Convert altitude angle to descriptive text.

    Examples:
        >>> format_altitude_description(5)
        'just above the horizon'
        >>> format_altitude_description(85)
        'nearly overhead'
    """
    if altitude_deg <= 0:
        return "below the horizon"
    if altitude_deg < 10:
        return "just above the horizon"
    if altitude_deg < 30:
        return "low in the sky"
    if altitude_deg < 60:
        return "halfway up the sky"
    if altitude_deg < 80:
        return "high in the sky"
    return "nearly overhead"


def format_sky_position(
    azimuth_deg: float,
    altitude_deg: float,
    use_16point: bool = False,
    include_degrees: bool = True,
) -> str:
    """
    Format a sky position with compass direction and altitude.

    Args:
        azimuth_deg: Azimuth in degrees (0° = North, 90° = East)
        altitude_deg: Altitude in degrees (0° = horizon, 90° = zenith)
        use_16point: Use 16-point compass instead of 8-point
        include_degrees: Include numeric degrees in output

    Examples:
        >>> format_sky_position(45, 30)
        'NE, 30° high'
        >>> format_sky_position(180, 65, include_degrees=False)
        'S, high in the sky'
    """
    direction = azimuth_to_compass_16point(azimuth_deg) if use_16point else azimuth_to_compass_8point(azimuth_deg)
    if include_degrees:
        return f"{direction}, {round(altitude_deg)}° high"
    return f"{direction}, {format_altitude_description(altitude_deg)}"


def describe_sky_object(sky_object: SkyObject) -> str:
    """One-line description such as ``Sirius - SE, 32° high``."""
    return f"{sky_object.name} - {format_sky_position(sky_object.azimuth, sky_object.altitude)}"
