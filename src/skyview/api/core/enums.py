"""
Common Enums

Enumerations used throughout the SkyView API.
"""

from enum import StrEnum


__all__ = [
    "CelestialObjectType",
    "MoonPhase",
]


class CelestialObjectType(StrEnum):
    """Types of objects the engine places on the sky."""

    STAR = "star"
    PLANET = "planet"
    MOON = "moon"


class MoonPhase(StrEnum):
    """Moon phase names."""

    NEW_MOON = "New Moon"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL_MOON = "Full Moon"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"
