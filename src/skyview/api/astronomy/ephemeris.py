"""
Low-Precision Body Ephemeris

Closed-form position models for the Sun, Moon and the five naked-eye
planets as functions of Julian Date.

Sun and Moon use mean elements with one- or two-term corrections, good to
roughly a degree. The planet model is a coarse placeholder: RA is the mean
longitude and Dec a small sinusoid scaled by inclination. It ignores
eccentricity and the heliocentric to geocentric shift, so planet positions
are indicative only.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType

import deal

from ..core.constants import J2000_JULIAN_DATE
from ..core.exceptions import UnknownBodyError
from ..core.types import EquatorialCoordinates
from ..core.utils import normalize_degrees
from .transforms import ecliptic_to_equatorial


__all__ = [
    "PLANET_ELEMENTS",
    "PLANET_MAGNITUDES",
    "PLANET_NAMES",
    "PlanetElements",
    "days_since_j2000",
    "moon_position",
    "obliquity",
    "planet_magnitude",
    "planet_position",
    "resolve_planet_name",
    "sun_position",
]


@dataclass(frozen=True)
class PlanetElements:
    """Mean orbital elements for one planet at J2000.0."""

    mean_longitude: float  # L0, degrees at J2000.0
    mean_motion: float  # degrees per day
    inclination: float  # degrees to the ecliptic
    semi_major_axis: float  # AU
    eccentricity: float


PLANET_ELEMENTS: MappingProxyType[str, PlanetElements] = MappingProxyType(
    {
        "Mercury": PlanetElements(252.25, 4.09233, 7.00, 0.387, 0.206),
        "Venus": PlanetElements(181.98, 1.60214, 3.39, 0.723, 0.007),
        "Mars": PlanetElements(355.43, 0.52407, 1.85, 1.524, 0.093),
        "Jupiter": PlanetElements(34.35, 0.08309, 1.31, 5.203, 0.048),
        "Saturn": PlanetElements(50.08, 0.03346, 2.49, 9.537, 0.054),
    }
)

PLANET_MAGNITUDES: MappingProxyType[str, float] = MappingProxyType(
    {
        "Mercury": 0.0,
        "Venus": -4.0,
        "Mars": 0.5,
        "Jupiter": -2.5,
        "Saturn": 0.5,
    }
)

PLANET_NAMES: tuple[str, ...] = tuple(PLANET_ELEMENTS)


def days_since_j2000(jd: float) -> float:
    """Days elapsed since the J2000.0 epoch."""
    return jd - J2000_JULIAN_DATE


def obliquity(n: float) -> float:
    """
    Obliquity of the ecliptic.

    Args:
        n: Days since J2000.0

    Returns:
        Obliquity in degrees
    """
    return 23.439 - 0.0000004 * n


@deal.raises(UnknownBodyError)
def resolve_planet_name(name: str) -> str:
    """
    Map a planet name to its canonical table key.

    Matching is case-insensitive and ignores surrounding whitespace.

    Raises:
        UnknownBodyError: If the name is not one of the five planets
    """
    key = str(name).strip().lower()
    for planet in PLANET_NAMES:
        if planet.lower() == key:
            return planet
    raise UnknownBodyError(f"No such planet: {name!r}. Known planets: {', '.join(PLANET_NAMES)}")


@deal.post(lambda result: -90.0 <= result.dec_degrees <= 90.0)
def sun_position(jd: float) -> EquatorialCoordinates:
    """
    Calculate the Sun's apparent position.

    Args:
        jd: Julian Date

    Returns:
        Equatorial coordinates of the Sun
    """
    n = days_since_j2000(jd)
    mean_longitude = normalize_degrees(280.460 + 0.9856474 * n)
    g = math.radians(normalize_degrees(357.528 + 0.9856003 * n))

    ecliptic_longitude = mean_longitude + 1.915 * math.sin(g) + 0.020 * math.sin(2 * g)
    return ecliptic_to_equatorial(ecliptic_longitude, 0.0, obliquity(n))


@deal.post(lambda result: -90.0 <= result.dec_degrees <= 90.0)
def moon_position(jd: float) -> EquatorialCoordinates:
    """
    Calculate the Moon's apparent position.

    Uses the Moon's mean longitude plus the leading equation-of-centre term
    for longitude and the leading term in the argument of latitude.

    Args:
        jd: Julian Date

    Returns:
        Equatorial coordinates of the Moon
    """
    n = days_since_j2000(jd)
    mean_longitude = normalize_degrees(218.316 + 13.176396 * n)
    mean_anomaly = normalize_degrees(134.963 + 13.064993 * n)
    argument_of_latitude = normalize_degrees(93.272 + 13.229350 * n)

    ecliptic_longitude = mean_longitude + 6.289 * math.sin(math.radians(mean_anomaly))
    ecliptic_latitude = 5.128 * math.sin(math.radians(argument_of_latitude))
    return ecliptic_to_equatorial(ecliptic_longitude, ecliptic_latitude, obliquity(n))


@deal.raises(UnknownBodyError)
@deal.post(lambda result: -90.0 <= result.dec_degrees <= 90.0)
def planet_position(name: str, jd: float) -> EquatorialCoordinates:
    """
    Calculate a planet's approximate position from mean elements.

    Args:
        name: Planet name (Mercury, Venus, Mars, Jupiter or Saturn)
        jd: Julian Date

    Returns:
        Equatorial coordinates. Declination is clamped to [-90, 90].

    Raises:
        UnknownBodyError: If the planet name is unknown
    """
    elements = PLANET_ELEMENTS[resolve_planet_name(name)]
    n = days_since_j2000(jd)
    mean_longitude = normalize_degrees(elements.mean_longitude + elements.mean_motion * n)

    dec = math.sin(math.radians(elements.inclination)) * math.sin(math.radians(mean_longitude)) * 10
    return EquatorialCoordinates(ra_degrees=mean_longitude, dec_degrees=max(-90.0, min(90.0, dec)))


@deal.raises(UnknownBodyError)
def planet_magnitude(name: str) -> float:
    """
    Look up a planet's fixed apparent magnitude.

    Example:
        >>> planet_magnitude("Venus")
        -4.0
    """
    return PLANET_MAGNITUDES[resolve_planet_name(name)]
