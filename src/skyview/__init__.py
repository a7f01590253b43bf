"""
SkyView Engine

Deterministic sky positions for the fifty brightest stars, the five
naked-eye planets, and the Moon, from a time and an observer location.

Positions use low-precision closed-form models (no perturbations,
refraction, or parallax) and are intended for sky-map style displays that
recompute every frame.

Example:
    >>> from skyview import GeoPosition, Instant, query_sky
    >>> sky = query_sky(Instant.now(), GeoPosition(latitude=40.7128, longitude=-74.0060))
    >>> for obj in sky[:5]:
    ...     print(obj.name, round(obj.altitude), round(obj.azimuth))
"""

from skyview.api.astronomy.ephemeris import moon_position, planet_magnitude, planet_position, sun_position
from skyview.api.astronomy.moon_phase import moon_age_days, moon_illumination, moon_phase_name
from skyview.api.astronomy.time_conversion import local_sidereal_time, to_julian_date
from skyview.api.astronomy.transforms import equatorial_to_horizontal
from skyview.api.catalogs.constellations import CONSTELLATIONS, get_constellation
from skyview.api.catalogs.stars import STAR_CATALOG, find_star
from skyview.api.core.exceptions import (
    InvalidCoordinateError,
    InvalidInputError,
    InvalidTimestampError,
    SkyviewError,
    UnknownBodyError,
)
from skyview.api.core.types import EquatorialCoordinates, GeoPosition, HorizontalCoordinates, Instant
from skyview.api.observation.bodies import CelestialBody, Moon, Planet, SkyObject, Star
from skyview.api.observation.sky_query import query_sky


__version__ = "0.1.0"

__all__ = [
    "CONSTELLATIONS",
    "STAR_CATALOG",
    "CelestialBody",
    "EquatorialCoordinates",
    "GeoPosition",
    "HorizontalCoordinates",
    "Instant",
    "InvalidCoordinateError",
    "InvalidInputError",
    "InvalidTimestampError",
    "Moon",
    "Planet",
    "SkyObject",
    "SkyviewError",
    "Star",
    "UnknownBodyError",
    "equatorial_to_horizontal",
    "find_star",
    "get_constellation",
    "local_sidereal_time",
    "moon_age_days",
    "moon_illumination",
    "moon_phase_name",
    "moon_position",
    "planet_magnitude",
    "planet_position",
    "query_sky",
    "sun_position",
    "to_julian_date",
]
