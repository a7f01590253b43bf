"""
Sky Query

Single entry point for "what is up right now": positions every catalog
star, planet and the Moon for one instant and observer, keeps what is
above the horizon, and orders the result by brightness.

The query is a pure function of its arguments and the compiled-in
tables, so it is safe to call once per rendered frame and from several
threads at once.
"""

from __future__ import annotations

import logging

import deal

from ..astronomy.ephemeris import PLANET_NAMES, moon_position, planet_magnitude, planet_position
from ..astronomy.moon_phase import moon_illumination, moon_phase_name
from ..astronomy.transforms import equatorial_to_horizontal
from ..catalogs.stars import STAR_CATALOG
from ..core.constants import MOON_MAGNITUDE
from ..core.types import EquatorialCoordinates, GeoPosition, Instant
from .bodies import CelestialBody, Moon, Planet, SkyObject, Star


logger = logging.getLogger(__name__)


__all__ = [
    "compute_bodies",
    "compute_sky_objects",
    "query_sky",
]


def compute_bodies(
    instant: Instant,
    *,
    include_stars: bool = True,
    include_planets: bool = True,
    include_moon: bool = True,
) -> list[CelestialBody]:
    """
    Equatorial positions of every body at one instant, in definition order.

    Stars come first in catalog order, then planets in table order, then the
    Moon. This order breaks magnitude ties in query_sky().
    """
    jd = instant.jd
    bodies: list[CelestialBody] = []

    if include_stars:
        bodies.extend(
            Star(
                name=star.name,
                equatorial=EquatorialCoordinates(star.ra_degrees, star.dec_degrees),
                magnitude=star.magnitude,
                spectral_class=star.spectral_class,
                catalog_index=star.index,
            )
            for star in STAR_CATALOG
        )

    if include_planets:
        bodies.extend(
            Planet(name=name, equatorial=planet_position(name, jd), magnitude=planet_magnitude(name))
            for name in PLANET_NAMES
        )

    if include_moon:
        bodies.append(
            Moon(
                name="Moon",
                equatorial=moon_position(jd),
                magnitude=MOON_MAGNITUDE,
                phase=moon_illumination(jd),
                phase_name=moon_phase_name(jd),
            )
        )

    return bodies


def compute_sky_objects(
    instant: Instant,
    position: GeoPosition,
    *,
    include_stars: bool = True,
    include_planets: bool = True,
    include_moon: bool = True,
) -> list[SkyObject]:
    """
    Horizontal positions of every body, including those below the horizon.

    Args:
        instant: Moment of observation
        position: Observer location
        include_stars: Include catalog stars
        include_planets: Include the five planets
        include_moon: Include the Moon

    Returns:
        SkyObjects in definition order (stars, planets, Moon), unfiltered
    """
    jd = instant.jd
    bodies = compute_bodies(
        instant,
        include_stars=include_stars,
        include_planets=include_planets,
        include_moon=include_moon,
    )
    return [
        SkyObject(
            body=body,
            horizontal=equatorial_to_horizontal(
                body.equatorial.ra_degrees,
                body.equatorial.dec_degrees,
                position.latitude,
                position.longitude,
                jd,
            ),
        )
        for body in bodies
    ]


@deal.post(lambda result: all(obj.altitude > 0 for obj in result), message="Only objects above the horizon")
@deal.post(
    lambda result: all(a.magnitude <= b.magnitude for a, b in zip(result, result[1:], strict=False)),
    message="Objects must be sorted by magnitude",
)
def query_sky(
    instant: Instant,
    position: GeoPosition,
    *,
    include_stars: bool = True,
    include_planets: bool = True,
    include_moon: bool = True,
) -> tuple[SkyObject, ...]:
    """
    Get every object above the horizon, brightest first.

    Args:
        instant: Moment of observation
        position: Observer location
        include_stars: Include catalog stars
        include_planets: Include the five planets
        include_moon: Include the Moon

    Returns:
        SkyObjects with altitude > 0, sorted by ascending magnitude. Equal
        magnitudes keep definition order (stars, planets, Moon).

    Example:
        >>> sky = query_sky(Instant.now(), GeoPosition(40.7128, -74.0060))
        >>> [obj.name for obj in sky[:3]]  # doctest: +SKIP
    """
    objects = compute_sky_objects(
        instant,
        position,
        include_stars=include_stars,
        include_planets=include_planets,
        include_moon=include_moon,
    )
    visible = [obj for obj in objects if obj.altitude > 0]
    visible.sort(key=lambda obj: obj.magnitude)

    logger.debug(f"Sky query at {instant} for {position}: {len(visible)} of {len(objects)} objects above horizon")
    return tuple(visible)
