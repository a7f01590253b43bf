"""
Constellation Line Catalog

Static stick-figure definitions for a handful of prominent constellations,
with short descriptions and mythology. Lines are polylines of star catalog
indices, resolved from star names when the module loads so they always
match the order of ``stars.STAR_CATALOG``.

Visibility helpers work on SkyObjects produced by a sky query for one
instant and observer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import deal

from ..core.exceptions import CatalogIntegrityError, UnknownBodyError
from ..observation.bodies import SkyObject, Star
from .stars import STAR_CATALOG, find_star


logger = logging.getLogger(__name__)

__all__ = [
    "CONSTELLATIONS",
    "Constellation",
    "ConstellationVisibility",
    "constellation_segments",
    "constellation_visibility",
    "get_constellation",
    "validate_constellations",
]


@dataclass(frozen=True)
class Constellation:
    """A constellation stick figure with descriptive metadata."""

    name: str
    lines: tuple[tuple[int, ...], ...]  # Polylines of star catalog indices
    description: str
    main_stars: tuple[str, ...]  # Traditional principal stars (not all are in the catalog)
    mythology: str

    @property
    def star_indices(self) -> tuple[int, ...]:
        """Distinct catalog indices referenced by the figure, in first-use order."""
        return tuple(dict.fromkeys(index for line in self.lines for index in line))


@dataclass(frozen=True)
class ConstellationVisibility:
    """How much of a constellation's figure is above the horizon."""

    name: str
    stars_visible: int
    total_stars: int

    @property
    def fraction(self) -> float:
        return self.stars_visible / self.total_stars if self.total_stars else 0.0


def _figure(*names: str) -> tuple[int, ...]:
    """Resolve a polyline of star names to catalog indices."""
    return tuple(find_star(name).index for name in names)


CONSTELLATIONS: tuple[Constellation, ...] = (
    Constellation(
        name="Ursa Major",
        lines=(_figure("Dubhe", "Alioth", "Mizar", "Alkaid"),),
        description="The Great Bear - contains the Big Dipper asterism",
        main_stars=("Dubhe", "Merak", "Phecda", "Megrez", "Alioth", "Mizar", "Alkaid"),
        mythology=(
            "In Greek mythology, Ursa Major represents Callisto, transformed into a bear "
            "by Zeus's jealous wife Hera."
        ),
    ),
    Constellation(
        name="Orion",
        lines=(
            _figure("Betelgeuse", "Bellatrix"),
            _figure("Betelgeuse", "Alnitak", "Alnilam", "Bellatrix"),
            _figure("Alnilam", "Rigel"),
        ),
        description="The Hunter - most recognizable constellation",
        main_stars=("Betelgeuse", "Rigel", "Bellatrix", "Alnilam", "Alnitak", "Mintaka"),
        mythology="Orion was a legendary hunter in Greek mythology, placed among the stars by Zeus.",
    ),
    Constellation(
        name="Cassiopeia",
        lines=(),  # None of its stars are bright enough for the catalog
        description="The Queen - distinctive W or M shape",
        main_stars=("Schedar", "Caph", "Gamma Cassiopeiae", "Ruchbah", "Segin"),
        mythology=(
            "Queen Cassiopeia of Ethiopia, mother of Andromeda, boasted of her beauty and angered the gods."
        ),
    ),
    Constellation(
        name="Leo",
        lines=(_figure("Regulus", "Algieba"),),
        description="The Lion - prominent spring constellation",
        main_stars=("Regulus", "Denebola", "Algieba"),
        mythology="Represents the Nemean Lion slain by Hercules as his first labor.",
    ),
    Constellation(
        name="Scorpius",
        lines=(_figure("Antares", "Sargas", "Shaula"),),
        description="The Scorpion - distinctive hook shape",
        main_stars=("Antares", "Shaula", "Sargas"),
        mythology="The scorpion sent by Gaia to kill Orion. They are placed opposite in the sky.",
    ),
    Constellation(
        name="Lyra",
        lines=(_figure("Vega"),),
        description="The Lyre - small but bright constellation",
        main_stars=("Vega",),
        mythology="Represents the lyre of Orpheus, the legendary musician of Greek mythology.",
    ),
    Constellation(
        name="Cygnus",
        lines=(_figure("Deneb"),),
        description="The Swan - Northern Cross asterism",
        main_stars=("Deneb",),
        mythology="Zeus disguised as a swan. Forms the Summer Triangle with Vega and Altair.",
    ),
    Constellation(
        name="Aquila",
        lines=(_figure("Altair"),),
        description="The Eagle - summer constellation",
        main_stars=("Altair",),
        mythology="The eagle that carried Zeus's thunderbolts.",
    ),
    Constellation(
        name="Taurus",
        lines=(_figure("Aldebaran", "Elnath"),),
        description="The Bull - contains Pleiades cluster",
        main_stars=("Aldebaran", "Elnath"),
        mythology="Zeus transformed into a white bull to seduce Europa.",
    ),
    Constellation(
        name="Gemini",
        lines=(_figure("Pollux", "Castor"),),
        description="The Twins - winter constellation",
        main_stars=("Pollux", "Castor"),
        mythology="The twin brothers Castor and Pollux, sons of Zeus.",
    ),
)


@deal.raises(CatalogIntegrityError)
def validate_constellations(
    constellations: Iterable[Constellation] = CONSTELLATIONS,
    catalog_size: int = len(STAR_CATALOG),
) -> None:
    """
    Check that every line index refers to a star in the catalog.

    Raises:
        CatalogIntegrityError: If a line references a missing catalog index
    """
    for constellation in constellations:
        for line in constellation.lines:
            if not line:
                raise CatalogIntegrityError(f"{constellation.name}: empty line")
            for index in line:
                if not 0 <= index < catalog_size:
                    raise CatalogIntegrityError(
                        f"{constellation.name}: catalog index {index} out of range (0-{catalog_size - 1})"
                    )


validate_constellations()

_CONSTELLATIONS_BY_NAME: dict[str, Constellation] = {c.name.lower(): c for c in CONSTELLATIONS}


@deal.raises(UnknownBodyError)
def get_constellation(name: str) -> Constellation:
    """
    Look up a constellation by name (case-insensitive).

    Raises:
        UnknownBodyError: If the constellation is not in the table
    """
    constellation = _CONSTELLATIONS_BY_NAME.get(name.strip().lower())
    if constellation is None:
        raise UnknownBodyError(f"No such constellation: {name!r}")
    return constellation


def _visible_stars_by_index(sky_objects: Iterable[SkyObject]) -> dict[int, SkyObject]:
    return {
        obj.body.catalog_index: obj for obj in sky_objects if isinstance(obj.body, Star) and obj.altitude > 0
    }


def constellation_segments(
    constellation: Constellation,
    sky_objects: Iterable[SkyObject],
) -> list[tuple[SkyObject, SkyObject]]:
    """
    Line segments of a constellation figure that can be drawn.

    Each polyline is walked in order; stars that are missing from
    ``sky_objects`` or below the horizon are skipped and the line continues
    from the last drawable star.

    Args:
        constellation: Constellation to draw
        sky_objects: Result of a sky query

    Returns:
        List of (from, to) SkyObject pairs
    """
    visible = _visible_stars_by_index(sky_objects)
    segments: list[tuple[SkyObject, SkyObject]] = []
    for line in constellation.lines:
        previous: SkyObject | None = None
        for index in line:
            current = visible.get(index)
            if current is None:
                continue
            if previous is not None and previous is not current:
                segments.append((previous, current))
            previous = current
    return segments


def constellation_visibility(sky_objects: Iterable[SkyObject]) -> list[ConstellationVisibility]:
    """
    Constellations with at least one star above the horizon.

    Args:
        sky_objects: Result of a sky query

    Returns:
        ConstellationVisibility entries, most complete figure first
    """
    visible = _visible_stars_by_index(sky_objects)
    results: list[ConstellationVisibility] = []
    for constellation in CONSTELLATIONS:
        indices = constellation.star_indices
        count = sum(1 for index in indices if index in visible)
        if count:
            results.append(
                ConstellationVisibility(name=constellation.name, stars_visible=count, total_stars=len(indices))
            )
    results.sort(key=lambda item: item.fraction, reverse=True)
    logger.debug(f"{len(results)} constellations partly above the horizon")
    return results
