"""
Celestial Bodies and Sky Objects

A CelestialBody is something with an equatorial position at a given
instant: a catalog star, a planet, or the Moon. A SkyObject pairs a body
with the horizontal position seen by one observer at that instant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..core.enums import CelestialObjectType, MoonPhase
from ..core.types import EquatorialCoordinates, HorizontalCoordinates


__all__ = [
    "CelestialBody",
    "Moon",
    "Planet",
    "SkyObject",
    "Star",
]


@dataclass(frozen=True)
class CelestialBody:
    """Base for every body the engine positions."""

    object_type: ClassVar[CelestialObjectType]

    name: str
    equatorial: EquatorialCoordinates  # Valid only for the instant it was computed at
    magnitude: float  # Apparent visual magnitude


@dataclass(frozen=True)
class Star(CelestialBody):
    """A star from the bright star catalog."""

    object_type: ClassVar[CelestialObjectType] = CelestialObjectType.STAR

    spectral_class: str
    catalog_index: int  # Foreign key used by constellation lines


@dataclass(frozen=True)
class Planet(CelestialBody):
    """One of the five naked-eye planets."""

    object_type: ClassVar[CelestialObjectType] = CelestialObjectType.PLANET


@dataclass(frozen=True)
class Moon(CelestialBody):
    """The Moon, with its illumination at the same instant."""

    object_type: ClassVar[CelestialObjectType] = CelestialObjectType.MOON

    phase: float  # Illuminated fraction, 0.0 (new) to 1.0 (full)
    phase_name: MoonPhase


@dataclass(frozen=True)
class SkyObject:
    """
    A body as seen by an observer.

    Created fresh for each query and never reused across instants or
    locations.
    """

    body: CelestialBody
    horizontal: HorizontalCoordinates

    @property
    def name(self) -> str:
        return self.body.name

    @property
    def magnitude(self) -> float:
        return self.body.magnitude

    @property
    def altitude(self) -> float:
        return self.horizontal.altitude

    @property
    def azimuth(self) -> float:
        return self.horizontal.azimuth

    @property
    def object_type(self) -> CelestialObjectType:
        return self.body.object_type

    @property
    def is_visible(self) -> bool:
        """True when the object is above the horizon."""
        return self.horizontal.above_horizon

    def to_dict(self) -> dict[str, object]:
        """Plain-dict form for JSON output."""
        data: dict[str, object] = {
            "type": self.object_type.value,
            "name": self.name,
            "magnitude": self.magnitude,
            "altitude": round(self.altitude, 4),
            "azimuth": round(self.azimuth, 4),
            "ra_degrees": round(self.body.equatorial.ra_degrees, 4),
            "dec_degrees": round(self.body.equatorial.dec_degrees, 4),
        }
        match self.body:
            case Star(spectral_class=spectral_class, catalog_index=catalog_index):
                data["spectral_class"] = spectral_class
                data["catalog_index"] = catalog_index
            case Moon(phase=phase, phase_name=phase_name):
                data["phase"] = round(phase, 4)
                data["phase_name"] = phase_name.value
        return data
