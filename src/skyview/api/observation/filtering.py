"""
Object Filtering Functions

Narrow a sky query result down to what a viewer is pointing at, or to a
type, brightness or name. These functions never reorder their input, so a
brightness-sorted query stays sorted.
"""

from __future__ import annotations

from collections.abc import Iterable

import deal

from ..core.enums import CelestialObjectType
from ..core.utils import angle_difference
from .bodies import SkyObject


__all__ = [
    "filter_objects",
    "objects_in_view",
]


@deal.pre(lambda objects, view_azimuth, view_altitude, fov_degrees: fov_degrees > 0, message="FOV must be positive")
def objects_in_view(
    objects: Iterable[SkyObject],
    view_azimuth: float,
    view_altitude: float,
    fov_degrees: float,
) -> list[SkyObject]:
    """
    Objects within a square window around a viewing direction.

    An object is kept when both its azimuth (wrapping through north) and its
    altitude are strictly less than ``fov_degrees`` away from the view centre.

    Args:
        objects: SkyObjects to filter
        view_azimuth: Azimuth the viewer faces, degrees
        view_altitude: Altitude the viewer faces, degrees
        fov_degrees: Half-width of the window, degrees

    Returns:
        Matching objects in input order
    """
    return [
        obj
        for obj in objects
        if abs(angle_difference(obj.azimuth, view_azimuth)) < fov_degrees
        and abs(obj.altitude - view_altitude) < fov_degrees
    ]


def filter_objects(
    objects: Iterable[SkyObject],
    *,
    object_type: CelestialObjectType | str | None = None,
    max_magnitude: float | None = None,
    search_query: str | None = None,
) -> list[SkyObject]:
    """
    Filter SkyObjects by type, limiting magnitude and name.

    Args:
        objects: SkyObjects to filter
        object_type: Keep only this type ("star", "planet", "moon")
        max_magnitude: Keep objects at least this bright (magnitude <= value)
        search_query: Case-insensitive substring of the object name

    Returns:
        Matching objects in input order
    """
    filtered = list(objects)

    if object_type:
        wanted = CelestialObjectType(object_type)
        filtered = [obj for obj in filtered if obj.object_type == wanted]

    if max_magnitude is not None:
        filtered = [obj for obj in filtered if obj.magnitude <= max_magnitude]

    if search_query:
        needle = search_query.lower().strip()
        if needle:
            filtered = [obj for obj in filtered if needle in obj.name.lower()]

    return filtered
