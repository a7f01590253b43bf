"""
Shared option handling for CLI commands.

Turns the raw ``--time``, ``--lat`` and ``--lon`` option values into the
Instant and GeoPosition the engine expects.
"""

import logging

from skyview.api.astronomy.time_conversion import parse_timestamp
from skyview.api.core.types import GeoPosition, Instant
from skyview.api.location.observer import get_observer_location


logger = logging.getLogger(__name__)

__all__ = ["resolve_instant", "resolve_position"]


def resolve_instant(time: str | None) -> Instant:
    """Instant for an ISO-8601 ``--time`` value, or now when omitted."""
    if time is None:
        return Instant.now()
    return Instant.from_datetime(parse_timestamp(time))


def resolve_position(latitude: float | None, longitude: float | None) -> GeoPosition:
    """
    Observer position from options, filling gaps from the configured location.

    Raises:
        InvalidCoordinateError: If the resulting latitude is out of range
    """
    if latitude is not None and longitude is not None:
        return GeoPosition(latitude=latitude, longitude=longitude)

    location = get_observer_location()
    logger.debug(f"Using configured observer location {location.name or 'Unnamed'}")
    return GeoPosition(
        latitude=location.latitude if latitude is None else latitude,
        longitude=location.longitude if longitude is None else longitude,
    )
