"""
Observer Location Configuration

Resolves the default observer location used when a caller does not pass
one explicitly. Sources, in order of precedence:

1. ``SKYVIEW_LATITUDE`` / ``SKYVIEW_LONGITUDE`` (and optional
   ``SKYVIEW_LOCATION_NAME``) environment variables
2. ``~/.config/skyview/observer_location.json``
3. DEFAULT_LOCATION (Greenwich Observatory)

The configuration is read-only; the engine never writes it.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

import deal

from ..core.exceptions import InvalidConfigurationError
from ..core.types import GeoPosition


logger = logging.getLogger(__name__)


__all__ = [
    "CONFIG_DIR_ENV",
    "DEFAULT_LOCATION",
    "LATITUDE_ENV",
    "LOCATION_NAME_ENV",
    "LONGITUDE_ENV",
    "ObserverLocation",
    "clear_observer_location",
    "get_config_path",
    "get_observer_location",
    "load_location",
    "location_from_env",
    "parse_location",
]


CONFIG_DIR_ENV = "SKYVIEW_CONFIG_DIR"
LATITUDE_ENV = "SKYVIEW_LATITUDE"
LONGITUDE_ENV = "SKYVIEW_LONGITUDE"
LOCATION_NAME_ENV = "SKYVIEW_LOCATION_NAME"


@dataclass(frozen=True)
class ObserverLocation:
    """Observer's geographic location."""

    latitude: float  # Degrees north (negative for south)
    longitude: float  # Degrees east (negative for west)
    name: str | None = None  # Optional location name

    def to_geo_position(self) -> GeoPosition:
        """Validated position for the engine."""
        return GeoPosition(latitude=self.latitude, longitude=self.longitude)


# Default location (Greenwich Observatory)
DEFAULT_LOCATION = ObserverLocation(
    latitude=51.4769,
    longitude=-0.0005,
    name="Greenwich Observatory (default)",
)

# Cached resolved location
_current_location: ObserverLocation | None = None


def get_config_path() -> Path:
    """Get path to observer location config file."""
    config_dir = os.environ.get(CONFIG_DIR_ENV)
    base = Path(config_dir) if config_dir else Path.home() / ".config" / "skyview"
    return base / "observer_location.json"


@deal.raises(InvalidConfigurationError)
def parse_location(data: object, source: str = "config") -> ObserverLocation:
    """
    Validate raw configuration data into an ObserverLocation.

    Args:
        data: Mapping with ``latitude``, ``longitude`` and optional ``name``
        source: Where the data came from, for error messages

    Returns:
        ObserverLocation with a latitude in -90..+90 and a longitude in -180..+180

    Raises:
        InvalidConfigurationError: If fields are missing or out of range
    """
    if not isinstance(data, dict):
        raise InvalidConfigurationError(f"{source}: expected an object, got {type(data).__name__}")
    if "latitude" not in data or "longitude" not in data:
        raise InvalidConfigurationError(f"{source}: missing required fields latitude and/or longitude")

    try:
        latitude = float(data["latitude"])
        longitude = float(data["longitude"])
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(f"{source}: latitude and longitude must be numbers") from e

    if not -90 <= latitude <= 90:
        raise InvalidConfigurationError(f"{source}: invalid latitude {latitude} (must be -90 to 90)")
    if not -180 <= longitude <= 180:
        raise InvalidConfigurationError(f"{source}: invalid longitude {longitude} (must be -180 to 180)")

    name = data.get("name")
    return ObserverLocation(latitude=latitude, longitude=longitude, name=str(name) if name else None)


def location_from_env() -> ObserverLocation | None:
    """
    Observer location from environment variables, if both are set.

    Returns:
        ObserverLocation, or None when the variables are absent or invalid
    """
    latitude = os.environ.get(LATITUDE_ENV)
    longitude = os.environ.get(LONGITUDE_ENV)
    if latitude is None or longitude is None:
        return None

    try:
        return parse_location(
            {"latitude": latitude, "longitude": longitude, "name": os.environ.get(LOCATION_NAME_ENV)},
            source="environment",
        )
    except InvalidConfigurationError as e:
        logger.warning(f"Ignoring observer location from environment: {e}")
        return None


@deal.post(lambda result: result is not None, message="Location must be returned")
def load_location() -> ObserverLocation:
    """
    Resolve the observer location from environment, config file, or default.

    Invalid sources are logged and skipped rather than raised.

    Returns:
        The first valid location found, or DEFAULT_LOCATION
    """
    from_env = location_from_env()
    if from_env is not None:
        logger.info(f"Using observer location from environment: {from_env.latitude:.4f}, {from_env.longitude:.4f}")
        return from_env

    config_path = get_config_path()
    if not config_path.exists():
        logger.debug(f"No saved location found at {config_path}")
        return DEFAULT_LOCATION

    try:
        with config_path.open("r") as f:
            data = json.load(f)
        location = parse_location(data, source=str(config_path))
    except (OSError, json.JSONDecodeError, InvalidConfigurationError) as e:
        logger.warning(f"Failed to load location from {config_path}: {e}. Using default location.")
        return DEFAULT_LOCATION

    logger.info(
        f"Loaded observer location: {location.name or 'Unnamed'} ({location.latitude:.4f}, {location.longitude:.4f})"
    )
    return location


def get_observer_location() -> ObserverLocation:
    """
    Get current observer location.

    Returns the cached location if already resolved, otherwise loads it.
    """
    global _current_location
    if _current_location is None:
        _current_location = load_location()
    return _current_location


def clear_observer_location() -> None:
    """Forget the cached location so the next lookup re-reads configuration."""
    global _current_location
    _current_location = None
