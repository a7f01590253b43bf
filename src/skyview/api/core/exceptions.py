"""
Custom exception classes for the SkyView engine.

This module defines specific exceptions for the error conditions the
engine reports. Numerical drift is never reported as an error; it is
clamped at the call site.
"""

from __future__ import annotations


__all__ = [
    # Catalog exceptions
    "CatalogIntegrityError",
    # Configuration exceptions
    "ConfigurationError",
    "InvalidConfigurationError",
    "InvalidCoordinateError",
    # Input exceptions
    "InvalidInputError",
    "InvalidTimestampError",
    # Base exception
    "SkyviewError",
    "UnknownBodyError",
]


class SkyviewError(Exception):
    """
    Base exception for all SkyView errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch all engine-related errors.
    """

    pass


# ============================================================================
# Input Exceptions
# ============================================================================


class InvalidInputError(SkyviewError, ValueError):
    """
    Raised when an input lies outside the domain of a calculation.

    Inputs are never silently clamped; callers get this error instead.
    """

    pass


class InvalidCoordinateError(InvalidInputError):
    """
    Raised when coordinates are out of valid range.

    This occurs when:
    - Latitude is outside -90 to +90 degrees
    - Latitude or longitude is NaN or infinite
    """

    pass


class InvalidTimestampError(InvalidInputError):
    """
    Raised when a timestamp cannot be converted to a Julian Date.

    This occurs when the timestamp is not a number, is a boolean, or is
    NaN or infinite, or when a date string cannot be parsed.
    """

    pass


# ============================================================================
# Catalog Exceptions
# ============================================================================


class UnknownBodyError(SkyviewError, LookupError):
    """Raised when a planet, star, or constellation name is unknown."""

    pass


class CatalogIntegrityError(SkyviewError):
    """Raised when the compiled-in tables reference each other inconsistently."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(SkyviewError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid."""

    pass
