"""
Physical and Astronomical Constants

Constants used throughout the SkyView API for time and position calculations.
"""

from typing import Final


__all__ = [
    "DEGREES_PER_HOUR_ANGLE",
    "DEGREES_PER_TURN",
    "J2000_JULIAN_DATE",
    "JULIAN_DATE_UNIX_EPOCH",
    "JULIAN_DAYS_PER_CENTURY",
    "MILLISECONDS_PER_DAY",
    "MOON_MAGNITUDE",
    "SYNODIC_MONTH_DAYS",
]


# Time constants
J2000_JULIAN_DATE: Final[float] = 2451545.0
"""Julian Date of the J2000.0 epoch (2000-01-01 12:00 TT)."""

JULIAN_DATE_UNIX_EPOCH: Final[float] = 2440587.5
"""Julian Date of 1970-01-01 00:00 UTC."""

MILLISECONDS_PER_DAY: Final[float] = 86400000.0
"""Milliseconds in one civil day."""

JULIAN_DAYS_PER_CENTURY: Final[float] = 36525.0
"""Days per Julian century."""

SYNODIC_MONTH_DAYS: Final[float] = 29.530588
"""Mean length of the synodic month (new moon to new moon) in days."""

# Angular constants
DEGREES_PER_HOUR_ANGLE: Final[float] = 15.0
"""Degrees of sky rotation per hour of Right Ascension."""

DEGREES_PER_TURN: Final[float] = 360.0
"""Degrees in a full circle."""

# Photometric constants
MOON_MAGNITUDE: Final[float] = -12.74
"""Apparent magnitude assigned to the Moon (mean full-moon value)."""
