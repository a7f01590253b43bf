"""
Moon Phase Calculations

Illumination and phase name from the separation in right ascension
between the Moon and the Sun. This is a proxy for the true elongation,
which is adequate for labelling the phase but not for eclipse work.
"""

from __future__ import annotations

import math

import deal

from ..core.constants import DEGREES_PER_TURN, SYNODIC_MONTH_DAYS
from ..core.enums import MoonPhase
from ..core.utils import normalize_degrees
from .ephemeris import moon_position, sun_position


__all__ = [
    "moon_age_days",
    "moon_illumination",
    "moon_phase_angle",
    "moon_phase_name",
    "phase_name_for_angle",
]


# Phase names in order of increasing phase angle, one per 45° bin
_PHASE_SEQUENCE: tuple[MoonPhase, ...] = (
    MoonPhase.NEW_MOON,
    MoonPhase.WAXING_CRESCENT,
    MoonPhase.FIRST_QUARTER,
    MoonPhase.WAXING_GIBBOUS,
    MoonPhase.FULL_MOON,
    MoonPhase.WANING_GIBBOUS,
    MoonPhase.LAST_QUARTER,
    MoonPhase.WANING_CRESCENT,
)


@deal.post(lambda result: 0.0 <= result < 360.0)
def moon_phase_angle(jd: float) -> float:
    """
    Moon minus Sun right ascension, in degrees.

    0° is new moon, 90° first quarter, 180° full moon, 270° last quarter.
    """
    return normalize_degrees(moon_position(jd).ra_degrees - sun_position(jd).ra_degrees)


@deal.post(lambda result: 0.0 <= result <= 1.0, message="Illumination must be in [0, 1]")
def moon_illumination(jd: float) -> float:
    """
    Calculate the illuminated fraction of the Moon's disc.

    Args:
        jd: Julian Date

    Returns:
        Fraction from 0.0 (new moon) to 1.0 (full moon)
    """
    diff = moon_phase_angle(jd)
    return (1 - math.cos(math.radians(diff))) / 2


@deal.post(lambda result: 0.0 <= result <= SYNODIC_MONTH_DAYS)
def moon_age_days(jd: float) -> float:
    """
    Approximate days since the last new moon.

    The phase angle is scaled onto a mean synodic month, so the result
    inherits the coarseness of the right-ascension proxy.
    """
    return moon_phase_angle(jd) / DEGREES_PER_TURN * SYNODIC_MONTH_DAYS


def phase_name_for_angle(phase_angle: float) -> MoonPhase:
    """
    Name the phase for a phase angle.

    Each of the eight names covers 45°, centered on its nominal angle, so
    New Moon spans 337.5° to 22.5°.

    Args:
        phase_angle: Moon minus Sun right ascension in degrees

    Returns:
        MoonPhase enum value
    """
    index = int(normalize_degrees(phase_angle + 22.5) // 45.0) % len(_PHASE_SEQUENCE)
    return _PHASE_SEQUENCE[index]


def moon_phase_name(jd: float) -> MoonPhase:
    """Phase name of the Moon at the given Julian Date."""
    return phase_name_for_angle(moon_phase_angle(jd))
