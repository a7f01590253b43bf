"""
Unit tests for constants module.

Tests the astronomical constants used throughout the API.
"""

import unittest

from skyview.api.core.constants import (
    DEGREES_PER_HOUR_ANGLE,
    DEGREES_PER_TURN,
    J2000_JULIAN_DATE,
    JULIAN_DATE_UNIX_EPOCH,
    JULIAN_DAYS_PER_CENTURY,
    MILLISECONDS_PER_DAY,
    MOON_MAGNITUDE,
    SYNODIC_MONTH_DAYS,
)


class TestConstants(unittest.TestCase):
    """Test suite for constants module"""

    def test_epochs(self):
        """Test Julian Date epochs"""
        self.assertEqual(J2000_JULIAN_DATE, 2451545.0)
        self.assertEqual(JULIAN_DATE_UNIX_EPOCH, 2440587.5)
        # J2000.0 is 10957.5 days after the Unix epoch
        self.assertEqual(J2000_JULIAN_DATE - JULIAN_DATE_UNIX_EPOCH, 10957.5)

    def test_milliseconds_per_day(self):
        """Test milliseconds per day"""
        self.assertEqual(MILLISECONDS_PER_DAY, 24 * 60 * 60 * 1000)
        self.assertIsInstance(MILLISECONDS_PER_DAY, float)

    def test_julian_century(self):
        """Test days per Julian century"""
        self.assertEqual(JULIAN_DAYS_PER_CENTURY, 36525.0)

    def test_degrees_per_hour_angle(self):
        """Test degrees per hour of right ascension"""
        self.assertEqual(DEGREES_PER_HOUR_ANGLE, 15.0)
        self.assertEqual(DEGREES_PER_HOUR_ANGLE * 24, DEGREES_PER_TURN)

    def test_moon(self):
        """Test lunar constants"""
        self.assertEqual(MOON_MAGNITUDE, -12.74)
        self.assertAlmostEqual(SYNODIC_MONTH_DAYS, 29.53, places=2)


if __name__ == "__main__":
    unittest.main()
