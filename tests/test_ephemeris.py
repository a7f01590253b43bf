"""
Unit tests for ephemeris.py

Tests Sun, Moon and planet position models.
"""

import unittest

from skyview.api.astronomy.ephemeris import (
    PLANET_ELEMENTS,
    PLANET_NAMES,
    days_since_j2000,
    moon_position,
    obliquity,
    planet_magnitude,
    planet_position,
    resolve_planet_name,
    sun_position,
)
from skyview.api.core.exceptions import UnknownBodyError


J2000 = 2451545.0
SAMPLE_DATES = [J2000 + offset for offset in (-3650.0, -400.5, 0.0, 13.7, 180.25, 1000.0, 9000.9)]


class TestHelpers(unittest.TestCase):
    """Test suite for epoch helpers"""

    def test_days_since_j2000(self):
        """Test days elapsed since J2000.0"""
        self.assertEqual(days_since_j2000(J2000), 0.0)
        self.assertEqual(days_since_j2000(J2000 + 10.5), 10.5)

    def test_obliquity(self):
        """Test obliquity at epoch and its slow decrease"""
        self.assertEqual(obliquity(0.0), 23.439)
        self.assertLess(obliquity(36525.0), 23.439)


class TestSunPosition(unittest.TestCase):
    """Test suite for sun_position function"""

    def test_j2000(self):
        """Test the Sun's position at J2000.0"""
        sun = sun_position(J2000)
        self.assertAlmostEqual(sun.ra_degrees, 281.29, delta=0.2)
        self.assertAlmostEqual(sun.dec_degrees, -23.03, delta=0.1)

    def test_declination_bounded_by_obliquity(self):
        """Test the Sun never leaves the band set by the obliquity"""
        for jd in SAMPLE_DATES:
            with self.subTest(jd=jd):
                self.assertLessEqual(abs(sun_position(jd).dec_degrees), 23.5)


class TestMoonPosition(unittest.TestCase):
    """Test suite for moon_position function"""

    def test_declination_range(self):
        """Test the Moon's declination stays within about 29 degrees"""
        for jd in SAMPLE_DATES:
            with self.subTest(jd=jd):
                moon = moon_position(jd)
                self.assertLessEqual(abs(moon.dec_degrees), 29.0)
                self.assertGreaterEqual(moon.ra_degrees, 0.0)
                self.assertLess(moon.ra_degrees, 360.0)

    def test_moves_quickly(self):
        """Test the Moon moves roughly 13 degrees per day"""
        start = moon_position(J2000).ra_degrees
        end = moon_position(J2000 + 1.0).ra_degrees
        self.assertAlmostEqual((end - start) % 360.0, 13.2, delta=3.0)


class TestPlanetPosition(unittest.TestCase):
    """Test suite for planet_position function"""

    def test_mean_longitude_at_epoch(self):
        """Test RA equals the tabulated mean longitude at J2000.0"""
        for name in PLANET_NAMES:
            with self.subTest(name=name):
                self.assertAlmostEqual(
                    planet_position(name, J2000).ra_degrees, PLANET_ELEMENTS[name].mean_longitude, places=9
                )

    def test_venus_declination_at_epoch(self):
        """Test the inclination-based declination term"""
        self.assertAlmostEqual(planet_position("Venus", J2000).dec_degrees, -0.0204, delta=0.001)

    def test_case_insensitive(self):
        """Test planet names are matched case-insensitively"""
        self.assertEqual(planet_position("jupiter", J2000), planet_position("Jupiter", J2000))

    def test_declination_bounded(self):
        """Test declination stays within the clamp and the model's small amplitude"""
        for name in PLANET_NAMES:
            for jd in SAMPLE_DATES:
                with self.subTest(name=name, jd=jd):
                    dec = planet_position(name, jd).dec_degrees
                    self.assertLessEqual(abs(dec), 1.22)

    def test_unknown_planet(self):
        """Test unknown planet names raise UnknownBodyError"""
        with self.assertRaises(UnknownBodyError):
            planet_position("Pluto", J2000)

    def test_unknown_planet_is_lookup_error(self):
        """Test UnknownBodyError can be caught as LookupError"""
        with self.assertRaises(LookupError):
            planet_position("Vulcan", J2000)


class TestPlanetMagnitude(unittest.TestCase):
    """Test suite for planet_magnitude function"""

    def test_magnitudes(self):
        """Test the fixed magnitudes"""
        self.assertEqual(planet_magnitude("Venus"), -4.0)
        self.assertEqual(planet_magnitude("Jupiter"), -2.5)
        self.assertEqual(planet_magnitude("Mercury"), 0.0)
        self.assertEqual(planet_magnitude("Mars"), 0.5)
        self.assertEqual(planet_magnitude("Saturn"), 0.5)

    def test_unknown(self):
        """Test unknown names raise"""
        with self.assertRaises(UnknownBodyError):
            planet_magnitude("Neptune")


class TestResolvePlanetName(unittest.TestCase):
    """Test suite for resolve_planet_name function"""

    def test_canonical(self):
        """Test names resolve to table keys"""
        self.assertEqual(resolve_planet_name("  mars "), "Mars")
        self.assertEqual(resolve_planet_name("SATURN"), "Saturn")

    def test_order(self):
        """Test the planet table order"""
        self.assertEqual(PLANET_NAMES, ("Mercury", "Venus", "Mars", "Jupiter", "Saturn"))


if __name__ == "__main__":
    unittest.main()
