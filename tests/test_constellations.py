"""
Unit tests for constellations.py

Tests constellation figure data and visibility helpers.
"""

import unittest

from skyview.api.catalogs.constellations import (
    CONSTELLATIONS,
    Constellation,
    ConstellationVisibility,
    constellation_segments,
    constellation_visibility,
    get_constellation,
    validate_constellations,
)
from skyview.api.catalogs.stars import STAR_CATALOG, find_star
from skyview.api.core.exceptions import CatalogIntegrityError, UnknownBodyError
from skyview.api.core.types import EquatorialCoordinates, HorizontalCoordinates
from skyview.api.observation.bodies import SkyObject, Star


def _sky_star(name: str, altitude: float, azimuth: float = 180.0) -> SkyObject:
    star = find_star(name)
    return SkyObject(
        body=Star(
            name=star.name,
            equatorial=EquatorialCoordinates(star.ra_degrees, star.dec_degrees),
            magnitude=star.magnitude,
            spectral_class=star.spectral_class,
            catalog_index=star.index,
        ),
        horizontal=HorizontalCoordinates(altitude=altitude, azimuth=azimuth),
    )


class TestConstellationData(unittest.TestCase):
    """Test suite for the CONSTELLATIONS table"""

    def test_all_indices_valid(self):
        """Test every line index refers to a catalog star"""
        for constellation in CONSTELLATIONS:
            for line in constellation.lines:
                for index in line:
                    with self.subTest(constellation=constellation.name, index=index):
                        self.assertGreaterEqual(index, 0)
                        self.assertLess(index, len(STAR_CATALOG))

    def test_orion_figure(self):
        """Test Orion's lines resolve to the expected stars"""
        orion = get_constellation("Orion")
        names = [[STAR_CATALOG[index].name for index in line] for line in orion.lines]
        self.assertEqual(
            names,
            [
                ["Betelgeuse", "Bellatrix"],
                ["Betelgeuse", "Alnitak", "Alnilam", "Bellatrix"],
                ["Alnilam", "Rigel"],
            ],
        )

    def test_star_indices_distinct(self):
        """Test star_indices lists each star once"""
        orion = get_constellation("Orion")
        self.assertEqual(len(orion.star_indices), 5)
        self.assertEqual(len(set(orion.star_indices)), 5)

    def test_cassiopeia_has_no_lines(self):
        """Test a constellation with no catalog stars has an empty figure"""
        cassiopeia = get_constellation("Cassiopeia")
        self.assertEqual(cassiopeia.lines, ())
        self.assertEqual(cassiopeia.star_indices, ())

    def test_metadata(self):
        """Test descriptive fields are populated"""
        for constellation in CONSTELLATIONS:
            with self.subTest(constellation=constellation.name):
                self.assertTrue(constellation.description)
                self.assertTrue(constellation.mythology)
                self.assertTrue(constellation.main_stars)


class TestValidateConstellations(unittest.TestCase):
    """Test suite for validate_constellations function"""

    def test_builtin_table_valid(self):
        """Test the built-in table passes validation"""
        validate_constellations()

    def test_out_of_range_index(self):
        """Test an index past the catalog is rejected"""
        broken = Constellation(name="Broken", lines=((0, 50),), description="", main_stars=(), mythology="")
        with self.assertRaises(CatalogIntegrityError):
            validate_constellations([broken], catalog_size=50)

    def test_negative_index(self):
        """Test a negative index is rejected"""
        broken = Constellation(name="Broken", lines=((-1, 2),), description="", main_stars=(), mythology="")
        with self.assertRaises(CatalogIntegrityError):
            validate_constellations([broken])

    def test_empty_line(self):
        """Test an empty polyline is rejected"""
        broken = Constellation(name="Broken", lines=((),), description="", main_stars=(), mythology="")
        with self.assertRaises(CatalogIntegrityError):
            validate_constellations([broken])


class TestGetConstellation(unittest.TestCase):
    """Test suite for get_constellation function"""

    def test_case_insensitive(self):
        """Test lookup ignores case"""
        self.assertEqual(get_constellation("ursa major").name, "Ursa Major")

    def test_unknown(self):
        """Test unknown names raise UnknownBodyError"""
        with self.assertRaises(UnknownBodyError):
            get_constellation("Draco")


class TestConstellationSegments(unittest.TestCase):
    """Test suite for constellation_segments function"""

    def setUp(self):
        self.orion = get_constellation("Orion")

    def test_all_visible(self):
        """Test every segment is drawn when all stars are up"""
        sky = [_sky_star(name, 30.0) for name in ("Betelgeuse", "Bellatrix", "Alnitak", "Alnilam", "Rigel")]
        segments = constellation_segments(self.orion, sky)
        pairs = [(a.name, b.name) for a, b in segments]
        self.assertEqual(
            pairs,
            [
                ("Betelgeuse", "Bellatrix"),
                ("Betelgeuse", "Alnitak"),
                ("Alnitak", "Alnilam"),
                ("Alnilam", "Bellatrix"),
                ("Alnilam", "Rigel"),
            ],
        )

    def test_skips_star_below_horizon(self):
        """Test a hidden star is bridged by the next visible one"""
        sky = [
            _sky_star("Betelgeuse", 30.0),
            _sky_star("Bellatrix", 30.0),
            _sky_star("Alnitak", -2.0),
            _sky_star("Alnilam", 25.0),
            _sky_star("Rigel", 20.0),
        ]
        pairs = [(a.name, b.name) for a, b in constellation_segments(self.orion, sky)]
        self.assertIn(("Betelgeuse", "Alnilam"), pairs)
        self.assertNotIn(("Betelgeuse", "Alnitak"), pairs)
        self.assertEqual(len(pairs), 4)

    def test_missing_stars(self):
        """Test nothing is drawn when the stars are absent"""
        self.assertEqual(constellation_segments(self.orion, []), [])

    def test_single_star_line(self):
        """Test a one-star line yields no segment"""
        self.assertEqual(constellation_segments(get_constellation("Lyra"), [_sky_star("Vega", 60.0)]), [])


class TestConstellationVisibility(unittest.TestCase):
    """Test suite for constellation_visibility function"""

    def test_sorted_by_fraction(self):
        """Test the most complete figures come first"""
        sky = [
            _sky_star("Vega", 60.0),
            _sky_star("Betelgeuse", 20.0),
            _sky_star("Rigel", -5.0),
        ]
        visibility = constellation_visibility(sky)
        self.assertEqual(visibility[0], ConstellationVisibility(name="Lyra", stars_visible=1, total_stars=1))
        orion = next(v for v in visibility if v.name == "Orion")
        self.assertEqual(orion.stars_visible, 1)
        self.assertEqual(orion.total_stars, 5)
        self.assertAlmostEqual(orion.fraction, 0.2)

    def test_none_visible(self):
        """Test empty result when no figure star is up"""
        self.assertEqual(constellation_visibility([_sky_star("Sirius", 45.0)]), [])

    def test_fraction_with_no_stars(self):
        """Test a zero-star entry has zero fraction"""
        self.assertEqual(ConstellationVisibility(name="Empty", stars_visible=0, total_stars=0).fraction, 0.0)


if __name__ == "__main__":
    unittest.main()
