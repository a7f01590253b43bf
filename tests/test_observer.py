"""
Unit tests for observer.py

Tests observer location resolution from environment, config file, and default.
"""

import json
import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from skyview.api.core.exceptions import InvalidConfigurationError
from skyview.api.core.types import GeoPosition
from skyview.api.location.observer import (
    CONFIG_DIR_ENV,
    DEFAULT_LOCATION,
    LATITUDE_ENV,
    LOCATION_NAME_ENV,
    LONGITUDE_ENV,
    ObserverLocation,
    clear_observer_location,
    get_config_path,
    get_observer_location,
    load_location,
    location_from_env,
    parse_location,
)


class _CleanEnvironmentTestCase(unittest.TestCase):
    """Runs each test without SKYVIEW_* variables and with an empty cache."""

    def setUp(self):
        self.env_patcher = patch.dict(os.environ)
        self.env_patcher.start()
        for key in (CONFIG_DIR_ENV, LATITUDE_ENV, LONGITUDE_ENV, LOCATION_NAME_ENV):
            os.environ.pop(key, None)
        self.temp_dir = tempfile.mkdtemp()
        self.temp_config_file = Path(self.temp_dir) / "observer_location.json"
        clear_observer_location()

    def tearDown(self):
        clear_observer_location()
        self.env_patcher.stop()
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def write_config(self, data):
        with self.temp_config_file.open("w") as f:
            json.dump(data, f)


class TestObserverLocation(unittest.TestCase):
    """Test suite for ObserverLocation dataclass"""

    def test_creation(self):
        """Test creating ObserverLocation"""
        location = ObserverLocation(latitude=40.0, longitude=-100.0, name="Test Location")
        self.assertEqual(location.latitude, 40.0)
        self.assertEqual(location.longitude, -100.0)
        self.assertEqual(location.name, "Test Location")

    def test_default_name(self):
        """Test ObserverLocation without a name"""
        self.assertIsNone(ObserverLocation(latitude=40.0, longitude=-100.0).name)

    def test_frozen(self):
        """Test that ObserverLocation is frozen (immutable)"""
        location = ObserverLocation(latitude=40.0, longitude=-100.0)
        with self.assertRaises(AttributeError):
            location.latitude = 50.0

    def test_to_geo_position(self):
        """Test conversion to an engine position"""
        position = ObserverLocation(latitude=40.0, longitude=-100.0).to_geo_position()
        self.assertEqual(position, GeoPosition(latitude=40.0, longitude=-100.0))

    def test_default_location(self):
        """Test default location values"""
        self.assertEqual(DEFAULT_LOCATION.latitude, 51.4769)
        self.assertEqual(DEFAULT_LOCATION.longitude, -0.0005)
        self.assertIn("Greenwich", DEFAULT_LOCATION.name or "")


class TestGetConfigPath(_CleanEnvironmentTestCase):
    """Test suite for get_config_path function"""

    def test_default_path(self):
        """Test the default config path"""
        path = get_config_path()
        self.assertEqual(path.name, "observer_location.json")
        self.assertIn(".config", str(path))

    def test_env_override(self):
        """Test the config directory can be set from the environment"""
        os.environ[CONFIG_DIR_ENV] = self.temp_dir
        self.assertEqual(get_config_path(), self.temp_config_file)


class TestParseLocation(unittest.TestCase):
    """Test suite for parse_location function"""

    def test_valid(self):
        """Test parsing valid data"""
        location = parse_location({"latitude": "40.5", "longitude": -74, "name": "Home"})
        self.assertEqual(location, ObserverLocation(latitude=40.5, longitude=-74.0, name="Home"))

    def test_invalid(self):
        """Test invalid data raises InvalidConfigurationError"""
        for data in (
            [],
            {"name": "Test"},
            {"latitude": "north", "longitude": 0},
            {"latitude": 100.0, "longitude": 0},
            {"latitude": 0, "longitude": 200.0},
        ):
            with self.subTest(data=data), self.assertRaises(InvalidConfigurationError):
                parse_location(data)


class TestLocationFromEnv(_CleanEnvironmentTestCase):
    """Test suite for location_from_env function"""

    def test_absent(self):
        """Test None when variables are not set"""
        self.assertIsNone(location_from_env())

    def test_partial(self):
        """Test None when only one coordinate is set"""
        os.environ[LATITUDE_ENV] = "10"
        self.assertIsNone(location_from_env())

    def test_present(self):
        """Test location from environment variables"""
        os.environ[LATITUDE_ENV] = "35.6762"
        os.environ[LONGITUDE_ENV] = "139.6503"
        os.environ[LOCATION_NAME_ENV] = "Tokyo"
        location = location_from_env()
        self.assertEqual(location, ObserverLocation(latitude=35.6762, longitude=139.6503, name="Tokyo"))

    def test_invalid(self):
        """Test invalid values are ignored"""
        os.environ[LATITUDE_ENV] = "95"
        os.environ[LONGITUDE_ENV] = "0"
        with self.assertLogs("skyview.api.location.observer", level="WARNING"):
            self.assertIsNone(location_from_env())


class TestLoadLocation(_CleanEnvironmentTestCase):
    """Test suite for load_location function"""

    def test_load_from_file(self):
        """Test loading location from file"""
        self.write_config({"latitude": 40.0, "longitude": -100.0, "name": "Test"})
        with patch("skyview.api.location.observer.get_config_path", return_value=self.temp_config_file):
            location = load_location()
        self.assertEqual(location, ObserverLocation(latitude=40.0, longitude=-100.0, name="Test"))

    def test_file_not_exists(self):
        """Test the default when no file exists"""
        with patch("skyview.api.location.observer.get_config_path", return_value=self.temp_config_file):
            self.assertEqual(load_location(), DEFAULT_LOCATION)

    def test_invalid_json(self):
        """Test the default when the file is not valid JSON"""
        self.temp_config_file.write_text("invalid json{")
        with patch("skyview.api.location.observer.get_config_path", return_value=self.temp_config_file):
            self.assertEqual(load_location(), DEFAULT_LOCATION)

    def test_invalid_latitude(self):
        """Test the default when latitude is out of range"""
        self.write_config({"latitude": 100.0, "longitude": -100.0})
        with (
            patch("skyview.api.location.observer.get_config_path", return_value=self.temp_config_file),
            self.assertLogs("skyview.api.location.observer", level="WARNING"),
        ):
            self.assertEqual(load_location(), DEFAULT_LOCATION)

    def test_environment_wins(self):
        """Test environment variables take precedence over the file"""
        self.write_config({"latitude": 40.0, "longitude": -100.0})
        os.environ[LATITUDE_ENV] = "-33.8688"
        os.environ[LONGITUDE_ENV] = "151.2093"
        with patch("skyview.api.location.observer.get_config_path", return_value=self.temp_config_file):
            location = load_location()
        self.assertEqual(location.latitude, -33.8688)
        self.assertEqual(location.longitude, 151.2093)


class TestGetObserverLocation(_CleanEnvironmentTestCase):
    """Test suite for the cached accessor"""

    def test_cached(self):
        """Test the location is loaded once until cleared"""
        with patch("skyview.api.location.observer.load_location", return_value=DEFAULT_LOCATION) as mock_load:
            self.assertIs(get_observer_location(), DEFAULT_LOCATION)
            self.assertIs(get_observer_location(), DEFAULT_LOCATION)
            self.assertEqual(mock_load.call_count, 1)
            clear_observer_location()
            get_observer_location()
            self.assertEqual(mock_load.call_count, 2)


if __name__ == "__main__":
    unittest.main()
