# tests/test_settings.py
import unittest
from unittest.mock import patch
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pydantic import ValidationError

from hud.settings import HudSettings, load_settings
from hud.calendar import CalendarConfig
from hud.definitions import calendar as calendar_defs

class TestHudSettings(unittest.TestCase):
    """Test suite for the typed settings provider."""

    def test_defaults(self):
        settings = load_settings()
        self.assertTrue(settings.enable_hud)
        self.assertEqual(settings.theme, "glass")
        self.assertFalse(settings.compact_mode)
        self.assertFalse(settings.show_world_name)
        self.assertTrue(settings.show_combat)
        self.assertEqual(settings.calendar_config(), CalendarConfig(
            starting_year=calendar_defs.STARTING_YEAR,
            era_suffix=calendar_defs.ERA_SUFFIX,
            month_names=tuple(calendar_defs.MONTH_NAMES),
            days_per_month=calendar_defs.DAYS_PER_MONTH,
        ))
        self.assertEqual([m.name for m in settings.moon_configs()], ["Luna", "Celestia", "Umbra"])

    def test_month_names_are_trimmed(self):
        settings = load_settings(month_names=" Seedfall ,Green-Tide,, Frostwind ")
        self.assertEqual(settings.calendar_config().month_names, ("Seedfall", "Green-Tide", "Frostwind"))
        self.assertEqual(settings.calendar_config().days_per_year, 90)

    def test_empty_months_fail_on_load(self):
        with self.assertRaises(ValidationError):
            load_settings(month_names=" , ,")

    def test_non_positive_days_fail_on_load(self):
        with self.assertRaises(ValidationError):
            load_settings(days_in_month=0)

    def test_unknown_theme_is_rejected(self):
        with self.assertRaises(ValidationError):
            load_settings(theme="neon")

    def test_environment_overrides(self):
        env = {"HUD_CURRENT_YEAR": "1500", "HUD_SHOW_MOONS": "false", "HUD_ERA_SUFFIX": "AS"}
        with patch.dict(os.environ, env):
            settings = HudSettings()
        self.assertEqual(settings.current_year, 1500)
        self.assertFalse(settings.show_moons)
        self.assertEqual(settings.era_suffix, "AS")

    def test_settings_are_frozen(self):
        settings = load_settings()
        with self.assertRaises(ValidationError):
            settings.current_year = 1600

if __name__ == '__main__':
    unittest.main()
