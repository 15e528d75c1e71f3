# tests/test_moons.py
import unittest
import json
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pydantic import ValidationError

from hud import moons
from hud.moons import MoonConfig
from hud.definitions import moons as moon_defs
from hud.definitions.calendar import SECONDS_PER_DAY

class TestMoonPhases(unittest.TestCase):
    """Test suite for moon phase bucketing."""

    def setUp(self):
        self.luna = MoonConfig(name="Luna", cycle_days=29.5)
        self.cycle_seconds = 29.5 * SECONDS_PER_DAY

    def test_new_moon_at_epoch(self):
        phase = moons.compute_moon_phase(0, self.luna)
        self.assertEqual(phase.bucket_index, moon_defs.NEW_MOON)
        self.assertEqual(phase.label, "New Moon")

    def test_full_moon_at_half_cycle(self):
        phase = moons.compute_moon_phase(0.5 * self.cycle_seconds, self.luna)
        self.assertEqual(phase.bucket_index, moon_defs.FULL_MOON)
        self.assertEqual(phase.label, "Full Moon")

    def test_phase_is_periodic(self):
        self.assertEqual(
            moons.compute_moon_phase(self.cycle_seconds * 1.5, self.luna),
            moons.compute_moon_phase(self.cycle_seconds * 0.5, self.luna),
        )
        self.assertEqual(
            moons.compute_moon_phase(self.cycle_seconds * 3, self.luna),
            moons.compute_moon_phase(0, self.luna),
        )

    def test_offset_shifts_by_half_a_cycle(self):
        shifted = MoonConfig(name="Celestia", cycle_days=29.5, phase_offset=0.5)
        self.assertEqual(moons.compute_moon_phase(0, self.luna).label, "New Moon")
        self.assertEqual(moons.compute_moon_phase(0, shifted).label, "Full Moon")

    def test_offset_wraps_around_the_cycle(self):
        moon = MoonConfig(name="Umbra", cycle_days=10, phase_offset=0.25)
        # 0.8 of the way through plus 0.25 lands at 0.05
        phase = moons.compute_moon_phase(8 * SECONDS_PER_DAY, moon)
        self.assertEqual(phase.bucket_index, moon_defs.NEW_MOON)

    def test_offset_outside_unit_interval_is_wrapped(self):
        self.assertAlmostEqual(MoonConfig(name="A", cycle_days=1, phase_offset=1.25).phase_offset, 0.25)
        self.assertAlmostEqual(MoonConfig(name="A", cycle_days=1, phase_offset=-0.25).phase_offset, 0.75)

    def test_negative_time_counts_backwards(self):
        phase = moons.compute_moon_phase(-0.25 * self.cycle_seconds, self.luna)
        self.assertEqual(phase.bucket_index, moon_defs.LAST_QUARTER)

    def test_bucket_boundaries(self):
        """The asymmetric eight-way split, checked on both sides of every bound."""
        cases = [
            (0.0, 0), (0.059, 0), (0.06, 1), (0.2399, 1), (0.24, 2), (0.25, 2),
            (0.2599, 2), (0.26, 3), (0.4899, 3), (0.49, 4), (0.5, 4), (0.5099, 4),
            (0.51, 5), (0.7399, 5), (0.74, 6), (0.7599, 6), (0.76, 7), (0.9399, 7),
            (0.94, 0), (0.9999, 0),
        ]
        for ratio, expected in cases:
            with self.subTest(ratio=ratio):
                self.assertEqual(moons.bucket_for_ratio(ratio), expected)

    def test_exact_phases_are_narrow(self):
        self.assertEqual(moons.compute_moon_phase(0.25 * self.cycle_seconds, self.luna).label, "First Quarter")
        self.assertEqual(moons.compute_moon_phase(0.3 * self.cycle_seconds, self.luna).label, "Waxing Gibbous")
        self.assertEqual(moons.compute_moon_phase(0.75 * self.cycle_seconds, self.luna).label, "Last Quarter")
        self.assertEqual(moons.compute_moon_phase(0.8 * self.cycle_seconds, self.luna).label, "Waning Crescent")

    def test_zero_cycle_is_rejected(self):
        with self.assertRaises(ValidationError):
            MoonConfig(name="Broken", cycle_days=0)
        with self.assertRaises(ValidationError):
            MoonConfig(name="Broken", cycle_days=-3)

    def test_zero_cycle_never_divides(self):
        broken = MoonConfig.model_construct(name="Broken", cycle_days=0, color="#fff", phase_offset=0.0)
        with self.assertRaises(ValueError):
            moons.compute_moon_phase(100, broken)

    def test_compute_moon_phases_skips_broken_moons(self):
        broken = MoonConfig.model_construct(name="Broken", cycle_days=0, color="#fff", phase_offset=0.0)
        with self.assertLogs("hud.moons", level="WARNING"):
            result = moons.compute_moon_phases(0, [self.luna, broken])
        self.assertEqual([moon.name for moon, _ in result], ["Luna"])

    def test_no_moons_is_not_an_error(self):
        self.assertEqual(moons.compute_moon_phases(0, []), [])


class TestMoonConfigParsing(unittest.TestCase):
    """Test suite for reading the stored moon configuration."""

    def test_parse_default_setting(self):
        parsed = moons.parse_moon_configs(moon_defs.DEFAULT_MOONS_SETTING)
        self.assertEqual([m.name for m in parsed], ["Luna", "Celestia", "Umbra"])
        self.assertEqual(parsed[1].phase_offset, 0.5)
        self.assertEqual(parsed[2].cycle_days, 400)
        self.assertEqual(parsed[0].color, "#e0e0e0")

    def test_invalid_json_means_no_moons(self):
        with self.assertLogs("hud.moons", level="WARNING"):
            self.assertEqual(moons.parse_moon_configs("[{not json"), [])

    def test_wrong_structure_means_no_moons(self):
        with self.assertLogs("hud.moons", level="WARNING"):
            self.assertEqual(moons.parse_moon_configs('{"name": "Luna"}'), [])

    def test_none_and_empty(self):
        self.assertEqual(moons.parse_moon_configs(None), [])
        self.assertEqual(moons.parse_moon_configs("[]"), [])

    def test_bad_entries_are_skipped(self):
        raw = json.dumps([
            {"name": "Luna", "cycleDays": 29.5},
            {"name": "Stalled", "cycleDays": 0},
            {"name": "Backwards", "cycleDays": -4},
            {"cycleDays": 12},
            "not a moon",
            {"name": "Selune", "cycleDays": "thirty"},
            {"name": "Shar", "cycleDays": 12, "phaseOffset": 0.1, "color": "#000000"},
        ])
        with self.assertLogs("hud.moons", level="WARNING") as logs:
            parsed = moons.parse_moon_configs(raw)
        self.assertEqual([m.name for m in parsed], ["Luna", "Shar"])
        self.assertEqual(len(logs.records), 5)

    def test_missing_color_and_offset_use_defaults(self):
        parsed = moons.parse_moon_configs([{"name": "Luna", "cycleDays": 29.5}])
        self.assertEqual(parsed[0].color, moon_defs.DEFAULT_MOON_COLOR)
        self.assertEqual(parsed[0].phase_offset, 0.0)

if __name__ == '__main__':
    unittest.main()
