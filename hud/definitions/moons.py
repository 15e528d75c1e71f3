# hud/definitions/moons.py
"""
Moon phase buckets and the default moon configuration.
"""
import json

# Upper bound (exclusive) of cycle progress for each bucket, in order.
# Named phases get wide bands, the four exact phases narrow ones.
# Anything at or past the last bound wraps back to the new moon.
PHASE_BUCKETS = [
    (0.06, 0),  # New Moon
    (0.24, 1),  # Waxing Crescent
    (0.26, 2),  # First Quarter
    (0.49, 3),  # Waxing Gibbous
    (0.51, 4),  # Full Moon
    (0.74, 5),  # Waning Gibbous
    (0.76, 6),  # Last Quarter
    (0.94, 7),  # Waning Crescent
]
WRAP_BUCKET: int = 0

PHASE_LABELS = [
    "New Moon",
    "Waxing Crescent",
    "First Quarter",
    "Waxing Gibbous",
    "Full Moon",
    "Waning Gibbous",
    "Last Quarter",
    "Waning Crescent",
]

NEW_MOON = 0
FIRST_QUARTER = 2
FULL_MOON = 4
LAST_QUARTER = 6

DEFAULT_MOON_COLOR = "#ffffff"

DEFAULT_MOONS = [
    {"name": "Luna",     "cycleDays": 29.5, "color": "#e0e0e0", "phaseOffset": 0},
    {"name": "Celestia", "cycleDays": 7.0,  "color": "#aaffaa", "phaseOffset": 0.5},
    {"name": "Umbra",    "cycleDays": 400,  "color": "#aa00ff", "phaseOffset": 0.25},
]

# Settings store the moon list as a JSON string
DEFAULT_MOONS_SETTING: str = json.dumps(DEFAULT_MOONS)
