# hud/definitions/calendar.py
"""Defines the default fantasy calendar and time constants."""

# --- Time constants ---
SECONDS_PER_MINUTE: int = 60
MINUTES_PER_HOUR: int = 60
HOURS_PER_DAY: int = 24
SECONDS_PER_DAY: int = SECONDS_PER_MINUTE * MINUTES_PER_HOUR * HOURS_PER_DAY

# --- Default calendar (Calendar of Harptos, without festivals) ---
STARTING_YEAR: int = 1492
ERA_SUFFIX: str = "DR"
DAYS_PER_MONTH: int = 30

MONTH_NAMES = [
    "Hammer",      # Deepwinter
    "Alturiak",    # The Claw of Winter
    "Ches",        # The Claw of the Sunsets
    "Tarsakh",     # The Claw of the Storms
    "Mirtul",      # The Melting
    "Kythorn",     # The Time of Flowers
    "Flamerule",   # Summertide
    "Eleasis",     # Highsun
    "Eleint",      # The Fading
    "Marpenoth",   # Leaffall
    "Uktar",       # The Rotting
    "Nightal",     # The Drawing Down
]

# Settings store month names as one comma separated string
MONTH_NAMES_SETTING: str = ", ".join(MONTH_NAMES)

# Label used when a month index falls outside the configured list
UNKNOWN_MONTH: str = "Unknown"
