# config.py
"""
Overlay runtime configuration settings.
"""

HOST = "127.0.0.1"  # Control surface only listens locally
PORT = 4010         # Port for the HUD control API
DB_NAME = "grimoire_hud.db" # SQLite file holding the persisted screen position
INSTALLATION_ID = "default" # Key for the persisted screen position

# --- Clock Watcher ---
TICKER_INTERVAL_SECONDS = 1.0     # How often the host clock is polled.
WORLD_SECONDS_PER_TICK = 60       # Standalone host only: world seconds advanced per tick.

# --- Flash Messages ---
FLASH_DURATION_MS = 3000

# --- Display ---
UNKNOWN_PLACEHOLDER = "Unknown"   # Shown when a host provider read fails
DEFAULT_WEATHER = "Clear"
NO_COMBATANT_LABEL = "No Combatant"
LONG_TEXT_LIMIT = 28              # Location/music titles longer than this get an ellipsis
