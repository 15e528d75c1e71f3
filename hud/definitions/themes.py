# hud/definitions/themes.py
"""
Presentation lookup tables: visual themes and the icons shown next to each section.
"""

THEME_GLASS = "glass"
THEME_PARCHMENT = "parchment"
THEME_SOLID = "solid"

THEMES = {
    THEME_GLASS: "Mana Glass (Blue Gradient)",
    THEME_PARCHMENT: "Old Parchment (Paper)",
    THEME_SOLID: "Solid Contrast (Black/White)",
}

# Indexed by phase bucket (see definitions/moons.py)
PHASE_ICONS = [
    "🌑",  # New Moon
    "🌒",  # Waxing Crescent
    "🌓",  # First Quarter
    "🌔",  # Waxing Gibbous
    "🌕",  # Full Moon
    "🌖",  # Waning Gibbous
    "🌗",  # Last Quarter
    "🌘",  # Waning Crescent
]

SECTION_ICONS = {
    "world_name": "🌍",
    "location": "📍",
    "date": "📅",
    "combat": "⚔️",
    "weather": "🌤️",
    "lighting": "💡",
    "music": "🎵",
}
