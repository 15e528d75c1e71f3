# hud/presenter.py
"""
Turns a ViewModel into display sections for a renderer.

Icons are looked up here by phase bucket, and truncation is an explicit
argument so the view model always carries the raw strings.
"""
from typing import Any, Dict, List, Optional

import config
from .controller import FeatureFlags, ViewModel
from .definitions import themes as theme_defs

ELLIPSIS = "…"


def truncate_text(text: str, limit: Optional[int]) -> str:
    """Shortens text to `limit` characters including the ellipsis. None means no limit."""
    if limit is None or len(text) <= limit:
        return text
    if limit <= 1:
        return ELLIPSIS[:limit]
    return text[:limit - 1].rstrip() + ELLIPSIS


def truncation_limit(flags: FeatureFlags) -> Optional[int]:
    """Long titles are cut in the full layout; compact mode shows them as they are."""
    return None if flags.compact_mode else config.LONG_TEXT_LIMIT


def phase_icon(bucket_index: int) -> str:
    return theme_defs.PHASE_ICONS[bucket_index]


def present(view_model: ViewModel, theme: str = theme_defs.THEME_GLASS,
            truncate_at: Optional[int] = None) -> Dict[str, Any]:
    """
    Builds the ordered list of sections a renderer paints.

    Each section is {"key", "icon", "text"}; moons carry their color and
    phase label too. Hidden widgets produce no section.
    """
    sections: List[Dict[str, Any]] = []

    def add(key: str, text: Optional[str], icon_key: Optional[str] = None, truncate: bool = False):
        if text is None:
            return
        if truncate:
            text = truncate_text(text, truncate_at)
        sections.append({"key": key, "icon": theme_defs.SECTION_ICONS[icon_key or key], "text": text})

    add("world_name", view_model.world_name)
    add("location", view_model.location, truncate=True)
    add("date", view_model.date, icon_key="combat" if view_model.is_combat_active and view_model.flags.show_combat else "date")
    add("weather", view_model.weather)
    add("lighting", view_model.lighting)
    add("music", view_model.music, truncate=True)

    moons = [
        {
            "name": moon.name,
            "color": moon.color,
            "icon": phase_icon(moon.bucket_index),
            "label": moon.label,
        }
        for moon in view_model.moons
    ]

    return {
        "theme": theme if theme in theme_defs.THEMES else theme_defs.THEME_GLASS,
        "compact": view_model.flags.compact_mode,
        "minified": view_model.is_minified,
        "sections": sections,
        "moons": moons,
    }
