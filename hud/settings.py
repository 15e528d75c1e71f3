# hud/settings.py
"""
Typed overlay settings. Values come from HUD_* environment variables or a
.env file; anything not set falls back to the defaults below.
"""
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .calendar import CalendarConfig, split_month_names
from .definitions import calendar as calendar_defs
from .definitions import moons as moon_defs
from .moons import MoonConfig, parse_moon_configs


class HudSettings(BaseSettings):
    # --- Display ---
    enable_hud: bool = True
    theme: Literal["glass", "parchment", "solid"] = "glass"
    compact_mode: bool = False
    show_world_name: bool = False

    # --- Widget toggles ---
    show_location: bool = True
    show_date: bool = True
    show_weather: bool = True
    show_moons: bool = True
    show_combat: bool = True
    show_lighting: bool = True
    show_music: bool = True

    # --- Calendar ---
    current_year: int = calendar_defs.STARTING_YEAR
    era_suffix: str = calendar_defs.ERA_SUFFIX
    month_names: str = calendar_defs.MONTH_NAMES_SETTING
    days_in_month: int = Field(default=calendar_defs.DAYS_PER_MONTH, gt=0)

    # --- Moons (JSON list, parsed leniently at recompute time) ---
    moon_config: str = moon_defs.DEFAULT_MOONS_SETTING

    model_config = SettingsConfigDict(env_prefix="HUD_", env_file=".env", extra="ignore", frozen=True)

    @field_validator("month_names")
    @classmethod
    def require_months(cls, value: str) -> str:
        if not split_month_names(value):
            raise ValueError("at least one month name is required")
        return value

    def calendar_config(self) -> CalendarConfig:
        return CalendarConfig.from_month_string(self.current_year, self.era_suffix, self.month_names, self.days_in_month)

    def moon_configs(self) -> List[MoonConfig]:
        return parse_moon_configs(self.moon_config)


def load_settings(**overrides) -> HudSettings:
    """
    Loads settings. An unusable calendar fails here with a ValidationError,
    not on every recompute.
    """
    return HudSettings(**overrides)
