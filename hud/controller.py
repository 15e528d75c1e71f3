# hud/controller.py
"""
The Display State Controller.

Holds the per-viewer override map and minimized flag, asks the calendar and
moon engines for base values, layers overrides on top and hands an immutable
ViewModel to whoever renders it.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

import config
from .calendar import CalendarConfig, compute_calendar_date, format_external_date
from .definitions.lighting import get_light_level
from .moons import MoonConfig, compute_moon_phases
from .providers import HostProvider, read_or_placeholder
from .settings import HudSettings

log = logging.getLogger(__name__)

# Keys an override can mask
OVERRIDE_KEYS = ("location", "date", "weather", "lighting", "music", "world_name")

# Scheduler(delay_seconds, callback) -> handle with cancel()
Scheduler = Callable[[float, Callable[[], None]], Any]
ExternalCalendar = Callable[[int], Optional[Mapping[str, Any]]]
RenderListener = Callable[["ViewModel"], None]


def _loop_scheduler(delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
    return asyncio.get_running_loop().call_later(delay, callback)


@dataclass(frozen=True)
class FeatureFlags:
    """Per-widget visibility switches, fixed for one recompute."""
    show_location: bool = True
    show_date: bool = True
    show_weather: bool = True
    show_moons: bool = True
    show_combat: bool = True
    show_lighting: bool = True
    show_music: bool = True
    show_world_name: bool = False
    compact_mode: bool = False

    @classmethod
    def from_settings(cls, settings: HudSettings) -> "FeatureFlags":
        return cls(
            show_location=settings.show_location,
            show_date=settings.show_date,
            show_weather=settings.show_weather,
            show_moons=settings.show_moons,
            show_combat=settings.show_combat,
            show_lighting=settings.show_lighting,
            show_music=settings.show_music,
            show_world_name=settings.show_world_name,
            compact_mode=settings.compact_mode,
        )


@dataclass(frozen=True)
class MoonView:
    name: str
    color: str
    bucket_index: int
    label: str


@dataclass(frozen=True)
class ViewModel:
    """
    A fully resolved snapshot of the display. A field is None when its
    widget is switched off (or, for music, when nothing is playing).
    """
    world_time: int
    location: Optional[str]
    date: Optional[str]
    weather: Optional[str]
    lighting: Optional[str]
    music: Optional[str]
    world_name: Optional[str]
    moons: Tuple[MoonView, ...]
    is_minified: bool
    is_combat_active: bool
    flags: FeatureFlags


class FlashHandle:
    """Returned by flash_message(); cancel() stops the pending expiry."""

    def __init__(self, text: str):
        self.text = text
        self._timer = None
        self.cancelled = False
        self.expired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.expired)

    def cancel(self):
        if not self.pending:
            return
        self.cancelled = True
        if self._timer is not None:
            self._timer.cancel()


class HudController:
    """Owns one viewer's overlay state. Construct once and pass it around."""

    def __init__(self, host: HostProvider, settings: HudSettings,
                 scheduler: Optional[Scheduler] = None,
                 external_calendar: Optional[ExternalCalendar] = None):
        self.host = host
        self.overrides: Dict[str, str] = {}
        self.is_minified: bool = False
        self.view_model: Optional[ViewModel] = None
        self.external_calendar = external_calendar
        self._scheduler: Scheduler = scheduler or _loop_scheduler
        self._pending_flash: Optional[FlashHandle] = None
        self._listeners: List[RenderListener] = []
        self._last_clock: int = 0
        self._apply_settings(settings)

    # --- Settings ---

    def _apply_settings(self, settings: HudSettings):
        # Building the calendar here makes a bad calendar fail on load, not per recompute
        self.settings = settings
        self.calendar_config = settings.calendar_config()
        self.moon_configs = settings.moon_configs()
        self.flags = FeatureFlags.from_settings(settings)

    def update_settings(self, settings: HudSettings) -> Optional[ViewModel]:
        """Swaps in newly edited settings and recomputes."""
        self._apply_settings(settings)
        return self.refresh("settings")

    # --- Render listeners ---

    def add_listener(self, callback: RenderListener):
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: RenderListener):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify_listeners(self, view_model: ViewModel):
        for callback in list(self._listeners):
            try:
                callback(view_model)
            except Exception:
                log.exception("Render listener %r failed.", callback)

    # --- Recompute ---

    def request_recompute(self, clock: int, calendar_config: CalendarConfig,
                          moon_configs: Sequence[MoonConfig], flags: FeatureFlags) -> ViewModel:
        """
        Computes base values and resolves overrides into a new ViewModel.

        Precedence for the date is override > combat turn indicator > computed
        date. The combat substitution happens on the base value, before
        overrides are applied.
        """
        combat_active = bool(read_or_placeholder(self.host.is_combat_active, "combat state", placeholder=False))

        base: Dict[str, Optional[str]] = {}
        if flags.show_location:
            base["location"] = read_or_placeholder(self.host.get_current_location_name, "location")
        if flags.show_date:
            if flags.show_combat and combat_active:
                base["date"] = self._turn_indicator()
            else:
                base["date"] = self._computed_date(clock, calendar_config)
        if flags.show_weather:
            base["weather"] = read_or_placeholder(self.host.get_current_weather_label, "weather") or config.DEFAULT_WEATHER
        if flags.show_lighting:
            base["lighting"] = self._lighting()
        if flags.show_music:
            base["music"] = read_or_placeholder(self.host.get_active_music_track_title, "music")
        if flags.show_world_name:
            base["world_name"] = read_or_placeholder(self.host.get_world_name, "world name")

        # Only visible widgets have a base entry; a hidden widget stays hidden even if overridden
        resolved = {
            key: self.overrides[key] if key in self.overrides else value
            for key, value in base.items()
        }

        moons: Tuple[MoonView, ...] = ()
        if flags.show_moons:
            moons = tuple(
                MoonView(name=moon.name, color=moon.color, bucket_index=phase.bucket_index, label=phase.label)
                for moon, phase in compute_moon_phases(clock, moon_configs)
            )

        return ViewModel(
            world_time=clock,
            location=resolved.get("location"),
            date=resolved.get("date"),
            weather=resolved.get("weather"),
            lighting=resolved.get("lighting"),
            music=resolved.get("music"),
            world_name=resolved.get("world_name"),
            moons=moons,
            is_minified=self.is_minified,
            is_combat_active=combat_active,
            flags=flags,
        )

    def refresh(self, reason: str = "manual") -> Optional[ViewModel]:
        """Re-reads the host and settings, recomputes and notifies listeners."""
        if not self.settings.enable_hud:
            self.view_model = None
            log.debug("Recompute (%s) skipped, HUD disabled.", reason)
            return None

        clock = read_or_placeholder(self.host.get_world_clock_seconds, "world clock", placeholder=self._last_clock)
        self._last_clock = clock
        log.debug("Recompute (%s) at world time %s.", reason, clock)

        self.view_model = self.request_recompute(clock, self.calendar_config, self.moon_configs, self.flags)
        self._notify_listeners(self.view_model)
        return self.view_model

    def on_change(self, reason: str):
        """RecomputeChannel subscriber."""
        self.refresh(reason)

    def _computed_date(self, clock: int, calendar_config: CalendarConfig) -> str:
        if self.external_calendar is not None:
            try:
                parts = self.external_calendar(clock)
                if parts:
                    return format_external_date(parts)
            except Exception:
                log.warning("External calendar failed, using built-in calendar.", exc_info=True)
        return compute_calendar_date(clock, calendar_config)

    def _turn_indicator(self) -> str:
        combatant = read_or_placeholder(self.host.get_active_combatant, "active combatant", placeholder=None)
        name = combatant.display_name if combatant is not None else config.NO_COMBATANT_LABEL
        combat_round = read_or_placeholder(self.host.get_combat_round, "combat round", placeholder=0)
        if combat_round:
            return f"Round {combat_round}: {name}"
        return name

    def _lighting(self) -> str:
        darkness = read_or_placeholder(self.host.get_ambient_darkness_level, "darkness", placeholder=None)
        if darkness is None:
            return config.UNKNOWN_PLACEHOLDER
        try:
            return get_light_level(float(darkness))
        except (TypeError, ValueError):
            log.warning("Host reported a non-numeric darkness level %r, using placeholder.", darkness)
            return config.UNKNOWN_PLACEHOLDER

    # --- Control surface ---

    def set_override(self, key: str, value: Optional[str]):
        """Sets (or with None, removes) an override and recomputes immediately."""
        if key not in OVERRIDE_KEYS:
            log.debug("Override for unknown key '%s' stored but not displayed.", key)
        if value is None:
            self.overrides.pop(key, None)
        else:
            self.overrides[key] = value
        self.refresh("override")

    def flash_message(self, text: str, duration_ms: int = config.FLASH_DURATION_MS) -> FlashHandle:
        """
        Shows `text` in place of the date for `duration_ms`.

        A new flash cancels the previous flash's pending expiry, so an older
        timer can never clear a newer message. The default scheduler needs a
        running event loop; if scheduling fails, the previous flash is left
        untouched.
        """
        handle = FlashHandle(text)
        handle._timer = self._scheduler(duration_ms / 1000, lambda: self._expire_flash(handle))

        if self._pending_flash is not None:
            self._pending_flash.cancel()
        self._pending_flash = handle
        self.set_override("date", text)
        return handle

    def _expire_flash(self, handle: FlashHandle):
        if not handle.pending:
            return
        handle.expired = True
        if self._pending_flash is handle:
            self._pending_flash = None
        # Leave the date alone if something else replaced the flash text meanwhile
        if self.overrides.get("date") == handle.text:
            self.set_override("date", None)

    def toggle_minified(self) -> bool:
        self.is_minified = not self.is_minified
        self.refresh("minify")
        return self.is_minified
