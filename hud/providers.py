# hud/providers.py
"""
Read-only accessors into the tabletop host.

The overlay never owns world state. The controller reads everything it needs
through a HostProvider, and a failed read is replaced by a placeholder so one
missing value cannot blank the whole display.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Sequence, TypeVar

import config

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Combatant:
    """The combatant whose turn it is."""
    display_name: str


@dataclass(frozen=True)
class Point:
    """A token position on the scene canvas."""
    x: float
    y: float
    elevation: float = 0.0


@dataclass(frozen=True)
class Region:
    """A named rectangular scene region, optionally bounded in elevation."""
    name: str
    x: float
    y: float
    width: float
    height: float
    bottom: Optional[float] = None
    top: Optional[float] = None

    def contains(self, point: Point) -> bool:
        if not (self.x <= point.x <= self.x + self.width and self.y <= point.y <= self.y + self.height):
            return False
        if self.bottom is not None and point.elevation < self.bottom:
            return False
        if self.top is not None and point.elevation > self.top:
            return False
        return True


class HostProvider(Protocol):
    """Everything the overlay reads from the host application."""

    def get_world_clock_seconds(self) -> int: ...

    def get_current_location_name(self) -> str: ...

    def get_current_weather_label(self) -> str: ...

    def get_ambient_darkness_level(self) -> float: ...

    def is_combat_active(self) -> bool: ...

    def get_active_combatant(self) -> Optional[Combatant]: ...

    def get_combat_round(self) -> int: ...

    def get_active_music_track_title(self) -> Optional[str]: ...

    def get_world_name(self) -> str: ...


def resolve_location(scene_name: Optional[str], point: Optional[Point], regions: Sequence[Region]) -> str:
    """
    Returns the scene name refined by the region under the token.
    When regions overlap the point, the last matching region wins.
    """
    location = scene_name or config.UNKNOWN_PLACEHOLDER
    if point is None:
        return location
    for region in regions:
        if region.contains(point):
            location = region.name
    return location


def read_or_placeholder(accessor: Callable[[], T], field_name: str,
                        placeholder: Optional[T] = config.UNKNOWN_PLACEHOLDER) -> Optional[T]:
    """Calls a provider accessor, substituting the placeholder on failure."""
    try:
        return accessor()
    except Exception:
        log.warning("Host read for '%s' failed, using placeholder.", field_name, exc_info=True)
        return placeholder


@dataclass
class StandaloneHost:
    """
    In-memory host used when the overlay runs on its own (and in tests).
    The world clock only moves when advance() is called.
    """
    world_time: int = 0
    world_name: str = "Faerûn"
    scene_name: Optional[str] = None
    scene_nav_name: Optional[str] = None
    weather: Optional[str] = None
    darkness: float = 0.0
    regions: List[Region] = field(default_factory=list)
    token_point: Optional[Point] = None
    combat_active: bool = False
    combatant: Optional[Combatant] = None
    combat_round: int = 0
    music_track: Optional[str] = None

    def advance(self, seconds: int) -> int:
        self.world_time += seconds
        return self.world_time

    def get_world_clock_seconds(self) -> int:
        return self.world_time

    def get_current_location_name(self) -> str:
        return resolve_location(self.scene_nav_name or self.scene_name, self.token_point, self.regions)

    def get_current_weather_label(self) -> str:
        return self.weather or config.DEFAULT_WEATHER

    def get_ambient_darkness_level(self) -> float:
        return min(1.0, max(0.0, self.darkness))

    def is_combat_active(self) -> bool:
        return self.combat_active

    def get_active_combatant(self) -> Optional[Combatant]:
        return self.combatant

    def get_combat_round(self) -> int:
        return self.combat_round

    def get_active_music_track_title(self) -> Optional[str]:
        return self.music_track

    def get_world_name(self) -> str:
        return self.world_name
