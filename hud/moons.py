# hud/moons.py
"""
Computes the phase of each configured moon from the world clock.

This is not an orbital model: every moon simply repeats its cycle every
`cycle_days`, shifted by `phase_offset` so moons do not all line up.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .definitions import calendar as calendar_defs
from .definitions import moons as moon_defs

log = logging.getLogger(__name__)


class MoonConfig(BaseModel):
    """One tracked celestial body. Field aliases match the stored JSON."""
    name: str
    cycle_days: float = Field(alias="cycleDays", gt=0)
    color: str = moon_defs.DEFAULT_MOON_COLOR
    phase_offset: float = Field(default=0.0, alias="phaseOffset")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("phase_offset")
    @classmethod
    def wrap_offset(cls, value: float) -> float:
        # Offsets are a position on the unit circle, so 1.25 means 0.25
        return value % 1.0


@dataclass(frozen=True)
class PhaseDescriptor:
    """Bucketed moon phase. Icons are looked up by bucket_index elsewhere."""
    bucket_index: int
    label: str


def phase_ratio(world_time_seconds: float, moon: MoonConfig) -> float:
    """Returns how far through its cycle the moon is, in [0, 1)."""
    cycle_seconds = moon.cycle_days * calendar_defs.SECONDS_PER_DAY
    if cycle_seconds <= 0:
        raise ValueError(f"Moon '{moon.name}' has a non-positive cycle of {moon.cycle_days} days.")
    raw_ratio = (world_time_seconds % cycle_seconds) / cycle_seconds
    return (raw_ratio + moon.phase_offset) % 1.0


def bucket_for_ratio(ratio: float) -> int:
    """Maps cycle progress onto one of the eight phase buckets."""
    for upper_bound, bucket_index in moon_defs.PHASE_BUCKETS:
        if ratio < upper_bound:
            return bucket_index
    return moon_defs.WRAP_BUCKET


def compute_moon_phase(world_time_seconds: float, moon: MoonConfig) -> PhaseDescriptor:
    """
    Computes the phase of a single moon.

    Raises:
        ValueError: if the moon's cycle length is zero or negative.
    """
    bucket_index = bucket_for_ratio(phase_ratio(world_time_seconds, moon))
    return PhaseDescriptor(bucket_index=bucket_index, label=moon_defs.PHASE_LABELS[bucket_index])


def compute_moon_phases(world_time_seconds: float, moons: Sequence[MoonConfig]) -> List[Tuple[MoonConfig, PhaseDescriptor]]:
    """Computes every moon's phase, skipping moons whose phase is undefined."""
    phases = []
    for moon in moons:
        try:
            phases.append((moon, compute_moon_phase(world_time_seconds, moon)))
        except ValueError as e:
            log.warning("Skipping moon phase: %s", e)
    return phases


def parse_moon_configs(raw: Union[str, Sequence[Any], None]) -> List[MoonConfig]:
    """
    Parses the stored moon configuration.

    Accepts the JSON string from the settings store or an already decoded
    list. Malformed data degrades to zero moons; a bad entry is dropped
    without affecting the others.
    """
    if raw is None:
        return []

    data: Any = raw
    if isinstance(raw, (str, bytes)):
        try:
            data = json.loads(raw)
        except (ValueError, TypeError):
            log.warning("Moon configuration is not valid JSON, showing no moons.")
            return []

    if not isinstance(data, list):
        log.warning("Moon configuration must be a list, got %s. Showing no moons.", type(data).__name__)
        return []

    moons = []
    for i, entry in enumerate(data):
        try:
            moons.append(MoonConfig.model_validate(entry))
        except ValidationError as e:
            log.warning("Skipping moon entry %d: %s", i, e.errors()[0].get("msg", e))
    return moons
