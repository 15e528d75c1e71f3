# hud/calendar.py
"""
Converts the elapsed-seconds world clock into a fantasy calendar date.
All functions here are pure; the calendar arrives as a CalendarConfig.
"""
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, Tuple

from .definitions import calendar as calendar_defs

log = logging.getLogger(__name__)


class CalendarConfigError(ValueError):
    """Raised when a calendar cannot be used to compute dates."""


def split_month_names(month_names: str) -> List[str]:
    """Splits a comma separated month list, dropping blank entries."""
    return [name.strip() for name in month_names.split(",") if name.strip()]


@dataclass(frozen=True)
class CalendarConfig:
    """World-scoped calendar settings. Every month has the same length."""
    starting_year: int
    era_suffix: str
    month_names: Tuple[str, ...]
    days_per_month: int

    def __post_init__(self):
        # Accept any sequence but store a tuple so the config stays hashable
        object.__setattr__(self, "month_names", tuple(self.month_names))
        if not self.month_names:
            raise CalendarConfigError("Calendar needs at least one month name.")
        if self.days_per_month <= 0:
            raise CalendarConfigError(f"Days per month must be positive, got {self.days_per_month}.")

    @property
    def days_per_year(self) -> int:
        return self.days_per_month * len(self.month_names)

    @classmethod
    def from_month_string(cls, starting_year: int, era_suffix: str, month_names: str, days_per_month: int) -> "CalendarConfig":
        """Builds a config from the comma separated month list used by the settings store."""
        return cls(starting_year, era_suffix, tuple(split_month_names(month_names)), days_per_month)


@dataclass(frozen=True)
class CalendarDate:
    """A structured calendar date. Day is 1-based, month_index 0-based."""
    year: int
    month_index: int
    month_name: str
    day: int


def calendar_date_parts(world_time_seconds: int, config: CalendarConfig) -> CalendarDate:
    """
    Splits a world clock value into year, month and day.

    Floor division is used throughout so times before the epoch count
    backwards into the previous year instead of truncating toward zero.
    """
    total_days = int(world_time_seconds // calendar_defs.SECONDS_PER_DAY)
    days_per_year = config.days_per_year

    year = config.starting_year + total_days // days_per_year
    day_of_year = total_days % days_per_year
    month_index = day_of_year // config.days_per_month
    day = (day_of_year % config.days_per_month) + 1

    return CalendarDate(
        year=year,
        month_index=month_index,
        month_name=_month_name(config.month_names, month_index),
        day=day,
    )


def compute_calendar_date(world_time_seconds: int, config: CalendarConfig) -> str:
    """
    Formats the world clock as "{day} {month}, {year} {era}".

    Example: 0 seconds with the default calendar is "1 Hammer, 1492 DR".
    """
    date = calendar_date_parts(world_time_seconds, config)
    return f"{date.day} {date.month_name}, {date.year} {config.era_suffix}"


def format_external_date(parts: Mapping[str, Any]) -> str:
    """Formats a date answered by an external calendar module."""
    return f"{parts['monthName']} {parts['day']}, {parts['year']}"


def _month_name(month_names: Sequence[str], month_index: int) -> str:
    if 0 <= month_index < len(month_names):
        return month_names[month_index]
    log.warning("Month index %d outside configured %d months.", month_index, len(month_names))
    return calendar_defs.UNKNOWN_MONTH
