"""
Shift Window Models

Handles wall-clock shift times entered as 24-hour "HH:MM" strings:
- Parsing to decimal hours and formatting back
- Shift duration with overnight normalization
- Runtime after downtime is removed

Durations are computed in whole minutes and converted to hours last, so
equal clock spans always give the same hours value.
"""

import math
import re
from dataclasses import dataclass
from typing import Tuple

from core.exceptions import InvalidInputError

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = HOURS_PER_DAY * MINUTES_PER_HOUR

TIME_PART_PATTERN = re.compile(r"[0-9]{1,2}")


def split_time_string(time_str: str) -> Tuple[int, int]:
    """
    Split a 24-hour "HH:MM" string into (hours, minutes).

    Each half must be one or two ASCII digits; signs and inner spaces are
    rejected.

    Raises:
        InvalidInputError: If the string is not HH:MM within 00:00-23:59
    """
    if not isinstance(time_str, str):
        raise InvalidInputError(f"Time must be a string in HH:MM form, got {time_str!r}")

    parts = time_str.strip().split(":")
    if len(parts) != 2:
        raise InvalidInputError(f"Invalid time '{time_str}': expected HH:MM")

    if not all(TIME_PART_PATTERN.fullmatch(part) for part in parts):
        raise InvalidInputError(f"Invalid time '{time_str}': hours and minutes must be digits")

    hours, minutes = int(parts[0]), int(parts[1])

    if not 0 <= hours < HOURS_PER_DAY:
        raise InvalidInputError(f"Invalid time '{time_str}': hours must be between 00 and 23")
    if not 0 <= minutes < MINUTES_PER_HOUR:
        raise InvalidInputError(f"Invalid time '{time_str}': minutes must be between 00 and 59")

    return hours, minutes


def parse_time_minutes(time_str: str) -> int:
    """Convert "HH:MM" to minutes after midnight"""
    hours, minutes = split_time_string(time_str)
    return hours * MINUTES_PER_HOUR + minutes


def parse_time_string(time_str: str) -> float:
    """
    Convert a 24-hour "HH:MM" string to decimal hours.

    Args:
        time_str: Time of day, e.g. "07:20"

    Returns:
        Decimal hours, e.g. 7.333...

    Raises:
        InvalidInputError: If the string is not two digit groups within
                           0-23 hours and 0-59 minutes

    Examples:
        >>> parse_time_string("14:50")
        14.833333333333334
    """
    hours, minutes = split_time_string(time_str)
    return hours + minutes / MINUTES_PER_HOUR


def format_time_string(decimal_hours: float) -> str:
    """
    Convert decimal hours back to an "HH:MM" string.

    Hours are floored and the remaining fraction is rounded to whole minutes.
    The minutes are rounded without carrying into the hour, so a value within
    half a minute of the next hour formats as "HH:60" (7.9999 -> "07:60").
    """
    hours = math.floor(decimal_hours)
    minutes = round((decimal_hours - hours) * MINUTES_PER_HOUR)
    return f"{hours:02d}:{minutes:02d}"


def calculate_shift_minutes(start_time: str, stop_time: str) -> int:
    """
    Whole minutes elapsed between two wall-clock times.

    A stop time earlier than the start time is treated as crossing
    midnight and normalized by adding a day.
    """
    minutes_diff = parse_time_minutes(stop_time) - parse_time_minutes(start_time)
    if minutes_diff < 0:
        minutes_diff += MINUTES_PER_DAY
    return minutes_diff


def calculate_total_hours(start_time: str, stop_time: str) -> float:
    """
    Hours elapsed between two wall-clock times.

    A stop time earlier than the start time is treated as crossing
    midnight and normalized by adding 24 hours.
    """
    return calculate_shift_minutes(start_time, stop_time) / MINUTES_PER_HOUR


@dataclass
class ShiftWindow:
    """
    A single production shift defined by wall-clock start/stop and downtime.

    Time strings are validated on construction; the derived durations are
    computed on access.
    """
    start_time: str
    stop_time: str
    idle_hours: float = 0.0

    def __post_init__(self):
        """Validate both time strings"""
        split_time_string(self.start_time)
        split_time_string(self.stop_time)

    @property
    def start_decimal(self) -> float:
        return parse_time_string(self.start_time)

    @property
    def stop_decimal(self) -> float:
        return parse_time_string(self.stop_time)

    @property
    def raw_hours(self) -> float:
        """Stop minus start before overnight normalization (may be negative)"""
        return (parse_time_minutes(self.stop_time) - parse_time_minutes(self.start_time)) / MINUTES_PER_HOUR

    @property
    def is_overnight(self) -> bool:
        return self.raw_hours < 0

    @property
    def total_hours(self) -> float:
        return calculate_total_hours(self.start_time, self.stop_time)

    @property
    def runtime_hours(self) -> float:
        """Shift length with downtime removed"""
        return self.total_hours - self.idle_hours

    def __repr__(self) -> str:
        overnight = " overnight" if self.is_overnight else ""
        return (
            f"ShiftWindow({self.start_time} → {self.stop_time}{overnight}, "
            f"total_hours={self.total_hours:.2f}, idle_hours={self.idle_hours:.2f})"
        )
