from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TypeVar

from weatherdash.schemas import RawHourlySeries


logger = logging.getLogger(__name__)

T = TypeVar("T")

HOURS_PER_DAY = 24
DEFAULT_HOUR_INDEX = 12
DEFAULT_HUMIDITY_TODAY = 60.0
DEFAULT_HUMIDITY_TOMORROW = 58.0
DAY_PART_HOURS = {"morning": 8, "afternoon": 14, "evening": 20}


def current_hour_index(clock_hour: int) -> int:
    """Index of ``clock_hour`` inside the first day of the hourly series."""
    if isinstance(clock_hour, int) and not isinstance(clock_hour, bool) and 0 <= clock_hour < HOURS_PER_DAY:
        return clock_hour
    return DEFAULT_HOUR_INDEX


def same_hour_offset_days(base_index: int, day_offset: int) -> int:
    return base_index + day_offset * HOURS_PER_DAY


def value_at(series: Sequence[T | None] | None, index: int, default: T) -> T:
    """Bounded lookup: missing series, out-of-range index or a null sample all give ``default``."""
    if series is None or index < 0 or index >= len(series):
        return default
    value = series[index]
    if value is None:
        return default
    return value


def read_clock_hour(clock: Callable[[], datetime] | None = None) -> int:
    """Current local hour, or noon when the clock cannot be read."""
    read = clock or datetime.now
    try:
        return read().hour
    except (OSError, OverflowError, ValueError) as exc:
        logger.warning("Could not read system clock, using hour %s: %s", DEFAULT_HOUR_INDEX, exc)
        return DEFAULT_HOUR_INDEX


def hour_from_timestamp(stamp: str | None) -> int | None:
    """Hour of a provider-local ISO timestamp such as ``2026-02-19T08:00``."""
    if not stamp:
        return None
    try:
        return datetime.fromisoformat(stamp).hour
    except (TypeError, ValueError):
        return None


def humidity_today_tomorrow(hourly: RawHourlySeries | None, hour_index: int) -> tuple[float, float]:
    humidity = hourly.relative_humidity if hourly else None
    today = value_at(humidity, hour_index, DEFAULT_HUMIDITY_TODAY)
    tomorrow = value_at(humidity, same_hour_offset_days(hour_index, 1), DEFAULT_HUMIDITY_TOMORROW)
    return today, tomorrow


def day_part_temperatures(hourly: RawHourlySeries | None) -> dict[str, float | None]:
    temperatures = hourly.temperature if hourly else None
    return {part: value_at(temperatures, hour, None) for part, hour in DAY_PART_HOURS.items()}
