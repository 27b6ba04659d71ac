from datetime import datetime

from weatherdash.schemas import RawHourlySeries
from weatherdash.services.hourly import (
    DEFAULT_HOUR_INDEX,
    current_hour_index,
    day_part_temperatures,
    humidity_today_tomorrow,
    hour_from_timestamp,
    read_clock_hour,
    same_hour_offset_days,
    value_at,
)


def test_current_hour_index_passes_through_clock_hours() -> None:
    assert [current_hour_index(hour) for hour in (0, 8, 23)] == [0, 8, 23]


def test_current_hour_index_falls_back_to_noon_out_of_range() -> None:
    assert current_hour_index(24) == DEFAULT_HOUR_INDEX == 12
    assert current_hour_index(-1) == 12


def test_same_hour_offset_days() -> None:
    assert same_hour_offset_days(8, 1) == 32
    assert same_hour_offset_days(8, 0) == 8
    assert same_hour_offset_days(30, -1) == 6


def test_value_at_returns_default_out_of_bounds() -> None:
    assert value_at([55.0, 61.0], 1, 60.0) == 61.0
    assert value_at([1], 5, 60) == 60
    assert value_at([1], -1, 60) == 60
    assert value_at(None, 0, 60) == 60
    assert value_at([None], 0, 60) == 60


def test_read_clock_hour_uses_clock() -> None:
    assert read_clock_hour(lambda: datetime(2026, 2, 19, 17, 45)) == 17


def test_hour_from_timestamp_reads_provider_local_hour() -> None:
    assert hour_from_timestamp("2026-02-19T08:00") == 8
    assert hour_from_timestamp("2026-02-19T23:45") == 23
    assert hour_from_timestamp("not-a-time") is None
    assert hour_from_timestamp(None) is None


def test_read_clock_hour_falls_back_when_clock_fails() -> None:
    def broken_clock() -> datetime:
        raise OSError("clock unavailable")

    assert read_clock_hour(broken_clock) == 12


def test_humidity_today_tomorrow_reads_same_hour_next_day() -> None:
    humidity = [float(value) for value in range(48)]
    hourly = RawHourlySeries.model_validate({"relative_humidity_2m": humidity})

    assert humidity_today_tomorrow(hourly, 8) == (8.0, 32.0)


def test_humidity_today_tomorrow_defaults() -> None:
    hourly = RawHourlySeries.model_validate({"relative_humidity_2m": [70.0] * 24})

    assert humidity_today_tomorrow(hourly, 8) == (70.0, 58.0)
    assert humidity_today_tomorrow(None, 8) == (60.0, 58.0)


def test_day_part_temperatures() -> None:
    temperatures = [float(hour) for hour in range(24)]
    hourly = RawHourlySeries.model_validate({"temperature_2m": temperatures})

    assert day_part_temperatures(hourly) == {"morning": 8.0, "afternoon": 14.0, "evening": 20.0}
    assert day_part_temperatures(RawHourlySeries.model_validate({"temperature_2m": [5.0] * 10})) == {
        "morning": 5.0,
        "afternoon": None,
        "evening": None,
    }
