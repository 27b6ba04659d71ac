from __future__ import annotations

from datetime import date

from weatherdash.schemas import DayDetail, ForecastDay, RawDailySeries
from weatherdash.services.hourly import value_at


DEFAULT_FORECAST_DAYS = 7

# Default policy: precipitation is a safe zero, day-detail readings default to None
# ("not reported") and describe_day swaps in DISPLAY_PLACEHOLDERS for display.
DEFAULT_PRECIPITATION = 0.0

DISPLAY_PLACEHOLDERS = {
    "sunrise": "N/A",
    "sunset": "N/A",
    "pressure": "Low",
    "uv_index": "Low",
    "visibility": "High",
    "dew_point": "N/A",
    "wind_speed_max": "N/A",
}


def build_forecast(raw: RawDailySeries | None, days: int = DEFAULT_FORECAST_DAYS) -> list[ForecastDay]:
    if raw is None:
        return []
    if raw.temperature_min is None or raw.temperature_max is None or raw.weather_code is None:
        return []
    if not raw.date or days <= 0:
        return []

    forecast: list[ForecastDay] = []
    for idx, date_value in enumerate(raw.date[:days]):
        forecast.append(
            ForecastDay(
                date=date_value,
                min=value_at(raw.temperature_min, idx, None),
                max=value_at(raw.temperature_max, idx, None),
                weather_code=value_at(raw.weather_code, idx, None),
                precipitation=value_at(raw.precipitation_sum, idx, DEFAULT_PRECIPITATION),
            )
        )
    return forecast


def _clock_time(stamp: str | None) -> str | None:
    if not stamp or "T" not in stamp:
        return None
    return stamp.split("T", 1)[1]


def day_detail(raw: RawDailySeries | None, offset: int) -> DayDetail:
    if raw is None:
        return DayDetail()
    return DayDetail(
        date=value_at(raw.date, offset, None),
        sunrise=_clock_time(value_at(raw.sunrise, offset, None)),
        sunset=_clock_time(value_at(raw.sunset, offset, None)),
        pressure=value_at(raw.pressure, offset, None),
        uv_index=value_at(raw.uv_index, offset, None),
        visibility=value_at(raw.visibility, offset, None),
        dew_point=value_at(raw.dew_point, offset, None),
        wind_speed_max=value_at(raw.windspeed_max, offset, None),
    )


def describe_day(detail: DayDetail) -> dict[str, str]:
    described: dict[str, str] = {}
    for field_name, placeholder in DISPLAY_PLACEHOLDERS.items():
        value = getattr(detail, field_name)
        described[field_name] = placeholder if value is None else str(value)
    return described


def temperature_averages(forecast: list[ForecastDay]) -> tuple[int | None, int | None]:
    """Whole-degree mean of the daily minimums and maximums, skipping missing samples."""
    minimums = [day.min for day in forecast if day.min is not None]
    maximums = [day.max for day in forecast if day.max is not None]
    avg_min = round(sum(minimums) / len(minimums)) if minimums else None
    avg_max = round(sum(maximums) / len(maximums)) if maximums else None
    return avg_min, avg_max


def day_label(value: str) -> str:
    try:
        return date.fromisoformat(value[:10]).strftime("%a")
    except (TypeError, ValueError):
        return value
