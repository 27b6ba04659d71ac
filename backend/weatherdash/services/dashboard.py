from __future__ import annotations

from weatherdash.schemas import ForecastDay, RawWeatherPayload
from weatherdash.services.conditions import (
    background_theme_for,
    classify,
    condition_label,
    icon_for,
)
from weatherdash.services.forecast import (
    DEFAULT_FORECAST_DAYS,
    build_forecast,
    day_detail,
    day_label,
    describe_day,
    temperature_averages,
)
from weatherdash.services.hourly import (
    current_hour_index,
    day_part_temperatures,
    hour_from_timestamp,
    humidity_today_tomorrow,
    read_clock_hour,
)
from weatherdash.services.insights import generate_insights


def _forecast_row(day: ForecastDay) -> dict:
    category = classify(day.weather_code)
    return {
        "date": day.date,
        "label": day_label(day.date),
        "min": day.min,
        "max": day.max,
        "weather_code": day.weather_code,
        "precipitation": day.precipitation,
        "category": category.value,
        "icon": icon_for(category),
    }


def _day_card(
    *,
    payload: RawWeatherPayload,
    forecast: list[ForecastDay],
    offset: int,
    humidity: float,
    weather_code: int | None,
) -> dict:
    day = forecast[offset] if offset < len(forecast) else None
    detail = day_detail(payload.daily, offset)
    return {
        "date": day.date if day else detail.date,
        "max": day.max if day else None,
        "min": day.min if day else None,
        "icon": icon_for(classify(weather_code)),
        "humidity": humidity,
        "precipitation": day.precipitation if day else 0.0,
        "detail": detail.model_dump(),
        "display": describe_day(detail),
    }


def build_dashboard(
    *,
    place_name: str,
    payload: RawWeatherPayload,
    clock_hour: int | None = None,
    forecast_days: int = DEFAULT_FORECAST_DAYS,
) -> dict:
    current = payload.current_weather
    current_code = current.weather_code if current else None
    forecast = build_forecast(payload.daily, days=forecast_days)

    if clock_hour is None:
        # The hourly series is in the location's local time, as is current_weather.time.
        clock_hour = hour_from_timestamp(current.time if current else None)
    if clock_hour is None:
        clock_hour = read_clock_hour()
    hour_index = current_hour_index(clock_hour)
    humidity_today, humidity_tomorrow = humidity_today_tomorrow(payload.hourly, hour_index)

    tomorrow_code = forecast[1].weather_code if len(forecast) > 1 else None
    avg_min, avg_max = temperature_averages(forecast)
    current_category = classify(current_code) if current_code is not None else None

    return {
        "location": {
            "name": place_name,
            "timezone": payload.timezone,
        },
        "current": {
            "temperature": current.temperature if current else None,
            "wind": current.windspeed if current else None,
            "weather_code": current_code,
            "weather": condition_label(current_code),
            "icon": icon_for(classify(current_code)),
        },
        "background_theme": background_theme_for(current_category),
        "hour_index": hour_index,
        "forecast": [_forecast_row(day) for day in forecast],
        "today": _day_card(
            payload=payload,
            forecast=forecast,
            offset=0,
            humidity=humidity_today,
            weather_code=current_code,
        ),
        "tomorrow": _day_card(
            payload=payload,
            forecast=forecast,
            offset=1,
            humidity=humidity_tomorrow,
            weather_code=tomorrow_code,
        ),
        "day_parts": day_part_temperatures(payload.hourly),
        "averages": {"min": avg_min, "max": avg_max},
        "insights": generate_insights(payload.daily),
    }
