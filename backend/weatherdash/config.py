from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    app_name: str = "Weather Dashboard API"
    app_version: str = "1.0.0"
    open_meteo_forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    open_meteo_geo_url: str = "https://geocoding-api.open-meteo.com/v1/search"
    nominatim_reverse_url: str = "https://nominatim.openstreetmap.org/reverse"
    news_api_url: str = "https://newsapi.org/v2/everything"
    news_api_key: str = ""
    default_city: str = "Hyderabad"
    forecast_days: int = 7
    request_timeout_seconds: float = 12.0
    log_level: str = "INFO"
    frontend_origins: tuple[str, ...] = ("http://localhost:5173", "http://127.0.0.1:5173")


def get_settings() -> Settings:
    origins_raw = os.getenv("FRONTEND_ORIGINS", "").strip()
    default_city_raw = os.getenv("DEFAULT_CITY", "").strip()
    forecast_days_raw = os.getenv("FORECAST_DAYS", "").strip()
    news_api_key_raw = os.getenv("NEWS_API_KEY", "").strip()
    timeout_raw = os.getenv("REQUEST_TIMEOUT_SECONDS", "").strip()
    log_level_raw = os.getenv("LOG_LEVEL", "").strip().upper()

    parsed_origins = tuple(item.strip() for item in origins_raw.split(",") if item.strip())

    try:
        forecast_days = int(forecast_days_raw) if forecast_days_raw else 7
    except ValueError:
        forecast_days = 7

    try:
        request_timeout_seconds = float(timeout_raw) if timeout_raw else 12.0
    except ValueError:
        request_timeout_seconds = 12.0

    if log_level_raw not in logging.getLevelNamesMapping():
        log_level_raw = Settings.log_level

    return Settings(
        frontend_origins=parsed_origins or Settings.frontend_origins,
        default_city=default_city_raw or Settings.default_city,
        forecast_days=max(1, min(16, forecast_days)),
        news_api_key=news_api_key_raw,
        request_timeout_seconds=max(1.0, request_timeout_seconds),
        log_level=log_level_raw,
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
