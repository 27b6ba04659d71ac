from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class RawDailySeries(_UpstreamModel):
    """Daily block of an Open-Meteo forecast: parallel arrays indexed by day offset."""

    date: list[str] | None = Field(default=None, alias="time")
    temperature_max: list[float | None] | None = Field(default=None, alias="temperature_2m_max")
    temperature_min: list[float | None] | None = Field(default=None, alias="temperature_2m_min")
    weather_code: list[int | None] | None = Field(
        default=None,
        validation_alias=AliasChoices("weathercode", "weather_code"),
    )
    precipitation_sum: list[float | None] | None = None
    sunrise: list[str | None] | None = None
    sunset: list[str | None] | None = None
    pressure: list[float | None] | None = Field(default=None, alias="pressure_msl")
    uv_index: list[float | None] | None = Field(default=None, alias="uv_index_max")
    visibility: list[float | None] | None = Field(default=None, alias="visibility_max")
    dew_point: list[float | None] | None = Field(default=None, alias="dewpoint_2m_max")
    windspeed_max: list[float | None] | None = Field(default=None, alias="windspeed_10m_max")


class RawHourlySeries(_UpstreamModel):
    """Hourly block: parallel arrays indexed by absolute hour offset from the series start."""

    temperature: list[float | None] | None = Field(default=None, alias="temperature_2m")
    weather_code: list[int | None] | None = Field(
        default=None,
        validation_alias=AliasChoices("weathercode", "weather_code"),
    )
    relative_humidity: list[float | None] | None = Field(default=None, alias="relative_humidity_2m")


class CurrentWeather(_UpstreamModel):
    time: str | None = None
    temperature: float | None = None
    windspeed: float | None = None
    weather_code: int | None = Field(
        default=None,
        validation_alias=AliasChoices("weathercode", "weather_code"),
    )


class RawWeatherPayload(_UpstreamModel):
    timezone: str | None = None
    current_weather: CurrentWeather | None = None
    daily: RawDailySeries | None = None
    hourly: RawHourlySeries | None = None


class ForecastDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    min: float | None
    max: float | None
    weather_code: int | None
    precipitation: float = 0.0


class DayDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str | None = None
    sunrise: str | None = None
    sunset: str | None = None
    pressure: float | None = None
    uv_index: float | None = None
    visibility: float | None = None
    dew_point: float | None = None
    wind_speed_max: float | None = None


class Place(BaseModel):
    name: str | None = Field(default=None, description="City or place name.")
    country: str | None = None
    latitude: float
    longitude: float
    timezone: str = Field(default="auto")

    @property
    def display_name(self) -> str:
        name = self.name or "Your Location"
        if self.country:
            return f"{name}, {self.country}"
        return name
