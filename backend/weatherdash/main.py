from __future__ import annotations

import logging
from datetime import datetime, timezone

import httpx
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from weatherdash.config import configure_logging, get_settings
from weatherdash.schemas import Place, RawWeatherPayload
from weatherdash.services.dashboard import build_dashboard
from weatherdash.services.weather_client import WeatherClient


settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

weather_client = WeatherClient(settings=settings)

app = FastAPI(title=settings.app_name, version=settings.app_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.frontend_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("shutdown")
async def shutdown_event() -> None:
    await weather_client.close()


@app.get("/api/health")
async def health() -> dict:
    return {
        "status": "ok",
        "service": settings.app_name,
        "timestamp_utc": datetime.now(tz=timezone.utc).isoformat(),
    }


@app.get("/api/geocode")
async def geocode(query: str = Query(min_length=2, max_length=80)) -> dict:
    try:
        results = await weather_client.geocode(query=query)
    except (httpx.HTTPError, ValueError) as exc:
        raise HTTPException(status_code=502, detail=f"Geocoding provider error: {exc}") from exc

    return {"results": [_serialize_place(place) for place in _places_from_results(results)]}


@app.get("/api/geocode/reverse")
async def reverse_geocode(
    latitude: float = Query(ge=-90, le=90),
    longitude: float = Query(ge=-180, le=180),
) -> dict:
    try:
        result = await weather_client.reverse_geocode(latitude=latitude, longitude=longitude)
    except (httpx.HTTPError, ValueError) as exc:
        raise HTTPException(status_code=502, detail=f"Reverse geocoding provider error: {exc}") from exc
    return {"result": result}


@app.get("/api/weather")
async def weather(
    city: str | None = Query(default=None, max_length=80),
    latitude: float | None = Query(default=None, ge=-90, le=90),
    longitude: float | None = Query(default=None, ge=-180, le=180),
) -> dict:
    if (latitude is None) != (longitude is None):
        raise HTTPException(status_code=422, detail="Provide both latitude and longitude, or neither.")

    place = await _resolve_place(city=city, latitude=latitude, longitude=longitude)

    try:
        raw_payload = await weather_client.fetch_forecast(
            latitude=place.latitude,
            longitude=place.longitude,
            timezone=place.timezone,
        )
        payload = RawWeatherPayload.model_validate(raw_payload)
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("Forecast fetch failed for %s: %s", place.display_name, exc)
        raise HTTPException(status_code=502, detail="Failed to fetch weather data.") from exc

    dashboard = build_dashboard(
        place_name=place.display_name,
        payload=payload,
        forecast_days=settings.forecast_days,
    )
    dashboard["location"].update(latitude=place.latitude, longitude=place.longitude)
    return dashboard


@app.get("/api/news")
async def news(page_size: int = Query(default=6, ge=1, le=20)) -> dict:
    articles = await weather_client.fetch_news(page_size=page_size)
    return {"articles": articles}


async def _resolve_place(*, city: str | None, latitude: float | None, longitude: float | None) -> Place:
    if latitude is not None and longitude is not None:
        try:
            result = await weather_client.reverse_geocode(latitude=latitude, longitude=longitude)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Reverse geocoding failed for %s,%s: %s", latitude, longitude, exc)
            return Place(name="Your Location", latitude=latitude, longitude=longitude)
        return _place_from_result(result)

    query = (city or "").strip() or settings.default_city
    try:
        results = await weather_client.geocode(query=query)
    except (httpx.HTTPError, ValueError) as exc:
        raise HTTPException(status_code=502, detail=f"Geocoding provider error: {exc}") from exc

    places = _places_from_results(results)
    if not places:
        raise HTTPException(status_code=404, detail="City not found. Try again.")
    return places[0]


def _place_from_result(item: dict) -> Place:
    return Place(
        name=item.get("name"),
        country=item.get("country"),
        latitude=item.get("latitude"),
        longitude=item.get("longitude"),
        timezone=item.get("timezone") or "auto",
    )


def _places_from_results(results: list[dict]) -> list[Place]:
    places: list[Place] = []
    for item in results:
        try:
            places.append(_place_from_result(item))
        except ValueError:
            # Skip provider rows without usable coordinates.
            continue
    return places


def _serialize_place(place: Place) -> dict:
    return {
        "name": place.name,
        "country": place.country,
        "latitude": place.latitude,
        "longitude": place.longitude,
        "timezone": place.timezone,
    }
