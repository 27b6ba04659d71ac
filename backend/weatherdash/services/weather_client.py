from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from weatherdash.config import Settings


logger = logging.getLogger(__name__)

HOURLY_FIELDS = "temperature_2m,weathercode,relative_humidity_2m"
DAILY_FIELDS = (
    "temperature_2m_max,temperature_2m_min,weathercode,"
    "precipitation_sum,sunrise,sunset,windspeed_10m_max"
)
NEWS_QUERY = "weather OR climate"


@dataclass
class WeatherClient:
    settings: Settings
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)
    _client: httpx.AsyncClient = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._client = httpx.AsyncClient(
            timeout=self.settings.request_timeout_seconds,
            transport=self.transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def geocode(self, query: str) -> list[dict]:
        query = query.strip()
        if not query:
            return []

        payload = await self._get_json(
            url=self.settings.open_meteo_geo_url,
            params={"name": query, "count": 5, "language": "en", "format": "json"},
        )
        if not isinstance(payload, dict):
            return []
        results = payload.get("results") or []
        return [item for item in results if isinstance(item, dict)]

    async def reverse_geocode(self, latitude: float, longitude: float) -> dict:
        payload = await self._get_json(
            url=self.settings.nominatim_reverse_url,
            params={
                "lat": round(latitude, 6),
                "lon": round(longitude, 6),
                "format": "json",
            },
            headers={"User-Agent": f"{self.settings.app_name}/{self.settings.app_version}"},
        )
        address: dict = {}
        if isinstance(payload, dict) and isinstance(payload.get("address"), dict):
            address = payload["address"]

        name = (
            address.get("city")
            or address.get("town")
            or address.get("village")
            or address.get("state")
            or "Your Location"
        )
        return {
            "name": name,
            "country": address.get("country") or "",
            "latitude": latitude,
            "longitude": longitude,
            "timezone": "auto",
        }

    async def fetch_forecast(self, latitude: float, longitude: float, timezone: str = "auto") -> dict:
        payload = await self._get_json(
            url=self.settings.open_meteo_forecast_url,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "timezone": timezone,
                "current_weather": "true",
                "hourly": HOURLY_FIELDS,
                "daily": DAILY_FIELDS,
            },
        )
        if not isinstance(payload, dict):
            raise ValueError("Forecast provider returned a non-object payload.")
        return payload

    async def fetch_news(self, page_size: int = 6) -> list[dict]:
        if not self.settings.news_api_key:
            logger.info("NEWS_API_KEY is not set, skipping news fetch")
            return []

        try:
            payload = await self._get_json(
                url=self.settings.news_api_url,
                params={
                    "q": NEWS_QUERY,
                    "language": "en",
                    "sortBy": "publishedAt",
                    "pageSize": page_size,
                    "apiKey": self.settings.news_api_key,
                },
            )
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("News provider request failed: %s", exc)
            return []

        if not isinstance(payload, dict):
            return []
        articles = payload.get("articles") or []
        return [
            {
                "title": item.get("title"),
                "description": item.get("description"),
                "url": item.get("url"),
                "image_url": item.get("urlToImage"),
                "published_at": item.get("publishedAt"),
            }
            for item in articles
            if isinstance(item, dict)
        ]

    async def _get_json(
        self,
        *,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        response = await self._client.get(url, params=params, headers=headers)
        response.raise_for_status()
        return response.json()
