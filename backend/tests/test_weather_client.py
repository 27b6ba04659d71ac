import asyncio

import httpx
import pytest

from weatherdash.config import Settings
from weatherdash.services.weather_client import WeatherClient


def _run(client: WeatherClient, coro):
    async def runner():
        try:
            return await coro
        finally:
            await client.close()

    return asyncio.run(runner())


def test_fetch_forecast_requests_expected_fields() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"daily": {"time": ["2026-02-19"]}})

    client = WeatherClient(settings=Settings(), transport=httpx.MockTransport(handler))
    payload = _run(client, client.fetch_forecast(latitude=17.38, longitude=78.49))

    assert payload == {"daily": {"time": ["2026-02-19"]}}
    params = seen[0].url.params
    assert seen[0].url.host == "api.open-meteo.com"
    assert params["current_weather"] == "true"
    assert "relative_humidity_2m" in params["hourly"]
    assert "precipitation_sum" in params["daily"]
    assert params["timezone"] == "auto"


def test_reverse_geocode_picks_most_specific_place_name() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"address": {"village": "Kovalam", "state": "Kerala", "country": "India"}})

    client = WeatherClient(settings=Settings(), transport=httpx.MockTransport(handler))
    result = _run(client, client.reverse_geocode(latitude=8.4, longitude=76.97))

    assert result["name"] == "Kovalam"
    assert result["country"] == "India"


def test_reverse_geocode_without_address_uses_generic_name() -> None:
    client = WeatherClient(
        settings=Settings(),
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})),
    )
    result = _run(client, client.reverse_geocode(latitude=0.0, longitude=0.0))

    assert result["name"] == "Your Location"
    assert result["country"] == ""


def test_geocode_raises_on_upstream_error() -> None:
    client = WeatherClient(
        settings=Settings(),
        transport=httpx.MockTransport(lambda request: httpx.Response(503)),
    )
    with pytest.raises(httpx.HTTPStatusError):
        _run(client, client.geocode("London"))


def test_fetch_news_without_key_returns_empty_list() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("news provider should not be called")

    client = WeatherClient(settings=Settings(news_api_key=""), transport=httpx.MockTransport(handler))
    assert _run(client, client.fetch_news()) == []


def test_fetch_news_maps_articles_and_survives_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["apiKey"] == "secret"
        return httpx.Response(
            200,
            json={
                "articles": [
                    {
                        "title": "Heatwave warning",
                        "description": "Temperatures climb.",
                        "url": "https://example.com/heat",
                        "urlToImage": "https://example.com/heat.jpg",
                        "publishedAt": "2026-02-19T06:00:00Z",
                    }
                ]
            },
        )

    client = WeatherClient(settings=Settings(news_api_key="secret"), transport=httpx.MockTransport(handler))
    articles = _run(client, client.fetch_news())
    assert articles[0]["image_url"] == "https://example.com/heat.jpg"

    failing = WeatherClient(
        settings=Settings(news_api_key="secret"),
        transport=httpx.MockTransport(lambda request: httpx.Response(500)),
    )
    assert _run(failing, failing.fetch_news()) == []

    rate_limited = WeatherClient(
        settings=Settings(news_api_key="secret"),
        transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>rate limited</html>")),
    )
    assert _run(rate_limited, rate_limited.fetch_news()) == []


def test_fetch_forecast_rejects_non_object_payload() -> None:
    client = WeatherClient(
        settings=Settings(),
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json=["not", "a", "forecast"])),
    )
    with pytest.raises(ValueError):
        _run(client, client.fetch_forecast(latitude=35.68, longitude=139.69))
