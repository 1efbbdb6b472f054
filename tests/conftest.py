# -*- coding: utf-8 -*-
"""
Общие фикстуры: поддельный OpenWeather на httpx.MockTransport и образцы ответов.
"""
import httpx
import pytest

from core.event_bus import clear_all_handlers
from core.utils.api_client import OpenWeatherClient

SUNRISE = 1700000000  # 2023-11-14 22:13:20 UTC
SUNSET = SUNRISE + 40000

GEO_PATH = "/geo/1.0/direct"
WEATHER_PATH = "/data/2.5/weather"

PARIS_SUGGESTIONS = [
    {"name": "Paris", "local_names": {"fr": "Paris"}, "lat": 48.8589, "lon": 2.3200, "country": "FR", "state": "Ile-de-France"},
    {"name": "Paris", "lat": 33.6609, "lon": -95.5555, "country": "US", "state": "Texas"},
]


def make_weather_payload(**overrides) -> dict:
    """Ответ /data/2.5/weather в формате OpenWeather (units=metric)."""
    payload = {
        "name": "Paris",
        "dt": SUNRISE + 100,
        "timezone": 3600,
        "main": {"temp": 21.4, "feels_like": 20.9, "humidity": 45},
        "weather": [{"id": 802, "main": "Clouds", "description": "scattered clouds", "icon": "03d"}],
        "wind": {"speed": 3.6, "deg": 240},
        "visibility": 10000,
        "sys": {"country": "FR", "sunrise": SUNRISE, "sunset": SUNSET},
        "cod": 200,
    }
    payload.update(overrides)
    return payload


class FakeOpenWeather:
    """Обработчик для httpx.MockTransport; запоминает все запросы."""

    def __init__(self):
        self.requests = []
        self.geo_handler = lambda request: httpx.Response(200, json=PARIS_SUGGESTIONS)
        self.weather_handler = lambda request: httpx.Response(200, json=make_weather_payload())

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.geo_handler if request.url.path == GEO_PATH else self.weather_handler
        response = handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    @property
    def geo_requests(self):
        return [r for r in self.requests if r.url.path == GEO_PATH]

    @property
    def weather_requests(self):
        return [r for r in self.requests if r.url.path == WEATHER_PATH]


@pytest.fixture(autouse=True)
def clean_event_bus():
    yield
    clear_all_handlers()


@pytest.fixture
def fake_api():
    return FakeOpenWeather()


@pytest.fixture
async def client(fake_api):
    client = OpenWeatherClient("test-key", transport=httpx.MockTransport(fake_api))
    yield client
    await client.aclose()
