# -*- coding: utf-8 -*-
"""
Обёртка для OpenWeatherMap API.
Поддерживает:
- Подсказки городов: get_suggestions(query) через /geo/1.0/direct
- Текущая погода: get_weather(url) через /data/2.5/weather
- Сборку URL запроса по названию города или по координатам
- URL иконки погодного состояния

Один httpx.AsyncClient на всё приложение, закрывается через aclose().
"""
import logging
from typing import List, Optional

import httpx

from core.models.weather_response import PlaceCandidate, WeatherSnapshot
from core.utils.error_handler import WeatherFetchError

logger = logging.getLogger("api_client")

# === КОНФИГУРАЦИЯ API ===
API_TIMEOUT = 30  # секунд
SUGGESTION_LIMIT = 5  # максимум, который отдаёт геокодер
UNITS = "metric"


class OpenWeatherClient:
    """Асинхронный клиент OpenWeatherMap."""
    GEO_URL = "https://api.openweathermap.org/geo/1.0/direct"
    WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
    ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"

    def __init__(self, api_key: str, timeout: float = API_TIMEOUT, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self._http = httpx.AsyncClient(timeout=timeout, transport=transport)

    # === URL ===
    def city_weather_url(self, city: str) -> str:
        return self._weather_url({"q": city})

    def coords_weather_url(self, lat: float, lon: float) -> str:
        return self._weather_url({"lat": lat, "lon": lon})

    def _weather_url(self, query: dict) -> str:
        params = {**query, "appid": self.api_key, "units": UNITS}
        return str(httpx.URL(self.WEATHER_URL, params=params))

    @classmethod
    def icon_url(cls, icon: str) -> str:
        return cls.ICON_URL.format(icon=icon)

    # === ЗАПРОСЫ ===
    async def get_suggestions(self, query: str) -> List[PlaceCandidate]:
        """
        Подсказки городов для автодополнения.
        Никогда не выбрасывает исключений: при любой ошибке возвращает [].
        """
        params = {"q": query, "limit": SUGGESTION_LIMIT, "appid": self.api_key}
        try:
            response = await self._http.get(self.GEO_URL, params=params)
        except httpx.HTTPError as e:
            logger.error(f"❌ Геокодер: сетевая ошибка для '{query}': {e}")
            return []

        if not response.is_success:
            logger.warning(f"⚠️ Геокодер: HTTP {response.status_code} для '{query}'")
            return []

        try:
            body = response.json()
            if not isinstance(body, list):
                raise ValueError(f"ожидался список, получено {type(body).__name__}")
            suggestions = [PlaceCandidate.model_validate(item) for item in body]
        except ValueError as e:
            logger.error(f"❌ Геокодер: некорректный ответ для '{query}': {e}")
            return []

        logger.info(f"🔎 Геокодер: {len(suggestions)} подсказок для '{query}'")
        return suggestions

    async def get_weather(self, url: str) -> WeatherSnapshot:
        """
        Текущая погода по готовому URL.

        Raises:
            WeatherFetchError: сообщение из поля "message" ответа или "City not found"
        """
        try:
            response = await self._http.get(url)
        except httpx.HTTPError as e:
            logger.error(f"❌ Погода: сетевая ошибка: {e}")
            raise WeatherFetchError() from e

        if not response.is_success:
            message = _error_message(response)
            logger.warning(f"⚠️ Погода: HTTP {response.status_code}: {message}")
            raise WeatherFetchError(message, status_code=response.status_code)

        try:
            snapshot = WeatherSnapshot.model_validate(response.json())
        except ValueError as e:
            logger.error(f"❌ Погода: не удалось разобрать ответ: {e}")
            raise WeatherFetchError() from e

        logger.info(f"✅ Погода получена: {snapshot.name} ({snapshot.main.temp}°C)")
        return snapshot

    async def aclose(self):
        await self._http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()


def _error_message(response: httpx.Response) -> Optional[str]:
    """Поле "message" из тела ошибки, если оно есть."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None
