# -*- coding: utf-8 -*-
"""
Получение подсказок и погодных данных через api_client.
"""

import logging
from typing import List

from core.models.weather_response import PlaceCandidate, WeatherSnapshot
from core.utils.api_client import OpenWeatherClient

logger = logging.getLogger("data_fetcher")

MIN_QUERY_LENGTH = 3


async def fetch_suggestions(client: OpenWeatherClient, query: str) -> List[PlaceCandidate]:
    """
    Подсказки городов для автодополнения.

    Args:
        client (OpenWeatherClient): Клиент API
        query (str): Введённый текст

    Returns:
        list: Подсказки; [] для короткого запроса и при любой ошибке
    """
    query = query.strip()
    if len(query) < MIN_QUERY_LENGTH:
        logger.debug(f"Запрос '{query}' короче {MIN_QUERY_LENGTH} символов, подсказки не запрашиваем")
        return []
    return await client.get_suggestions(query)


async def fetch_weather_data(client: OpenWeatherClient, url: str) -> WeatherSnapshot:
    """
    Получает текущую погоду по готовому URL.

    Raises:
        WeatherFetchError: при сетевой ошибке, не-2xx или некорректном ответе
    """
    snapshot = await client.get_weather(url)
    logger.info(f"✅ Данные получены: {snapshot.name or 'без названия'}")
    return snapshot
