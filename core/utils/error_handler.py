# -*- coding: utf-8 -*-
"""
Утилита для централизованной обработки ошибок.
"""

import logging
from typing import Optional

logger = logging.getLogger("error_handler")

CITY_NOT_FOUND_MESSAGE = "City not found"
EMPTY_CITY_MESSAGE = "Please enter a valid city name."


class WeatherLookupError(Exception):
    """Базовая ошибка поиска погоды."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class WeatherFetchError(WeatherLookupError):
    """Запрос погоды не удался (сеть, не-2xx или битый ответ)."""

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message or CITY_NOT_FOUND_MESSAGE)
        self.status_code = status_code


class CityValidationError(WeatherLookupError):
    """Пустое название города при отправке формы."""

    def __init__(self, message: str = EMPTY_CITY_MESSAGE):
        super().__init__(message)


def log_exception(exception: Exception, message: str = "Необработанное исключение", context: Optional[dict] = None):
    """
    Просто логирует исключение без выбрасывания.

    Args:
        exception (Exception): Исключение
        message (str): Описание
        context (dict): Контекст (chat_id и т.п.)
    """
    log_context = f" | Контекст: {context}" if context else ""
    logger.error(f"{message}{log_context} | Ошибка: {exception!r}", exc_info=exception)
