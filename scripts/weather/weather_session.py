# -*- coding: utf-8 -*-
"""
Сессия поиска погоды для одного чата.

Хранит состояние «страницы»: введённый текст, подсказки, текущий снимок
погоды (не более одного), единицу температуры и сообщение об ошибке.

Состояния:
    IDLE → SUGGESTING (ждём debounce / ответ геокодера) → IDLE/SUGGESTING
    IDLE/SUGGESTING → LOADING → DISPLAYING (успех) | ERROR_SHOWN (ошибка)
    DISPLAYING/ERROR_SHOWN → LOADING при следующем поиске
    ERROR_SHOWN → SUGGESTING при вводе от 3 символов (ошибка сбрасывается)

Каждый запрос получает порядковый номер; ответ применяется только если
за это время не был отправлен более новый запрос того же вида.
Изменения состояния публикуются через event_bus.
"""

import logging
from enum import Enum
from typing import List, Optional

from core.event_bus import emit_event, SUGGESTIONS_UPDATED, WEATHER_UPDATED, WEATHER_ERROR
from core.models.weather_response import DisplayUnit, PlaceCandidate, WeatherSnapshot
from core.utils.api_client import OpenWeatherClient
from core.utils.debouncer import Debouncer
from core.utils.error_handler import CityValidationError, WeatherFetchError
from core.utils.validator import is_blank
from scripts.weather._processes.condition_classifier import Backdrop, background_for_snapshot
from scripts.weather._processes.data_fetcher import MIN_QUERY_LENGTH, fetch_suggestions, fetch_weather_data

logger = logging.getLogger("weather_session")

SUGGESTION_DEBOUNCE_SEC = 0.5


class SessionState(str, Enum):
    IDLE = "idle"
    SUGGESTING = "suggesting"
    LOADING = "loading"
    DISPLAYING = "displaying"
    ERROR_SHOWN = "error_shown"


class WeatherSession:
    def __init__(self, client: OpenWeatherClient, chat_id: Optional[int] = None, debounce_sec: float = SUGGESTION_DEBOUNCE_SEC):
        self.client = client
        self.chat_id = chat_id
        self.city = ""
        self.suggestions: List[PlaceCandidate] = []
        self.snapshot: Optional[WeatherSnapshot] = None
        self.unit = DisplayUnit.CELSIUS
        self.error: Optional[str] = None
        self.state = SessionState.IDLE
        self._debouncer = Debouncer(debounce_sec)
        self._suggestion_seq = 0
        self._weather_seq = 0

    # === ВВОД И ПОДСКАЗКИ ===
    async def on_input(self, text: str) -> None:
        """
        Новый текст в поле ввода.
        Подсказки запрашиваются через debounce, только для текста от 3 символов
        и только пока не показан результат. Показанная ошибка при этом сбрасывается.
        """
        self.city = text
        if len(text.strip()) >= MIN_QUERY_LENGTH and self.snapshot is None:
            self._debouncer.call(self._load_suggestions, text)
            if self.state is SessionState.ERROR_SHOWN:
                # Ошибка относилась к прошлому запросу
                self.error = None
            if self.state in (SessionState.IDLE, SessionState.ERROR_SHOWN):
                self.state = SessionState.SUGGESTING
            return
        self._cancel_suggestions()

    async def _load_suggestions(self, query: str) -> None:
        self._suggestion_seq += 1
        seq = self._suggestion_seq
        suggestions = await fetch_suggestions(self.client, query)

        if seq != self._suggestion_seq or self.snapshot is not None:
            logger.debug(f"⏭️ Устаревшие подсказки для '{query}' отброшены")
            return

        self.suggestions = suggestions
        if self.state in (SessionState.IDLE, SessionState.SUGGESTING, SessionState.ERROR_SHOWN):
            self.state = SessionState.SUGGESTING if suggestions else SessionState.IDLE
        await emit_event(SUGGESTIONS_UPDATED, {
            "chat_id": self.chat_id,
            "query": query,
            "suggestions": list(suggestions),
        })

    def _cancel_suggestions(self) -> None:
        """Сбрасывает подсказки и отменяет отложенный запрос."""
        self._debouncer.cancel()
        # Ответ уже отправленного запроса будет отброшен
        self._suggestion_seq += 1
        self.suggestions = []
        if self.state is SessionState.SUGGESTING:
            self.state = SessionState.IDLE

    # === ПОИСК ПОГОДЫ ===
    async def submit(self, city: Optional[str] = None) -> bool:
        """Отправка формы: поиск по названию города."""
        if city is not None:
            self.city = city
        if is_blank(self.city):
            error = CityValidationError()
            self.error = error.message
            if self.snapshot is None:
                self.state = SessionState.ERROR_SHOWN
            logger.info(f"⚠️ Чат {self.chat_id}: пустой запрос")
            await emit_event(WEATHER_ERROR, {"chat_id": self.chat_id, "kind": "validation", "message": self.error})
            return False
        return await self.fetch_weather(self.client.city_weather_url(self.city.strip()))

    async def select_suggestion(self, index: int) -> bool:
        """
        Выбор подсказки: поиск по координатам, название — из подсказки.

        Raises:
            IndexError: подсказки с таким номером больше нет
        """
        if not 0 <= index < len(self.suggestions):
            raise IndexError(f"Подсказка {index} не найдена")
        candidate = self.suggestions[index]
        url = self.client.coords_weather_url(candidate.latitude, candidate.longitude)
        return await self.fetch_weather(url, candidate.label)

    async def search_coordinates(self, lat: float, lon: float) -> bool:
        return await self.fetch_weather(self.client.coords_weather_url(lat, lon))

    async def fetch_weather(self, url: str, name: str = "") -> bool:
        """
        Запрашивает погоду и заменяет текущий снимок.

        Перед запросом ошибка и снимок сбрасываются. При ошибке остаётся ровно
        одно сообщение, снимок остаётся пустым.

        Returns:
            bool: True, если снимок обновлён
        """
        self._cancel_suggestions()
        self._weather_seq += 1
        seq = self._weather_seq
        self.error = None
        self.snapshot = None
        self.state = SessionState.LOADING

        try:
            snapshot = await fetch_weather_data(self.client, url)
        except WeatherFetchError as e:
            if seq != self._weather_seq:
                logger.debug("⏭️ Ошибка устаревшего запроса погоды отброшена")
                return False
            self.error = e.message
            self.snapshot = None
            self.state = SessionState.ERROR_SHOWN
            logger.warning(f"❌ Чат {self.chat_id}: {e.message}")
            await emit_event(WEATHER_ERROR, {"chat_id": self.chat_id, "kind": "fetch", "message": self.error})
            return False

        if seq != self._weather_seq:
            logger.debug(f"⏭️ Устаревший ответ погоды для {snapshot.name} отброшен")
            return False

        self.snapshot = snapshot
        self.city = name or snapshot.name
        self.suggestions = []
        self.state = SessionState.DISPLAYING
        logger.info(f"🌤️ Чат {self.chat_id}: показана погода для {self.city}")
        await emit_event(WEATHER_UPDATED, {"chat_id": self.chat_id, "city": self.city, "snapshot": snapshot})
        return True

    # === ОТОБРАЖЕНИЕ ===
    def toggle_unit(self) -> DisplayUnit:
        self.unit = self.unit.toggled()
        return self.unit

    def dismiss_error(self) -> None:
        self.error = None
        if self.state is SessionState.ERROR_SHOWN:
            self.state = SessionState.IDLE

    @property
    def display_name(self) -> Optional[str]:
        return self.city if self.snapshot is not None else None

    @property
    def backdrop(self) -> Backdrop:
        return background_for_snapshot(self.snapshot)

    def close(self) -> None:
        self._debouncer.cancel()
