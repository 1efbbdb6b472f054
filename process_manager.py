# process_manager.py
# -*- coding: utf-8 -*-
"""
Глобальный координатор зависимостей.
Инициализирует все сервисы один раз и предоставляет к ним доступ.
"""

from typing import Dict, Optional
import logging
from config.bot_config import BotConfig
from core.utils.api_client import OpenWeatherClient
from core.utils.validator import sanitize_user_input
from scripts.weather.weather_session import WeatherSession

logger = logging.getLogger("process_manager")


class ProcessManager:
    """
    Единый контекст приложения. Все зависимости инициализируются здесь.
    """

    def __init__(self):
        self._initialized = False
        # Конфигурация
        self.config: Optional[BotConfig] = None
        # Клиент OpenWeather (один httpx.AsyncClient на приложение)
        self.weather_client: Optional[OpenWeatherClient] = None
        # Сессии поиска по chat_id
        self.sessions: Dict[int, WeatherSession] = {}
        # Утилиты
        self.sanitize_user_input = sanitize_user_input

    def initialize_sync(self, config: Optional[BotConfig] = None, client: Optional[OpenWeatherClient] = None):
        """Синхронная инициализация всех компонентов."""
        if self._initialized:
            return

        # 1. Загрузка конфигурации (ключ API читается один раз при старте)
        self.config = config or BotConfig.load()

        # 2. Клиент API
        self.weather_client = client or OpenWeatherClient(self.config.weather_api_key)

        self._initialized = True
        logger.info("✅ ProcessManager: initialized (weather_client ready)")

    def get_session(self, chat_id: int) -> WeatherSession:
        """Сессия чата; создаётся при первом обращении."""
        if not self._initialized:
            raise RuntimeError("ProcessManager не инициализирован: вызовите initialize_sync()")
        session = self.sessions.get(chat_id)
        if session is None:
            session = WeatherSession(self.weather_client, chat_id=chat_id)
            self.sessions[chat_id] = session
            logger.debug(f"🆕 Новая сессия для чата {chat_id}")
        return session

    async def shutdown(self, application=None):
        """Завершение: отмена отложенных запросов и закрытие HTTP-клиента."""
        if not self._initialized:
            return

        for session in self.sessions.values():
            session.close()
        self.sessions.clear()
        await self.weather_client.aclose()
        self._initialized = False
        logger.info("🛑 ProcessManager: shut down")


# Глобальный экземпляр — точка доступа для всех модулей
process_manager = ProcessManager()
