# -*- coding: utf-8 -*-
"""
Шина событий (Event Bus) между сессией погоды и интерфейсом.

Архитектурный принцип:
- Производитель (WeatherSession) → публикует события о смене состояния
- Потребители (Telegram-обработчики, тесты) → подписываются на события
- event_bus.py НЕ импортирует bot.py и scripts/ — зависимости только в одну сторону

События сессии:
- "suggestions_updated" — {"chat_id", "query", "suggestions"}
- "weather_updated"     — {"chat_id", "city", "snapshot"}
- "weather_error"       — {"chat_id", "kind", "message"}

Использование:

# В weather_handler.py (потребитель):
from core.event_bus import subscribe_async

async def on_weather_updated(event):
    await bot.send_message(event["chat_id"], event["city"])

subscribe_async("weather_updated", on_weather_updated)

# В weather_session.py (производитель):
from core.event_bus import emit_event

await emit_event("weather_updated", {"chat_id": 123, "city": "Paris", "snapshot": snapshot})
"""

from typing import Dict, List, Callable, Any, Awaitable
import logging

logger = logging.getLogger("event_bus")

AsyncHandler = Callable[[Dict[str, Any]], Awaitable[None]]

SUGGESTIONS_UPDATED = "suggestions_updated"
WEATHER_UPDATED = "weather_updated"
WEATHER_ERROR = "weather_error"

_async_handlers: Dict[str, List[AsyncHandler]] = {}


def subscribe_async(event_type: str, handler: AsyncHandler) -> None:
    """
    Подписка на событие с асинхронным обработчиком.

    Args:
        event_type (str): Тип события (например, "weather_updated")
        handler (callable): Асинхронная функция, принимающая dict с данными события
    """
    if handler is None:
        logger.warning(f"⚠️ Попытка подписаться на событие {event_type} с handler=None. Игнорируем.")
        return
    _async_handlers.setdefault(event_type, []).append(handler)
    logger.debug("Зарегистрирован асинхронный обработчик для события: %s", event_type)


def unsubscribe_async(event_type: str, handler: AsyncHandler) -> None:
    """Отписка от события."""
    if event_type in _async_handlers:
        try:
            _async_handlers[event_type].remove(handler)
            logger.debug("Обработчик удалён для события: %s", event_type)
        except ValueError:
            logger.warning("Обработчик не найден для события: %s", event_type)


async def emit_event(event_type: str, event_data: Dict[str, Any]) -> None:
    """
    Асинхронная публикация события.

    Обработчики вызываются по очереди в порядке подписки.
    Ошибки в обработчиках логируются, но не прерывают выполнение.
    """
    logger.debug("Публикация события: %s, chat_id=%s", event_type, event_data.get("chat_id"))

    # Копия списка: обработчик может отписаться во время обхода
    for handler in list(_async_handlers.get(event_type, [])):
        try:
            await handler(event_data)
        except Exception as e:
            logger.error("Ошибка в асинхронном обработчике события %s: %s", event_type, e, exc_info=True)


# Утилита для очистки (полезна в тестах)
def clear_all_handlers() -> None:
    """Очищает все зарегистрированные обработчики. Используется в тестах."""
    _async_handlers.clear()
    logger.info("Все обработчики событий очищены.")
