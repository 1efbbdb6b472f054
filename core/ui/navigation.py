# core/ui/navigation.py
from typing import List

from telegram import InlineKeyboardMarkup, InlineKeyboardButton

from core.models.weather_response import DisplayUnit, PlaceCandidate

MAX_LABEL_LENGTH = 40


def _short(text: str, limit: int = MAX_LABEL_LENGTH) -> str:
    return text[:limit - 3] + "..." if len(text) > limit else text


def get_search_button(city: str) -> InlineKeyboardMarkup:
    """Кнопка отправки введённого текста как запроса."""
    return InlineKeyboardMarkup([
        [InlineKeyboardButton(f"🔍 Search «{_short(city, 25)}»", callback_data="weather_submit")]
    ])


def get_suggestions_keyboard(suggestions: List[PlaceCandidate], query: str) -> InlineKeyboardMarkup:
    """Подсказки городов + поиск по введённому тексту как есть."""
    buttons = [
        [InlineKeyboardButton(f"📍 {_short(s.label)}", callback_data=f"weather_pick:{i}")]
        for i, s in enumerate(suggestions)
    ]
    buttons.append([InlineKeyboardButton(f"🔍 Search «{_short(query, 25)}»", callback_data="weather_submit")])
    return InlineKeyboardMarkup(buttons)


def get_weather_card_keyboard(unit: DisplayUnit) -> InlineKeyboardMarkup:
    """Переключатель °C/°F под карточкой погоды."""
    other = unit.toggled()
    return InlineKeyboardMarkup([
        [InlineKeyboardButton(f"°{unit.value} → °{other.value}", callback_data="weather_unit")],
        [InlineKeyboardButton("🏠 Main menu", callback_data="nav_main")]
    ])


def get_error_keyboard() -> InlineKeyboardMarkup:
    """Кнопка закрытия сообщения об ошибке."""
    return InlineKeyboardMarkup([
        [InlineKeyboardButton("✖️ Dismiss", callback_data="weather_dismiss")]
    ])
