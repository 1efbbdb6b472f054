# scripts/weather/weather_handler.py
from typing import Dict, Optional, Tuple
import logging
import os

from telegram import Bot, Update
from telegram.constants import ChatAction, ParseMode
from telegram.ext import ContextTypes
from jinja2 import Template

from core.event_bus import subscribe_async, SUGGESTIONS_UPDATED, WEATHER_UPDATED, WEATHER_ERROR
from core.ui.navigation import (
    get_error_keyboard,
    get_search_button,
    get_suggestions_keyboard,
    get_weather_card_keyboard,
)
from core.utils.validator import is_blank, validate_coordinates
from process_manager import process_manager
from scripts.weather._processes.formatter import build_weather_view
from scripts.weather.weather_session import SessionState, WeatherSession

logger = logging.getLogger("weather_handler")

# Загружаем шаблон из файла
TEMPLATE_PATH = os.path.join(os.path.dirname(__file__), "_io", "templates", "current_weather.html.j2")
with open(TEMPLATE_PATH, "r", encoding="utf-8") as f:
    WEATHER_TEMPLATE = Template(f.read(), autoescape=True, trim_blocks=True, lstrip_blocks=True)

# Последние сообщения по chat_id: кнопки старых сообщений устарели.
# Для подсказок и кнопки поиска хранится ещё и запрос, к которому они относятся.
_prompt_messages: Dict[int, Tuple[int, str]] = {}
_card_messages: Dict[int, int] = {}


def _prompt_query(chat_id: int, message_id: int) -> Optional[str]:
    """Запрос последнего сообщения с подсказками или кнопкой поиска; None для устаревших."""
    prompt = _prompt_messages.get(chat_id)
    if prompt is None or prompt[0] != message_id:
        return None
    return prompt[1]


def render_weather_card(session: WeatherSession) -> str:
    """HTML-текст карточки текущего снимка сессии."""
    view = build_weather_view(session.snapshot, session.display_name, session.unit)
    return WEATHER_TEMPLATE.render(view=view).strip()


# === КОМАНДЫ И СООБЩЕНИЯ ===
async def weather_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """/weather <город> — поиск по названию; без аргумента — по введённому тексту."""
    chat_id = update.effective_chat.id
    session = process_manager.get_session(chat_id)
    city = process_manager.sanitize_user_input(" ".join(context.args)) if context.args else None
    logging.info(f"🌍 Чат {chat_id}: /weather '{city if city is not None else session.city}'")

    await context.bot.send_chat_action(chat_id=chat_id, action=ChatAction.TYPING)
    await session.submit(city)


async def handle_city_input(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Текстовое сообщение — ввод названия города (подсказки через debounce)."""
    chat_id = update.effective_chat.id
    text = process_manager.sanitize_user_input(update.message.text)
    session = process_manager.get_session(chat_id)
    logging.info(f"⌨️ Чат {chat_id}: введён текст '{text}'")

    if is_blank(text):
        await session.submit(text)
        return

    await session.on_input(text)
    if session.state is not SessionState.SUGGESTING:
        # Подсказок не будет: текст короткий или уже показан результат
        message = await context.bot.send_message(
            chat_id=chat_id,
            text="Press the button to search:",
            reply_markup=get_search_button(text)
        )
        _prompt_messages[chat_id] = (message.message_id, text)


async def handle_location_geo(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Геопозиция — поиск погоды по координатам."""
    chat_id = update.effective_chat.id
    loc = update.message.location
    if not loc or not validate_coordinates(loc.latitude, loc.longitude):
        await context.bot.send_message(chat_id=chat_id, text="❌ Location not received.")
        return

    logging.info(f"📍 Чат {chat_id}: получена геопозиция {loc.latitude}, {loc.longitude}")
    session = process_manager.get_session(chat_id)
    await context.bot.send_chat_action(chat_id=chat_id, action=ChatAction.TYPING)
    await session.search_coordinates(round(loc.latitude, 4), round(loc.longitude, 4))


# === INLINE-КНОПКИ ===
async def weather_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    chat_id = update.effective_chat.id
    data = query.data
    session = process_manager.get_session(chat_id)
    logging.info(f"🖱️ Чат {chat_id}: нажата кнопка '{data}'")

    if data == "weather_submit":
        city = _prompt_query(chat_id, query.message.message_id)
        if city is None:
            await query.answer("This search is outdated")
            return
        await query.answer()
        await context.bot.send_chat_action(chat_id=chat_id, action=ChatAction.TYPING)
        await session.submit(city)

    elif data.startswith("weather_pick:"):
        if _prompt_query(chat_id, query.message.message_id) is None:
            await query.answer("Suggestion expired")
            return
        await query.answer()
        try:
            index = int(data.split(":", 1)[1])
            await context.bot.send_chat_action(chat_id=chat_id, action=ChatAction.TYPING)
            await session.select_suggestion(index)
        except (ValueError, IndexError):
            logger.warning(f"⚠️ Чат {chat_id}: подсказка '{data}' не найдена")
            await context.bot.send_message(chat_id=chat_id, text="Suggestion expired, please type the city again.")

    elif data == "weather_unit":
        if session.snapshot is None or _card_messages.get(chat_id) != query.message.message_id:
            await query.answer("This forecast is outdated")
            return
        unit = session.toggle_unit()
        await query.answer(f"°{unit.value}")
        text = render_weather_card(session)
        markup = get_weather_card_keyboard(unit)
        if query.message.photo:
            await query.edit_message_caption(caption=text, parse_mode=ParseMode.HTML, reply_markup=markup)
        else:
            await query.edit_message_text(text=text, parse_mode=ParseMode.HTML, reply_markup=markup)

    elif data == "weather_dismiss":
        await query.answer()
        session.dismiss_error()
        await query.delete_message()


# === ПОДПИСКИ НА СОБЫТИЯ СЕССИИ ===
def register_weather_events(bot: Bot) -> None:
    """Отрисовка состояния сессий: подсказки, карточка погоды, ошибки."""

    async def on_suggestions_updated(event):
        chat_id = event["chat_id"]
        suggestions = event["suggestions"]
        text = "Did you mean:" if suggestions else "No matching cities found."
        message = await bot.send_message(
            chat_id=chat_id,
            text=text,
            reply_markup=get_suggestions_keyboard(suggestions, event["query"])
        )
        _prompt_messages[chat_id] = (message.message_id, event["query"])

    async def on_weather_updated(event):
        chat_id = event["chat_id"]
        session = process_manager.get_session(chat_id)
        view = build_weather_view(event["snapshot"], event["city"], session.unit)
        text = WEATHER_TEMPLATE.render(view=view).strip()
        markup = get_weather_card_keyboard(session.unit)
        if view["icon_url"]:
            message = await bot.send_photo(
                chat_id=chat_id,
                photo=view["icon_url"],
                caption=text,
                parse_mode=ParseMode.HTML,
                reply_markup=markup
            )
        else:
            message = await bot.send_message(chat_id=chat_id, text=text, parse_mode=ParseMode.HTML, reply_markup=markup)
        _card_messages[chat_id] = message.message_id
        _prompt_messages.pop(chat_id, None)

    async def on_weather_error(event):
        message = event["message"]
        await bot.send_message(
            chat_id=event["chat_id"],
            text=f"⚠️ {message[:1].upper()}{message[1:]}",
            reply_markup=get_error_keyboard()
        )

    subscribe_async(SUGGESTIONS_UPDATED, on_suggestions_updated)
    subscribe_async(WEATHER_UPDATED, on_weather_updated)
    subscribe_async(WEATHER_ERROR, on_weather_error)
    logger.info("📡 Обработчики событий погоды зарегистрированы")
