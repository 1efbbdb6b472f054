# bot.py
# -*- coding: utf-8 -*-
"""
Основной скрипт бота: поиск текущей погоды по названию города,
подсказке автодополнения или геопозиции.
"""
import logging
from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    CallbackQueryHandler,
    filters,
    ContextTypes
)
from telegram.constants import ParseMode
from config.logging_config import setup_logging
from core.utils.error_handler import log_exception
from process_manager import process_manager

from scripts.weather.weather_handler import (
    weather_command,
    weather_callback,
    handle_city_input,
    handle_location_geo,
    register_weather_events
)
# === Обработчики команд ===
async def global_navigation_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Обработка глобальных навигационных кнопок."""
    query = update.callback_query
    await query.answer()

    if query.data == "nav_main":
        await start(update, context)

async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Главное меню."""
    await context.bot.send_message(
        chat_id=update.effective_chat.id,
        text=(
            "🌤️ <b>Weather lookup</b>\n\n"
            "• Type a city name — suggestions appear after a short pause\n"
            "• /weather &lt;city&gt; — search right away\n"
            "• Share a location — weather at that point"
        ),
        parse_mode=ParseMode.HTML
    )
async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    context_info = {"update_id": update.update_id} if update and hasattr(update, "update_id") else None
    log_exception(context.error, "⚠️ Исключение при обработке", context_info)
# === Основная функция запуска ===
def main():
    # Инициализация
    process_manager.initialize_sync()
    setup_logging(process_manager.config.log_level)
    logging.info("🚀 Запуск бота")
    missing = process_manager.config.missing_keys()
    if missing:
        logging.critical(f"❌ Не заданы переменные окружения: {', '.join(missing)}")
        raise ValueError(f"{', '.join(missing)} не задан(ы) в .env!")

    # Создание приложения
    app = (
        Application.builder()
        .token(process_manager.config.telegram_token)
        # Запрос погоды в одном чате не блокирует остальные обновления
        .concurrent_updates(True)
        .post_shutdown(process_manager.shutdown)
        .build()
    )

    # === РЕГИСТРАЦИЯ ОБРАБОТЧИКОВ (ПОРЯДОК ВАЖЕН!) ===

    # 1. Команды
    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("weather", weather_command))

    # 2. Сообщения: текст — ввод города, геопозиция — поиск по координатам
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_city_input))
    app.add_handler(MessageHandler(filters.LOCATION, handle_location_geo))

    # 3. Callback'и — ОБЯЗАТЕЛЬНО с pattern
    app.add_handler(CallbackQueryHandler(weather_callback, pattern="^weather_"))
    app.add_handler(CallbackQueryHandler(global_navigation_handler, pattern="^nav_main$"))

    # 4. Ошибки
    app.add_error_handler(error_handler)

    # 5. Отрисовка событий сессий
    register_weather_events(app.bot)

    print("🚀 Бот запущен. Отправьте название города.")
    print("Нажмите Ctrl+C для остановки.")

    try:
        app.run_polling(drop_pending_updates=True)
    except KeyboardInterrupt:
        print("\n🛑 Остановка по запросу пользователя.")
    finally:
        print("✅ Бот завершил работу.")


if __name__ == "__main__":
    main()
