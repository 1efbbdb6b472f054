# config/logging_config.py
import logging
import logging.config
from pathlib import Path
from typing import Optional

LOGS_DIR = Path(__file__).parent.parent / "logs"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-15s | %(funcName)-20s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Пишут строку на каждый запрос к OpenWeather и Telegram
NOISY_LOGGERS = ("httpx", "httpcore", "telegram", "apscheduler")


def build_logging_config(log_level: str = "INFO", log_dir: Optional[Path] = None) -> dict:
    """
    Словарь для logging.config.dictConfig.

    app.log — всё от DEBUG (10 МБ × 5), errors.log — только ошибки API и
    обработчиков, консоль — от INFO.
    """
    log_dir = Path(log_dir) if log_dir else LOGS_DIR
    level = log_level.upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": {
            "app_file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": str(log_dir / "app.log"),
                "maxBytes": 10 * 1024 * 1024,
                "backupCount": 5,
                "encoding": "utf-8",
                "level": "DEBUG",
                "formatter": "default",
            },
            "error_file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": str(log_dir / "errors.log"),
                "maxBytes": 2 * 1024 * 1024,
                "backupCount": 3,
                "encoding": "utf-8",
                "level": "ERROR",
                "formatter": "default",
            },
            "console": {
                "class": "logging.StreamHandler",
                "level": "INFO",
                "formatter": "default",
            },
        },
        "loggers": {name: {"level": "WARNING"} for name in NOISY_LOGGERS},
        "root": {"level": level, "handlers": ["app_file", "error_file", "console"]},
    }


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    """Настраивает глобальное логирование. Повторный вызов заменяет обработчики."""
    config = build_logging_config(log_level, log_dir)
    log_file = Path(config["handlers"]["app_file"]["filename"])
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(config)
    logging.info("🔧 Логирование инициализировано (уровень %s, файл %s)", config["root"]["level"], log_file)
    return log_file
