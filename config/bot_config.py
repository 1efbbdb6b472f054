# config/bot_config.py
import os
from dataclasses import dataclass
from dotenv import load_dotenv
load_dotenv()
@dataclass
class BotConfig:
    telegram_token: str
    weather_api_key: str
    log_level: str = "INFO"

    @classmethod
    def load(cls):
        return cls(
            telegram_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
            weather_api_key=os.getenv("OPENWEATHER_API_KEY", ""),
            log_level=os.getenv("LOG_LEVEL", "INFO")
        )

    def missing_keys(self) -> list:
        """Имена обязательных переменных окружения, которые не заданы."""
        missing = []
        if not self.telegram_token:
            missing.append("TELEGRAM_BOT_TOKEN")
        if not self.weather_api_key:
            missing.append("OPENWEATHER_API_KEY")
        return missing
