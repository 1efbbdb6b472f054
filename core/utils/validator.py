# core/utils/validator.py
import re
from typing import Any

MAX_INPUT_LENGTH = 100

# Буквы любых алфавитов (São Paulo, Zürich, Москва), цифры и базовая пунктуация
_UNSAFE_CHARS = re.compile(r"[^\w\s,\.\-\(\)']")


def sanitize_user_input(text: str) -> str:
    """Санитизация пользовательского ввода."""
    if not isinstance(text, str):
        raise ValueError("Input must be a string")
    text = _UNSAFE_CHARS.sub("", text.strip())
    return text[:MAX_INPUT_LENGTH]


def is_blank(text: Any) -> bool:
    """True для None, пустой строки и строки из одних пробелов."""
    return not isinstance(text, str) or not text.strip()


def validate_coordinates(lat: Any, lon: Any) -> bool:
    try:
        lat, lon = float(lat), float(lon)
    except (TypeError, ValueError):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180
