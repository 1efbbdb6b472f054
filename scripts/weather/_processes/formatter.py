# -*- coding: utf-8 -*-
"""
Форматирование погодной карточки: качественные оценки, направление ветра,
местное время восхода/заката и итоговый словарь для шаблона.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from core.models.weather_response import DisplayUnit, WeatherSnapshot
from core.utils.api_client import OpenWeatherClient
from scripts.weather._processes.condition_classifier import background_for_snapshot
from scripts.weather._processes.unit_converter import format_temperature

logger = logging.getLogger("formatter")

COMPASS_8 = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
COMPASS_16 = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]


@dataclass(frozen=True)
class DisplayRow:
    label: str
    value: str
    icon: str = ""


def humidity_band(humidity: float) -> str:
    """< 30 — Low, 30..59 — Moderate, >= 60 — High."""
    if humidity < 30:
        return "Low"
    if humidity < 60:
        return "Moderate"
    return "High"


def visibility_band(visibility_m: float) -> str:
    """Оценка видимости в метрах (API отдаёт максимум 10 000)."""
    if visibility_m >= 10000:
        return "Excellent"
    if visibility_m >= 5000:
        return "Good"
    if visibility_m >= 2000:
        return "Moderate"
    return "Poor"


def wind_direction(deg: float, points: int = 8) -> str:
    """Румб по направлению ветра в градусах (8 или 16 румбов)."""
    if points == 8:
        compass = COMPASS_8
    elif points == 16:
        compass = COMPASS_16
    else:
        raise ValueError(f"Поддерживается 8 или 16 румбов, получено: {points}")
    sector = 360 / points
    # Граница сектора относится к следующему румбу: 22.5° → NE
    return compass[int((deg % 360 + sector / 2) // sector) % points]


def format_local_time(epoch: int, tz_offset: int = 0) -> str:
    """Unix-время → '6:05 AM' в часовом поясе города."""
    local = datetime.fromtimestamp(epoch, tz=timezone(timedelta(seconds=tz_offset)))
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d} {suffix}"


def format_visibility(visibility_m: float) -> str:
    return f"{visibility_m / 1000:.1f} km ({visibility_band(visibility_m)})"


def format_wind(speed: float, deg: Optional[float]) -> str:
    text = f"{speed:g} m/s"
    if deg is not None:
        text += f" ({wind_direction(deg)})"
    return text


def build_display_rows(snapshot: WeatherSnapshot) -> List[DisplayRow]:
    """Строки карточки. Строка пропускается, если в ответе нет исходного поля."""
    rows = []
    humidity = snapshot.main.humidity
    if humidity is not None:
        rows.append(DisplayRow("Humidity", f"{humidity}% ({humidity_band(humidity)})", "💧"))
    if snapshot.wind is not None:
        rows.append(DisplayRow("Wind", format_wind(snapshot.wind.speed, snapshot.wind.deg), "🌬️"))
    if snapshot.visibility is not None:
        rows.append(DisplayRow("Visibility", format_visibility(snapshot.visibility), "👁️"))
    if snapshot.sys is not None:
        rows.append(DisplayRow("Sunrise", format_local_time(snapshot.sys.sunrise, snapshot.timezone), "🌅"))
        rows.append(DisplayRow("Sunset", format_local_time(snapshot.sys.sunset, snapshot.timezone), "🌇"))
    return rows


def build_weather_view(snapshot: WeatherSnapshot, city: str, unit: DisplayUnit) -> dict:
    """
    Словарь для шаблона current_weather.html.j2.

    Args:
        snapshot (WeatherSnapshot): Текущий снимок погоды
        city (str): Отображаемое название (подсказка или name из ответа)
        unit (DisplayUnit): Единица температуры

    Returns:
        dict: {"city", "temperature", "feels_like", "unit", "description", "icon_url", "backdrop", "rows"}
    """
    condition = snapshot.condition
    view = {
        "city": city or snapshot.name,
        "temperature": format_temperature(snapshot.main.temp, unit),
        "feels_like": format_temperature(snapshot.main.feels_like, unit) if snapshot.main.feels_like is not None else None,
        "unit": unit.value,
        "description": condition.description if condition else "",
        "icon_url": OpenWeatherClient.icon_url(condition.icon) if condition and condition.icon else None,
        "backdrop": background_for_snapshot(snapshot),
        "rows": build_display_rows(snapshot),
    }
    logger.debug(f"🧾 Карточка сформирована для {view['city']} ({view['temperature']})")
    return view
