# -*- coding: utf-8 -*-
"""
Фон карточки по погодному состоянию и времени суток.

Состояние берётся из weather[0].main ответа OpenWeather.
День — строго между восходом и закатом.
Для Clear и Clouds фон зависит от времени суток, для остальных — нет.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Union

from core.models.weather_response import WeatherSnapshot


@dataclass(frozen=True)
class Backdrop:
    name: str
    gradient: str
    emoji: str


DEFAULT_BACKDROP = Backdrop(
    "default", "linear-gradient(0deg, #71DDFF 0%, #B7EEFF 66%, #C4F1FF 71%)", "🌤️"
)

BACKDROPS: Dict[str, Union[Backdrop, Dict[str, Backdrop]]] = {
    "Thunderstorm": Backdrop("Thunderstorm", "linear-gradient(0deg, #6E7C84 0%, #668BA7 100%)", "⛈️"),
    "Drizzle": Backdrop("Drizzle", "linear-gradient(0deg, #B3CDE0 0%, #6497B1 100%)", "🌦️"),
    "Rain": Backdrop("Rain", "linear-gradient(0deg, #5D737E 0%, #64A6BD 100%)", "🌧️"),
    "Snow": Backdrop("Snow", "linear-gradient(0deg, #E0F7FA 0%, #B2EBF2 100%)", "❄️"),
    "Clear": {
        "day": Backdrop("Clear.day", "linear-gradient(0deg, #87CEFA 0%, #00BFFF 100%)", "☀️"),
        "night": Backdrop("Clear.night", "linear-gradient(0deg, #0D1B2A 0%, #1B263B 100%)", "🌙"),
    },
    "Clouds": {
        "day": Backdrop("Clouds.day", "linear-gradient(0deg, #B0BEC5 0%, #90A4AE 100%)", "☁️"),
        "night": Backdrop("Clouds.night", "linear-gradient(0deg, #37474F 0%, #263238 100%)", "🌌"),
    },
    "Mist": Backdrop("Mist", "linear-gradient(0deg, #CFD8DC 0%, #B0BEC5 100%)", "🌫️"),
    "Smoke": Backdrop("Smoke", "linear-gradient(0deg, #B0BEC5 0%, #90A4AE 100%)", "💨"),
    "Haze": Backdrop("Haze", "linear-gradient(0deg, #ECEFF1 0%, #CFD8DC 100%)", "🌁"),
    "Fog": Backdrop("Fog", "linear-gradient(0deg, #B0BEC5 0%, #78909C 100%)", "🌫️"),
}


def is_daytime(now: int, sunrise: int, sunset: int) -> bool:
    return sunrise < now < sunset


def classify_background(
    main: Optional[str],
    now: Optional[int] = None,
    sunrise: Optional[int] = None,
    sunset: Optional[int] = None,
) -> Backdrop:
    """
    Фон по состоянию погоды.

    Args:
        main: weather[0].main ("Clear", "Rain", ...); None — данных ещё нет
        now: время наблюдения (dt), unix-секунды
        sunrise, sunset: восход и закат, unix-секунды

    Returns:
        Backdrop; неизвестное или отсутствующее состояние → DEFAULT_BACKDROP
    """
    if not main:
        return DEFAULT_BACKDROP
    entry = BACKDROPS.get(main)
    if entry is None:
        return DEFAULT_BACKDROP
    if isinstance(entry, Backdrop):
        return entry

    day = None not in (now, sunrise, sunset) and is_daytime(now, sunrise, sunset)
    return entry["day"] if day else entry["night"]


def background_for_snapshot(snapshot: Optional[WeatherSnapshot]) -> Backdrop:
    if snapshot is None or snapshot.condition is None:
        return DEFAULT_BACKDROP
    sys = snapshot.sys
    return classify_background(
        snapshot.condition.main,
        snapshot.dt,
        sys.sunrise if sys else None,
        sys.sunset if sys else None,
    )
