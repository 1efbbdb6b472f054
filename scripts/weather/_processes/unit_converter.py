# -*- coding: utf-8 -*-
"""
Перевод температуры и форматирование для отображения.
"""

from core.models.weather_response import DisplayUnit


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def convert_temperature(celsius: float, unit: DisplayUnit) -> int:
    """Температура в выбранных единицах, округлённая до целого (round() Python)."""
    value = celsius if unit is DisplayUnit.CELSIUS else celsius_to_fahrenheit(celsius)
    return int(round(value))


def format_temperature(celsius: float, unit: DisplayUnit) -> str:
    """'21°C', '70°F'."""
    return f"{convert_temperature(celsius, unit)}°{unit.value}"
