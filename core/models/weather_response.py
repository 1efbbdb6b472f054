# core/models/weather_response.py
# -*- coding: utf-8 -*-
"""
Pydantic-схемы ответов OpenWeatherMap.

- PlaceCandidate — элемент ответа геокодера /geo/1.0/direct
- WeatherSnapshot — ответ /data/2.5/weather (текущая погода)
- DisplayUnit — единица отображения температуры
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DisplayUnit(str, Enum):
    CELSIUS = "C"
    FAHRENHEIT = "F"

    def toggled(self) -> "DisplayUnit":
        return DisplayUnit.FAHRENHEIT if self is DisplayUnit.CELSIUS else DisplayUnit.CELSIUS


class PlaceCandidate(BaseModel):
    """Подсказка для автодополнения города."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str
    country: str = ""
    state: Optional[str] = None
    latitude: float = Field(alias="lat")
    longitude: float = Field(alias="lon")

    @property
    def label(self) -> str:
        """'Paris, FR' или 'Springfield, US, Illinois'."""
        label = f"{self.name}, {self.country}"
        if self.state:
            label += f", {self.state}"
        return label


class MainReadings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    temp: float
    feels_like: Optional[float] = None
    humidity: Optional[int] = None


class Condition(BaseModel):
    model_config = ConfigDict(extra="ignore")

    main: str
    description: str = ""
    icon: str = ""


class Wind(BaseModel):
    model_config = ConfigDict(extra="ignore")

    speed: float = 0.0
    deg: Optional[float] = None


class SunTimes(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sunrise: int
    sunset: int
    country: Optional[str] = None


class WeatherSnapshot(BaseModel):
    """Текущая погода. В сессии хранится не более одного снимка."""
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    main: MainReadings
    weather: List[Condition] = Field(default_factory=list)
    wind: Optional[Wind] = None
    visibility: Optional[int] = None
    sys: Optional[SunTimes] = None
    dt: int
    timezone: int = 0  # сдвиг от UTC в секундах

    @property
    def condition(self) -> Optional[Condition]:
        return self.weather[0] if self.weather else None
