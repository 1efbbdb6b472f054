# -*- coding: utf-8 -*-
"""
Тесты для core/models/weather_response.py
"""
import pytest
from pydantic import ValidationError
from conftest import PARIS_SUGGESTIONS, make_weather_payload

from core.models.weather_response import DisplayUnit, PlaceCandidate, WeatherSnapshot


def test_place_candidate_from_api():
    candidate = PlaceCandidate.model_validate(PARIS_SUGGESTIONS[0])
    assert candidate.latitude == 48.8589
    assert candidate.longitude == 2.32
    assert candidate.label == "Paris, FR, Ile-de-France"


def test_place_candidate_label_without_state():
    candidate = PlaceCandidate(name="Oslo", country="NO", latitude=59.91, longitude=10.75)
    assert candidate.label == "Oslo, NO"


def test_weather_snapshot_from_api():
    snapshot = WeatherSnapshot.model_validate(make_weather_payload())
    assert snapshot.name == "Paris"
    assert snapshot.main.temp == 21.4
    assert snapshot.condition.main == "Clouds"
    assert snapshot.wind.deg == 240
    assert snapshot.timezone == 3600


def test_weather_snapshot_optional_fields():
    payload = make_weather_payload(weather=[])
    del payload["wind"]
    del payload["timezone"]
    snapshot = WeatherSnapshot.model_validate(payload)
    assert snapshot.condition is None
    assert snapshot.wind is None
    assert snapshot.timezone == 0


def test_weather_snapshot_requires_temperature():
    payload = make_weather_payload(main={"humidity": 40})
    with pytest.raises(ValidationError):
        WeatherSnapshot.model_validate(payload)


def test_display_unit_toggle():
    assert DisplayUnit.CELSIUS.toggled() is DisplayUnit.FAHRENHEIT
    assert DisplayUnit.FAHRENHEIT.toggled() is DisplayUnit.CELSIUS
