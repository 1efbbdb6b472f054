# -*- coding: utf-8 -*-
"""
Тесты для core/ui/navigation.py
"""
from conftest import PARIS_SUGGESTIONS

from core.models.weather_response import DisplayUnit, PlaceCandidate
from core.ui.navigation import (
    get_error_keyboard,
    get_search_button,
    get_suggestions_keyboard,
    get_weather_card_keyboard,
)


def _callbacks(markup):
    return [button.callback_data for row in markup.inline_keyboard for button in row]


def _texts(markup):
    return [button.text for row in markup.inline_keyboard for button in row]


def test_suggestions_keyboard():
    suggestions = [PlaceCandidate.model_validate(item) for item in PARIS_SUGGESTIONS]

    markup = get_suggestions_keyboard(suggestions, "Paris")

    assert _callbacks(markup) == ["weather_pick:0", "weather_pick:1", "weather_submit"]
    assert _texts(markup)[0] == "📍 Paris, FR, Ile-de-France"
    assert _texts(markup)[-1] == "🔍 Search «Paris»"


def test_suggestions_keyboard_without_suggestions():
    assert _callbacks(get_suggestions_keyboard([], "Xyzzy")) == ["weather_submit"]


def test_long_labels_are_shortened():
    markup = get_search_button("Llanfairpwllgwyngyllgogerychwyrndrobwllllantysiliogogogoch")
    assert _texts(markup)[0].endswith("...»")
    assert len(_texts(markup)[0]) < 40


def test_weather_card_keyboard():
    assert _texts(get_weather_card_keyboard(DisplayUnit.CELSIUS))[0] == "°C → °F"
    assert _texts(get_weather_card_keyboard(DisplayUnit.FAHRENHEIT))[0] == "°F → °C"
    assert _callbacks(get_weather_card_keyboard(DisplayUnit.CELSIUS)) == ["weather_unit", "nav_main"]


def test_error_keyboard():
    assert _callbacks(get_error_keyboard()) == ["weather_dismiss"]
