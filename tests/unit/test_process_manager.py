# -*- coding: utf-8 -*-
"""
Тесты для process_manager.py
"""
import pytest

from config.bot_config import BotConfig
from process_manager import ProcessManager


def test_get_session_requires_initialization():
    with pytest.raises(RuntimeError):
        ProcessManager().get_session(1)


async def test_sessions_are_per_chat(client):
    pm = ProcessManager()
    pm.initialize_sync(config=BotConfig(telegram_token="t", weather_api_key="test-key"), client=client)

    first = pm.get_session(1)
    assert pm.get_session(1) is first
    assert pm.get_session(2) is not first
    assert first.chat_id == 1
    assert first.client is client

    await pm.shutdown()
    assert pm.sessions == {}


def test_config_reports_missing_keys(monkeypatch):
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    monkeypatch.setenv("OPENWEATHER_API_KEY", "abc")

    config = BotConfig.load()

    assert config.weather_api_key == "abc"
    assert config.missing_keys() == ["TELEGRAM_BOT_TOKEN"]
