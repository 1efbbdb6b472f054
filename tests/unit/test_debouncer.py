# -*- coding: utf-8 -*-
"""
Тесты для core/utils/debouncer.py
"""
import asyncio

from core.utils.debouncer import Debouncer


async def test_only_last_call_runs():
    calls = []

    async def record(value):
        calls.append(value)

    debouncer = Debouncer(0.02)
    debouncer.call(record, "P")
    debouncer.call(record, "Pa")
    task = debouncer.call(record, "Par")
    await task

    assert calls == ["Par"]
    print("✅ test_only_last_call_runs passed")


async def test_waits_for_quiet_period():
    calls = []

    async def record(value):
        calls.append(value)

    debouncer = Debouncer(0.05)
    debouncer.call(record, "Oslo")
    await asyncio.sleep(0.01)
    assert calls == []
    assert debouncer.pending

    await asyncio.sleep(0.1)
    assert calls == ["Oslo"]
    assert not debouncer.pending


async def test_cancel():
    calls = []

    async def record(value):
        calls.append(value)

    debouncer = Debouncer(0.01)
    debouncer.call(record, "Rome")
    debouncer.cancel()
    await asyncio.sleep(0.05)

    assert calls == []
    assert not debouncer.pending


async def test_errors_are_logged_not_raised():
    async def broken():
        raise RuntimeError("boom")

    debouncer = Debouncer(0)
    task = debouncer.call(broken)
    await task

    assert task.exception() is None
