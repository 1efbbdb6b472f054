# -*- coding: utf-8 -*-
"""
Тесты для core/event_bus.py
"""
import asyncio
from core.event_bus import subscribe_async, unsubscribe_async, emit_event, clear_all_handlers


async def test_event_bus():
    received_events = []

    async def handler(event):
        received_events.append(event)

    subscribe_async("test_event", handler)
    await emit_event("test_event", {"data": "ok", "chat_id": 123})

    assert len(received_events) == 1
    assert received_events[0]["data"] == "ok"
    assert received_events[0]["chat_id"] == 123

    clear_all_handlers()
    print("✅ test_event_bus passed")


async def test_event_bus_multiple_handlers():
    received_events = []

    async def handler1(event):
        received_events.append(("h1", event["data"]))

    async def handler2(event):
        received_events.append(("h2", event["data"]))

    subscribe_async("multi_event", handler1)
    subscribe_async("multi_event", handler2)

    await emit_event("multi_event", {"data": "multi"})

    assert received_events == [("h1", "multi"), ("h2", "multi")]

    clear_all_handlers()
    print("✅ test_event_bus_multiple_handlers passed")


async def test_failing_handler_does_not_stop_others():
    received_events = []

    async def broken(event):
        raise RuntimeError("boom")

    async def handler(event):
        received_events.append(event["data"])

    subscribe_async("fragile_event", broken)
    subscribe_async("fragile_event", handler)

    await emit_event("fragile_event", {"data": "still delivered"})

    assert received_events == ["still delivered"]


async def test_unsubscribe_and_none_handler():
    received_events = []

    async def handler(event):
        received_events.append(event)

    subscribe_async("gone_event", None)
    subscribe_async("gone_event", handler)
    unsubscribe_async("gone_event", handler)
    unsubscribe_async("gone_event", handler)

    await emit_event("gone_event", {"data": "nobody"})

    assert received_events == []


if __name__ == "__main__":
    asyncio.run(test_event_bus())
    asyncio.run(test_event_bus_multiple_handlers())
