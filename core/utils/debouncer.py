# -*- coding: utf-8 -*-
"""
Debounce для асинхронных вызовов.

Каждый новый call() отменяет отложенный вызов и заново запускает таймер.
Функция выполняется только после паузы delay секунд без новых вызовов.

Использование:
>>> debouncer = Debouncer(0.5)
>>> debouncer.call(fetch_suggestions, "Par")
>>> debouncer.call(fetch_suggestions, "Pari")   # предыдущий вызов отменён
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger("debouncer")


class Debouncer:
    def __init__(self, delay: float):
        self.delay = delay
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def call(self, func: Callable[..., Awaitable[Any]], *args: Any) -> asyncio.Task:
        """Планирует func(*args) через delay секунд, отменяя предыдущий вызов."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(func, *args))
        return self._task

    def cancel(self) -> None:
        if self.pending:
            self._task.cancel()
        self._task = None

    async def _run(self, func: Callable[..., Awaitable[Any]], *args: Any) -> None:
        await asyncio.sleep(self.delay)
        try:
            await func(*args)
        except Exception as e:
            logger.error(f"❌ Ошибка в отложенном вызове {getattr(func, '__name__', func)}: {e}", exc_info=True)
