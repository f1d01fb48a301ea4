"""Async helpers.

Application logic runs on a single asyncio loop that Tk drives from its own
main loop, so callbacks and coroutines never run in parallel. Blocking client
calls are pushed to a worker thread with `run_async` and resumed on the loop.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional

from bizdir.utils.logger import get_logger

logger = get_logger(__name__)


async def run_async(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    return await asyncio.to_thread(fn, *args, **kwargs)


def _report_task_failure(task: "asyncio.Task[Any]") -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Background task failed: %r", exc)


class TkAsyncioPump:
    """Runs ready asyncio callbacks from Tk's `after` timer.

    Usage:
        pump = TkAsyncioPump(root)
        pump.start()
        pump.spawn(controller.initialize())
    """

    def __init__(self, root, loop: Optional[asyncio.AbstractEventLoop] = None, interval_ms: int = 15):
        self.root = root
        self.loop = loop or asyncio.new_event_loop()
        self.interval_ms = interval_ms
        self._after_id = None

    def start(self) -> None:
        asyncio.set_event_loop(self.loop)
        self._tick()

    def _tick(self) -> None:
        self.loop.call_soon(self.loop.stop)
        self.loop.run_forever()
        self._after_id = self.root.after(self.interval_ms, self._tick)

    def spawn(self, coro: Awaitable[Any]) -> "asyncio.Task[Any]":
        task = self.loop.create_task(coro)
        task.add_done_callback(_report_task_failure)
        return task

    def stop(self) -> None:
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None
        for task in asyncio.all_tasks(self.loop):
            task.cancel()
        self.loop.call_soon(self.loop.stop)
        self.loop.run_forever()
        self.loop.close()
