"""Timer primitive implementations for delayed modal transitions."""

from __future__ import annotations

import asyncio

from modalstack.api.timers import TimerCallback
from modalstack.runtime.scheduler import Scheduler


class AsyncioTimers:
    """Timers backed by the running asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, callback: TimerCallback, delay_ms: float) -> asyncio.TimerHandle:
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        return loop.call_later(max(0.0, delay_ms) / 1000.0, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


class SchedulerTimers:
    """Timers backed by a manual-clock scheduler."""

    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    def schedule(self, callback: TimerCallback, delay_ms: float) -> int:
        return self._scheduler.call_later(delay_ms, callback)

    def cancel(self, handle: int) -> None:
        self._scheduler.cancel(handle)

    def advance(self, delta_ms: float) -> int:
        """Advance the underlying clock and fire due timers."""
        return self._scheduler.advance(delta_ms)
