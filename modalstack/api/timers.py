"""Public timer primitive contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

TimerCallback = Callable[[], None]


@runtime_checkable
class TimerHandle(Protocol):
    """Opaque scheduled-callback handle."""


class TimerPort(Protocol):
    """Schedule/cancel pair used for delayed transitions."""

    def schedule(self, callback: TimerCallback, delay_ms: float) -> TimerHandle:
        """Run callback once after delay."""

    def cancel(self, handle: TimerHandle) -> None:
        """Cancel a scheduled callback if still pending."""


def create_asyncio_timers() -> TimerPort:
    """Create timers backed by the running asyncio loop."""
    from modalstack.runtime.timers import AsyncioTimers

    return AsyncioTimers()


def create_scheduler_timers() -> TimerPort:
    """Create timers backed by a new manual-clock scheduler."""
    from modalstack.runtime.scheduler import Scheduler
    from modalstack.runtime.timers import SchedulerTimers

    return SchedulerTimers(Scheduler())
