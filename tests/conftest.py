from __future__ import annotations

from collections.abc import Callable

import pytest

from modalstack.api.controller import ModalControllerOptions
from modalstack.runtime.controller import RuntimeModalController
from modalstack.runtime.scheduler import Scheduler
from modalstack.runtime.timers import SchedulerTimers


class DropRecorder:
    def __init__(self) -> None:
        self.dropped: list[tuple[str, ...]] = []

    def __call__(self, stack: tuple[str, ...]) -> None:
        self.dropped.append(stack)


@pytest.fixture
def timers() -> SchedulerTimers:
    return SchedulerTimers(Scheduler())


@pytest.fixture
def recorder() -> DropRecorder:
    return DropRecorder()


@pytest.fixture
def make_controller(
    timers: SchedulerTimers, recorder: DropRecorder
) -> Callable[..., RuntimeModalController[str]]:
    def factory(*, queue_delay_ms: float = 150) -> RuntimeModalController[str]:
        return RuntimeModalController(
            ModalControllerOptions(
                queue_delay_ms=queue_delay_ms,
                on_drop_stack=recorder,
                timers=timers,
            )
        )

    return factory
