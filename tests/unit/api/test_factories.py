from __future__ import annotations

import contextvars

from modalstack.api import (
    ModalControllerOptions,
    create_asyncio_timers,
    create_modal_controller,
    create_modal_service,
    create_scheduler_timers,
)
from modalstack.api.modals import ModalExports, MountedModal
from modalstack.runtime.config import ModalRuntimeConfig, set_modal_config
from modalstack.runtime.controller import RuntimeModalController
from modalstack.runtime.service import RuntimeModalService
from modalstack.runtime.timers import AsyncioTimers, SchedulerTimers


def test_create_modal_controller_uses_config_delay_by_default() -> None:
    def scenario() -> float:
        set_modal_config(ModalRuntimeConfig(queue_delay_ms=42.0))
        controller = create_modal_controller(timers=create_scheduler_timers())
        assert isinstance(controller, RuntimeModalController)
        return controller.queue_delay_ms

    assert contextvars.copy_context().run(scenario) == 42.0


def test_create_modal_controller_keyword_overrides_win() -> None:
    dropped: list[tuple[str, ...]] = []
    timers = create_scheduler_timers()
    assert isinstance(timers, SchedulerTimers)
    controller = create_modal_controller(
        ModalControllerOptions(queue_delay_ms=500, name="sheet"),
        queue_delay_ms=10,
        on_drop_stack=dropped.append,
        timers=timers,
    )
    controller.open_stack(["a"])
    controller.enqueue_stack(["b"])

    controller.close()
    timers.advance(10)

    assert controller.get_state().current_stack == ("b",)
    assert dropped == [("a",)]


def test_create_modal_service_returns_runtime_service() -> None:
    service = create_modal_service(
        lambda modal, *, props: MountedModal(exports=ModalExports(title=str(modal))),
        queue_delay_ms=0,
        timers=create_scheduler_timers(),
    )
    assert isinstance(service, RuntimeModalService)

    service.open("hello")

    assert service.host_props().modal == ModalExports(title="hello")


def test_create_asyncio_timers_returns_loop_backed_timers() -> None:
    timers = create_asyncio_timers()
    assert isinstance(timers, AsyncioTimers)


def test_create_modal_controller_options_without_delay_use_config_delay() -> None:
    dropped: list[tuple[str, ...]] = []

    def scenario() -> float:
        set_modal_config(ModalRuntimeConfig(queue_delay_ms=42.0))
        controller = create_modal_controller(
            ModalControllerOptions(on_drop_stack=dropped.append),
            timers=create_scheduler_timers(),
        )
        assert isinstance(controller, RuntimeModalController)
        return controller.queue_delay_ms

    assert contextvars.copy_context().run(scenario) == 42.0


def test_modal_service_uses_config_delay_when_not_given() -> None:
    def scenario() -> float:
        set_modal_config(ModalRuntimeConfig(queue_delay_ms=42.0))
        service = RuntimeModalService(
            lambda modal, *, props: MountedModal(exports=ModalExports(title=str(modal))),
            timers=create_scheduler_timers(),
        )
        return service.controller.queue_delay_ms

    assert contextvars.copy_context().run(scenario) == 42.0
