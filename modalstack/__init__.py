"""Modal stack orchestration: visible stack, queued stacks, timed reveals."""

from modalstack.api import (
    ModalControllerOptions,
    ModalControllerState,
    ModalExports,
    ModalOpenOptions,
    ModalViewConfig,
    MountedModal,
    create_modal_controller,
    create_modal_service,
)
from modalstack.runtime import (
    ModalContextError,
    ModalMountError,
    RuntimeModalController,
    RuntimeModalService,
    Scheduler,
    SchedulerTimers,
    modal_context,
    set_modal_context,
    use_modal,
)

__all__ = [
    "ModalContextError",
    "ModalControllerOptions",
    "ModalControllerState",
    "ModalExports",
    "ModalMountError",
    "ModalOpenOptions",
    "ModalViewConfig",
    "MountedModal",
    "RuntimeModalController",
    "RuntimeModalService",
    "Scheduler",
    "SchedulerTimers",
    "create_modal_controller",
    "create_modal_service",
    "modal_context",
    "set_modal_context",
    "use_modal",
]
