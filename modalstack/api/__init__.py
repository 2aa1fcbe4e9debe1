"""Public modalstack API contracts."""

from modalstack.api.controller import (
    DEFAULT_QUEUE_DELAY_MS,
    ModalController,
    ModalControllerListener,
    ModalControllerOptions,
    ModalControllerState,
    create_modal_controller,
)
from modalstack.api.logging import LoggerPort, ModalLoggingConfig, get_logger
from modalstack.api.modals import (
    ModalCallbacks,
    ModalContext,
    ModalExports,
    ModalHostProps,
    ModalMounter,
    ModalOpenOptions,
    ModalViewConfig,
    MountedModal,
    create_modal_service,
)
from modalstack.api.timers import (
    TimerHandle,
    TimerPort,
    create_asyncio_timers,
    create_scheduler_timers,
)

__all__ = [
    "DEFAULT_QUEUE_DELAY_MS",
    "LoggerPort",
    "ModalCallbacks",
    "ModalContext",
    "ModalController",
    "ModalControllerListener",
    "ModalControllerOptions",
    "ModalControllerState",
    "ModalExports",
    "ModalHostProps",
    "ModalLoggingConfig",
    "ModalMounter",
    "ModalOpenOptions",
    "ModalViewConfig",
    "MountedModal",
    "TimerHandle",
    "TimerPort",
    "create_asyncio_timers",
    "create_modal_controller",
    "create_modal_service",
    "create_scheduler_timers",
    "get_logger",
]
