"""Modalstack runtime modules."""

from modalstack.runtime.config import ModalRuntimeConfig, get_modal_config, load_modal_config
from modalstack.runtime.context import modal_context, set_modal_context, use_modal
from modalstack.runtime.controller import ModalController, RuntimeModalController
from modalstack.runtime.errors import ModalContextError, ModalMountError, ModalStackError
from modalstack.runtime.events import ListenerRegistry
from modalstack.runtime.logging import setup_modal_logging
from modalstack.runtime.modal_stack import ModalLayerStack
from modalstack.runtime.scheduler import Scheduler
from modalstack.runtime.service import RuntimeModalService
from modalstack.runtime.timers import AsyncioTimers, SchedulerTimers

__all__ = [
    "AsyncioTimers",
    "ListenerRegistry",
    "ModalContextError",
    "ModalController",
    "ModalLayerStack",
    "ModalMountError",
    "ModalRuntimeConfig",
    "ModalStackError",
    "RuntimeModalController",
    "RuntimeModalService",
    "Scheduler",
    "SchedulerTimers",
    "get_modal_config",
    "load_modal_config",
    "modal_context",
    "set_modal_context",
    "setup_modal_logging",
    "use_modal",
]
