"""Modal service binding mounted modal definitions to a controller."""

from __future__ import annotations

import logging

from modalstack.api.controller import ModalControllerListener, ModalControllerOptions, Unsubscribe
from modalstack.api.modals import (
    HostPropsListener,
    ModalDefinition,
    ModalExports,
    ModalHostProps,
    ModalMounter,
    ModalOpenOptions,
    MountedModal,
)
from modalstack.api.timers import TimerPort
from modalstack.runtime.controller import RuntimeModalController
from modalstack.runtime.disposal import observe_result
from modalstack.runtime.errors import ModalMountError

_LOG = logging.getLogger("modalstack.service")


class RuntimeModalService:
    """Mounts modal definitions and unmounts them when the controller drops them."""

    def __init__(
        self,
        mounter: ModalMounter,
        *,
        queue_delay_ms: float | None = None,
        timers: TimerPort | None = None,
        name: str = "modal",
    ) -> None:
        self._mounter = mounter
        self._controller: RuntimeModalController[MountedModal] = RuntimeModalController(
            ModalControllerOptions(
                queue_delay_ms=queue_delay_ms,
                on_drop_stack=_dispose_mounted,
                timers=timers,
                name=name,
            )
        )

    @property
    def controller(self) -> RuntimeModalController[MountedModal]:
        return self._controller

    def open(self, modal: ModalDefinition, options: ModalOpenOptions | None = None) -> None:
        self._controller.open_stack((self._mount(modal, options),))

    def push(self, modal: ModalDefinition, options: ModalOpenOptions | None = None) -> None:
        self._controller.push(self._mount(modal, options))

    def enqueue(self, modal: ModalDefinition, options: ModalOpenOptions | None = None) -> None:
        self._controller.enqueue_stack((self._mount(modal, options),))

    def set_modal_content(self, content: ModalExports) -> None:
        self._controller.set_modal_content(MountedModal(exports=content))

    def close(self) -> None:
        self._controller.close()

    def pop(self) -> None:
        self._controller.pop()

    def can_pop(self) -> bool:
        return self._controller.can_pop()

    def dequeue(self) -> None:
        self._controller.dequeue()

    def subscribe(self, listener: ModalControllerListener[MountedModal]) -> Unsubscribe:
        return self._controller.subscribe(listener)

    def host_props(self) -> ModalHostProps:
        """Return render inputs for the topmost visible modal."""
        top = self._controller.top()
        return ModalHostProps(
            open=self._controller.is_open,
            modal=None if top is None else top.exports,
            on_request_close=self.close,
            on_open_change=self._on_open_change,
        )

    def subscribe_host(self, listener: HostPropsListener) -> Unsubscribe:
        """Deliver fresh host props on every controller change."""
        return self._controller.subscribe(lambda _state: listener(self.host_props()))

    def destroy(self) -> None:
        self._controller.destroy()

    def _on_open_change(self, open_: bool) -> None:
        if not open_ and self._controller.is_open:
            self._controller.close()

    def _mount(self, modal: ModalDefinition, options: ModalOpenOptions | None) -> MountedModal:
        props = options.props if options is not None else {}
        try:
            return self._mounter(modal, props=props)
        except ModalMountError:
            raise
        except Exception as exc:
            _LOG.warning("modal mount failed modal=%r", modal, exc_info=True)
            raise ModalMountError(f"failed to mount modal {modal!r}") from exc


def _dispose_mounted(stack: tuple[MountedModal, ...]) -> None:
    for mounted in stack:
        try:
            observe_result(mounted.dispose())
        except Exception:
            _LOG.warning("mounted modal dispose failed", exc_info=True)

