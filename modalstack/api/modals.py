"""Public modal definition, mounting, and service contracts."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Protocol, TypeAlias, runtime_checkable

from modalstack.api.controller import ModalControllerListener, Unsubscribe
from modalstack.api.timers import TimerPort


@runtime_checkable
class ModalSlot(Protocol):
    """Opaque renderable slot payload (title, body, footer)."""


@runtime_checkable
class ModalDefinition(Protocol):
    """Opaque mountable modal definition, interpreted only by a mounter."""


@dataclass(frozen=True, slots=True)
class ModalCallbacks:
    """Optional modal interaction hooks."""

    on_enter: Callable[[object], None] | None = None


@dataclass(frozen=True, slots=True)
class ModalViewConfig:
    """Host-facing modal presentation flags."""

    dismissible: bool = True
    show_close_button: bool = True
    submit_on_enter: bool = False
    ui: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ModalExports:
    """Slots and configuration exported by a mounted modal."""

    title: ModalSlot | None = None
    body: ModalSlot | None = None
    footer: ModalSlot | None = None
    config: ModalViewConfig | None = None
    callbacks: ModalCallbacks | None = None


def _noop() -> None:
    return None


@dataclass(frozen=True, slots=True)
class MountedModal:
    """Materialized modal: exported slots plus teardown hook."""

    exports: ModalExports
    dispose: Callable[[], object] = _noop


@dataclass(frozen=True, slots=True)
class ModalOpenOptions:
    """Per-open mount parameters."""

    props: Mapping[str, object] = field(default_factory=dict)


class ModalMounter(Protocol):
    """Materializes a modal definition into a mounted modal."""

    def __call__(
        self, modal: ModalDefinition, *, props: Mapping[str, object]
    ) -> MountedModal: ...


@dataclass(frozen=True, slots=True)
class ModalHostProps:
    """Render inputs for a modal host surface."""

    open: bool
    modal: ModalExports | None
    on_request_close: Callable[[], None]
    on_open_change: Callable[[bool], None]


HostPropsListener: TypeAlias = Callable[[ModalHostProps], None]


class ModalContext(Protocol):
    """Caller-facing modal service contract."""

    def set_modal_content(self, content: ModalExports) -> None:
        """Replace root modal content."""

    def open(self, modal: ModalDefinition, options: ModalOpenOptions | None = None) -> None:
        """Mount and show modal, dropping everything else."""

    def close(self) -> None:
        """Close current stack and reveal the next queued one."""

    def push(self, modal: ModalDefinition, options: ModalOpenOptions | None = None) -> None:
        """Mount and stack modal above current one."""

    def enqueue(self, modal: ModalDefinition, options: ModalOpenOptions | None = None) -> None:
        """Mount modal and show it once current stack closes."""

    def pop(self) -> None:
        """Pop topmost stacked modal."""

    def can_pop(self) -> bool:
        """Return whether pop would remove a modal."""

    def dequeue(self) -> None:
        """Advance to next queued stack."""

    def host_props(self) -> ModalHostProps:
        """Return current host render inputs."""

    def subscribe(self, listener: ModalControllerListener[MountedModal]) -> Unsubscribe:
        """Subscribe to controller snapshots."""

    def destroy(self) -> None:
        """Tear down all mounted modals."""


def create_modal_service(
    mounter: ModalMounter,
    *,
    queue_delay_ms: float | None = None,
    timers: TimerPort | None = None,
) -> ModalContext:
    """Create default modal service implementation."""
    from modalstack.runtime.service import RuntimeModalService

    return RuntimeModalService(mounter, queue_delay_ms=queue_delay_ms, timers=timers)
