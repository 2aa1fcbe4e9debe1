"""Public modal controller API contracts."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeAlias, TypeVar

from modalstack.api.timers import TimerPort

T = TypeVar("T")

DEFAULT_QUEUE_DELAY_MS = 150.0


@dataclass(frozen=True, slots=True)
class ModalControllerState(Generic[T]):
    """Immutable snapshot of controller-visible state."""

    current_stack: tuple[T, ...] = ()
    queue: tuple[tuple[T, ...], ...] = ()
    is_open: bool = False


ModalControllerListener: TypeAlias = Callable[[ModalControllerState[T]], None]
DropStackCallback: TypeAlias = Callable[[tuple[T, ...]], object]
Unsubscribe: TypeAlias = Callable[[], None]


@dataclass(frozen=True, slots=True)
class ModalControllerOptions(Generic[T]):
    """Construction-time controller configuration.

    A ``queue_delay_ms`` of ``None`` defers to the runtime config, which falls
    back to ``DEFAULT_QUEUE_DELAY_MS``.
    """

    queue_delay_ms: float | None = None
    on_drop_stack: DropStackCallback[T] | None = None
    timers: TimerPort | None = None
    name: str = "modal"


class ModalController(Protocol[T]):
    """Public modal stack controller contract."""

    def get_state(self) -> ModalControllerState[T]:
        """Return a fresh snapshot."""

    def subscribe(self, listener: ModalControllerListener[T]) -> Unsubscribe:
        """Register listener, deliver current snapshot, return unsubscribe."""

    def set_queue_delay_ms(self, delay: float) -> None:
        """Set delay for future queued transitions."""

    def open_stack(self, stack: Sequence[T]) -> None:
        """Replace visible stack and drop everything queued."""

    def push(self, item: T) -> None:
        """Push one item above the current stack."""

    def enqueue_stack(self, stack: Sequence[T]) -> None:
        """Show stack now when idle, otherwise queue it."""

    def pop(self) -> None:
        """Pop topmost item unless only the root remains."""

    def can_pop(self) -> bool:
        """Return whether pop would remove an item."""

    def dequeue(self) -> None:
        """Drop current stack and reveal the next queued one."""

    def close(self) -> None:
        """Alias for dequeue."""

    def set_modal_content(self, item: T) -> None:
        """Replace root item and keep stacked children."""

    def destroy(self) -> None:
        """Drop all content and release listeners."""


def create_modal_controller(
    options: ModalControllerOptions[T] | None = None,
    *,
    queue_delay_ms: float | None = None,
    on_drop_stack: DropStackCallback[T] | None = None,
    timers: TimerPort | None = None,
) -> ModalController[T]:
    """Create default modal controller implementation.

    Keyword overrides take precedence over ``options``. Without an explicit
    delay, the env-sourced runtime config supplies one.
    """
    from modalstack.runtime.controller import RuntimeModalController

    options = options or ModalControllerOptions()
    return RuntimeModalController(
        ModalControllerOptions(
            queue_delay_ms=options.queue_delay_ms if queue_delay_ms is None else queue_delay_ms,
            on_drop_stack=on_drop_stack or options.on_drop_stack,
            timers=timers or options.timers,
            name=options.name,
        )
    )
