"""Modal stack controller: visible stack, FIFO queue, and delayed reveals."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar

from modalstack.api.controller import (
    ModalControllerListener,
    ModalControllerOptions,
    ModalControllerState,
    Unsubscribe,
)
from modalstack.api.timers import TimerHandle, TimerPort
from modalstack.runtime.config import get_modal_config
from modalstack.runtime.disposal import drop_stack, drop_stacks
from modalstack.runtime.events import ListenerRegistry
from modalstack.runtime.modal_stack import ModalLayerStack
from modalstack.runtime.timers import AsyncioTimers

T = TypeVar("T")

_LOG = logging.getLogger("modalstack.controller")


class RuntimeModalController(Generic[T]):
    """Single authoritative owner of modal visibility state.

    Every public operation runs to completion before returning and notifies
    listeners at most once with a settled snapshot. The only deferred work is
    the one-shot reveal timer used when a queued stack replaces a visible one.
    """

    def __init__(self, options: ModalControllerOptions[T] | None = None) -> None:
        options = options or ModalControllerOptions()
        self._name = options.name
        self._on_drop_stack = options.on_drop_stack
        self._timers: TimerPort = options.timers if options.timers is not None else AsyncioTimers()
        config = get_modal_config()
        delay = config.queue_delay_ms if options.queue_delay_ms is None else options.queue_delay_ms
        self._queue_delay_ms = max(0.0, float(delay))
        self._trace = config.trace_transitions

        self._listeners: ListenerRegistry[ModalControllerState[T]] = ListenerRegistry()
        self._stack: ModalLayerStack[T] = ModalLayerStack()
        self._queue: list[tuple[T, ...]] = []
        self._is_open = False
        self._pending: tuple[T, ...] | None = None
        self._timer: TimerHandle | None = None
        self._destroyed = False

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    @property
    def has_pending_transition(self) -> bool:
        return self._timer is not None

    @property
    def queue_delay_ms(self) -> float:
        return self._queue_delay_ms

    def get_state(self) -> ModalControllerState[T]:
        return ModalControllerState(
            current_stack=self._stack.layers(),
            queue=tuple(self._queue),
            is_open=self._is_open,
        )

    def top(self) -> T | None:
        """Return topmost visible item."""
        return self._stack.top()

    def subscribe(self, listener: ModalControllerListener[T]) -> Unsubscribe:
        if self._destroyed:
            listener(self.get_state())
            return _noop

        listener_id = self._listeners.add(listener)
        listener(self.get_state())

        def unsubscribe() -> None:
            self._listeners.remove(listener_id)

        return unsubscribe

    def set_queue_delay_ms(self, delay: float) -> None:
        self._queue_delay_ms = max(0.0, float(delay))

    def open_stack(self, stack: Sequence[T]) -> None:
        if self._rejected("open_stack"):
            return
        dropped: list[tuple[T, ...]] = [self._stack.take(), *self._queue]
        if self._pending is not None:
            dropped.append(self._pending)

        self._cancel_timer(drop_pending=False)
        self._pending = None
        drop_stacks(dropped, self._on_drop_stack)

        self._queue = []
        self._activate(stack)

    def push(self, item: T) -> None:
        if self._rejected("push"):
            return
        self._cancel_timer(drop_pending=True)
        self._stack.push(item)
        self._is_open = True
        self._emit("push")

    def enqueue_stack(self, stack: Sequence[T]) -> None:
        if self._rejected("enqueue_stack"):
            return
        items = tuple(stack)
        if not items:
            return

        if not self._stack and self._pending is None and self._timer is None:
            self._activate(items)
            return

        self._queue.append(items)
        self._emit("enqueue_stack")

    def pop(self) -> None:
        if self._rejected("pop"):
            return
        if len(self._stack) <= 1:
            return
        removed = self._stack.pop_overlay()
        if removed is not None:
            drop_stack((removed,), self._on_drop_stack)
        self._emit("pop")

    def can_pop(self) -> bool:
        return len(self._stack) > 1

    def dequeue(self) -> None:
        if self._rejected("dequeue"):
            return
        if self._queue:
            if not self._stack:
                next_stack = self._queue.pop(0)
                self._cancel_timer(drop_pending=True)
                self._activate(next_stack)
                return

            self._schedule_pending()
            return

        self._cancel_timer(drop_pending=True)
        drop_stack(self._stack.take(), self._on_drop_stack)
        self._is_open = False
        self._emit("dequeue")

    def close(self) -> None:
        self.dequeue()

    def set_modal_content(self, item: T) -> None:
        if self._rejected("set_modal_content"):
            return
        self._cancel_timer(drop_pending=True)
        previous_root = self._stack.replace_root(item)
        if previous_root is not None:
            drop_stack((previous_root,), self._on_drop_stack)
        self._is_open = True
        self._emit("set_modal_content")

    def destroy(self) -> None:
        if self._destroyed:
            return
        self._destroyed = True
        self._cancel_timer(drop_pending=True)
        drop_stack(self._stack.take(), self._on_drop_stack)
        drop_stacks(self._queue, self._on_drop_stack)
        self._queue = []
        self._is_open = False
        self._listeners.clear()
        _LOG.debug("modal controller destroyed name=%s", self._name)

    def _activate(self, stack: Sequence[T]) -> None:
        self._stack.load(stack)
        self._is_open = len(self._stack) > 0
        self._emit("activate")

    def _schedule_pending(self) -> None:
        """Drop the visible stack and reveal the queue head after the delay.

        The timer is acquired before any state changes, so a failing timer
        leaves the visible stack and the queue untouched.
        """
        delay = self._queue_delay_ms
        handle = None if delay == 0 else self._timers.schedule(self._reveal_pending, delay)

        stack = self._queue.pop(0)
        self._cancel_timer(drop_pending=True)
        drop_stack(self._stack.take(), self._on_drop_stack)

        if handle is None:
            self._activate(stack)
            return

        self._timer = handle
        self._pending = stack
        self._is_open = False
        self._emit("transition_start")

    def _reveal_pending(self) -> None:
        self._timer = None
        pending = self._pending
        if pending is None:
            return
        self._pending = None
        self._activate(pending)

    def _cancel_timer(self, *, drop_pending: bool) -> None:
        if self._timer is not None:
            self._timers.cancel(self._timer)
            self._timer = None

        if drop_pending and self._pending is not None:
            pending = self._pending
            self._pending = None
            drop_stack(pending, self._on_drop_stack)

    def _rejected(self, operation: str) -> bool:
        if not self._destroyed:
            return False
        _LOG.debug("modal operation ignored after destroy name=%s op=%s", self._name, operation)
        return True

    def _emit(self, reason: str) -> None:
        snapshot = self.get_state()
        if self._trace:
            _LOG.debug(
                "modal state changed reason=%s",
                reason,
                extra={
                    "controller": self._name,
                    "depth": len(snapshot.current_stack),
                    "queued": len(snapshot.queue),
                    "is_open": snapshot.is_open,
                },
            )
        self._listeners.publish(snapshot)


def _noop() -> None:
    return None


ModalController = RuntimeModalController
