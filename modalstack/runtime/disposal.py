"""Fire-and-forget disposal notifications for dropped modal content."""

from __future__ import annotations

import asyncio
import concurrent.futures
import inspect
import logging
from collections.abc import Iterable
from typing import TypeAlias, TypeVar

from modalstack.api.controller import DropStackCallback
from modalstack.runtime.errors import log_recoverable

_LOG = logging.getLogger("modalstack.disposal")

T = TypeVar("T")

AnyFuture: TypeAlias = asyncio.Future[object] | concurrent.futures.Future[object]


def drop_stack(stack: Iterable[T], callback: DropStackCallback[T] | None) -> None:
    """Notify ``callback`` that ``stack`` left visibility; never raises."""
    items = tuple(stack)
    if not items or callback is None:
        return
    try:
        result = callback(items)
    except Exception:
        _LOG.warning("modal drop callback failed size=%d", len(items), exc_info=True)
        return
    observe_result(result)


def drop_stacks(stacks: Iterable[Iterable[T]], callback: DropStackCallback[T] | None) -> None:
    for stack in stacks:
        drop_stack(stack, callback)


def observe_result(result: object) -> None:
    """Attach failure swallowing to an asynchronous callback result."""
    if result is None:
        return
    if isinstance(result, (asyncio.Future, concurrent.futures.Future)):
        result.add_done_callback(_swallow_failure)
        return
    if inspect.isawaitable(result):
        try:
            task = asyncio.ensure_future(result, loop=asyncio.get_running_loop())
        except RuntimeError:
            if inspect.iscoroutine(result):
                result.close()
            log_recoverable(_LOG, "modal drop callback awaitable discarded: no running loop")
            return
        task.add_done_callback(_swallow_failure)


def _swallow_failure(future: AnyFuture) -> None:
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        log_recoverable(_LOG, "modal drop callback failed asynchronously", error=error)
