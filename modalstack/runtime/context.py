"""Context-local binding of the active modal service."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

from modalstack.api.modals import ModalContext
from modalstack.runtime.errors import ModalContextError

_MODAL_CONTEXT: ContextVar[ModalContext | None] = ContextVar("modalstack_modal_context", default=None)


def set_modal_context(service: ModalContext) -> Token[ModalContext | None]:
    """Bind ``service`` for the current context and return a reset token."""
    return _MODAL_CONTEXT.set(service)


def reset_modal_context(token: Token[ModalContext | None]) -> None:
    _MODAL_CONTEXT.reset(token)


def use_modal() -> ModalContext:
    """Return the bound modal service or raise."""
    service = _MODAL_CONTEXT.get()
    if service is None:
        raise ModalContextError("No modal context found. Bind a modal service with set_modal_context().")
    return service


@contextmanager
def modal_context(service: ModalContext) -> Iterator[ModalContext]:
    """Bind ``service`` for the duration of the block."""
    token = _MODAL_CONTEXT.set(service)
    try:
        yield service
    finally:
        _MODAL_CONTEXT.reset(token)
