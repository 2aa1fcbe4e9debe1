from __future__ import annotations

import contextvars

import pytest

from modalstack.api.modals import ModalExports, MountedModal
from modalstack.runtime.context import (
    modal_context,
    reset_modal_context,
    set_modal_context,
    use_modal,
)
from modalstack.runtime.errors import ModalContextError
from modalstack.runtime.service import RuntimeModalService


def _service(timers) -> RuntimeModalService:
    return RuntimeModalService(
        lambda modal, *, props: MountedModal(exports=ModalExports(title=str(modal))),
        queue_delay_ms=0,
        timers=timers,
    )


def test_use_modal_without_binding_raises() -> None:
    with pytest.raises(ModalContextError, match="No modal context found"):
        contextvars.Context().run(use_modal)


def test_modal_context_binds_for_block_only(timers) -> None:
    service = _service(timers)

    with modal_context(service) as bound:
        assert bound is service
        assert use_modal() is service
        use_modal().open("dialog")

    assert service.host_props().open is True
    with pytest.raises(ModalContextError):
        use_modal()


def test_set_and_reset_modal_context(timers) -> None:
    outer = _service(timers)
    inner = _service(timers)

    outer_token = set_modal_context(outer)
    try:
        inner_token = set_modal_context(inner)
        assert use_modal() is inner
        reset_modal_context(inner_token)
        assert use_modal() is outer
    finally:
        reset_modal_context(outer_token)
