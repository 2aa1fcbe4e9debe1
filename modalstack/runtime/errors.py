"""Shared modalstack exception types and tolerance helpers."""

from __future__ import annotations

import logging


class ModalStackError(RuntimeError):
    """Base error for modal adapter integration failures."""


class ModalContextError(ModalStackError):
    """Raised when no modal service is bound to the current context."""


class ModalMountError(ModalStackError):
    """Raised when a modal definition cannot be materialized."""


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
    error: BaseException | None = None,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions.

    ``error`` covers failures surfaced outside an ``except`` block, such as a
    settled future.
    """
    logger.log(level, message, exc_info=error if error is not None else True)
