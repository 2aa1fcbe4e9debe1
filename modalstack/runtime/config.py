"""Modalstack runtime configuration sourced from environment."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from modalstack.api.controller import DEFAULT_QUEUE_DELAY_MS


@dataclass(frozen=True, slots=True)
class ModalRuntimeConfig:
    """Immutable modalstack runtime configuration."""

    queue_delay_ms: float = DEFAULT_QUEUE_DELAY_MS
    trace_transitions: bool = False
    log_level: str = "INFO"


_MODAL_CONFIG: ContextVar[ModalRuntimeConfig | None] = ContextVar(
    "modalstack_runtime_config", default=None
)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with modalstack-prefixed override."""
    value = _raw("MODALSTACK_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_modal_config(*, env: Mapping[str, str] | None = None) -> ModalRuntimeConfig:
    """Load immutable configuration from env vars."""
    return ModalRuntimeConfig(
        queue_delay_ms=_float(
            "MODALSTACK_QUEUE_DELAY_MS", DEFAULT_QUEUE_DELAY_MS, minimum=0.0, env=env
        ),
        trace_transitions=_flag("MODALSTACK_TRACE", False, env=env),
        log_level=resolve_log_level_name(env=env),
    )


def initialize_modal_config(*, env: Mapping[str, str] | None = None) -> ModalRuntimeConfig:
    config = load_modal_config(env=env)
    _MODAL_CONFIG.set(config)
    return config


def set_modal_config(config: ModalRuntimeConfig) -> ModalRuntimeConfig:
    _MODAL_CONFIG.set(config)
    return config


def get_modal_config() -> ModalRuntimeConfig:
    config = _MODAL_CONFIG.get()
    if config is not None:
        return config
    return initialize_modal_config()


__all__ = [
    "ModalRuntimeConfig",
    "get_modal_config",
    "initialize_modal_config",
    "load_modal_config",
    "resolve_log_level_name",
    "set_modal_config",
]
