from __future__ import annotations

import contextvars

from modalstack.runtime.config import (
    ModalRuntimeConfig,
    get_modal_config,
    load_modal_config,
    resolve_log_level_name,
    set_modal_config,
)


def test_load_modal_config_parses_env_mapping() -> None:
    cfg = load_modal_config(
        env={
            "MODALSTACK_QUEUE_DELAY_MS": "250",
            "MODALSTACK_TRACE": "yes",
            "MODALSTACK_LOG_LEVEL": "debug",
        }
    )
    assert cfg == ModalRuntimeConfig(queue_delay_ms=250.0, trace_transitions=True, log_level="DEBUG")


def test_load_modal_config_defaults_and_clamps() -> None:
    assert load_modal_config(env={}) == ModalRuntimeConfig()
    assert load_modal_config(env={"MODALSTACK_QUEUE_DELAY_MS": "-40"}).queue_delay_ms == 0.0
    assert load_modal_config(env={"MODALSTACK_QUEUE_DELAY_MS": "soon"}).queue_delay_ms == 150.0
    assert load_modal_config(env={"MODALSTACK_TRACE": "maybe"}).trace_transitions is False


def test_load_modal_config_reads_process_env(monkeypatch) -> None:
    monkeypatch.setenv("MODALSTACK_QUEUE_DELAY_MS", "75")
    monkeypatch.setenv("MODALSTACK_TRACE", "off")
    cfg = load_modal_config()
    assert cfg.queue_delay_ms == 75.0
    assert cfg.trace_transitions is False


def test_resolve_log_level_prefers_modalstack_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("MODALSTACK_LOG_LEVEL", "ERROR")
    assert resolve_log_level_name() == "ERROR"
    monkeypatch.delenv("MODALSTACK_LOG_LEVEL")
    assert resolve_log_level_name() == "WARNING"


def test_set_modal_config_overrides_current_context() -> None:
    override = ModalRuntimeConfig(queue_delay_ms=5.0)

    def scenario() -> ModalRuntimeConfig:
        set_modal_config(override)
        return get_modal_config()

    assert contextvars.copy_context().run(scenario) is override
