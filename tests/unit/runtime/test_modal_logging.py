from __future__ import annotations

import json
import logging
import sys

from modalstack.api.logging import ModalLoggingConfig
from modalstack.runtime.logging import (
    JsonFormatter,
    configure_modal_logging,
    get_modal_logger,
    setup_modal_logging,
    shutdown_modal_logging,
)


def _restore(root: logging.Logger, handlers: list[logging.Handler], level: int) -> None:
    root.handlers.clear()
    root.handlers.extend(handlers)
    root.setLevel(level)


def test_setup_modal_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("MODALSTACK_LOG_LEVEL", "DEBUG")
        setup_modal_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        _restore(root, original_handlers, original_level)


def test_setup_modal_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_modal_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        _restore(root, original_handlers, original_level)


def test_configure_modal_logging_streams_json_to_file(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_path = tmp_path / "logs" / "modal.jsonl"
    try:
        configure_modal_logging(
            ModalLoggingConfig(level_name="info", file_path=str(log_path), file_format="json")
        )
        get_modal_logger("controller").info("opened", extra={"depth": 2})
        shutdown_modal_logging()
        record = json.loads(log_path.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert record["logger"] == "modalstack.controller"
        assert record["msg"] == "opened"
        assert record["fields"]["depth"] == 2
    finally:
        shutdown_modal_logging()
        _restore(root, original_handlers, original_level)


def test_json_formatter_includes_exception_text() -> None:
    try:
        raise ValueError("bad")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "ERROR"
    assert "ValueError" in payload["exc_info"]


def test_get_modal_logger_namespaces_names() -> None:
    assert get_modal_logger("service").name == "modalstack.service"
    assert get_modal_logger("modalstack.disposal").name == "modalstack.disposal"


def test_public_get_logger_returns_namespaced_logger() -> None:
    from modalstack.api.logging import get_logger

    logger = get_logger("host")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "modalstack.host"
