"""Public modalstack logging API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class ModalLoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


class LoggerPort(Protocol):
    """Minimal logger surface for callers."""

    def debug(self, message: object, *args: object, **kwargs: object) -> None: ...

    def info(self, message: object, *args: object, **kwargs: object) -> None: ...

    def warning(self, message: object, *args: object, **kwargs: object) -> None: ...

    def error(self, message: object, *args: object, **kwargs: object) -> None: ...

    def exception(self, message: object, *args: object, **kwargs: object) -> None: ...


def get_logger(name: str) -> LoggerPort:
    """Return namespaced logger."""
    from modalstack.runtime.logging import get_modal_logger

    return get_modal_logger(name)
