"""Telemetry services built on the standard ``logging`` package.

This module exposes a narrow surface area for the rest of the engine:

``configure(...)`` -- override or preset the logging configuration
``get_logger(name)`` -- fetch a logger under the engine namespace
``record_event(name, ...)`` -- emit structured events at a chosen level
``span(name, ...)`` -- context manager timing a block and tagging its component

Nothing is written to the console unless asked for: the engine usually runs
inside a full-screen terminal UI, and stray stderr output would corrupt it.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

ENV_PREFIX = "TEXTAREA_ENGINE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "textarea_engine")
DEFAULT_LOG_FILE = os.getenv(f"{ENV_PREFIX}LOG_FILE", "")

_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}
_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}
_RESET = "\033[0m"

_INSTALLED_HANDLERS: List[logging.Handler] = []
_ACTIVE_CONFIG: Optional["TelemetryConfig"] = None


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _level_number(level: Any) -> int:
    if isinstance(level, int):
        return level
    try:
        return _LEVELS[str(level).lower()]
    except KeyError as exc:
        raise ValueError(f"Unsupported log level '{level}'.") from exc


@dataclass(slots=True)
class TelemetryConfig:
    """Handler and format choices applied to the engine logger."""

    level: str = "INFO"
    console: bool = False
    colored: bool = True
    json_format: bool = False
    file_path: str = ""
    buffered: bool = False
    buffer_size: int = 2048


class _TextFormatter(logging.Formatter):
    def __init__(self, *, colored: bool) -> None:
        super().__init__("%(asctime)s %(levelname)-7s %(name)s %(message)s")
        self._colored = colored

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        data = getattr(record, "data", None)
        if data:
            pairs = " ".join(f"{key}={_stringify(val)}" for key, val in data.items())
            message = f"{message} {pairs}"
        if self._colored:
            color = _COLORS.get(record.levelno)
            if color:
                message = f"{color}{message}{_RESET}"
        return message


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        data = getattr(record, "data", None)
        if data:
            payload.update({key: _stringify(val) for key, val in data.items()})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _build_preset_config(preset: str) -> TelemetryConfig:
    key = preset.lower()

    if key == "development":
        return TelemetryConfig(level="DEBUG", console=True, colored=True)
    if key == "production":
        log_path = _env("LOG_FILE", DEFAULT_LOG_FILE) or "textarea_engine.log"
        return TelemetryConfig(level="INFO", file_path=log_path, buffered=True)
    if key in {"performance", "performance_analysis"}:
        log_path = (
            _env("LOG_FILE", DEFAULT_LOG_FILE) or "textarea_engine-performance.log"
        )
        return TelemetryConfig(
            level="DEBUG", file_path=log_path, buffered=True, json_format=True
        )
    raise ValueError(f"Unknown preset '{preset}'.")


def _build_default_config() -> TelemetryConfig:
    config = TelemetryConfig(level=(_env("LOG_LEVEL") or "INFO").upper())
    config.console = _env_flag("LOG_CONSOLE", False)
    config.colored = not _env_flag("NO_COLOR", False)
    config.json_format = _env_flag("LOG_JSON", False)
    config.file_path = _env("LOG_FILE") or DEFAULT_LOG_FILE
    if _env_flag("LOG_BUFFERED", False):
        config.buffered = True
        config.buffer_size = int(_env("LOG_BUFFER_SIZE") or "2048")
    return config


def _install(config: TelemetryConfig) -> None:
    base = logging.getLogger(DEFAULT_LOGGER_NAME)
    for handler in _INSTALLED_HANDLERS:
        base.removeHandler(handler)
        handler.close()
    _INSTALLED_HANDLERS.clear()

    base.setLevel(_level_number(config.level))

    handlers: List[logging.Handler] = []
    if config.console:
        console = logging.StreamHandler()
        console.setFormatter(
            _JsonFormatter()
            if config.json_format
            else _TextFormatter(colored=config.colored)
        )
        handlers.append(console)
    if config.file_path:
        file_handler: logging.Handler = logging.FileHandler(
            config.file_path, encoding="utf-8"
        )
        file_handler.setFormatter(
            _JsonFormatter() if config.json_format else _TextFormatter(colored=False)
        )
        if config.buffered:
            file_handler = logging.handlers.MemoryHandler(
                config.buffer_size, target=file_handler
            )
        handlers.append(file_handler)
    if not handlers:
        handlers.append(logging.NullHandler())

    for handler in handlers:
        base.addHandler(handler)
        _INSTALLED_HANDLERS.append(handler)


def configure(
    *, config: Optional[TelemetryConfig] = None, preset: Optional[str] = None
) -> None:
    """Override the active logging configuration.

    Parameters
    ----------
    config:
        Explicit ``TelemetryConfig`` instance to adopt.
    preset:
        Named preset (``"development"``, ``"production"``, ``"performance"``).
        ``config`` and ``preset`` are mutually exclusive.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _build_preset_config(preset)
    elif config is None:
        config = _build_default_config()

    _install(config)
    _ACTIVE_CONFIG = config


def active_config() -> Optional[TelemetryConfig]:
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the engine namespace."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name != DEFAULT_LOGGER_NAME and not logger_name.startswith(
        f"{DEFAULT_LOGGER_NAME}."
    ):
        logger_name = f"{DEFAULT_LOGGER_NAME}.{logger_name}"
    return logging.getLogger(logger_name)


def record_event(
    name: str,
    *,
    level: str | int = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` record with ``data`` attached."""

    levelno = _level_number(level)
    log = get_logger(logger_name)
    if not log.isEnabledFor(levelno):
        return
    payload = {"event": name, **(data or {})}
    log.log(levelno, "event::%s", name, extra={"data": payload})


@dataclass
class SpanHandle:
    """Handle returned from ``span`` for optional metadata updates."""

    logger: logging.Logger
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _emit(
        self, level: str, message: str, extra: Optional[Dict[str, Any]] = None
    ) -> None:
        levelno = _level_number(level)
        if not self.logger.isEnabledFor(levelno):
            return
        payload = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update({key: _stringify(val) for key, val in extra.items()})
        self.logger.log(levelno, message, extra={"data": payload})

    def fail(self, reason: str) -> None:
        self._emit("error", "span::fail", {"reason": reason})

    def cancel(self, reason: str | None = None) -> None:
        extra = {"reason": reason} if reason else None
        self._emit("warning", "span::cancel", extra)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a code block and log it, optionally tagged with a component.

    Parameters
    ----------
    name:
        Operation name written as the ``span`` field.
    logger_name:
        Target logger; defaults to the engine logger.
    component:
        If ``True`` use the same name as the span; if a string, use it as the
        component identifier.
    metadata:
        Optional metadata attached to every record the span emits.
    """

    log = get_logger(logger_name)
    component_name = None
    if component is True:
        component_name = name
    elif isinstance(component, str):
        component_name = component

    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )
    started = time.perf_counter()
    try:
        yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        handle._emit("debug", "span::end", {"duration_ms": f"{elapsed_ms:.3f}"})


# Initialize the module-level logger once the config is ready.
configure()
logger = get_logger()

__all__ = [
    "SpanHandle",
    "TelemetryConfig",
    "active_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
