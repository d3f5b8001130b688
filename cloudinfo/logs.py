"""Logger configuration and structured logging helpers."""

from __future__ import annotations

import json
import logging
import sys
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

TRACE = 5

_LEVELS = {
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}

_LEVEL_NAMES = {
    TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "fatal",
}

_RESERVED = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {
    "message",
    "asctime",
}


@dataclass
class LogConfig:
    """Details necessary for logging."""

    format: str = "logfmt"
    level: str = "info"
    no_color: bool = False


def _level_name(record: logging.LogRecord) -> str:
    return _LEVEL_NAMES.get(record.levelno, record.levelname.lower())


def _record_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {key: value for key, value in record.__dict__.items() if key not in _RESERVED}


def _timestamp(record: logging.LogRecord) -> str:
    moment = datetime.fromtimestamp(record.created, timezone.utc).astimezone()
    return moment.isoformat(timespec="seconds")


class _JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = dict(_record_fields(record))
        payload["level"] = _level_name(record)
        payload["msg"] = record.getMessage()
        payload["time"] = _timestamp(record)
        return json.dumps(payload, default=str)


def _quote(value: Any) -> str:
    text = str(value)
    if text == "" or any(ch in text for ch in ' ="\\') or not text.isprintable():
        return json.dumps(text)
    return text


class _LogfmtFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        parts = [
            f"time={_quote(_timestamp(record))}",
            f"level={_level_name(record)}",
            f"msg={_quote(record.getMessage())}",
        ]
        parts.extend(
            f"{key}={_quote(value)}" for key, value in sorted(_record_fields(record).items())
        )
        return " ".join(parts)


def new_logger(config: LogConfig) -> logging.Logger:
    """Create a new logger writing to standard output."""
    logger = logging.Logger("cloudinfo")
    logger.propagate = False

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_JSONFormatter() if config.format == "json" else _LogfmtFormatter())
    logger.addHandler(handler)

    logger.setLevel(_LEVELS.get(config.level.strip().lower(), logging.INFO))
    return logger


class _ContextLogger(logging.LoggerAdapter):
    """Logger adapter that merges its fields with per-call extras."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def with_fields(
    logger: logging.Logger | logging.LoggerAdapter, fields: Mapping[str, Any] | None
) -> logging.Logger | logging.LoggerAdapter:
    """Return a contextual logger with the fields added to it."""
    if not fields:
        return logger
    if isinstance(logger, logging.LoggerAdapter):
        return _ContextLogger(logger.logger, {**(logger.extra or {}), **fields})
    return _ContextLogger(logger, dict(fields))


def to_map(keyvals: Iterable[Any]) -> dict[str, Any]:
    """Turn an alternating key/value sequence into a dictionary.

    A missing last value becomes None, keys are turned into strings and
    exception values into their messages.
    """
    items = list(keyvals)
    if len(items) % 2 == 1:
        items.append(None)

    result: dict[str, Any] = {}
    for key, value in zip(items[::2], items[1::2]):
        if isinstance(value, BaseException):
            value = str(value)
        result[key if isinstance(key, str) else str(key)] = value
    return result


class _ForwardHandler(logging.Handler):
    """Forwards every record to a target logger at info level."""

    def __init__(self, target: logging.Logger | logging.LoggerAdapter) -> None:
        super().__init__()
        self._target = target
        self._local = threading.local()

    def emit(self, record: logging.LogRecord) -> None:
        if getattr(self._local, "active", False):
            return
        self._local.active = True
        try:
            self._target.log(logging.INFO, record.getMessage())
        finally:
            self._local.active = False


def set_standard_logger(logger: logging.Logger | logging.LoggerAdapter) -> logging.Handler:
    """Send everything logged through the root logger to the given logger at info level."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    handler = _ForwardHandler(logger)
    root.addHandler(handler)
    root.setLevel(logging.NOTSET)
    return handler