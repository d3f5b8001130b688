"""Error handlers: one that logs errors and one that raises them."""

from __future__ import annotations

import logging
from typing import Any

_RESERVED = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {
    "message",
    "asctime",
}


class LoggingErrorHandler:
    """Logs errors, with their details as context fields, at error level."""

    def __init__(self, logger: logging.Logger | logging.LoggerAdapter | None = None) -> None:
        self.logger = logger or logging.getLogger("cloudinfo")

    def handle(self, err: BaseException | None) -> None:
        if err is None:
            return
        details: dict[str, Any] = getattr(err, "details", None) or {}
        extra = {
            (f"detail_{key}" if key in _RESERVED else key): value for key, value in details.items()
        }
        self.logger.error(str(err), extra=extra)


class PanicHandler:
    """Raises every error it is given."""

    def handle(self, err: BaseException | None) -> None:
        if err is not None:
            raise err