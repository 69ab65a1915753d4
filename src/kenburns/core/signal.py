"""Pure Python signal used for engine lifecycle notifications, with no Qt dependency."""

from __future__ import annotations

import logging
from typing import Any, Callable

_LOGGER = logging.getLogger(__name__)


class Signal:
    """Observer-pattern callback list.

    The engine runs on a single call sequence, so no locking is done.
    Exceptions raised by individual handlers are caught and logged so that one
    failing listener cannot break frame computation.
    """

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Callable[..., Any]) -> None:
        self._handlers.remove(handler)

    def emit(self, *args: Any, **kwargs: Any) -> None:
        for handler in list(self._handlers):
            try:
                handler(*args, **kwargs)
            except Exception:
                _LOGGER.exception("Signal handler %r failed", handler)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)


__all__ = ["Signal"]
