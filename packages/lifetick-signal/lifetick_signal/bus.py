"""In-memory pub/sub bus with deferred, fire-and-forget delivery."""
from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues published signals and delivers them on ``flush``.

    Publishing never calls a handler directly, so a publisher's state is
    settled before any subscriber sees the signal. A handler that raises is
    logged and skipped; the remaining handlers still run.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, [])):
                try:
                    handler(signal_name, data)
                except Exception:
                    logger.exception("Handler for %r failed", signal_name)

    def clear(self) -> None:
        self._queue.clear()
