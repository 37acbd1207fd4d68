"""Minimal synchronous publish/subscribe used by the auth coordinator."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class _Once:
    """Wraps a handler so it unsubscribes itself after the first call."""

    def __init__(self, emitter: EventEmitter, event: str, handler: Handler) -> None:
        self.emitter = emitter
        self.event = event
        self.handler = handler

    def __call__(self, *args: Any) -> Any:
        self.emitter.off(self.event, self)
        return self.handler(*args)


class EventEmitter:
    """Named events with handlers invoked synchronously in subscription order.

    A failing handler is logged and does not stop the remaining handlers,
    so emitting never raises into the caller.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}

    def on(self, event: str, handler: Handler) -> Handler:
        """Subscribe ``handler`` to ``event``. Returns the handler."""
        self._handlers.setdefault(event, []).append(handler)
        return handler

    def once(self, event: str, handler: Handler) -> Handler:
        """Subscribe ``handler`` for the next emission of ``event`` only."""
        self.on(event, _Once(self, event, handler))
        return handler

    def off(self, event: str, handler: Handler | None = None) -> None:
        """Remove one handler, or every handler of ``event`` when none is given."""
        if handler is None:
            self._handlers.pop(event, None)
            return
        handlers = self._handlers.get(event, [])
        for registered in list(handlers):
            if registered is handler or (isinstance(registered, _Once) and registered.handler is handler):
                handlers.remove(registered)
                break

    def listeners(self, event: str) -> list[Handler]:
        return list(self._handlers.get(event, []))

    def emit(self, event: str, *args: Any) -> bool:
        """Invoke every handler of ``event``. Returns False if nobody listened."""
        handlers = self.listeners(event)
        for handler in handlers:
            try:
                handler(*args)
            except Exception:
                logger.exception("Handler %r for %r event failed", handler, event)
        return bool(handlers)
