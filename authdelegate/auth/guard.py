"""Single-use completion wrappers handed to delegate operations."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class CompletionGuard:
    """Calls the wrapped function on the first invocation only.

    Delegates may call their completion function more than once, by mistake
    or because overlapping async work finishes twice. Every call after the
    first is logged and ignored; it never raises.
    """

    def __init__(self, fn: Callable[..., Any], name: str = "completion") -> None:
        self._fn = fn
        self.name = name
        self.called = False
        self.ignored = 0

    def __call__(self, *args: Any) -> None:
        if self.called:
            self.ignored += 1
            logger.warning("Ignoring repeated %s (call #%d)", self.name, self.ignored + 1)
            return
        self.called = True
        self._fn(*args)

    def __repr__(self) -> str:
        return f"CompletionGuard({self.name!r}, called={self.called})"


def guard(fn: Callable[..., Any], name: str = "completion") -> CompletionGuard:
    """Wrap ``fn`` so only its first invocation has any effect."""
    return CompletionGuard(fn, name=name)
