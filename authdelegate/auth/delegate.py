"""Registry holding the active login/logout delegate operations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .constants import ACTIONS
from .types import UNSET, CallbackOperation, Operation, SyncOperation

logger = logging.getLogger(__name__)


def default_operation(action: str) -> SyncOperation:
    """Stub used until a delegate supplies ``action``; completes at once with no outcome."""

    def default() -> Any:
        logger.info("default %s: no delegate registered", action)
        return UNSET

    return SyncOperation(default)


def as_operation(value: Any, sync: bool = False) -> Operation:
    """Normalize ``value`` into a tagged operation.

    Already-tagged operations pass through. Bare callables are tagged by the
    explicit ``sync`` flag rather than by inspecting their signature.
    """
    if isinstance(value, (CallbackOperation, SyncOperation)):
        return value
    return SyncOperation(value) if sync else CallbackOperation(value)


def _read_slot(partial: Any, action: str) -> Any:
    if partial is None:
        return None
    if isinstance(partial, Mapping):
        return partial.get(action)
    return getattr(partial, action, None)


class DelegateRegistry:
    """One overridable pair of ``login``/``logout`` operations.

    Unsupplied slots keep whatever was registered before. On first use they
    hold stubs that log and complete immediately without a state change.
    """

    def __init__(self) -> None:
        self._operations: dict[str, Operation] = {action: default_operation(action) for action in ACTIONS}

    def __getitem__(self, action: str) -> Operation:
        return self._operations[action]

    def update(self, partial: Any = None, *, sync: bool = False, **overrides: Any) -> dict[str, Operation]:
        """Merge supplied operations over the current pair.

        ``partial`` is a mapping or any object with ``login``/``logout``
        attributes; keyword overrides win over it. Returns the slots that
        were actually replaced.
        """
        supplied: dict[str, Operation] = {}
        for action in ACTIONS:
            value = overrides.get(action)
            if value is None:
                value = _read_slot(partial, action)
            if value is None:
                continue
            if not callable(value):
                logger.warning("Ignoring non-callable delegate %s: %r", action, value)
                continue
            supplied[action] = as_operation(value, sync=sync)

        self._operations.update(supplied)
        logger.debug("Delegate updated: %s", ", ".join(supplied) or "nothing")
        return supplied


def notified_partial(partial: Any = None, **overrides: Any) -> Any:
    """The partial delegate as the caller supplied it, for ``delegate`` listeners.

    Without keyword overrides this is ``partial`` itself. Otherwise it is a
    dict of the raw ``login``/``logout`` values, overrides winning.
    """
    overrides = {action: value for action, value in overrides.items() if value is not None}
    if not overrides:
        return {} if partial is None else partial
    notified = {}
    for action in ACTIONS:
        value = overrides.get(action)
        if value is None:
            value = _read_slot(partial, action)
        if value is not None:
            notified[action] = value
    return notified
