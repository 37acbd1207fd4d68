"""Typed values exchanged between the coordinator and its delegates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

Status = Any
Finish = Callable[..., None]


class _Unset:
    """Sentinel for "never set", distinct from any falsy credentials."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class CallbackOperation:
    """Delegate operation called as ``fn(finish)``; it reports by calling ``finish(status)``."""

    fn: Callable[[Finish], Any]
    sync = False

    def __call__(self, finish: Finish) -> None:
        self.fn(finish)


@dataclass(frozen=True)
class SyncOperation:
    """Delegate operation called as ``fn()``; its return value is the status."""

    fn: Callable[[], Status]
    sync = True

    def __call__(self, finish: Finish) -> None:
        finish(self.fn())


Operation = CallbackOperation | SyncOperation


def is_error(status: Status) -> bool:
    return isinstance(status, BaseException)


def is_authenticated_value(credentials: Status) -> bool:
    """Credentials count as authenticated when set and truthy."""
    return credentials is not UNSET and bool(credentials)
