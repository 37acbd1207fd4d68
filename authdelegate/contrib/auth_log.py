"""A running log of authentication events."""

from __future__ import annotations

from functools import partial
from typing import Any, Callable

from rich.console import Console

from ..auth import Auth
from ..auth.constants import EVENT_ERROR, EVENT_LOGIN, EVENT_LOGOUT


class AuthLog:
    """Records login/logout/error events of an Auth object, newest first.

    Every message is also written to ``sink``, a rich console by default.
    Components can call the log directly to add their own lines.
    """

    def __init__(self, auth: Auth, sink: Callable[[str], Any] | None = None) -> None:
        self.auth = auth
        self.entries: list[str] = []
        self._sink = sink if sink is not None else partial(Console().print, markup=False, highlight=False)
        self._handlers = {
            EVENT_LOGIN: self._on_login,
            EVENT_LOGOUT: self._on_logout,
            EVENT_ERROR: self._on_error,
        }
        for event, handler in self._handlers.items():
            auth.on(event, handler)

    def __call__(self, message: str) -> None:
        self.entries.insert(0, message)
        self._sink(message)

    def _on_login(self, credentials: Any) -> None:
        self(f"Logged in with {credentials}")

    def _on_logout(self, _credentials: Any = None) -> None:
        self("Logged out")

    def _on_error(self, error: BaseException) -> None:
        self(f"Error: {error}")

    def detach(self) -> None:
        """Stop listening to the Auth object."""
        for event, handler in self._handlers.items():
            self.auth.off(event, handler)


def attach_auth_log(auth: Auth, sink: Callable[[str], Any] | None = None) -> AuthLog:
    """Create an AuthLog listening to ``auth``."""
    return AuthLog(auth, sink=sink)
