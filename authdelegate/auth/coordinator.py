"""The Auth coordinator.

Components frequently need to know about, or trigger, authentication of the
end-user without being coupled to any one authentication strategy. The
embedding application decides the strategy and registers it as a delegate:

    auth = create_auth()
    auth.delegate(
        # Called when a component wants to authenticate the end-user.
        # Call ``finish`` when done: credentials on success, nothing if
        # nobody logged in, or an Exception if something went wrong.
        login=lambda finish: finish("token"),
        # Called when a component wants to deauthenticate the end-user.
        logout=lambda finish: finish(),
    )

Components then call ``auth.login()`` / ``auth.logout()`` and subscribe to
the ``login``, ``logout``, ``error`` and ``delegate`` events.
"""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import Any, Callable

from ..config import STALE_IGNORE, sanitize_stale_policy
from ..events import EventEmitter, Handler
from ..exceptions import CompletionTimeoutError
from .constants import (
    EVENT_DELEGATE,
    EVENT_ERROR,
    EVENT_LOGIN,
    EVENT_LOGOUT,
    LOGIN,
    LOGOUT,
    MSG_NO_CREDENTIALS,
    MSG_NO_OUTCOME,
    MSG_STALE,
)
from .delegate import DelegateRegistry, notified_partial
from .guard import guard
from .types import UNSET, Status, is_authenticated_value, is_error

logger = logging.getLogger(__name__)

Callback = Callable[[Status], Any]


class Auth:
    """Triggers and tracks end-user authentication through a host-supplied delegate.

    Example:
        >>> auth = create_auth().delegate(login=lambda: "token", sync=True)
        >>> handler = auth.on("login", print)
        >>> auth.login()
        token
        >>> auth.is_authenticated()
        True
    """

    def __init__(self, *, credentials: Status = UNSET, stale_completions: str | None = None) -> None:
        """Initialize the coordinator.

        Args:
            credentials: Initial credentials, set without emitting any event.
            stale_completions: ``"accept"`` (default) applies completions in
                the order they arrive; ``"ignore"`` drops completions from
                attempts superseded by a newer login/logout call.

        Raises:
            ValueError: If ``stale_completions`` is not a known policy.
        """
        self._events = EventEmitter()
        self._registry = DelegateRegistry()
        self._credentials = credentials
        self._attempt = 0
        self.stale_completions = sanitize_stale_policy(stale_completions)

    @classmethod
    def create(cls, **kwargs: Any) -> Auth:
        """Create an independent Auth object. See :func:`create_auth`."""
        return create_auth(**kwargs)

    # -- events -------------------------------------------------------------

    def on(self, event: str, handler: Handler) -> Handler:
        return self._events.on(event, handler)

    def once(self, event: str, handler: Handler) -> Handler:
        return self._events.once(event, handler)

    def off(self, event: str, handler: Handler | None = None) -> None:
        self._events.off(event, handler)

    def emit(self, event: str, *args: Any) -> bool:
        if event == EVENT_ERROR and not self._events.listeners(EVENT_ERROR):
            logger.warning("Unhandled auth error: %r", args[0] if args else None)
        return self._events.emit(event, *args)

    # -- delegate -----------------------------------------------------------

    def delegate(
        self,
        partial: Any = None,
        *,
        login: Any = None,
        logout: Any = None,
        sync: bool = False,
    ) -> Auth:
        """Delegate login/logout to the provided operations.

        Args:
            partial: Mapping or object exposing ``login`` and/or ``logout``.
                Bound methods keep their delegate object as receiver.
            login: Login operation, overriding ``partial["login"]``.
            logout: Logout operation, overriding ``partial["logout"]``.
            sync: Treat bare callables as synchronous (``fn() -> status``)
                instead of callback-style (``fn(finish)``).

        Slots not supplied keep their previously registered operation.
        Emits ``delegate`` with the partial as supplied and returns self.
        """
        logger.debug("Auth#delegate %r", partial)
        self._registry.update(partial, sync=sync, login=login, logout=logout)
        self.emit(EVENT_DELEGATE, notified_partial(partial, login=login, logout=logout))
        return self

    # -- login / logout -----------------------------------------------------

    def login(self, callback: Callback | None = None) -> None:
        """Try to facilitate authentication (login) by the end-user.

        ``callback`` receives the completion status before the coordinator
        handles it. Returns immediately if the delegate completes later.
        """
        self._start(LOGIN, callback)

    def logout(self, callback: Callback | None = None) -> None:
        """Try to facilitate deauthentication (logout) by the end-user."""
        self._start(LOGOUT, callback)

    async def login_async(self, timeout: float | None = None) -> Status:
        """Log in and wait for the delegate to complete. Returns the status.

        Error statuses are returned, not raised.

        Raises:
            CompletionTimeoutError: If ``timeout`` seconds pass without completion.
        """
        return await self._wait(LOGIN, timeout)

    async def logout_async(self, timeout: float | None = None) -> Status:
        """Log out and wait for the delegate to complete. Returns the status."""
        return await self._wait(LOGOUT, timeout)

    def _start(
        self,
        action: str,
        callback: Callback | None,
        dispatch: Callable[[Callable[..., None]], Callable[..., None]] | None = None,
    ) -> None:
        """Run one attempt. ``dispatch`` wraps the guarded completion handed to the delegate."""
        self._attempt += 1
        attempt = self._attempt
        logger.debug("Auth#%s (attempt %d)", action, attempt)

        finish = guard(partial(self._finish, action, attempt, callback), name=f"finish {action}")
        if dispatch is not None:
            finish = dispatch(finish)
        try:
            self._registry[action](finish)
        except Exception as e:
            logger.debug("Delegate %s raised %r", action, e)
            finish(e)

    def _finish(
        self,
        action: str,
        attempt: int,
        callback: Callback | None,
        status: Status = None,
        *extra: Any,
    ) -> None:
        logger.debug("Auth#_finish %s (attempt %d)", action, attempt)
        if extra:
            logger.warning("%s completed with %d extra argument(s); only the first is used", action, len(extra))
        if callback is not None:
            try:
                callback(None if status is UNSET else status)
            except Exception:
                logger.exception("%s callback failed", action)

        if self.stale_completions == STALE_IGNORE and attempt < self._attempt:
            logger.warning(MSG_STALE, action, attempt, self._attempt)
            return

        if is_error(status):
            self.emit(EVENT_ERROR, status)
            return
        if status is UNSET:
            logger.info(MSG_NO_OUTCOME, action)
            return
        if not status:
            logger.info(MSG_NO_CREDENTIALS, action)
        self._authenticate(status)

    async def _wait(self, action: str, timeout: float | None) -> Status:
        loop = asyncio.get_running_loop()
        future: asyncio.Future[Status] = loop.create_future()

        def resolve(status: Status) -> None:
            if not future.done():
                future.set_result(status)

        def on_loop(finish: Callable[..., None]) -> Callable[..., None]:
            # Delegates may complete from another thread; the whole completion
            # (callback, state change, events) runs on the loop.
            def complete(*args: Any) -> None:
                if not loop.is_closed():
                    loop.call_soon_threadsafe(finish, *args)

            return complete

        self._start(action, resolve, dispatch=on_loop)
        try:
            return await asyncio.wait_for(future, timeout)
        except asyncio.TimeoutError:
            raise CompletionTimeoutError(action, timeout) from None

    # -- state --------------------------------------------------------------

    @property
    def credentials(self) -> Status:
        return self._credentials

    def authenticate(self, credentials: Status) -> None:
        """Set the current credentials directly, e.g. when already logged in at startup."""
        self._authenticate(credentials)

    def _authenticate(self, credentials: Status) -> None:
        if _unchanged(credentials, self._credentials):
            logger.debug("Credentials unchanged")
            return

        self._credentials = credentials
        if self.is_authenticated():
            self.emit(EVENT_LOGIN, credentials)
        else:
            self.emit(EVENT_LOGOUT, credentials)

    def is_authenticated(self) -> bool:
        return is_authenticated_value(self._credentials)


def create_auth(
    *,
    delegate: Any = None,
    credentials: Status = UNSET,
    stale_completions: str | None = None,
    sync: bool = False,
) -> Auth:
    """Create an Auth object.

    There is no shared default instance. An application usually creates one
    at startup and hands it to its components.

    Args:
        delegate: Optional delegate to register right away.
        credentials: Credentials of an end-user already logged in.
        stale_completions: Stale completion policy, see :class:`Auth`.
        sync: Passed to :meth:`Auth.delegate` for ``delegate``.
    """
    auth = Auth(credentials=credentials, stale_completions=stale_completions)
    if delegate is not None:
        auth.delegate(delegate, sync=sync)
    return auth


def _unchanged(credentials: Status, current: Status) -> bool:
    if credentials is current:
        return True
    if current is UNSET:
        return False
    # Opaque credentials whose __eq__ fails compare by identity only.
    try:
        return bool(credentials == current)
    except Exception:
        return False
