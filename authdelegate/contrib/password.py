"""Synchronous delegate that asks the end-user for a shared password."""

from __future__ import annotations

import logging
from typing import Callable

from ..auth.types import SyncOperation
from ..exceptions import AuthenticationError

logger = logging.getLogger(__name__)

ERROR_WRONG_PASSWORD = "Wrong password"


class PasswordDelegate:
    """Logs in when ``prompt`` returns the expected password.

    The credentials are the entered password itself; a mismatch is reported
    as an AuthenticationError status rather than raised.
    """

    def __init__(self, password: str, prompt: Callable[[str], str]) -> None:
        self._password = password
        self._prompt = prompt
        self.login = SyncOperation(self._login)
        self.logout = SyncOperation(self._logout)

    def _login(self) -> str | AuthenticationError:
        guess = self._prompt("What is the password?")
        if guess != self._password:
            logger.debug("Password rejected")
            return AuthenticationError(ERROR_WRONG_PASSWORD)
        return guess

    def _logout(self) -> None:
        return None


def password_delegate(password: str, prompt: Callable[[str], str]) -> PasswordDelegate:
    return PasswordDelegate(password, prompt)
