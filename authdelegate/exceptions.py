"""Custom exceptions raised by authdelegate."""

from __future__ import annotations

from typing import Optional


class AuthDelegateError(Exception):
    """Base exception for all authdelegate specific failures."""


class AuthenticationError(AuthDelegateError):
    """Reported by a delegate when the end-user could not be authenticated."""


class CompletionTimeoutError(AuthDelegateError, TimeoutError):
    """Raised when an awaited login/logout attempt is never completed."""

    def __init__(self, action: str, timeout: Optional[float] = None):
        message = f"{action} did not complete"
        if timeout is not None:
            message = f"{message} within {timeout}s"
        super().__init__(message)
        self.action = action
        self.timeout = timeout
