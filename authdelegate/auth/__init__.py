"""Authentication coordination for authdelegate."""

from .coordinator import Auth, create_auth
from .delegate import DelegateRegistry, as_operation
from .guard import CompletionGuard, guard
from .types import UNSET, CallbackOperation, SyncOperation, is_authenticated_value, is_error

# Public attributes of Auth; kept in sync by tests.
INTERFACE = (
    "authenticate",
    "create",
    "credentials",
    "delegate",
    "emit",
    "is_authenticated",
    "login",
    "login_async",
    "logout",
    "logout_async",
    "off",
    "on",
    "once",
    "stale_completions",
)

__all__ = [
    "Auth",
    "CallbackOperation",
    "CompletionGuard",
    "DelegateRegistry",
    "INTERFACE",
    "SyncOperation",
    "UNSET",
    "as_operation",
    "create_auth",
    "guard",
    "is_authenticated_value",
    "is_error",
]
