"""authdelegate - coordinate end-user login/logout through a pluggable delegate."""

from importlib.metadata import PackageNotFoundError, version

from .auth import UNSET, Auth, CallbackOperation, SyncOperation, create_auth
from .events import EventEmitter
from .exceptions import AuthDelegateError, AuthenticationError, CompletionTimeoutError

__all__ = [
    "Auth",
    "create_auth",
    "CallbackOperation",
    "SyncOperation",
    "UNSET",
    "EventEmitter",
    "AuthDelegateError",
    "AuthenticationError",
    "CompletionTimeoutError",
]

try:
    __version__ = version("authdelegate")
except PackageNotFoundError:
    __version__ = "0.1.0"
