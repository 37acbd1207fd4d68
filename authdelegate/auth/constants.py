"""Constants for the auth coordinator."""

from __future__ import annotations

LOGIN = "login"
LOGOUT = "logout"
ACTIONS = (LOGIN, LOGOUT)

# Events published by Auth
EVENT_LOGIN = "login"
EVENT_LOGOUT = "logout"
EVENT_ERROR = "error"
EVENT_DELEGATE = "delegate"

# Log messages
MSG_NO_CREDENTIALS = "%s completed without credentials"
MSG_NO_OUTCOME = "%s completed with no outcome; state unchanged"
MSG_STALE = "Ignoring stale %s completion from attempt %d (latest is %d)"
