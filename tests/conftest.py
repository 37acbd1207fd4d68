"""Test configuration for authdelegate tests."""

from unittest.mock import MagicMock

import pytest

from authdelegate import create_auth


@pytest.fixture
def auth():
    """Fresh Auth object per test; there is no shared instance to reset."""
    return create_auth()


@pytest.fixture
def events(auth):
    """Spies subscribed to every event of the ``auth`` fixture."""
    spies = {name: MagicMock(name=name) for name in ("login", "logout", "error", "delegate")}
    for name, spy in spies.items():
        auth.on(name, spy)
    return spies
