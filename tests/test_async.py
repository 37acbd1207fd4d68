"""Tests for the awaitable login/logout helpers."""

from __future__ import annotations

import asyncio
import threading

import pytest

from authdelegate import AuthenticationError, CompletionTimeoutError


@pytest.mark.asyncio
class TestLoginAsync:
    async def test_sync_delegate(self, auth):
        auth.delegate(login=lambda: "tok", sync=True)

        status = await auth.login_async()

        assert status == "tok"
        assert auth.is_authenticated()

    async def test_completion_scheduled_on_loop(self, auth, events):
        loop = asyncio.get_running_loop()
        auth.delegate(login=lambda finish: loop.call_later(0.01, finish, "late"))

        status = await auth.login_async()

        assert status == "late"
        events["login"].assert_called_once_with("late")

    async def test_completion_from_another_thread(self, auth):
        def login(finish):
            threading.Timer(0.01, finish, args=("threaded",)).start()

        auth.delegate(login=login)

        status = await auth.login_async(timeout=5)

        assert status == "threaded"

    async def test_threaded_completion_runs_on_the_loop(self, auth, events):
        loop_thread = threading.get_ident()
        seen = []
        auth.on("login", lambda credentials: seen.append(threading.get_ident()))

        def login(finish):
            threading.Timer(0.01, finish, args=("threaded",)).start()

        auth.delegate(login=login)

        await auth.login_async(timeout=5)

        assert seen == [loop_thread]
        assert auth.credentials == "threaded"

    async def test_error_is_returned_not_raised(self, auth, events):
        error = AuthenticationError("denied")
        auth.delegate(login=lambda finish: finish(error))

        status = await auth.login_async()

        assert status is error
        events["error"].assert_called_once_with(error)

    async def test_timeout(self, auth):
        auth.delegate(login=lambda finish: None)

        with pytest.raises(CompletionTimeoutError) as exc_info:
            await auth.login_async(timeout=0.01)

        assert isinstance(exc_info.value, TimeoutError)
        assert exc_info.value.action == "login"
        assert not auth.is_authenticated()


@pytest.mark.asyncio
class TestLogoutAsync:
    async def test_logout(self, auth, events):
        auth.authenticate("creds")
        auth.delegate(logout=lambda finish: finish())

        status = await auth.logout_async()

        assert status is None
        assert not auth.is_authenticated()
        events["logout"].assert_called_once_with(None)

    async def test_default_logout_reports_none(self, auth):
        auth.authenticate("creds")

        assert await auth.logout_async() is None
        assert auth.is_authenticated()
