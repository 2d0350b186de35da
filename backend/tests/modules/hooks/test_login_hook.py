"""Tests for LoginHook."""

import asyncio

import pytest

from modules.auth.exceptions import AuthBackendError, AuthTransportError
from modules.hooks import LoginHook


class TestLoginHook:
    def test_initial_state(self, backend):
        hook = LoginHook(backend)
        assert hook.is_loading is False
        assert hook.error is None
        assert hook.success is False

    @pytest.mark.asyncio
    async def test_success(self, backend):
        hook = LoginHook(backend)
        await hook.login("a@b.com", "Secret1!", remember_me=True, callback_url="/")

        backend.sign_in_email.assert_awaited_once_with(
            "a@b.com", "Secret1!", remember_me=True, callback_url="/"
        )
        assert hook.success is True
        assert hook.error is None
        assert hook.is_loading is False

    @pytest.mark.asyncio
    async def test_backend_error_message(self, backend):
        backend.sign_in_email.side_effect = AuthBackendError("Invalid email or password")
        hook = LoginHook(backend)

        await hook.login("a@b.com", "wrong")

        assert hook.error == "Invalid email or password"
        assert hook.success is False
        assert hook.is_loading is False

    @pytest.mark.asyncio
    async def test_backend_error_without_message(self, backend):
        backend.sign_in_email.side_effect = AuthBackendError()
        hook = LoginHook(backend)
        await hook.login("a@b.com", "wrong")
        assert hook.error == "Failed to sign in"

    @pytest.mark.asyncio
    async def test_unexpected_error_without_message(self, backend):
        backend.sign_in_email.side_effect = RuntimeError()
        hook = LoginHook(backend)
        await hook.login("a@b.com", "Secret1!")
        assert hook.error == "An error occurred"

    @pytest.mark.asyncio
    async def test_transport_error(self, backend):
        backend.sign_in_email.side_effect = AuthTransportError("Auth backend request failed: timeout")
        hook = LoginHook(backend)
        await hook.login("a@b.com", "Secret1!")
        assert hook.error == "Auth backend request failed: timeout"

    @pytest.mark.asyncio
    async def test_error_cleared_on_next_attempt(self, backend):
        backend.sign_in_email.side_effect = [AuthBackendError("Nope"), None]
        hook = LoginHook(backend)

        await hook.login("a@b.com", "wrong")
        assert hook.error == "Nope"

        await hook.login("a@b.com", "Secret1!")
        assert hook.error is None
        assert hook.success is True

    @pytest.mark.asyncio
    async def test_loading_only_while_in_flight(self, backend):
        release = asyncio.Event()
        observed = []

        async def slow_sign_in(*args, **kwargs):
            observed.append(hook.is_loading)
            await release.wait()

        backend.sign_in_email.side_effect = slow_sign_in
        hook = LoginHook(backend)

        task = asyncio.create_task(hook.login("a@b.com", "Secret1!"))
        await asyncio.sleep(0)
        assert hook.is_loading is True
        release.set()
        await task

        assert observed == [True]
        assert hook.is_loading is False
