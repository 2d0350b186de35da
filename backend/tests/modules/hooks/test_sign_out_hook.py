"""Tests for SignOutHook."""

from unittest.mock import MagicMock

import pytest

from modules.auth.exceptions import AuthActionError, AuthBackendError
from modules.hooks import SignOutHook


class TestSignOutHook:
    @pytest.mark.asyncio
    async def test_redirects_exactly_once(self, backend, navigator):
        hook = SignOutHook(backend, navigator)

        await hook.sign_out(redirect_to="/login")

        backend.sign_out.assert_awaited_once()
        navigator.push.assert_called_once_with("/login")
        assert hook.error is None
        assert hook.is_loading is False

    @pytest.mark.asyncio
    async def test_no_redirect_without_target(self, backend, navigator):
        hook = SignOutHook(backend, navigator)
        await hook.sign_out()
        navigator.push.assert_not_called()

    @pytest.mark.asyncio
    async def test_calls_on_success_before_redirect(self, backend, navigator):
        calls = []
        on_success = MagicMock(side_effect=lambda: calls.append("success"))
        navigator.push.side_effect = lambda url: calls.append(url)
        hook = SignOutHook(backend, navigator)

        await hook.sign_out(on_success=on_success, redirect_to="/login")

        assert calls == ["success", "/login"]

    @pytest.mark.asyncio
    async def test_failure_calls_on_error(self, backend, navigator):
        backend.sign_out.side_effect = AuthBackendError()
        on_success = MagicMock()
        on_error = MagicMock()
        hook = SignOutHook(backend, navigator)

        await hook.sign_out(on_success=on_success, on_error=on_error, redirect_to="/login")

        assert hook.error == "Failed to sign out"
        on_success.assert_not_called()
        navigator.push.assert_not_called()
        (error,), _ = on_error.call_args
        assert isinstance(error, AuthActionError)
        assert error.message == "Failed to sign out"
        assert hook.is_loading is False
