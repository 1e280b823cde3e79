"""Tests for AuthService login/logout over the session store."""

import pytest

from formstate.services.auth import INVALID_CREDENTIALS_MESSAGE, AuthService
from formstate.services.session_store import SessionStore

ADMIN = {"id": 1, "username": "admin", "name": "Administrator"}


def check_credentials(username, password):
    if username == "admin" and password == "password":
        return ADMIN
    return None


@pytest.fixture
def auth(fake_redis):
    return AuthService(SessionStore(fake_redis, prefix="test:"), check_credentials)


@pytest.mark.asyncio
async def test_login_persists_user(auth, fake_redis):
    """Test valid credentials store the user and report success."""
    form = auth.login_form()
    form.on_change("username", "admin")
    form.on_change("password", "password")

    result = await auth.login(form)

    assert result.ok
    assert result.data == ADMIN
    assert "test:user" in fake_redis.data
    assert await auth.current_user() == ADMIN
    assert await auth.is_authenticated() is True
    assert form.is_submitting is False


@pytest.mark.asyncio
async def test_login_wrong_password(auth):
    """Test bad credentials become a failure result and a password error."""
    form = auth.login_form()
    form.on_change("username", "admin")
    form.on_change("password", "nope")

    result = await auth.login(form)

    assert result.status == "failure"
    assert result.error_type == "InvalidCredentials"
    assert form.visible_error("password") == INVALID_CREDENTIALS_MESSAGE
    assert await auth.is_authenticated() is False


@pytest.mark.asyncio
async def test_login_empty_form_never_calls_authenticator(fake_redis):
    calls = []

    def authenticator(username, password):
        calls.append(username)
        return ADMIN

    auth = AuthService(SessionStore(fake_redis), authenticator)
    result = await auth.login(auth.login_form())

    assert result.status == "invalid"
    assert calls == []


@pytest.mark.asyncio
async def test_async_authenticator_and_logout(fake_redis):
    """Test awaitable authenticators and logout clearing the session."""
    async def authenticator(username, password):
        return {"username": username}

    auth = AuthService(SessionStore(fake_redis), authenticator, session_key="account")
    form = auth.login_form()
    form.on_change("username", "ana")
    form.on_change("password", "secret")

    assert (await auth.login(form)).data == {"username": "ana"}
    assert await auth.is_authenticated() is True

    await auth.logout()
    assert await auth.current_user() is None
    assert await auth.is_authenticated() is False
