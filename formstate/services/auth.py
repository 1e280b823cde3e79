"""Auth service — login/logout over the login form and the session store.

The signed-in user lives in the session store, so it survives restarts of
whatever process renders the screens. Credential checking is injected.
"""

import inspect
from typing import Any, Awaitable, Callable, Optional, Union

import structlog

from formstate.form.controller import FormController
from formstate.forms.login import login_form
from formstate.models.results import SubmitResult
from formstate.services.session_store import SessionStore

logger = structlog.get_logger()

# (username, password) -> user dict, or None when the credentials are wrong
Authenticator = Callable[[str, str], Union[Optional[dict], Awaitable[Optional[dict]]]]

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class InvalidCredentials(Exception):
    """The authenticator did not recognise the username/password pair."""


class AuthService:
    """Signs users in and out, persisting the current user in a SessionStore."""

    def __init__(self, store: SessionStore, authenticator: Authenticator, session_key: str = "user"):
        self.store = store
        self.authenticator = authenticator
        self.session_key = session_key

    def login_form(self, **kwargs) -> FormController:
        """A fresh login form to pass to login()."""
        return login_form(**kwargs)

    async def login(self, form: FormController) -> SubmitResult:
        """Submit the login form and sign the user in if the credentials check out.

        Wrong credentials come back as a ``failure`` result and are also set
        as the password field's error.
        """
        result = await form.submit(self._sign_in)
        if result.error_type == InvalidCredentials.__name__:
            form.set_field_error("password", result.error)
        return result

    async def logout(self) -> None:
        await self.store.remove(self.session_key)
        logger.info("user_logged_out")

    async def current_user(self) -> Optional[dict[str, Any]]:
        return await self.store.get(self.session_key)

    async def is_authenticated(self) -> bool:
        return await self.current_user() is not None

    async def _sign_in(self, values: dict[str, Any]) -> dict:
        user = self.authenticator(values["username"], values["password"])
        if inspect.isawaitable(user):
            user = await user
        if not user:
            logger.warning("login_rejected", username=values["username"])
            raise InvalidCredentials(INVALID_CREDENTIALS_MESSAGE)

        await self.store.set(self.session_key, user)
        logger.info("user_logged_in", username=values["username"])
        return user
