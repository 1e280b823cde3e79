"""Shared fixtures for formstate tests."""

import pytest

from formstate.config import get_settings
from formstate.form.controller import FormController
from formstate.validators.advanced import confirm_password
from formstate.validators.basic import min_length, required


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached process-wide; isolate each test from env changes."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def password_rules():
    return {
        "password": [required("Password is required"), min_length(8)],
        "confirmPassword": [
            required("Please confirm your password"),
            confirm_password("Passwords must match"),
        ],
    }


@pytest.fixture
def password_form(password_rules):
    return FormController({"password": "", "confirmPassword": ""}, password_rules)


class FakeRedis:
    """Minimal async stand-in for a redis.asyncio client."""

    def __init__(self):
        self.data = {}
        self.ttls = {}
        self.closed = False

    async def get(self, key):
        return self.data.get(key)

    async def setex(self, key, ttl, value):
        self.data[key] = value
        self.ttls[key] = ttl

    async def delete(self, key):
        self.data.pop(key, None)
        self.ttls.pop(key, None)

    async def exists(self, key):
        return int(key in self.data)

    async def close(self):
        self.closed = True


@pytest.fixture
def fake_redis():
    return FakeRedis()
