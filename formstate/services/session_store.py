"""Session store — Redis-backed key/value store for persisted session data.

Used by authentication flows to keep a logged-in user across page loads.
Forms never touch it.
"""

import json
from typing import Any, Optional

import structlog
import redis.asyncio as aioredis

from formstate.config import get_settings

logger = structlog.get_logger()


class SessionStore:
    """JSON values in Redis under a key prefix, with a sliding TTL."""

    def __init__(self, redis_client, prefix: Optional[str] = None, ttl: Optional[int] = None):
        settings = get_settings()
        self.redis = redis_client
        self._prefix = prefix if prefix is not None else settings.SESSION_KEY_PREFIX
        self.ttl = ttl or settings.SESSION_TTL

    @classmethod
    def from_url(cls, url: Optional[str] = None, **kwargs) -> "SessionStore":
        """Build a store with a fresh ``redis.asyncio`` client."""
        client = aioredis.from_url(
            url or get_settings().REDIS_URL,
            decode_responses=True,
            encoding="utf-8",
        )
        return cls(client, **kwargs)

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str, default: Any = None) -> Any:
        """Retrieve a stored value, or ``default`` when absent or unreadable."""
        data = await self.redis.get(self._key(key))
        if data is None:
            return default
        try:
            return json.loads(data)
        except (json.JSONDecodeError, TypeError) as e:
            logger.error("session_value_corrupt", key=key, error=str(e))
            return default

    async def set(self, key: str, value: Any) -> None:
        """Store a JSON-serialisable value."""
        await self.redis.setex(self._key(key), self.ttl, json.dumps(value, default=str))
        logger.info("session_value_stored", key=key)

    async def remove(self, key: str) -> None:
        """Delete a stored value. Missing keys are ignored."""
        await self.redis.delete(self._key(key))
        logger.info("session_value_removed", key=key)

    async def exists(self, key: str) -> bool:
        """Check whether a key is stored."""
        return bool(await self.redis.exists(self._key(key)))

    async def close(self) -> None:
        await self.redis.close()
