"""Redis-backed CacheProtocol implementation.

Used for the user status cache when settings.redis_enabled is set, so
admin / verified flags are shared across workers. Values are stored as
JSON. Every Redis failure is logged and reported as a miss (get) or as
False (set/delete); callers fall through to the database.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import redis.asyncio as redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheService:
    """Async Redis cache with per-key TTL.

    Call connect() at startup and disconnect() at shutdown. A failed
    connect leaves the service unavailable rather than raising, and one
    reconnect is attempted when a command hits a dropped connection.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: str | None = None,
        max_connections: int = 50,
        default_ttl: float = 300.0,
        redis_client: redis.Redis | None = None,
    ) -> None:
        self.redis = redis_client
        self._host = host
        self._port = port
        self._db = db
        self._password = password
        self._max_connections = max_connections
        self._default_ttl = default_ttl
        self._connected = False

    async def connect(self) -> None:
        """Open (or verify an injected) connection with a PING."""
        if self.redis is None:
            self.redis = redis.Redis(
                host=self._host,
                port=self._port,
                db=self._db,
                password=self._password,
                max_connections=self._max_connections,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_keepalive=True,
            )
        try:
            await self.redis.ping()
        except (RedisConnectionError, RedisTimeoutError) as e:
            logger.warning("Redis connection failed: %s. Cache disabled.", e)
            self._connected = False
            self.redis = None
            return
        self._connected = True
        logger.info("Redis cache connected: %s:%s", self._host, self._port)

    async def disconnect(self) -> None:
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """PING again on the same client; its pool replaces dropped connections."""
        try:
            await self.redis.ping()
        except RedisError as e:
            logger.warning("Redis reconnect failed: %s. Cache disabled.", e)
            self._connected = False
            return False
        return True

    def is_available(self) -> bool:
        return self._connected and self.redis is not None

    async def _run(self, op: str, key: str, command: Callable[[], Awaitable[T]], default: T) -> T:
        """Run command, retrying once after a reconnect on connection loss."""
        if not self.is_available():
            return default
        try:
            return await command()
        except (RedisConnectionError, RedisTimeoutError):
            if await self._reconnect():
                try:
                    return await command()
                except RedisError:
                    logger.exception("Cache %s error for key %s after reconnect", op, key)
                    return default
            logger.warning("Cache %s unavailable for key %s (Redis disconnected)", op, key)
            return default
        except RedisError:
            logger.exception("Cache %s error for key %s", op, key)
            return default

    async def get(self, key: str) -> Any:
        raw = await self._run("get", key, lambda: self.redis.get(key), None)
        if raw is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return json.loads(raw)

    async def set(self, key: str, value: Any, ttl: float | None = None) -> bool:
        """Store value as JSON. Redis expiries are whole seconds, so ttl is rounded up."""
        seconds = max(1, math.ceil(self._default_ttl if ttl is None else ttl))
        serialized = json.dumps(value)

        async def command() -> bool:
            await self.redis.setex(key, seconds, serialized)
            return True

        stored = await self._run("set", key, command, False)
        if stored:
            logger.debug("Cache SET: %s (TTL: %ss)", key, seconds)
        return stored

    async def delete(self, key: str) -> bool:
        async def command() -> bool:
            await self.redis.delete(key)
            return True

        return await self._run("delete", key, command, False)
