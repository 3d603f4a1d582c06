"""Redis cache backend: JSON storage, TTL rounding, failure handling."""

import json
from unittest.mock import AsyncMock

from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError

from colletro.application.dtos.user import UserStatus
from colletro.infrastructure.cache import CacheService, UserStatusCache
from tests.conftest import USER_ID
from tests.fakes import FakeWorld


def _client() -> AsyncMock:
    client = AsyncMock()
    client.ping.return_value = True
    client.get.return_value = None
    return client


async def _connected(client: AsyncMock, **kwargs) -> CacheService:
    cache = CacheService(redis_client=client, **kwargs)
    await cache.connect()
    return cache


async def test_injected_client_is_available_after_connect() -> None:
    cache = await _connected(_client())
    assert cache.is_available()


async def test_unreachable_server_leaves_cache_unavailable() -> None:
    client = _client()
    client.ping.side_effect = RedisConnectionError("refused")
    cache = CacheService(redis_client=client)
    await cache.connect()

    assert not cache.is_available()
    assert await cache.get("k") is None
    assert await cache.set("k", 1) is False


async def test_set_stores_json_with_ttl_rounded_up() -> None:
    client = _client()
    cache = await _connected(client)

    assert await cache.set("user:status:u1", {"is_admin": True}, ttl=2.5)

    client.setex.assert_awaited_once_with("user:status:u1", 3, json.dumps({"is_admin": True}))


async def test_set_uses_default_ttl() -> None:
    client = _client()
    cache = await _connected(client, default_ttl=300)
    await cache.set("k", "v")
    assert client.setex.await_args.args[1] == 300


async def test_get_decodes_json() -> None:
    client = _client()
    client.get.return_value = '{"is_admin": false, "is_verified": true}'
    cache = await _connected(client)

    assert await cache.get("k") == {"is_admin": False, "is_verified": True}


async def test_command_error_is_a_miss() -> None:
    client = _client()
    client.get.side_effect = ResponseError("WRONGTYPE")
    cache = await _connected(client)

    assert await cache.get("k") is None
    assert cache.is_available()


async def test_dropped_connection_reconnects_once() -> None:
    client = _client()
    client.delete.side_effect = [RedisConnectionError("reset"), 1]
    cache = await _connected(client)

    assert await cache.delete("k") is True
    assert client.delete.await_count == 2


async def test_disconnect_closes_client() -> None:
    client = _client()
    cache = await _connected(client)
    await cache.disconnect()
    client.aclose.assert_awaited_once()
    assert not cache.is_available()


async def test_status_cache_round_trips_through_json(world: FakeWorld) -> None:
    stored: dict[str, str] = {}
    client = _client()

    async def setex(key, ttl, value):
        stored[key] = value

    async def get(key):
        return stored.get(key)

    client.setex.side_effect = setex
    client.get.side_effect = get
    status_cache = UserStatusCache(await _connected(client), world.users, ttl_seconds=60)

    first = await status_cache.get_status(USER_ID)
    second = await status_cache.get_status(USER_ID)

    assert first == second == UserStatus(is_admin=False, is_verified=False)
    assert world.users.status_reads == 1
