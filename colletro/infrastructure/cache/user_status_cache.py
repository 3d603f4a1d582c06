"""Cached {is_admin, is_verified} lookups for authorization."""

from __future__ import annotations

import logging
from dataclasses import asdict

from colletro.application.dtos.user import UserStatus
from colletro.application.interfaces.repositories import IUserRepository
from colletro.infrastructure.cache.cache_protocol import CacheProtocol
from colletro.infrastructure.cache.keys import user_status_key

logger = logging.getLogger(__name__)


class UserStatusCache:
    """Read-through cache over IUserRepository.get_status.

    The backing cache is process-wide; this wrapper is built per request
    around that request's repository.
    """

    def __init__(
        self,
        cache: CacheProtocol | None,
        user_repo: IUserRepository,
        ttl_seconds: float = 300.0,
    ) -> None:
        self._cache = cache
        self._user_repo = user_repo
        self._ttl_seconds = ttl_seconds

    def _cache_usable(self) -> bool:
        return self._cache is not None and self._cache.is_available()

    async def get_status(self, user_id: str) -> UserStatus | None:
        key = user_status_key(user_id)
        if self._cache_usable():
            cached = await self._cache.get(key)
            if isinstance(cached, dict):
                return UserStatus(
                    is_admin=bool(cached.get("is_admin")),
                    is_verified=bool(cached.get("is_verified")),
                )
        status = await self._user_repo.get_status(user_id)
        if status is not None and self._cache_usable():
            # Stored as a plain dict so the Redis backend can JSON-encode it.
            await self._cache.set(key, asdict(status), ttl=self._ttl_seconds)
        return status

    async def invalidate(self, user_id: str) -> None:
        if self._cache_usable():
            await self._cache.delete(user_status_key(user_id))
            logger.debug("Invalidated status cache for user %s", user_id)
