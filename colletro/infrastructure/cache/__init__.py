"""Caches: in-process TTL cache, Redis cache, request deduplication, user status."""

from colletro.infrastructure.cache.cache_protocol import CacheProtocol
from colletro.infrastructure.cache.redis_cache import CacheService
from colletro.infrastructure.cache.request_dedup import RequestDeduplicator
from colletro.infrastructure.cache.ttl_cache import InMemoryTTLCache
from colletro.infrastructure.cache.user_status_cache import UserStatusCache

__all__ = [
    "CacheProtocol",
    "CacheService",
    "InMemoryTTLCache",
    "RequestDeduplicator",
    "UserStatusCache",
]
