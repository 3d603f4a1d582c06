"""Process-wide cache and collaborator dependencies read from app.state.

Lifespan populates app.state; when it has not run (e.g. an ASGI test
client without lifespan), equivalent instances are created on first use
and stored on app.state so later requests share them.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable

from fastapi import Depends, Request

from colletro.application.use_cases.search import MetadataSourceRegistry
from colletro.core.config import get_settings
from colletro.infrastructure.cache import (
    CacheProtocol,
    InMemoryTTLCache,
    RequestDeduplicator,
    UserStatusCache,
)
from colletro.infrastructure.external.covers import SvgCoverGenerator
from colletro.infrastructure.external.metadata import build_registry
from colletro.infrastructure.persistence.repositories import UserRepository

from .db import get_user_repo


def _app_state(request: Request, name: str, factory: Callable[[], Any]) -> Any:
    value = getattr(request.app.state, name, None)
    if value is None:
        value = factory()
        setattr(request.app.state, name, value)
    return value


def get_user_cache(request: Request) -> CacheProtocol:
    """Redis CacheService when lifespan connected one, else an in-process TTL cache."""
    settings = get_settings()
    return _app_state(
        request,
        "user_cache",
        lambda: InMemoryTTLCache(
            default_ttl=settings.user_cache_ttl_seconds,
            max_size=settings.user_cache_max_size,
        ),
    )


def get_deduplicator(request: Request) -> RequestDeduplicator:
    settings = get_settings()
    return _app_state(
        request,
        "deduplicator",
        lambda: RequestDeduplicator(
            window_seconds=settings.dedup_window_seconds,
            enabled=settings.dedup_enabled,
        ),
    )


def get_metadata_registry(request: Request) -> MetadataSourceRegistry:
    return _app_state(
        request,
        "metadata_registry",
        lambda: build_registry(
            get_settings(), getattr(request.app.state, "http_client", None)
        ),
    )


def get_cover_generator(request: Request) -> SvgCoverGenerator:
    settings = get_settings()
    return _app_state(
        request,
        "cover_generator",
        lambda: SvgCoverGenerator(
            settings.cover_output_dir, settings.cover_public_prefix
        ),
    )


def get_user_status_cache(
    cache: Annotated[CacheProtocol, Depends(get_user_cache)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserStatusCache:
    """Read-through {is_admin, is_verified} cache around this request's repository."""
    return UserStatusCache(
        cache, user_repo, ttl_seconds=get_settings().user_cache_ttl_seconds
    )
