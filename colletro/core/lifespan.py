"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of process-wide infrastructure (HTTP client,
user status cache backend, request deduplicator, metadata sources,
cover generator, telemetry, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from colletro.core.config import Settings, get_settings
from colletro.infrastructure.cache import (
    CacheProtocol,
    CacheService,
    InMemoryTTLCache,
    RequestDeduplicator,
)
from colletro.infrastructure.external.covers import SvgCoverGenerator
from colletro.infrastructure.external.metadata import build_registry
from colletro.infrastructure.persistence import database
from colletro.shared.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
    setup_logging,
)

logger = logging.getLogger(__name__)


async def _build_user_cache(settings: Settings) -> CacheProtocol:
    """Redis when enabled and reachable; otherwise the in-process TTL cache."""
    if settings.redis_enabled:
        cache = CacheService(
            host=settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            password=(
                settings.redis_password.get_secret_value() if settings.redis_password else None
            ),
            max_connections=settings.redis_max_connections,
            default_ttl=settings.user_cache_ttl_seconds,
        )
        await cache.connect()
        if cache.is_available():
            return cache
        logger.warning("Redis unavailable; user status cache falls back to in-process memory")
    return InMemoryTTLCache(
        default_ttl=settings.user_cache_ttl_seconds,
        max_size=settings.user_cache_max_size,
    )


def _setup_telemetry(app: FastAPI, settings: Settings) -> None:
    telemetry = TelemetryConfig(
        service_name=settings.app_name,
        service_version=settings.app_version,
        enabled=True,
        environment=settings.telemetry_environment,
    )
    telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        jaeger_endpoint=settings.telemetry_jaeger_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    set_telemetry(telemetry)
    telemetry.instrument_fastapi(app)
    database._ensure_engine()
    telemetry.instrument_sqlalchemy(database.engine)
    if settings.redis_enabled:
        telemetry.instrument_redis()
    telemetry.instrument_logging()
    logger.info("Telemetry initialized")


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, telemetry (if enabled), shared HTTP client,
    user status cache, request deduplicator, metadata registry, cover
    generator. Shutdown order: shared HTTP client close, cache
    disconnect/clear, telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if settings.telemetry_enabled:
        _setup_telemetry(app, settings)

    # Shared HTTP client for metadata sources (connection reuse).
    app.state.http_client = httpx.AsyncClient(timeout=30.0)
    app.state.user_cache = await _build_user_cache(settings)
    app.state.deduplicator = RequestDeduplicator(
        window_seconds=settings.dedup_window_seconds,
        enabled=settings.dedup_enabled,
    )
    app.state.metadata_registry = build_registry(settings, app.state.http_client)
    app.state.cover_generator = SvgCoverGenerator(
        settings.cover_output_dir, settings.cover_public_prefix
    )
    logger.info(
        "Startup complete (cache=%s, dedup=%s, metadata sources=%s)",
        type(app.state.user_cache).__name__,
        settings.dedup_enabled,
        ",".join(app.state.metadata_registry.source_ids()),
    )

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")

    cache = getattr(app.state, "user_cache", None)
    if isinstance(cache, CacheService):
        await cache.disconnect()
    elif isinstance(cache, InMemoryTTLCache):
        cache.clear()
    app.state.user_cache = None

    telemetry = get_telemetry()
    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)

    await database.dispose_engine()
    logger.info("Database engine disposed")
