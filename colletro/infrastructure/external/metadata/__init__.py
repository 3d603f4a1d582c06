"""Metadata search sources and registry factory."""

from __future__ import annotations

import httpx

from colletro.application.use_cases.search import MetadataSourceRegistry
from colletro.core.config import Settings
from colletro.infrastructure.external.metadata.comic_vine import ComicVineSource
from colletro.infrastructure.external.metadata.manual import ManualSource


def build_registry(
    settings: Settings, http_client: httpx.AsyncClient | None = None
) -> MetadataSourceRegistry:
    """Manual is always registered; Comic Vine only when an API key is configured."""
    registry = MetadataSourceRegistry(
        timeout_seconds=settings.metadata_search_timeout_seconds
    )
    registry.register(ManualSource())
    if settings.comic_vine_api_key and settings.comic_vine_api_key.get_secret_value():
        registry.register(
            ComicVineSource(
                settings.comic_vine_api_key.get_secret_value(),
                settings.comic_vine_base_url,
                http_client=http_client,
            )
        )
    return registry


__all__ = ["ComicVineSource", "ManualSource", "build_registry"]
