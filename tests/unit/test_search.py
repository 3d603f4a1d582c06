"""Metadata source registry and the Comic Vine client."""

import asyncio

import httpx
import pytest
from pydantic import SecretStr

from colletro.application.dtos.search import CandidateResult
from colletro.application.use_cases.search import MetadataSourceRegistry
from colletro.core.config import get_settings
from colletro.domain.exceptions import MetadataSourceTimeoutException, ValidationException
from colletro.infrastructure.external.metadata import (
    ComicVineSource,
    ManualSource,
    build_registry,
)


class SlowSource:
    source_id = "slow"

    async def search(self, query: str) -> list[CandidateResult]:
        await asyncio.sleep(5)
        return []


class EchoSource:
    source_id = "echo"

    async def search(self, query: str) -> list[CandidateResult]:
        return [CandidateResult(source_id="echo", external_id="1", name=query)]


async def test_registry_routes_to_source_and_trims_query() -> None:
    registry = MetadataSourceRegistry([EchoSource(), ManualSource()])
    assert registry.source_ids() == ["echo", "manual"]
    results = await registry.search("echo", "  Saga  ")
    assert [r.name for r in results] == ["Saga"]


async def test_manual_source_finds_nothing() -> None:
    assert await MetadataSourceRegistry([ManualSource()]).search("manual", "x") == []


async def test_unknown_source_and_blank_query_are_validation_errors() -> None:
    registry = MetadataSourceRegistry([EchoSource()])
    with pytest.raises(ValidationException):
        await registry.search("nope", "x")
    with pytest.raises(ValidationException):
        await registry.search("echo", "   ")


async def test_slow_source_times_out() -> None:
    registry = MetadataSourceRegistry([SlowSource()], timeout_seconds=0.05)
    with pytest.raises(MetadataSourceTimeoutException) as excinfo:
        await registry.search("slow", "anything")
    assert excinfo.value.details["source_id"] == "slow"


async def test_comic_vine_maps_volume_results() -> None:
    seen: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        seen["path"] = request.url.path
        return httpx.Response(
            200,
            json={
                "results": [
                    {
                        "id": 4050,
                        "name": "Saga",
                        "deck": "Space opera",
                        "start_year": "2012",
                        "image": {"original_url": "https://img.example/saga.jpg"},
                    },
                    "garbage",
                ]
            },
        )

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        source = ComicVineSource("key-123", "https://cv.example/api/", http_client=http)
        results = await source.search("saga")

    assert seen["path"] == "/api/search/"
    assert seen["api_key"] == "key-123"
    assert seen["query"] == "saga"
    assert results == [
        CandidateResult(
            source_id="comic-vine",
            external_id="4050",
            name="Saga",
            image="https://img.example/saga.jpg",
            description="Space opera",
            extra={"category": "Comics", "start_year": "2012"},
        )
    ]


async def test_comic_vine_http_error_propagates() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(500))
    async with httpx.AsyncClient(transport=transport) as http:
        source = ComicVineSource("key", http_client=http)
        with pytest.raises(httpx.HTTPStatusError):
            await source.search("x")


def test_comic_vine_requires_key() -> None:
    with pytest.raises(ValueError):
        ComicVineSource("")


def test_build_registry_registers_comic_vine_only_with_key() -> None:
    settings = get_settings()
    assert build_registry(settings.model_copy(update={"comic_vine_api_key": None})).source_ids() == [
        "manual"
    ]
    with_key = settings.model_copy(update={"comic_vine_api_key": SecretStr("k")})
    assert build_registry(with_key).source_ids() == ["comic-vine", "manual"]
