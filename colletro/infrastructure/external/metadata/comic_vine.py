"""Comic Vine volume search over httpx."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

import httpx

from colletro.application.dtos.search import CandidateResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://comicvine.gamespot.com/api"
RESULT_LIMIT = 10


def _to_candidate(result: dict[str, Any]) -> CandidateResult:
    image = result.get("image") or {}
    return CandidateResult(
        source_id=ComicVineSource.source_id,
        external_id=str(result.get("id", "")),
        name=result.get("name") or "",
        image=image.get("original_url"),
        description=result.get("deck") or result.get("description"),
        extra={"category": "Comics", "start_year": result.get("start_year")},
    )


class ComicVineSource:
    """Searches Comic Vine volumes. Requires an API key."""

    source_id = "comic-vine"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("Comic Vine requires an API key")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._shared_http = http_client

    @asynccontextmanager
    async def _http_cm(self):
        """Yield shared HTTP client or a short-lived one (connection reuse when shared)."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient() as client:
            yield client

    async def search(self, query: str) -> list[CandidateResult]:
        params = {
            "api_key": self._api_key,
            "format": "json",
            "resources": "volume",
            "query": query,
            "limit": RESULT_LIMIT,
        }
        async with self._http_cm() as client:
            response = await client.get(
                f"{self._base_url}/search/",
                params=params,
                headers={"User-Agent": "colletro"},
            )
        response.raise_for_status()
        data = response.json()
        results = data.get("results") or []
        logger.debug("Comic Vine returned %d results for %r", len(results), query)
        return [_to_candidate(r) for r in results if isinstance(r, dict)]
