"""Metadata search API: query an external source for item candidates."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from colletro.api.v1.dependencies import CurrentUser, get_metadata_registry
from colletro.application.use_cases.search import MetadataSourceRegistry
from colletro.core.limiter import limit_search
from colletro.schemas.search import CandidateResponse, SearchResponse, SourceListResponse

router = APIRouter()

Registry = Annotated[MetadataSourceRegistry, Depends(get_metadata_registry)]


@router.get("/sources", response_model=SourceListResponse)
async def list_sources(auth: CurrentUser, registry: Registry):
    return SourceListResponse(sources=registry.source_ids())


@router.get("/{source_id}", response_model=SearchResponse)
@limit_search
async def search_source(
    request: Request,
    source_id: str,
    auth: CurrentUser,
    registry: Registry,
    q: Annotated[str, Query(max_length=200, description="Search text")] = "",
):
    """Search one source. Unknown source is a 400; no hits is an empty list."""
    results = await registry.search(source_id, q)
    return SearchResponse(
        source=source_id,
        query=q,
        results=[CandidateResponse.model_validate(r) for r in results],
    )
