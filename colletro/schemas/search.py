"""Metadata search API schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CandidateResponse(BaseModel):
    """One search hit."""

    model_config = ConfigDict(from_attributes=True)

    source_id: str
    external_id: str
    name: str
    number: str | None = None
    image: str | None = None
    description: str | None = None
    extra: dict[str, Any] = Field(default_factory=dict)


class SearchResponse(BaseModel):
    """Search results from one source (empty list when nothing matched)."""

    source: str
    query: str
    results: list[CandidateResponse] = Field(default_factory=list)


class SourceListResponse(BaseModel):
    """Registered metadata source ids."""

    sources: list[str]
