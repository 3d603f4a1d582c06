"""Item batch API schemas."""

from typing import Any

from pydantic import BaseModel, Field


class ItemImportEntry(BaseModel):
    """One item of a bulk import."""

    name: str = Field(..., min_length=1, max_length=500)
    number: int | None = None
    notes: str | None = None
    image: str | None = Field(default=None, max_length=2048)
    is_owned: bool = False
    custom_fields: dict[str, Any] | None = None


class ItemImportRequest(BaseModel):
    """Request body for importing items into a collection."""

    items: list[ItemImportEntry]


class ItemImportResponse(BaseModel):
    """Created/skipped counts; duplicates of (number, name) are skipped."""

    created: int
    skipped: int
    newly_unlocked_achievements: list[str] = Field(default_factory=list)


class ItemOwnershipRequest(BaseModel):
    """Request body for marking many items owned or not owned."""

    item_ids: list[str]
    is_owned: bool


class ItemDeleteRequest(BaseModel):
    """Request body for deleting many items."""

    item_ids: list[str]


class ItemBatchResponse(BaseModel):
    """Number of items changed by a batch operation."""

    affected: int
    newly_unlocked_achievements: list[str] = Field(default_factory=list)
