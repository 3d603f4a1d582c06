"""Admin API schemas: bulk covers, bulk item images, user verification."""

from typing import Any

from pydantic import BaseModel, Field

from colletro.schemas.collection import CatalogItemResponse


class CoverGenerationResponse(BaseModel):
    """Outcome of bulk cover generation; failures are listed, never raised."""

    total: int
    generated: int
    updated: int
    failed: int
    errors: list[str] = Field(default_factory=list)


class ImageUpdateRequest(BaseModel):
    """One (item id, image) pair."""

    item_id: str = Field(..., min_length=1, max_length=64)
    image: str = Field(..., min_length=1, max_length=2048)


class BulkImageUpdateRequest(BaseModel):
    """Request body for updating many recommended item images at once."""

    updates: list[ImageUpdateRequest] = Field(..., min_length=1)


class BulkImageUpdateResponse(BaseModel):
    """All-or-nothing bulk image update result."""

    success: bool = True
    updated: int
    items: list[CatalogItemResponse] = Field(default_factory=list)


class UserVerificationRequest(BaseModel):
    """Request body for setting a user's verified flag.

    The flag is accepted as any JSON value here so that a non-boolean is
    reported by the use case as a validation error with a clear message.
    """

    is_verified: Any = Field(...)


class UserVerificationResponse(BaseModel):
    """Verified flag after the update."""

    id: str
    is_verified: bool
