"""Collection, community and recommended collection API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ItemResponse(BaseModel):
    """Personal item."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    collection_id: str
    name: str
    number: int | None = None
    notes: str | None = None
    image: str | None = None
    is_owned: bool
    custom_fields: dict[str, Any] | None = None
    personal_rating: int | None = None
    log_date: datetime | None = None


class CollectionResponse(BaseModel):
    """Personal collection with its items ordered by (number, name)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    description: str | None = None
    category: str | None = None
    template: str | None = None
    custom_field_definitions: list[dict[str, Any]] | None = None
    cover_image: str | None = None
    cover_image_fit: str | None = None
    tags: list[str] = Field(default_factory=list)
    folder_id: str | None = None
    recommended_collection_id: str | None = None
    community_collection_id: str | None = None
    shared_to_community_id: str | None = None
    last_synced_at: datetime | None = None
    created_at: datetime | None = None
    is_public: bool = False
    items: list[ItemResponse] = Field(default_factory=list)


class CatalogItemResponse(BaseModel):
    """Item of a community or recommended collection."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    collection_id: str
    name: str
    number: int | None = None
    notes: str | None = None
    image: str | None = None
    custom_fields: dict[str, Any] | None = None


class AuthorResponse(BaseModel):
    """Public author summary."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None = None
    image: str | None = None
    badge: str | None = None


class CommunityCollectionResponse(BaseModel):
    """Community collection with items and author summary (Share output)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    description: str | None = None
    category: str | None = None
    template: str | None = None
    custom_field_definitions: list[dict[str, Any]] | None = None
    cover_image: str | None = None
    cover_image_fit: str | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    items: list[CatalogItemResponse] = Field(default_factory=list)
    author: AuthorResponse | None = None


class AddToAccountResponse(CollectionResponse):
    """New personal collection plus the achievements its creation unlocked."""

    newly_unlocked_achievements: list[str] = Field(default_factory=list)


class SyncRequest(BaseModel):
    """Request body for syncing a collection from its recommended source."""

    preserve_customizations: bool = Field(
        default=False,
        description="Keep descriptive fields the user has changed",
    )


class SyncResponse(BaseModel):
    """Outcome of a sync from the recommended source."""

    collection: CollectionResponse
    items_added: int
    items_updated: int


class MoveCollectionRequest(BaseModel):
    """Request body for filing a collection into a folder (null unfiles it)."""

    folder_id: str | None = Field(default=None, max_length=64)


class SuccessResponse(BaseModel):
    """Acknowledgement for operations without a resource body."""

    success: bool = True


class RecommendedCollectionResponse(BaseModel):
    """Recommended catalog collection with its items."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    category: str | None = None
    template: str | None = None
    custom_field_definitions: list[dict[str, Any]] | None = None
    cover_image: str | None = None
    cover_image_fit: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_public: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
    items: list[CatalogItemResponse] = Field(default_factory=list)


class UpdateCheckResponse(BaseModel):
    """Whether the recommended source changed since the last sync, without syncing."""

    model_config = ConfigDict(from_attributes=True)

    has_update: bool
    is_customized: bool
    recommended: RecommendedCollectionResponse | None = None
    last_synced_at: datetime | None = None


class ShareSettingsRequest(BaseModel):
    """Request body for turning a collection's public link on or off."""

    is_public: bool


class ShareSettingsResponse(BaseModel):
    """Public link state; share_token stays set after the link is turned off."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    is_public: bool
    share_token: str | None = None


class SharedCollectionResponse(BaseModel):
    """A collection opened through its public link, with the owner's public summary."""

    model_config = ConfigDict(from_attributes=True)

    collection: CollectionResponse
    owner: AuthorResponse | None = None
