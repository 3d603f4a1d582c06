"""DTOs for collection, community and recommended collection use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from colletro.domain.enums import SourceKind


@dataclass(frozen=True)
class ItemResult:
    """Personal item read-model."""

    id: str
    collection_id: str
    name: str
    number: int | None
    notes: str | None
    image: str | None
    is_owned: bool
    custom_fields: dict[str, Any] | None
    personal_rating: int | None = None
    log_date: datetime | None = None


@dataclass(frozen=True)
class CollectionResult:
    """Personal collection read-model with its items ordered by (number, name)."""

    id: str
    user_id: str
    name: str
    description: str | None
    category: str | None
    template: str | None
    custom_field_definitions: list[dict[str, Any]] | None
    cover_image: str | None
    cover_image_fit: str | None
    tags: list[str]
    folder_id: str | None
    recommended_collection_id: str | None
    community_collection_id: str | None
    shared_to_community_id: str | None
    share_token: str | None
    last_synced_at: datetime | None
    created_at: datetime | None
    is_public: bool = False
    items: list[ItemResult] = field(default_factory=list)


@dataclass(frozen=True)
class CatalogItemResult:
    """Item of a community or recommended collection (no ownership flag)."""

    id: str
    collection_id: str
    name: str
    number: int | None
    notes: str | None
    image: str | None
    custom_fields: dict[str, Any] | None


@dataclass(frozen=True)
class AuthorSummary:
    """Public author fields shown next to a community collection."""

    id: str
    name: str | None
    image: str | None
    badge: str | None


@dataclass(frozen=True)
class CommunityCollectionResult:
    """Community collection read-model: a sharer-owned structural copy."""

    id: str
    user_id: str
    name: str
    description: str | None
    category: str | None
    template: str | None
    custom_field_definitions: list[dict[str, Any]] | None
    cover_image: str | None
    cover_image_fit: str | None
    tags: list[str]
    created_at: datetime | None
    items: list[CatalogItemResult] = field(default_factory=list)
    author: AuthorSummary | None = None


@dataclass(frozen=True)
class RecommendedCollectionResult:
    """Admin-curated catalog collection read-model."""

    id: str
    name: str
    description: str | None
    category: str | None
    template: str | None
    custom_field_definitions: list[dict[str, Any]] | None
    cover_image: str | None
    cover_image_fit: str | None
    tags: list[str]
    is_public: bool
    created_at: datetime | None
    items: list[CatalogItemResult] = field(default_factory=list)
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ItemDraft:
    """Fields for a new item (personal, community or recommended)."""

    name: str
    number: int | None = None
    notes: str | None = None
    image: str | None = None
    is_owned: bool = False
    custom_fields: dict[str, Any] | None = None


@dataclass(frozen=True)
class CollectionDraft:
    """Fields for a new personal or community collection, including its items."""

    user_id: str
    name: str
    description: str | None = None
    category: str | None = None
    template: str | None = None
    custom_field_definitions: list[dict[str, Any]] | None = None
    cover_image: str | None = None
    cover_image_fit: str | None = None
    tags: list[str] = field(default_factory=list)
    folder_id: str | None = None
    recommended_collection_id: str | None = None
    community_collection_id: str | None = None
    last_synced_at: datetime | None = None
    items: list[ItemDraft] = field(default_factory=list)


@dataclass(frozen=True)
class CloneSource:
    """Tagged clone source: which catalog a personal collection is cloned from."""

    kind: SourceKind
    data: CommunityCollectionResult | RecommendedCollectionResult

    @classmethod
    def community(cls, data: CommunityCollectionResult) -> CloneSource:
        return cls(kind=SourceKind.COMMUNITY, data=data)

    @classmethod
    def recommended(cls, data: RecommendedCollectionResult) -> CloneSource:
        return cls(kind=SourceKind.RECOMMENDED, data=data)


@dataclass(frozen=True)
class CloneResult:
    """Result of add-to-account: the new collection and achievements it unlocked."""

    collection: CollectionResult
    newly_unlocked: list[str]


@dataclass(frozen=True)
class SyncResult:
    """Result of syncing a collection from its recommended source."""

    collection: CollectionResult
    items_added: int
    items_updated: int


@dataclass(frozen=True)
class CatalogDraft:
    """Fields for a new recommended collection, including its items."""

    name: str
    description: str | None = None
    category: str | None = None
    template: str | None = None
    custom_field_definitions: list[dict[str, Any]] | None = None
    cover_image: str | None = None
    cover_image_fit: str | None = None
    tags: list[str] = field(default_factory=list)
    is_public: bool = True
    items: list[ItemDraft] = field(default_factory=list)


@dataclass(frozen=True)
class UpdateCheckResult:
    """Dry-run comparison of a cloned collection against its recommended source.

    has_update: the source changed after the last sync (or after the
    clone, when never synced). is_customized: the user's copy differs
    from the source in a synced field or in its item set.
    """

    has_update: bool
    is_customized: bool
    recommended: RecommendedCollectionResult | None = None
    last_synced_at: datetime | None = None


@dataclass(frozen=True)
class ShareSettings:
    """Public link state of a personal collection."""

    id: str
    name: str
    is_public: bool
    share_token: str | None


@dataclass(frozen=True)
class SharedCollection:
    """A publicly shared collection as seen through its share link."""

    collection: CollectionResult
    owner: AuthorSummary | None
