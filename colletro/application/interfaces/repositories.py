"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from colletro.application.dtos.achievement import UserStats
    from colletro.application.dtos.admin import CoverCandidate, ImageUpdate
    from colletro.application.dtos.collection import (
        AuthorSummary,
        CatalogDraft,
        CatalogItemResult,
        CollectionDraft,
        CollectionResult,
        CommunityCollectionResult,
        ItemDraft,
        ItemResult,
        RecommendedCollectionResult,
    )
    from colletro.application.dtos.community import ReportResult
    from colletro.application.dtos.folder import FolderResult
    from colletro.application.dtos.user import UserResult, UserStatus


# User repository interface
class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by ID."""

    async def get_status(self, user_id: str) -> UserStatus | None:
        """Return admin/verified flags for user, or None when unknown."""

    async def get_author_summary(self, user_id: str) -> AuthorSummary | None:
        """Return public author fields for user."""

    async def get_achievements_for_update(self, user_id: str) -> list[str] | None:
        """Return the stored achievement set, locking the user row until commit. None when user is unknown."""

    async def set_achievements(self, user_id: str, achievement_ids: list[str]) -> None:
        """Overwrite the stored achievement set (single write)."""

    async def set_verified(self, user_id: str, is_verified: bool) -> UserResult | None:
        """Set the verified flag; return updated user or None when unknown."""


# Statistics repository interface
class IStatsRepository(Protocol):
    """Protocol for aggregating a user's collection and item statistics."""

    async def get_user_stats(self, user_id: str, as_of: datetime) -> UserStats | None:
        """Return aggregated statistics, or None when the user does not exist."""


# Collection repository interface
class ICollectionRepository(Protocol):
    """Protocol for personal collection repository (DIP)."""

    async def get_by_id(self, collection_id: str) -> CollectionResult | None:
        """Return collection with items regardless of owner (admin use)."""

    async def get_by_id_and_user(
        self, collection_id: str, user_id: str
    ) -> CollectionResult | None:
        """Return collection with items if it belongs to user."""

    async def get_by_share_token(self, share_token: str) -> CollectionResult | None:
        """Return the collection owning share_token, with items."""

    async def list_by_user(self, user_id: str) -> list[CollectionResult]:
        """Return all collections for user with items ordered by (number, name)."""

    async def create_with_items(self, draft: CollectionDraft) -> CollectionResult:
        """Create a collection and all of its items."""

    async def update_fields(self, collection_id: str, values: dict[str, Any]) -> None:
        """Update scalar columns of a collection."""

    async def set_shared_to_community(
        self, collection_id: str, community_collection_id: str | None
    ) -> None:
        """Set or clear the live community fork link."""

    async def list_missing_covers(self) -> list[CoverCandidate]:
        """Return collections whose cover image is null or empty."""

    async def set_cover_image(self, collection_id: str, cover_image: str) -> bool:
        """Set cover image; return False when the collection no longer exists."""

    async def set_folder(self, collection_id: str, folder_id: str | None) -> None:
        """Move collection into folder_id (None = unfiled)."""

    async def unfile_folder(self, folder_id: str) -> int:
        """Clear folder reference on every collection in folder; return count."""


# Opens a collection repository on its own session and closes it on exit.
CollectionRepositoryScope = Callable[[], AbstractAsyncContextManager[ICollectionRepository]]


# Item repository interface
class IItemRepository(Protocol):
    """Protocol for personal item repository (DIP)."""

    async def list_by_collection(self, collection_id: str) -> list[ItemResult]:
        """Return items ordered by (number, name)."""

    async def create_many(
        self, collection_id: str, drafts: Sequence[ItemDraft]
    ) -> int:
        """Insert items; return number created."""

    async def update_fields(self, item_id: str, values: dict[str, Any]) -> None:
        """Update scalar columns of an item."""

    async def get_owner_ids(self, item_ids: Sequence[str]) -> dict[str, str]:
        """Map item id to the user id owning its collection (unknown ids omitted)."""

    async def set_owned(self, item_ids: Sequence[str], is_owned: bool) -> int:
        """Set ownership flag for items; return rows updated."""

    async def delete_many(self, item_ids: Sequence[str]) -> int:
        """Delete items; return rows deleted."""


# Community collection repository interface
class ICommunityCollectionRepository(Protocol):
    """Protocol for community collection repository (DIP)."""

    async def get_by_id(self, community_collection_id: str) -> CommunityCollectionResult | None:
        """Return community collection with items and author."""

    async def create_with_items(self, draft: CollectionDraft) -> CommunityCollectionResult:
        """Create community collection and its items (owned by draft.user_id)."""

    async def delete_with_dependents(self, community_collection_id: str) -> None:
        """Delete items, votes, reports, then the collection itself."""

    async def has_vote(self, community_collection_id: str, user_id: str) -> bool:
        """Return True when user already voted on the collection."""

    async def add_vote(self, community_collection_id: str, user_id: str, value: int) -> None:
        """Record a vote (one per user per collection)."""

    async def remove_vote(self, community_collection_id: str, user_id: str) -> None:
        """Delete the user's vote, if any."""

    async def vote_totals(self, community_collection_id: str) -> tuple[int, int]:
        """Return (number of upvotes, sum of vote values)."""

    async def has_report(self, community_collection_id: str, reporter_id: str) -> bool:
        """Return True when reporter already reported the collection."""

    async def create_report(
        self,
        community_collection_id: str,
        reporter_id: str,
        reason: str,
        details: str | None,
    ) -> ReportResult:
        """Create a pending report."""


# Recommended collection repository interface
class IRecommendedCollectionRepository(Protocol):
    """Protocol for admin-curated recommended collection repository (DIP)."""

    async def get_by_id(self, recommended_collection_id: str) -> RecommendedCollectionResult | None:
        """Return recommended collection with items."""

    async def get_item_ids(self, recommended_collection_id: str) -> set[str]:
        """Return ids of all items in the collection."""

    async def update_item_images(self, updates: Sequence[ImageUpdate]) -> list[CatalogItemResult]:
        """Apply image updates; return the updated items in input order."""

    async def exists_with_name(self, name: str) -> bool:
        """Return True when a recommended collection already uses name."""

    async def create_with_items(self, draft: CatalogDraft) -> RecommendedCollectionResult:
        """Create a recommended collection and its items."""


# Folder repository interface
class IFolderRepository(Protocol):
    """Protocol for folder repository (DIP)."""

    async def get_by_id_and_user(self, folder_id: str, user_id: str) -> FolderResult | None:
        """Return folder if it belongs to user."""

    async def list_by_user(self, user_id: str) -> list[FolderResult]:
        """Return all folders for user ordered by name."""

    async def create(self, user_id: str, name: str, parent_id: str | None) -> FolderResult:
        """Create folder."""

    async def update_fields(self, folder_id: str, values: dict[str, Any]) -> FolderResult:
        """Update name/parent_id; return updated folder."""

    async def reparent_children(self, folder_id: str, new_parent_id: str | None) -> int:
        """Move direct children of folder_id under new_parent_id; return count."""

    async def delete(self, folder_id: str) -> None:
        """Delete folder row."""
