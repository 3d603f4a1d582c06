"""Application DTOs (no ORM dependency)."""

from colletro.application.dtos.achievement import AchievementStatus, UserStats
from colletro.application.dtos.admin import (
    BulkImageUpdateResult,
    CoverCandidate,
    CoverGenerationResult,
    ImageUpdate,
)
from colletro.application.dtos.collection import (
    AuthorSummary,
    CatalogDraft,
    CatalogItemResult,
    CloneResult,
    CloneSource,
    CollectionDraft,
    CollectionResult,
    CommunityCollectionResult,
    ItemDraft,
    ItemResult,
    RecommendedCollectionResult,
    SharedCollection,
    ShareSettings,
    SyncResult,
    UpdateCheckResult,
)
from colletro.application.dtos.community import ReportResult, VoteSummary
from colletro.application.dtos.folder import FolderResult
from colletro.application.dtos.item import ImportItemsResult, ItemBatchResult
from colletro.application.dtos.search import CandidateResult
from colletro.application.dtos.user import AuthContext, UserResult, UserStatus

__all__ = [
    "AchievementStatus",
    "AuthContext",
    "AuthorSummary",
    "BulkImageUpdateResult",
    "CandidateResult",
    "CatalogDraft",
    "CatalogItemResult",
    "CloneResult",
    "CloneSource",
    "CollectionDraft",
    "CollectionResult",
    "CommunityCollectionResult",
    "CoverCandidate",
    "CoverGenerationResult",
    "FolderResult",
    "ImageUpdate",
    "ImportItemsResult",
    "ItemBatchResult",
    "ItemDraft",
    "ItemResult",
    "RecommendedCollectionResult",
    "ReportResult",
    "SharedCollection",
    "ShareSettings",
    "SyncResult",
    "UpdateCheckResult",
    "UserResult",
    "UserStats",
    "UserStatus",
    "VoteSummary",
]
