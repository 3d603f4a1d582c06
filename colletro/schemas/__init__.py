"""Pydantic request/response schemas for the API."""

from colletro.schemas.achievement import AchievementCheckResponse, AchievementResponse
from colletro.schemas.admin import (
    BulkImageUpdateRequest,
    BulkImageUpdateResponse,
    CoverGenerationResponse,
    UserVerificationRequest,
    UserVerificationResponse,
)
from colletro.schemas.collection import (
    AddToAccountResponse,
    CollectionResponse,
    CommunityCollectionResponse,
    RecommendedCollectionResponse,
    SharedCollectionResponse,
    ShareSettingsResponse,
    SuccessResponse,
    UpdateCheckResponse,
)
from colletro.schemas.community import ReportResponse, VoteResponse
from colletro.schemas.folder import FolderResponse
from colletro.schemas.health import HealthResponse
from colletro.schemas.item import ItemBatchResponse, ItemImportResponse
from colletro.schemas.search import SearchResponse

__all__ = [
    "AchievementCheckResponse",
    "AchievementResponse",
    "AddToAccountResponse",
    "BulkImageUpdateRequest",
    "BulkImageUpdateResponse",
    "CollectionResponse",
    "CommunityCollectionResponse",
    "CoverGenerationResponse",
    "FolderResponse",
    "HealthResponse",
    "ItemBatchResponse",
    "ItemImportResponse",
    "RecommendedCollectionResponse",
    "ReportResponse",
    "SearchResponse",
    "ShareSettingsResponse",
    "SharedCollectionResponse",
    "SuccessResponse",
    "UpdateCheckResponse",
    "UserVerificationRequest",
    "UserVerificationResponse",
    "VoteResponse",
]
