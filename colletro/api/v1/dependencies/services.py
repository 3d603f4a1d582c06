"""Use case dependencies (composition root).

All use cases are built from infrastructure implementations here;
routes depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from colletro.application.interfaces.repositories import CollectionRepositoryScope
from colletro.application.services import AchievementService
from colletro.application.use_cases.admin import (
    BulkCoverGenerationService,
    BulkItemImageService,
    ConvertToRecommendedService,
    UserVerificationService,
)
from colletro.application.use_cases.collections import (
    CloneService,
    CollectionQueries,
    CommunityEngagementService,
    CommunitySyncService,
    PublicShareService,
    RecommendedSyncService,
)
from colletro.application.use_cases.folders import FolderService
from colletro.application.use_cases.items import ItemService
from colletro.core.config import get_settings
from colletro.infrastructure.cache import RequestDeduplicator, UserStatusCache
from colletro.infrastructure.external.covers import SvgCoverGenerator
from colletro.infrastructure.persistence.repositories import (
    CollectionRepository,
    CommunityCollectionRepository,
    FolderRepository,
    ItemRepository,
    RecommendedCollectionRepository,
    StatsRepository,
    UserRepository,
)
from colletro.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

from .cache import get_cover_generator, get_deduplicator, get_user_status_cache
from .db import (
    get_collection_repo,
    get_collection_repo_scope,
    get_community_repo,
    get_folder_repo,
    get_item_repo,
    get_recommended_repo,
    get_stats_repo,
    get_uow,
    get_user_repo,
)

Uow = Annotated[SqlAlchemyUnitOfWork, Depends(get_uow)]
Collections = Annotated[CollectionRepository, Depends(get_collection_repo)]


def get_achievement_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    stats_repo: Annotated[StatsRepository, Depends(get_stats_repo)],
    uow: Uow,
) -> AchievementService:
    return AchievementService(user_repo, stats_repo, uow)


Achievements = Annotated[AchievementService, Depends(get_achievement_service)]


def get_collection_queries(
    collection_repo: Collections,
    deduplicator: Annotated[RequestDeduplicator, Depends(get_deduplicator)],
    list_scope: Annotated[CollectionRepositoryScope, Depends(get_collection_repo_scope)],
) -> CollectionQueries:
    return CollectionQueries(collection_repo, deduplicator, list_scope)


def get_community_sync_service(
    collection_repo: Collections,
    community_repo: Annotated[CommunityCollectionRepository, Depends(get_community_repo)],
    uow: Uow,
    achievements: Achievements,
) -> CommunitySyncService:
    return CommunitySyncService(collection_repo, community_repo, uow, achievements)


def get_clone_service(
    collection_repo: Collections,
    community_repo: Annotated[CommunityCollectionRepository, Depends(get_community_repo)],
    recommended_repo: Annotated[
        RecommendedCollectionRepository, Depends(get_recommended_repo)
    ],
    uow: Uow,
    achievements: Achievements,
) -> CloneService:
    return CloneService(
        collection_repo, community_repo, recommended_repo, uow, achievements
    )


def get_recommended_sync_service(
    collection_repo: Collections,
    item_repo: Annotated[ItemRepository, Depends(get_item_repo)],
    recommended_repo: Annotated[
        RecommendedCollectionRepository, Depends(get_recommended_repo)
    ],
    uow: Uow,
) -> RecommendedSyncService:
    return RecommendedSyncService(collection_repo, item_repo, recommended_repo, uow)


def get_item_service(
    collection_repo: Collections,
    item_repo: Annotated[ItemRepository, Depends(get_item_repo)],
    uow: Uow,
    achievements: Achievements,
) -> ItemService:
    return ItemService(collection_repo, item_repo, uow, achievements)


def get_folder_service(
    folder_repo: Annotated[FolderRepository, Depends(get_folder_repo)],
    collection_repo: Collections,
    uow: Uow,
    achievements: Achievements,
) -> FolderService:
    return FolderService(folder_repo, collection_repo, uow, achievements)


def get_bulk_cover_service(
    collection_repo: Collections,
    generator: Annotated[SvgCoverGenerator, Depends(get_cover_generator)],
    uow: Uow,
) -> BulkCoverGenerationService:
    settings = get_settings()
    return BulkCoverGenerationService(
        collection_repo,
        generator,
        uow,
        timeout_seconds=settings.cover_generation_timeout_seconds,
        deadline_seconds=settings.cover_generation_deadline_seconds,
    )


def get_bulk_item_image_service(
    recommended_repo: Annotated[
        RecommendedCollectionRepository, Depends(get_recommended_repo)
    ],
    uow: Uow,
) -> BulkItemImageService:
    return BulkItemImageService(recommended_repo, uow)


def get_user_verification_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    uow: Uow,
    status_cache: Annotated[UserStatusCache, Depends(get_user_status_cache)],
) -> UserVerificationService:
    return UserVerificationService(user_repo, uow, status_cache)


def get_public_share_service(
    collection_repo: Collections,
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    uow: Uow,
) -> PublicShareService:
    return PublicShareService(collection_repo, user_repo, uow)


def get_community_engagement_service(
    community_repo: Annotated[CommunityCollectionRepository, Depends(get_community_repo)],
    uow: Uow,
) -> CommunityEngagementService:
    return CommunityEngagementService(community_repo, uow)


def get_convert_service(
    collection_repo: Collections,
    community_repo: Annotated[CommunityCollectionRepository, Depends(get_community_repo)],
    recommended_repo: Annotated[
        RecommendedCollectionRepository, Depends(get_recommended_repo)
    ],
    uow: Uow,
) -> ConvertToRecommendedService:
    return ConvertToRecommendedService(
        collection_repo, community_repo, recommended_repo, uow
    )
