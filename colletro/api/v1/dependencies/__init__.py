"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, auth context, caches and
application use cases. Routes import from here only.
"""

from colletro.api.v1.dependencies.auth import (
    AdminUser,
    CurrentUser,
    OptionalUser,
    get_auth_context,
    get_optional_auth_context,
    require_admin,
)
from colletro.api.v1.dependencies.cache import (
    get_cover_generator,
    get_deduplicator,
    get_metadata_registry,
    get_user_cache,
    get_user_status_cache,
)
from colletro.api.v1.dependencies.db import (
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
from colletro.api.v1.dependencies.services import (
    get_achievement_service,
    get_bulk_cover_service,
    get_bulk_item_image_service,
    get_clone_service,
    get_collection_queries,
    get_community_engagement_service,
    get_community_sync_service,
    get_convert_service,
    get_folder_service,
    get_item_service,
    get_public_share_service,
    get_recommended_sync_service,
    get_user_verification_service,
)

__all__ = [
    "AdminUser",
    "CurrentUser",
    "OptionalUser",
    "get_achievement_service",
    "get_auth_context",
    "get_bulk_cover_service",
    "get_bulk_item_image_service",
    "get_clone_service",
    "get_collection_queries",
    "get_collection_repo",
    "get_collection_repo_scope",
    "get_community_repo",
    "get_community_engagement_service",
    "get_community_sync_service",
    "get_convert_service",
    "get_cover_generator",
    "get_deduplicator",
    "get_folder_repo",
    "get_folder_service",
    "get_item_repo",
    "get_item_service",
    "get_optional_auth_context",
    "get_metadata_registry",
    "get_public_share_service",
    "get_recommended_repo",
    "get_recommended_sync_service",
    "get_stats_repo",
    "get_uow",
    "get_user_cache",
    "get_user_repo",
    "get_user_status_cache",
    "get_user_verification_service",
    "require_admin",
]
