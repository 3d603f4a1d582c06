"""Collection use cases: community share/unshare, votes and reports, clone, sync, public links, queries."""

from colletro.application.use_cases.collections.clone import CloneService, build_clone_draft
from colletro.application.use_cases.collections.community_engagement import (
    CommunityEngagementService,
)
from colletro.application.use_cases.collections.community_sync import CommunitySyncService
from colletro.application.use_cases.collections.public_share import PublicShareService
from colletro.application.use_cases.collections.queries import CollectionQueries, collections_key
from colletro.application.use_cases.collections.sync import RecommendedSyncService

__all__ = [
    "CloneService",
    "CollectionQueries",
    "CommunityEngagementService",
    "CommunitySyncService",
    "PublicShareService",
    "RecommendedSyncService",
    "build_clone_draft",
    "collections_key",
]
