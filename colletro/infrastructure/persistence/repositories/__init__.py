"""SQLAlchemy repositories implementing the application ports."""

from colletro.infrastructure.persistence.repositories.collection_repo import CollectionRepository
from colletro.infrastructure.persistence.repositories.community_repo import (
    CommunityCollectionRepository,
)
from colletro.infrastructure.persistence.repositories.folder_repo import FolderRepository
from colletro.infrastructure.persistence.repositories.item_repo import ItemRepository
from colletro.infrastructure.persistence.repositories.recommended_repo import (
    RecommendedCollectionRepository,
)
from colletro.infrastructure.persistence.repositories.stats_repo import StatsRepository
from colletro.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "CollectionRepository",
    "CommunityCollectionRepository",
    "FolderRepository",
    "ItemRepository",
    "RecommendedCollectionRepository",
    "StatsRepository",
    "UserRepository",
]
