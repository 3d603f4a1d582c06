"""Ports (Protocols) implemented by infrastructure."""

from colletro.application.interfaces.repositories import (
    ICollectionRepository,
    ICommunityCollectionRepository,
    IFolderRepository,
    IItemRepository,
    IRecommendedCollectionRepository,
    IStatsRepository,
    IUserRepository,
)
from colletro.application.interfaces.services import (
    ICoverGenerator,
    IMetadataSource,
    IRequestDeduplicator,
    IUnitOfWork,
    IUserStatusCache,
)

__all__ = [
    "ICollectionRepository",
    "ICommunityCollectionRepository",
    "ICoverGenerator",
    "IFolderRepository",
    "IItemRepository",
    "IMetadataSource",
    "IRecommendedCollectionRepository",
    "IRequestDeduplicator",
    "IStatsRepository",
    "IUnitOfWork",
    "IUserRepository",
    "IUserStatusCache",
]
