"""DB session, unit of work, and repository dependencies (composition root)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from colletro.application.interfaces.repositories import CollectionRepositoryScope
from colletro.infrastructure.persistence.database import get_db, session_scope
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

DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_uow(db: DbSession) -> SqlAlchemyUnitOfWork:
    """One unit of work per request; every service in the request shares it."""
    return SqlAlchemyUnitOfWork(db)


def get_user_repo(db: DbSession) -> UserRepository:
    return UserRepository(db)


def get_stats_repo(db: DbSession) -> StatsRepository:
    return StatsRepository(db)


def get_collection_repo(db: DbSession) -> CollectionRepository:
    return CollectionRepository(db)


@asynccontextmanager
async def collection_repo_scope() -> AsyncIterator[CollectionRepository]:
    async with session_scope() as session:
        yield CollectionRepository(session)


def get_collection_repo_scope() -> CollectionRepositoryScope:
    """Factory for collection repositories on their own session.

    For work that can outlive the request that started it (shared
    deduplicated fetches).
    """
    return collection_repo_scope


def get_item_repo(db: DbSession) -> ItemRepository:
    return ItemRepository(db)


def get_community_repo(db: DbSession) -> CommunityCollectionRepository:
    return CommunityCollectionRepository(db)


def get_recommended_repo(db: DbSession) -> RecommendedCollectionRepository:
    return RecommendedCollectionRepository(db)


def get_folder_repo(db: DbSession) -> FolderRepository:
    return FolderRepository(db)
