"""Folder repository. Returns application DTOs."""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from colletro.application.dtos.folder import FolderResult
from colletro.domain.exceptions import ResourceNotFoundException
from colletro.infrastructure.persistence.models.folder import Folder
from colletro.infrastructure.persistence.repositories.base import BaseRepository
from colletro.shared.utils.datetime import ensure_utc


def _folder_to_result(f: Folder) -> FolderResult:
    return FolderResult(
        id=f.id,
        user_id=f.user_id,
        name=f.name,
        parent_id=f.parent_id,
        created_at=ensure_utc(f.created_at),
    )


class FolderRepository(BaseRepository[Folder]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Folder)

    async def get_by_id_and_user(self, folder_id: str, user_id: str) -> FolderResult | None:
        result = await self.db.execute(
            select(Folder).where(Folder.id == folder_id, Folder.user_id == user_id)
        )
        orm = result.scalar_one_or_none()
        return _folder_to_result(orm) if orm else None

    async def list_by_user(self, user_id: str) -> list[FolderResult]:
        result = await self.db.execute(
            select(Folder).where(Folder.user_id == user_id).order_by(Folder.name.asc())
        )
        return [_folder_to_result(f) for f in result.scalars().all()]

    async def create(self, user_id: str, name: str, parent_id: str | None) -> FolderResult:
        orm = await self.add(Folder(user_id=user_id, name=name, parent_id=parent_id))
        return _folder_to_result(orm)

    async def update_fields(self, folder_id: str, values: dict[str, Any]) -> FolderResult:
        await self.update_columns(folder_id, values)
        orm = await self.get_entity(folder_id)
        if orm is None:
            raise ResourceNotFoundException("folder", folder_id)
        await self.db.refresh(orm)
        return _folder_to_result(orm)

    async def reparent_children(self, folder_id: str, new_parent_id: str | None) -> int:
        result = await self.db.execute(
            update(Folder).where(Folder.parent_id == folder_id).values(parent_id=new_parent_id)
        )
        return result.rowcount or 0

    async def delete(self, folder_id: str) -> None:
        await self.db.execute(delete(Folder).where(Folder.id == folder_id))
