"""Folder tree operations for a user's collections."""

from __future__ import annotations

import logging

from colletro.application.dtos.folder import FolderResult
from colletro.application.interfaces.repositories import (
    ICollectionRepository,
    IFolderRepository,
)
from colletro.application.interfaces.services import IUnitOfWork
from colletro.application.services.achievement_service import AchievementService
from colletro.domain.exceptions import (
    FolderCycleException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationException("Folder name is required", field="name")
    return cleaned


class FolderService:
    """Create, rename, move and delete folders; file collections into them.

    Folders form a tree per user. A collection's folder reference is weak:
    deleting a folder unfiles its collections and lifts its children to
    the deleted folder's parent.
    """

    def __init__(
        self,
        folder_repo: IFolderRepository,
        collection_repo: ICollectionRepository,
        uow: IUnitOfWork,
        achievements: AchievementService,
    ) -> None:
        self._folder_repo = folder_repo
        self._collection_repo = collection_repo
        self._uow = uow
        self._achievements = achievements

    async def _get_owned(self, folder_id: str, user_id: str) -> FolderResult:
        folder = await self._folder_repo.get_by_id_and_user(folder_id, user_id)
        if folder is None:
            raise ResourceNotFoundException("folder", folder_id)
        return folder

    async def list_folders(self, user_id: str) -> list[FolderResult]:
        return await self._folder_repo.list_by_user(user_id)

    async def create_folder(
        self, user_id: str, name: str, parent_id: str | None = None
    ) -> FolderResult:
        name = _clean_name(name)
        async with self._uow.transaction():
            if parent_id is not None:
                await self._get_owned(parent_id, user_id)
            folder = await self._folder_repo.create(user_id, name, parent_id)
        await self._achievements.check_best_effort(user_id)
        return folder

    async def rename_folder(self, folder_id: str, user_id: str, name: str) -> FolderResult:
        name = _clean_name(name)
        async with self._uow.transaction():
            await self._get_owned(folder_id, user_id)
            return await self._folder_repo.update_fields(folder_id, {"name": name})

    async def move_folder(
        self, folder_id: str, user_id: str, parent_id: str | None
    ) -> FolderResult:
        """Re-parent a folder. Raises FolderCycleException if parent_id is the folder or a descendant."""
        async with self._uow.transaction():
            await self._get_owned(folder_id, user_id)
            if parent_id is not None:
                # Walk up from the new parent; meeting folder_id means a cycle.
                seen: set[str] = set()
                cursor: str | None = parent_id
                while cursor is not None and cursor not in seen:
                    if cursor == folder_id:
                        raise FolderCycleException(folder_id, parent_id)
                    seen.add(cursor)
                    ancestor = await self._get_owned(cursor, user_id)
                    cursor = ancestor.parent_id
            return await self._folder_repo.update_fields(folder_id, {"parent_id": parent_id})

    async def delete_folder(self, folder_id: str, user_id: str) -> None:
        async with self._uow.transaction():
            folder = await self._get_owned(folder_id, user_id)
            unfiled = await self._collection_repo.unfile_folder(folder_id)
            lifted = await self._folder_repo.reparent_children(folder_id, folder.parent_id)
            await self._folder_repo.delete(folder_id)
        logger.info(
            "Deleted folder %s (%d collections unfiled, %d subfolders lifted)",
            folder_id,
            unfiled,
            lifted,
        )

    async def move_collection(
        self, collection_id: str, user_id: str, folder_id: str | None
    ) -> None:
        """File a collection into folder_id, or unfile it when folder_id is None."""
        async with self._uow.transaction():
            collection = await self._collection_repo.get_by_id_and_user(collection_id, user_id)
            if collection is None:
                raise ResourceNotFoundException("collection", collection_id)
            if folder_id is not None:
                await self._get_owned(folder_id, user_id)
            await self._collection_repo.set_folder(collection_id, folder_id)
