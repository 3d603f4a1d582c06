"""Batch item operations: import, ownership toggle, delete."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from colletro.application.dtos.collection import ItemDraft
from colletro.application.dtos.item import ImportItemsResult, ItemBatchResult
from colletro.application.interfaces.repositories import (
    ICollectionRepository,
    IItemRepository,
)
from colletro.application.interfaces.services import IUnitOfWork
from colletro.application.services.achievement_service import AchievementService
from colletro.application.use_cases.collections.drafts import item_key
from colletro.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


def _require_ids(item_ids: Sequence[str]) -> list[str]:
    ids = list(dict.fromkeys(item_ids))
    if not ids:
        raise ValidationException("item_ids must be a non-empty list", field="item_ids")
    return ids


class ItemService:
    """Item mutations that change a user's statistics (achievements re-checked after commit)."""

    def __init__(
        self,
        collection_repo: ICollectionRepository,
        item_repo: IItemRepository,
        uow: IUnitOfWork,
        achievements: AchievementService,
    ) -> None:
        self._collection_repo = collection_repo
        self._item_repo = item_repo
        self._uow = uow
        self._achievements = achievements

    async def import_items(
        self, collection_id: str, user_id: str, items: Sequence[ItemDraft]
    ) -> ImportItemsResult:
        """Create many items, skipping duplicates of (number, name) in the batch and in the collection."""
        if not items:
            raise ValidationException("items must be a non-empty list", field="items")
        for draft in items:
            if not draft.name or not draft.name.strip():
                raise ValidationException("Each item requires a name", field="items")

        async with self._uow.transaction():
            collection = await self._collection_repo.get_by_id_and_user(collection_id, user_id)
            if collection is None:
                raise ResourceNotFoundException("collection", collection_id)
            seen = {item_key(i.number, i.name) for i in collection.items}
            fresh: list[ItemDraft] = []
            for draft in items:
                key = item_key(draft.number, draft.name)
                if key in seen:
                    continue
                seen.add(key)
                fresh.append(draft)
            created = await self._item_repo.create_many(collection_id, fresh) if fresh else 0

        newly = await self._achievements.check_best_effort(user_id)
        return ImportItemsResult(
            created=created, skipped=len(items) - created, newly_unlocked=newly
        )

    async def _authorize(self, user_id: str, item_ids: list[str], action: str) -> None:
        owners = await self._item_repo.get_owner_ids(item_ids)
        if any(owners.get(item_id) != user_id for item_id in item_ids):
            raise AuthorizationException("item", action)

    async def set_items_owned(
        self, user_id: str, item_ids: Sequence[str], is_owned: bool
    ) -> ItemBatchResult:
        ids = _require_ids(item_ids)
        async with self._uow.transaction():
            await self._authorize(user_id, ids, "update")
            affected = await self._item_repo.set_owned(ids, is_owned)
        newly = await self._achievements.check_best_effort(user_id)
        return ItemBatchResult(affected=affected, newly_unlocked=newly)

    async def delete_items(self, user_id: str, item_ids: Sequence[str]) -> ItemBatchResult:
        """Delete items. Unlocked achievements stay unlocked."""
        ids = _require_ids(item_ids)
        async with self._uow.transaction():
            await self._authorize(user_id, ids, "delete")
            affected = await self._item_repo.delete_many(ids)
        logger.info("User %s deleted %d items", user_id, affected)
        newly = await self._achievements.check_best_effort(user_id)
        return ItemBatchResult(affected=affected, newly_unlocked=newly)
