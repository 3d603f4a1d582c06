"""Personal item repository. Returns application DTOs."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from colletro.application.dtos.collection import ItemDraft, ItemResult
from colletro.infrastructure.persistence.models.collection import Collection, Item
from colletro.infrastructure.persistence.repositories.base import BaseRepository
from colletro.shared.utils.datetime import ensure_utc

# NULL numbers sort last, like the original catalog ordering.
ITEM_ORDER = (Item.number.asc().nulls_last(), Item.name.asc())


def item_to_result(i: Item) -> ItemResult:
    """Map ORM Item to application ItemResult."""
    return ItemResult(
        id=i.id,
        collection_id=i.collection_id,
        name=i.name,
        number=i.number,
        notes=i.notes,
        image=i.image,
        is_owned=bool(i.is_owned),
        custom_fields=i.custom_fields,
        personal_rating=i.personal_rating,
        log_date=ensure_utc(i.log_date),
    )


def draft_to_item(collection_id: str, draft: ItemDraft) -> Item:
    return Item(
        collection_id=collection_id,
        name=draft.name,
        number=draft.number,
        notes=draft.notes,
        image=draft.image,
        is_owned=draft.is_owned,
        custom_fields=draft.custom_fields,
    )


class ItemRepository(BaseRepository[Item]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Item)

    async def list_by_collection(self, collection_id: str) -> list[ItemResult]:
        result = await self.db.execute(
            select(Item).where(Item.collection_id == collection_id).order_by(*ITEM_ORDER)
        )
        return [item_to_result(i) for i in result.scalars().all()]

    async def create_many(self, collection_id: str, drafts: Sequence[ItemDraft]) -> int:
        self.db.add_all([draft_to_item(collection_id, d) for d in drafts])
        await self.db.flush()
        return len(drafts)

    async def update_fields(self, item_id: str, values: dict[str, Any]) -> None:
        await self.update_columns(item_id, values)

    async def get_owner_ids(self, item_ids: Sequence[str]) -> dict[str, str]:
        if not item_ids:
            return {}
        result = await self.db.execute(
            select(Item.id, Collection.user_id)
            .join(Collection, Collection.id == Item.collection_id)
            .where(Item.id.in_(list(item_ids)))
        )
        return {row.id: row.user_id for row in result.all()}

    async def set_owned(self, item_ids: Sequence[str], is_owned: bool) -> int:
        result = await self.db.execute(
            update(Item).where(Item.id.in_(list(item_ids))).values(is_owned=is_owned)
        )
        return result.rowcount or 0

    async def delete_many(self, item_ids: Sequence[str]) -> int:
        result = await self.db.execute(delete(Item).where(Item.id.in_(list(item_ids))))
        return result.rowcount or 0
