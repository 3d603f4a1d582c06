"""Personal collection repository. Returns application DTOs with items."""

from __future__ import annotations

from collections import defaultdict
from typing import Any

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from colletro.application.dtos.admin import CoverCandidate
from colletro.application.dtos.collection import (
    CollectionDraft,
    CollectionResult,
    ItemResult,
)
from colletro.infrastructure.persistence.models.collection import Collection, Item
from colletro.infrastructure.persistence.repositories.base import BaseRepository
from colletro.infrastructure.persistence.repositories.item_repo import (
    ITEM_ORDER,
    draft_to_item,
    item_to_result,
)
from colletro.shared.utils.datetime import ensure_utc


def _collection_to_result(c: Collection, items: list[ItemResult]) -> CollectionResult:
    """Map ORM Collection plus its items to application CollectionResult."""
    return CollectionResult(
        id=c.id,
        user_id=c.user_id,
        name=c.name,
        description=c.description,
        category=c.category,
        template=c.template,
        custom_field_definitions=c.custom_field_definitions,
        cover_image=c.cover_image,
        cover_image_fit=c.cover_image_fit,
        tags=list(c.tags or []),
        folder_id=c.folder_id,
        recommended_collection_id=c.recommended_collection_id,
        community_collection_id=c.community_collection_id,
        shared_to_community_id=c.shared_to_community_id,
        share_token=c.share_token,
        is_public=bool(c.is_public),
        last_synced_at=ensure_utc(c.last_synced_at),
        created_at=ensure_utc(c.created_at),
        items=items,
    )


class CollectionRepository(BaseRepository[Collection]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Collection)

    async def _items_for(self, collection_ids: list[str]) -> dict[str, list[ItemResult]]:
        grouped: dict[str, list[ItemResult]] = defaultdict(list)
        if not collection_ids:
            return grouped
        result = await self.db.execute(
            select(Item).where(Item.collection_id.in_(collection_ids)).order_by(*ITEM_ORDER)
        )
        for item in result.scalars().all():
            grouped[item.collection_id].append(item_to_result(item))
        return grouped

    async def _one_with_items(self, *conditions) -> CollectionResult | None:
        result = await self.db.execute(select(Collection).where(*conditions))
        orm = result.scalar_one_or_none()
        if orm is None:
            return None
        items = await self._items_for([orm.id])
        return _collection_to_result(orm, items[orm.id])

    async def get_by_id(self, collection_id: str) -> CollectionResult | None:
        return await self._one_with_items(Collection.id == collection_id)

    async def get_by_id_and_user(
        self, collection_id: str, user_id: str
    ) -> CollectionResult | None:
        return await self._one_with_items(
            Collection.id == collection_id, Collection.user_id == user_id
        )

    async def get_by_share_token(self, share_token: str) -> CollectionResult | None:
        return await self._one_with_items(Collection.share_token == share_token)

    async def list_by_user(self, user_id: str) -> list[CollectionResult]:
        result = await self.db.execute(
            select(Collection)
            .where(Collection.user_id == user_id)
            .order_by(Collection.created_at.desc())
        )
        collections = list(result.scalars().all())
        items = await self._items_for([c.id for c in collections])
        return [_collection_to_result(c, items[c.id]) for c in collections]

    async def create_with_items(self, draft: CollectionDraft) -> CollectionResult:
        orm = await self.add(
            Collection(
                user_id=draft.user_id,
                name=draft.name,
                description=draft.description,
                category=draft.category,
                template=draft.template,
                custom_field_definitions=draft.custom_field_definitions,
                cover_image=draft.cover_image,
                cover_image_fit=draft.cover_image_fit,
                tags=list(draft.tags),
                folder_id=draft.folder_id,
                recommended_collection_id=draft.recommended_collection_id,
                community_collection_id=draft.community_collection_id,
                last_synced_at=draft.last_synced_at,
            )
        )
        if draft.items:
            self.db.add_all([draft_to_item(orm.id, d) for d in draft.items])
            await self.db.flush()
        items = await self._items_for([orm.id])
        return _collection_to_result(orm, items[orm.id])

    async def update_fields(self, collection_id: str, values: dict[str, Any]) -> None:
        await self.update_columns(collection_id, values)

    async def set_shared_to_community(
        self, collection_id: str, community_collection_id: str | None
    ) -> None:
        await self.update_columns(
            collection_id, {"shared_to_community_id": community_collection_id}
        )

    async def list_missing_covers(self) -> list[CoverCandidate]:
        result = await self.db.execute(
            select(Collection.id, Collection.name, Collection.category)
            .where(or_(Collection.cover_image.is_(None), Collection.cover_image == ""))
            .order_by(Collection.created_at.asc())
        )
        return [
            CoverCandidate(id=row.id, name=row.name, category=row.category)
            for row in result.all()
        ]

    async def set_cover_image(self, collection_id: str, cover_image: str) -> bool:
        return await self.update_columns(collection_id, {"cover_image": cover_image}) > 0

    async def set_folder(self, collection_id: str, folder_id: str | None) -> None:
        await self.update_columns(collection_id, {"folder_id": folder_id})

    async def unfile_folder(self, folder_id: str) -> int:
        result = await self.db.execute(
            update(Collection).where(Collection.folder_id == folder_id).values(folder_id=None)
        )
        return result.rowcount or 0
