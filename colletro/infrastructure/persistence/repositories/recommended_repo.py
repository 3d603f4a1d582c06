"""Recommended collection repository. Returns application DTOs with items."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import exists, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from colletro.application.dtos.admin import ImageUpdate
from colletro.application.dtos.collection import (
    CatalogDraft,
    CatalogItemResult,
    RecommendedCollectionResult,
)
from colletro.infrastructure.persistence.models.recommended import (
    RecommendedCollection,
    RecommendedItem,
)
from colletro.infrastructure.persistence.repositories.base import BaseRepository
from colletro.shared.utils.datetime import ensure_utc


def _item_to_result(i: RecommendedItem) -> CatalogItemResult:
    return CatalogItemResult(
        id=i.id,
        collection_id=i.recommended_collection_id,
        name=i.name,
        number=i.number,
        notes=i.notes,
        image=i.image,
        custom_fields=i.custom_fields,
    )


class RecommendedCollectionRepository(BaseRepository[RecommendedCollection]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, RecommendedCollection)

    async def get_by_id(
        self, recommended_collection_id: str
    ) -> RecommendedCollectionResult | None:
        c = await self.get_entity(recommended_collection_id)
        return await self._to_result(c) if c else None

    async def _to_result(self, c: RecommendedCollection) -> RecommendedCollectionResult:
        items = await self.db.execute(
            select(RecommendedItem)
            .where(RecommendedItem.recommended_collection_id == c.id)
            .order_by(RecommendedItem.number.asc().nulls_last(), RecommendedItem.name.asc())
        )
        return RecommendedCollectionResult(
            id=c.id,
            name=c.name,
            description=c.description,
            category=c.category,
            template=c.template,
            custom_field_definitions=c.custom_field_definitions,
            cover_image=c.cover_image,
            cover_image_fit=c.cover_image_fit,
            tags=list(c.tags or []),
            is_public=bool(c.is_public),
            created_at=ensure_utc(c.created_at),
            items=[_item_to_result(i) for i in items.scalars().all()],
            updated_at=ensure_utc(c.updated_at),
        )

    async def get_item_ids(self, recommended_collection_id: str) -> set[str]:
        result = await self.db.execute(
            select(RecommendedItem.id).where(
                RecommendedItem.recommended_collection_id == recommended_collection_id
            )
        )
        return set(result.scalars().all())

    async def update_item_images(self, updates: Sequence[ImageUpdate]) -> list[CatalogItemResult]:
        for u in updates:
            await self.db.execute(
                update(RecommendedItem)
                .where(RecommendedItem.id == u.item_id)
                .values(image=u.image)
            )
        ids = [u.item_id for u in updates]
        result = await self.db.execute(
            select(RecommendedItem)
            .where(RecommendedItem.id.in_(ids))
            .execution_options(populate_existing=True)
        )
        by_id = {i.id: _item_to_result(i) for i in result.scalars().all()}
        return [by_id[item_id] for item_id in dict.fromkeys(ids) if item_id in by_id]

    async def exists_with_name(self, name: str) -> bool:
        result = await self.db.execute(
            select(exists().where(RecommendedCollection.name == name))
        )
        return bool(result.scalar())

    async def create_with_items(self, draft: CatalogDraft) -> RecommendedCollectionResult:
        orm = await self.add(
            RecommendedCollection(
                name=draft.name,
                description=draft.description,
                category=draft.category,
                template=draft.template,
                custom_field_definitions=draft.custom_field_definitions,
                cover_image=draft.cover_image,
                cover_image_fit=draft.cover_image_fit,
                tags=list(draft.tags),
                is_public=draft.is_public,
            )
        )
        self.db.add_all(
            [
                RecommendedItem(
                    recommended_collection_id=orm.id,
                    name=d.name,
                    number=d.number,
                    notes=d.notes,
                    image=d.image,
                    custom_fields=d.custom_fields,
                )
                for d in draft.items
            ]
        )
        await self.db.flush()
        return await self._to_result(orm)
