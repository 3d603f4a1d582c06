"""Community collection repository. Returns application DTOs with items and author."""

from __future__ import annotations

from sqlalchemy import case, delete, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from colletro.application.dtos.collection import (
    AuthorSummary,
    CatalogItemResult,
    CollectionDraft,
    CommunityCollectionResult,
)
from colletro.application.dtos.community import ReportResult
from colletro.infrastructure.persistence.models.community import (
    CommunityCollection,
    CommunityItem,
    CommunityVote,
    ContentReport,
)
from colletro.infrastructure.persistence.models.user import User
from colletro.infrastructure.persistence.repositories.base import BaseRepository
from colletro.shared.utils.datetime import ensure_utc


def _item_to_result(i: CommunityItem) -> CatalogItemResult:
    return CatalogItemResult(
        id=i.id,
        collection_id=i.community_collection_id,
        name=i.name,
        number=i.number,
        notes=i.notes,
        image=i.image,
        custom_fields=i.custom_fields,
    )


class CommunityCollectionRepository(BaseRepository[CommunityCollection]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, CommunityCollection)

    async def _to_result(self, c: CommunityCollection) -> CommunityCollectionResult:
        items = await self.db.execute(
            select(CommunityItem)
            .where(CommunityItem.community_collection_id == c.id)
            .order_by(CommunityItem.number.asc().nulls_last(), CommunityItem.name.asc())
        )
        author = await self.db.execute(
            select(User.id, User.name, User.image, User.badge).where(User.id == c.user_id)
        )
        row = author.first()
        return CommunityCollectionResult(
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
            created_at=ensure_utc(c.created_at),
            items=[_item_to_result(i) for i in items.scalars().all()],
            author=(
                AuthorSummary(id=row.id, name=row.name, image=row.image, badge=row.badge)
                if row
                else None
            ),
        )

    async def get_by_id(self, community_collection_id: str) -> CommunityCollectionResult | None:
        orm = await self.get_entity(community_collection_id)
        return await self._to_result(orm) if orm else None

    async def create_with_items(self, draft: CollectionDraft) -> CommunityCollectionResult:
        orm = await self.add(
            CommunityCollection(
                user_id=draft.user_id,
                name=draft.name,
                description=draft.description,
                category=draft.category,
                template=draft.template,
                custom_field_definitions=draft.custom_field_definitions,
                cover_image=draft.cover_image,
                cover_image_fit=draft.cover_image_fit,
                tags=list(draft.tags),
            )
        )
        self.db.add_all(
            [
                CommunityItem(
                    community_collection_id=orm.id,
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

    async def delete_with_dependents(self, community_collection_id: str) -> None:
        """Explicit cascade: items, votes, reports, then the collection row."""
        for model in (CommunityItem, CommunityVote, ContentReport):
            await self.db.execute(
                delete(model).where(
                    model.community_collection_id == community_collection_id
                )
            )
        await self.db.execute(
            delete(CommunityCollection).where(
                CommunityCollection.id == community_collection_id
            )
        )

    async def has_vote(self, community_collection_id: str, user_id: str) -> bool:
        result = await self.db.execute(
            select(
                exists().where(
                    CommunityVote.community_collection_id == community_collection_id,
                    CommunityVote.user_id == user_id,
                )
            )
        )
        return bool(result.scalar())

    async def add_vote(self, community_collection_id: str, user_id: str, value: int) -> None:
        self.db.add(
            CommunityVote(
                community_collection_id=community_collection_id, user_id=user_id, value=value
            )
        )
        await self.db.flush()

    async def remove_vote(self, community_collection_id: str, user_id: str) -> None:
        await self.db.execute(
            delete(CommunityVote).where(
                CommunityVote.community_collection_id == community_collection_id,
                CommunityVote.user_id == user_id,
            )
        )

    async def vote_totals(self, community_collection_id: str) -> tuple[int, int]:
        result = await self.db.execute(
            select(
                func.coalesce(func.sum(case((CommunityVote.value > 0, 1), else_=0)), 0),
                func.coalesce(func.sum(CommunityVote.value), 0),
            ).where(CommunityVote.community_collection_id == community_collection_id)
        )
        upvotes, score = result.one()
        return int(upvotes), int(score)

    async def has_report(self, community_collection_id: str, reporter_id: str) -> bool:
        result = await self.db.execute(
            select(
                exists().where(
                    ContentReport.community_collection_id == community_collection_id,
                    ContentReport.reporter_id == reporter_id,
                )
            )
        )
        return bool(result.scalar())

    async def create_report(
        self,
        community_collection_id: str,
        reporter_id: str,
        reason: str,
        details: str | None,
    ) -> ReportResult:
        report = await self.add(
            ContentReport(
                community_collection_id=community_collection_id,
                reporter_id=reporter_id,
                reason=reason,
                details=details,
                status="pending",
            )
        )
        return ReportResult(id=report.id, status=report.status)
