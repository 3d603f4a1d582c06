"""Aggregates the statistics the achievement rules read."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import and_, case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from colletro.application.dtos.achievement import UserStats
from colletro.infrastructure.persistence.models.collection import Collection, Item
from colletro.infrastructure.persistence.models.community import CommunityCollection
from colletro.infrastructure.persistence.models.folder import Folder
from colletro.infrastructure.persistence.models.user import User
from colletro.shared.utils.datetime import ensure_utc


def _filled(column):
    return case((and_(column.is_not(None), column != ""), 1), else_=0)


def _count_where(condition):
    return func.coalesce(func.sum(case((condition, 1), else_=0)), 0)


class StatsRepository:
    """Read-only aggregation over a user's collections, items, folders and shares."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_user_stats(self, user_id: str, as_of: datetime) -> UserStats | None:
        created = await self.db.execute(select(User.created_at).where(User.id == user_id))
        created_at = created.scalar_one_or_none()
        if created_at is None:
            return None

        collections = (
            await self.db.execute(
                select(
                    func.count(Collection.id),
                    func.coalesce(func.sum(_filled(Collection.cover_image)), 0),
                    func.count(func.distinct(func.nullif(Collection.category, ""))),
                    _count_where(Collection.community_collection_id.is_not(None)),
                ).where(Collection.user_id == user_id)
            )
        ).one()

        items = (
            await self.db.execute(
                select(
                    func.count(Item.id),
                    _count_where(Item.is_owned.is_(True)),
                    func.coalesce(func.sum(_filled(Item.notes)), 0),
                    func.coalesce(func.sum(_filled(Item.image)), 0),
                    _count_where(Item.personal_rating.is_not(None)),
                    _count_where(Item.log_date.is_not(None)),
                )
                .join(Collection, Collection.id == Item.collection_id)
                .where(Collection.user_id == user_id)
            )
        ).one()

        per_collection = (
            await self.db.execute(
                select(func.count(Item.id), _count_where(Item.is_owned.is_(True)))
                .join(Collection, Collection.id == Item.collection_id)
                .where(Collection.user_id == user_id)
                .group_by(Item.collection_id)
            )
        ).all()
        completed = 0
        best_percent = 0.0
        for total, owned in per_collection:
            if total and owned == total:
                completed += 1
            if total:
                best_percent = max(best_percent, owned * 100.0 / total)

        shares = await self.db.execute(
            select(func.count(CommunityCollection.id)).where(
                CommunityCollection.user_id == user_id
            )
        )
        folders = await self.db.execute(
            select(func.count(Folder.id)).where(Folder.user_id == user_id)
        )

        total_items, owned_items = int(items[0]), int(items[1])
        age = ensure_utc(as_of) - ensure_utc(created_at)
        return UserStats(
            collection_count=int(collections[0]),
            collections_with_covers=int(collections[1]),
            distinct_categories=int(collections[2]),
            completed_collections=completed,
            best_collection_percent=best_percent,
            overall_percent=owned_items * 100.0 / total_items if total_items else 0.0,
            total_items=total_items,
            owned_items=owned_items,
            items_with_notes=int(items[2]),
            items_with_images=int(items[3]),
            items_with_ratings=int(items[4]),
            items_with_log_dates=int(items[5]),
            community_collections_added=int(collections[3]),
            community_shares=int(shares.scalar() or 0),
            folders_created=int(folders.scalar() or 0),
            account_age_days=max(age.days, 0),
        )
