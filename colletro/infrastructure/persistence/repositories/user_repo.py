"""User repository. Returns application DTOs."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from colletro.application.dtos.collection import AuthorSummary
from colletro.application.dtos.user import UserResult, UserStatus
from colletro.domain.achievements import parse_achievements
from colletro.infrastructure.persistence.models.user import User
from colletro.infrastructure.persistence.repositories.base import BaseRepository
from colletro.shared.utils.datetime import ensure_utc


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(
        id=u.id,
        email=u.email,
        name=u.name,
        image=u.image,
        badge=u.badge,
        is_admin=bool(u.is_admin),
        is_verified=bool(u.is_verified),
        is_private=bool(u.is_private),
        achievements=parse_achievements(u.achievements),
        created_at=ensure_utc(u.created_at),
    )


class UserRepository(BaseRepository[User]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_id(self, user_id: str) -> UserResult | None:
        orm = await self.get_entity(user_id)
        return _user_to_result(orm) if orm else None

    async def get_status(self, user_id: str) -> UserStatus | None:
        result = await self.db.execute(
            select(User.is_admin, User.is_verified).where(User.id == user_id)
        )
        row = result.first()
        if row is None:
            return None
        return UserStatus(is_admin=bool(row.is_admin), is_verified=bool(row.is_verified))

    async def get_author_summary(self, user_id: str) -> AuthorSummary | None:
        orm = await self.get_entity(user_id)
        if orm is None:
            return None
        return AuthorSummary(id=orm.id, name=orm.name, image=orm.image, badge=orm.badge)

    async def get_achievements_for_update(self, user_id: str) -> list[str] | None:
        """Row lock (FOR UPDATE) serializes concurrent unlocks for one user."""
        result = await self.db.execute(
            select(User.achievements).where(User.id == user_id).with_for_update()
        )
        row = result.first()
        if row is None:
            return None
        return parse_achievements(row.achievements)

    async def set_achievements(self, user_id: str, achievement_ids: list[str]) -> None:
        await self.update_columns(user_id, {"achievements": list(achievement_ids)})

    async def set_verified(self, user_id: str, is_verified: bool) -> UserResult | None:
        updated = await self.update_columns(user_id, {"is_verified": is_verified})
        if not updated:
            return None
        orm = await self.get_entity(user_id)
        if orm is not None:
            await self.db.refresh(orm)
        return _user_to_result(orm) if orm else None
