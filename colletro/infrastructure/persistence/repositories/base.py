"""Base repository: generic lookups shared by the concrete repositories."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from colletro.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_entity, add and update_columns."""

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_entity(self, entity_id: str) -> ModelType | None:
        """Return a single ORM record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def add(self, obj: ModelType) -> ModelType:
        """Persist a new record and load server defaults."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update_columns(self, entity_id: str, values: dict[str, Any]) -> int:
        """UPDATE ... WHERE id = entity_id; return affected row count."""
        if not values:
            return 0
        model: Any = self.model
        result = await self.db.execute(
            update(self.model).where(model.id == entity_id).values(**values)
        )
        return result.rowcount or 0
