"""Folder ORM model (per-user tree)."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from colletro.infrastructure.persistence.database import Base
from colletro.infrastructure.persistence.models.mixins import BaseModel


class Folder(BaseModel, Base):
    """Folder. parent_id is SET NULL on delete; the service re-parents children explicitly."""

    __tablename__ = "folder"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    parent_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("folder.id", ondelete="SET NULL"), nullable=True, index=True
    )
