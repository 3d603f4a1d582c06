"""Personal Collection and Item ORM models."""

from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from colletro.infrastructure.persistence.database import Base
from colletro.infrastructure.persistence.models.mixins import BaseModel, JSONType


class Collection(BaseModel, Base):
    """User-owned collection.

    folder_id and the lineage references are weak (SET NULL).
    shared_to_community_id is a plain column so a link to a deleted
    community collection stays visible and can be reported.
    """

    __tablename__ = "collection"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    template: Mapped[str | None] = mapped_column(String(100), nullable=True)
    custom_field_definitions: Mapped[list[dict[str, Any]] | None] = mapped_column(
        JSONType, nullable=True
    )
    cover_image: Mapped[str | None] = mapped_column(String, nullable=True)
    cover_image_fit: Mapped[str | None] = mapped_column(String(20), nullable=True)
    tags: Mapped[list[str] | None] = mapped_column(JSONType, nullable=True)
    folder_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("folder.id", ondelete="SET NULL"), nullable=True, index=True
    )
    recommended_collection_id: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("recommended_collection.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    community_collection_id: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("community_collection.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    shared_to_community_id: Mapped[str | None] = mapped_column(
        String, nullable=True, index=True
    )
    share_token: Mapped[str | None] = mapped_column(String, unique=True, nullable=True)
    # Public link switch; share_token survives going private so the link can be re-enabled.
    is_public: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false"), default=False
    )
    last_synced_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )


class Item(BaseModel, Base):
    """Item in a personal collection. Deleted with its collection."""

    __tablename__ = "item"

    collection_id: Mapped[str] = mapped_column(
        String, ForeignKey("collection.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    image: Mapped[str | None] = mapped_column(String, nullable=True)
    is_owned: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false"), default=False
    )
    custom_fields: Mapped[dict[str, Any] | None] = mapped_column(JSONType, nullable=True)
    personal_rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    log_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (Index("ix_item_collection_number_name", "collection_id", "number", "name"),)
