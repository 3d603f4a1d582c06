"""Admin-curated recommended collections and items."""

from typing import Any

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from colletro.infrastructure.persistence.database import Base
from colletro.infrastructure.persistence.models.mixins import BaseModel, JSONType


class RecommendedCollection(BaseModel, Base):
    """Catalog collection cloned (never referenced) into user accounts."""

    __tablename__ = "recommended_collection"

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
    is_public: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true"), default=True
    )


class RecommendedItem(BaseModel, Base):
    """Item of a recommended collection."""

    __tablename__ = "recommended_item"

    recommended_collection_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("recommended_collection.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    image: Mapped[str | None] = mapped_column(String, nullable=True)
    custom_fields: Mapped[dict[str, Any] | None] = mapped_column(JSONType, nullable=True)
