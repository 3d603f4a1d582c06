"""Community collection, its items, votes, and content reports."""

from typing import Any

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from colletro.infrastructure.persistence.database import Base
from colletro.infrastructure.persistence.models.mixins import BaseModel, JSONType


class CommunityCollection(BaseModel, Base):
    """Sharer-owned structural copy of a collection."""

    __tablename__ = "community_collection"

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


class CommunityItem(BaseModel, Base):
    """Item of a community collection (independent of the source item)."""

    __tablename__ = "community_item"

    community_collection_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("community_collection.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    image: Mapped[str | None] = mapped_column(String, nullable=True)
    custom_fields: Mapped[dict[str, Any] | None] = mapped_column(JSONType, nullable=True)


class CommunityVote(BaseModel, Base):
    """One user's vote (+1/-1) on a community collection."""

    __tablename__ = "community_vote"

    community_collection_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("community_collection.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    value: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("community_collection_id", "user_id", name="uq_vote_collection_user"),
    )


class ContentReport(BaseModel, Base):
    """User report against a community collection."""

    __tablename__ = "content_report"

    community_collection_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("community_collection.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    reporter_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    reason: Mapped[str] = mapped_column(String(200), nullable=False)
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")

    __table_args__ = (
        UniqueConstraint(
            "community_collection_id", "reporter_id", name="uq_report_collection_reporter"
        ),
    )
