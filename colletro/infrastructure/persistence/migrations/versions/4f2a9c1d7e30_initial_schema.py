"""Initial schema: users, folders, collections, items, community and recommended catalogs

Revision ID: 4f2a9c1d7e30
Revises:
Create Date: 2026-10-19 10:12:41.508113

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "4f2a9c1d7e30"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSONType = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _descriptive_columns() -> list[sa.Column]:
    """Columns shared by collection, community_collection and recommended_collection."""
    return [
        sa.Column("name", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("template", sa.String(length=100), nullable=True),
        sa.Column("custom_field_definitions", JSONType, nullable=True),
        sa.Column("cover_image", sa.String(), nullable=True),
        sa.Column("cover_image_fit", sa.String(length=20), nullable=True),
        sa.Column("tags", JSONType, nullable=True),
    ]


def _item_columns() -> list[sa.Column]:
    return [
        sa.Column("name", sa.String(length=500), nullable=False),
        sa.Column("number", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("image", sa.String(), nullable=True),
    ]


def upgrade() -> None:
    """Create initial schema."""
    op.create_table(
        "app_user",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("image", sa.String(), nullable=True),
        sa.Column("badge", sa.String(), nullable=True),
        sa.Column("is_admin", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("is_verified", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("is_private", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("achievements", JSONType, nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "folder",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("parent_id", sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["folder.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_folder_user_id"), "folder", ["user_id"], unique=False)
    op.create_index(op.f("ix_folder_parent_id"), "folder", ["parent_id"], unique=False)

    op.create_table(
        "recommended_collection",
        sa.Column("id", sa.String(), nullable=False),
        *_descriptive_columns(),
        sa.Column("is_public", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_recommended_collection_category"),
        "recommended_collection",
        ["category"],
        unique=False,
    )

    op.create_table(
        "recommended_item",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("recommended_collection_id", sa.String(), nullable=False),
        *_item_columns(),
        sa.Column("custom_fields", JSONType, nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["recommended_collection_id"], ["recommended_collection.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_recommended_item_recommended_collection_id"),
        "recommended_item",
        ["recommended_collection_id"],
        unique=False,
    )

    op.create_table(
        "community_collection",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        *_descriptive_columns(),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_community_collection_user_id"), "community_collection", ["user_id"], unique=False
    )
    op.create_index(
        op.f("ix_community_collection_category"),
        "community_collection",
        ["category"],
        unique=False,
    )

    op.create_table(
        "community_item",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("community_collection_id", sa.String(), nullable=False),
        *_item_columns(),
        sa.Column("custom_fields", JSONType, nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["community_collection_id"], ["community_collection.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_community_item_community_collection_id"),
        "community_item",
        ["community_collection_id"],
        unique=False,
    )

    op.create_table(
        "community_vote",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("community_collection_id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("value", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["community_collection_id"], ["community_collection.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "community_collection_id", "user_id", name="uq_vote_collection_user"
        ),
    )
    op.create_index(
        op.f("ix_community_vote_community_collection_id"),
        "community_vote",
        ["community_collection_id"],
        unique=False,
    )

    op.create_table(
        "content_report",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("community_collection_id", sa.String(), nullable=False),
        sa.Column("reporter_id", sa.String(), nullable=False),
        sa.Column("reason", sa.String(length=200), nullable=False),
        sa.Column("details", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["community_collection_id"], ["community_collection.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["reporter_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_content_report_community_collection_id"),
        "content_report",
        ["community_collection_id"],
        unique=False,
    )

    op.create_table(
        "collection",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        *_descriptive_columns(),
        sa.Column("folder_id", sa.String(), nullable=True),
        sa.Column("recommended_collection_id", sa.String(), nullable=True),
        sa.Column("community_collection_id", sa.String(), nullable=True),
        sa.Column("shared_to_community_id", sa.String(), nullable=True),
        sa.Column("share_token", sa.String(), nullable=True),
        sa.Column("last_synced_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["folder_id"], ["folder.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(
            ["recommended_collection_id"], ["recommended_collection.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(
            ["community_collection_id"], ["community_collection.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("share_token"),
    )
    for column in (
        "user_id",
        "category",
        "folder_id",
        "recommended_collection_id",
        "community_collection_id",
        "shared_to_community_id",
    ):
        op.create_index(op.f(f"ix_collection_{column}"), "collection", [column], unique=False)

    op.create_table(
        "item",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("collection_id", sa.String(), nullable=False),
        *_item_columns(),
        sa.Column("is_owned", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("custom_fields", JSONType, nullable=True),
        sa.Column("personal_rating", sa.Integer(), nullable=True),
        sa.Column("log_date", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["collection_id"], ["collection.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_item_collection_number_name",
        "item",
        ["collection_id", "number", "name"],
        unique=False,
    )

    op.create_table(
        "wishlist_item",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        *_item_columns(),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_wishlist_item_user_id"), "wishlist_item", ["user_id"], unique=False)

    op.create_table(
        "blog_post",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("slug", sa.String(length=200), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("published", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )

    op.create_table(
        "verification_token",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("identifier", sa.String(), nullable=False),
        sa.Column("token", sa.String(), nullable=False),
        sa.Column("expires", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token"),
    )
    op.create_index(
        op.f("ix_verification_token_identifier"),
        "verification_token",
        ["identifier"],
        unique=False,
    )


def downgrade() -> None:
    """Drop all tables (reverse dependency order)."""
    for table in (
        "verification_token",
        "blog_post",
        "wishlist_item",
        "item",
        "collection",
        "content_report",
        "community_vote",
        "community_item",
        "community_collection",
        "recommended_item",
        "recommended_collection",
        "folder",
        "app_user",
    ):
        op.drop_table(table)
