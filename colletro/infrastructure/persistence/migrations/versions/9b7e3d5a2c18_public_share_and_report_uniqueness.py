"""Public share flag on collections; one report per reporter per community collection

Revision ID: 9b7e3d5a2c18
Revises: 4f2a9c1d7e30
Create Date: 2026-10-19 16:40:03.271904

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "9b7e3d5a2c18"
down_revision: Union[str, Sequence[str], None] = "4f2a9c1d7e30"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        "collection",
        sa.Column("is_public", sa.Boolean(), server_default=sa.text("false"), nullable=False),
    )
    op.create_unique_constraint(
        "uq_report_collection_reporter",
        "content_report",
        ["community_collection_id", "reporter_id"],
    )


def downgrade() -> None:
    op.drop_constraint("uq_report_collection_reporter", "content_report", type_="unique")
    op.drop_column("collection", "is_public")
