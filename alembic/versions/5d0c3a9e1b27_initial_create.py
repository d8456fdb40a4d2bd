"""Initial create: completions table

Revision ID: 5d0c3a9e1b27
Revises:
Create Date: 2025-10-14 05:55:13.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5d0c3a9e1b27"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "completions",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("venuesId", sa.String(), nullable=False),
        sa.Column("userId", sa.String(), nullable=False),
        sa.Column("complate", sa.Boolean(), nullable=False),
        sa.Column("createdAt", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_completions_userId"), "completions", ["userId"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_completions_userId"), table_name="completions")
    op.drop_table("completions")
