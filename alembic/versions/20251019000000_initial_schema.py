"""Initial schema: auth (members), admin, books.

Revision ID: 20251019000000
Revises:
Create Date: 2025-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20251019000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "auth",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("rating", sa.Numeric(10, 2), nullable=False, server_default=sa.text("0")),
        sa.CheckConstraint("rating >= 0", name="ck_auth_rating_non_negative"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_auth_name"), "auth", ["name"], unique=True)

    op.create_table(
        "admin",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_admin_name"), "admin", ["name"], unique=True)

    op.create_table(
        "books",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("author", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("published_on", sa.Date(), nullable=True),
        sa.Column("special_features", sa.JSON(), nullable=False),
        sa.Column("location_x", sa.Float(), nullable=False),
        sa.Column("location_y", sa.Float(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["owner_id"], ["auth.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_books_owner_id"), "books", ["owner_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_books_owner_id"), table_name="books")
    op.drop_table("books")
    op.drop_index(op.f("ix_admin_name"), table_name="admin")
    op.drop_table("admin")
    op.drop_index(op.f("ix_auth_name"), table_name="auth")
    op.drop_table("auth")
