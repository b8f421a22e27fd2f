"""Initial schema — resource and identity tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ------------------------------------------------------------------ #
    # 1. RESOURCE LAYER                                                    #
    # ------------------------------------------------------------------ #

    op.create_table(
        "sample_resources",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("ref", sa.Text, nullable=True),
    )

    # ------------------------------------------------------------------ #
    # 2. IDENTITY LAYER                                                    #
    # ------------------------------------------------------------------ #

    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("ref", sa.Text, nullable=True),
        sa.Column("login", sa.Text, nullable=False),
        sa.Column("password", sa.Text, nullable=False),
        sa.Column("first_name", sa.Text, nullable=True),
        sa.Column("last_name", sa.Text, nullable=True),
        sa.Column("email", sa.Text, nullable=True),
    )
    # Not unique: duplicated logins are resolved as "not found" by the service.
    op.create_index("ix_users_login", "users", ["login"])

    op.create_table(
        "user_permissions",
        sa.Column(
            "user_id",
            sa.BigInteger,
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("permission", sa.Text, primary_key=True, nullable=False),
    )


def downgrade() -> None:
    # Drop in reverse dependency order (leaves first, roots last).
    op.drop_table("user_permissions")
    op.drop_index("ix_users_login", table_name="users")
    op.drop_table("users")
    op.drop_table("sample_resources")
