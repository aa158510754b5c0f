"""Add category_id and post_status to posts.

Revision ID: 002_post_category_status
Revises: 001_initial
Create Date: 2026-10-19

Category.posts needs a real column behind it: category_id is a nullable FK with
ON DELETE SET NULL, so removing a category detaches its posts. post_status is a
boolean flag defaulting to false.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_post_category_status"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        "posts",
        sa.Column("category_id", sa.Integer, nullable=True),
    )
    op.create_foreign_key(
        "posts_category_id_fkey", "posts", "categories",
        ["category_id"], ["id"], ondelete="SET NULL",
    )
    op.add_column(
        "posts",
        sa.Column("post_status", sa.Boolean(), nullable=False, server_default=sa.false()),
    )


def downgrade() -> None:
    op.drop_column("posts", "post_status")
    op.drop_constraint("posts_category_id_fkey", "posts", type_="foreignkey")
    op.drop_column("posts", "category_id")
