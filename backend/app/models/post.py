"""Post ORM: a blog post, optionally written by an Author and filed under a Category.

Invariants:
    - title is stored in title case (enforced by core/enforce_post.py before save, not here)
    - author_id and category_id are nullable; a post may exist on its own
    - Posts are never deleted through the API

Design Decisions:
    - No ORM validators or before-save hooks: the write pipeline is called explicitly
      by services/handle_posts.py so the ordering is visible in one place
    - lazy="selectin" on both references: async sessions cannot lazy-load on attribute access
"""

from typing import Optional

from sqlalchemy import String, Text, Boolean, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.enforce_post import TITLE_MAX_LENGTH
from app.db.base import Base


class Post(Base):
    """Post entity."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False, default="")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("authors.id"), nullable=True,
    )
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True,
    )
    post_status: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )

    author: Mapped[Optional["Author"]] = relationship(
        "Author", back_populates="posts", lazy="selectin",
    )
    category: Mapped[Optional["Category"]] = relationship(
        "Category", back_populates="posts", lazy="selectin",
    )
