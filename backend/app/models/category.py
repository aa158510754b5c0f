"""Category ORM: groups posts. One Category has many Posts.

Invariants:
    - posts is always a list (empty when nothing references the category)
    - Deleting a category detaches its posts (category_id set to NULL), never deletes them
"""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Category(Base):
    """Category entity."""
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    posts: Mapped[list["Post"]] = relationship(
        "Post", back_populates="category", lazy="selectin",
        order_by="Post.id",
    )
