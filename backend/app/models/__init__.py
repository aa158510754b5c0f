"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Relations are reference-only (foreign keys); no entity owns another

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.author import Author  # noqa: F401
from app.models.category import Category  # noqa: F401
from app.models.post import Post  # noqa: F401
from app.models.account import Account  # noqa: F401
