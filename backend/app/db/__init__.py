"""Database Infrastructure: SQLAlchemy declarative Base shared by all models.

Invariants:
    - Engine and sessions live in infrastructure/database.py, not here
    - Importing this package has no side effects
"""
