"""Infrastructure Layer: database access, persistence and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures surface as core.errors.DatabaseError
"""
