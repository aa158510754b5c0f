"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - One generic store instead of one protocol per entity: every entity needs
      the same five operations and nothing more
    - get() returns None for a missing row; get_or_raise() is the 404 path
"""

from typing import Protocol, TypeVar

from app.core.domain_types import RecordId


RecordT = TypeVar("RecordT")


class RecordStore(Protocol[RecordT]):
    """Contract for entity persistence, implemented by shell."""
    async def get(self, record_id: RecordId) -> RecordT | None: ...
    async def get_or_raise(self, record_id: RecordId) -> RecordT: ...
    async def exists(self, record_id: RecordId) -> bool: ...
    async def all(self) -> list[RecordT]: ...
    async def save(self, record: RecordT) -> RecordT: ...
    async def delete(self, record: RecordT) -> None: ...
