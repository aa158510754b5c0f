"""SQL Record Store: the RecordStore protocol over an AsyncSession, for any ORM model.

Invariants:
    - One store per (session, model) pair; the store never opens or closes sessions
    - save() commits and refreshes, so generated ids and defaults are readable afterwards
    - get() returns None for a missing id; get_or_raise() raises ResourceNotFoundError
    - Ids outside the key column range are missing without a query, so they never reach the driver
    - all() is ordered by primary key so collection responses are stable

Design Decisions:
    - Generic over the model type instead of one repository class per entity
      (ADR: every entity needs the same load/save/delete surface)
    - Entities are plain mapped classes with no persistence methods of their own
"""

import logging
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import MAX_RECORD_ID, RecordId
from app.core.errors import ResourceNotFoundError
from app.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class SqlRecordStore(Generic[ModelT]):
    """Load/save/delete for one mapped model class."""

    def __init__(self, db: AsyncSession, model: type[ModelT]):
        self.db = db
        self.model = model

    @property
    def resource_type(self) -> str:
        return self.model.__name__

    async def get(self, record_id: RecordId) -> ModelT | None:
        if not 0 < record_id <= MAX_RECORD_ID:
            return None
        return await self.db.get(self.model, record_id)

    async def get_or_raise(self, record_id: RecordId) -> ModelT:
        record = await self.get(record_id)
        if record is None:
            raise ResourceNotFoundError(self.resource_type, str(record_id))
        return record

    async def all(self) -> list[ModelT]:
        result = await self.db.execute(
            select(self.model).order_by(self.model.id),
        )
        return list(result.scalars().all())

    async def exists(self, record_id: RecordId) -> bool:
        return await self.get(record_id) is not None

    async def save(self, record: ModelT) -> ModelT:
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        logger.debug(
            f"Saved {self.resource_type} {record.id}",
            extra={"resource_type": self.resource_type, "resource_id": record.id},
        )
        return record

    async def delete(self, record: ModelT) -> None:
        record_id = record.id
        await self.db.delete(record)
        await self.db.commit()
        logger.debug(
            f"Deleted {self.resource_type} {record_id}",
            extra={"resource_type": self.resource_type, "resource_id": record_id},
        )
