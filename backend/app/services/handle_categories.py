"""Category Handlers: full CRUD for the categories resource.

Invariants:
    - Categories carry no validation rule beyond the DTO's required fields
    - destroy detaches posts (category_id -> NULL) instead of deleting them
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import RecordId
from app.core.repository_protocols import RecordStore
from app.infrastructure.record_store import SqlRecordStore
from app.models.category import Category
from app.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


class CategoryHandlers:
    """index / show / new / create / edit / update / destroy for categories."""

    def __init__(self, db: AsyncSession):
        self.categories: RecordStore[Category] = SqlRecordStore(db, Category)

    async def index(self) -> list[Category]:
        return await self.categories.all()

    async def show(self, category_id: RecordId) -> Category:
        return await self.categories.get_or_raise(category_id)

    def new(self) -> Category:
        return Category(name="")

    async def create(self, body: CategoryCreate) -> Category:
        category = await self.categories.save(Category(**body.permitted_fields()))
        logger.info(
            f"Category {category.id} created",
            extra={"resource_type": "Category", "resource_id": category.id},
        )
        return category

    async def edit(self, category_id: RecordId) -> Category:
        return await self.categories.get_or_raise(category_id)

    async def update(self, category_id: RecordId, body: CategoryUpdate) -> Category:
        category = await self.categories.get_or_raise(category_id)
        for name, value in body.permitted_fields().items():
            setattr(category, name, value)
        category = await self.categories.save(category)
        logger.info(
            f"Category {category.id} updated",
            extra={"resource_type": "Category", "resource_id": category.id},
        )
        return category

    async def destroy(self, category_id: RecordId) -> None:
        category = await self.categories.get_or_raise(category_id)
        await self.categories.delete(category)
        logger.info(
            f"Category {category_id} deleted",
            extra={"resource_type": "Category", "resource_id": category_id},
        )
