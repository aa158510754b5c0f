"""DatabaseSessionManager: driver and ORM failures surface as DatabaseError."""

import pytest
from sqlalchemy import text

from app.core.errors import DatabaseError
from app.infrastructure.database import DatabaseSessionManager
from app.models.category import Category


@pytest.fixture
def manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


async def test_driver_error_is_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.http_status == 503
    assert exc_info.value.operation == "query"


async def test_constraint_violation_is_rolled_back(manager):
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            db.add(Category(name=None))
            await db.commit()

    async with manager.session() as db:
        rows = (await db.execute(text("SELECT COUNT(*) FROM categories"))).scalar()
    assert rows == 0


async def test_health_check(manager):
    assert await manager.health_check()
