"""Route test fixtures: FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - Dependency overrides cleared after every test

Design Decisions:
    - httpx AsyncClient does not follow redirects by default, so tests
      assert the 303 and Location header directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings, get_settings
from app.core.domain_types import TitleCasePolicy
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models.author import Author
from app.models.category import Category
from app.models.post import Post
import app.infrastructure.database as db_module
from app.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def conventional_policy():
    """Switch the running app to CONVENTIONAL title casing."""
    app.dependency_overrides[get_settings] = lambda: Settings(
        title_case_policy=TitleCasePolicy.CONVENTIONAL,
    )
    yield
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
async def seed_post(test_db):
    post = Post(title="My Post", description="My post desc")
    test_db.add(post)
    await test_db.commit()
    await test_db.refresh(post)
    return post


@pytest.fixture
async def seed_author(test_db):
    author = Author(name="Joe Burgess", genre="Fiction", bio="I write novels.")
    test_db.add(author)
    await test_db.commit()
    await test_db.refresh(author)
    return author


@pytest.fixture
async def seed_category(test_db):
    category = Category(name="cats")
    test_db.add(category)
    await test_db.commit()
    await test_db.refresh(category)
    return category
