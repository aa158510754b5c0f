"""PostHandlers: write orchestration without the HTTP layer."""

import pytest

from app.core.domain_types import TitleCasePolicy
from app.core.errors import RecordInvalidError, ResourceNotFoundError
from app.schemas.post import PostCreate, PostUpdate
from app.services.handle_posts import PostHandlers


async def test_create_returns_saved_post(test_db):
    handlers = PostHandlers(test_db, TitleCasePolicy.EVERY_WORD)
    post = await handlers.create(PostCreate(title="my post", description="My post desc"))
    assert post.id is not None
    assert post.title == "My Post"


async def test_create_rejection_lists_every_field(test_db):
    handlers = PostHandlers(test_db, TitleCasePolicy.CONVENTIONAL)
    with pytest.raises(RecordInvalidError) as exc_info:
        await handlers.create(PostCreate(
            title="war and peace", author_id=1, category_id=2,
        ))
    assert exc_info.value.errors == {
        "title": ["Title must be in title case"],
        "author_id": ["Author must exist"],
        "category_id": ["Category must exist"],
    }
    assert await handlers.index() == []


async def test_update_rejection_does_not_dirty_session(test_db, seed_post):
    handlers = PostHandlers(test_db, TitleCasePolicy.CONVENTIONAL)
    with pytest.raises(RecordInvalidError):
        await handlers.update(seed_post.id, PostUpdate(title="war and peace"))

    assert not test_db.dirty
    assert (await handlers.show(seed_post.id)).title == "My Post"


async def test_update_clears_author(test_db, seed_author):
    handlers = PostHandlers(test_db, TitleCasePolicy.EVERY_WORD)
    post = await handlers.create(PostCreate(title="My Post", author_id=seed_author.id))

    updated = await handlers.update(post.id, PostUpdate.model_validate({"author_id": None}))
    assert updated.author_id is None


async def test_show_missing_raises_not_found(test_db):
    handlers = PostHandlers(test_db, TitleCasePolicy.EVERY_WORD)
    with pytest.raises(ResourceNotFoundError):
        await handlers.show(1)


async def test_new_is_blank_and_unsaved(test_db):
    post = PostHandlers(test_db, TitleCasePolicy.EVERY_WORD).new()
    assert post.id is None
    assert post.title == ""
    assert post.post_status is False
