"""Post Handlers: controller actions for the posts resource (no destroy).

Invariants:
    - Write path order: load-or-construct -> normalize -> validate -> persist-or-reject
    - Only fields returned by the DTO's permitted_fields() reach the ORM object
    - On rejection the ORM object is never mutated, so nothing dirty is left in the session
    - author_id / category_id must reference existing rows when supplied

Design Decisions:
    - Pure rule (core/enforce_post.py) called explicitly here, not from ORM events
    - Rejections raise RecordInvalidError; the global handler turns it into a 422
      carrying the unsaved record, so routes only deal with the success path
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import RecordId, TitleCasePolicy
from app.core.enforce_post import ValidationOutcome, run_post_pipeline
from app.core.errors import RecordInvalidError
from app.core.repository_protocols import RecordStore
from app.infrastructure.record_store import SqlRecordStore
from app.models.author import Author
from app.models.category import Category
from app.models.post import Post
from app.schemas.post import PostCreate, PostUpdate, PostResponse

logger = logging.getLogger(__name__)


class PostHandlers:
    """index / show / new / create / edit / update for posts."""

    def __init__(self, db: AsyncSession, policy: TitleCasePolicy):
        self.policy = policy
        self.posts: RecordStore[Post] = SqlRecordStore(db, Post)
        self.authors: RecordStore[Author] = SqlRecordStore(db, Author)
        self.categories: RecordStore[Category] = SqlRecordStore(db, Category)

    async def index(self) -> list[Post]:
        return await self.posts.all()

    async def show(self, post_id: RecordId) -> Post:
        return await self.posts.get_or_raise(post_id)

    def new(self) -> Post:
        """Blank, unsaved post for the creation form."""
        return Post(title="", description=None, post_status=False)

    async def create(self, body: PostCreate) -> Post:
        outcome = run_post_pipeline(body.permitted_fields(), self.policy)
        await self._check_references(outcome)
        if not outcome.is_valid:
            self._reject(outcome.fields, outcome)

        post = await self.posts.save(Post(**outcome.fields))
        logger.info(
            f"Post {post.id} created",
            extra={"resource_type": "Post", "resource_id": post.id},
        )
        return post

    async def edit(self, post_id: RecordId) -> Post:
        return await self.posts.get_or_raise(post_id)

    async def update(self, post_id: RecordId, body: PostUpdate) -> Post:
        post = await self.posts.get_or_raise(post_id)
        outcome = run_post_pipeline(body.permitted_fields(), self.policy)
        await self._check_references(outcome)
        if not outcome.is_valid:
            current = PostResponse.model_validate(post).model_dump()
            self._reject({**current, **outcome.fields}, outcome)

        for name, value in outcome.fields.items():
            setattr(post, name, value)
        post = await self.posts.save(post)
        logger.info(
            f"Post {post.id} updated ({', '.join(sorted(outcome.fields))})",
            extra={"resource_type": "Post", "resource_id": post.id},
        )
        return post

    async def _check_references(self, outcome: ValidationOutcome) -> None:
        author_id = outcome.fields.get("author_id")
        if author_id is not None and not await self.authors.exists(author_id):
            outcome.errors.setdefault("author_id", []).append("Author must exist")
        category_id = outcome.fields.get("category_id")
        if category_id is not None and not await self.categories.exists(category_id):
            outcome.errors.setdefault("category_id", []).append("Category must exist")

    def _reject(self, candidate: dict[str, Any], outcome: ValidationOutcome) -> None:
        record = PostResponse.model_validate(candidate).model_dump()
        logger.warning(
            f"Post rejected: {outcome.errors}",
            extra={"resource_type": "Post", "resource_id": record["id"]},
        )
        raise RecordInvalidError("post", record, outcome.errors)
