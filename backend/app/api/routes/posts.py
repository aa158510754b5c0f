"""Posts Routes: index, show, new, create, edit, update. No destroy.

Invariants:
    - Ids are matched with the :int convertor, so /posts/abc is a 404, never a 400
    - /posts/new is registered before /posts/{id}
    - Successful writes answer 303 See Other pointing at GET /posts/{id}
    - Failed writes never redirect (RecordInvalidError -> 422 via global handler)

Design Decisions:
    - PATCH and PUT share one handler: both are partial updates over the allow-list
    - Form view-models (new/edit) carry the submit action and method
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.infrastructure.database import get_db
from app.schemas.post import PostCreate, PostUpdate, PostResponse, PostForm
from app.services.handle_posts import PostHandlers

router = APIRouter(prefix="/posts", tags=["posts"])


def get_post_handlers(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> PostHandlers:
    return PostHandlers(db, settings.title_case_policy)


def _redirect_to_post(request: Request, post_id: int) -> RedirectResponse:
    return RedirectResponse(
        str(request.app.url_path_for("show_post", post_id=post_id)),
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("", response_model=list[PostResponse], name="index_posts")
async def index_posts(handlers: PostHandlers = Depends(get_post_handlers)):
    """List all posts."""
    return [PostResponse.model_validate(p) for p in await handlers.index()]


@router.get("/new", response_model=PostForm, name="new_post")
async def new_post(
    request: Request, handlers: PostHandlers = Depends(get_post_handlers),
):
    """Blank post for the creation form."""
    return PostForm(
        post=PostResponse.model_validate(handlers.new()),
        action=str(request.app.url_path_for("create_post")),
        method="POST",
    )


@router.post("", name="create_post")
async def create_post(
    body: PostCreate,
    request: Request,
    handlers: PostHandlers = Depends(get_post_handlers),
):
    """Create a post and redirect to it."""
    post = await handlers.create(body)
    return _redirect_to_post(request, post.id)


@router.get("/{post_id:int}", response_model=PostResponse, name="show_post")
async def show_post(
    post_id: int, handlers: PostHandlers = Depends(get_post_handlers),
):
    """Get a single post."""
    return PostResponse.model_validate(await handlers.show(post_id))


@router.get("/{post_id:int}/edit", response_model=PostForm, name="edit_post")
async def edit_post(
    post_id: int,
    request: Request,
    handlers: PostHandlers = Depends(get_post_handlers),
):
    """Existing post for the edit form."""
    post = await handlers.edit(post_id)
    return PostForm(
        post=PostResponse.model_validate(post),
        action=str(request.app.url_path_for("update_post", post_id=post.id)),
        method="PATCH",
    )


@router.api_route("/{post_id:int}", methods=["PATCH", "PUT"], name="update_post")
async def update_post(
    post_id: int,
    body: PostUpdate,
    request: Request,
    handlers: PostHandlers = Depends(get_post_handlers),
):
    """Update permitted fields and redirect to the post."""
    post = await handlers.update(post_id, body)
    return _redirect_to_post(request, post.id)
